import os
import sys


# Ensure `src/backend` is on sys.path so imports like `import common...` work.
BACKEND_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "../.."))
if BACKEND_DIR not in sys.path:
    sys.path.insert(0, BACKEND_DIR)

from datetime import date

import pytest

from common.validation_engine.config import RegistrationSchemaConfig
from common.validation_engine.registration import build_registration_schema
from common.validation_engine.registry import Schema


@pytest.fixture
def today() -> date:
    return date(2025, 6, 15)


@pytest.fixture
def registration_schema() -> Schema:
    return build_registration_schema()


@pytest.fixture
def make_schema():
    def _make(**options) -> Schema:
        return build_registration_schema(RegistrationSchemaConfig(**options))

    return _make


@pytest.fixture
def valid_candidate() -> dict:
    return {
        "name": "Ana Silva",
        "cpf": "12345678901",
        "rg": "123456789",
        "birth_date": "1990-05-10",
        "phone": "11987654321",
        "email": "ana@x.com",
        "address": "Rua das Flores",
        "bank_name": "Nubank",
        "branch_code": "0001",
        "account_number": "12345",
        "account_check_digit": "6",
        "account_type": "corrente",
    }


@pytest.fixture
def make_candidate(valid_candidate):
    def _make(**overrides) -> dict:
        candidate = dict(valid_candidate)
        for key, value in overrides.items():
            if value is _MISSING:
                candidate.pop(key, None)
            else:
                candidate[key] = value
        return candidate

    return _make


_MISSING = object()


@pytest.fixture
def missing():
    return _MISSING
