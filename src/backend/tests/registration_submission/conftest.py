import os
import sys


# Ensure `src/backend` is on sys.path so imports like `import pipelines...` work when running this folder alone.
BACKEND_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "../.."))
if BACKEND_DIR not in sys.path:
    sys.path.insert(0, BACKEND_DIR)

from datetime import date

import pytest

from common.validation_engine.registration import build_registration_schema
from pipelines.registration_submission import CollectingSubmissionHandler, RegistrationForm


@pytest.fixture
def today() -> date:
    return date(2025, 6, 15)


@pytest.fixture
def handler() -> CollectingSubmissionHandler:
    return CollectingSubmissionHandler()


@pytest.fixture
def form(handler) -> RegistrationForm:
    return RegistrationForm(build_registration_schema(), handler)


@pytest.fixture
def filled_values() -> dict:
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
