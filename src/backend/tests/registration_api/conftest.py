import os
import sys


BACKEND_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "../.."))
if BACKEND_DIR not in sys.path:
    sys.path.insert(0, BACKEND_DIR)

from datetime import date

import pytest
from fastapi.testclient import TestClient

from api.main import create_app
from common.validation_engine.evaluator import RuleEvaluator
from pipelines.registration_submission import CollectingSubmissionHandler


@pytest.fixture
def handler() -> CollectingSubmissionHandler:
    return CollectingSubmissionHandler()


@pytest.fixture
def client(handler) -> TestClient:
    app = create_app(
        handler=handler,
        evaluator=RuleEvaluator(clock=lambda: date(2025, 6, 15)),
        setup_logging=False,
    )
    return TestClient(app)


@pytest.fixture
def candidate() -> dict:
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
