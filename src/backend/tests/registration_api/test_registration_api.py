import pytest
from fastapi.testclient import TestClient

from api.main import create_app
from common.validation_engine.config import get_preset
from common.validation_engine.registry import FieldSpec, SchemaError, define


def test_schema_endpoint_lists_fields(client):
    resp = client.get("/registration/schema")
    assert resp.status_code == 200
    fields = {f["key"]: f for f in resp.json()}
    assert fields["cpf"]["max_length"] == 11
    assert fields["account_type"]["choices"] == ["corrente", "poupança"]


def test_validate_endpoint_valid(client, candidate):
    resp = client.post("/registration/validate", json=candidate)
    assert resp.status_code == 200
    assert resp.json() == {"valid": True, "errors": {}}


def test_validate_endpoint_reports_errors(client, candidate):
    resp = client.post("/registration/validate", json={**candidate, "email": "not-an-email"})
    assert resp.status_code == 200
    assert resp.json() == {"valid": False, "errors": {"email": "Email inválido"}}


def test_submit_valid_candidate(client, handler, candidate):
    resp = client.post("/registration", json=candidate)
    assert resp.status_code == 201
    body = resp.json()
    assert body["status"] == "accepted"
    assert body["record"]["birth_date"] == "1990-05-10"
    assert body["record"]["complement"] is None
    assert len(handler.records) == 1


def test_submit_invalid_candidate(client, handler, candidate):
    resp = client.post("/registration", json={**candidate, "birth_date": "1900-01-01", "account_type": "x"})
    assert resp.status_code == 422
    errors = resp.json()["errors"]
    assert set(errors) == {"birth_date", "account_type"}
    assert handler.records == []


def test_create_app_with_preset_config(handler, candidate):
    client = TestClient(create_app(config=get_preset("legacy"), handler=handler, setup_logging=False))
    keys = [f["key"] for f in client.get("/registration/schema").json()]
    assert "complement" not in keys
    assert "account_check_digit" not in keys


def test_defective_schema_stops_startup(monkeypatch):
    monkeypatch.setattr(
        "api.main.build_registration_schema",
        lambda config: define([FieldSpec("a"), FieldSpec("a")]),
    )
    with pytest.raises(SchemaError):
        create_app(setup_logging=False)
