import json

from scripts.validate_registration import main


def _write(tmp_path, name, payload):
    path = tmp_path / name
    path.write_text(json.dumps(payload, ensure_ascii=False), encoding="utf-8")
    return path


def test_cli_valid_candidate(tmp_path, capsys, valid_candidate):
    path = _write(tmp_path, "candidate.json", valid_candidate)
    code = main([str(path), "--today", "2025-06-15"])
    out = json.loads(capsys.readouterr().out)
    assert code == 0
    assert out["valid"] is True
    assert out["errors"] == {}
    assert out["record"]["account_type"] == "corrente"


def test_cli_invalid_candidate(tmp_path, capsys, make_candidate):
    path = _write(tmp_path, "candidate.json", make_candidate(email="not-an-email"))
    code = main([str(path), "--today", "2025-06-15"])
    out = json.loads(capsys.readouterr().out)
    assert code == 1
    assert out == {"valid": False, "errors": {"email": "Email inválido"}}


def test_cli_with_config_file(tmp_path, capsys, make_candidate, missing):
    config = _write(tmp_path, "schema.json", {"preset": "legacy"})
    candidate = make_candidate(
        account_check_digit=missing,
        account_number="12345678",
        phone="5511987654321",
    )
    path = _write(tmp_path, "candidate.json", candidate)
    code = main([str(path), "--config", str(config), "--today", "2025-06-15"])
    assert code == 0
    assert json.loads(capsys.readouterr().out)["valid"] is True
