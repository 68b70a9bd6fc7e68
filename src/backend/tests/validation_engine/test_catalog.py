import json

import yaml

from common.validation_engine.catalog import build_catalog, main


def test_catalog_describes_fields_in_order(registration_schema):
    catalog = build_catalog(registration_schema)
    assert [e.key for e in catalog] == registration_schema.keys()

    by_key = {e.key: e for e in catalog}
    assert by_key["cpf"].max_length == 11
    assert by_key["rg"].max_length == 9
    assert by_key["address"].max_length == 50
    assert by_key["name"].max_length is None
    assert by_key["complement"].optional is True
    assert by_key["account_type"].kind == "choice"
    assert by_key["account_type"].choices == ["corrente", "poupança"]
    assert by_key["birth_date"].rules[-1]["rule_id"] == "date.year_after_until_today"


def test_catalog_cli_json(capsys):
    main(["--format", "json", "--preset", "legacy"])
    catalog = json.loads(capsys.readouterr().out)
    keys = [e["key"] for e in catalog]
    assert "complement" not in keys
    assert next(e for e in catalog if e["key"] == "account_number")["max_length"] == 8


def test_catalog_cli_defaults_to_yaml(capsys):
    main([])
    catalog = yaml.safe_load(capsys.readouterr().out)
    assert [e["key"] for e in catalog][:3] == ["name", "cpf", "rg"]
    account_type = next(e for e in catalog if e["key"] == "account_type")
    assert account_type["choices"] == ["corrente", "poupança"]
