from __future__ import annotations

import argparse
import json
import sys
from datetime import date
from pathlib import Path


def _ensure_backend_on_path() -> None:
    backend_dir = Path(__file__).resolve().parents[1]
    if str(backend_dir) not in sys.path:
        sys.path.insert(0, str(backend_dir))


def _load_candidate(path: str):
    if path == "-":
        return json.load(sys.stdin)
    with Path(path).open(encoding="utf-8") as handle:
        return json.load(handle)


def run_validation(candidate: dict, *, config_path: Path | None = None, preset: str | None = None, today: date | None = None):
    _ensure_backend_on_path()
    from common.validation_engine.config import get_preset, get_schema_config, load_schema_config
    from common.validation_engine.evaluator import evaluate
    from common.validation_engine.registration import build_registration_schema

    if config_path is not None:
        config = load_schema_config(config_path)
    elif preset:
        config = get_preset(preset)
    else:
        config = get_schema_config()
    schema = build_registration_schema(config)
    return evaluate(schema, candidate, today=today)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Validate a registration candidate (JSON object) and print the per-field error report."
    )
    parser.add_argument("candidate", help="Path to the candidate JSON file, or '-' for stdin.")
    parser.add_argument("--config", default=None, help="Path to a schema config JSON file.")
    parser.add_argument("--preset", default=None, help="Schema preset name (default, legacy).")
    parser.add_argument(
        "--today",
        default=None,
        help="Override today's date (YYYY-MM-DD) for the birth date range check.",
    )
    args = parser.parse_args(argv)

    _ensure_backend_on_path()
    from common.structured_logging import configure_logging
    from common.validation_engine.models import Valid
    from common.validation_engine.report import to_report

    configure_logging()

    candidate = _load_candidate(args.candidate)
    if not isinstance(candidate, dict):
        raise SystemExit("Candidate must be a JSON object keyed by field name.")
    today = date.fromisoformat(args.today) if args.today else None

    result = run_validation(
        candidate,
        config_path=Path(args.config).resolve() if args.config else None,
        preset=args.preset,
        today=today,
    )
    output = {"valid": isinstance(result, Valid), "errors": to_report(result)}
    if isinstance(result, Valid):
        output["record"] = result.record.model_dump(mode="json")["values"]
    print(json.dumps(output, indent=2, ensure_ascii=False))
    return 0 if isinstance(result, Valid) else 1


if __name__ == "__main__":
    raise SystemExit(main())
