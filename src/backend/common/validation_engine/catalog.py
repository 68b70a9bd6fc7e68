from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import BaseModel, Field

from ..structured_logging import configure_logging
from .config import RegistrationSchemaConfig, get_preset, load_schema_config
from .registration import build_registration_schema
from .registry import FieldSpec, Schema
from .rules import ExactLength, MaxLength


class FieldCatalogEntry(BaseModel):
    key: str
    label: str = ""
    kind: str
    optional: bool = False
    choices: List[str] = Field(default_factory=list)
    # Input maxLength the renderer should apply; None when unbounded.
    max_length: Optional[int] = None
    rules: List[Dict[str, Any]] = Field(default_factory=list)


def build_catalog(schema: Schema) -> List[FieldCatalogEntry]:
    """Describe every field the renderer is allowed to display, in schema order."""
    return [_entry(spec) for spec in schema]


def _entry(spec: FieldSpec) -> FieldCatalogEntry:
    choices: List[str] = []
    if spec.choices is not None:
        choices = [str(member.value) for member in spec.choices]
    return FieldCatalogEntry(
        key=spec.key,
        label=spec.label,
        kind=spec.kind.value,
        optional=spec.optional,
        choices=choices,
        max_length=_max_length(spec),
        rules=[r.describe() for r in spec.rules] + [r.describe() for r in spec.refinements],
    )


def _max_length(spec: FieldSpec) -> Optional[int]:
    bounds = [r.length for r in spec.rules if isinstance(r, (ExactLength, MaxLength))]
    return min(bounds) if bounds else None


def _dump_json(catalog: list[dict[str, Any]]) -> str:
    return json.dumps(catalog, indent=2, ensure_ascii=False)


def _dump_yaml(catalog: list[dict[str, Any]]) -> str:
    return yaml.safe_dump(catalog, sort_keys=False, allow_unicode=True)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Print the registration form field catalog.")
    parser.add_argument(
        "--format",
        choices=("yaml", "json"),
        default="yaml",
        help="Output format (default: yaml).",
    )
    parser.add_argument("--preset", default=None, help="Schema preset name (default, legacy).")
    parser.add_argument("--config", default=None, help="Path to a schema config JSON file.")
    args = parser.parse_args(argv)
    configure_logging()

    config: RegistrationSchemaConfig
    if args.config:
        config = load_schema_config(Path(args.config))
    else:
        config = get_preset(args.preset or "default")

    catalog = [e.model_dump() for e in build_catalog(build_registration_schema(config))]
    if args.format == "json":
        print(_dump_json(catalog))
    else:
        print(_dump_yaml(catalog))


if __name__ == "__main__":
    main()
