from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, Optional, Sequence, Tuple, Type

import structlog

from .models import FieldKind
from .rule import FieldRefinement, FieldRule, RecordRefinement

logger = structlog.get_logger(__name__)


class SchemaError(ValueError):
    """Raised while defining a schema; a defective schema must stop startup."""


@dataclass(frozen=True)
class FieldSpec:
    key: str
    kind: FieldKind = FieldKind.TEXT
    rules: Tuple[FieldRule, ...] = ()
    optional: bool = False
    refinements: Tuple[FieldRefinement, ...] = ()
    choices: Optional[Type[Enum]] = None
    label: str = ""
    # Shown when the raw value is not text (or a date, for date fields).
    type_message: str = "Valor inválido"

    def __post_init__(self):
        # Accept lists from callers but store tuples.
        object.__setattr__(self, "rules", tuple(self.rules))
        object.__setattr__(self, "refinements", tuple(self.refinements))

    def rule_ids(self) -> list[str]:
        return [r.rule_id for r in self.rules] + [r.rule_id for r in self.refinements]


@dataclass(frozen=True)
class Schema:
    fields: Tuple[FieldSpec, ...]
    refinements: Tuple[RecordRefinement, ...] = ()
    _by_key: Mapping[str, FieldSpec] = field(default_factory=dict, repr=False, compare=False)

    def __iter__(self) -> Iterator[FieldSpec]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    def __contains__(self, key: object) -> bool:
        return key in self._by_key

    def get(self, key: str) -> FieldSpec:
        return self._by_key[key]

    def keys(self) -> list[str]:
        return [spec.key for spec in self.fields]


def define(fields: Sequence[FieldSpec], refinements: Iterable[RecordRefinement] = ()) -> Schema:
    """Build an immutable schema, rejecting definitions that can never validate correctly."""
    specs = tuple(fields)
    if not specs:
        raise SchemaError("Schema must declare at least one field")

    by_key: Dict[str, FieldSpec] = {}
    for spec in specs:
        if not spec.key:
            raise SchemaError("FieldSpec missing key")
        if spec.key in by_key:
            raise SchemaError(f"Duplicate field key declared: {spec.key}")
        if spec.kind == FieldKind.CHOICE and spec.choices is None:
            raise SchemaError(f"Choice field '{spec.key}' must declare its choices")
        by_key[spec.key] = spec

    record_refinements = tuple(refinements)
    for refinement in record_refinements:
        for key in refinement.depends_on:
            if key not in by_key:
                raise SchemaError(
                    f"Refinement '{refinement.rule_id}' references unknown field: {key}"
                )

    logger.debug(
        "validation_schema_defined",
        fields=[spec.key for spec in specs],
        record_refinements=[r.rule_id for r in record_refinements],
    )
    return Schema(fields=specs, refinements=record_refinements, _by_key=MappingProxyType(by_key))
