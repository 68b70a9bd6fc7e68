from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional, Sequence

import structlog

from .context import EvaluationContext, freeze_candidate, is_absent
from .models import (
    FieldKind,
    FieldValidationError,
    Invalid,
    TypedRecord,
    Valid,
    ValidationResult,
)
from .registry import FieldSpec, Schema
from .rule import FieldRule

logger = structlog.get_logger(__name__)

COERCION_RULE_ID = "kind.coerce"
TYPE_RULE_ID = "kind.type"


class RuleEvaluator:
    """Runs a schema against candidate records.

    Holds no per-call state: the same instance can serve any number of concurrent submissions.
    ``clock`` supplies "today" for date refinements and is read once per ``evaluate`` call.
    """

    def __init__(self, clock: Optional[Callable[[], date]] = None):
        self._clock = clock or date.today

    def evaluate(
        self,
        schema: Schema,
        candidate: Mapping[str, Any],
        *,
        today: Optional[date] = None,
    ) -> ValidationResult:
        ctx = EvaluationContext(
            today=today if today is not None else self._clock(),
            candidate=freeze_candidate(candidate),
        )
        errors: Dict[str, FieldValidationError] = {}

        texts: Dict[str, Optional[str]] = {}
        for spec in schema:
            raw = ctx.raw(spec.key)
            if spec.optional and is_absent(raw):
                texts[spec.key] = None
                continue
            text = _as_text(spec, raw)
            if text is None:
                errors[spec.key] = FieldValidationError(
                    key=spec.key, message=spec.type_message, rule_id=TYPE_RULE_ID
                )
                continue
            failed = _first_failure(spec.rules, text)
            if failed is not None:
                errors[spec.key] = FieldValidationError(
                    key=spec.key, message=failed.message, rule_id=failed.rule_id
                )
                continue
            texts[spec.key] = text

        typed: Dict[str, Any] = {}
        for key, text in texts.items():
            spec = schema.get(key)
            if text is None:
                typed[key] = None
                continue
            try:
                typed[key] = _coerce(spec, text)
            except ValueError:
                errors[key] = FieldValidationError(
                    key=key, message=spec.type_message, rule_id=COERCION_RULE_ID
                )

        for spec in schema:
            value = typed.get(spec.key)
            if spec.key in errors or value is None:
                continue
            for refinement in spec.refinements:
                if not refinement.check(value, ctx):
                    errors[spec.key] = FieldValidationError(
                        key=spec.key, message=refinement.message, rule_id=refinement.rule_id
                    )
                    break

        for refinement in schema.refinements:
            if any(key in errors or typed.get(key) is None for key in refinement.depends_on):
                continue
            if not refinement.check(MappingProxyType(typed), ctx):
                errors[refinement.key] = FieldValidationError(
                    key=refinement.key, message=refinement.message, rule_id=refinement.rule_id
                )

        if errors:
            ordered = {key: errors[key] for key in schema.keys() if key in errors}
            logger.info("candidate_rejected", invalid_fields=list(ordered))
            return Invalid(errors=ordered)

        logger.info("candidate_accepted", fields=len(typed))
        return Valid(record=TypedRecord(values={key: typed[key] for key in schema.keys()}))


def evaluate(
    schema: Schema,
    candidate: Mapping[str, Any],
    *,
    today: Optional[date] = None,
) -> ValidationResult:
    return RuleEvaluator().evaluate(schema, candidate, today=today)


def _as_text(spec: FieldSpec, raw: Any) -> Optional[str]:
    if raw is None:
        return ""
    if isinstance(raw, Enum) and isinstance(raw.value, str):
        return raw.value
    if isinstance(raw, str):
        return raw
    if spec.kind == FieldKind.DATE and isinstance(raw, date) and not isinstance(raw, datetime):
        return raw.isoformat()
    return None


def _first_failure(rules: Sequence[FieldRule], text: str) -> Optional[FieldRule]:
    for rule in rules:
        if not rule.check(text):
            return rule
    return None


def _coerce(spec: FieldSpec, text: str) -> Any:
    if spec.kind == FieldKind.DATE:
        return date.fromisoformat(text)
    if spec.kind == FieldKind.CHOICE and spec.choices is not None:
        return spec.choices(text)
    return text
