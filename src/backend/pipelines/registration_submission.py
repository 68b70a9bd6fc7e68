from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Any, Dict, List, Optional, Protocol

import structlog

from common.validation_engine.evaluator import RuleEvaluator
from common.validation_engine.models import TypedRecord, Valid, ValidationResult
from common.validation_engine.registry import Schema
from common.validation_engine.report import to_report

logger = structlog.get_logger(__name__)


class SubmissionHandler(Protocol):
    def accept(self, record: TypedRecord) -> None:
        ...


class LoggingSubmissionHandler:
    """Accepts a validated registration by logging it; field values stay out of the log."""

    def accept(self, record: TypedRecord) -> None:
        logger.info("registration_submitted", fields=record.keys())


@dataclass
class CollectingSubmissionHandler:
    records: List[TypedRecord] = field(default_factory=list)

    def accept(self, record: TypedRecord) -> None:
        self.records.append(record)


class RegistrationForm:
    """Form state as the renderer sees it: the candidate being typed and the last inline messages."""

    def __init__(
        self,
        schema: Schema,
        handler: SubmissionHandler,
        *,
        evaluator: Optional[RuleEvaluator] = None,
    ):
        self._schema = schema
        self._handler = handler
        self._evaluator = evaluator or RuleEvaluator()
        self._values: Dict[str, Any] = {}
        self._messages: Dict[str, str] = {}
        self.resets = 0

    @property
    def values(self) -> Dict[str, Any]:
        return dict(self._values)

    @property
    def messages(self) -> Dict[str, str]:
        return dict(self._messages)

    def set(self, key: str, value: Any) -> None:
        if key not in self._schema:
            raise KeyError(f"Unknown registration field: {key}")
        self._values[key] = value

    def update(self, values: Dict[str, Any]) -> None:
        for key, value in values.items():
            self.set(key, value)

    def submit(self, *, today: Optional[date] = None) -> ValidationResult:
        result = self._evaluator.evaluate(self._schema, self._values, today=today)
        self._messages = to_report(result)
        if isinstance(result, Valid):
            self._handler.accept(result.record)
            self.reset()
        return result

    def reset(self) -> None:
        self._values = {}
        self._messages = {}
        self.resets += 1
