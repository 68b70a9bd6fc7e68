from __future__ import annotations

import re
from datetime import date
from typing import Any, Dict, Optional

from ..context import EvaluationContext
from ..rule import FieldRefinement, FieldRule

ISO_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


class IsoDateFormat(FieldRule):
    rule_id = "date.format"
    default_message = "Data deve estar no formato AAAA-MM-DD"

    def check(self, value: str) -> bool:
        return ISO_DATE_PATTERN.fullmatch(value) is not None


class CalendarDate(FieldRule):
    """The text names a day that exists (rejects 2023-02-30, 2023-13-01)."""

    rule_id = "date.calendar"
    default_message = "Data inválida"

    def check(self, value: str) -> bool:
        try:
            date.fromisoformat(value)
        except ValueError:
            return False
        return True


class YearAfterUntilToday(FieldRefinement):
    """Parsed date must satisfy ``year > after_year`` and ``date <= today``.

    ``today`` comes from the evaluation context, so the outcome depends on when validation runs.
    """

    rule_id = "date.year_after_until_today"
    default_message = "Data fora do intervalo permitido"

    def __init__(self, after_year: int = 1900, message: Optional[str] = None):
        self.after_year = after_year
        super().__init__(message)

    def check(self, value: Any, ctx: EvaluationContext) -> bool:
        if not isinstance(value, date):
            return False
        return value.year > self.after_year and value <= ctx.today

    def describe(self) -> Dict[str, Any]:
        return {"rule_id": self.rule_id, "after_year": self.after_year}
