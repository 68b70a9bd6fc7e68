from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Iterable, Mapping, Optional, Tuple

from .context import EvaluationContext


class FieldRule(ABC):
    """A single pass/fail constraint on one field's raw text value."""

    rule_id: str
    default_message: str = "Valor inválido"

    def __init__(self, message: Optional[str] = None):
        if not getattr(self, "rule_id", None):
            raise ValueError("FieldRule must define rule_id")
        self.message = message or self.default_message

    @abstractmethod
    def check(self, value: str) -> bool:  # pragma: no cover
        raise NotImplementedError

    def describe(self) -> Dict[str, Any]:
        return {"rule_id": self.rule_id}

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.describe()!r})"


class FieldRefinement(ABC):
    """Runs on the coerced value once every base rule of its field passed."""

    rule_id: str
    default_message: str = "Valor inválido"

    def __init__(self, message: Optional[str] = None):
        if not getattr(self, "rule_id", None):
            raise ValueError("FieldRefinement must define rule_id")
        self.message = message or self.default_message

    @abstractmethod
    def check(self, value: Any, ctx: EvaluationContext) -> bool:  # pragma: no cover
        raise NotImplementedError

    def describe(self) -> Dict[str, Any]:
        return {"rule_id": self.rule_id}


class RecordRefinement(ABC):
    """A whole-record check reported against ``key``.

    Skipped unless ``key`` and every field in ``depends_on`` passed and carries a value.
    """

    rule_id: str
    default_message: str = "Valor inválido"

    def __init__(self, key: str, *, depends_on: Iterable[str] = (), message: Optional[str] = None):
        if not getattr(self, "rule_id", None):
            raise ValueError("RecordRefinement must define rule_id")
        self.key = key
        deps = [key]
        deps.extend(k for k in depends_on if k != key)
        self.depends_on: Tuple[str, ...] = tuple(deps)
        self.message = message or self.default_message

    @abstractmethod
    def check(self, values: Mapping[str, Any], ctx: EvaluationContext) -> bool:  # pragma: no cover
        raise NotImplementedError

    def describe(self) -> Dict[str, Any]:
        return {"rule_id": self.rule_id, "key": self.key, "depends_on": list(self.depends_on)}


class PredicateRefinement(RecordRefinement):
    rule_id = "record.predicate"

    def __init__(
        self,
        key: str,
        predicate: Callable[[Mapping[str, Any], EvaluationContext], bool],
        *,
        depends_on: Iterable[str] = (),
        message: Optional[str] = None,
        rule_id: Optional[str] = None,
    ):
        if rule_id:
            self.rule_id = rule_id
        super().__init__(key, depends_on=depends_on, message=message)
        self._predicate = predicate

    def check(self, values: Mapping[str, Any], ctx: EvaluationContext) -> bool:
        return bool(self._predicate(values, ctx))
