from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from types import MappingProxyType
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class EvaluationContext:
    today: date
    candidate: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))

    def raw(self, key: str) -> Any:
        return self.candidate.get(key)

    def is_absent(self, key: str) -> bool:
        return is_absent(self.candidate.get(key))


def is_absent(value: Optional[Any]) -> bool:
    return value is None or (isinstance(value, str) and value == "")


def freeze_candidate(candidate: Mapping[str, Any]) -> Mapping[str, Any]:
    # Shallow copy; the renderer keeps ownership of the mapping it passed in.
    return MappingProxyType(dict(candidate))
