from __future__ import annotations

from typing import Any, Dict, Iterable, Optional, Tuple

from ..rule import FieldRule


class OneOf(FieldRule):
    rule_id = "choice.one_of"
    default_message = "Opção inválida"

    def __init__(self, options: Iterable[str], message: Optional[str] = None):
        self.options: Tuple[str, ...] = tuple(options)
        if not self.options:
            raise ValueError("OneOf requires at least one option")
        super().__init__(message)

    def check(self, value: str) -> bool:
        return value in self.options

    def describe(self) -> Dict[str, Any]:
        return {"rule_id": self.rule_id, "options": list(self.options)}
