from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field


class FieldKind(str, Enum):
    TEXT = "text"
    DATE = "date"
    CHOICE = "choice"


class AccountType(str, Enum):
    CHECKING = "corrente"
    SAVINGS = "poupança"


class FieldValidationError(BaseModel):
    """One offending field and the message shown next to its input.

    This is a value, not an exception: the evaluator aggregates these instead of raising.
    """

    key: str
    message: str
    rule_id: str = ""


class TypedRecord(BaseModel):
    values: Dict[str, Any] = Field(default_factory=dict)

    def __getitem__(self, key: str) -> Any:
        return self.values[key]

    def __contains__(self, key: object) -> bool:
        return key in self.values

    def keys(self) -> List[str]:
        return list(self.values.keys())

    def get(self, key: str, default: Any = None) -> Any:
        return self.values.get(key, default)


class Valid(BaseModel):
    status: Literal["valid"] = "valid"
    record: TypedRecord

    @property
    def is_valid(self) -> bool:
        return True


class Invalid(BaseModel):
    status: Literal["invalid"] = "invalid"
    # Insertion order follows schema order; consumers should still look up by key.
    errors: Dict[str, FieldValidationError] = Field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return False

    def message_for(self, key: str) -> Optional[str]:
        err = self.errors.get(key)
        return err.message if err else None


ValidationResult = Union[Valid, Invalid]
