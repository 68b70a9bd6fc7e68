from __future__ import annotations

import re
from typing import Any, Dict, Optional, Union

from ..rule import FieldRule

# No leading dot, no "..", TLD of 2+ letters.
EMAIL_PATTERN = re.compile(
    r"(?!\.)(?!.*\.\.)[A-Z0-9_'+\-.]*[A-Z0-9_+\-]@(?:[A-Z0-9][A-Z0-9\-]*\.)+[A-Z]{2,}",
    re.IGNORECASE | re.ASCII,
)
# ASCII letters, the Latin-1 accented letters used in Portuguese addresses, and the plain space.
# Latin Extended-A letters such as "ł" or "ő" are rejected.
LETTERS_AND_SPACES_PATTERN = re.compile(r"[A-Za-zÀ-ÖØ-öø-ÿ ]+")
DIGITS_PATTERN = re.compile(r"[0-9]+")


class Required(FieldRule):
    rule_id = "text.required"
    default_message = "Campo obrigatório"

    def check(self, value: str) -> bool:
        return value != ""


class ExactLength(FieldRule):
    rule_id = "text.exact_length"

    def __init__(self, length: int, message: Optional[str] = None):
        if length < 0:
            raise ValueError("length must be >= 0")
        self.length = length
        super().__init__(message or f"Deve ter exatamente {length} caracteres")

    def check(self, value: str) -> bool:
        return len(value) == self.length

    def describe(self) -> Dict[str, Any]:
        return {"rule_id": self.rule_id, "length": self.length}


class MinLength(FieldRule):
    rule_id = "text.min_length"

    def __init__(self, length: int, message: Optional[str] = None):
        self.length = length
        super().__init__(message or f"Deve ter no mínimo {length} caracteres")

    def check(self, value: str) -> bool:
        return len(value) >= self.length

    def describe(self) -> Dict[str, Any]:
        return {"rule_id": self.rule_id, "length": self.length}


class MaxLength(FieldRule):
    rule_id = "text.max_length"

    def __init__(self, length: int, message: Optional[str] = None):
        self.length = length
        super().__init__(message or f"Deve ter no máximo {length} caracteres")

    def check(self, value: str) -> bool:
        return len(value) <= self.length

    def describe(self) -> Dict[str, Any]:
        return {"rule_id": self.rule_id, "length": self.length}


class Pattern(FieldRule):
    """Full-string regex match; a partial match anywhere in the value is a failure."""

    rule_id = "text.pattern"

    def __init__(
        self,
        pattern: Union[str, re.Pattern[str]],
        message: Optional[str] = None,
        *,
        rule_id: Optional[str] = None,
    ):
        if rule_id:
            self.rule_id = rule_id
        self.pattern = re.compile(pattern) if isinstance(pattern, str) else pattern
        super().__init__(message)

    def check(self, value: str) -> bool:
        return self.pattern.fullmatch(value) is not None

    def describe(self) -> Dict[str, Any]:
        return {"rule_id": self.rule_id, "pattern": self.pattern.pattern}


class DigitsOnly(Pattern):
    rule_id = "text.digits_only"
    default_message = "Deve conter apenas dígitos"

    def __init__(self, message: Optional[str] = None):
        super().__init__(DIGITS_PATTERN, message)


class Email(Pattern):
    rule_id = "text.email"
    default_message = "Email inválido"

    def __init__(self, message: Optional[str] = None):
        super().__init__(EMAIL_PATTERN, message)


class LettersAndSpaces(Pattern):
    rule_id = "text.letters_and_spaces"
    default_message = "Deve conter apenas letras e espaços"

    def __init__(self, message: Optional[str] = None):
        super().__init__(LETTERS_AND_SPACES_PATTERN, message)
