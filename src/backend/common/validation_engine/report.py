from __future__ import annotations

from typing import Dict

from .models import Invalid, ValidationResult


def to_report(result: ValidationResult) -> Dict[str, str]:
    """Field key -> the single message to show next to that field; empty when the record is valid."""
    if isinstance(result, Invalid):
        return {key: err.message for key, err in result.errors.items()}
    return {}
