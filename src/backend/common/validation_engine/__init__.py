"""Declarative validation engine for the client registration form.

This package intentionally contains only domain logic:
- Inputs are raw candidate records (field key -> submitted text) plus a schema.
- No rendering, persistence, or network calls live here.
"""

from .config import RegistrationSchemaConfig, get_schema_config, load_schema_config
from .evaluator import RuleEvaluator, evaluate
from .models import (
    AccountType,
    FieldKind,
    FieldValidationError,
    Invalid,
    TypedRecord,
    Valid,
    ValidationResult,
)
from .registration import build_registration_schema
from .registry import FieldSpec, Schema, SchemaError, define
from .report import to_report
