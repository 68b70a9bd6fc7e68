from __future__ import annotations

from typing import Optional

from fastapi import FastAPI

from api.registration import router as registration_router
from common.structured_logging import configure_logging
from common.validation_engine.config import RegistrationSchemaConfig, get_schema_config
from common.validation_engine.evaluator import RuleEvaluator
from common.validation_engine.registration import build_registration_schema
from common.validation_engine.registry import Schema
from pipelines.registration_submission import LoggingSubmissionHandler, SubmissionHandler


def create_app(
    *,
    schema: Optional[Schema] = None,
    config: Optional[RegistrationSchemaConfig] = None,
    handler: Optional[SubmissionHandler] = None,
    evaluator: Optional[RuleEvaluator] = None,
    setup_logging: bool = True,
) -> FastAPI:
    """Build the app; the schema is defined here, once, so a SchemaError stops startup."""
    if setup_logging:
        configure_logging()
    if schema is None:
        schema = build_registration_schema(config or get_schema_config())

    app = FastAPI(title="Client registration")
    app.state.registration_schema = schema
    app.state.submission_handler = handler or LoggingSubmissionHandler()
    app.state.rule_evaluator = evaluator or RuleEvaluator()
    app.include_router(registration_router)
    return app
