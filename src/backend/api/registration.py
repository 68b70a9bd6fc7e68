from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Body, Request
from fastapi.responses import JSONResponse

from common.validation_engine.catalog import build_catalog
from common.validation_engine.evaluator import RuleEvaluator
from common.validation_engine.models import Valid
from common.validation_engine.registry import Schema
from common.validation_engine.report import to_report
from pipelines.registration_submission import SubmissionHandler


router = APIRouter(prefix="/registration", tags=["registration"])


def _schema(request: Request) -> Schema:
    return request.app.state.registration_schema


def _handler(request: Request) -> SubmissionHandler:
    return request.app.state.submission_handler


def _evaluator(request: Request) -> RuleEvaluator:
    return request.app.state.rule_evaluator


@router.get("/schema")
def registration_schema(request: Request):
    return [entry.model_dump() for entry in build_catalog(_schema(request))]


@router.post("/validate")
def registration_validate(request: Request, candidate: Dict[str, Any] = Body(...)):
    result = _evaluator(request).evaluate(_schema(request), candidate)
    return {"valid": isinstance(result, Valid), "errors": to_report(result)}


@router.post("", status_code=201)
def registration_submit(request: Request, candidate: Dict[str, Any] = Body(...)):
    result = _evaluator(request).evaluate(_schema(request), candidate)
    if not isinstance(result, Valid):
        return JSONResponse(status_code=422, content={"errors": to_report(result)})
    _handler(request).accept(result.record)
    return {"status": "accepted", "record": result.record.model_dump(mode="json")["values"]}
