"""Checks API — lint a pasted document, list available rules."""

from fastapi import APIRouter, HTTPException

import structlog

from xlf_checker.config import get_settings
from xlf_checker.extraction import extract
from xlf_checker.models.requests import CheckRequest
from xlf_checker.models.responses import CheckResponse, ErrorResponse, RuleDescription
from xlf_checker.rules import rule_engine

logger = structlog.get_logger()

router = APIRouter()


@router.post(
    "/checks",
    response_model=CheckResponse,
    responses={422: {"model": ErrorResponse}},
)
def run_checks(request: CheckRequest):
    """Extract the document's units and run every rule.

    A document that is not well-formed yields a 422 with the parser message;
    no rule runs in that case.
    """
    max_chars = get_settings().MAX_DOCUMENT_CHARS
    if len(request.document) > max_chars:
        raise HTTPException(
            status_code=413,
            detail=f"Document exceeds {max_chars} characters",
        )

    units = extract(request.document)
    report = rule_engine.run(units)

    logger.info(
        "document_checked",
        unit_count=len(units),
        passed=report.passed,
        failed_rules=[rule.value for rule in report.failed_rules()],
    )

    return CheckResponse(
        passed=report.passed,
        unit_count=len(units),
        report={rule: sorted(ids) for rule, ids in report.as_mapping().items()},
        results=report.results(rule_engine.labels()),
    )


@router.get("/rules", response_model=list[RuleDescription])
def list_rules():
    """Rules of the default battery, in report order."""
    return [
        RuleDescription(rule=name, label=label)
        for name, label in rule_engine.describe()
    ]
