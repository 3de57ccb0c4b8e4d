"""API response models."""

from pydantic import BaseModel
from typing import Literal

from xlf_checker.rules.models import RuleName, RuleResult


class CheckResponse(BaseModel):
    """Lint outcome for one document."""

    passed: bool
    unit_count: int
    report: dict[str, list[str]]  # Report key → sorted violator ids
    results: list[RuleResult]


class RuleDescription(BaseModel):
    """A rule of the default battery."""

    rule: RuleName
    label: str

    model_config = {"use_enum_values": True}


class ErrorResponse(BaseModel):
    """Error body returned by the exception handlers."""

    error: str
    message: str


class HealthResponse(BaseModel):
    """System health check response."""

    status: Literal["healthy", "unhealthy", "degraded"]
    version: str = "1.0.0"
    uptime_seconds: float
