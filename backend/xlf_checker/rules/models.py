"""Rule models — translation units, rule names, and the lint report structure.

All linting is deterministic: same units → same report, no I/O, no randomness.
"""

from enum import Enum
from typing import Iterable

from pydantic import BaseModel, Field


class TranslationUnit(BaseModel):
    """One localizable string pair extracted from a document."""

    id: str = ""   # Unique within a document, not globally
    source: str
    target: str

    model_config = {"frozen": True}


class RuleName(str, Enum):
    """Report keys, one per lint rule."""

    ENCODING_ERRORS = "encodingErrors"
    VARIABLE_MATCH = "variableMatch"
    VARIABLE_WITHOUT_PERCENT = "variableWithoutPercentFound"
    PLURAL_MATCH = "pluralMatch"
    PLURAL_BAR_CHECK = "pluralBarCheck"


class RuleResult(BaseModel):
    """Pass/fail view of a single rule, ready for display."""

    rule: RuleName
    label: str
    passed: bool
    failures: list[str] = Field(default_factory=list)

    model_config = {"use_enum_values": True}


class LintReport(BaseModel):
    """Violator sets per rule — the output of the rule engine.

    A rule passes iff its set is empty. Serialized with the report keys
    (``encodingErrors`` etc.) as JSON arrays.
    """

    encoding_errors: set[str] = Field(default_factory=set, alias="encodingErrors")
    variable_match: set[str] = Field(default_factory=set, alias="variableMatch")
    variable_without_percent_found: set[str] = Field(
        default_factory=set, alias="variableWithoutPercentFound"
    )
    plural_match: set[str] = Field(default_factory=set, alias="pluralMatch")
    plural_bar_check: set[str] = Field(default_factory=set, alias="pluralBarCheck")

    model_config = {"frozen": True, "populate_by_name": True}

    @classmethod
    def build(cls, violations: dict[RuleName, Iterable[str]]) -> "LintReport":
        """Build a report from per-rule violator ids. Missing rules count as passed."""
        return cls(**{
            RuleName(rule).value: set(ids) for rule, ids in violations.items()
        })

    def violations(self, rule: RuleName) -> set[str]:
        return getattr(self, _FIELD_BY_RULE[RuleName(rule)])

    def as_mapping(self) -> dict[str, set[str]]:
        """Report key → violator set."""
        return {rule.value: self.violations(rule) for rule in RuleName}

    def failed_rules(self) -> list[RuleName]:
        return [rule for rule in RuleName if self.violations(rule)]

    @property
    def passed(self) -> bool:
        return not self.failed_rules()

    def results(self, labels: dict[RuleName, str]) -> list[RuleResult]:
        """Per-rule pass/fail with failures sorted for stable display."""
        return [
            RuleResult(
                rule=rule,
                label=labels.get(rule, rule.value),
                passed=not self.violations(rule),
                failures=sorted(self.violations(rule)),
            )
            for rule in RuleName
        ]


_FIELD_BY_RULE = {
    RuleName.ENCODING_ERRORS: "encoding_errors",
    RuleName.VARIABLE_MATCH: "variable_match",
    RuleName.VARIABLE_WITHOUT_PERCENT: "variable_without_percent_found",
    RuleName.PLURAL_MATCH: "plural_match",
    RuleName.PLURAL_BAR_CHECK: "plural_bar_check",
}
