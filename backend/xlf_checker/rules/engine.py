"""Rule Engine — runs every lint rule over extracted units and builds the report.

This is the main entry point for linting. It runs all registered rules
against the units of one document and produces a LintReport.

Usage:
    report = rule_engine.run(units)
    if not report.passed:
        # Show report.results(rule_engine.labels())
"""

import time
from typing import Optional, Sequence

import structlog

from xlf_checker.rules.base import BaseRule
from xlf_checker.rules.models import LintReport, RuleName, TranslationUnit

from xlf_checker.rules.encoding_rule import EncodingRule
from xlf_checker.rules.variable_count_rule import VariableCountRule
from xlf_checker.rules.unprefixed_variable_rule import UnprefixedVariableRule
from xlf_checker.rules.plural_bar_rule import PluralBarRule
from xlf_checker.rules.plural_count_rule import PluralCountRule

logger = structlog.get_logger()


class RuleEngine:
    """Runs a battery of independent rules and produces one report per document.

    Design principles:
        - Deterministic: same units → same report
        - Independent: no rule sees another rule's result
        - Stateless: rules hold no per-run data, so one engine serves concurrent callers
        - Observable: logs every run with timing
    """

    def __init__(self, rules: Optional[list[BaseRule]] = None):
        """Initialize with default rules or a custom list.

        Args:
            rules: Optional list of rules. If None, uses all defaults.
        """
        self.rules = rules if rules is not None else self._default_rules()

    @staticmethod
    def _default_rules() -> list[BaseRule]:
        """Create the default rule battery, in report order."""
        return [
            EncodingRule(),            # Leaked &amp; / nbsp; entities
            VariableCountRule(),       # %{...} count source vs target
            UnprefixedVariableRule(),  # {...} missing its % prefix
            PluralCountRule(),         # ||||-separated form count
            PluralBarRule(),           # Malformed pipe runs
        ]

    def run(self, units: Sequence[TranslationUnit]) -> LintReport:
        """Run all rules over the units and build the report.

        Args:
            units: Translation units of one document

        Returns:
            LintReport mapping each rule to its violator ids

        Raises:
            Exception: Whatever a broken rule raised; no partial report is built
        """
        start_time = time.perf_counter()

        violations: dict[RuleName, set[str]] = {}
        rule_timings: dict[str, float] = {}

        for rule in self.rules:
            r_start = time.perf_counter()
            try:
                violations[rule.name] = rule.check(units)
            except Exception as e:
                logger.error(
                    "rule_failed",
                    rule=rule.name.value,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                raise
            finally:
                r_duration = (time.perf_counter() - r_start) * 1000
                rule_timings[rule.name.value] = round(r_duration, 2)

        report = LintReport.build(violations)

        total_duration = (time.perf_counter() - start_time) * 1000

        logger.info(
            "lint_complete",
            passed=report.passed,
            units=len(units),
            violations={rule.value: len(ids) for rule, ids in violations.items()},
            duration_ms=round(total_duration, 2),
            rule_timings=rule_timings,
        )

        return report

    def labels(self) -> dict[RuleName, str]:
        """Rule name → human-readable label."""
        return {rule.name: rule.label for rule in self.rules}

    def describe(self) -> list[tuple[RuleName, str]]:
        return [(rule.name, rule.label) for rule in self.rules]


# Module-level singleton
rule_engine = RuleEngine()
