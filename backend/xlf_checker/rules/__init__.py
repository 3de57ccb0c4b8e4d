"""XLIFF lint rules — deterministic checks over source/target string pairs.

Usage:
    from xlf_checker.pipeline import run_all_checks

    report = run_all_checks(xliff_text)
    for rule in report.failed_rules():
        print(rule.value, sorted(report.violations(rule)))
"""

from xlf_checker.rules.base import BaseRule
from xlf_checker.rules.engine import RuleEngine, rule_engine
from xlf_checker.rules.models import LintReport, RuleName, RuleResult, TranslationUnit

__all__ = [
    "BaseRule",
    "RuleEngine",
    "rule_engine",
    "LintReport",
    "RuleName",
    "RuleResult",
    "TranslationUnit",
]
