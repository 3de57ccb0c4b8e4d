"""XLF Checker — lint XLIFF translation units before they ship."""

from xlf_checker.extraction import ParseError, extract
from xlf_checker.pipeline import run_all_checks
from xlf_checker.rules import LintReport, RuleEngine, RuleName, TranslationUnit, rule_engine

__all__ = [
    "ParseError",
    "extract",
    "run_all_checks",
    "LintReport",
    "RuleEngine",
    "RuleName",
    "TranslationUnit",
    "rule_engine",
]
