"""Unprefixed Variable Rule — detects {name} placeholders missing their % prefix."""

from typing import Sequence

from xlf_checker.rules.base import BaseRule
from xlf_checker.rules.models import RuleName, TranslationUnit
from xlf_checker.rules.patterns import has_bare_brace_variable


class UnprefixedVariableRule(BaseRule):
    """Flags units where source or target holds a brace token not preceded by ``%``.

    Runs independently of VariableCountRule; a bare token can trip both.
    """

    @property
    def name(self) -> RuleName:
        return RuleName.VARIABLE_WITHOUT_PERCENT

    @property
    def label(self) -> str:
        return "All variables have a % prefix"

    def check(self, units: Sequence[TranslationUnit]) -> set[str]:
        return self._flag_either(units, has_bare_brace_variable)
