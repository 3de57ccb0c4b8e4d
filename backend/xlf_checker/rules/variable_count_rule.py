"""Variable Count Rule — source and target must carry as many %{...} placeholders."""

from typing import Sequence

from xlf_checker.rules.base import BaseRule
from xlf_checker.rules.models import RuleName, TranslationUnit
from xlf_checker.rules.patterns import count_percent_variables


class VariableCountRule(BaseRule):
    """Compares percent-variable counts between source and target.

    Only counts are compared: reordered or renamed placeholders pass.
    """

    @property
    def name(self) -> RuleName:
        return RuleName.VARIABLE_MATCH

    @property
    def label(self) -> str:
        return "Matching Variables Between Source and Target"

    def check(self, units: Sequence[TranslationUnit]) -> set[str]:
        return {
            unit.id for unit in units
            if count_percent_variables(unit.source) != count_percent_variables(unit.target)
        }
