"""Plural Count Rule — source and target must have the same number of plural forms.

Units with malformed delimiters are left to PluralBarRule and never reported
here, so one defect is not counted twice.
"""

from typing import Sequence

from xlf_checker.rules.base import BaseRule
from xlf_checker.rules.models import RuleName, TranslationUnit
from xlf_checker.rules.patterns import count_plural_forms, has_malformed_plural_bars


class PluralCountRule(BaseRule):
    """Compares the number of non-blank ``||||``-separated forms."""

    @property
    def name(self) -> RuleName:
        return RuleName.PLURAL_MATCH

    @property
    def label(self) -> str:
        return "Plural Forms Match (||||)"

    def check(self, units: Sequence[TranslationUnit]) -> set[str]:
        violators = set()

        for unit in units:
            if has_malformed_plural_bars(unit.source) or has_malformed_plural_bars(unit.target):
                continue
            if count_plural_forms(unit.source) != count_plural_forms(unit.target):
                violators.add(unit.id)

        return violators
