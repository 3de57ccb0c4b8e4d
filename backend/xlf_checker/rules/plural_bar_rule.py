"""Plural Bar Rule — plural forms must be delimited by exactly four pipes."""

from typing import Sequence

from xlf_checker.rules.base import BaseRule
from xlf_checker.rules.models import RuleName, TranslationUnit
from xlf_checker.rules.patterns import has_malformed_plural_bars


class PluralBarRule(BaseRule):
    """Flags units with a run of 1-3 isolated pipes or 5+ pipes in source or target."""

    @property
    def name(self) -> RuleName:
        return RuleName.PLURAL_BAR_CHECK

    @property
    def label(self) -> str:
        return "Malformed plural bars"

    def check(self, units: Sequence[TranslationUnit]) -> set[str]:
        return self._flag_either(units, has_malformed_plural_bars)
