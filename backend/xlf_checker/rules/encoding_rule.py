"""Encoding Rule — detects leaked or double-escaped HTML entities."""

from typing import Sequence

from xlf_checker.rules.base import BaseRule
from xlf_checker.rules.models import RuleName, TranslationUnit
from xlf_checker.rules.patterns import has_encoding_artifact


class EncodingRule(BaseRule):
    """Flags units whose source or target contains ``nbsp;`` or ``&amp;``.

    Matching is a case-sensitive substring test on the parsed text, so a
    document holding ``&amp;amp;`` (escaped twice) is caught.
    """

    @property
    def name(self) -> RuleName:
        return RuleName.ENCODING_ERRORS

    @property
    def label(self) -> str:
        return "No Encoding Errors (e.g. &amp;nbsp;)"

    def check(self, units: Sequence[TranslationUnit]) -> set[str]:
        return self._flag_either(units, has_encoding_artifact)
