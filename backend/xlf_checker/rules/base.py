"""Base rule — abstract class implementing the Strategy Pattern.

Each rule is a standalone, independently testable unit.
New rules are added without modifying the engine.
"""

from abc import ABC, abstractmethod
from typing import Callable, Sequence

from xlf_checker.rules.models import RuleName, TranslationUnit


class BaseRule(ABC):
    """Abstract base for all lint rules.

    Contract:
        - check() is deterministic: same units → same violator set
        - check() never raises for a malformed unit; malformation is a violation
        - check() does not mutate the units and keeps no state between calls
        - No I/O, no randomness
    """

    @property
    @abstractmethod
    def name(self) -> RuleName:
        """Report key for this rule."""
        ...

    @property
    @abstractmethod
    def label(self) -> str:
        """Human-readable description shown next to pass/fail."""
        ...

    @abstractmethod
    def check(self, units: Sequence[TranslationUnit]) -> set[str]:
        """Run the rule over the extracted units.

        Args:
            units: Translation units in document order

        Returns:
            Ids of the violating units (empty set if the rule passes)
        """
        ...

    # ── Helper Methods ──

    def _flag_either(
        self, units: Sequence[TranslationUnit], predicate: Callable[[str], bool]
    ) -> set[str]:
        """Ids of units whose source or target satisfies the predicate."""
        return {
            unit.id for unit in units
            if predicate(unit.source) or predicate(unit.target)
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name.value})"
