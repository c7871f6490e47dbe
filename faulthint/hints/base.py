from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import ClassVar

from faulthint.hints.rules import HintRule
from faulthint.normalization.models import NormalizedError


class BaseHintProvider(ABC):
    """Contract for all hint providers.

    Subclasses declare their canonical ``category``, optional extra
    categories in ``claims``, and an ordered tuple of ``rules``. The first
    matching rule renders the hint; otherwise the generic text is returned.
    """

    category: ClassVar[str] = ""
    claims: ClassVar[tuple[str, ...]] = ()
    rules: ClassVar[tuple[HintRule, ...]] = ()

    def __init__(self, registry: Mapping[str, "BaseHintProvider"]) -> None:
        self._registry = registry

    def hint(self, error: NormalizedError) -> str | None:
        """Return the explanation for ``error``.

        Providers must not raise and must return non-empty text when no
        rule matches.
        """
        for rule in self.rules:
            if rule.matches(error):
                return rule.render(error)
        return self.generic(error)

    @abstractmethod
    def generic(self, error: NormalizedError) -> str:
        """Category-level explanation used when no rule matches."""
