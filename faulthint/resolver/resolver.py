"""Tiered hint resolution.

Tiers run in a fixed order and the first one that claims the error decides
the outcome:

1. code     - the system error code maps to a registered category
2. marker   - the message carries a dedicated marker (rejection, missing module)
3. canonical - a provider is registered under the exact category
4. fuzzy    - another registered key appears in the message as a whole word
"""

import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum

from faulthint.hints.base import BaseHintProvider
from faulthint.hints.codes import CODE_CATEGORIES
from faulthint.logging.logger import Log
from faulthint.normalization.models import NormalizedError
from faulthint.resolver.markers import MARKER_RULES, MarkerRule


class Tier(Enum):
    CODE = "code"
    MARKER = "marker"
    CANONICAL = "canonical"
    FUZZY = "fuzzy"
    NONE = "none"


@dataclass(frozen=True)
class Resolution:
    """Which tier answered, under which registry key, and the resulting text."""

    tier: Tier
    key: str | None = None
    text: str | None = None


_UNRESOLVED = Resolution(tier=Tier.NONE)


class HintResolver:
    """Selects one provider for a NormalizedError and returns its explanation."""

    def __init__(
        self,
        registry: Mapping[str, BaseHintProvider],
        code_categories: Mapping[str, str] = CODE_CATEGORIES,
        markers: Sequence[MarkerRule] = MARKER_RULES,
    ) -> None:
        self._registry = registry
        self._code_categories = code_categories
        self._markers = tuple(markers)
        self._fuzzy_patterns = tuple(
            (key, re.compile(rf"\b{re.escape(key)}\b", re.IGNORECASE))
            for key in registry
        )

    def resolve(self, error: NormalizedError) -> str | None:
        """Return the explanation for ``error``, or None if no tier matched."""
        return self.explain(error).text

    def explain(self, error: NormalizedError) -> Resolution:
        resolution = (
            self._by_code(error)
            or self._by_marker(error)
            or self._by_category(error)
            or self._by_fuzzy_match(error)
            or _UNRESOLVED
        )
        Log.debug(
            f"Resolved {error.category} via {resolution.tier.value} tier"
            f" (key={resolution.key})"
        )
        return resolution

    def _by_code(self, error: NormalizedError) -> Resolution | None:
        if not error.code:
            return None
        category = self._code_categories.get(error.code)
        if category is None or category not in self._registry:
            return None
        return self._invoke(Tier.CODE, category, error)

    def _by_marker(self, error: NormalizedError) -> Resolution | None:
        for marker in self._markers:
            if not marker.predicate(error):
                continue
            if marker.category not in self._registry:
                Log.debug(f"Marker {marker.name} matched but {marker.category} is not registered")
                return Resolution(tier=Tier.MARKER, key=None, text=None)
            return self._invoke(Tier.MARKER, marker.category, error)
        return None

    def _by_category(self, error: NormalizedError) -> Resolution | None:
        if error.category not in self._registry:
            return None
        return self._invoke(Tier.CANONICAL, error.category, error)

    def _by_fuzzy_match(self, error: NormalizedError) -> Resolution | None:
        for key, pattern in self._fuzzy_patterns:
            if key == error.category:
                continue
            if pattern.search(error.message):
                return self._invoke(Tier.FUZZY, key, error)
        return None

    def _invoke(self, tier: Tier, key: str, error: NormalizedError) -> Resolution:
        return Resolution(tier=tier, key=key, text=self._registry[key].hint(error))
