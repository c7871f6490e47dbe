"""Message markers that route an error straight to a dedicated provider."""

from collections.abc import Callable
from dataclasses import dataclass

from faulthint.normalization.models import UNHANDLED_REJECTION, NormalizedError

UNHANDLED_REJECTION_MARKERS = (
    "UnhandledRejection",
    "UnhandledPromiseRejection",
    "exception was never retrieved",
)
MODULE_NOT_FOUND_MARKERS = (
    "Cannot find module",
    "Module not found",
    "No module named",
)


@dataclass(frozen=True)
class MarkerRule:
    name: str
    predicate: Callable[[NormalizedError], bool]
    category: str


def is_unhandled_rejection(error: NormalizedError) -> bool:
    return any(marker in error.message for marker in UNHANDLED_REJECTION_MARKERS)


def is_module_not_found(error: NormalizedError) -> bool:
    return any(marker in error.message for marker in MODULE_NOT_FOUND_MARKERS)


MARKER_RULES: tuple[MarkerRule, ...] = (
    MarkerRule("unhandled-rejection", is_unhandled_rejection, UNHANDLED_REJECTION),
    MarkerRule("module-not-found", is_module_not_found, "ModuleNotFoundError"),
)
