"""Predicate helpers for provider sub-dispatch.

Predicates are plain functions over a NormalizedError so they can be tested
on their own, independently of the texts they select.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass

from faulthint.normalization.models import NormalizedError

Predicate = Callable[[NormalizedError], bool]
Renderer = Callable[[NormalizedError], str]


@dataclass(frozen=True)
class HintRule:
    """A (predicate, renderer) pair evaluated in declaration order."""

    predicate: Predicate
    render: Renderer

    def matches(self, error: NormalizedError) -> bool:
        return self.predicate(error)


def message_contains(*needles: str) -> Predicate:
    """True when the message contains any of the needles (case-sensitive)."""

    def predicate(error: NormalizedError) -> bool:
        return any(needle in error.message for needle in needles)

    return predicate


def message_contains_ci(*needles: str) -> Predicate:
    lowered = tuple(needle.lower() for needle in needles)

    def predicate(error: NormalizedError) -> bool:
        message = error.message.lower()
        return any(needle in message for needle in lowered)

    return predicate


def message_matches(pattern: str, flags: int = 0) -> Predicate:
    compiled = re.compile(pattern, flags)

    def predicate(error: NormalizedError) -> bool:
        return compiled.search(error.message) is not None

    return predicate


def code_is(*codes: str) -> Predicate:
    wanted = frozenset(codes)

    def predicate(error: NormalizedError) -> bool:
        return error.code in wanted

    return predicate


def any_of(*predicates: Predicate) -> Predicate:
    def predicate(error: NormalizedError) -> bool:
        return any(p(error) for p in predicates)

    return predicate


def first_group(pattern: str, message: str, default: str) -> str:
    """Return the first capture group of ``pattern`` in ``message``, or ``default``."""
    match = re.search(pattern, message)
    if match and match.group(1):
        return match.group(1)
    return default
