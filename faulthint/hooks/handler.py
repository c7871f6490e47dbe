from typing import Protocol

from faulthint.logging.logger import Log
from faulthint.normalization.models import EventKind, NormalizedError
from faulthint.normalization.normalizer import normalize_error
from faulthint.resolver.resolver import HintResolver


class Presenter(Protocol):
    def present(self, error: NormalizedError, hint: str | None) -> None: ...


class FatalErrorHandler:
    """Single entry point the host calls once per fatal event.

    Each call runs its own normalize -> resolve -> present pipeline; nothing
    is shared between calls except the read-only registry behind the resolver.
    """

    def __init__(self, resolver: HintResolver, presenter: Presenter) -> None:
        self._resolver = resolver
        self._presenter = presenter

    def handle(self, value: object, kind: EventKind = EventKind.EXCEPTION) -> NormalizedError:
        error = normalize_error(value, kind)
        resolution = self._resolver.explain(error)
        if resolution.text is None:
            Log.debug(f"No hint available for {error.category}")
        self._presenter.present(error, resolution.text)
        return error
