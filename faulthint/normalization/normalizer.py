"""Converts arbitrary failure values into NormalizedError records."""

import errno
import socket
import traceback

from faulthint.normalization.models import (
    UNHANDLED_REJECTION,
    UNKNOWN_CATEGORY,
    EventKind,
    NormalizedError,
)

_MAX_CAUSE_DEPTH = 8
_GAI_CODES: dict[int, str] = {
    getattr(socket, name): name for name in dir(socket) if name.startswith("EAI_")
}


def normalize_error(
    value: object,
    kind: EventKind = EventKind.EXCEPTION,
) -> NormalizedError:
    """Build a NormalizedError from any failure value.

    Exceptions keep their class name, message, traceback and system error
    code. Anything else becomes an ``Unknown`` record carrying the value's
    text. A rejection wraps the normalized reason as its cause.

    Never raises.
    """
    inner = _normalize(value, depth=0, seen=set())
    if kind is EventKind.REJECTION:
        return NormalizedError(
            category=UNHANDLED_REJECTION,
            message=f"{UNHANDLED_REJECTION}: {inner.category}: {inner.message}",
            trace=inner.trace,
            cause=inner,
            original=value,
        )
    return inner


def _normalize(value: object, depth: int, seen: set[int]) -> NormalizedError:
    if not isinstance(value, BaseException):
        return NormalizedError(
            category=UNKNOWN_CATEGORY,
            message=_render(value),
            original=value,
        )

    seen.add(id(value))
    return NormalizedError(
        category=type(value).__name__ or "Error",
        message=_render(value),
        code=_system_code(value),
        trace=_format_trace(value),
        cause=_normalize_cause(value, depth, seen),
        original=value,
    )


def _normalize_cause(
    exc: BaseException,
    depth: int,
    seen: set[int],
) -> NormalizedError | None:
    cause = exc.__cause__
    if cause is None and not exc.__suppress_context__:
        cause = exc.__context__
    if cause is None or id(cause) in seen or depth + 1 >= _MAX_CAUSE_DEPTH:
        return None
    return _normalize(cause, depth + 1, seen)


def _system_code(exc: BaseException) -> str | None:
    code = getattr(exc, "code", None)
    if isinstance(code, str) and code:
        return code
    if isinstance(exc, socket.gaierror) and isinstance(exc.errno, int):
        return _GAI_CODES.get(exc.errno)
    if isinstance(exc, OSError) and isinstance(exc.errno, int):
        return errno.errorcode.get(exc.errno)
    return None


def _format_trace(exc: BaseException) -> str:
    try:
        return "".join(traceback.format_exception(exc))
    except Exception:
        return ""


def _render(value: object) -> str:
    try:
        return str(value)
    except Exception:
        pass
    try:
        return repr(value)
    except Exception:
        return f"<unprintable {type(value).__name__} object>"
