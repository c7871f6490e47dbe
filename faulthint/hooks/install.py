"""Process-level hook registration.

Installs the handler as ``sys.excepthook``, ``threading.excepthook`` and,
on request, as an asyncio loop exception handler. Process termination
policy lives here: main-thread failures end the interpreter as usual, while
thread and asyncio failures call ``terminate`` after presentation.
"""

import asyncio
import os
import sys
import threading
from collections.abc import Callable
from dataclasses import dataclass
from types import TracebackType
from typing import Any

from faulthint.config.settings import Settings
from faulthint.hooks.handler import FatalErrorHandler
from faulthint.logging.logger import Log
from faulthint.normalization.models import EventKind

Terminate = Callable[[int], object]
_PASSTHROUGH = (KeyboardInterrupt, SystemExit)


@dataclass
class InstalledHooks:
    """Previous hooks, kept so they can be restored."""

    previous_excepthook: Callable[..., Any]
    previous_threading_excepthook: Callable[..., Any]

    def uninstall(self) -> None:
        sys.excepthook = self.previous_excepthook
        threading.excepthook = self.previous_threading_excepthook


def install_hooks(
    handler: FatalErrorHandler,
    settings: Settings,
    terminate: Terminate = os._exit,
) -> InstalledHooks:
    """Route uncaught exceptions of the main and worker threads to ``handler``."""
    installed = InstalledHooks(
        previous_excepthook=sys.excepthook,
        previous_threading_excepthook=threading.excepthook,
    )

    def excepthook(
        exc_type: type[BaseException],
        exc: BaseException,
        tb: TracebackType | None,
    ) -> None:
        if issubclass(exc_type, _PASSTHROUGH):
            installed.previous_excepthook(exc_type, exc, tb)
            return
        if not _report(handler, exc, EventKind.EXCEPTION):
            installed.previous_excepthook(exc_type, exc, tb)

    def thread_excepthook(args: threading.ExceptHookArgs) -> None:
        if issubclass(args.exc_type, _PASSTHROUGH) or args.exc_value is None:
            installed.previous_threading_excepthook(args)
            return
        if not _report(handler, args.exc_value, EventKind.EXCEPTION):
            installed.previous_threading_excepthook(args)
        _finish_background(settings, terminate)

    sys.excepthook = excepthook
    threading.excepthook = thread_excepthook
    return installed


def attach_loop(
    loop: asyncio.AbstractEventLoop,
    handler: FatalErrorHandler,
    settings: Settings,
    terminate: Terminate = os._exit,
) -> None:
    """Report unretrieved task and future exceptions of ``loop`` as rejections."""
    previous = loop.get_exception_handler()

    def exception_handler(
        current_loop: asyncio.AbstractEventLoop,
        context: dict[str, Any],
    ) -> None:
        reason = context.get("exception")
        if not isinstance(reason, BaseException) or isinstance(reason, _PASSTHROUGH):
            _default(current_loop, context, previous)
            return
        if not _report(handler, reason, EventKind.REJECTION):
            _default(current_loop, context, previous)
        _finish_background(settings, terminate)

    loop.set_exception_handler(exception_handler)


def _report(handler: FatalErrorHandler, value: object, kind: EventKind) -> bool:
    try:
        handler.handle(value, kind)
    except Exception as exc:
        Log.exception(f"Failed to explain fatal error: {exc!r}")
        return False
    return True


def _default(
    loop: asyncio.AbstractEventLoop,
    context: dict[str, Any],
    previous: Callable[..., Any] | None,
) -> None:
    if previous is not None:
        previous(loop, context)
    else:
        loop.default_exception_handler(context)


def _finish_background(settings: Settings, terminate: Terminate) -> None:
    if not settings.exit_on_background_failure:
        return
    sys.stdout.flush()
    sys.stderr.flush()
    terminate(settings.exit_code)
