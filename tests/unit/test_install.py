import asyncio
import sys
import threading
from collections.abc import Iterator
from unittest.mock import MagicMock, patch

import pytest

from faulthint.hooks.install import attach_loop, install_hooks
from faulthint.normalization.models import EventKind


def _settings(exit_on_background_failure: bool = True) -> MagicMock:
    return MagicMock(exit_code=3, exit_on_background_failure=exit_on_background_failure)


@pytest.fixture()
def restore_hooks() -> Iterator[None]:
    previous_excepthook = sys.excepthook
    previous_threading = threading.excepthook
    try:
        yield
    finally:
        sys.excepthook = previous_excepthook
        threading.excepthook = previous_threading


@pytest.mark.usefixtures("restore_hooks")
class TestExceptHook:
    def test_reports_uncaught_exception(self) -> None:
        handler = MagicMock()
        install_hooks(handler, _settings(), terminate=MagicMock())
        exc = ValueError("bad")

        sys.excepthook(ValueError, exc, None)

        handler.handle.assert_called_once_with(exc, EventKind.EXCEPTION)

    def test_keyboard_interrupt_goes_to_previous_hook(self) -> None:
        previous = MagicMock()
        sys.excepthook = previous
        handler = MagicMock()
        install_hooks(handler, _settings(), terminate=MagicMock())
        exc = KeyboardInterrupt()

        sys.excepthook(KeyboardInterrupt, exc, None)

        handler.handle.assert_not_called()
        previous.assert_called_once_with(KeyboardInterrupt, exc, None)

    def test_pipeline_failure_falls_back_to_previous_hook(self) -> None:
        previous = MagicMock()
        sys.excepthook = previous
        handler = MagicMock()
        handler.handle.side_effect = RuntimeError("presenter broke")
        install_hooks(handler, _settings(), terminate=MagicMock())
        exc = ValueError("bad")

        sys.excepthook(ValueError, exc, None)

        previous.assert_called_once_with(ValueError, exc, None)

    def test_uninstall_restores_previous_hooks(self) -> None:
        previous = MagicMock()
        sys.excepthook = previous
        installed = install_hooks(MagicMock(), _settings(), terminate=MagicMock())

        installed.uninstall()

        assert sys.excepthook is previous


@pytest.mark.usefixtures("restore_hooks")
class TestThreadingHook:
    def _run_failing_thread(self) -> ValueError:
        exc = ValueError("thread failed")

        def target() -> None:
            raise exc

        thread = threading.Thread(target=target)
        thread.start()
        thread.join()
        return exc

    def test_reports_and_terminates(self) -> None:
        handler = MagicMock()
        terminate = MagicMock()
        install_hooks(handler, _settings(), terminate=terminate)

        exc = self._run_failing_thread()

        handler.handle.assert_called_once_with(exc, EventKind.EXCEPTION)
        terminate.assert_called_once_with(3)

    def test_no_termination_when_disabled(self) -> None:
        handler = MagicMock()
        terminate = MagicMock()
        install_hooks(handler, _settings(exit_on_background_failure=False), terminate=terminate)

        self._run_failing_thread()

        handler.handle.assert_called_once()
        terminate.assert_not_called()

    def test_keyboard_interrupt_goes_to_previous_hook(self) -> None:
        previous = MagicMock()
        threading.excepthook = previous
        handler = MagicMock()
        terminate = MagicMock()
        install_hooks(handler, _settings(), terminate=terminate)

        def target() -> None:
            raise KeyboardInterrupt

        thread = threading.Thread(target=target)
        thread.start()
        thread.join()

        handler.handle.assert_not_called()
        terminate.assert_not_called()
        previous.assert_called_once()
        assert previous.call_args.args[0].exc_type is KeyboardInterrupt


class TestAttachLoop:
    def test_reports_task_exception_as_rejection(self) -> None:
        handler = MagicMock()
        terminate = MagicMock()
        loop = asyncio.new_event_loop()
        try:
            attach_loop(loop, handler, _settings(), terminate=terminate)
            exc = TypeError("bad")
            loop.call_exception_handler(
                {"message": "Task exception was never retrieved", "exception": exc}
            )
        finally:
            loop.close()

        handler.handle.assert_called_once_with(exc, EventKind.REJECTION)
        terminate.assert_called_once_with(3)

    def test_message_only_context_is_not_fatal(self) -> None:
        handler = MagicMock()
        terminate = MagicMock()
        loop = asyncio.new_event_loop()
        try:
            attach_loop(loop, handler, _settings(), terminate=terminate)
            context = {"message": "Task was destroyed but it is pending!"}
            with patch.object(loop, "default_exception_handler") as default:
                loop.call_exception_handler(context)
        finally:
            loop.close()

        handler.handle.assert_not_called()
        terminate.assert_not_called()
        default.assert_called_once_with(context)

    def test_failure_falls_back_to_default_handler(self) -> None:
        handler = MagicMock()
        handler.handle.side_effect = RuntimeError("broken")
        loop = asyncio.new_event_loop()
        try:
            attach_loop(loop, handler, _settings(False), terminate=MagicMock())
            context = {"message": "boom", "exception": ValueError("boom")}
            with patch.object(loop, "default_exception_handler") as default:
                loop.call_exception_handler(context)
        finally:
            loop.close()

        default.assert_called_once_with(context)
