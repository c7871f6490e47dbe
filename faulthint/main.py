import asyncio

from faulthint.config.settings import Settings
from faulthint.hints.registry import default_registry
from faulthint.hooks.handler import FatalErrorHandler
from faulthint.hooks.install import attach_loop, install_hooks
from faulthint.logging.logger import Log
from faulthint.presenter.console import ConsolePresenter
from faulthint.resolver.fix_extractor import FixExtractor
from faulthint.resolver.resolver import HintResolver


def build_handler(settings: Settings) -> FatalErrorHandler:
    """Wire registry -> resolver -> presenter into a FatalErrorHandler."""
    resolver = HintResolver(default_registry())
    presenter = ConsolePresenter(
        fix_extractor=FixExtractor(),
        trace_frames=settings.trace_frames,
    )
    return FatalErrorHandler(resolver, presenter)


def init(settings: Settings | None = None) -> FatalErrorHandler | None:
    """Entry point: load settings -> build handler -> install process hooks.

    Called from inside a running event loop, the handler is attached to
    that loop as well.

    Returns the installed handler, or None when disabled.
    """
    settings = settings or Settings()
    Log.configure(settings.log_level)

    if settings.is_production:
        Log.warning("faulthint is disabled in production mode")
        return None
    if not settings.enabled:
        Log.debug("faulthint is disabled by configuration")
        return None

    handler = build_handler(settings)
    install_hooks(handler, settings)
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        Log.debug("No running event loop, asyncio failures are not hooked")
    else:
        attach_loop(loop, handler, settings)
    Log.info("faulthint initialized, fatal errors will come with hints")
    return handler
