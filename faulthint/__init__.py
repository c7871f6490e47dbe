from faulthint.hooks.install import attach_loop
from faulthint.main import build_handler, init
from faulthint.normalization import EventKind, NormalizedError, normalize_error
from faulthint.resolver import FixExtractor, HintResolver

__all__ = [
    "EventKind",
    "FixExtractor",
    "HintResolver",
    "NormalizedError",
    "attach_loop",
    "build_handler",
    "init",
    "normalize_error",
]
