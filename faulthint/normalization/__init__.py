from faulthint.normalization.models import EventKind, NormalizedError
from faulthint.normalization.normalizer import normalize_error

__all__ = ["EventKind", "NormalizedError", "normalize_error"]
