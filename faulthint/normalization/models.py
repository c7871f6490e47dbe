from dataclasses import dataclass, field
from enum import Enum

UNKNOWN_CATEGORY = "Unknown"
UNHANDLED_REJECTION = "UnhandledRejection"


class EventKind(Enum):
    """Kind of fatal event reported by the host runtime."""

    EXCEPTION = "exception"
    REJECTION = "rejection"


@dataclass(frozen=True)
class NormalizedError:
    """Uniform description of a fatal failure."""

    category: str
    message: str = ""
    code: str | None = None
    trace: str = ""
    cause: "NormalizedError | None" = None
    original: object = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        if not self.category:
            raise ValueError("NormalizedError.category must be a non-empty string")
        if self.message is None:
            object.__setattr__(self, "message", "")
