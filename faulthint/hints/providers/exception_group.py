from faulthint.hints.base import BaseHintProvider
from faulthint.normalization.models import NormalizedError


def _member_summary(error: NormalizedError) -> str:
    original = error.original
    members = getattr(original, "exceptions", None)
    if not isinstance(original, BaseException) or not members:
        return ""
    names = ", ".join(sorted({type(exc).__name__ for exc in members}))
    return f"\n\nIt contains {len(members)} exception(s): {names}"


class ExceptionGroupHints(BaseHintProvider):
    category = "ExceptionGroup"
    claims = ("BaseExceptionGroup",)

    def generic(self, error: NormalizedError) -> str:
        return f"""Several operations failed at once and were reported together as an exception group.{_member_summary(error)}

This is typical for asyncio.TaskGroup and other concurrent code.

How to fix:
- Read each member exception in the traceback; fix them individually
- Handle specific members with except* ValueError: ... blocks
- Add error handling inside the individual tasks"""


PROVIDER = ExceptionGroupHints
