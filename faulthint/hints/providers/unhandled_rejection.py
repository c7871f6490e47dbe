from faulthint.hints.base import BaseHintProvider
from faulthint.hints.codes import category_for_code
from faulthint.normalization.models import UNHANDLED_REJECTION, NormalizedError

_REJECTION_FIXES = """Additionally, to fix the unhandled task failure itself:
- Await every task you create, or keep a reference and check task.exception()
- Use asyncio.TaskGroup so failures propagate to the awaiting code
- Wrap the coroutine body in try/except and log the error"""


class UnhandledRejectionHints(BaseHintProvider):
    """Explains asyncio task or future failures that nobody retrieved.

    When the failure wraps an error of another registered category, that
    category's explanation is shown first. Only one level is unwrapped: a
    rejection whose cause is itself a rejection gets the generic text.
    """

    category = UNHANDLED_REJECTION

    def hint(self, error: NormalizedError) -> str | None:
        inner = self._inner_hint(error.cause)
        if inner:
            return (
                f"This is an unhandled asyncio failure containing a {error.cause.category}:"
                f"\n\n{inner}\n\n{_REJECTION_FIXES}"
            )
        return self.generic(error)

    def _inner_hint(self, cause: NormalizedError | None) -> str | None:
        if cause is None or cause.category == UNHANDLED_REJECTION:
            return None
        for key in (category_for_code(cause.code), cause.category):
            provider = self._registry.get(key) if key else None
            if provider is not None and provider is not self:
                return provider.hint(cause)
        return None

    def generic(self, error: NormalizedError) -> str:
        return """An asyncio task or future failed and nobody retrieved its exception.

The event loop only notices this when the task is garbage collected, so the
failure can surface far away from where it happened.

How to fix:
- Await every task you create with asyncio.create_task()
- Keep references to background tasks and add a done callback that checks task.exception()
- Use asyncio.TaskGroup (or asyncio.gather) so errors reach the caller
- Catch and log exceptions inside long-running background coroutines"""


PROVIDER = UnhandledRejectionHints
