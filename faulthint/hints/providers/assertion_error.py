from faulthint.hints.base import BaseHintProvider
from faulthint.normalization.models import NormalizedError


class AssertionErrorHints(BaseHintProvider):
    category = "AssertionError"

    def generic(self, error: NormalizedError) -> str:
        detail = f"\n\nAssertion message: {error.message}" if error.message else ""
        return f"""An assert statement evaluated to False.{detail}

Assertions document assumptions; a failing one means the program reached a
state the author believed impossible.

How to fix:
- Inspect the values used in the failing assert with a debugger or print
- Fix the code that produced the unexpected state rather than the assertion
- Add a message to asserts: assert cond, f"unexpected {{value!r}}"
- Don't rely on assert for input validation; it is removed under python -O"""


PROVIDER = AssertionErrorHints
