from faulthint.hints.base import BaseHintProvider
from faulthint.normalization.models import NormalizedError


class RecursionErrorHints(BaseHintProvider):
    category = "RecursionError"

    def generic(self, error: NormalizedError) -> str:
        return """A function kept calling itself until Python's recursion limit was reached.

Common causes:
- The recursive function has no base case, or the base case is never reached
- Two functions or properties call each other in a loop
- A property getter reads the property itself (self.value inside value)

How to fix:
- Add or fix the base case so the recursion stops
- Check that each call moves closer to the base case
- Store property data in a differently named attribute, such as self._value
- Rewrite deep recursion as a loop with an explicit stack"""


PROVIDER = RecursionErrorHints
