from faulthint.hints.base import BaseHintProvider
from faulthint.normalization.models import NormalizedError


class ZeroDivisionErrorHints(BaseHintProvider):
    category = "ZeroDivisionError"

    def generic(self, error: NormalizedError) -> str:
        return """Your code divided a number by zero.

Common causes:
- A count or length was zero, for example averaging an empty list
- A value read from input or configuration was 0

How to fix:
- Check the divisor first: if count: average = total / count
- Decide what the result should be for empty input and return it early
- Validate configuration values that are used as divisors"""


PROVIDER = ZeroDivisionErrorHints
