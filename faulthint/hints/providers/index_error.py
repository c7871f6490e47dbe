from faulthint.hints.base import BaseHintProvider
from faulthint.hints.rules import HintRule, message_contains
from faulthint.normalization.models import NormalizedError


def _empty_pop(_error: NormalizedError) -> str:
    return """You called pop() on an empty list.

How to fix:
- Check the list is not empty before popping: if items: items.pop()
- Use collections.deque if you need a queue and check len() first"""


class IndexErrorHints(BaseHintProvider):
    category = "IndexError"
    rules = (HintRule(message_contains("pop from empty"), _empty_pop),)

    def generic(self, error: NormalizedError) -> str:
        return """Your code used an index that is outside the sequence.

Indexes start at 0, so the last valid index is len(seq) - 1.

How to fix:
- Check len(seq) before indexing
- Loop with for item in seq or enumerate(seq) instead of manual indexes
- Watch for off-by-one errors in range() bounds
- Handle empty sequences separately"""


PROVIDER = IndexErrorHints
