from faulthint.hints.base import BaseHintProvider
from faulthint.hints.rules import HintRule, first_group, message_contains, message_matches
from faulthint.normalization.models import NormalizedError


def _not_callable(error: NormalizedError) -> str:
    kind = first_group(r"'([^']+)' object is not callable", error.message, "value")
    return f"""You're calling something that isn't a function: a "{kind}" value.

Common causes:
- A variable shadows a function with the same name (for example list = [1, 2])
- An attribute holds a value, not a method
- Extra parentheses after an expression that already returned a result

How to fix:
- Look for an assignment that reuses the function's name and rename it
- Print type(...) of the object you are calling
- Remove the extra () if the value was already computed"""


def _none_operation(_error: NormalizedError) -> str:
    return """An operation received None where it expected a real value.

This usually means a function returned None (for example, it has no return
statement, or an in-place method like list.sort() was used as a value).

How to fix:
- Check which expression is None with a print or a debugger
- Make sure every function path ends with an explicit return
- Don't use the result of in-place methods such as list.sort() or dict.update()
- Guard optional values: if value is not None: ..."""


def _not_iterable(error: NormalizedError) -> str:
    kind = first_group(r"'([^']+)' object is not iterable", error.message, "value")
    return f"""You're trying to iterate over a "{kind}" value, which isn't an iterable object.

How to fix:
- Loop over a collection, for example range(n) instead of n
- Check the value with type(...) before the loop
- Wrap a single item in a list if the code expects many: [item]"""


def _not_subscriptable(error: NormalizedError) -> str:
    kind = first_group(r"'([^']+)' object is not subscriptable", error.message, "value")
    return f"""You're using [] on a "{kind}" value, which doesn't support indexing.

How to fix:
- Check that the value is a list, tuple, dict or string before indexing
- If it is None, find out why the function that produced it returned nothing
- Call a function with () rather than []"""


def _unsupported_operand(_error: NormalizedError) -> str:
    return """An operator was applied to values of incompatible types.

For example, "1" + 1 mixes a string and an integer.

How to fix:
- Convert values explicitly: int("1") + 1 or "1" + str(1)
- Use an f-string to build text: f"total: {total}"
- Check the types involved with type(...)"""


def _wrong_arguments(error: NormalizedError) -> str:
    func = first_group(r"^(\S+?)\(\)", error.message, "the function")
    return f"""{func}() was called with arguments that don't match its signature.

How to fix:
- Compare the call with the function definition: help({func.split('.')[-1]})
- Check for missing or extra positional arguments
- Check keyword argument names for typos
- Remember that methods receive self automatically"""


class TypeErrorHints(BaseHintProvider):
    category = "TypeError"
    rules = (
        HintRule(message_contains("object is not callable"), _not_callable),
        HintRule(message_contains("'NoneType'"), _none_operation),
        HintRule(message_contains("object is not iterable"), _not_iterable),
        HintRule(message_contains("object is not subscriptable"), _not_subscriptable),
        HintRule(
            message_matches(r"unsupported operand|can only concatenate|must be str, not"),
            _unsupported_operand,
        ),
        HintRule(
            message_matches(
                r"positional argument|keyword argument|missing \d+ required"
            ),
            _wrong_arguments,
        ),
    )

    def generic(self, error: NormalizedError) -> str:
        return """An operation was applied to a value of the wrong type.

How to fix:
- Check the types of the values involved with type(...)
- Convert values explicitly before combining them
- Check function calls against their signatures"""


PROVIDER = TypeErrorHints
