from faulthint.hints.base import BaseHintProvider
from faulthint.hints.providers.name_error import undefined_name, undefined_name_hint
from faulthint.hints.rules import HintRule, message_contains
from faulthint.normalization.models import NormalizedError


def _not_defined(error: NormalizedError) -> str:
    return undefined_name_hint(undefined_name(error.message))


def _dead_weakref(_error: NormalizedError) -> str:
    return """The object behind a weak reference doesn't exist anymore.

A weakref.proxy (or an object using weak references internally) was used
after the referenced object had been garbage collected. Weak references do
not keep their target alive.

How to fix:
- Keep a normal (strong) reference to the object for as long as you use the proxy
- Call the weakref.ref() and check the result for None before using it
- Use weakref.WeakValueDictionary lookups with .get() and handle missing entries
- Avoid creating the target as a temporary, for example proxy(Foo())"""


class ReferenceErrorHints(BaseHintProvider):
    category = "ReferenceError"
    rules = (
        HintRule(message_contains("is not defined"), _not_defined),
        HintRule(
            message_contains("weakly-referenced object no longer exists"),
            _dead_weakref,
        ),
    )

    def generic(self, error: NormalizedError) -> str:
        return """Your code used a reference to something that doesn't exist anymore.

How to fix:
- Keep a strong reference to objects that are accessed through weak references
- Check that the referenced name or object exists before using it"""


PROVIDER = ReferenceErrorHints
