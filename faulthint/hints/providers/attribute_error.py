from faulthint.hints.base import BaseHintProvider
from faulthint.hints.rules import HintRule, first_group, message_contains
from faulthint.normalization.models import NormalizedError


def _attribute(message: str) -> str:
    return first_group(r"attribute '([^']+)'", message, "attribute")


def _none_attribute(error: NormalizedError) -> str:
    attribute = _attribute(error.message)
    return f"""You're reading "{attribute}" from None.

The object you expected was never created, or a function returned None
instead of a value.

How to fix:
- Find where the variable was set and check that it is not None
- Make sure the function that produced it has a return statement
- Guard optional values: if obj is not None: obj.{attribute}"""


def _module_attribute(error: NormalizedError) -> str:
    module = first_group(r"module '([^']+)'", error.message, "module")
    attribute = _attribute(error.message)
    return f"""The module "{module}" has no attribute "{attribute}".

Common causes:
- A local file named {module}.py shadows the real module
- The name was removed or renamed in the installed version
- A submodule has to be imported explicitly: import {module}.submodule

How to fix:
- Look for local files that share the module's name and rename them
- Check the module's documentation for the current name
- Import the submodule that defines {attribute}"""


def _object_attribute(error: NormalizedError) -> str:
    kind = first_group(r"'([^']+)' object has no attribute", error.message, "object")
    attribute = _attribute(error.message)
    return f"""Objects of type "{kind}" don't have an attribute called "{attribute}".

How to fix:
- Check the spelling of {attribute}
- List what is available with dir(obj)
- Make sure the object is the type you expect with type(obj)
- If the attribute is set in __init__, check that __init__ ran"""


class AttributeErrorHints(BaseHintProvider):
    category = "AttributeError"
    rules = (
        HintRule(message_contains("'NoneType' object"), _none_attribute),
        HintRule(message_contains("module '"), _module_attribute),
        HintRule(message_contains("object has no attribute"), _object_attribute),
    )

    def generic(self, error: NormalizedError) -> str:
        return """Your code accessed an attribute that doesn't exist on the object.

How to fix:
- Check the attribute name for typos
- Inspect the object with dir(obj) and type(obj)
- Make sure the object was fully initialized"""


PROVIDER = AttributeErrorHints
