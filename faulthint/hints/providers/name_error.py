from faulthint.hints.base import BaseHintProvider
from faulthint.hints.rules import HintRule, first_group, message_contains, message_matches
from faulthint.normalization.models import NormalizedError


def undefined_name(message: str) -> str:
    """Pull the missing name out of ``name 'x' is not defined`` style messages."""
    quoted = first_group(r"name '([^']+)' is not defined", message, "")
    if quoted:
        return quoted
    words = message.split()
    return words[0].strip("'\"") if words else "name"


def undefined_name_hint(name: str) -> str:
    return f"""The name "{name}" doesn't exist in the current scope.

Common causes:
- The variable was never assigned before this line ran
- The name is misspelled (Python names are case-sensitive)
- The name lives in another scope, for example inside a function
- You forgot to import a module, class or function
- The assignment happens later in the file than the use

How to fix:
- Assign the variable before using it: {name} = ...
- Check the spelling against where the name is defined
- If it comes from another module, add: from package.module import {name}
- Move the definition above the first use
- For builtins, check you have not shadowed or deleted them"""


def _not_defined(error: NormalizedError) -> str:
    return undefined_name_hint(undefined_name(error.message))


def _unbound_local(error: NormalizedError) -> str:
    name = first_group(r"variable '([^']+)'", error.message, "variable")
    return f"""The local variable "{name}" is read before a value is assigned to it.

Python decides at compile time that "{name}" is local to the function because
it is assigned somewhere in the function body. Any read before that
assignment fails, even if a global with the same name exists.

How to fix:
- Assign {name} on every path before reading it
- If you meant the module-level variable, add: global {name}
- If you meant the enclosing function's variable, add: nonlocal {name}
- Rename the local variable so it no longer shadows the outer one"""


def _free_variable(error: NormalizedError) -> str:
    name = first_group(r"variable '([^']+)'", error.message, "variable")
    return f"""A nested function reads "{name}" from an enclosing scope before it has a value.

How to fix:
- Assign {name} in the enclosing function before calling the inner function
- Pass {name} to the inner function as an argument instead
- Check that the inner function is not called earlier than you expect"""


class NameErrorHints(BaseHintProvider):
    category = "NameError"
    claims = ("UnboundLocalError",)
    rules = (
        HintRule(message_contains("is not defined"), _not_defined),
        HintRule(
            message_matches(r"free variable|cannot access free variable"),
            _free_variable,
        ),
        HintRule(
            message_matches(r"referenced before assignment|not associated with a value"),
            _unbound_local,
        ),
    )

    def generic(self, error: NormalizedError) -> str:
        return """Python could not find a name your code refers to.

How to fix:
- Check that every variable is assigned before it is used
- Check the spelling and capitalization of the name
- Make sure the module or object it comes from is imported"""


PROVIDER = NameErrorHints
