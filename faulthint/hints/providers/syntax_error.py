from faulthint.hints.base import BaseHintProvider
from faulthint.hints.rules import HintRule, message_contains, message_matches
from faulthint.normalization.models import NormalizedError


def _location(error: NormalizedError) -> str:
    original = error.original
    if isinstance(original, SyntaxError) and original.lineno:
        filename = original.filename or "<unknown>"
        return f" ({filename}, line {original.lineno})"
    return ""


def _indentation(error: NormalizedError) -> str:
    return f"""The indentation of a line doesn't match the surrounding block{_location(error)}.

Python uses indentation to group statements, so every line in a block must be
indented by the same amount.

How to fix:
- Indent with 4 spaces and never mix tabs and spaces
- Check the line above: a statement ending in ':' must be followed by an indented block
- Let your editor convert tabs to spaces and show whitespace"""


def _unclosed(error: NormalizedError) -> str:
    return f"""A bracket, parenthesis or string was opened but never closed{_location(error)}.

How to fix:
- Count the opening and closing (), [] and {{}} on the reported line and above it
- Check for a missing closing quote on string literals
- Look at the line before the reported one; the real problem is often there"""


def _missing_colon(error: NormalizedError) -> str:
    return f"""A statement that starts a block is missing its colon{_location(error)}.

How to fix:
- Add ':' at the end of if, elif, else, for, while, def, class, with and try lines"""


def _assignment_target(error: NormalizedError) -> str:
    return f"""You're trying to assign a value to something that can't be assigned to{_location(error)}.

How to fix:
- Use == for comparison and = only for assignment
- Assign to a variable name, attribute or item, not to a function call or literal
- Use := only inside expressions such as if or while conditions"""


class SyntaxErrorHints(BaseHintProvider):
    category = "SyntaxError"
    claims = ("IndentationError", "TabError")
    rules = (
        HintRule(message_matches(r"indent|inconsistent use of tabs"), _indentation),
        HintRule(
            message_matches(r"was never closed|unterminated|EOF while scanning|unexpected EOF"),
            _unclosed,
        ),
        HintRule(message_contains("expected ':'"), _missing_colon),
        HintRule(message_matches(r"cannot assign to|cannot delete"), _assignment_target),
    )

    def generic(self, error: NormalizedError) -> str:
        return f"""Python couldn't parse your code{_location(error)}.

How to fix:
- Look at the reported line and the line before it
- Check for unbalanced brackets and quotes
- Check that keywords are spelled correctly and blocks end with ':'
- Make sure the code is valid for your Python version"""


PROVIDER = SyntaxErrorHints
