from faulthint.hints.base import BaseHintProvider
from faulthint.hints.rules import HintRule, first_group, message_contains, message_matches
from faulthint.normalization.models import NormalizedError


def _invalid_literal(error: NormalizedError) -> str:
    literal = first_group(r": (.+)$", error.message, "the text")
    return f"""The text {literal} can't be converted to a number.

How to fix:
- Strip whitespace and units before converting: int(text.strip())
- Validate input with str.isdigit() or a try/except ValueError block
- Use float() for values with a decimal point"""


def _unpacking(_error: NormalizedError) -> str:
    return """The number of variables on the left doesn't match the number of values.

How to fix:
- Print the value being unpacked and count its items
- Use a starred target for the rest: first, *rest = values
- Check that each item in the loop has the shape you expect"""


def _encoding(_error: NormalizedError) -> str:
    return """Text couldn't be decoded or encoded with the chosen character encoding.

How to fix:
- Open files with an explicit encoding: open(path, encoding="utf-8")
- Check the real encoding of the data source
- Use errors="replace" only when losing characters is acceptable"""


class ValueErrorHints(BaseHintProvider):
    category = "ValueError"
    claims = ("UnicodeDecodeError", "UnicodeEncodeError")
    rules = (
        HintRule(message_contains("invalid literal for", "could not convert"), _invalid_literal),
        HintRule(message_matches(r"too many values to unpack|not enough values to unpack"), _unpacking),
        HintRule(message_contains("codec can't"), _encoding),
    )

    def generic(self, error: NormalizedError) -> str:
        return """A function received an argument of the right type but an invalid value.

How to fix:
- Check the value against what the function accepts
- Validate user input before passing it on
- Read the error message for the exact value that was rejected"""


PROVIDER = ValueErrorHints
