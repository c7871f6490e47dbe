from faulthint.hints.base import BaseHintProvider
from faulthint.normalization.models import NormalizedError


class KeyErrorHints(BaseHintProvider):
    category = "KeyError"

    def generic(self, error: NormalizedError) -> str:
        key = error.message or "the key"
        return f"""The dictionary doesn't contain the key {key}.

Common causes:
- The key is misspelled or has different capitalization
- The key has a different type, for example "1" instead of 1
- The data came from an external source and is missing a field

How to fix:
- Use dict.get(key, default) when the key is optional
- Check membership first: if key in mapping: ...
- Print mapping.keys() to see what is actually there
- Use collections.defaultdict when missing keys should get a default"""


PROVIDER = KeyErrorHints
