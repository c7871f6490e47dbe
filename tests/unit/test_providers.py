"""Behaviour of the shipped hint providers."""

import errno
import weakref

import pytest

from faulthint.hints.registry import PROVIDER_MODULES, ProviderRegistry, default_registry
from faulthint.normalization.models import NormalizedError
from faulthint.normalization.normalizer import normalize_error
from faulthint.resolver.fix_extractor import FALLBACK_FIX, FixExtractor
from faulthint.resolver.resolver import HintResolver, Tier


def _make_error(category: str, message: str = "", code: str | None = None) -> NormalizedError:
    return NormalizedError(category=category, message=message, code=code)


def _hint(registry: ProviderRegistry, category: str, message: str, code: str | None = None) -> str:
    text = registry[category].hint(_make_error(category, message, code))
    assert text
    return text


class TestEveryProvider:
    @pytest.mark.parametrize("key", list(default_registry()))
    def test_category_match_returns_text(self, key: str, resolver: HintResolver) -> None:
        resolution = resolver.explain(_make_error(key, "plain message"))
        assert resolution.tier is Tier.CANONICAL
        assert resolution.text

    @pytest.mark.parametrize("key", list(default_registry()))
    def test_empty_message_returns_text(self, key: str, registry: ProviderRegistry) -> None:
        assert registry[key].hint(_make_error(key))

    @pytest.mark.parametrize("category", default_registry().categories)
    def test_generic_text_has_fix_section(self, category: str, registry: ProviderRegistry) -> None:
        text = registry[category].generic(_make_error(category))
        fixes = FixExtractor().extract(text)
        assert fixes != [FALLBACK_FIX]
        assert all(line.startswith("-") for line in fixes)

    def test_every_module_registered(self, registry: ProviderRegistry) -> None:
        assert len(registry.categories) == len(PROVIDER_MODULES)


class TestNameError:
    def test_python_message(self, registry: ProviderRegistry) -> None:
        text = _hint(registry, "NameError", "name 'totl' is not defined")
        assert 'The name "totl" doesn\'t exist' in text
        assert "totl = ..." in text

    def test_free_variable(self, registry: ProviderRegistry) -> None:
        message = "cannot access free variable 'x' where it is not associated with a value in enclosing scope"
        text = _hint(registry, "NameError", message)
        assert "enclosing scope" in text


class TestReferenceError:
    def test_dead_weak_reference(self, registry: ProviderRegistry) -> None:
        class Target:
            pass

        proxy = weakref.proxy(Target())
        try:
            str(proxy)
        except ReferenceError as exc:
            error = normalize_error(exc)
        text = registry["ReferenceError"].hint(error)
        assert text is not None
        assert "garbage collected" in text


class TestTypeError:
    @pytest.mark.parametrize(
        ("message", "expected"),
        [
            ("'int' object is not callable", "isn't a function"),
            ("'NoneType' object is not subscriptable", "returned None"),
            ("'int' object is not iterable", "isn't an iterable object"),
            ("'set' object is not subscriptable", "doesn't support indexing"),
            ('can only concatenate str (not "int") to str', "incompatible types"),
            ("greet() missing 1 required positional argument: 'name'", "greet()"),
        ],
    )
    def test_sub_patterns(self, message: str, expected: str, registry: ProviderRegistry) -> None:
        assert expected in _hint(registry, "TypeError", message)


class TestAttributeError:
    def test_none_attribute(self, registry: ProviderRegistry) -> None:
        text = _hint(registry, "AttributeError", "'NoneType' object has no attribute 'split'")
        assert 'reading "split" from None' in text

    def test_module_attribute(self, registry: ProviderRegistry) -> None:
        text = _hint(registry, "AttributeError", "module 'json' has no attribute 'loadz'")
        assert 'The module "json" has no attribute "loadz"' in text

    def test_object_attribute(self, registry: ProviderRegistry) -> None:
        text = _hint(registry, "AttributeError", "'list' object has no attribute 'push'")
        assert 'type "list"' in text


class TestModuleNotFoundError:
    def test_relative_import(self, registry: ProviderRegistry) -> None:
        text = _hint(registry, "ModuleNotFoundError", "No module named '.helpers'")
        assert "relative import" in text

    def test_stdlib_submodule(self, registry: ProviderRegistry) -> None:
        text = _hint(registry, "ModuleNotFoundError", "No module named 'json.missing'")
        assert "standard library" in text

    def test_cannot_import_name(self, registry: ProviderRegistry) -> None:
        text = _hint(
            registry,
            "ImportError",
            "cannot import name 'thing' from 'pkg.mod' (/src/pkg/mod.py)",
        )
        assert '"pkg.mod" was found' in text
        assert "circular import" in text

    def test_generic_without_name(self, registry: ProviderRegistry) -> None:
        text = _hint(registry, "ModuleNotFoundError", "import failed")
        assert "couldn't find a module" in text


class TestFileSystemError:
    def test_not_found_by_code(self, registry: ProviderRegistry) -> None:
        exc = FileNotFoundError(errno.ENOENT, "No such file or directory", "config.yml")
        text = registry["FileSystemError"].hint(normalize_error(exc))
        assert text is not None
        assert "can't find the file or directory: config.yml" in text

    def test_permission_by_message(self, registry: ProviderRegistry) -> None:
        text = _hint(registry, "FileSystemError", "[Errno 13] Permission denied: '/etc/shadow'")
        assert "/etc/shadow" in text
        assert "permission" in text

    def test_exists(self, registry: ProviderRegistry) -> None:
        text = _hint(registry, "FileSystemError", "mkdir failed", "EEXIST")
        assert "already exists" in text

    def test_generic_mentions_code(self, registry: ProviderRegistry) -> None:
        text = _hint(registry, "FileSystemError", "odd failure", "EBUSY")
        assert "(EBUSY)" in text


class TestNetworkingError:
    @pytest.mark.parametrize(
        ("code", "expected"),
        [
            ("ECONNREFUSED", "connection was refused"),
            ("EADDRINUSE", "already in use"),
            ("EAI_NONAME", "couldn't be resolved"),
            ("ETIMEDOUT", "timed out"),
            ("ECONNRESET", "closed the connection"),
        ],
    )
    def test_codes(self, code: str, expected: str, registry: ProviderRegistry) -> None:
        assert expected in _hint(registry, "NetworkingError", "failure", code)


class TestValueError:
    def test_invalid_literal(self, registry: ProviderRegistry) -> None:
        text = _hint(registry, "ValueError", "invalid literal for int() with base 10: 'abc'")
        assert "'abc' can't be converted" in text

    def test_unpacking(self, registry: ProviderRegistry) -> None:
        text = _hint(registry, "ValueError", "too many values to unpack (expected 2)")
        assert "first, *rest = values" in text


class TestSyntaxError:
    def test_location_from_original(self, registry: ProviderRegistry) -> None:
        try:
            compile("if True\n    pass\n", "broken.py", "exec")
        except SyntaxError as exc:
            error = normalize_error(exc)
        text = registry["SyntaxError"].hint(error)
        assert text is not None
        assert "broken.py, line 1" in text

    def test_indentation(self, registry: ProviderRegistry) -> None:
        text = _hint(registry, "IndentationError", "expected an indented block")
        assert "indentation" in text


class TestExceptionGroup:
    def test_lists_members(self, registry: ProviderRegistry) -> None:
        group = ExceptionGroup("many", [ValueError("a"), KeyError("b"), ValueError("c")])
        text = registry["ExceptionGroup"].hint(normalize_error(group))
        assert text is not None
        assert "3 exception(s): KeyError, ValueError" in text


class TestKeyError:
    def test_mentions_key(self, registry: ProviderRegistry) -> None:
        text = registry["KeyError"].hint(normalize_error(KeyError("user_id")))
        assert text is not None
        assert "'user_id'" in text
