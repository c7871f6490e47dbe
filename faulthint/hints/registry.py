"""Provider registry bootstrap.

Providers are listed in PROVIDER_MODULES; each module exposes a ``PROVIDER``
class. Entries that fail to load are logged and skipped so one broken
provider never takes the registry down.
"""

import importlib
from collections.abc import Iterable, Iterator, Mapping, Sequence
from functools import lru_cache

from faulthint.hints.base import BaseHintProvider
from faulthint.hints.codes import CODE_CATEGORIES
from faulthint.hints.exceptions import ProviderLoadError, RegistryFrozenError
from faulthint.logging.logger import Log

_ERROR_SUFFIX = "Error"

PROVIDER_MODULES: tuple[str, ...] = (
    "faulthint.hints.providers.assertion_error",
    "faulthint.hints.providers.attribute_error",
    "faulthint.hints.providers.exception_group",
    "faulthint.hints.providers.file_system_error",
    "faulthint.hints.providers.index_error",
    "faulthint.hints.providers.key_error",
    "faulthint.hints.providers.module_not_found_error",
    "faulthint.hints.providers.name_error",
    "faulthint.hints.providers.networking_error",
    "faulthint.hints.providers.recursion_error",
    "faulthint.hints.providers.reference_error",
    "faulthint.hints.providers.syntax_error",
    "faulthint.hints.providers.type_error",
    "faulthint.hints.providers.unhandled_rejection",
    "faulthint.hints.providers.value_error",
    "faulthint.hints.providers.zero_division_error",
)


def lower_camel_alias(category: str) -> str | None:
    """Return ``fooError`` for ``FooError``; None for names without the suffix."""
    if not category.endswith(_ERROR_SUFFIX):
        return None
    alias = category[0].lower() + category[1:]
    return alias if alias != category else None


class ProviderRegistry(Mapping[str, BaseHintProvider]):
    """Read-only mapping from category key to hint provider.

    Keys keep registration order. Aliases point at the same provider
    instance as their canonical key.
    """

    def __init__(self) -> None:
        self._providers: dict[str, BaseHintProvider] = {}
        self._canonical: list[str] = []
        self._frozen = False

    @classmethod
    def discover(cls, modules: Sequence[str] = PROVIDER_MODULES) -> "ProviderRegistry":
        """Load every provider module and build a frozen registry."""
        provider_classes: list[type[BaseHintProvider]] = []
        for module_path in modules:
            try:
                provider_classes.append(_load_provider_class(module_path))
            except ProviderLoadError as exc:
                Log.warning(f"Skipping hint provider {module_path}: {exc}")
        return cls.from_providers(provider_classes)

    @classmethod
    def from_providers(
        cls,
        provider_classes: Iterable[type[BaseHintProvider]],
    ) -> "ProviderRegistry":
        """Build a frozen registry from provider classes, in the given order."""
        registry = cls()
        for provider_cls in provider_classes:
            try:
                provider = provider_cls(registry)
            except Exception as exc:
                Log.warning(f"Skipping hint provider {provider_cls.__name__}: {exc}")
                continue
            registry._register(provider)
        registry._freeze()
        return registry

    @property
    def categories(self) -> tuple[str, ...]:
        """Canonical categories in registration order."""
        return tuple(self._canonical)

    def _register(self, provider: BaseHintProvider) -> None:
        if self._frozen:
            raise RegistryFrozenError("Provider registry is read-only after bootstrap")
        category = provider.category
        if category in self._providers:
            Log.warning(f"Duplicate hint provider for {category}, keeping the first")
            return
        self._canonical.append(category)
        alias = lower_camel_alias(category)
        keys = [category, *([alias] if alias else []), *provider.claims]
        for key in keys:
            if key in self._providers:
                Log.debug(f"Category key {key} already registered, skipping alias")
                continue
            self._providers[key] = provider

    def _freeze(self) -> None:
        self._frozen = True
        missing = sorted(set(CODE_CATEGORIES.values()) - set(self._providers))
        for category in missing:
            Log.debug(f"No hint provider registered for mapped category {category}")
        Log.debug(
            f"Registered {len(self._canonical)} hint providers "
            f"under {len(self._providers)} category keys"
        )

    def __getitem__(self, key: str) -> BaseHintProvider:
        return self._providers[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._providers)

    def __len__(self) -> int:
        return len(self._providers)


def _load_provider_class(module_path: str) -> type[BaseHintProvider]:
    try:
        module = importlib.import_module(module_path)
    except Exception as exc:
        raise ProviderLoadError(f"import failed: {exc}") from exc

    provider_cls = getattr(module, "PROVIDER", None)
    if not isinstance(provider_cls, type) or not issubclass(provider_cls, BaseHintProvider):
        raise ProviderLoadError("module does not define a PROVIDER hint class")
    if not provider_cls.category:
        raise ProviderLoadError(f"{provider_cls.__name__} declares no category")
    return provider_cls


@lru_cache(maxsize=1)
def default_registry() -> ProviderRegistry:
    """Process-wide registry, discovered once on first use."""
    return ProviderRegistry.discover()
