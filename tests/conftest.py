import io

import pytest
from rich.console import Console

from faulthint.hints.registry import ProviderRegistry, default_registry
from faulthint.resolver.resolver import HintResolver


@pytest.fixture()
def registry() -> ProviderRegistry:
    return default_registry()


@pytest.fixture()
def resolver(registry: ProviderRegistry) -> HintResolver:
    return HintResolver(registry)


@pytest.fixture()
def console_buffer() -> io.StringIO:
    return io.StringIO()


@pytest.fixture()
def console(console_buffer: io.StringIO) -> Console:
    """Plain-text rich console writing into ``console_buffer``."""
    return Console(file=console_buffer, no_color=True, width=200, highlight=False)
