class HintError(Exception):
    """Base exception for all hint-related errors."""


class ProviderLoadError(HintError):
    """Raised when a hint provider entry cannot be loaded."""


class RegistryFrozenError(HintError):
    """Raised when the provider registry is modified after bootstrap."""
