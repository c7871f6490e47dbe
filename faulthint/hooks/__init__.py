from faulthint.hooks.handler import FatalErrorHandler
from faulthint.hooks.install import InstalledHooks, attach_loop, install_hooks

__all__ = ["FatalErrorHandler", "InstalledHooks", "attach_loop", "install_hooks"]
