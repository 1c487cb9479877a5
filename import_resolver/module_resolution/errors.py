"""Module resolution errors."""

from collections.abc import Sequence


class ModuleResolutionError(Exception):
    """Base class for module resolution failures."""


class ModuleNotFound(ModuleResolutionError, LookupError):
    """No candidate directory contains the requested module.

    The message lists every searched base directory once, in priority order.
    """

    def __init__(self, module: str, search_path: Sequence[str]):
        self.module = module
        self.search_path = list(dict.fromkeys(search_path))
        locations = ", ".join(f"'{path}'" for path in self.search_path)
        super().__init__(f"Unable to load module '{module}'; not found in {locations}")
