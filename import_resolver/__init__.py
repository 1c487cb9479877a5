"""Locate ``.r`` module source files on a prioritized search path."""

from .context import CallerContext
from .module_resolution import ModuleNotFound
from .module_resolution import ModuleResolutionError
from .module_resolution import ModuleResolver
from .module_resolution import ResolvedModule
from .module_resolution import find_module
from .module_resolution import import_search_path
from .module_resolution import module_init_files
from .module_resolution import resolve_module
from .paths import merge_path
from .paths import split_path
from .settings import ImportOptions
from .settings import get_options
from .settings import override_options
from .settings import set_options

__all__ = [
    "CallerContext",
    "ImportOptions",
    "ModuleNotFound",
    "ModuleResolutionError",
    "ModuleResolver",
    "ResolvedModule",
    "find_module",
    "get_options",
    "import_search_path",
    "merge_path",
    "module_init_files",
    "override_options",
    "resolve_module",
    "set_options",
    "split_path",
]
