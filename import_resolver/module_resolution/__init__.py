"""Module resolution - search path, file lookup and initializer chains.

- ModuleResolver / find_module: qualified name -> module source file
- module_init_files: nested package initializers to run before a module
- import_search_path: ordered directories consulted for absolute imports
"""

from .errors import ModuleNotFound
from .errors import ModuleResolutionError
from .init_files import module_init_files
from .locator import ModuleFileLocator
from .resolvers import ModuleResolver
from .resolvers import ResolvedModule
from .resolvers import find_module
from .resolvers import resolve_module
from .search_path import calling_module_path
from .search_path import import_search_path
from .search_path import is_relative

__all__ = [
    "ModuleFileLocator",
    "ModuleNotFound",
    "ModuleResolutionError",
    "ModuleResolver",
    "ResolvedModule",
    "calling_module_path",
    "find_module",
    "import_search_path",
    "is_relative",
    "module_init_files",
    "resolve_module",
]
