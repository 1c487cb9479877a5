"""Module resolver - maps a qualified module name to its source file.

Resolution order (first match wins):
1. Each search path entry joined with the module's path prefix, by priority
2. The bare path prefix (supports absolute filesystem names)

Relative names (``./x``, ``../x``) search only the caller's own directory.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from ..context import CallerContext
from ..settings import ImportOptions
from .errors import ModuleNotFound
from .init_files import module_init_files
from .locator import ModuleFileLocator
from .search_path import calling_module_path
from .search_path import import_search_path
from .search_path import is_relative

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedModule:
    """A resolved module, ready to be sourced.

    Attributes:
        name: Qualified module name as requested
        path: Absolute path of the module file
        init_files: Package initializers to run first, outermost first, or
            None if the module is not a nested package module
    """

    name: str
    path: Path
    init_files: dict[str, Path] | None = None


class ModuleResolver:
    """Resolves module names against the search path.

    Options are snapshotted once per call. Pass ``options`` to pin a snapshot
    for every call made through this resolver.
    """

    def __init__(self, options: ImportOptions | None = None):
        self.options = options

    def resolve(self, module: str, context: CallerContext | None = None) -> Path:
        """Find a module's source file.

        Args:
            module: Qualified module name, e.g. ``utils/strings`` or ``./helpers``
            context: Caller issuing the import (None means the working directory)

        Returns:
            Absolute, normalized path of ``<leaf>.r`` or ``<leaf>/__init__.r``

        Raises:
            ModuleNotFound: No candidate directory contains the module
        """
        # Path prefix from all-but-last parts, file name from the last part
        suffix = os.path.splitext(os.path.basename(module))[0]
        module_dir = os.path.dirname(module) or "."

        if is_relative(module):
            search_path = calling_module_path(context)
        else:
            search_path = import_search_path(context, self.options)

        candidates = [os.path.join(path, module_dir) for path in search_path]
        candidates.append(module_dir)

        locator = ModuleFileLocator(suffix)
        for candidate in candidates:
            if hit := locator.locate(candidate):
                resolved = Path(hit).resolve()
                logger.debug(f"[module:resolve] {module} -> {resolved}")
                return resolved

        logger.debug(f"[module:resolve] {module} not found in {search_path}")
        raise ModuleNotFound(module, search_path)

    def resolve_module(self, module: str, context: CallerContext | None = None) -> ResolvedModule:
        """Resolve a module together with its package initializers."""
        path = self.resolve(module, context)
        return ResolvedModule(name=module, path=path, init_files=module_init_files(module, path))

    def __repr__(self) -> str:
        return f"ModuleResolver(options={self.options!r})"


def find_module(
    module: str, context: CallerContext | None = None, options: ImportOptions | None = None
) -> Path:
    """Find a module's source file using the process-wide options.

    See ``ModuleResolver.resolve``.
    """
    return ModuleResolver(options).resolve(module, context)


def resolve_module(
    module: str, context: CallerContext | None = None, options: ImportOptions | None = None
) -> ResolvedModule:
    """Resolve a module and its initializer chain.

    See ``ModuleResolver.resolve_module``.
    """
    return ModuleResolver(options).resolve_module(module, context)
