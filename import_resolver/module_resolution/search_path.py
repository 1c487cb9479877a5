"""Module search path construction.

Paths are ordered from highest to lowest priority. The calling module's own
directory always has the lowest priority.
"""

from __future__ import annotations

import logging

from ..context import CallerContext
from ..context import module_base_path
from ..settings import ImportOptions
from ..settings import environment_import_path
from ..settings import get_options

logger = logging.getLogger(__name__)

RELATIVE_MARKERS = (".", "..")


def is_relative(module: str) -> bool:
    """True if ``module`` starts with a ``.`` or ``..`` part."""
    return module.split("/", 1)[0] in RELATIVE_MARKERS


def import_search_path(context: CallerContext | None = None, options: ImportOptions | None = None) -> list[str]:
    """Return the search path for absolute imports.

    Resolution order:
    1. ``options.import_path`` if set (replaces the environment entirely)
    2. ``R_IMPORT_PATH`` entries otherwise
    3. The calling module's base directory, always last

    Args:
        context: Caller issuing the import (None means the working directory)
        options: Options snapshot (default: current process-wide options)

    Returns:
        Directories to search, highest priority first
    """
    if options is None:
        options = get_options()

    if options.is_import_path_set:
        search_path = list(options.import_path)
        source = "options"
    else:
        search_path = environment_import_path()
        source = "env"

    search_path.append(module_base_path(context))
    logger.debug(f"[module:search-path] {source} -> {search_path}")
    return search_path


def calling_module_path(context: CallerContext | None = None) -> list[str]:
    """Return the search base for relative imports: the caller's directory only."""
    return [module_base_path(context)]
