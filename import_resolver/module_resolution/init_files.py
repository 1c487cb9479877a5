"""Nested package initializer discovery.

A nested module ``a/b/c`` runs ``a/__init__.r`` then ``a/b/__init__.r``
before its own body. Only directories inside the imported module's subtree
count: ``__init__.r`` files *upstream* of the search root are disregarded.
For example, given

    a/
    ├── __init__.r
    └── b/
        └── __init__.r

and ``import_path=["a"]``, importing ``b`` runs only ``a/b/__init__.r``.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..paths import merge_path
from ..paths import split_path
from .locator import INIT_FILE_PATTERN
from .locator import list_matching_files
from .search_path import RELATIVE_MARKERS

logger = logging.getLogger(__name__)


def _package_segments(module: str) -> list[str]:
    parts = [part for part in module.split("/") if part]
    segments = parts[:-1]
    # The resolved path is normalized, leading relative markers have no
    # component of their own in it
    while segments and segments[0] in RELATIVE_MARKERS:
        segments.pop(0)
    return segments


def module_init_files(module: str, module_path: str | Path) -> dict[str, Path] | None:
    """Return a module's ``__init__.r`` files in execution order.

    Args:
        module: Qualified module name, e.g. ``a/b/c``
        module_path: Resolved module file (``.../c.r`` or ``.../c/__init__.r``)

    Returns:
        Mapping of dotted package name (``a``, ``a.b``) to initializer path,
        outermost first. None if the module is not a valid nested module,
        i.e. not every prefix level has its own ``__init__.r``.
    """
    segments = _package_segments(module)
    if not segments:
        return None

    path_parts = split_path(module_path)
    has_children = INIT_FILE_PATTERN.match(path_parts[-1]) is not None
    prefix_length = len(path_parts) - len(segments) - (2 if has_children else 1)
    base_path = merge_path(path_parts[: max(prefix_length, 0)])

    init_files: dict[str, Path] = {}
    for i in range(1, len(segments) + 1):
        directory = merge_path([base_path, *segments[:i]])
        hits = list_matching_files(directory, INIT_FILE_PATTERN)
        if not hits:
            logger.debug(f"[module:init] {module}: no __init__ file in {directory}, no chain")
            return None
        init_files[".".join(segments[:i])] = Path(hits[0]).resolve()

    return init_files
