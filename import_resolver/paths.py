"""Platform-aware path splitting and merging.

``split_path`` is a filesystem-logic-aware alternative to ``path.split("/")``:
it peels segments off with ``os.path.dirname`` so drive letters and the
filesystem root survive as the first component.
"""

from __future__ import annotations

import os
from collections.abc import Sequence
from pathlib import Path


def split_path(path: str | Path) -> list[str]:
    """Split a path into its components.

    Args:
        path: Path to split

    Returns:
        Components that logically represent ``path``, root first. For a
        relative path the first component is the empty string.

    Examples:
        >>> split_path("/usr/lib/R")
        ['/', 'usr', 'lib', 'R']
        >>> split_path("a/b")
        ['', 'a', 'b']
    """
    path = os.fspath(path)
    components: list[str] = []

    while (parent := os.path.dirname(path)) != path:
        components.append(os.path.basename(path))
        path = parent

    components.append(path)
    components.reverse()
    return components


def merge_path(components: Sequence[str]) -> str:
    """Merge path components back into a single path.

    Inverse of ``split_path``. The result is not guaranteed to be identical
    to the original string, only to refer to the same location given the
    same working directory.

    Args:
        components: Path components to merge

    Returns:
        Merged path, or an empty string when there are no components
    """
    if not components:
        return ""
    return os.path.join(*components)
