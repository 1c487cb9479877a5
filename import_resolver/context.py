"""Caller identity supplied by the import-statement layer.

Resolution never inspects the live call stack. Whoever issues an import
passes a ``CallerContext`` describing the importing module; its base
directory anchors relative imports and is the lowest-priority search path
entry for absolute ones.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class CallerContext:
    """The module on whose behalf a resolution runs.

    Attributes:
        base_dir: Directory the importing module was loaded from
        name: Qualified module name of the importer, if it is a module
    """

    base_dir: Path
    name: str | None = None

    def __post_init__(self):
        object.__setattr__(self, "base_dir", Path(self.base_dir).absolute())

    @classmethod
    def for_file(cls, path: str | Path, name: str | None = None) -> CallerContext:
        """Build the context of a module loaded from ``path``."""
        return cls(base_dir=Path(path).absolute().parent, name=name)


def module_base_path(context: CallerContext | None = None) -> str:
    """Return the base directory of the calling module.

    Falls back to the working directory when the caller is not a module.
    """
    if context is None:
        return os.getcwd()
    return str(context.base_dir)
