"""Locate a module's source file inside one candidate directory."""

from __future__ import annotations

import logging
import os
import re

logger = logging.getLogger(__name__)

INIT_FILE_PATTERN = re.compile(r"^__init__\.[rR]$")


def _extension_order(filename: str) -> tuple[bool, str]:
    # Lowercase extension first, then ordinal order
    return (not filename.endswith(".r"), filename)


def list_matching_files(directory: str, pattern: re.Pattern[str]) -> list[str]:
    """List files in ``directory`` whose name matches ``pattern``.

    Args:
        directory: Directory to scan
        pattern: Compiled regex matched against each entry name

    Returns:
        Full paths of the matches, ``.r`` before ``.R``. Empty if the
        directory does not exist.
    """
    if not os.path.isdir(directory):
        return []

    names = sorted((name for name in os.listdir(directory) if pattern.match(name)), key=_extension_order)
    return [os.path.join(directory, name) for name in names]


class ModuleFileLocator:
    """Finds ``<suffix>.r`` or ``<suffix>/__init__.r`` in a directory.

    The flat file always takes precedence over the package-style file in the
    same directory.
    """

    def __init__(self, suffix: str):
        self.suffix = suffix
        self.file_pattern = re.compile(rf"^{re.escape(suffix)}\.[rR]$")

    def locate(self, directory: str) -> str | None:
        """Return the module file inside ``directory``, or None."""
        if hits := list_matching_files(directory, self.file_pattern):
            return hits[0]

        if hits := list_matching_files(os.path.join(directory, self.suffix), INIT_FILE_PATTERN):
            logger.debug(f"[module:locate] {self.suffix} -> package in {directory}")
            return hits[0]

        return None

    def __repr__(self) -> str:
        return f"ModuleFileLocator({self.suffix!r})"
