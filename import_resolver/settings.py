"""Process-wide import options.

Two ways of configuring the module search path:
- ``ImportOptions.import_path`` (set via ``set_options``), the primary option
- ``R_IMPORT_PATH`` environment variable, consulted if and only if the
  primary option is unset

Options are held as an immutable snapshot. Resolution reads the snapshot once
per call, so a concurrent ``set_options`` is observed either entirely or not
at all.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_validator

logger = logging.getLogger(__name__)

IMPORT_PATH_ENV = "R_IMPORT_PATH"


class ImportOptions(BaseModel):
    """Configuration consulted when building the module search path."""

    model_config = ConfigDict(frozen=True)

    import_path: list[str] | None = Field(
        None, description="Search path directories, highest priority first. Replaces R_IMPORT_PATH when set."
    )

    @field_validator("import_path", mode="before")
    @classmethod
    def _split_string_path(cls, value: Any) -> Any:
        # A single string is treated like a PATH-style variable
        if isinstance(value, str):
            return [entry for entry in value.split(os.pathsep) if entry]
        return value

    @property
    def is_import_path_set(self) -> bool:
        """True if the primary option overrides the environment fallback."""
        return bool(self.import_path)


def environment_import_path() -> list[str]:
    """Return the colon-separated ``R_IMPORT_PATH`` entries.

    Empty entries are dropped, so an unset or empty variable yields ``[]``.
    """
    value = os.environ.get(IMPORT_PATH_ENV, "")
    return [entry for entry in value.split(":") if entry]


_options = ImportOptions()


def get_options() -> ImportOptions:
    """Return the current process-wide options snapshot."""
    return _options


def set_options(**changes: Any) -> ImportOptions:
    """Replace the process-wide options.

    Args:
        **changes: Fields to change relative to the current snapshot

    Returns:
        The previous snapshot, so callers can restore it

    Raises:
        pydantic.ValidationError: If a value is invalid
    """
    global _options
    previous = _options
    _options = ImportOptions.model_validate({**previous.model_dump(), **changes})
    logger.debug(f"[module:options] import_path={_options.import_path}")
    return previous


@contextmanager
def override_options(**changes: Any) -> Iterator[ImportOptions]:
    """Temporarily change the process-wide options.

    Example:
        >>> with override_options(import_path=["lib"]):
        ...     find_module("utils")
    """
    global _options
    previous = set_options(**changes)
    try:
        yield _options
    finally:
        _options = previous
