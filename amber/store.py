"""Locate the cache root that artifacts for a project live under."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from amber.errors import RootConflictError, RootNotFoundError
from amber.settings import get_settings

LOGGER = logging.getLogger(__name__)


def locate_root(marker: str, start: str | os.PathLike[str] | None = None) -> Path:
    """Return the nearest ``<ancestor>/<marker>`` directory at or above ``start``.

    ``start`` defaults to the working directory and is made absolute without
    resolving symlinks. A same-named entry that is not a directory stops the
    search with :class:`RootConflictError`; running out of ancestors raises
    :class:`RootNotFoundError`. Both are ``NoRepositoryError`` subclasses.
    """

    current = Path(os.path.abspath(start if start is not None else os.getcwd()))
    while True:
        candidate = current / marker
        if candidate.is_dir():
            LOGGER.debug("Found cache root %s", candidate)
            return candidate
        if candidate.exists() or candidate.is_symlink():
            raise RootConflictError(marker, candidate)
        parent = current.parent
        if parent == current:
            raise RootNotFoundError(marker)
        LOGGER.debug("No %s in %s, ascending", marker, current)
        current = parent


def cache_root(start: str | os.PathLike[str] | None = None, *, marker: str | None = None) -> Path:
    """Locate the cache root using the configured marker name."""

    return locate_root(marker or get_settings().marker, start)
