# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Locate rc files by walking from a start directory towards the root."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from pathlib import Path
from typing import Final

from .errors import ConfigNotFoundError

LOGGER = logging.getLogger(__name__)

RC_FILENAMES: Final[tuple[str, ...]] = (
    ".depsiftrc",
    ".depsiftrc.json",
    ".depsiftrc.toml",
    ".depsiftrc.py",
)


def iter_search_dirs(start_dir: Path) -> Iterator[Path]:
    """Yield ``start_dir`` followed by each of its ancestors."""

    base = start_dir.resolve()
    yield base
    yield from base.parents


def find_in_ancestors(start_dir: Path, names: Sequence[str]) -> Path | None:
    """Return the first file in ``names`` found closest to ``start_dir``.

    Args:
        start_dir: Directory where the upward search begins.
        names: Candidate file names in priority order.

    Returns:
        Path | None: Canonical path of the match, or ``None`` when the walk
        reaches the filesystem root without a hit.
    """

    for directory in iter_search_dirs(start_dir):
        for name in names:
            candidate = directory / name
            if candidate.is_file():
                LOGGER.debug("found config file %s", candidate)
                return candidate.resolve()
    return None


def locate_config_file(
    start_dir: Path,
    *,
    config_file_path: Path | str | None = None,
    config_file_name: str | None = None,
) -> Path | None:
    """Resolve the rc file governing an invocation.

    Args:
        start_dir: Directory used when no explicit directory is supplied.
        config_file_path: Explicit directory to search.
        config_file_name: Explicit file name; the file must exist.

    Returns:
        Path | None: Canonical path of the rc file or ``None`` when
        auto-discovery finds nothing.

    Raises:
        ConfigNotFoundError: If ``config_file_name`` was supplied and no such
            file exists where it was expected.
    """

    if config_file_name and config_file_path is not None:
        candidate = Path(config_file_path) / config_file_name
        if not candidate.is_file():
            raise ConfigNotFoundError(config_file_name, config_file_path)
        return candidate.resolve()
    if config_file_name:
        found = find_in_ancestors(start_dir, (config_file_name,))
        if found is None:
            raise ConfigNotFoundError(config_file_name, start_dir)
        return found
    base = Path(config_file_path) if config_file_path is not None else start_dir
    return find_in_ancestors(base, RC_FILENAMES)


__all__ = ["RC_FILENAMES", "find_in_ancestors", "iter_search_dirs", "locate_config_file"]
