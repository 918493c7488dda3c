# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Exceptions raised while locating, loading, and merging configuration."""

from __future__ import annotations

from pathlib import Path


class ConfigError(Exception):
    """Raised when configuration input is invalid."""


class ConfigNotFoundError(ConfigError):
    """Raised when an explicitly named config file does not exist."""

    def __init__(self, file_name: str, directory: Path | str) -> None:
        """Create the error for ``file_name`` searched within ``directory``.

        Args:
            file_name: Config file name supplied by the invoker.
            directory: Directory that was searched for the file.
        """

        super().__init__(f"Config file {file_name} not found in {directory}")
        self.file_name = file_name
        self.directory = str(directory)


class ConfigParseError(ConfigError):
    """Raised when a config file exists but its content cannot be used."""

    def __init__(self, path: Path | str, reason: str) -> None:
        """Create the error for ``path`` with a human-readable ``reason``.

        Args:
            path: Config file whose content was rejected.
            reason: Explanation of why parsing failed.
        """

        super().__init__(f"Invalid config file {path}: {reason}")
        self.path = str(path)
        self.reason = reason


__all__ = ("ConfigError", "ConfigNotFoundError", "ConfigParseError")
