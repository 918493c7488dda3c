# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Version sources consulted for the latest release of a package."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Protocol, runtime_checkable


class RegistryError(Exception):
    """Raised when a registry cannot be read."""


@runtime_checkable
class VersionResolver(Protocol):
    """Source of the latest published version for a package name."""

    def latest_version(self, name: str) -> str | None:
        """Return the latest version of ``name`` or ``None`` when unknown."""
        ...


class StaticRegistry:
    """Registry backed by an in-memory mapping of package names to versions."""

    def __init__(self, versions: Mapping[str, str]) -> None:
        self._versions = dict(versions)

    @classmethod
    def from_file(cls, path: Path) -> StaticRegistry:
        """Load a registry from a JSON object mapping names to versions.

        Args:
            path: JSON file location.

        Returns:
            StaticRegistry: Registry holding the file's entries.

        Raises:
            RegistryError: If the file is missing or malformed.
        """

        try:
            with path.open("r", encoding="utf-8") as handle:
                data = json.load(handle)
        except OSError as exc:
            raise RegistryError(f"Unable to read registry {path}: {exc}") from exc
        except json.JSONDecodeError as exc:
            raise RegistryError(f"Invalid registry {path}: {exc}") from exc
        if not isinstance(data, Mapping):
            raise RegistryError(f"Invalid registry {path}: top-level value must be an object")
        invalid = sorted(name for name, version in data.items() if not isinstance(version, str))
        if invalid:
            raise RegistryError(f"Invalid registry {path}: versions must be strings ({', '.join(invalid)})")
        return cls(data)

    def latest_version(self, name: str) -> str | None:
        return self._versions.get(name)


__all__ = ["RegistryError", "StaticRegistry", "VersionResolver"]
