# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Dependency records shared by the manifest reader and the filters."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Dependency:
    """Package name with the version range declared in the manifest."""

    name: str
    current_version: str


@dataclass(frozen=True, slots=True)
class UpgradeCandidate:
    """Dependency paired with the version range it would be upgraded to."""

    name: str
    current_version: str
    upgraded_version: str

    @classmethod
    def from_dependency(cls, dependency: Dependency, upgraded_version: str) -> UpgradeCandidate:
        return cls(
            name=dependency.name,
            current_version=dependency.current_version,
            upgraded_version=upgraded_version,
        )

    def version_info(self) -> dict[str, Any]:
        """Return the record handed to result filters."""

        return {
            "current_version": self.current_version,
            "upgraded_version": self.upgraded_version,
        }


__all__ = ["Dependency", "UpgradeCandidate"]
