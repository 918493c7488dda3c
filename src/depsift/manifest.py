# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Read dependency declarations from ``package.json`` content."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Final, TextIO

from .models import Dependency

DEPENDENCY_SECTIONS: Final[tuple[str, ...]] = (
    "dependencies",
    "devDependencies",
    "optionalDependencies",
)
DEFAULT_PACKAGE_FILE: Final[str] = "package.json"


class ManifestError(Exception):
    """Raised when the package manifest is missing or malformed."""


@dataclass(frozen=True, slots=True)
class Manifest:
    """Parsed manifest document and its declared dependencies."""

    data: Mapping[str, Any]
    dependencies: tuple[Dependency, ...] = field(default_factory=tuple)
    source: str = "<stdin>"

    def with_versions(self, versions: Mapping[str, str]) -> dict[str, Any]:
        """Return a copy of the document with ``versions`` applied.

        Args:
            versions: Upgraded version ranges keyed by package name.

        Returns:
            dict[str, Any]: Manifest data with matching entries replaced in
            every dependency section.
        """

        document = dict(self.data)
        for section in DEPENDENCY_SECTIONS:
            entries = document.get(section)
            if not isinstance(entries, Mapping):
                continue
            document[section] = {name: versions.get(name, version) for name, version in entries.items()}
        return document


def parse_manifest(text: str, *, source: str = "<stdin>") -> Manifest:
    """Parse manifest ``text`` into a :class:`Manifest`.

    Dependencies are collected section by section in declaration order; a
    name declared in several sections is reported once.

    Args:
        text: JSON manifest content.
        source: Label used in error messages.

    Returns:
        Manifest: Parsed manifest.

    Raises:
        ManifestError: If the content is not a JSON object or a section is
            malformed.
    """

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ManifestError(f"Invalid package manifest {source}: {exc}") from exc
    if not isinstance(data, Mapping):
        raise ManifestError(f"Invalid package manifest {source}: top-level value must be an object")
    dependencies: list[Dependency] = []
    seen: set[str] = set()
    for section in DEPENDENCY_SECTIONS:
        entries = data.get(section)
        if entries is None:
            continue
        if not isinstance(entries, Mapping):
            raise ManifestError(f"Invalid package manifest {source}: {section} must be an object")
        for name, version in entries.items():
            if not isinstance(version, str):
                raise ManifestError(f"Invalid package manifest {source}: {section}.{name} must be a string")
            if name in seen:
                continue
            seen.add(name)
            dependencies.append(Dependency(name=name, current_version=version))
    return Manifest(data=data, dependencies=tuple(dependencies), source=source)


def read_manifest(path: Path) -> Manifest:
    """Read and parse the manifest stored at ``path``."""

    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ManifestError(f"No package manifest found at {path}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ManifestError(f"Unable to read package manifest {path}: {exc}") from exc
    return parse_manifest(text, source=str(path))


def read_manifest_stream(stream: TextIO, *, source: str = "<stdin>") -> Manifest:
    """Read and parse a manifest from an open text ``stream`` such as stdin."""

    try:
        text = stream.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise ManifestError(f"Unable to read package manifest {source}: {exc}") from exc
    return parse_manifest(text, source=source)


def manifest_path(*, cwd: str | None, package_file: str | None) -> Path:
    """Return the manifest location implied by ``cwd`` and ``package_file``."""

    base = Path(cwd) if cwd else Path.cwd()
    if package_file:
        candidate = Path(package_file)
        return candidate if candidate.is_absolute() else base / candidate
    return base / DEFAULT_PACKAGE_FILE


__all__ = [
    "DEFAULT_PACKAGE_FILE",
    "DEPENDENCY_SECTIONS",
    "Manifest",
    "ManifestError",
    "manifest_path",
    "parse_manifest",
    "read_manifest",
    "read_manifest_stream",
]
