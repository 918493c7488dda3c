# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Plan dependency upgrades for the filtered dependency set."""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Final

from packaging.version import InvalidVersion, Version

from .filtering import DependencyPredicate, filter_candidates, filter_dependencies
from .models import Dependency, UpgradeCandidate
from .registry import VersionResolver

_RANGE = re.compile(r"^(?P<operator>\^|~|>=|<=|>|<|=)?\s*v?(?P<version>\S+)$")
_UNPINNED: Final[frozenset[str]] = frozenset({"", "*", "x", "latest"})


def upgrade_range(current: str, latest: str) -> str | None:
    """Return ``current`` rewritten to target ``latest``.

    The range operator is preserved (``^1.0.0`` becomes ``^2.0.0``).

    Args:
        current: Version range declared in the manifest.
        latest: Latest published version.

    Returns:
        str | None: Upgraded range, or ``None`` when ``current`` is unpinned,
        not a simple range, or already at or beyond ``latest``.
    """

    spec = current.strip()
    if spec in _UNPINNED:
        return None
    match = _RANGE.match(spec)
    if match is None:
        return None
    declared = match.group("version")
    try:
        if Version(latest) <= Version(declared):
            return None
    except InvalidVersion:
        if declared == latest:
            return None
    return f"{match.group('operator') or ''}{latest}"


def plan_upgrades(
    dependencies: Iterable[Dependency],
    predicate: DependencyPredicate,
    resolver: VersionResolver,
) -> list[UpgradeCandidate]:
    """Return the upgrades accepted by ``predicate``.

    Name and version axes run before the resolver is consulted;
    ``filter_results`` runs on the resolved upgrades.

    Args:
        dependencies: Dependencies declared in the manifest.
        predicate: Compiled decision function for the run.
        resolver: Source of latest versions.

    Returns:
        list[UpgradeCandidate]: Upgrades in manifest order.
    """

    candidates: list[UpgradeCandidate] = []
    for dependency in filter_dependencies(dependencies, predicate):
        latest = resolver.latest_version(dependency.name)
        if latest is None:
            continue
        upgraded = upgrade_range(dependency.current_version, latest)
        if upgraded is not None:
            candidates.append(UpgradeCandidate.from_dependency(dependency, upgraded))
    return filter_candidates(candidates, predicate)


__all__ = ["plan_upgrades", "upgrade_range"]
