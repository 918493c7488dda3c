# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Apply a compiled predicate across dependency lists."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TypeVar

from ..models import Dependency, UpgradeCandidate
from .predicates import DependencyPredicate

ItemT = TypeVar("ItemT")


def apply(items: Iterable[ItemT], decide: Callable[[ItemT], bool]) -> list[ItemT]:
    """Return the items accepted by ``decide`` in their original order."""

    return [item for item in items if decide(item)]


def filter_dependencies(
    dependencies: Iterable[Dependency],
    predicate: DependencyPredicate,
) -> list[Dependency]:
    """Keep dependencies accepted by the name and version axes."""

    return apply(dependencies, lambda dep: predicate.matches_dependency(dep.name, dep.current_version))


def filter_candidates(
    candidates: Iterable[UpgradeCandidate],
    predicate: DependencyPredicate,
) -> list[UpgradeCandidate]:
    """Keep resolved upgrades accepted by ``filter_results``."""

    return apply(candidates, lambda candidate: predicate.matches_result(candidate.name, candidate.version_info()))


__all__ = ["apply", "filter_candidates", "filter_dependencies"]
