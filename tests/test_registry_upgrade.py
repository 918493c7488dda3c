# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for the static registry and upgrade planning."""

from __future__ import annotations

from pathlib import Path

import pytest

from depsift.filtering import PredicateError, compile_predicate
from depsift.models import Dependency, UpgradeCandidate
from depsift.registry import RegistryError, StaticRegistry, VersionResolver
from depsift.upgrade import plan_upgrades, upgrade_range


@pytest.mark.parametrize(
    ("current", "latest", "expected"),
    [
        ("1.0.0", "99.9.9", "99.9.9"),
        ("^1.0.0", "2.1.0", "^2.1.0"),
        ("~0.1.0", "0.2.0", "~0.2.0"),
        (">=1.0.0", "1.5.0", ">=1.5.0"),
        ("v1.0.0", "1.2.0", "1.2.0"),
        ("1", "99.9.9", "99.9.9"),
        ("2.0.0", "2.0.0", None),
        ("3.0.0", "2.0.0", None),
        ("*", "2.0.0", None),
        ("latest", "2.0.0", None),
        ("1.0.0 - 2.0.0", "3.0.0", None),
    ],
)
def test_upgrade_range(current: str, latest: str, expected: str | None) -> None:
    assert upgrade_range(current, latest) == expected


def test_static_registry_from_file(registry_file: Path) -> None:
    registry = StaticRegistry.from_file(registry_file)

    assert isinstance(registry, VersionResolver)
    assert registry.latest_version("axios") == "99.9.9"
    assert registry.latest_version("unknown") is None


@pytest.mark.parametrize(
    ("content", "message"),
    [
        ("{", "Invalid registry"),
        ("[]", "top-level value must be an object"),
        ('{"a": 1}', "versions must be strings"),
    ],
)
def test_static_registry_rejects_malformed_files(tmp_path: Path, content: str, message: str) -> None:
    path = tmp_path / "registry.json"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(RegistryError, match=message):
        StaticRegistry.from_file(path)


def test_static_registry_missing_file(tmp_path: Path) -> None:
    with pytest.raises(RegistryError, match="Unable to read registry"):
        StaticRegistry.from_file(tmp_path / "missing.json")


def test_plan_upgrades_applies_all_axes() -> None:
    registry = StaticRegistry({"ncu-test-v2": "99.9.9", "ncu-test-tag": "99.9.9", "same": "1.0.0"})
    deps = [
        Dependency("ncu-test-v2", "1.0.0"),
        Dependency("ncu-test-tag", "0.1.0"),
        Dependency("same", "1.0.0"),
        Dependency("unpublished", "1.0.0"),
    ]
    predicate = compile_predicate({"reject_version": "0.*"})

    assert plan_upgrades(deps, predicate, registry) == [UpgradeCandidate("ncu-test-v2", "1.0.0", "99.9.9")]


def test_plan_upgrades_skips_resolver_for_rejected_dependencies() -> None:
    class RecordingRegistry:
        def __init__(self) -> None:
            self.asked: list[str] = []

        def latest_version(self, name: str) -> str | None:
            self.asked.append(name)
            return "2.0.0"

    registry = RecordingRegistry()
    predicate = compile_predicate({"filter": "keep"})

    plan_upgrades([Dependency("keep", "1.0.0"), Dependency("drop", "1.0.0")], predicate, registry)

    assert registry.asked == ["keep"]


def test_plan_upgrades_aborts_on_result_callback_error() -> None:
    def results(name: str, info: dict[str, str]) -> bool:
        raise RuntimeError("boom")

    predicate = compile_predicate({"filter_results": results})

    with pytest.raises(PredicateError, match="filter_results"):
        plan_upgrades([Dependency("a", "1.0.0")], predicate, StaticRegistry({"a": "2.0.0"}))
