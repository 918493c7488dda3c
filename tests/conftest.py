# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from depsift.config import TESTS_ENV_VAR


@pytest.fixture(autouse=True)
def _disable_rc_discovery(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a stray rc file above the test tree from leaking into results."""

    monkeypatch.setenv(TESTS_ENV_VAR, "1")


@pytest.fixture
def registry_file(tmp_path: Path) -> Path:
    """Return a registry that reports ``99.9.9`` for the stock test packages."""

    path = tmp_path / "registry.json"
    path.write_text(
        json.dumps({"ncu-test-v2": "99.9.9", "ncu-test-tag": "99.9.9", "axios": "99.9.9"}),
        encoding="utf-8",
    )
    return path
