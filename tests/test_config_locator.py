# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for rc file discovery."""

from __future__ import annotations

from pathlib import Path

import pytest

from depsift.config import RC_FILENAMES, ConfigNotFoundError, locate_config_file
from depsift.config.locator import iter_search_dirs


def test_locate_returns_none_without_rc_file(tmp_path: Path) -> None:
    project = tmp_path / "project"
    project.mkdir()

    assert locate_config_file(project, config_file_path=project) is None


def test_locate_prefers_earlier_filename_at_same_level(tmp_path: Path) -> None:
    (tmp_path / ".depsiftrc.py").write_text("filter = 'a'\n", encoding="utf-8")
    (tmp_path / ".depsiftrc.json").write_text("{}", encoding="utf-8")

    found = locate_config_file(tmp_path, config_file_path=tmp_path)

    assert found == (tmp_path / ".depsiftrc.json").resolve()


def test_locate_nearest_directory_wins(tmp_path: Path) -> None:
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    (tmp_path / ".depsiftrc").write_text("{}", encoding="utf-8")
    (tmp_path / "a" / ".depsiftrc.toml").write_text("", encoding="utf-8")

    found = locate_config_file(nested, config_file_path=nested)

    assert found == (tmp_path / "a" / ".depsiftrc.toml").resolve()


def test_locate_walks_from_start_dir_without_explicit_path(tmp_path: Path) -> None:
    nested = tmp_path / "pkg" / "src"
    nested.mkdir(parents=True)
    (tmp_path / "pkg" / ".depsiftrc.json").write_text("{}", encoding="utf-8")

    assert locate_config_file(nested) == (tmp_path / "pkg" / ".depsiftrc.json").resolve()


def test_explicit_path_and_name_checks_exact_location(tmp_path: Path) -> None:
    nested = tmp_path / "nested"
    nested.mkdir()
    (tmp_path / ".custom.json").write_text("{}", encoding="utf-8")

    with pytest.raises(ConfigNotFoundError) as excinfo:
        locate_config_file(tmp_path, config_file_path=nested, config_file_name=".custom.json")

    assert str(excinfo.value) == f"Config file .custom.json not found in {nested}"


def test_explicit_name_is_searched_upward(tmp_path: Path) -> None:
    nested = tmp_path / "nested"
    nested.mkdir()
    (tmp_path / ".rctemp.json").write_text("{}", encoding="utf-8")

    found = locate_config_file(nested, config_file_name=".rctemp.json")

    assert found == (tmp_path / ".rctemp.json").resolve()


def test_missing_explicit_name_names_start_dir(tmp_path: Path) -> None:
    with pytest.raises(ConfigNotFoundError, match="Config file .missing.json not found in"):
        locate_config_file(tmp_path / "x", config_file_name=".missing.json")


def test_search_dirs_end_at_root(tmp_path: Path) -> None:
    dirs = list(iter_search_dirs(tmp_path))

    assert dirs[0] == tmp_path.resolve()
    assert dirs[-1] == Path(tmp_path.resolve().anchor)


def test_rc_filenames_priority() -> None:
    assert RC_FILENAMES[0] == ".depsiftrc"
    assert RC_FILENAMES[-1] == ".depsiftrc.py"
