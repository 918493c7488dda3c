# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for parsing rc files into configuration layers."""

from __future__ import annotations

import json
import re
from pathlib import Path

import pytest

from depsift.config import ConfigParseError, load_config_file


def test_load_json_splits_metadata(tmp_path: Path) -> None:
    path = tmp_path / ".depsiftrc.json"
    path.write_text(json.dumps({"$schema": "schema url", "filter": "ncu-test-v2"}), encoding="utf-8")

    layer = load_config_file(path)

    assert dict(layer.values) == {"filter": "ncu-test-v2"}
    assert dict(layer.metadata) == {"$schema": "schema url"}
    assert layer.path == path
    assert layer.source == str(path)


def test_extensionless_rc_is_json(tmp_path: Path) -> None:
    path = tmp_path / ".depsiftrc"
    path.write_text('{"jsonUpgraded": true}', encoding="utf-8")

    assert dict(load_config_file(path).values) == {"jsonUpgraded": True}


def test_empty_object_loads_empty_layer(tmp_path: Path) -> None:
    path = tmp_path / ".depsiftrc.json"
    path.write_text("{}", encoding="utf-8")

    assert load_config_file(path).is_empty()


def test_load_toml(tmp_path: Path) -> None:
    path = tmp_path / ".depsiftrc.toml"
    path.write_text('reject = ["lodash", "/^@types/"]\nerror_level = 2\n', encoding="utf-8")

    layer = load_config_file(path)

    assert layer.values["reject"] == ["lodash", "/^@types/"]
    assert layer.values["error_level"] == 2


def test_python_module_config_mapping(tmp_path: Path) -> None:
    path = tmp_path / ".depsiftrc.py"
    path.write_text(
        "import re\n"
        "config = {'filter': lambda name: name.endswith('tag'), 'rejectVersion': re.compile(r'^0\\.')}\n",
        encoding="utf-8",
    )

    layer = load_config_file(path)

    assert set(layer.values) == {"filter", "rejectVersion"}
    assert layer.values["filter"]("ncu-test-tag") is True
    assert isinstance(layer.values["rejectVersion"], re.Pattern)


def test_python_module_globals_export_recognised_options(tmp_path: Path) -> None:
    path = tmp_path / ".depsiftrc.py"
    path.write_text(
        "import os\n"
        "SUFFIX = 'tag'\n"
        "def filter_results(name, info):\n"
        "    return info['upgraded_version'] == '99.9.9'\n"
        "jsonUpgraded = True\n"
        "_private = 1\n",
        encoding="utf-8",
    )

    layer = load_config_file(path)

    assert set(layer.values) == {"filter_results", "jsonUpgraded"}
    assert callable(layer.values["filter_results"])


def test_python_module_runs_in_fresh_namespace(tmp_path: Path) -> None:
    path = tmp_path / ".depsiftrc.py"
    path.write_text(
        "calls = globals().setdefault('calls', [])\ncalls.append(1)\nconfig = {'loglevel': str(len(calls))}\n",
        encoding="utf-8",
    )

    first = load_config_file(path)
    second = load_config_file(path)

    assert first.values["loglevel"] == second.values["loglevel"] == "1"


@pytest.mark.parametrize(
    ("name", "content", "reason"),
    [
        (".depsiftrc.json", "{not json", "malformed JSON"),
        (".depsiftrc.json", "[1, 2]", "top-level value must be an object"),
        (".depsiftrc.toml", "filter = ", "malformed TOML"),
        (".depsiftrc.py", "raise ValueError('boom')", "module raised ValueError: boom"),
        (".depsiftrc.py", "config = ['filter']", "'config' must be a mapping"),
        (".depsiftrc.py", "config = {1: 'x'}", "'config' keys must be strings"),
    ],
)
def test_invalid_rc_files_raise_parse_error(tmp_path: Path, name: str, content: str, reason: str) -> None:
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigParseError) as excinfo:
        load_config_file(path)

    assert excinfo.value.path == str(path)
    assert reason in str(excinfo.value)
    assert str(path) in str(excinfo.value)


def test_toml_with_invalid_utf8_raises_parse_error(tmp_path: Path) -> None:
    path = tmp_path / ".depsiftrc.toml"
    path.write_bytes(b'filter = "\xff\xfe"\n')

    with pytest.raises(ConfigParseError, match="malformed TOML"):
        load_config_file(path)
