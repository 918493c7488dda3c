# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Tests for predicate spec parsing and the compiled dependency predicate."""

from __future__ import annotations

import re

import pytest

from depsift.config import ConfigError
from depsift.filtering import (
    AnyOfSpec,
    CallbackSpec,
    GlobSpec,
    PredicateError,
    RegexSpec,
    compile_predicate,
    parse_predicate_spec,
)


def _info(current: str, upgraded: str = "99.9.9") -> dict[str, str]:
    return {"current_version": current, "upgraded_version": upgraded}


def test_parse_predicate_spec_variants() -> None:
    assert parse_predicate_spec(None) is None
    assert parse_predicate_spec("  ") is None
    assert parse_predicate_spec("a, b c") == GlobSpec(("a", "b", "c"))
    assert isinstance(parse_predicate_spec("/^ncu/"), RegexSpec)
    assert isinstance(parse_predicate_spec(re.compile("x")), RegexSpec)
    assert isinstance(parse_predicate_spec(["a", "/b/"]), AnyOfSpec)
    assert isinstance(parse_predicate_spec(str.isupper), CallbackSpec)


def test_parse_predicate_spec_rejects_other_types() -> None:
    with pytest.raises(TypeError):
        parse_predicate_spec(3)
    with pytest.raises(TypeError):
        parse_predicate_spec(["a", 3])


def test_absent_axes_accept_everything() -> None:
    predicate = compile_predicate({})

    assert predicate("anything", _info("1.0.0"))


def test_glob_filter_and_scoped_names() -> None:
    predicate = compile_predicate({"filter": "react-*"})

    assert predicate.matches_dependency("react-dom", "1.0.0")
    assert predicate.matches_dependency("@types/react-dom", "1.0.0")
    assert not predicate.matches_dependency("vue", "1.0.0")


def test_glob_with_slash_matches_full_name() -> None:
    predicate = compile_predicate({"filter": "@types/*"})

    assert predicate.matches_dependency("@types/node", "1.0.0")
    assert not predicate.matches_dependency("node", "1.0.0")


def test_literal_name_is_exact() -> None:
    predicate = compile_predicate({"filter": "ncu-test-v2"})

    assert predicate.matches_dependency("ncu-test-v2", "1")
    assert not predicate.matches_dependency("ncu-test-v2-extra", "1")


def test_regex_reject() -> None:
    predicate = compile_predicate({"reject": "/^ncu-test-(tag|alpha)$/"})

    assert predicate.matches_dependency("ncu-test-v2", "1")
    assert not predicate.matches_dependency("ncu-test-tag", "1")


def test_list_filter_is_any_of() -> None:
    predicate = compile_predicate({"filter": ["lodash", re.compile("^ax")]})

    assert predicate.matches_dependency("lodash", "1")
    assert predicate.matches_dependency("axios", "1")
    assert not predicate.matches_dependency("express", "1")


def test_version_axes() -> None:
    predicate = compile_predicate({"filter_version": "1.*", "reject_version": "/-beta/"})

    assert predicate.matches_dependency("a", "1.2.0")
    assert not predicate.matches_dependency("a", "1.2.0-beta.1")
    assert not predicate.matches_dependency("a", "0.1.0")


def test_callbacks_receive_single_argument() -> None:
    seen: list[tuple[str, str]] = []

    def by_name(name: str) -> bool:
        seen.append(("name", name))
        return name.endswith("tag")

    def by_version(version: str) -> int:
        seen.append(("version", version))
        return 1

    predicate = compile_predicate({"filter": by_name, "filter_version": by_version})

    assert predicate.matches_dependency("ncu-test-tag", "0.1.0")
    assert seen == [("name", "ncu-test-tag"), ("version", "0.1.0")]


def test_filter_results_runs_last_and_only_for_survivors() -> None:
    calls: list[str] = []

    def results(name: str, info: dict[str, str]) -> bool:
        calls.append(name)
        return info["upgraded_version"] == "99.9.9"

    predicate = compile_predicate({"reject": "ncu-test-tag", "filter_results": results})

    assert not predicate("ncu-test-tag", _info("0.1.0"))
    assert predicate("ncu-test-v2", _info("1.0.0"))
    assert not predicate("ncu-test-v2", _info("1.0.0", upgraded="2.0.0"))
    assert calls == ["ncu-test-v2", "ncu-test-v2"]


def test_callback_errors_propagate() -> None:
    def broken(name: str) -> bool:
        raise KeyError(name)

    predicate = compile_predicate({"reject": broken})

    with pytest.raises(PredicateError, match="reject raised KeyError for axios") as excinfo:
        predicate.matches_dependency("axios", "1.0.0")
    assert excinfo.value.axis == "reject"
    assert isinstance(excinfo.value.__cause__, KeyError)


def test_compile_rejects_invalid_regex() -> None:
    with pytest.raises(ConfigError, match="invalid regular expression"):
        compile_predicate({"filter": "/(unclosed/"})


def test_compile_rejects_non_callable_filter_results() -> None:
    with pytest.raises(ConfigError, match="filter_results"):
        compile_predicate({"filter_results": "ncu-test-v2"})
