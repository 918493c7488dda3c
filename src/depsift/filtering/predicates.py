# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Compile the filter and reject options into one dependency predicate."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from ..config.errors import ConfigError
from ..options import PREDICATE_AXES
from .specs import CallbackSpec, PredicateSpec, parse_predicate_spec


class PredicateError(RuntimeError):
    """Raised when a user-supplied filter callable fails."""

    def __init__(self, axis: str, subject: str, error: Exception) -> None:
        """Create the error for the ``axis`` callable failing on ``subject``.

        Args:
            axis: Option whose callable raised.
            subject: Package name being evaluated.
            error: Exception raised by the callable.
        """

        super().__init__(f"{axis} raised {type(error).__name__} for {subject}: {error}")
        self.axis = axis
        self.subject = subject


def _call(spec: CallbackSpec, axis: str, subject: str, *args: Any) -> bool:
    try:
        return bool(spec.callback(*args))
    except Exception as exc:
        raise PredicateError(axis, subject, exc) from exc


def _name_matches(spec: PredicateSpec, axis: str, name: str) -> bool:
    if isinstance(spec, CallbackSpec):
        return _call(spec, axis, name, name)
    return spec.matches_name(name)


def _version_matches(spec: PredicateSpec, axis: str, name: str, version: str) -> bool:
    if isinstance(spec, CallbackSpec):
        return _call(spec, axis, name, version)
    return spec.matches_version(version)


@dataclass(frozen=True, slots=True)
class DependencyPredicate:
    """Decision function combining the five filter axes with AND semantics."""

    filter: PredicateSpec | None = None
    reject: PredicateSpec | None = None
    filter_version: PredicateSpec | None = None
    reject_version: PredicateSpec | None = None
    filter_results: CallbackSpec | None = None

    def matches_dependency(self, name: str, version: str) -> bool:
        """Evaluate the name and version axes for a declared dependency.

        Args:
            name: Package name.
            version: Version range declared in the manifest.

        Returns:
            bool: ``True`` when every configured name/version axis accepts
            the dependency.
        """

        if self.filter is not None and not _name_matches(self.filter, "filter", name):
            return False
        if self.reject is not None and _name_matches(self.reject, "reject", name):
            return False
        if self.filter_version is not None and not _version_matches(
            self.filter_version, "filter_version", name, version
        ):
            return False
        if self.reject_version is not None and _version_matches(
            self.reject_version, "reject_version", name, version
        ):
            return False
        return True

    def matches_result(self, name: str, info: Mapping[str, Any]) -> bool:
        """Evaluate ``filter_results`` against a resolved upgrade."""

        if self.filter_results is None:
            return True
        return _call(self.filter_results, "filter_results", name, name, dict(info))

    def __call__(self, name: str, info: Mapping[str, Any]) -> bool:
        """Return ``True`` when all five axes accept ``name``.

        ``filter_results`` only runs for dependencies that survive the name and
        version axes.
        """

        return self.matches_dependency(name, info["current_version"]) and self.matches_result(name, info)


def _compile_axis(options: Mapping[str, Any], axis: str) -> PredicateSpec | None:
    try:
        return parse_predicate_spec(options.get(axis))
    except re.error as exc:
        raise ConfigError(f"option '{axis}' has an invalid regular expression: {exc}") from exc
    except TypeError as exc:
        raise ConfigError(f"option '{axis}' {exc}") from exc


def compile_predicate(options: Mapping[str, Any]) -> DependencyPredicate:
    """Build the decision function for the resolved ``options``.

    Args:
        options: Resolved options holding the filter and reject axes.

    Returns:
        DependencyPredicate: Predicate reused for every dependency of the run.

    Raises:
        ConfigError: If an axis holds an invalid value or ``filter_results``
            is not callable.
    """

    axes = {axis: _compile_axis(options, axis) for axis in PREDICATE_AXES}
    results = axes["filter_results"]
    if results is not None and not isinstance(results, CallbackSpec):
        raise ConfigError("option 'filter_results' must be a callable")
    return DependencyPredicate(**axes)


__all__ = ["DependencyPredicate", "PredicateError", "compile_predicate"]
