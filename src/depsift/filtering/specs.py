# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Predicate specifications parsed from option values."""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from fnmatch import fnmatchcase
from typing import Any, Final, TypeAlias

_LIST_SEPARATOR = re.compile(r"[\s,]+")
_SCOPE_PREFIX = re.compile(r"^@[^/]+/")
_REGEX_DELIMITER: Final[str] = "/"


@dataclass(frozen=True, slots=True)
class GlobSpec:
    """One or more wildcard patterns; any match satisfies the spec."""

    patterns: tuple[str, ...]

    def matches_name(self, name: str) -> bool:
        """Return ``True`` when ``name`` matches any pattern.

        Patterns without ``/`` are compared against the unscoped package name
        so ``react-*`` also selects ``@types/react-dom``.
        """

        unscoped = _SCOPE_PREFIX.sub("", name)
        for pattern in self.patterns:
            if "/" in pattern:
                if fnmatchcase(name, pattern):
                    return True
            elif fnmatchcase(unscoped, pattern):
                return True
        return False

    def matches_version(self, version: str) -> bool:
        return any(fnmatchcase(version, pattern) for pattern in self.patterns)


@dataclass(frozen=True, slots=True)
class RegexSpec:
    """Regular expression searched within the subject."""

    pattern: re.Pattern[str]

    def matches_name(self, name: str) -> bool:
        return self.pattern.search(name) is not None

    def matches_version(self, version: str) -> bool:
        return self.pattern.search(version) is not None


@dataclass(frozen=True, slots=True)
class AnyOfSpec:
    """List of literal specs; any member matching satisfies the spec."""

    specs: tuple[GlobSpec | RegexSpec, ...]

    def matches_name(self, name: str) -> bool:
        return any(spec.matches_name(name) for spec in self.specs)

    def matches_version(self, version: str) -> bool:
        return any(spec.matches_version(version) for spec in self.specs)


@dataclass(frozen=True, slots=True)
class CallbackSpec:
    """User-supplied callable evaluated for each subject."""

    callback: Callable[..., Any]


PredicateSpec: TypeAlias = GlobSpec | RegexSpec | AnyOfSpec | CallbackSpec


def _parse_literal(value: str | re.Pattern[str]) -> GlobSpec | RegexSpec | None:
    if isinstance(value, re.Pattern):
        return RegexSpec(value)
    text = value.strip()
    if len(text) > 2 and text.startswith(_REGEX_DELIMITER) and text.endswith(_REGEX_DELIMITER):
        return RegexSpec(re.compile(text[1:-1]))
    patterns = tuple(part for part in _LIST_SEPARATOR.split(text) if part)
    return GlobSpec(patterns) if patterns else None


def parse_predicate_spec(value: Any) -> PredicateSpec | None:
    """Translate an option value into a predicate specification.

    Args:
        value: ``None``, a string (``/regex/`` or comma/space separated
            wildcards), a compiled pattern, a list of those, or a callable.

    Returns:
        PredicateSpec | None: Parsed spec, or ``None`` when the value places
        no constraint.

    Raises:
        TypeError: If ``value`` has an unsupported type.
        re.error: If a ``/regex/`` string does not compile.
    """

    if value is None:
        return None
    if callable(value):
        return CallbackSpec(value)
    if isinstance(value, (str, re.Pattern)):
        return _parse_literal(value)
    if isinstance(value, (list, tuple)):
        members: list[GlobSpec | RegexSpec] = []
        for item in value:
            if not isinstance(item, (str, re.Pattern)):
                raise TypeError(f"unsupported predicate list entry: {item!r}")
            if (parsed := _parse_literal(item)) is not None:
                members.append(parsed)
        return AnyOfSpec(tuple(members)) if members else None
    raise TypeError(f"unsupported predicate value: {value!r}")


__all__ = [
    "AnyOfSpec",
    "CallbackSpec",
    "GlobSpec",
    "PredicateSpec",
    "RegexSpec",
    "parse_predicate_spec",
]
