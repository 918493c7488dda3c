# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Registry of recognised options and helpers for canonical option keys."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Final


class OptionKind(str, Enum):
    """Value kinds accepted by an option."""

    BOOLEAN = "boolean"
    STRING = "string"
    INTEGER = "integer"
    CHOICE = "choice"
    PREDICATE = "predicate"
    CALLBACK = "callback"


@dataclass(frozen=True, slots=True)
class OptionSpec:
    """Declaration of a single recognised option."""

    name: str
    kind: OptionKind
    default: Any = None
    description: str = ""
    cli_only: bool = False
    choices: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_boolean(self) -> bool:
        """Return ``True`` when the option is a boolean flag."""

        return self.kind is OptionKind.BOOLEAN


LOG_LEVELS: Final[tuple[str, ...]] = ("silent", "error", "warn", "info", "verbose")

OPTION_SPECS: Final[tuple[OptionSpec, ...]] = (
    OptionSpec(
        "config_file_name",
        OptionKind.STRING,
        description="Config file name (default: .depsiftrc, .depsiftrc.json, .depsiftrc.toml, .depsiftrc.py).",
        cli_only=True,
    ),
    OptionSpec(
        "config_file_path",
        OptionKind.STRING,
        description="Directory of the config file.",
        cli_only=True,
    ),
    OptionSpec(
        "merge_config",
        OptionKind.BOOLEAN,
        False,
        "Merge an auto-discovered config file even where discovery is disabled.",
        cli_only=True,
    ),
    OptionSpec("cwd", OptionKind.STRING, description="Working directory in which depsift runs."),
    OptionSpec("package_file", OptionKind.STRING, description="Package manifest location (default: ./package.json)."),
    OptionSpec("stdin", OptionKind.BOOLEAN, False, "Read the package manifest from stdin."),
    OptionSpec("registry", OptionKind.STRING, description="JSON file mapping package names to their latest version."),
    OptionSpec(
        "filter",
        OptionKind.PREDICATE,
        description="Include only package names matching the given string, wildcard, /regex/, or callable.",
    ),
    OptionSpec(
        "reject",
        OptionKind.PREDICATE,
        description="Exclude package names matching the given string, wildcard, /regex/, or callable.",
    ),
    OptionSpec(
        "filter_version",
        OptionKind.PREDICATE,
        description="Include only current versions matching the given string, wildcard, /regex/, or callable.",
    ),
    OptionSpec(
        "reject_version",
        OptionKind.PREDICATE,
        description="Exclude current versions matching the given string, wildcard, /regex/, or callable.",
    ),
    OptionSpec(
        "filter_results",
        OptionKind.CALLBACK,
        description="Callable receiving (name, info) after upgrades are resolved; falsy results are dropped.",
    ),
    OptionSpec("json_upgraded", OptionKind.BOOLEAN, False, "Output upgraded dependencies in JSON."),
    OptionSpec("json_all", OptionKind.BOOLEAN, False, "Output the full manifest with upgraded versions in JSON."),
    OptionSpec("color", OptionKind.BOOLEAN, False, "Force colour in terminal output."),
    OptionSpec(
        "loglevel",
        OptionKind.CHOICE,
        "info",
        "Amount of detail in user-facing output (silent, error, warn, info, verbose).",
        choices=LOG_LEVELS,
    ),
    OptionSpec(
        "error_level",
        OptionKind.INTEGER,
        1,
        "Set the exit status: 1 exits on errors only, 2 also exits when upgrades are available.",
    ),
)

OPTIONS_BY_NAME: Final[Mapping[str, OptionSpec]] = {spec.name: spec for spec in OPTION_SPECS}

PREDICATE_AXES: Final[tuple[str, ...]] = (
    "filter",
    "reject",
    "filter_version",
    "reject_version",
    "filter_results",
)

METADATA_PREFIX: Final[str] = "$"
_NEGATION_PREFIX: Final[str] = "no_"
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])([A-Z])")


def _snake_case(raw: str) -> str:
    stripped = raw.lstrip("-").replace("-", "_")
    return _CAMEL_BOUNDARY.sub(r"_\1", stripped).lower()


def canonical_option_key(raw: str) -> tuple[str, bool]:
    """Return the canonical option name for ``raw`` and whether it is negated.

    ``jsonUpgraded``, ``json-upgraded`` and ``--json-upgraded`` all map to
    ``json_upgraded``. A ``no`` prefix on a boolean option (``no-color``,
    ``noColor``) maps to the option itself with the negation flag set.

    Args:
        raw: Option key as authored in a config file or on the command line.

    Returns:
        tuple[str, bool]: Canonical key and ``True`` when the key was the
        negated spelling of a boolean option. Unknown keys are returned in
        canonical form without negation.
    """

    key = _snake_case(raw)
    if key in OPTIONS_BY_NAME:
        return key, False
    if key.startswith(_NEGATION_PREFIX):
        base = key[len(_NEGATION_PREFIX) :]
        spec = OPTIONS_BY_NAME.get(base)
        if spec is not None and spec.is_boolean:
            return base, True
    return key, False


def is_metadata_key(key: str) -> bool:
    """Return ``True`` for document metadata keys such as ``$schema``."""

    return key.startswith(METADATA_PREFIX)


def default_values() -> dict[str, Any]:
    """Return the built-in default for every recognised option."""

    return {spec.name: spec.default for spec in OPTION_SPECS}


__all__ = [
    "LOG_LEVELS",
    "OPTIONS_BY_NAME",
    "OPTION_SPECS",
    "OptionKind",
    "OptionSpec",
    "PREDICATE_AXES",
    "canonical_option_key",
    "default_values",
    "is_metadata_key",
]
