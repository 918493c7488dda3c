# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Merge configuration layers with predictable precedence and traceability."""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, InstanceOf

from ..options import OPTIONS_BY_NAME, OptionKind, OptionSpec, canonical_option_key
from .errors import ConfigError, ConfigParseError
from .layers import CLI_LAYER, ConfigLayer


class ResolvedOptions(Mapping[str, Any]):
    """Read-only view of the winning value for every option."""

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, Any]) -> None:
        self._values = MappingProxyType(dict(values))

    def __getitem__(self, key: str) -> Any:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._values[name]
        except KeyError:
            raise AttributeError(name) from None

    def __repr__(self) -> str:
        return f"ResolvedOptions({dict(self._values)!r})"


class FieldUpdate(BaseModel):
    """Description of a single option overlay applied during a merge."""

    model_config = ConfigDict(frozen=True)

    option: str
    source: str
    value: Any


class MergeResult(BaseModel):
    """Container bundling resolved options with provenance metadata."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    options: InstanceOf[ResolvedOptions]
    updates: list[FieldUpdate] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
    rc_config_path: Path | None = None

    @property
    def notice(self) -> str | None:
        """Return the message announcing the contributing rc file, if any."""

        if self.rc_config_path is None:
            return None
        return f"Using config file {self.rc_config_path}"


class ConfigMerger:
    """Overlay rc-file and command-line layers on top of the defaults."""

    def merge(
        self,
        defaults: ConfigLayer,
        rc_layer: ConfigLayer | None,
        cli_layer: ConfigLayer,
    ) -> MergeResult:
        """Return the resolved options for one invocation.

        Args:
            defaults: Layer holding every option's built-in default.
            rc_layer: Layer loaded from an rc file, when one was found.
            cli_layer: Layer holding explicitly supplied command-line values.

        Returns:
            MergeResult: Resolved options with provenance and warnings.

        Raises:
            ConfigParseError: If the rc file holds a value of the wrong kind.
            ConfigError: If a command-line value has the wrong kind.
        """

        values = dict(defaults.values)
        updates: list[FieldUpdate] = []
        warnings: list[str] = []
        rc_contributed = False
        if rc_layer is not None and not rc_layer.is_empty():
            rc_updates, rc_warnings = self._overlay(values, rc_layer)
            updates.extend(rc_updates)
            warnings.extend(rc_warnings)
            rc_contributed = bool(rc_updates)
        cli_updates, cli_warnings = self._overlay(values, cli_layer)
        updates.extend(cli_updates)
        warnings.extend(cli_warnings)
        return MergeResult(
            options=ResolvedOptions(values),
            updates=updates,
            warnings=warnings,
            rc_config_path=rc_layer.path if rc_contributed and rc_layer is not None else None,
        )

    def _overlay(
        self,
        values: dict[str, Any],
        layer: ConfigLayer,
    ) -> tuple[list[FieldUpdate], list[str]]:
        updates: list[FieldUpdate] = []
        warnings: list[str] = []
        from_cli = layer.name == CLI_LAYER
        for raw_key, raw_value in layer.values.items():
            key, negated = canonical_option_key(raw_key)
            spec = OPTIONS_BY_NAME.get(key)
            if spec is None:
                warnings.append(f"[{layer.source}] Unknown option '{raw_key}'")
                continue
            if spec.cli_only and not from_cli:
                warnings.append(f"[{layer.source}] Option '{raw_key}' is only accepted on the command line")
                continue
            value = _validate_value(spec, raw_value, layer, raw_key)
            if negated:
                value = not value
            values[key] = value
            updates.append(FieldUpdate(option=key, source=layer.source, value=value))
        return updates, warnings


def merge_layers(
    defaults: ConfigLayer,
    rc_layer: ConfigLayer | None,
    cli_layer: ConfigLayer,
) -> MergeResult:
    """Merge the three layers using a fresh :class:`ConfigMerger`."""

    return ConfigMerger().merge(defaults, rc_layer, cli_layer)


def _validate_value(spec: OptionSpec, value: Any, layer: ConfigLayer, raw_key: str) -> Any:
    """Return ``value`` when it is legal for ``spec`` or raise a config error."""

    problem = _value_problem(spec, value)
    if problem is None:
        return value
    message = f"option '{raw_key}' {problem}"
    if layer.path is not None:
        raise ConfigParseError(layer.path, message)
    raise ConfigError(f"[{layer.source}] {message}")


_NULLABLE_KINDS: Final[frozenset[OptionKind]] = frozenset(
    {OptionKind.STRING, OptionKind.PREDICATE, OptionKind.CALLBACK},
)


def _value_problem(spec: OptionSpec, value: Any) -> str | None:
    kind = spec.kind
    if value is None and kind in _NULLABLE_KINDS:
        return None
    if kind is OptionKind.BOOLEAN:
        return None if isinstance(value, bool) else "must be a boolean"
    if kind is OptionKind.STRING:
        return None if isinstance(value, str) else "must be a string"
    if kind is OptionKind.INTEGER:
        return None if isinstance(value, int) and not isinstance(value, bool) else "must be an integer"
    if kind is OptionKind.CHOICE:
        if isinstance(value, str) and value in spec.choices:
            return None
        return f"must be one of: {', '.join(spec.choices)}"
    if kind is OptionKind.CALLBACK:
        return None if callable(value) else "must be a callable"
    if callable(value) or isinstance(value, (str, re.Pattern)):
        return None
    if isinstance(value, (list, tuple)) and all(isinstance(item, (str, re.Pattern)) for item in value):
        return None
    return "must be a string, list of strings, regular expression, or callable"


__all__ = [
    "ConfigMerger",
    "FieldUpdate",
    "MergeResult",
    "ResolvedOptions",
    "merge_layers",
]
