# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Configuration layers feeding the option merger."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Final

from ..options import default_values, is_metadata_key

DEFAULTS_LAYER: Final[str] = "defaults"
RC_LAYER: Final[str] = "rc"
CLI_LAYER: Final[str] = "cli"


@dataclass(frozen=True, slots=True)
class ConfigLayer:
    """Named, read-only mapping of option entries contributed by one source."""

    name: str
    values: Mapping[str, Any] = field(default_factory=dict)
    metadata: Mapping[str, Any] = field(default_factory=dict)
    path: Path | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", MappingProxyType(dict(self.values)))
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))

    @classmethod
    def from_document(cls, name: str, document: Mapping[str, Any], *, path: Path | None = None) -> ConfigLayer:
        """Split ``document`` into option values and ``$``-prefixed metadata.

        Args:
            name: Layer identifier.
            document: Mapping loaded from a config source.
            path: Optional file the document was read from.

        Returns:
            ConfigLayer: Layer holding the document's entries.
        """

        values: dict[str, Any] = {}
        metadata: dict[str, Any] = {}
        for key, value in document.items():
            if is_metadata_key(key):
                metadata[key] = value
            else:
                values[key] = value
        return cls(name=name, values=values, metadata=metadata, path=path)

    @property
    def source(self) -> str:
        """Return a label identifying the layer in warnings and provenance."""

        return str(self.path) if self.path is not None else self.name

    def is_empty(self) -> bool:
        """Return ``True`` when the layer contributes no option values."""

        return not self.values


@dataclass(frozen=True, slots=True)
class CliArgument:
    """Command-line value paired with whether the invoker typed it."""

    value: Any
    explicit: bool = False


def default_layer() -> ConfigLayer:
    """Return the layer holding every option's built-in default."""

    return ConfigLayer(name=DEFAULTS_LAYER, values=default_values())


def cli_layer(arguments: Mapping[str, CliArgument]) -> ConfigLayer:
    """Build the CLI layer from the explicitly supplied ``arguments`` only.

    Values the argument parser filled in on its own are dropped so that they
    never shadow rc-file settings.

    Args:
        arguments: Parsed command-line values keyed by option name.

    Returns:
        ConfigLayer: Layer containing explicit command-line values.
    """

    explicit = {name: argument.value for name, argument in arguments.items() if argument.explicit}
    return ConfigLayer(name=CLI_LAYER, values=explicit)


__all__ = [
    "CLI_LAYER",
    "CliArgument",
    "ConfigLayer",
    "DEFAULTS_LAYER",
    "RC_LAYER",
    "cli_layer",
    "default_layer",
]
