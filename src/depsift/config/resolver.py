# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Resolve the effective options for one invocation."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from .layers import CliArgument, ConfigLayer, cli_layer, default_layer
from .loader import load_config_file
from .locator import locate_config_file
from .merger import MergeResult, merge_layers

TESTS_ENV_VAR: Final[str] = "DEPSIFT_TESTS"


def rc_discovery_enabled(cli_values: Mapping[str, Any], env: Mapping[str, str]) -> bool:
    """Return ``True`` when the rc file should be located and merged.

    Discovery is switched off while ``DEPSIFT_TESTS`` is set, unless the
    invoker asks for it with ``--merge-config`` or names a config location.

    Args:
        cli_values: Explicit command-line values.
        env: Environment mapping consulted for ``DEPSIFT_TESTS``.

    Returns:
        bool: Whether the rc layer participates in the merge.
    """

    if not env.get(TESTS_ENV_VAR):
        return True
    return bool(
        cli_values.get("merge_config") or cli_values.get("config_file_path") or cli_values.get("config_file_name")
    )


def load_rc_layer(cli_values: Mapping[str, Any], *, start_dir: Path) -> ConfigLayer | None:
    """Locate and load the rc file selected by ``cli_values``.

    Args:
        cli_values: Explicit command-line values.
        start_dir: Directory where auto-discovery begins.

    Returns:
        ConfigLayer | None: Loaded rc layer, or ``None`` when no file exists.
    """

    path = locate_config_file(
        start_dir,
        config_file_path=cli_values.get("config_file_path"),
        config_file_name=cli_values.get("config_file_name"),
    )
    if path is None:
        return None
    return load_config_file(path)


def resolve_options(
    arguments: Mapping[str, CliArgument],
    *,
    env: Mapping[str, str] | None = None,
) -> MergeResult:
    """Merge defaults, the rc file, and explicit command-line values.

    Args:
        arguments: Parsed command-line values with explicitness flags.
        env: Optional environment mapping, defaults to ``os.environ``.

    Returns:
        MergeResult: Resolved options with provenance metadata.

    Raises:
        ConfigNotFoundError: If an explicitly named config file is missing.
        ConfigParseError: If the rc file cannot be parsed.
    """

    environment = os.environ if env is None else env
    cli = cli_layer(arguments)
    cwd = cli.values.get("cwd")
    start_dir = Path(cwd) if cwd else Path.cwd()
    rc_layer = load_rc_layer(cli.values, start_dir=start_dir) if rc_discovery_enabled(cli.values, environment) else None
    return merge_layers(default_layer(), rc_layer, cli)


__all__ = ["TESTS_ENV_VAR", "load_rc_layer", "rc_discovery_enabled", "resolve_options"]
