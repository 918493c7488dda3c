# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Configuration discovery, loading, and merging."""

from __future__ import annotations

from .errors import ConfigError, ConfigNotFoundError, ConfigParseError
from .layers import CliArgument, ConfigLayer, cli_layer, default_layer
from .loader import load_config_file
from .locator import RC_FILENAMES, locate_config_file
from .merger import ConfigMerger, FieldUpdate, MergeResult, ResolvedOptions, merge_layers
from .resolver import TESTS_ENV_VAR, resolve_options

__all__ = [
    "CliArgument",
    "ConfigError",
    "ConfigLayer",
    "ConfigMerger",
    "ConfigNotFoundError",
    "ConfigParseError",
    "FieldUpdate",
    "MergeResult",
    "RC_FILENAMES",
    "ResolvedOptions",
    "TESTS_ENV_VAR",
    "cli_layer",
    "default_layer",
    "load_config_file",
    "locate_config_file",
    "merge_layers",
    "resolve_options",
]
