# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Translate parsed CLI parameters into explicit/defaulted option values."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Final

import typer
from click.core import ParameterSource

from ..config import CliArgument
from ..options import OPTIONS_BY_NAME

_IMPLICIT_SOURCES: Final[frozenset[ParameterSource]] = frozenset(
    {ParameterSource.DEFAULT, ParameterSource.DEFAULT_MAP},
)


def _was_provided(ctx: typer.Context, name: str) -> bool:
    source = ctx.get_parameter_source(name)
    return source is not None and source not in _IMPLICIT_SOURCES


def collect_cli_arguments(
    ctx: typer.Context,
    values: Mapping[str, Any],
    *,
    aliases: Mapping[str, str] | None = None,
) -> dict[str, CliArgument]:
    """Pair every recognised parameter value with whether the user supplied it.

    ``--no-json-upgraded`` and ``--json-upgraded`` share one Click parameter,
    so either spelling marks ``json_upgraded`` as explicit.

    Args:
        ctx: Typer context for the running command.
        values: Parameter values keyed by option name.
        aliases: Click parameter names for options whose Python parameter
            was renamed, keyed by option name.

    Returns:
        dict[str, CliArgument]: Arguments for options known to the registry.
    """

    params = aliases or {}
    return {
        name: CliArgument(value=value, explicit=_was_provided(ctx, params.get(name, name)))
        for name, value in values.items()
        if name in OPTIONS_BY_NAME
    }


__all__ = ["collect_cli_arguments"]
