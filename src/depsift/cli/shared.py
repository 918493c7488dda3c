# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared utilities for CLI commands (logging, errors)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

import typer
from rich.console import Console, RenderableType
from rich.text import Text

from ..console import get_console_manager
from ..logging import fail as core_fail
from ..logging import info as core_info
from ..logging import ok as core_ok
from ..logging import warn as core_warn
from ..options import LOG_LEVELS

_LEVEL_RANK: Final[dict[str, int]] = {name: rank for rank, name in enumerate(LOG_LEVELS)}


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code


@dataclass(slots=True)
class CLILogger:
    """Adapter around project logging helpers honouring the configured log level."""

    console: Console
    use_color: bool = False
    loglevel: str = "info"
    quiet: bool = False

    def _enabled(self, level: str) -> bool:
        if self.quiet:
            return False
        return _LEVEL_RANK.get(self.loglevel, _LEVEL_RANK["info"]) >= _LEVEL_RANK[level]

    def fail(self, message: str) -> None:
        """Log a failure message to stderr; failures are never suppressed.

        Args:
            message: Text describing the failure state.
        """

        core_fail(message, use_color=self.use_color)

    def warn(self, message: str) -> None:
        """Log a warning message when the log level allows it.

        Args:
            message: Text describing the warning condition.
        """

        if self._enabled("warn"):
            core_warn(message, use_color=self.use_color)

    def info(self, message: str) -> None:
        """Log an informational message when the log level allows it."""

        if self._enabled("info"):
            core_info(message, use_color=self.use_color)

    def ok(self, message: str) -> None:
        """Log a success message when the log level allows it."""

        if self._enabled("info"):
            core_ok(message, use_color=self.use_color)

    def verbose(self, message: str) -> None:
        """Emit a dimmed trace message at the ``verbose`` log level."""

        if self._enabled("verbose"):
            self.console.print(Text(message, style="dim" if self.use_color else ""))

    def render(self, renderable: RenderableType) -> None:
        """Print a Rich renderable unless output is silenced."""

        if self._enabled("error"):
            self.console.print(renderable)

    def echo(self, message: str) -> None:
        """Write ``message`` to stdout using Typer's echo helper.

        Args:
            message: Text written to standard output.
        """

        typer.echo(message)


def build_cli_logger(*, color: bool = False, loglevel: str = "info", quiet: bool = False) -> CLILogger:
    """Return a ``CLILogger`` bound to the shared console manager.

    Args:
        color: Whether terminal colour output is forced on.
        loglevel: Minimum level of messages to display.
        quiet: Suppress every message except failures, used for JSON output.

    Returns:
        CLILogger: Logger instance for the current invocation.
    """

    console = get_console_manager().get(color=color)
    return CLILogger(console=console, use_color=color, loglevel=loglevel, quiet=quiet)


__all__: Final = ["CLIError", "CLILogger", "build_cli_logger"]
