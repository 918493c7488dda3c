# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing logging helpers with optional colour support."""

from __future__ import annotations

from rich.text import Text

from .console import get_console_manager


def _print_line(msg: str, *, style: str | None, use_color: bool, stderr: bool = False) -> None:
    """Render ``msg`` to the console using shared styling helpers.

    Args:
        msg: Message text to print to the console.
        style: Rich style name to apply when colour output is active.
        use_color: Flag indicating whether colour output is desired.
        stderr: Write to standard error instead of standard output.
    """

    console = get_console_manager().get(color=use_color, stderr=stderr)
    text = Text(msg)
    if style and use_color:
        text.stylize(style)
    console.print(text)


def info(msg: str, *, use_color: bool = False) -> None:
    """Emit an informational message."""

    _print_line(msg, style="cyan", use_color=use_color)


def ok(msg: str, *, use_color: bool = False) -> None:
    """Emit a success message."""

    _print_line(msg, style="green", use_color=use_color)


def warn(msg: str, *, use_color: bool = False) -> None:
    """Emit a warning message."""

    _print_line(msg, style="yellow", use_color=use_color)


def fail(msg: str, *, use_color: bool = False) -> None:
    """Emit an error message on standard error."""

    _print_line(msg, style="red", use_color=use_color, stderr=True)


__all__ = ["fail", "info", "ok", "warn"]
