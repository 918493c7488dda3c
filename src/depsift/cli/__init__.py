# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""depsift CLI package exports."""

from __future__ import annotations

from typing import Final

from .app import app, run
from .shared import CLIError, CLILogger, build_cli_logger

__all__: Final[list[str]] = ["CLIError", "CLILogger", "app", "build_cli_logger", "run"]
