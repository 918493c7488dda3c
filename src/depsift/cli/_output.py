# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Render planned upgrades as a table or JSON."""

from __future__ import annotations

import json
from collections.abc import Sequence

from rich.table import Table

from ..config import ResolvedOptions
from ..manifest import Manifest
from ..models import UpgradeCandidate
from .shared import CLILogger

ALL_UP_TO_DATE = "All dependencies match the latest package versions :)"


def build_upgrade_table(upgrades: Sequence[UpgradeCandidate], *, use_color: bool) -> Table:
    """Return a Rich table listing ``upgrades``."""

    table = Table(box=None, show_header=False, pad_edge=False)
    table.add_column("name", no_wrap=True)
    table.add_column("current", justify="right", no_wrap=True)
    table.add_column("arrow", no_wrap=True)
    table.add_column("upgraded", no_wrap=True, style="green" if use_color else None)
    for candidate in upgrades:
        table.add_row(candidate.name, candidate.current_version, "→", candidate.upgraded_version)
    return table


def render_upgrades(
    upgrades: Sequence[UpgradeCandidate],
    manifest: Manifest,
    options: ResolvedOptions,
    *,
    logger: CLILogger,
) -> None:
    """Write the planned upgrades in the output format selected by ``options``.

    Args:
        upgrades: Planned upgrades in manifest order.
        manifest: Manifest the upgrades were planned for.
        options: Resolved options selecting the output format.
        logger: CLI logger used for human-readable output.
    """

    versions = {candidate.name: candidate.upgraded_version for candidate in upgrades}
    if options.json_all:
        logger.echo(json.dumps(manifest.with_versions(versions), indent=2))
        return
    if options.json_upgraded:
        logger.echo(json.dumps(versions, indent=2))
        return
    if not upgrades:
        logger.ok(ALL_UP_TO_DATE)
        return
    logger.render(build_upgrade_table(upgrades, use_color=logger.use_color))


__all__ = ["ALL_UP_TO_DATE", "build_upgrade_table", "render_upgrades"]
