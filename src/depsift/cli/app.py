# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring option resolution, filtering, and output."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated

import typer

from ..config import ConfigError, ResolvedOptions, resolve_options
from ..filtering import PredicateError, compile_predicate
from ..manifest import Manifest, ManifestError, manifest_path, read_manifest, read_manifest_stream
from ..options import OPTIONS_BY_NAME
from ..registry import RegistryError, StaticRegistry
from ..upgrade import plan_upgrades
from ._inputs import collect_cli_arguments
from ._output import render_upgrades
from .shared import CLIError, CLILogger, build_cli_logger

app = typer.Typer(
    add_completion=False,
    help="Find newer versions of package dependencies than the ones declared.",
)

_FAILURES = (ConfigError, ManifestError, RegistryError, PredicateError, CLIError)
# Parameters renamed to avoid shadowing builtins.
_PARAM_ALIASES = {"filter": "filter_"}


def _help(name: str) -> str:
    return OPTIONS_BY_NAME[name].description


@app.command()
def main(
    ctx: typer.Context,
    config_file_name: Annotated[
        str | None,
        typer.Option(
            "--config-file-name",
            help=_help("config_file_name"),
        ),
    ] = None,
    config_file_path: Annotated[
        str | None,
        typer.Option("--config-file-path", help=_help("config_file_path")),
    ] = None,
    merge_config: Annotated[
        bool,
        typer.Option("--merge-config/--no-merge-config", help=_help("merge_config")),
    ] = False,
    cwd: Annotated[str | None, typer.Option("--cwd", help=_help("cwd"))] = None,
    package_file: Annotated[
        str | None,
        typer.Option("--package-file", help=_help("package_file")),
    ] = None,
    stdin: Annotated[
        bool,
        typer.Option("--stdin/--no-stdin", help=_help("stdin")),
    ] = False,
    registry: Annotated[
        str | None,
        typer.Option("--registry", help=_help("registry")),
    ] = None,
    filter_: Annotated[
        str | None,
        typer.Option(
            "--filter",
            "-f",
            help=_help("filter"),
        ),
    ] = None,
    reject: Annotated[
        str | None,
        typer.Option("--reject", "-x", help=_help("reject")),
    ] = None,
    filter_version: Annotated[
        str | None,
        typer.Option("--filter-version", help=_help("filter_version")),
    ] = None,
    reject_version: Annotated[
        str | None,
        typer.Option("--reject-version", help=_help("reject_version")),
    ] = None,
    json_upgraded: Annotated[
        bool,
        typer.Option("--json-upgraded/--no-json-upgraded", "-j", help=_help("json_upgraded")),
    ] = False,
    json_all: Annotated[
        bool,
        typer.Option("--json-all/--no-json-all", help=_help("json_all")),
    ] = False,
    color: Annotated[bool, typer.Option("--color/--no-color", help=_help("color"))] = False,
    loglevel: Annotated[
        str,
        typer.Option("--loglevel", help=_help("loglevel")),
    ] = "info",
    error_level: Annotated[
        int,
        typer.Option("--error-level", help=_help("error_level")),
    ] = 1,
) -> None:
    """Report dependencies with newer versions available."""

    values = {
        "config_file_name": config_file_name,
        "config_file_path": config_file_path,
        "merge_config": merge_config,
        "cwd": cwd,
        "package_file": package_file,
        "stdin": stdin,
        "registry": registry,
        "filter": filter_,
        "reject": reject,
        "filter_version": filter_version,
        "reject_version": reject_version,
        "json_upgraded": json_upgraded,
        "json_all": json_all,
        "color": color,
        "loglevel": loglevel,
        "error_level": error_level,
    }
    arguments = collect_cli_arguments(ctx, values, aliases=_PARAM_ALIASES)
    try:
        result = resolve_options(arguments)
    except ConfigError as exc:
        build_cli_logger().fail(str(exc))
        raise typer.Exit(code=1) from exc

    options = result.options
    logger = build_cli_logger(
        color=options.color,
        loglevel=options.loglevel,
        quiet=options.json_upgraded or options.json_all,
    )
    if result.notice:
        logger.info(result.notice)
    for warning in result.warnings:
        logger.warn(warning)
    for update in result.updates:
        logger.verbose(f"option={update.option} source={update.source}")

    try:
        exit_code = run(options, logger=logger)
    except _FAILURES as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=getattr(exc, "exit_code", 1)) from exc
    raise typer.Exit(code=exit_code)


def load_manifest(options: ResolvedOptions) -> Manifest:
    """Return the manifest selected by ``--stdin`` or ``--package-file``."""

    if options.stdin:
        return read_manifest_stream(sys.stdin)
    return read_manifest(manifest_path(cwd=options.cwd, package_file=options.package_file))


def load_registry(options: ResolvedOptions) -> StaticRegistry:
    """Return the registry configured through ``--registry``."""

    if not options.registry:
        raise CLIError("No registry configured; pass --registry <file> or set 'registry' in the config file")
    path = Path(options.registry)
    if not path.is_absolute() and options.cwd:
        path = Path(options.cwd) / path
    return StaticRegistry.from_file(path)


def run(options: ResolvedOptions, *, logger: CLILogger) -> int:
    """Plan and render upgrades for the resolved ``options``.

    Args:
        options: Resolved options for the invocation.
        logger: CLI logger used for output.

    Returns:
        int: Process exit status.
    """

    predicate = compile_predicate(options)
    manifest = load_manifest(options)
    registry = load_registry(options)
    upgrades = plan_upgrades(manifest.dependencies, predicate, registry)
    render_upgrades(upgrades, manifest, options, logger=logger)
    return 1 if options.error_level >= 2 and upgrades else 0


__all__ = ["app", "load_manifest", "load_registry", "main", "run"]
