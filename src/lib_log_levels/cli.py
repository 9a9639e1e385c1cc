"""Command line interface for inspecting level specifications.

Purpose
-------
Give operators a quick way to validate, normalise, and preview a level
specification before pushing it to a running service.

Contents
--------
* :func:`cli` - click group with the global ``--traceback`` and dotenv flags.
* ``info`` / ``check`` / ``normalize`` / ``resolve`` subcommands.
* :func:`main` - entry point delegating to :func:`lib_cli_exit_tools.run_cli`.
"""

from __future__ import annotations

import os
from typing import Sequence

import click
import lib_cli_exit_tools
from rich.console import Console
from rich.table import Table

from . import __init__conf__
from . import config as log_config
from .domain import InvalidSpecificationError, LogLevel
from .module_levels import ModuleLevels

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

_LEVEL_STYLES = {
    LogLevel.DEBUG: "dim",
    LogLevel.INFO: "cyan",
    LogLevel.WARNING: "yellow",
    LogLevel.ERROR: "red",
    LogLevel.CRITICAL: "bold red",
    LogLevel.DISABLED: "strike",
}


def summary_info() -> str:
    """Return the metadata banner printed by ``info``."""

    lines: list[str] = []
    __init__conf__.print_info(writer=lines.append)
    return "".join(lines)


def _engine_for(spec: str | None) -> ModuleLevels:
    """Build an engine from ``spec`` or, when omitted, from ``LOG_SPEC``."""
    try:
        if spec is None:
            return ModuleLevels.from_environment()
        levels = ModuleLevels()
        levels.activate_spec(spec)
        return levels
    except InvalidSpecificationError as exc:
        raise click.ClickException(str(exc)) from exc


@click.group(help=__init__conf__.title, context_settings=CLICK_CONTEXT_SETTINGS, invoke_without_command=True)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show the full Python traceback on errors.",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=False,
    help="Load environment variables from the nearest .env before running.",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, use_dotenv: bool) -> None:
    """Root command storing global flags and printing the banner by default."""

    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback

    explicit: bool | None = None
    if ctx.get_parameter_source("use_dotenv") is not click.core.ParameterSource.DEFAULT:
        explicit = use_dotenv
    if log_config.should_use_dotenv(explicit=explicit, env_value=os.getenv(log_config.DOTENV_ENV_VAR)):
        log_config.enable_dotenv()

    if ctx.invoked_subcommand is None:
        click.echo(summary_info(), nl=False)


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print the package metadata banner."""
    click.echo(summary_info(), nl=False)


@cli.command("check", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("spec")
def cli_check(spec: str) -> None:
    """Validate SPEC and exit non-zero when it is malformed."""
    _engine_for(spec)
    click.echo("ok")


@cli.command("normalize", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("spec")
def cli_normalize(spec: str) -> None:
    """Print the canonical form of SPEC."""
    click.echo(_engine_for(spec).spec())


@cli.command("resolve", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option("--spec", "spec", default=None, help="Specification to apply (defaults to $LOG_SPEC).")
@click.argument("loggers", nargs=-1, required=True)
def cli_resolve(spec: str | None, loggers: tuple[str, ...]) -> None:
    """Show the effective level of each logger in LOGGERS."""

    levels = _engine_for(spec)
    table = Table(title=f"spec: {levels.spec()}")
    table.add_column("logger")
    table.add_column("level")
    for name in loggers:
        level = levels.level(name)
        table.add_row(name, level.severity, style=_LEVEL_STYLES[level])
    Console().print(table)


def main(argv: Sequence[str] | None = None, *, restore_traceback: bool = True) -> int:
    """Run the CLI and return its exit code.

    Traceback preferences changed by ``--traceback`` are restored afterwards so
    embedding callers keep their own settings.
    """

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        return lib_cli_exit_tools.run_cli(
            cli,
            argv=list(argv) if argv is not None else None,
            prog_name=__init__conf__.shell_command,
        )
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


__all__ = ["cli", "main", "summary_info"]
