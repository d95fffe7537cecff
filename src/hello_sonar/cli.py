"""Command-line adapter built on rich-click and ``lib_cli_exit_tools``.

Purpose
-------
Expose the greeting, the addition helpers and the metadata banner as the
``hello-sonar`` console script (also reachable via ``python -m hello_sonar``).

Contents
--------
* :func:`cli` - root group; runs ``hello`` when no subcommand is given.
* :func:`cli_hello`, :func:`cli_add`, :func:`cli_info` - subcommands.
* :func:`main` - entry point delegating exit-code mapping to
  ``lib_cli_exit_tools.run_cli``.
"""

from __future__ import annotations

import os
from typing import Optional, Sequence

import lib_cli_exit_tools
import rich_click as click
from click.core import ParameterSource

from . import __init__conf__
from . import config as app_config
from .domain import add, wrapping_add
from .hello_sonar import run, summary_info

CLICK_CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.option(
    "--use-dotenv/--no-use-dotenv",
    default=False,
    help=f"Load environment variables from the nearest .env (also via {app_config.DOTENV_ENV_VAR}).",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, use_dotenv: bool) -> None:
    """Root command storing global flags; greets when no subcommand is given."""
    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback

    explicit: bool | None = None
    if ctx.get_parameter_source("use_dotenv") is not ParameterSource.DEFAULT:
        explicit = use_dotenv
    if app_config.should_use_dotenv(explicit=explicit, env_value=os.getenv(app_config.DOTENV_ENV_VAR)):
        app_config.enable_dotenv()

    if ctx.invoked_subcommand is None:
        ctx.invoke(cli_hello)


@cli.command("hello", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_hello() -> None:
    """Log the startup greeting."""
    run()


@cli.command(
    "add",
    context_settings={**CLICK_CONTEXT_SETTINGS, "ignore_unknown_options": True},
)
@click.argument("a", type=int)
@click.argument("b", type=int)
@click.option(
    "--bits",
    type=click.IntRange(min=1),
    default=None,
    help="Wrap the sum into a signed integer of this many bits (32 mirrors JVM int).",
)
def cli_add(a: int, b: int, bits: Optional[int]) -> None:
    """Print the sum of A and B."""
    total = add(a, b) if bits is None else wrapping_add(a, b, bits=bits)
    click.echo(str(total))


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print the metadata banner."""
    click.echo(summary_info(), nl=False)


def main(argv: Optional[Sequence[str]] = None, *, restore_traceback: bool = True) -> int:
    """Run the CLI and return its exit code.

    ``lib_cli_exit_tools`` maps exceptions to exit codes and honours the
    ``--traceback`` flag. The traceback preferences are restored afterwards
    so repeated in-process invocations start from the same state.
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


__all__ = ["cli", "main"]
