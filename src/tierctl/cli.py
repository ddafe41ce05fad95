"""Root CLI group for tierctl with global flags and command registration."""

from __future__ import annotations

from pathlib import Path

import click
from pydantic import ValidationError

from tierctl import __version__
from tierctl.commands import register_commands
from tierctl.commands._context import AppContext
from tierctl.config.settings import TierSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="tierctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output (ids only).")
@click.option("-v", "--verbose", is_flag=True, help="Full ids, debug logs, and timings.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("--no-interact", is_flag=True, help="Never prompt; refuse unconfirmed overwrites.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "-w",
    "--workspace",
    "workspace",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Workspace directory (default: discovered from the current directory).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    no_interact: bool,
    config_path: str | None,
    workspace: Path | None,
) -> None:
    """tierctl — rank images into tiers from the command line.

    Import images into the image bank, drag them onto tiers, and the board
    is saved after every change.
    """
    try:
        settings = TierSettings.from_cli(
            config_path=config_path,
            workspace_root=workspace,
            json_output=json_output,
            quiet=quiet,
            verbose=verbose,
            log_json=log_json,
            no_interact=no_interact,
        )
    except ValidationError as exc:
        first = exc.errors()[0]
        where = ".".join(str(part) for part in first["loc"])
        msg = f"Invalid configuration at {where}: {first['msg']}"
        raise click.ClickException(msg) from exc
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
