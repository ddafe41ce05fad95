"""Command group: backup export and restore."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from tierctl.commands._base import TierGroup, confirm_destructive, yes_option

if TYPE_CHECKING:
    from tierctl.commands._context import AppContext


@click.group(
    cls=TierGroup,
    examples="""\
  tierctl backup export
  tierctl backup export ~/tier-list.json
  tierctl backup restore ~/tier-list.json --yes""",
)
def backup() -> None:
    """Download and restore board backups (JSON)."""


@backup.command(
    examples="""\
  tierctl backup export
  tierctl backup export out/board.json
  tierctl backup export --stdout > board.json"""
)
@click.argument("output", required=False, type=click.Path(dir_okay=False, path_type=Path))
@click.option("--stdout", "to_stdout", is_flag=True, help="Print the JSON instead of writing.")
@click.pass_obj
def export(app: AppContext, output: Path | None, to_stdout: bool) -> None:
    """Write the board to OUTPUT (default: tier-list.json in the workspace)."""
    from tierctl.services.backup import BackupService

    svc = BackupService(app.workspace)
    if to_stdout:
        result = svc.export_text()
        if result.ok and not app.settings.json_output:
            click.echo(result.data["content"])
            return
        app.emit(result)
        return
    app.emit(svc.export(output))


@backup.command(
    examples="""\
  tierctl backup restore tier-list.json
  tierctl backup restore tier-list.json --yes"""
)
@click.argument("source", type=click.Path(dir_okay=False, path_type=Path))
@yes_option
@click.pass_obj
def restore(app: AppContext, source: Path, assume_yes: bool) -> None:
    """Replace the whole board with the backup in SOURCE."""
    from tierctl.services.backup import BackupService

    confirm_destructive(
        app,
        "Load this backup? It overwrites your current tier list and saved progress.",
        assume_yes=assume_yes,
    )
    app.emit(BackupService(app.workspace).restore(source))
