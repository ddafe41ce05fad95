"""Commands: show, save, reset, and check the whole board."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tierctl.commands._base import TierCommand, confirm_destructive, yes_option

if TYPE_CHECKING:
    from tierctl.commands._context import AppContext


@click.command(
    cls=TierCommand,
    examples="""\
  tierctl show
  tierctl -v show
  tierctl --json show""",
)
@click.pass_obj
def show(app: AppContext) -> None:
    """Show every tier in ranking order, then the image bank."""
    from tierctl.services.board import BoardService

    app.emit(BoardService(app.workspace).show())


@click.command(
    cls=TierCommand,
    examples="""\
  tierctl save""",
)
@click.pass_obj
def save(app: AppContext) -> None:
    """Write the current board to the workspace storage slot."""
    from tierctl.services.board import BoardService

    app.emit(BoardService(app.workspace).save())


@click.command(
    cls=TierCommand,
    examples="""\
  tierctl reset
  tierctl reset --yes""",
)
@yes_option
@click.pass_obj
def reset(app: AppContext, assume_yes: bool) -> None:
    """Clear saved progress and start again from the default tiers."""
    from tierctl.services.board import BoardService

    confirm_destructive(
        app,
        "Reset the board? This clears your saved progress.",
        assume_yes=assume_yes,
    )
    app.emit(BoardService(app.workspace).reset())


@click.command(
    cls=TierCommand,
    examples="""\
  tierctl check
  tierctl --json check""",
)
@click.pass_obj
def check(app: AppContext) -> None:
    """Report snapshot repairs and board integrity issues."""
    from tierctl.services.board import BoardService

    app.emit(BoardService(app.workspace).check())
