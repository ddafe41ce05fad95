"""Subcommand modules for tierctl.

Provides register_commands() which uses deferred imports to keep
``tierctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups and standalone commands on the root CLI group.

    3 groups (have subcommands) + 5 standalone commands.
    """
    # --- Groups ---
    from tierctl.commands.backup import backup
    from tierctl.commands.image import image
    from tierctl.commands.tier import tier

    cli.add_command(tier)
    cli.add_command(image)
    cli.add_command(backup)

    # --- Standalone commands ---
    from tierctl.commands.board import check, reset, save, show
    from tierctl.commands.drag import drag

    cli.add_command(show)
    cli.add_command(drag)
    cli.add_command(save)
    cli.add_command(reset)
    cli.add_command(check)
