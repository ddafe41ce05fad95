"""Command group: tier add, update, delete, move, palette."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tierctl.commands._base import TierGroup

if TYPE_CHECKING:
    from tierctl.commands._context import AppContext


_TIER_EXAMPLES = """\
  tierctl tier add
  tierctl tier add --label "God tier" --color "#bf7fff"
  tierctl tier update S --label "Best"
  tierctl tier move D 0
  tierctl tier delete new-row-1b9d6bcd-bbfd-4b2d-9b5d-ab8dfbbd4bed"""


@click.group(cls=TierGroup, examples=_TIER_EXAMPLES)
def tier() -> None:
    """Add, edit, reorder, and delete tiers."""


@tier.command(
    examples="""\
  tierctl tier add
  tierctl tier add --label "F" --color "#4a4a4a\""""
)
@click.option("--label", default=None, help="Tier label (default from config).")
@click.option("--color", default=None, help="Tier colour as #rrggbb (default from config).")
@click.pass_obj
def add(app: AppContext, label: str | None, color: str | None) -> None:
    """Append a new tier at the bottom of the list."""
    from tierctl.services.tier import TierService

    app.emit(TierService(app.workspace).add(label=label, color=color))


@tier.command(
    examples="""\
  tierctl tier update S --label "Must play"
  tierctl tier update A --color "#7f7fff\""""
)
@click.argument("tier_id")
@click.option("--label", default=None, help="New label.")
@click.option("--color", default=None, help="New colour as #rrggbb.")
@click.pass_obj
def update(app: AppContext, tier_id: str, label: str | None, color: str | None) -> None:
    """Change a tier's label or colour."""
    from tierctl.services.tier import TierService

    app.emit(TierService(app.workspace).update(tier_id, label=label, color=color))


@tier.command(
    examples="""\
  tierctl tier delete C"""
)
@click.argument("tier_id")
@click.pass_obj
def delete(app: AppContext, tier_id: str) -> None:
    """Delete a tier; its images go back to the image bank."""
    from tierctl.services.tier import TierService

    app.emit(TierService(app.workspace).delete(tier_id))


@tier.command(
    examples="""\
  tierctl tier move D 0
  tierctl tier move S 4"""
)
@click.argument("tier_id")
@click.argument("index", type=int)
@click.pass_obj
def move(app: AppContext, tier_id: str, index: int) -> None:
    """Move a tier to INDEX (0 = top) in the ranking order."""
    from tierctl.services.tier import TierService

    app.emit(TierService(app.workspace).move(tier_id, index))


@tier.command()
@click.pass_obj
def palette(app: AppContext) -> None:
    """List the colour palette and which tiers use each colour."""
    from tierctl.services.tier import TierService

    app.emit(TierService(app.workspace).palette())
