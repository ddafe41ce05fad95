"""Command: drag an image or tier and drop it on a target."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tierctl.commands._base import TierCommand

if TYPE_CHECKING:
    from tierctl.commands._context import AppContext


@click.command(
    cls=TierCommand,
    examples="""\
  tierctl drag 3f2a9c1e-... S            # image onto tier S (appended)
  tierctl drag 3f2a9c1e-... 77b0d2aa-... # image before another image
  tierctl drag 3f2a9c1e-... unranked     # image back to the bank
  tierctl drag D A                       # tier D to tier A's position
  tierctl drag D                         # dropped outside: no change""",
)
@click.argument("active_id")
@click.argument("over_id", required=False)
@click.pass_obj
def drag(app: AppContext, active_id: str, over_id: str | None) -> None:
    """Drag ACTIVE_ID and drop it on OVER_ID.

    ACTIVE_ID is an image id or tier id.  OVER_ID is an image, a tier, or
    ``unranked`` (the image bank); omit it to drop outside any target.
    """
    from tierctl.services.drag import DragService

    app.emit(DragService(app.workspace).drag(active_id, over_id))
