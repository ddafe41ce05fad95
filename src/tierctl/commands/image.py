"""Command group: image import."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from tierctl.commands._base import TierGroup

if TYPE_CHECKING:
    from tierctl.commands._context import AppContext


@click.group(
    cls=TierGroup,
    examples="""\
  tierctl image import cover.png
  tierctl image import shots/*.jpg""",
)
def image() -> None:
    """Import images into the image bank."""


@image.command(
    "import",
    examples="""\
  tierctl image import a.png b.jpg
  tierctl -q image import *.webp""",
)
@click.argument(
    "files",
    nargs=-1,
    required=True,
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.pass_obj
def import_cmd(app: AppContext, files: tuple[Path, ...]) -> None:
    """Add image FILES to the end of the image bank, in the order given."""
    from tierctl.services.image import ImageService

    app.emit(ImageService(app.workspace).import_images(list(files)))
