"""Image import — files on disk to self-contained data-URI items."""

from __future__ import annotations

import base64
import mimetypes
from pathlib import Path
from typing import TYPE_CHECKING

from tierctl.domain.ids import generate_item_id
from tierctl.domain.models import ImageItem

if TYPE_CHECKING:
    from collections.abc import Iterable

# Types the stdlib registry misses on some platforms.
_EXTRA_TYPES: dict[str, str] = {
    ".webp": "image/webp",
    ".avif": "image/avif",
    ".heic": "image/heic",
}


class ImageImportError(ValueError):
    """A file could not be turned into an image item."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


def guess_image_type(path: Path) -> str | None:
    """Return the ``image/*`` MIME type for *path*, or None if not an image."""
    mime, _ = mimetypes.guess_type(path.name)
    if mime is None:
        mime = _EXTRA_TYPES.get(path.suffix.lower())
    if mime is None or not mime.startswith("image/"):
        return None
    return mime


def to_data_uri(data: bytes, mime: str) -> str:
    """Encode raw bytes as ``data:<mime>;base64,<payload>``."""
    return f"data:{mime};base64,{base64.b64encode(data).decode('ascii')}"


def read_image(path: Path, *, max_bytes: int) -> ImageItem:
    """Read one image file into a new item with a fresh id."""
    mime = guess_image_type(path)
    if mime is None:
        raise ImageImportError(path, "not an image file")
    if not path.is_file():
        raise ImageImportError(path, "file not found")
    size = path.stat().st_size
    if size > max_bytes:
        raise ImageImportError(path, f"{size} bytes exceeds limit of {max_bytes}")
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise ImageImportError(path, str(exc)) from exc
    return ImageItem(id=generate_item_id(), src=to_data_uri(data, mime))


def read_images(paths: Iterable[Path], *, max_bytes: int) -> list[ImageItem]:
    """Read every file in *paths*, in order. Fails on the first bad file."""
    return [read_image(Path(p), max_bytes=max_bytes) for p in paths]
