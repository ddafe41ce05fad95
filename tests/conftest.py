"""Shared pytest fixtures and test helpers for tierctl tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
import structlog
from click.testing import CliRunner

from tierctl.config.settings import TierSettings
from tierctl.domain.board import Board
from tierctl.domain.ids import UNRANKED_ID, generate_item_id
from tierctl.domain.models import ImageItem
from tierctl.infrastructure.workspace import Workspace
from tierctl.services.telemetry import disable_telemetry

# Smallest valid PNG: 1x1 transparent pixel.
PNG_BYTES = bytes.fromhex(
    "89504e470d0a1a0a0000000d4948445200000001000000010806000000"
    "1f15c4890000000d49444154789c6360000002000154a24f5d0000000049454e44ae426082"
)


@pytest.fixture(autouse=True)
def _restore_global_state() -> Generator[None]:
    """Undo logging and telemetry changes made by verbose CLI runs."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
    disable_telemetry()
    structlog.contextvars.clear_contextvars()


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer environment variables out of settings resolution."""
    monkeypatch.delenv("TIERCTL_CONFIG", raising=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def workspace_root(tmp_path: Path) -> Path:
    """Temporary workspace directory.

    This is the single source of truth for the workspace layout.  All
    workspace-related fixtures (workspace, _isolated_workspace) build on it.
    """
    return tmp_path


@pytest.fixture
def workspace(workspace_root: Path) -> Generator[Workspace]:
    """Workspace with the default board and an empty storage slot."""
    settings = TierSettings.from_cli(workspace_root=workspace_root)
    yield Workspace(settings)


@pytest.fixture
def _isolated_workspace(workspace_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp workspace so the CLI writes an isolated board.

    Use via ``@pytest.mark.usefixtures("_isolated_workspace")`` on command
    test classes.
    """
    monkeypatch.chdir(workspace_root)


# ---------------------------------------------------------------------------
# Shared test helpers (used across test modules)
# ---------------------------------------------------------------------------


def make_item(src: str = "data:image/png;base64,AAAA") -> ImageItem:
    """A fresh image item with a generated id."""
    return ImageItem(id=generate_item_id(), src=src)


def board_with_items(*counts: int) -> tuple[Board, dict[str, list[str]]]:
    """Default board with ``counts`` items in S, A, B, ... then the bank.

    The last count fills ``unranked``.  Returns the board and a mapping
    of container id to the item ids placed there, in order.
    """
    board = Board.default()
    containers = [*board.registry.ids()[: len(counts) - 1], UNRANKED_ID]
    placed: dict[str, list[str]] = {}
    for container_id, count in zip(containers, counts, strict=False):
        items = [make_item() for _ in range(count)]
        board.import_items(items)
        placed[container_id] = [item.id for item in items]
        if container_id != UNRANKED_ID:
            for item in items:
                board.store.move_across(UNRANKED_ID, item.id, container_id)
    return board, placed


def make_png(directory: Path, name: str = "image.png") -> Path:
    """Write a tiny PNG file and return its path."""
    path = directory / name
    path.write_bytes(PNG_BYTES)
    return path


def import_images(workspace: Workspace, *names: str) -> list[str]:
    """Import PNG files via ImageService, asserting success. Returns item ids."""
    from tierctl.services.image import ImageService

    paths = [make_png(workspace.root, name) for name in names]
    result = ImageService(workspace).import_images(paths)
    assert result.ok, result.error
    return [entry["id"] for entry in result.data["imported"]]


def drag(workspace: Workspace, active_id: str, over_id: str | None) -> dict[str, Any]:
    """Run one drag gesture via DragService, asserting success."""
    from tierctl.services.drag import DragService

    result = DragService(workspace).drag(active_id, over_id)
    assert result.ok, result.error
    return result.data
