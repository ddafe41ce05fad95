"""Tests for TierService — add, update, delete, move, palette."""

from pathlib import Path

from tests.conftest import drag, import_images
from tierctl.config.settings import TierSettings
from tierctl.domain import snapshot
from tierctl.domain.ids import UNRANKED_ID, validate_id
from tierctl.infrastructure.workspace import Workspace
from tierctl.services.tier import TierService


def _saved_tier_ids(workspace: Workspace) -> list[str]:
    text = workspace.storage.read_text()
    assert text is not None
    registry, _ = snapshot.loads(text)
    return registry.ids()


class TestAdd:
    def test_defaults(self, workspace: Workspace) -> None:
        result = TierService(workspace).add()
        assert result.ok
        assert result.op == "add_tier"
        assert validate_id(result.data["id"], "tier")
        assert result.data["label"] == "New Tier"
        assert result.data["color"] == "#4a4a4a"
        assert result.data["index"] == 5
        assert result.data["items"] == []

    def test_persisted(self, workspace: Workspace) -> None:
        tier_id = TierService(workspace).add(label="F").data["id"]
        assert _saved_tier_ids(workspace)[-1] == tier_id

    def test_color_normalized(self, workspace: Workspace) -> None:
        result = TierService(workspace).add(color="#ABCDEF")
        assert result.data["color"] == "#abcdef"

    def test_invalid_color(self, workspace: Workspace) -> None:
        result = TierService(workspace).add(color="red")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_INPUT"
        assert len(workspace.board.registry) == 5

    def test_configured_defaults(self, workspace_root: Path) -> None:
        (workspace_root / "tierctl.toml").write_text(
            '[board]\nnew_tier_label = "F"\nnew_tier_color = "#FFFFFF"\n'
        )
        ws = Workspace(TierSettings.from_cli(workspace_root=workspace_root))
        result = TierService(ws).add()
        assert result.data["label"] == "F"
        assert result.data["color"] == "#ffffff"


class TestUpdate:
    def test_label(self, workspace: Workspace) -> None:
        result = TierService(workspace).update("S", label="Best")
        assert result.ok
        assert result.data["label"] == "Best"
        assert result.data["fields_changed"] == ["label"]

    def test_color(self, workspace: Workspace) -> None:
        result = TierService(workspace).update("A", color="#000000")
        assert result.data["color"] == "#000000"
        assert result.data["fields_changed"] == ["color"]

    def test_empty_label_allowed(self, workspace: Workspace) -> None:
        result = TierService(workspace).update("A", label="")
        assert result.ok
        assert result.data["label"] == ""

    def test_nothing_to_update(self, workspace: Workspace) -> None:
        result = TierService(workspace).update("S")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_INPUT"

    def test_unknown_tier(self, workspace: Workspace) -> None:
        result = TierService(workspace).update("Z", label="x")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "NOT_FOUND"
        assert not workspace.storage.exists()


class TestDelete:
    def test_items_return_to_bank(self, workspace: Workspace) -> None:
        a, b, c = import_images(workspace, "a.png", "b.png", "c.png")
        drag(workspace, a, "B")
        drag(workspace, b, "B")
        result = TierService(workspace).delete("B")
        assert result.ok
        assert result.data == {"id": "B", "label": "B", "items_moved": 2}
        assert workspace.board.store.item_ids(UNRANKED_ID) == [c, a, b]
        assert "B" not in _saved_tier_ids(workspace)

    def test_unknown(self, workspace: Workspace) -> None:
        result = TierService(workspace).delete("Z")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "NOT_FOUND"
        assert len(workspace.board.registry) == 5

    def test_unranked(self, workspace: Workspace) -> None:
        result = TierService(workspace).delete(UNRANKED_ID)
        assert not result.ok


class TestMove:
    def test_move(self, workspace: Workspace) -> None:
        result = TierService(workspace).move("D", 0)
        assert result.ok
        assert result.data["from_index"] == 4
        assert result.data["to_index"] == 0
        assert result.data["order"] == ["D", "S", "A", "B", "C"]
        assert _saved_tier_ids(workspace) == ["D", "S", "A", "B", "C"]

    def test_clamped(self, workspace: Workspace) -> None:
        result = TierService(workspace).move("S", 99)
        assert result.data["to_index"] == 4

    def test_unknown(self, workspace: Workspace) -> None:
        result = TierService(workspace).move("Z", 0)
        assert not result.ok


class TestPalette:
    def test_lists_usage(self, workspace: Workspace) -> None:
        result = TierService(workspace).palette()
        assert result.ok
        assert result.data["count"] == 10
        first = result.data["colors"][0]
        assert first == {"color": "#ff7f7f", "tiers": ["S"]}
        grey = next(c for c in result.data["colors"] if c["color"] == "#4a4a4a")
        assert grey["tiers"] == []
