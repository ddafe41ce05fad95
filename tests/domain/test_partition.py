"""Tests for PartitionStore — every item in exactly one container."""

from collections import Counter

import pytest

from tests.conftest import make_item
from tierctl.domain.errors import NotFoundError
from tierctl.domain.ids import UNRANKED_ID
from tierctl.domain.models import ImageItem
from tierctl.domain.partition import PartitionStore


def _assert_partition(store: PartitionStore, expected_ids: set[str]) -> None:
    """Every expected id appears exactly once across all containers."""
    counts = Counter(item.id for _, item in store.iter_items())
    assert set(counts) == expected_ids
    assert all(n == 1 for n in counts.values())


@pytest.fixture
def items() -> list[ImageItem]:
    return [make_item() for _ in range(4)]


@pytest.fixture
def store(items: list[ImageItem]) -> PartitionStore:
    """S = [a, b, c], A = [], unranked = [d]."""
    return PartitionStore({"S": items[:3], "A": [], UNRANKED_ID: items[3:]})


class TestConstruction:
    def test_unranked_always_present(self) -> None:
        assert PartitionStore().container_ids() == [UNRANKED_ID]

    def test_duplicate_item_rejected(self) -> None:
        item = make_item()
        with pytest.raises(ValueError, match="more than one position"):
            PartitionStore({"S": [item], "A": [item]})

    def test_len_counts_items(self, store: PartitionStore) -> None:
        assert len(store) == 4


class TestLookup:
    def test_locate(self, store: PartitionStore, items: list[ImageItem]) -> None:
        assert store.locate(items[1].id) == ("S", 1)
        assert store.locate(items[3].id) == (UNRANKED_ID, 0)
        assert store.locate("nope") is None

    def test_get_item(self, store: PartitionStore, items: list[ImageItem]) -> None:
        assert store.get_item(items[2].id) == items[2]
        assert store.get_item("nope") is None

    def test_index_of_missing(self, store: PartitionStore) -> None:
        with pytest.raises(NotFoundError):
            store.index_of("S", "nope")

    def test_unknown_container(self, store: PartitionStore) -> None:
        with pytest.raises(NotFoundError, match="container"):
            store.items("Z")


class TestMoveWithin:
    def test_reorders(self, store: PartitionStore, items: list[ImageItem]) -> None:
        assert store.move_within("S", 0, 2) == 2
        assert store.item_ids("S") == [items[1].id, items[2].id, items[0].id]

    def test_target_clamped(self, store: PartitionStore, items: list[ImageItem]) -> None:
        assert store.move_within("S", 0, 10) == 2
        assert store.item_ids("S")[-1] == items[0].id

    def test_same_index_noop(self, store: PartitionStore, items: list[ImageItem]) -> None:
        before = store.item_ids("S")
        assert store.move_within("S", 1, 1) == 1
        assert store.item_ids("S") == before

    def test_bad_from_index(self, store: PartitionStore) -> None:
        with pytest.raises(NotFoundError):
            store.move_within("S", 5, 0)

    def test_other_containers_untouched(
        self, store: PartitionStore, items: list[ImageItem]
    ) -> None:
        store.move_within("S", 2, 0)
        assert store.item_ids(UNRANKED_ID) == [items[3].id]
        _assert_partition(store, {i.id for i in items})


class TestMoveAcross:
    def test_append_to_empty(self, store: PartitionStore, items: list[ImageItem]) -> None:
        assert store.move_across("S", items[0].id, "A") == 0
        assert store.item_ids("A") == [items[0].id]
        assert items[0].id not in store.item_ids("S")
        _assert_partition(store, {i.id for i in items})

    def test_insert_before_index(self, store: PartitionStore, items: list[ImageItem]) -> None:
        assert store.move_across(UNRANKED_ID, items[3].id, "S", 1) == 1
        assert store.item_ids("S") == [items[0].id, items[3].id, items[1].id, items[2].id]
        assert store.item_ids(UNRANKED_ID) == []

    def test_out_of_range_index_appends(
        self, store: PartitionStore, items: list[ImageItem]
    ) -> None:
        assert store.move_across(UNRANKED_ID, items[3].id, "S", 99) == 3
        assert store.item_ids("S")[-1] == items[3].id

    def test_negative_index_appends(self, store: PartitionStore, items: list[ImageItem]) -> None:
        store.move_across(UNRANKED_ID, items[3].id, "S", -1)
        assert store.item_ids("S")[-1] == items[3].id

    def test_missing_item_changes_nothing(self, store: PartitionStore) -> None:
        before = store.copy()
        with pytest.raises(NotFoundError):
            store.move_across("S", "nope", "A")
        assert store == before

    def test_missing_destination_changes_nothing(
        self, store: PartitionStore, items: list[ImageItem]
    ) -> None:
        before = store.copy()
        with pytest.raises(NotFoundError):
            store.move_across("S", items[0].id, "Z")
        assert store == before

    def test_same_container_delegates(
        self, store: PartitionStore, items: list[ImageItem]
    ) -> None:
        store.move_across("S", items[0].id, "S", 2)
        assert store.item_ids("S") == [items[1].id, items[2].id, items[0].id]


class TestImport:
    def test_appends_to_unranked_in_order(self, store: PartitionStore) -> None:
        new = [make_item(), make_item()]
        assert store.import_items(new) == 2
        assert store.item_ids(UNRANKED_ID)[-2:] == [new[0].id, new[1].id]

    def test_existing_id_rejected(self, store: PartitionStore, items: list[ImageItem]) -> None:
        with pytest.raises(ValueError, match="already on the board"):
            store.import_items([items[0]])

    def test_repeat_within_batch_rejected_atomically(self, store: PartitionStore) -> None:
        item = make_item()
        before = store.copy()
        with pytest.raises(ValueError):
            store.import_items([item, item])
        assert store == before


class TestContainers:
    def test_create_existing_rejected(self, store: PartitionStore) -> None:
        with pytest.raises(ValueError, match="already exists"):
            store.create_container("S")

    def test_dissolve_appends_to_unranked(
        self, store: PartitionStore, items: list[ImageItem]
    ) -> None:
        assert store.dissolve_container("S") == 3
        assert "S" not in store
        assert store.item_ids(UNRANKED_ID) == [items[3].id] + [i.id for i in items[:3]]
        _assert_partition(store, {i.id for i in items})

    def test_unranked_cannot_be_dissolved(self, store: PartitionStore) -> None:
        with pytest.raises(NotFoundError):
            store.dissolve_container(UNRANKED_ID)

    def test_copy_is_independent(self, store: PartitionStore, items: list[ImageItem]) -> None:
        clone = store.copy()
        clone.move_across("S", items[0].id, "A")
        assert store.item_ids("A") == []
