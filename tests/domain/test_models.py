"""Tests for Tier / ImageItem models and colour normalization."""

import pytest
from pydantic import ValidationError

from tierctl.domain.models import ImageItem, Tier, normalize_color


class TestTier:
    def test_construction(self) -> None:
        tier = Tier(id="S", label="S", color="#ff7f7f")
        assert tier.label == "S"

    def test_frozen(self) -> None:
        tier = Tier(id="S", label="S", color="#ff7f7f")
        with pytest.raises(ValidationError):
            tier.label = "X"  # type: ignore[misc]

    def test_empty_id_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Tier(id="", label="S", color="#ff7f7f")

    def test_empty_label_allowed(self) -> None:
        assert Tier(id="S", label="", color="#ff7f7f").label == ""


class TestImageItem:
    def test_empty_id_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ImageItem(id="", src="data:image/png;base64,AAAA")

    def test_equality_by_value(self) -> None:
        a = ImageItem(id="x", src="data:,")
        b = ImageItem(id="x", src="data:,")
        assert a == b


class TestNormalizeColor:
    def test_lowercases(self) -> None:
        assert normalize_color("#FF7F7F") == "#ff7f7f"

    @pytest.mark.parametrize("value", ["red", "#abc", "ff7f7f"])
    def test_rejects(self, value: str) -> None:
        with pytest.raises(ValueError, match="expected #rrggbb"):
            normalize_color(value)
