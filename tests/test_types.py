"""Tests for Attribute, Token and NullMarker."""

from __future__ import annotations

import pytest

from nft_rarity.types import Attribute, NullMarker, Token, slot_value_sort_key


class TestToken:
    """Tests for Token construction and helpers."""

    def test_frozen(self) -> None:
        token = Token("1", (Attribute("hat", "red"),))
        with pytest.raises(AttributeError):
            token.id = "2"  # type: ignore[misc]

    def test_attributes_coerced_to_tuple(self) -> None:
        token = Token("1", [Attribute("hat", "red")])  # type: ignore[arg-type]
        assert token.attributes == (Attribute("hat", "red"),)

    def test_defaults_to_no_attributes(self) -> None:
        assert Token("1").attributes == ()
        assert Token("1").trait_count == 0

    def test_trait_count_includes_duplicates(self) -> None:
        token = Token(
            "1",
            (Attribute("outfit", "jeans"), Attribute("outfit", "tee"), Attribute("hat", "cap")),
        )
        assert token.trait_count == 3

    def test_from_trait_map_single_and_multi(self) -> None:
        token = Token.from_trait_map(
            "7", {"hat": " red ", "outfit": ["jeans", " tee"]}
        )
        assert token.id == "7"
        assert token.attributes == (
            Attribute("hat", "red"),
            Attribute("outfit", "jeans"),
            Attribute("outfit", "tee"),
        )

    def test_from_trait_map_empty_list(self) -> None:
        token = Token.from_trait_map("7", {"hat": []})
        assert token.attributes == ()


class TestNullMarker:
    """Tests for the missing-slot marker."""

    def test_renders_indexed_sentinel(self) -> None:
        assert str(NullMarker(0)) == "__null_0"
        assert str(NullMarker(3)) == "__null_3"

    def test_distinct_indices_are_distinct(self) -> None:
        assert NullMarker(0) != NullMarker(1)
        assert NullMarker(1) == NullMarker(1)
        assert hash(NullMarker(1)) == hash(NullMarker(1))

    def test_not_equal_to_literal_string(self) -> None:
        assert NullMarker(0) != "__null_0"

    def test_sort_key_orders_by_rendering(self) -> None:
        values = ["zebra", NullMarker(1), "Apple", NullMarker(0), "__a"]
        ordered = sorted(values, key=slot_value_sort_key)
        assert ordered == ["Apple", "__a", NullMarker(0), NullMarker(1), "zebra"]
