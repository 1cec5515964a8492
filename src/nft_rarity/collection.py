"""Collection-wide statistics for rarity scoring.

Derives the collection "shape" (max occurrences per trait type) and the
per-slot value frequencies that every scorer reads. Trait types that a
token carries several times get one slot per occurrence; the token's
values are sorted lexicographically to decide which value lands in which
slot, and missing slots are filled with indexed null markers.

All maps are built in sorted key order and never mutated afterwards.
Iteration order matters: floating-point products and sums over buckets
are only bit-reproducible when visited in a fixed order.
"""

from __future__ import annotations

from collections import Counter, defaultdict
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from nft_rarity.types import NullMarker, slot_value_sort_key

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping, Sequence

    from nft_rarity.types import SlotValue, Token, TraitSlot


@dataclass(frozen=True, slots=True)
class Collection:
    """Precomputed, read-only statistics over a token set.

    Attributes:
        total_supply: Number of tokens the collection was built from.
        shape: trait_type -> max times it appears on any single token.
        frequencies: (trait_type, slot_index) -> value -> token count.
            Every slot implied by ``shape`` is present, and the counts of
            each slot sum to ``total_supply``.
    """

    total_supply: int
    shape: dict[str, int] = field(default_factory=dict)
    frequencies: dict[TraitSlot, dict[SlotValue, int]] = field(default_factory=dict)

    @property
    def slot_count(self) -> int:
        """Number of (trait_type, slot_index) slots."""
        return len(self.frequencies)

    def total_values_for_slot(self, trait_type: str, slot_index: int) -> int:
        """Distinct values recorded for a slot, null markers included.

        Returns 0 for a slot the collection does not have.
        """
        return len(self.frequencies.get((trait_type, slot_index), {}))

    def count_for_value(self, trait_type: str, slot_index: int, value: SlotValue) -> int:
        """Number of tokens holding *value* in the given slot (0 if none)."""
        return self.frequencies.get((trait_type, slot_index), {}).get(value, 0)

    def iter_buckets(self) -> Iterator[tuple[str, int, SlotValue, int]]:
        """Yield ``(trait_type, slot_index, value, count)`` in sorted order."""
        for (trait_type, slot_index), counts in self.frequencies.items():
            for value, count in counts.items():
                yield trait_type, slot_index, value, count


def detect_shape(tokens: Sequence[Token]) -> dict[str, int]:
    """Map each trait type to its maximum per-token occurrence count.

    Args:
        tokens: Token set to scan.

    Returns:
        Shape dict in sorted trait-type order. Trait types never seen are
        absent.
    """
    shape: dict[str, int] = {}
    for token in tokens:
        per_token = Counter(attr.trait_type for attr in token.attributes)
        for trait_type, count in per_token.items():
            if count > shape.get(trait_type, 0):
                shape[trait_type] = count
    return dict(sorted(shape.items()))


def normalize_token_attributes(
    token: Token,
    shape: Mapping[str, int],
) -> list[tuple[str, int, SlotValue]]:
    """Assign a token's values to slots against a known collection shape.

    For every trait type in *shape* (in sorted order) the token's values
    are sorted lexicographically, padded with ``NullMarker(0)``,
    ``NullMarker(1)``, ... for each missing slot, and numbered from slot 0.
    Trait types the shape does not know are dropped.

    This is the exact per-token step ``build_collection`` tallies, so
    re-normalizing a member token reproduces its contribution.

    Args:
        token: Token to normalize.
        shape: Collection shape (trait_type -> max occurrences).

    Returns:
        ``(trait_type, slot_index, value)`` triples ordered by
        ``(trait_type, slot_index)``.
    """
    grouped: defaultdict[str, list[str]] = defaultdict(list)
    for attr in token.attributes:
        grouped[attr.trait_type].append(attr.value)

    triples: list[tuple[str, int, SlotValue]] = []
    for trait_type in sorted(shape):
        max_count = shape[trait_type]
        values: list[SlotValue] = sorted(grouped.get(trait_type, ()))
        # A token can never exceed the shape it was measured into, but a
        # foreign shape might be narrower; extra values have no slot.
        values = values[:max_count]
        values.extend(NullMarker(i) for i in range(max_count - len(values)))
        triples.extend(
            (trait_type, slot_index, value) for slot_index, value in enumerate(values)
        )
    return triples


def build_collection(tokens: Sequence[Token]) -> Collection:
    """Build collection statistics from a token set.

    Args:
        tokens: Every token of the collection. The whole set must be seen
            before any token can be scored.

    Returns:
        A read-only Collection. An empty token list yields an empty
        Collection with ``total_supply == 0``.
    """
    shape = detect_shape(tokens)

    tallies: dict[TraitSlot, Counter[SlotValue]] = {
        (trait_type, slot_index): Counter()
        for trait_type, max_count in shape.items()
        for slot_index in range(max_count)
    }

    for token in tokens:
        for trait_type, slot_index, value in normalize_token_attributes(token, shape):
            tallies[(trait_type, slot_index)][value] += 1

    frequencies = {
        slot: dict(sorted(counts.items(), key=lambda item: slot_value_sort_key(item[0])))
        for slot, counts in tallies.items()
    }
    return Collection(total_supply=len(tokens), shape=shape, frequencies=frequencies)
