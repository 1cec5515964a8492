"""Core data types: attributes, tokens and slot values."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence


@dataclass(frozen=True, slots=True)
class Attribute:
    """A single trait_type/value pair (Metaplex-style metadata)."""

    trait_type: str
    value: str


@dataclass(frozen=True, slots=True)
class Token:
    """A token with its caller-assigned id and flat attribute list.

    The same ``trait_type`` may appear more than once (e.g. several
    "Outfit" layers); duplicates are meaningful and kept in order.

    Attributes:
        id: Identifier, expected to be unique within a collection.
        attributes: Attributes in declaration order.
    """

    id: str
    attributes: tuple[Attribute, ...] = field(default=())

    def __post_init__(self) -> None:
        if not isinstance(self.attributes, tuple):
            object.__setattr__(self, "attributes", tuple(self.attributes))

    @property
    def trait_count(self) -> int:
        """Number of (non-null) attributes on this token."""
        return len(self.attributes)

    @classmethod
    def from_trait_map(
        cls,
        token_id: str,
        traits: Mapping[str, str | Sequence[str]],
    ) -> Token:
        """Build a token from a marketplace ``trait_type -> value(s)`` map.

        Indexers report traits either as a single string or as a list of
        strings per key. Values are whitespace-trimmed; a list yields one
        attribute per element in list order.

        Args:
            token_id: Identifier for the new token.
            traits: Mapping of trait type to one value or a list of values.

        Returns:
            A Token with one Attribute per value.
        """
        attributes: list[Attribute] = []
        for trait_type, raw in traits.items():
            values: Iterable[str] = (raw,) if isinstance(raw, str) else raw
            attributes.extend(Attribute(trait_type, value.strip()) for value in values)
        return cls(token_id, tuple(attributes))


@dataclass(frozen=True, slots=True)
class NullMarker:
    """Placeholder for a trait-type slot a token does not fill.

    ``index`` is the position among the token's *missing* slots for that
    trait type, so tokens missing one instance and tokens missing two
    instances land in different buckets. Renders as ``__null_<index>``,
    which is also its sort key among slot values.
    """

    index: int

    def __str__(self) -> str:
        return f"__null_{self.index}"


# A value occupying one (trait_type, slot_index) slot.
SlotValue = str | NullMarker

# (trait_type, slot_index)
TraitSlot = tuple[str, int]


def slot_value_sort_key(value: SlotValue) -> tuple[str, bool]:
    """Order slot values by their string rendering.

    Null markers sort after a literal value with the same spelling.
    """
    return (str(value), isinstance(value, NullMarker))
