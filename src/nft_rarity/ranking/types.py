"""Data types for the ranking subsystem."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True, slots=True)
class RankedToken:
    """A scored token with its 1-indexed rarity rank.

    Attributes:
        id: Token identifier.
        score: Score produced by the scorer.
        rank: Dense rank with skip-on-tie (1 = rarest).
    """

    id: str
    score: float
    rank: int


class RarityTier(str, Enum):
    """Coarse rarity bucket derived from a rank, for listing badges."""

    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    EPIC = "epic"
    LEGENDARY = "legendary"

    @classmethod
    def from_rank(cls, rank: int, max_rank: int) -> RarityTier:
        """Bucket *rank* by its position within ``1..max_rank``.

        Top 5% is legendary, then 25% epic, 50% rare, 75% uncommon, and the
        rest common. A non-positive *max_rank* yields common.
        """
        if max_rank <= 0:
            return cls.COMMON
        ratio = rank / max_rank
        if ratio <= 0.05:
            return cls.LEGENDARY
        if ratio <= 0.25:
            return cls.EPIC
        if ratio <= 0.50:
            return cls.RARE
        if ratio <= 0.75:
            return cls.UNCOMMON
        return cls.COMMON
