"""Ranking subsystem for nft-rarity.

Converts scores from any scorer into dense, tie-sharing ranks and optional
rarity tiers.
"""

from nft_rarity.ranking.ranker import assign_tiers, rank
from nft_rarity.ranking.types import RankedToken, RarityTier

__all__ = [
    "RankedToken",
    "RarityTier",
    "assign_tiers",
    "rank",
]
