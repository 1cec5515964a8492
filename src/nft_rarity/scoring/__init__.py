"""Scoring subsystem for nft-rarity.

Pluggable algorithms that turn collection statistics into per-token
rarity scores. Importing this package registers the built-in scorers.
"""

from nft_rarity.scoring.base import Scorer
from nft_rarity.scoring.information_content import InformationContentScorer
from nft_rarity.scoring.registry import ScorerRegistry
from nft_rarity.scoring.statistical import StatisticalRarityScorer

__all__ = [
    "InformationContentScorer",
    "Scorer",
    "ScorerRegistry",
    "StatisticalRarityScorer",
]
