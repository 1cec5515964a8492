"""nft-rarity: rarity scores and dense ranks for NFT collections.

Builds collection-wide trait statistics (including trait types that appear
several times on one token), scores every token with a pluggable algorithm
(statistical joint probability or OpenRarity-style information content),
and turns the scores into dense, tie-sharing ranks.
"""

from __future__ import annotations

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("nft-rarity")
except PackageNotFoundError:
    __version__ = "0.0.0"

from nft_rarity.collection import Collection, build_collection, normalize_token_attributes
from nft_rarity.config import RarityConfig, resolve_config, validate_overrides
from nft_rarity.engine import RarityEngine, score_and_rank
from nft_rarity.exceptions import ConfigValidationError, InvalidScoreError, RarityError
from nft_rarity.ranking import RankedToken, RarityTier, assign_tiers, rank
from nft_rarity.scoring import (
    InformationContentScorer,
    Scorer,
    ScorerRegistry,
    StatisticalRarityScorer,
)
from nft_rarity.types import Attribute, NullMarker, SlotValue, Token

__all__ = [
    "Attribute",
    "Collection",
    "ConfigValidationError",
    "InformationContentScorer",
    "InvalidScoreError",
    "NullMarker",
    "RankedToken",
    "RarityConfig",
    "RarityEngine",
    "RarityError",
    "RarityTier",
    "Scorer",
    "ScorerRegistry",
    "SlotValue",
    "StatisticalRarityScorer",
    "Token",
    "__version__",
    "assign_tiers",
    "build_collection",
    "normalize_token_attributes",
    "rank",
    "resolve_config",
    "score_and_rank",
    "validate_overrides",
]
