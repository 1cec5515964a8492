"""Run logging subsystem for nft-rarity.

Provides immutable per-run records and a configurable logger that
supports none/summary/full verbosity and in-memory diagnostic mode.
"""

from nft_rarity.logging.logger import RarityLogger
from nft_rarity.logging.types import ScoringRunRecord

__all__ = [
    "RarityLogger",
    "ScoringRunRecord",
]
