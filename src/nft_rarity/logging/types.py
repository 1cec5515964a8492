"""Data types for the run logging subsystem."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ScoringRunRecord:
    """Immutable record of one build -> score -> rank run.

    Attributes:
        timestamp_ns: Wall-clock start of the run (nanoseconds since epoch).
        scorer_name: Human-readable name of the scorer used.
        total_supply: Number of tokens in the collection.
        trait_type_count: Number of trait types in the collection shape.
        slot_count: Number of (trait_type, slot_index) slots.
        build_ms: Time spent building collection statistics (ms).
        score_ms: Time spent scoring tokens (ms).
        rank_ms: Time spent ranking (ms).
        total_ms: Total run time (ms).
        min_score: Smallest score, 0.0 for an empty run.
        max_score: Largest score, 0.0 for an empty run.
        distinct_ranks: Number of distinct ranks assigned.
        config_hash: 16-char SHA-256 prefix of the active config.
    """

    # Timing
    timestamp_ns: int
    build_ms: float
    score_ms: float
    rank_ms: float
    total_ms: float

    # Collection
    scorer_name: str
    total_supply: int
    trait_type_count: int
    slot_count: int

    # Result
    min_score: float
    max_score: float
    distinct_ranks: int

    # Config snapshot
    config_hash: str
