"""Orchestration: collection build -> scoring -> ranking.

``score_and_rank`` is the pure entry point most callers need.
``RarityEngine`` wraps it with configuration, scorer selection through the
registry, per-call overrides, phase timing and run logging::

    engine = RarityEngine(RarityConfig(scorer_type="information_content"))
    ranked = engine.rank(tokens)

The build phase must see every token before any is scored; scoring may run
on worker threads against the finished, read-only Collection; ranking is a
global sort after all scores are in.
"""

from __future__ import annotations

import hashlib
import logging
import time
from typing import TYPE_CHECKING, Any

from nft_rarity.collection import build_collection
from nft_rarity.config import RarityConfig, resolve_config
from nft_rarity.logging.logger import RarityLogger
from nft_rarity.logging.types import ScoringRunRecord
from nft_rarity.ranking.ranker import rank
from nft_rarity.scoring.registry import ScorerRegistry

if TYPE_CHECKING:
    from collections.abc import Sequence

    from nft_rarity.ranking.types import RankedToken
    from nft_rarity.scoring.base import Scorer
    from nft_rarity.types import Token

logger = logging.getLogger("nft_rarity")


def score_and_rank(
    scorer: Scorer,
    tokens: Sequence[Token],
    nan_policy: str = "equal",
) -> list[RankedToken]:
    """Build collection stats, score every token and rank the result.

    Args:
        scorer: Scoring algorithm to apply.
        tokens: The full token set of the collection.
        nan_policy: Ranker NaN handling, ``"equal"`` or ``"error"``.

    Returns:
        RankedTokens rarest first; empty for an empty token list.
    """
    collection = build_collection(tokens)
    scores = scorer.score(collection, tokens)
    return rank(scores, scorer.lower_is_rarer(), nan_policy=nan_policy)


def _config_hash(config: RarityConfig) -> str:
    """First 16 hex characters of the SHA-256 of the config dump."""
    raw = config.model_dump_json().encode("utf-8")
    return hashlib.sha256(raw).hexdigest()[:16]


class RarityEngine:
    """Configured scorer plus run logging around ``score_and_rank``.

    The default scorer is built once from the engine config. Per-call
    overrides that change the scorer type build a scorer for that call
    only. All runs log through the engine's single ``run_logger``, using
    the call's resolved ``log_level`` and ``diagnostic_mode``.
    """

    def __init__(self, config: RarityConfig | None = None) -> None:
        """Initialize the engine.

        Args:
            config: Configuration; loaded from the environment when None.
        """
        self._config = config if config is not None else RarityConfig()
        self._scorer = ScorerRegistry.build(self._config)
        self._config_hash = _config_hash(self._config)
        self._run_logger = RarityLogger(self._config)

        logger.info(
            "RarityEngine initialized: scorer=%s, nan_policy=%s, workers=%d",
            self._scorer.name(),
            self._config.nan_policy,
            self._config.score_workers,
        )

    @property
    def config(self) -> RarityConfig:
        return self._config

    @property
    def scorer(self) -> Scorer:
        return self._scorer

    @property
    def run_logger(self) -> RarityLogger:
        return self._run_logger

    def rank(
        self,
        tokens: Sequence[Token],
        overrides: dict[str, Any] | None = None,
    ) -> list[RankedToken]:
        """Score and rank *tokens*, logging one run record.

        Args:
            tokens: The full token set of the collection.
            overrides: Per-call config overrides (see ``resolve_config``).

        Returns:
            RankedTokens rarest first.

        Raises:
            ConfigValidationError: If an override key is invalid or the
                NaN policy is unknown.
            InvalidScoreError: If a score is NaN under ``nan_policy="error"``.
        """
        config = resolve_config(self._config, overrides)
        if config is self._config:
            scorer = self._scorer
            hash_str = self._config_hash
        else:
            scorer = (
                self._scorer
                if ScorerRegistry.canonical_name(config.scorer_type)
                == ScorerRegistry.canonical_name(self._config.scorer_type)
                else ScorerRegistry.build(config)
            )
            hash_str = _config_hash(config)

        timestamp_ns = time.time_ns()
        t_start = time.perf_counter_ns()

        collection = build_collection(tokens)
        t_built = time.perf_counter_ns()

        scores = scorer.score(collection, tokens)
        t_scored = time.perf_counter_ns()

        ranked = rank(scores, scorer.lower_is_rarer(), nan_policy=config.nan_policy)
        t_ranked = time.perf_counter_ns()

        self._run_logger.log_run(
            ScoringRunRecord(
                timestamp_ns=timestamp_ns,
                build_ms=(t_built - t_start) / 1_000_000.0,
                score_ms=(t_scored - t_built) / 1_000_000.0,
                rank_ms=(t_ranked - t_scored) / 1_000_000.0,
                total_ms=(t_ranked - t_start) / 1_000_000.0,
                scorer_name=scorer.name(),
                total_supply=collection.total_supply,
                trait_type_count=len(collection.shape),
                slot_count=collection.slot_count,
                min_score=min((r.score for r in ranked), default=0.0),
                max_score=max((r.score for r in ranked), default=0.0),
                distinct_ranks=len({r.rank for r in ranked}),
                config_hash=hash_str,
            ),
            config,
        )
        return ranked
