"""Run logger for rarity scoring.

Uses the standard ``logging`` module with the ``"nft_rarity"`` logger.
No ``print()`` statements. Supports three verbosity levels and an
in-memory diagnostic mode for post-hoc analysis.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from typing import TYPE_CHECKING, Any

import numpy as np

if TYPE_CHECKING:
    from nft_rarity.config import RarityConfig
    from nft_rarity.logging.types import ScoringRunRecord

logger = logging.getLogger("nft_rarity")


class RarityLogger:
    """Per-run diagnostic logger.

    Log levels:
        ``"none"``: No logging output. Records are still stored if
        ``diagnostic_mode=True``.

        ``"summary"``: One line per run with supply, scorer, score range
        and timings.

        ``"full"``: Full JSON dump of all record fields.
    """

    def __init__(self, config: RarityConfig) -> None:
        self._log_level = config.log_level
        self._diagnostic_mode = config.diagnostic_mode
        self._records: list[ScoringRunRecord] = []

    def log_run(self, record: ScoringRunRecord, config: RarityConfig | None = None) -> None:
        """Log a single scoring run.

        Args:
            record: Immutable record of the run.
            config: Per-call config whose ``log_level`` and
                ``diagnostic_mode`` apply to this run only. Defaults to the
                config the logger was built with.
        """
        log_level = config.log_level if config is not None else self._log_level
        diagnostic_mode = config.diagnostic_mode if config is not None else self._diagnostic_mode

        if diagnostic_mode:
            self._records.append(record)

        if log_level == "none":
            return

        if log_level == "summary":
            logger.info(
                "scorer=%s supply=%d traits=%d slots=%d score=[%.6g, %.6g] "
                "ranks=%d build=%.2fms score=%.2fms rank=%.2fms total=%.2fms",
                record.scorer_name,
                record.total_supply,
                record.trait_type_count,
                record.slot_count,
                record.min_score,
                record.max_score,
                record.distinct_ranks,
                record.build_ms,
                record.score_ms,
                record.rank_ms,
                record.total_ms,
            )
        elif log_level == "full":
            logger.info("scoring_run: %s", json.dumps(asdict(record), default=str))

    def get_diagnostic_data(self) -> list[ScoringRunRecord]:
        """Return all stored records (empty unless ``diagnostic_mode=True``)."""
        return list(self._records)

    def get_summary_stats(self) -> dict[str, Any]:
        """Compute summary statistics over all stored records.

        Returns:
            Dictionary with aggregate stats, or empty dict if no records.
        """
        if not self._records:
            return {}

        supplies = np.array([r.total_supply for r in self._records], dtype=np.int64)
        total_times = np.array([r.total_ms for r in self._records], dtype=np.float64)
        score_times = np.array([r.score_ms for r in self._records], dtype=np.float64)

        return {
            "total_runs": len(self._records),
            "total_tokens": int(supplies.sum()),
            "mean_supply": float(supplies.mean()),
            "mean_score_ms": float(score_times.mean()),
            "mean_total_ms": float(total_times.mean()),
            "p50_total_ms": float(np.percentile(total_times, 50)),
            "max_total_ms": float(total_times.max()),
            "scorers": sorted({r.scorer_name for r in self._records}),
        }
