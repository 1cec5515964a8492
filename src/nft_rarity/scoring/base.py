"""Base class for rarity scorers.

Defines the abstract interface every scoring algorithm implements and the
shared per-token fan-out used by the concrete scorers.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from nft_rarity.collection import Collection
    from nft_rarity.config import RarityConfig
    from nft_rarity.types import Token


class Scorer(ABC):
    """Abstract base class for rarity scoring algorithms.

    A scorer turns collection statistics plus the collection's tokens into
    one ``(token_id, score)`` pair per token, in input order. Whether a
    smaller or a larger score means "rarer" is reported by
    ``lower_is_rarer()`` so the ranker can sort without knowing which
    algorithm produced the scores.

    Scoring is a pure function of the read-only Collection and each
    token's own attributes, so tokens may be scored on several threads.
    """

    def __init__(self, config: RarityConfig | None = None, *, workers: int | None = None) -> None:
        """Initialize the scorer.

        Args:
            config: Optional configuration providing ``score_workers``.
            workers: Explicit worker count; takes precedence over *config*.
        """
        if workers is None:
            workers = config.score_workers if config is not None else 1
        self._workers = max(1, workers)

    @abstractmethod
    def score(self, collection: Collection, tokens: Sequence[Token]) -> list[tuple[str, float]]:
        """Score every token against the collection statistics.

        Args:
            collection: Statistics built from the full token set.
            tokens: Tokens to score.

        Returns:
            ``(token_id, score)`` pairs in the order of *tokens*. Empty
            when *tokens* is empty or the collection has no supply.
        """

    @abstractmethod
    def lower_is_rarer(self) -> bool:
        """Whether smaller scores indicate rarer tokens."""

    @abstractmethod
    def name(self) -> str:
        """Human-readable name of the algorithm."""

    def _map_tokens(
        self,
        fn: Callable[[Token], float],
        tokens: Sequence[Token],
    ) -> list[tuple[str, float]]:
        """Apply *fn* to each token, inline or across worker threads.

        Result order always matches *tokens*.
        """
        if self._workers <= 1 or len(tokens) <= 1:
            return [(token.id, fn(token)) for token in tokens]

        with ThreadPoolExecutor(max_workers=self._workers) as pool:
            scores = list(pool.map(fn, tokens))
        return [(token.id, score) for token, score in zip(tokens, scores)]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(workers={self._workers})"
