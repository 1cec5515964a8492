"""Dense, tie-aware ranking of scored tokens.

Sorts scores rarest-first and assigns ranks where tied scores share a rank
and the next distinct score takes its 1-based position:
``[0.1, 0.2, 0.2, 0.5]`` ranks as ``[1, 2, 2, 4]``.

Ties are detected with exact equality. Tokens with identical slot
assignments yield bit-identical scores, so a tolerance would only merge
genuinely distinct scores.
"""

from __future__ import annotations

import math
from functools import cmp_to_key
from typing import TYPE_CHECKING

from nft_rarity.exceptions import ConfigValidationError, InvalidScoreError
from nft_rarity.ranking.types import RankedToken, RarityTier

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

NAN_POLICIES: frozenset[str] = frozenset({"equal", "error"})


def _compare_scores(a: float, b: float) -> int:
    """Three-way compare; unordered pairs (NaN) compare as equal."""
    if a < b:
        return -1
    if a > b:
        return 1
    return 0


def rank(
    scores: Iterable[tuple[str, float]],
    lower_is_rarer: bool,
    nan_policy: str = "equal",
) -> list[RankedToken]:
    """Rank ``(token_id, score)`` pairs, rarest first.

    Args:
        scores: Scores from any scorer.
        lower_is_rarer: Sort ascending when True, descending otherwise.
        nan_policy: ``"equal"`` treats NaN as equal to any score while
            sorting; ``"error"`` rejects NaN scores.

    Returns:
        RankedTokens in rank order. Equal scores keep their input order.

    Raises:
        ConfigValidationError: If *nan_policy* is unknown.
        InvalidScoreError: If a score is NaN under ``nan_policy="error"``.
    """
    if nan_policy not in NAN_POLICIES:
        raise ConfigValidationError(
            f"Unknown nan_policy '{nan_policy}'. Available: {', '.join(sorted(NAN_POLICIES))}"
        )

    pairs = list(scores)
    if not pairs:
        return []

    if nan_policy == "error":
        bad = [token_id for token_id, score in pairs if math.isnan(score)]
        if bad:
            raise InvalidScoreError(f"NaN score for token(s): {', '.join(bad)}")

    if lower_is_rarer:
        key = cmp_to_key(lambda a, b: _compare_scores(a[1], b[1]))
    else:
        key = cmp_to_key(lambda a, b: _compare_scores(b[1], a[1]))
    ordered = sorted(pairs, key=key)

    ranked: list[RankedToken] = []
    current_rank = 1
    for position, (token_id, score) in enumerate(ordered):
        if position > 0 and score != ordered[position - 1][1]:
            current_rank = position + 1
        ranked.append(RankedToken(id=token_id, score=score, rank=current_rank))
    return ranked


def assign_tiers(ranked: Sequence[RankedToken]) -> dict[str, RarityTier]:
    """Map each ranked token id to its RarityTier.

    The number of ranked tokens is used as the maximum rank.
    """
    max_rank = len(ranked)
    return {token.id: RarityTier.from_rank(token.rank, max_rank) for token in ranked}
