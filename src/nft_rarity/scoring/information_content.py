"""Information content scorer (OpenRarity style).

Scores a token by the information content of its trait slots,
``sum(-log2(p))``, normalized by the collection entropy
``-sum(p * log2(p))`` over every (trait_type, slot_index, value) bucket.
Higher scores are rarer. In a perfectly uniform collection every token
normalizes to 1.0.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from nft_rarity.collection import normalize_token_attributes
from nft_rarity.scoring.base import Scorer
from nft_rarity.scoring.registry import ScorerRegistry

if TYPE_CHECKING:
    from collections.abc import Sequence

    from nft_rarity.collection import Collection
    from nft_rarity.types import Token


@ScorerRegistry.register("information_content", aliases=("openrarity",))
class InformationContentScorer(Scorer):
    """Entropy-normalized information content; higher is rarer.

    Zero-probability terms are skipped in both sums (log2(0) is undefined).
    When the collection entropy is 0, i.e. every token is identical, the
    normalization falls back to 1.0.
    """

    @staticmethod
    def collection_entropy(collection: Collection) -> float:
        """Compute ``-sum(p * log2(p))`` over all buckets in sorted order.

        Args:
            collection: Collection statistics.

        Returns:
            Entropy in bits, 0.0 for an empty collection.
        """
        if collection.total_supply == 0:
            return 0.0

        total = float(collection.total_supply)
        entropy = 0.0
        for _trait_type, _slot_index, _value, count in collection.iter_buckets():
            p = count / total
            if p > 0.0:
                entropy -= p * math.log2(p)
        return entropy

    @staticmethod
    def information_content(collection: Collection, token: Token) -> float:
        """Un-normalized information content ``sum(-log2(p))`` of one token."""
        if collection.total_supply == 0:
            return 0.0

        total = float(collection.total_supply)
        ic = 0.0
        for trait_type, slot_index, value in normalize_token_attributes(token, collection.shape):
            p = collection.count_for_value(trait_type, slot_index, value) / total
            if p > 0.0:
                ic += -math.log2(p)
        return ic

    def score(self, collection: Collection, tokens: Sequence[Token]) -> list[tuple[str, float]]:
        if not tokens or collection.total_supply == 0:
            return []

        entropy = self.collection_entropy(collection)
        normalization = entropy if entropy > 0.0 else 1.0

        def normalized_ic(token: Token) -> float:
            return self.information_content(collection, token) / normalization

        return self._map_tokens(normalized_ic, tokens)

    def lower_is_rarer(self) -> bool:
        return False

    def name(self) -> str:
        return "OpenRarity Information Content"
