"""Statistical rarity scorer (Magic Eden style).

A token's score is the joint probability of its trait slots: the product
of ``count / total_supply`` over every normalized (trait_type, slot_index)
value, null markers included. Rarer tokens have smaller products.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from nft_rarity.collection import normalize_token_attributes
from nft_rarity.scoring.base import Scorer
from nft_rarity.scoring.registry import ScorerRegistry

if TYPE_CHECKING:
    from collections.abc import Sequence

    from nft_rarity.collection import Collection
    from nft_rarity.types import Token


@ScorerRegistry.register("statistical", aliases=("magic_eden",))
class StatisticalRarityScorer(Scorer):
    """Product of trait-slot probabilities; lower is rarer.

    The product is taken left to right from 1.0 in (trait_type, slot_index)
    order. Floating-point multiplication is not associative, so tokens with
    identical slot assignments only produce bit-identical scores (and thus
    exact rank ties) because the order is fixed.
    """

    def score(self, collection: Collection, tokens: Sequence[Token]) -> list[tuple[str, float]]:
        if not tokens or collection.total_supply == 0:
            return []

        total = float(collection.total_supply)

        def joint_probability(token: Token) -> float:
            product = 1.0
            for trait_type, slot_index, value in normalize_token_attributes(
                token, collection.shape
            ):
                product *= collection.count_for_value(trait_type, slot_index, value) / total
            return product

        return self._map_tokens(joint_probability, tokens)

    def lower_is_rarer(self) -> bool:
        return True

    def name(self) -> str:
        return "Magic Eden Statistical Rarity"
