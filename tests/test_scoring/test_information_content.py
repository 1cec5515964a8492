"""Tests for InformationContentScorer."""

from __future__ import annotations

import math

import pytest

from nft_rarity.collection import build_collection
from nft_rarity.scoring.information_content import InformationContentScorer
from nft_rarity.types import Attribute, Token


def _token(token_id: str, *pairs: tuple[str, str]) -> Token:
    return Token(token_id, tuple(Attribute(t, v) for t, v in pairs))


@pytest.fixture()
def scorer() -> InformationContentScorer:
    return InformationContentScorer()


class TestInformationContentScorer:
    """Tests for the entropy-normalized information content scorer."""

    def test_metadata(self, scorer: InformationContentScorer) -> None:
        assert scorer.lower_is_rarer() is False
        assert scorer.name() == "OpenRarity Information Content"

    def test_empty_tokens(self, scorer: InformationContentScorer) -> None:
        assert scorer.score(build_collection([]), []) == []

    def test_uniform_collection_scores_one(
        self, scorer: InformationContentScorer, uniform_tokens: list[Token]
    ) -> None:
        scores = scorer.score(build_collection(uniform_tokens), uniform_tokens)
        assert len(scores) == 1000
        for token_id, score in scores:
            assert abs(score - 1.0) < 1e-8, f"token {token_id} scored {score}"

    def test_rare_token_scores_highest(
        self, scorer: InformationContentScorer, legendary_tokens: list[Token]
    ) -> None:
        scores = dict(scorer.score(build_collection(legendary_tokens), legendary_tokens))
        assert scores["legendary"] > scores["0"]

    def test_identical_collection_uses_unit_normalization(
        self, scorer: InformationContentScorer
    ) -> None:
        tokens = [_token(str(i), ("hat", "red")) for i in range(5)]
        col = build_collection(tokens)
        assert scorer.collection_entropy(col) == 0.0
        assert scorer.score(col, tokens) == [(str(i), 0.0) for i in range(5)]

    def test_collection_entropy_value(self, scorer: InformationContentScorer) -> None:
        tokens = [_token("1", ("hat", "red")), _token("2", ("hat", "blue"))]
        assert scorer.collection_entropy(build_collection(tokens)) == 1.0

    def test_collection_entropy_empty(self, scorer: InformationContentScorer) -> None:
        assert scorer.collection_entropy(build_collection([])) == 0.0

    def test_information_content_counts_nulls(self, scorer: InformationContentScorer) -> None:
        tokens = [
            _token("1", ("hat", "red"), ("special", "true")),
            _token("2", ("hat", "red")),
            _token("3", ("hat", "red")),
            _token("4", ("hat", "red")),
        ]
        col = build_collection(tokens)
        # hat=red is certain (0 bits); special=null is 3/4.
        assert scorer.information_content(col, tokens[1]) == -math.log2(0.75)
        assert scorer.information_content(col, tokens[0]) == -math.log2(0.25)

    def test_rare_trait_beats_missing(self, scorer: InformationContentScorer) -> None:
        tokens = [
            _token("0", ("bottom", "1"), ("hat", "1"), ("special", "true")),
            _token("1", ("bottom", "1"), ("hat", "1")),
            _token("2", ("bottom", "2"), ("hat", "2")),
            _token("3", ("bottom", "2"), ("hat", "2")),
            _token("4", ("bottom", "3"), ("hat", "2")),
        ]
        scores = [s for _, s in scorer.score(build_collection(tokens), tokens)]
        assert scores[0] > scores[1]

    def test_score_ordering(self, scorer: InformationContentScorer) -> None:
        tokens = [
            _token("0", ("bottom", "spec"), ("hat", "spec"), ("special", "true")),
            _token("1", ("bottom", "1"), ("hat", "1"), ("special", "true")),
            _token("2", ("bottom", "1"), ("hat", "1")),
            _token("3", ("bottom", "2"), ("hat", "2")),
            _token("4", ("bottom", "2"), ("hat", "2")),
            _token("5", ("bottom", "3"), ("hat", "2")),
        ]
        s = [score for _, score in scorer.score(build_collection(tokens), tokens)]
        assert s[0] > s[1] > s[2]
        assert s[5] > s[2]
        assert s[2] > s[3]
        assert s[3] == s[4]

    def test_parallel_matches_inline(self, uniform_tokens: list[Token]) -> None:
        col = build_collection(uniform_tokens)
        inline = InformationContentScorer().score(col, uniform_tokens)
        threaded = InformationContentScorer(workers=3).score(col, uniform_tokens)
        assert threaded == inline
