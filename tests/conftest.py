"""Shared pytest fixtures for nft-rarity tests.

Provides reusable configuration objects and synthetic token collections
used across multiple test modules.
"""

from __future__ import annotations

import pytest

from nft_rarity.config import RarityConfig
from nft_rarity.types import Attribute, Token


def make_token(token_id: str, *pairs: tuple[str, str]) -> Token:
    """Build a Token from ``(trait_type, value)`` pairs."""
    return Token(token_id, tuple(Attribute(t, v) for t, v in pairs))


@pytest.fixture
def default_config() -> RarityConfig:
    """RarityConfig with all defaults and no .env lookup."""
    return RarityConfig(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def silent_config() -> RarityConfig:
    """Config with no logging for noise-free tests."""
    return RarityConfig(_env_file=None, log_level="none")  # type: ignore[call-arg]


@pytest.fixture
def legendary_tokens() -> list[Token]:
    """99 identical common tokens plus one token with unique values."""
    tokens = [make_token(str(i), ("hat", "common"), ("body", "common")) for i in range(99)]
    tokens.append(make_token("legendary", ("hat", "legendary"), ("body", "legendary")))
    return tokens


@pytest.fixture
def uniform_tokens() -> list[Token]:
    """1000 tokens, 5 traits each, values cycling over 10 buckets."""
    return [
        make_token(str(i), *((f"attr_{a}", f"val_{i % 10}") for a in range(5)))
        for i in range(1000)
    ]


@pytest.fixture
def outfit_tokens() -> list[Token]:
    """One token with three outfit layers and one with a single layer."""
    return [
        make_token("layered", ("outfit", "jeans"), ("outfit", "tee"), ("outfit", "jacket")),
        make_token("plain", ("outfit", "shorts")),
    ]
