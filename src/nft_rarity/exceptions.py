"""Exception hierarchy for nft-rarity.

All exceptions derive from RarityError, enabling broad catch patterns
at the application boundary while allowing fine-grained handling internally.
The scoring core itself never raises for well-formed input; these cover
configuration and the optional strict ranking policy.
"""


class RarityError(Exception):
    """Base exception for all nft-rarity errors."""


class ConfigValidationError(RarityError):
    """Configuration field validation failed.

    Raised when per-call overrides contain unknown keys, attempt to
    override infrastructure fields, or name an unsupported policy.
    """


class InvalidScoreError(RarityError):
    """A score cannot be ranked.

    Raised by the ranker under ``nan_policy="error"`` when any score is NaN.
    """
