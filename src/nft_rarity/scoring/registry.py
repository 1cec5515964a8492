"""Name -> scorer lookup for ``RarityConfig.scorer_type``.

Scorers register under a canonical name plus optional aliases (the
marketplace names callers tend to use, e.g. ``"magic_eden"``).
``build()`` checks the ranking settings of the config before constructing
a scorer, so a misconfigured engine fails when it is created rather than
after a full scoring pass.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

from nft_rarity.exceptions import ConfigValidationError
from nft_rarity.ranking.ranker import NAN_POLICIES
from nft_rarity.scoring.base import Scorer

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable


class ScorerRegistry:
    """Registry of Scorer classes keyed by canonical name.

    ``_registry`` holds canonical names only; ``_aliases`` maps every
    alias to its canonical name.
    """

    _registry: ClassVar[dict[str, type[Scorer]]] = {}
    _aliases: ClassVar[dict[str, str]] = {}

    @classmethod
    def register(
        cls, name: str, aliases: Iterable[str] = ()
    ) -> Callable[[type[Scorer]], type[Scorer]]:
        """Decorator that registers a Scorer subclass under *name* and *aliases*.

        Raises:
            ValueError: If *name* or an alias is already taken.
            TypeError: If the decorated class is not a Scorer subclass.
        """
        alias_list = list(aliases)

        def decorator(klass: type[Scorer]) -> type[Scorer]:
            if not (isinstance(klass, type) and issubclass(klass, Scorer)):
                raise TypeError(f"Cannot register {klass!r} as scorer '{name}': not a Scorer")
            for key in (name, *alias_list):
                if key in cls._registry or key in cls._aliases:
                    raise ValueError(f"Scorer '{key}' is already registered")
            cls._registry[name] = klass
            for alias in alias_list:
                cls._aliases[alias] = name
            return klass

        return decorator

    @classmethod
    def canonical_name(cls, name: str) -> str:
        """Resolve an alias to its canonical name.

        Raises:
            KeyError: If *name* is neither registered nor an alias.
        """
        if name in cls._registry:
            return name
        if name in cls._aliases:
            return cls._aliases[name]
        available = ", ".join(cls.list_registered()) or "(none)"
        raise KeyError(f"Unknown scorer '{name}'. Available: {available}")

    @classmethod
    def get(cls, name: str) -> type[Scorer]:
        """Return the scorer class registered under *name* or an alias of it."""
        return cls._registry[cls.canonical_name(name)]

    @classmethod
    def build(cls, config: Any) -> Scorer:
        """Construct the scorer named by ``config.scorer_type``.

        Args:
            config: A RarityConfig (or compatible object) with ``scorer_type``,
                ``score_workers`` and ``nan_policy`` attributes.

        Returns:
            A Scorer using ``config.score_workers`` threads.

        Raises:
            KeyError: If the scorer type is unknown.
            ConfigValidationError: If the NaN policy is unknown or the
                worker count is not positive.
        """
        klass = cls.get(config.scorer_type)
        if config.nan_policy not in NAN_POLICIES:
            raise ConfigValidationError(
                f"Unknown nan_policy '{config.nan_policy}'. "
                f"Available: {', '.join(sorted(NAN_POLICIES))}"
            )
        if config.score_workers < 1:
            raise ConfigValidationError(
                f"score_workers must be >= 1, got {config.score_workers}"
            )
        return klass(workers=config.score_workers)

    @classmethod
    def list_registered(cls) -> list[str]:
        """Return sorted canonical scorer names (aliases excluded)."""
        return sorted(cls._registry)

    @classmethod
    def list_aliases(cls) -> dict[str, str]:
        """Return a copy of the alias -> canonical name mapping."""
        return dict(cls._aliases)
