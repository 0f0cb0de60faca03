"""Card-selection strategies for headless duel simulation.

The set of strategies is closed: each ``StrategyTag`` maps to exactly one
implementation in ``STRATEGIES``, and ``get_strategy`` is the only way the
simulator builds one::

    from card_duel.sim.strategies import get_strategy

    strategy = get_strategy("aggressive", rng)
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

from .aggressive import AggressiveStrategy
from .balanced import BalancedStrategy
from .base import Strategy
from .conservative import ConservativeStrategy

if TYPE_CHECKING:
    from card_duel.sim.core.rng import GameRNG

logger = logging.getLogger(__name__)


class StrategyTag(str, Enum):
    BALANCED = "balanced"
    CONSERVATIVE = "conservative"
    AGGRESSIVE = "aggressive"


STRATEGIES: dict[StrategyTag, type[Strategy]] = {
    StrategyTag.BALANCED: BalancedStrategy,
    StrategyTag.CONSERVATIVE: ConservativeStrategy,
    StrategyTag.AGGRESSIVE: AggressiveStrategy,
}

# Older configs call the balanced policy "random".
_ALIASES: dict[str, StrategyTag] = {"random": StrategyTag.BALANCED}


def parse_strategy_tag(tag: str | StrategyTag) -> StrategyTag:
    """Resolve *tag* to a ``StrategyTag``; unknown tags become BALANCED."""
    if isinstance(tag, StrategyTag):
        return tag
    key = tag.strip().lower()
    if key in _ALIASES:
        return _ALIASES[key]
    try:
        return StrategyTag(key)
    except ValueError:
        logger.warning("Unknown strategy %r, falling back to balanced", tag)
        return StrategyTag.BALANCED


def get_strategy(tag: str | StrategyTag, rng: GameRNG | None = None) -> Strategy:
    """Instantiate the strategy registered for *tag*."""
    return STRATEGIES[parse_strategy_tag(tag)](rng=rng)


__all__ = [
    "AggressiveStrategy",
    "BalancedStrategy",
    "ConservativeStrategy",
    "STRATEGIES",
    "Strategy",
    "StrategyTag",
    "get_strategy",
    "parse_strategy_tag",
]
