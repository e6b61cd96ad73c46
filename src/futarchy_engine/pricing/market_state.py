"""Assemble a market snapshot from fresh oracle inputs."""

import logging
from collections.abc import Sequence

from futarchy_engine.core.models import (
    ARBITRAGE_TOLERANCE,
    DEFAULT_SPREAD,
    FULL_SET_COST,
    ArbitrageOpportunity,
    MarketState,
    Numeric,
    OutcomeWeight,
)
from futarchy_engine.pricing.arbitrage import detect
from futarchy_engine.pricing.normalizer import normalize

logger = logging.getLogger(__name__)


def update_market_state(
    outcomes: Sequence[OutcomeWeight],
    spread: Numeric = DEFAULT_SPREAD,
    *,
    tolerance: Numeric = ARBITRAGE_TOLERANCE,
) -> MarketState:
    """Price the outcomes and report the market's arbitrage status.

    The snapshot is rebuilt in full on every call; nothing carries over
    from a previous state.

    Args:
        outcomes: Oracle inputs, one per outcome.
        spread: Fraction added to the NO side.
        tolerance: Half-width of the balanced band around 1.

    Returns:
        A new ``MarketState``.

    """
    tokens = normalize(outcomes, spread)
    arbitrage = detect(tokens, tolerance=tolerance)
    state = MarketState(
        outcomes=tokens,
        total_yes_price_sum=arbitrage.total_yes_sum,
        is_arbitrage_opportunity=arbitrage.opportunity is not ArbitrageOpportunity.NONE,
        full_set_cost=FULL_SET_COST,
    )
    logger.info(
        "Market state: %d outcomes, YES sum %s, arbitrage %s",
        len(tokens),
        state.total_yes_price_sum,
        arbitrage.opportunity.value,
    )
    return state
