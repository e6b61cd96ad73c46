"""Full-set arbitrage detection for n-outcome markets.

For mutually exclusive outcomes the YES prices should sum to 1, the cost
of one full set. When the sum drifts above 1, minting a full set for 1 PT
and selling every YES token locks in the excess. When it drifts below 1,
buying one YES token of every outcome and redeeming the set for 1 PT
locks in the shortfall. These two trades pull the sum back towards 1.
"""

import logging
from collections.abc import Sequence

from futarchy_engine.core.models import (
    ARBITRAGE_TOLERANCE,
    FULL_SET_COST,
    ZERO,
    ArbitrageOpportunity,
    ArbitrageResult,
    Numeric,
    OutcomeToken,
    to_decimal,
)

logger = logging.getLogger(__name__)


def detect(
    outcomes: Sequence[OutcomeToken],
    *,
    tolerance: Numeric = ARBITRAGE_TOLERANCE,
) -> ArbitrageResult:
    """Report whether the outcomes' YES prices leave a full-set arbitrage.

    Sums inside ``[1 - tolerance, 1 + tolerance]`` are balanced. The
    band edges are compared with explicit inequalities, so a sum of
    exactly ``1 + tolerance`` is still balanced.

    Args:
        outcomes: Priced outcomes of one market.
        tolerance: Half-width of the balanced band around 1.

    Returns:
        The YES price sum, the profitable full-set trade (if any), and
        its profit per full set before costs.

    """
    total_yes = sum((o.yes_price for o in outcomes), ZERO)
    return detect_sum(total_yes, tolerance=tolerance)


def detect_sum(total_yes: Numeric, *, tolerance: Numeric = ARBITRAGE_TOLERANCE) -> ArbitrageResult:
    """Classify a precomputed YES price sum.

    Args:
        total_yes: Sum of YES prices across every outcome.
        tolerance: Half-width of the balanced band around 1.

    Returns:
        The arbitrage classification for ``total_yes``.

    """
    total = to_decimal(total_yes, field_name="total_yes")
    band = to_decimal(tolerance, field_name="tolerance")
    upper = FULL_SET_COST + band
    lower = FULL_SET_COST - band

    if total > upper:
        result = ArbitrageResult(
            total_yes_sum=total,
            opportunity=ArbitrageOpportunity.MINT_AND_SELL,
            profit_potential=total - FULL_SET_COST,
        )
    elif total < lower:
        result = ArbitrageResult(
            total_yes_sum=total,
            opportunity=ArbitrageOpportunity.BUY_AND_REDEEM,
            profit_potential=FULL_SET_COST - total,
        )
    else:
        return ArbitrageResult(
            total_yes_sum=total,
            opportunity=ArbitrageOpportunity.NONE,
            profit_potential=ZERO,
        )

    logger.info(
        "Arbitrage %s: sum=%s profit=%s",
        result.opportunity.value,
        total,
        result.profit_potential,
    )
    return result
