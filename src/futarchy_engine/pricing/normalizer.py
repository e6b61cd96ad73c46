"""Normalize raw outcome weights into YES/NO token prices.

Divide each outcome's raw weight by the total so that the YES prices of
an n-outcome market form a probability distribution. The theoretical NO
price is the complement of YES; the tradable NO price adds half of the
configured spread on top.

YES prices are quantized to 18 decimal places, the PT token's precision,
which keeps ``1 - yes_price`` exact. The rounding remainder is added to
the highest-priced outcome so that the YES prices sum to exactly 1.
"""

import logging
from collections.abc import Sequence
from decimal import Decimal

from futarchy_engine.core.exceptions import InvalidInputError
from futarchy_engine.core.models import (
    DEFAULT_SPREAD,
    ONE,
    PRICE_QUANTUM,
    ZERO,
    Numeric,
    OutcomeToken,
    OutcomeWeight,
    to_decimal,
)

logger = logging.getLogger(__name__)

_TWO = 2


def normalize(
    outcomes: Sequence[OutcomeWeight],
    spread: Numeric = DEFAULT_SPREAD,
) -> tuple[OutcomeToken, ...]:
    """Return priced outcome tokens for the given raw weights.

    Args:
        outcomes: At least one outcome with a non-negative weight.
        spread: Fraction in ``[0, 1]`` added to the NO side; each NO
            token's tradable price carries half of it.

    Returns:
        One ``OutcomeToken`` per input, in input order. Immediately after
        normalization the YES prices sum to exactly 1.

    Raises:
        InvalidInputError: If the list is empty, an id repeats, every
            weight is zero, or the spread is outside ``[0, 1]``.

    """
    spread_value = to_decimal(spread, field_name="spread")
    if not (ZERO <= spread_value <= ONE):
        msg = f"spread must be between 0 and 1, got {spread_value}"
        raise InvalidInputError(msg)
    if not outcomes:
        msg = "at least one outcome is required"
        raise InvalidInputError(msg)
    seen: set[str] = set()
    for outcome in outcomes:
        if outcome.id in seen:
            msg = f"duplicate outcome id {outcome.id!r}"
            raise InvalidInputError(msg)
        seen.add(outcome.id)

    total = sum((o.weight for o in outcomes), ZERO)
    if total <= ZERO:
        msg = "at least one outcome must have a positive weight"
        raise InvalidInputError(msg)

    yes_prices = [(o.weight / total).quantize(PRICE_QUANTUM) for o in outcomes]
    largest = max(range(len(yes_prices)), key=yes_prices.__getitem__)
    yes_prices[largest] += ONE - sum(yes_prices, ZERO)

    half_spread = spread_value / _TWO
    tokens = tuple(
        _price_outcome(outcome, yes_price, half_spread)
        for outcome, yes_price in zip(outcomes, yes_prices, strict=True)
    )
    logger.debug("Normalized %d outcomes with spread %s", len(tokens), spread_value)
    return tokens


def _price_outcome(
    outcome: OutcomeWeight, yes_price: Decimal, half_spread: Decimal
) -> OutcomeToken:
    """Build the token for one outcome from its normalized YES price."""
    no_price = ONE - yes_price
    return OutcomeToken(
        id=outcome.id,
        name=outcome.name,
        yes_price=yes_price,
        actual_no_price=no_price + half_spread,
    )


def weights_from_pairs(pairs: Sequence[tuple[str, Numeric]]) -> tuple[OutcomeWeight, ...]:
    """Build oracle inputs from ``(name, weight)`` pairs.

    The outcome id is the name itself, which is stable for the life of a
    market whose outcomes are identified by label.

    Args:
        pairs: Outcome names with their raw weights.

    Returns:
        Validated ``OutcomeWeight`` records in input order.

    """
    return tuple(
        OutcomeWeight(id=name, name=name, weight=to_decimal(weight, field_name=name))
        for name, weight in pairs
    )
