"""Full-set mint and redeem calculations.

A full set is one YES token of every outcome. Minting one costs exactly
1 PT whatever the outcome count; redeeming one returns exactly 1 PT. There
is no partial redemption: a holder short of any single outcome's YES
token cannot redeem at all.
"""

from collections.abc import Sequence

from futarchy_engine.core.exceptions import InvalidMarketError
from futarchy_engine.core.models import (
    FULL_SET_COST,
    MIN_OUTCOMES,
    ONE,
    ZERO,
    MintResult,
    Numeric,
    RedeemResult,
    to_decimal,
)


def mint_full_set(n: int) -> MintResult:
    """Return the cost and YES tokens received for minting one full set.

    Args:
        n: Number of outcomes in the market.

    Returns:
        ``MintResult`` with a cost of 1 PT and ``n`` tokens received.

    Raises:
        InvalidMarketError: If ``n`` is not an integer or is less than 2.

    """
    if isinstance(n, bool) or not isinstance(n, int):
        msg = f"outcome count must be an integer, got {n!r}"
        raise InvalidMarketError(msg)
    if n < MIN_OUTCOMES:
        msg = f"a market needs at least {MIN_OUTCOMES} outcomes, got {n}"
        raise InvalidMarketError(msg)
    return MintResult(cost=FULL_SET_COST, tokens_received=n)


def redeem_full_set(yes_token_holdings: Sequence[Numeric]) -> RedeemResult:
    """Check whether the holdings cover one full set and price the redemption.

    Args:
        yes_token_holdings: YES token quantity held for each outcome.

    Returns:
        ``RedeemResult`` returning 1 PT when every quantity is at least 1,
        otherwise 0 PT and ``success=False``.

    Raises:
        InvalidMarketError: If fewer than 2 outcomes are given.

    """
    amounts = [to_decimal(a, field_name="yes_token_holdings") for a in yes_token_holdings]
    if len(amounts) < MIN_OUTCOMES:
        msg = f"a market needs at least {MIN_OUTCOMES} outcomes, got {len(amounts)}"
        raise InvalidMarketError(msg)
    if all(a >= ONE for a in amounts):
        return RedeemResult(pt_returned=FULL_SET_COST, success=True)
    return RedeemResult(pt_returned=ZERO, success=False)
