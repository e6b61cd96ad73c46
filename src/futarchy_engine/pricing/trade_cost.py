"""Trade cost and payoff calculations for YES and NO outcome tokens.

Every token redeems for exactly 1 PT when its side wins and for nothing
when it loses, so the YES/NO asymmetry lives entirely in the purchase
price: YES tokens trade at ``yes_price`` and NO tokens at the tradable
``actual_no_price``.
"""

from decimal import Decimal

from futarchy_engine.core.exceptions import InvalidAmountError, InvalidInputError
from futarchy_engine.core.models import (
    ONE,
    ZERO,
    Numeric,
    OutcomeToken,
    TokenType,
    TradeCost,
    to_decimal,
)

_PERCENT = Decimal(100)


def trade_cost(
    amount: Numeric, token_type: TokenType | str, outcome: OutcomeToken
) -> TradeCost:
    """Return the cost and payoff profile of buying ``amount`` tokens.

    A price of exactly 0 is not an error: the trade costs nothing and the
    profit if it wins equals the full payout.

    Args:
        amount: Number of tokens to buy, strictly positive.
        token_type: Whether to buy the outcome's YES or NO token, as a
            ``TokenType`` or its value ``"yes"`` or ``"no"``.
        outcome: Priced outcome being traded.

    Returns:
        ``TradeCost`` with cost, payout, profit if the side wins and the
        loss if it does not.

    Raises:
        InvalidAmountError: If ``amount`` is not greater than zero.
        InvalidInputError: If ``token_type`` is not YES or NO.

    """
    quantity = to_decimal(amount, field_name="amount")
    if quantity <= ZERO:
        msg = f"amount must be > 0, got {quantity}"
        raise InvalidAmountError(msg)

    try:
        side = TokenType(token_type)
    except ValueError as exc:
        msg = f"token_type must be 'yes' or 'no', got {token_type!r}"
        raise InvalidInputError(msg) from exc

    price = outcome.yes_price if side is TokenType.YES else outcome.actual_no_price
    cost = quantity * price
    potential_payout = quantity * ONE
    return TradeCost(
        cost=cost,
        potential_payout=potential_payout,
        profit_if_win=potential_payout - cost,
        loss_if_lose=-cost,
    )


def calculate_odds(probability: Numeric) -> Decimal:
    """Return decimal odds for a probability (0.4 becomes 2.5).

    Raises:
        InvalidInputError: If ``probability`` is not in ``(0, 1]``.

    """
    value = _validate_price(probability, "probability")
    return ONE / value


def calculate_profit_margin(purchase_price: Numeric) -> Decimal:
    """Return the percentage return on a token bought at ``purchase_price`` if it wins.

    Args:
        purchase_price: Price paid per token, in ``(0, 1]``.

    Returns:
        ``(1 - price) / price * 100``.

    Raises:
        InvalidInputError: If the price is not in ``(0, 1]``.

    """
    price = _validate_price(purchase_price, "purchase_price")
    return (ONE - price) / price * _PERCENT


def _validate_price(value: Numeric, field_name: str) -> Decimal:
    """Convert ``value`` and require it to lie in ``(0, 1]``."""
    price = to_decimal(value, field_name=field_name)
    if not (ZERO < price <= ONE):
        msg = f"{field_name} must be in (0, 1], got {price}"
        raise InvalidInputError(msg)
    return price
