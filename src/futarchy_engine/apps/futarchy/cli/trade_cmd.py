"""CLI command for pricing a YES or NO token purchase.

Normalize the market's outcomes, pick one by name, and show what buying
``amount`` tokens of the chosen side costs, pays out and risks.
"""

from typing import Annotated

import typer

from futarchy_engine.apps.futarchy.cli._helpers import (
    configure_verbose_logging,
    fail,
    load_pricing_config,
    parse_outcomes,
)
from futarchy_engine.core.exceptions import FutarchyError
from futarchy_engine.core.models import ZERO, TokenType, to_decimal
from futarchy_engine.pricing.normalizer import normalize
from futarchy_engine.pricing.trade_cost import calculate_profit_margin, trade_cost

_VALID_SIDES = {t.value for t in TokenType}


def trade(
    outcomes: Annotated[str, typer.Argument(help="Outcomes as name=weight,name=weight,...")],
    outcome: Annotated[str, typer.Option(help="Name of the outcome to trade")],
    side: Annotated[str, typer.Option(help="Token side: yes or no")],
    amount: Annotated[float, typer.Option(help="Number of tokens to buy")],
    spread: Annotated[
        float | None, typer.Option(help="NO-side spread (defaults to pricing.spread)")
    ] = None,
    verbose: Annotated[  # noqa: FBT002
        bool, typer.Option("--verbose", "-v", help="Enable engine logging")
    ] = False,
) -> None:
    """Show the cost, payout and profit/loss of buying outcome tokens.

    Args:
        outcomes: Comma-separated ``name=weight`` pairs.
        outcome: Outcome to trade, matched case-insensitively.
        side: ``yes`` or ``no``.
        amount: Number of tokens to buy.
        spread: NO-side spread override.
        verbose: Enable INFO logging.

    """
    if verbose:
        configure_verbose_logging()
    side_lower = side.lower()
    if side_lower not in _VALID_SIDES:
        fail(f"Side must be 'yes' or 'no', got '{side}'.")
    token_type = TokenType(side_lower)

    pricing = load_pricing_config()
    weights = parse_outcomes(outcomes)
    try:
        tokens = normalize(weights, pricing.spread if spread is None else spread)
        matches = [t for t in tokens if t.name.lower() == outcome.lower()]
        if not matches:
            fail(f"Outcome '{outcome}' not found in market outcomes.")
        if len(matches) > 1:
            fail(f"Outcome '{outcome}' matches more than one market outcome.")
        token = matches[0]
        result = trade_cost(to_decimal(amount, field_name="amount"), token_type, token)
    except FutarchyError as exc:
        fail(str(exc))

    price = token.yes_price if token_type is TokenType.YES else token.actual_no_price
    typer.echo(f"\n{token_type.value.upper()} {token.name} x {result.potential_payout}")
    typer.echo(f"Price:            {price:.4f} PT")
    typer.echo(f"Cost:             {result.cost:.4f} PT")
    typer.echo(f"Potential payout: {result.potential_payout:.4f} PT")
    typer.echo(f"Profit if win:    {result.profit_if_win:.4f} PT")
    typer.echo(f"Loss if lose:     {result.loss_if_lose:.4f} PT")
    if price > ZERO:
        typer.echo(f"Return if win:    {calculate_profit_margin(price):.2f}%")
