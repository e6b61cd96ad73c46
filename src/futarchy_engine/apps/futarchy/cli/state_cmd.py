"""CLI command for displaying a futarchy market snapshot.

Normalize raw outcome weights and show each outcome's YES price, NO
price, tradable NO price, implied probability and decimal odds, followed
by the market's full-set arbitrage status.
"""

from typing import Annotated

import typer

from futarchy_engine.apps.futarchy.cli._helpers import (
    configure_verbose_logging,
    fail,
    format_percent,
    load_pricing_config,
    parse_outcomes,
)
from futarchy_engine.core.exceptions import FutarchyError
from futarchy_engine.core.models import ZERO
from futarchy_engine.pricing.arbitrage import detect
from futarchy_engine.pricing.market_state import update_market_state
from futarchy_engine.pricing.trade_cost import calculate_odds


def state(
    outcomes: Annotated[str, typer.Argument(help="Outcomes as name=weight,name=weight,...")],
    spread: Annotated[
        float | None, typer.Option(help="NO-side spread (defaults to pricing.spread)")
    ] = None,
    verbose: Annotated[  # noqa: FBT002
        bool, typer.Option("--verbose", "-v", help="Enable engine logging")
    ] = False,
) -> None:
    """Show prices and arbitrage status for a market.

    Args:
        outcomes: Comma-separated ``name=weight`` pairs.
        spread: NO-side spread override.
        verbose: Enable INFO logging.

    """
    if verbose:
        configure_verbose_logging()
    pricing = load_pricing_config()
    weights = parse_outcomes(outcomes)

    try:
        market = update_market_state(
            weights,
            pricing.spread if spread is None else spread,
            tolerance=pricing.arbitrage_tolerance,
        )
        arbitrage = detect(market.outcomes, tolerance=pricing.arbitrage_tolerance)
    except FutarchyError as exc:
        fail(str(exc))

    typer.echo(
        f"\n{'Outcome':<20} {'YES':>8} {'NO':>8} {'NO (trade)':>11} {'Prob':>7} {'Odds':>8}"
    )
    typer.echo("-" * 67)
    for token in market.outcomes:
        odds = f"{calculate_odds(token.yes_price):.2f}x" if token.yes_price > ZERO else "-"
        typer.echo(
            f"{token.name:<20} {token.yes_price:>8.4f} {token.no_price:>8.4f} "
            f"{token.actual_no_price:>11.4f} {format_percent(token.yes_price):>7} {odds:>8}"
        )
    typer.echo("")
    typer.echo(f"YES price sum: {market.total_yes_price_sum:.4f}")
    typer.echo(f"Full set cost: {market.full_set_cost} PT")
    typer.echo(f"Arbitrage:     {arbitrage.opportunity.value}")
