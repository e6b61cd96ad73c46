"""CLI command for checking a set of YES prices for full-set arbitrage."""

from typing import Annotated

import typer

from futarchy_engine.apps.futarchy.cli._helpers import (
    configure_verbose_logging,
    fail,
    format_percent,
    load_pricing_config,
    parse_amounts,
)
from futarchy_engine.core.exceptions import FutarchyError
from futarchy_engine.core.models import ZERO, ArbitrageOpportunity
from futarchy_engine.pricing.arbitrage import detect_sum

_ADVICE = {
    ArbitrageOpportunity.MINT_AND_SELL: "Mint a full set for 1 PT and sell every YES token.",
    ArbitrageOpportunity.BUY_AND_REDEEM: "Buy one YES token of every outcome and redeem the set.",
    ArbitrageOpportunity.NONE: "Prices are balanced; no full-set trade is profitable.",
}


def arbitrage(
    prices: Annotated[str, typer.Argument(help="Comma-separated YES prices, one per outcome")],
    tolerance: Annotated[
        float | None,
        typer.Option(help="Balanced band half-width (defaults to pricing.arbitrage_tolerance)"),
    ] = None,
    verbose: Annotated[  # noqa: FBT002
        bool, typer.Option("--verbose", "-v", help="Enable engine logging")
    ] = False,
) -> None:
    """Detect a mint-and-sell or buy-and-redeem opportunity.

    Args:
        prices: Comma-separated YES prices.
        tolerance: Balanced band override.
        verbose: Enable INFO logging.

    """
    if verbose:
        configure_verbose_logging()
    yes_prices = parse_amounts(prices, "prices")
    band = load_pricing_config().arbitrage_tolerance if tolerance is None else tolerance
    try:
        result = detect_sum(sum(yes_prices, ZERO), tolerance=band)
    except FutarchyError as exc:
        fail(str(exc))

    typer.echo(f"YES price sum:    {result.total_yes_sum:.4f}")
    typer.echo(f"Opportunity:      {result.opportunity.value}")
    typer.echo(f"Profit potential: {format_percent(result.profit_potential)} per full set")
    typer.echo(_ADVICE[result.opportunity])
