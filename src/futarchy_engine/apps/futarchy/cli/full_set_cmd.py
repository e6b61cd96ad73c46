"""CLI commands for full-set minting and redemption.

Provide ``mint`` and ``redeem`` subcommands that show what one full set
costs and whether a holder's YES tokens cover a redemption.
"""

from typing import Annotated

import typer

from futarchy_engine.apps.futarchy.cli._helpers import fail, parse_amounts
from futarchy_engine.core.exceptions import FutarchyError
from futarchy_engine.pricing.full_set import mint_full_set, redeem_full_set


def mint(
    outcome_count: Annotated[int, typer.Argument(help="Number of outcomes in the market")],
) -> None:
    """Show the cost of minting one full set.

    Args:
        outcome_count: Number of outcomes in the market.

    """
    try:
        result = mint_full_set(outcome_count)
    except FutarchyError as exc:
        fail(str(exc))
    typer.echo(f"Cost:            {result.cost} PT")
    typer.echo(f"Tokens received: {result.tokens_received} YES (one per outcome)")


def redeem(
    holdings: Annotated[str, typer.Argument(help="YES tokens held per outcome, e.g. 1,1,1")],
) -> None:
    """Check whether YES holdings can be redeemed as one full set.

    Exit with status 1 when the holdings do not cover a full set.

    Args:
        holdings: Comma-separated YES quantities.

    """
    try:
        result = redeem_full_set(parse_amounts(holdings, "holdings"))
    except FutarchyError as exc:
        fail(str(exc))
    typer.echo(f"PT returned: {result.pt_returned}")
    if not result.success:
        fail("At least one YES token of every outcome is required to redeem a full set.")
    typer.echo("Full set redeemed.")
