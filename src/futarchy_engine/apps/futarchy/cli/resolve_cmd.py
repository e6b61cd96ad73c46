"""CLI commands for market settlement.

Provide ``resolve``, which computes a holder's payouts for a chosen
winner, and ``preview``, which shows the payout for every possible winner
before a resolution is committed.
"""

from typing import Annotated

import typer

from futarchy_engine.apps.futarchy.cli._helpers import (
    configure_verbose_logging,
    fail,
    parse_amounts,
    parse_names,
)
from futarchy_engine.core.exceptions import FutarchyError
from futarchy_engine.core.models import Resolution, ResolutionPayout, UserHoldings
from futarchy_engine.settlement.resolver import (
    preview_payouts,
    resolve_outcome_index,
    settle,
)


def _holdings(yes: str, no: str) -> UserHoldings:
    """Build validated holdings from the ``--yes`` and ``--no`` options."""
    try:
        return UserHoldings(
            yes_tokens=parse_amounts(yes, "yes"),
            no_tokens=parse_amounts(no, "no"),
        )
    except FutarchyError as exc:
        fail(str(exc))


def _label(index: int, names: tuple[str, ...]) -> str:
    """Return the display name for an outcome index."""
    return names[index] if index < len(names) else f"#{index}"


def resolve(
    winner: Annotated[str, typer.Argument(help="Winning outcome index, or name with --outcomes")],
    yes: Annotated[str, typer.Option(help="YES tokens held per outcome, e.g. 2,1,1")],
    no: Annotated[str, typer.Option(help="NO tokens held per outcome, e.g. 0,1,1")],
    outcomes: Annotated[
        str | None, typer.Option(help="Comma-separated outcome names, in index order")
    ] = None,
    verbose: Annotated[  # noqa: FBT002
        bool, typer.Option("--verbose", "-v", help="Enable engine logging")
    ] = False,
) -> None:
    """Compute a holder's settlement payouts for the winning outcome.

    Args:
        winner: Winning outcome index, or its name when ``--outcomes`` is given.
        yes: Comma-separated YES quantities.
        no: Comma-separated NO quantities.
        outcomes: Outcome names used to resolve ``winner`` and label output.
        verbose: Enable INFO logging.

    """
    if verbose:
        configure_verbose_logging()
    holdings = _holdings(yes, no)
    names = parse_names(outcomes)
    if names and len(names) != holdings.outcome_count:
        fail(f"--outcomes lists {len(names)} names but holdings cover {holdings.outcome_count}.")
    labels = names or tuple(str(i) for i in range(holdings.outcome_count))

    try:
        winner_index = resolve_outcome_index(winner, labels)
        payout = settle(Resolution(winner_index, holdings.outcome_count), holdings)
    except FutarchyError as exc:
        fail(str(exc))

    typer.echo(f"\nWinner: {_label(winner_index, names)}")
    _print_payout(payout, names)


def preview(
    yes: Annotated[str, typer.Option(help="YES tokens held per outcome, e.g. 2,1,1")],
    no: Annotated[str, typer.Option(help="NO tokens held per outcome, e.g. 0,1,1")],
    outcomes: Annotated[
        str | None, typer.Option(help="Comma-separated outcome names, in index order")
    ] = None,
    verbose: Annotated[  # noqa: FBT002
        bool, typer.Option("--verbose", "-v", help="Enable engine logging")
    ] = False,
) -> None:
    """Show the total payout for every possible winning outcome.

    Args:
        yes: Comma-separated YES quantities.
        no: Comma-separated NO quantities.
        outcomes: Outcome names used to label output.
        verbose: Enable INFO logging.

    """
    if verbose:
        configure_verbose_logging()
    holdings = _holdings(yes, no)
    names = parse_names(outcomes)
    try:
        payouts = preview_payouts(holdings)
    except FutarchyError as exc:
        fail(str(exc))

    typer.echo(f"\n{'If winner is':<20} {'Payout':>12}")
    typer.echo("-" * 33)
    for index, payout in enumerate(payouts):
        typer.echo(f"{_label(index, names):<20} {payout.total_payout:>9.2f} PT")


def _print_payout(payout: ResolutionPayout, names: tuple[str, ...]) -> None:
    """Print the per-outcome payout table and the total."""
    typer.echo(f"{'Outcome':<20} {'YES payout':>12} {'NO payout':>12}")
    typer.echo("-" * 46)
    for index, (yes_payout, no_payout) in enumerate(
        zip(payout.yes_token_payouts, payout.no_token_payouts, strict=True)
    ):
        typer.echo(f"{_label(index, names):<20} {yes_payout:>12.2f} {no_payout:>12.2f}")
    typer.echo(f"\nTotal payout: {payout.total_payout:.2f} PT")
