"""Binary per-outcome settlement of a resolved market.

Settle each outcome independently against the single winning index: the
winner's YES tokens and every loser's NO tokens redeem for 1 PT each,
while the winner's NO tokens and every loser's YES tokens are worthless.

Resolution is a pure function of the winning index and the holdings.
Calling it repeatedly with the same inputs returns identical payouts and
never touches a balance; the settlement collaborator that moves funds is
responsible for doing so exactly once per market.
"""

import logging
from collections.abc import Sequence

from futarchy_engine.core.exceptions import InvalidHoldingsError
from futarchy_engine.core.models import (
    ONE,
    ZERO,
    Resolution,
    ResolutionPayout,
    UserHoldings,
)

logger = logging.getLogger(__name__)


def resolve(
    winner_index: int,
    holdings: UserHoldings,
    *,
    outcome_count: int | None = None,
) -> ResolutionPayout:
    """Return the PT a holder receives when ``winner_index`` wins.

    Args:
        winner_index: Index of the winning outcome.
        holdings: The holder's YES and NO tokens per outcome.
        outcome_count: Number of outcomes in the market. When given, the
            holdings must have exactly this many slots.

    Returns:
        Per-token payouts, index-aligned with the holdings, and their total.

    Raises:
        InvalidHoldingsError: If the holdings do not match the outcome
            count or ``winner_index`` is out of range.

    """
    n = holdings.outcome_count
    if outcome_count is not None and n != outcome_count:
        msg = f"holdings cover {n} outcomes but the market has {outcome_count}"
        raise InvalidHoldingsError(msg)
    if not (0 <= winner_index < n):
        msg = f"winner_index must be in [0, {n}), got {winner_index}"
        raise InvalidHoldingsError(msg)

    yes_payouts = tuple(
        amount * ONE if i == winner_index else ZERO
        for i, amount in enumerate(holdings.yes_tokens)
    )
    no_payouts = tuple(
        amount * ONE if i != winner_index else ZERO
        for i, amount in enumerate(holdings.no_tokens)
    )
    total = sum(yes_payouts, ZERO) + sum(no_payouts, ZERO)
    logger.info("Resolved winner %d over %d outcomes: payout=%s", winner_index, n, total)
    return ResolutionPayout(
        total_payout=total,
        yes_token_payouts=yes_payouts,
        no_token_payouts=no_payouts,
    )


def settle(resolution: Resolution, holdings: UserHoldings) -> ResolutionPayout:
    """Resolve holdings against a recorded market resolution.

    Args:
        resolution: The market's immutable winning outcome.
        holdings: The holder's YES and NO tokens per outcome.

    Returns:
        The holder's payouts.

    """
    return resolve(resolution.winner_index, holdings, outcome_count=resolution.outcome_count)


def preview_payouts(holdings: UserHoldings) -> tuple[ResolutionPayout, ...]:
    """Return the payout for every possible winner, indexed by winner."""
    return tuple(resolve(i, holdings) for i in range(holdings.outcome_count))


def resolve_outcome_index(outcome: int | str, outcome_names: Sequence[str]) -> int:
    """Map a winning outcome given by name or index to a validated index.

    Strings are matched against ``outcome_names`` first; a string that is
    not a known name but parses as an integer is treated as an index.

    Args:
        outcome: Outcome display name or index.
        outcome_names: Display names of the market's outcomes, in order.

    Returns:
        Index of the outcome in ``outcome_names``.

    Raises:
        InvalidHoldingsError: If the name is unknown or the index is out of range.

    """
    if isinstance(outcome, str):
        if outcome in outcome_names:
            return list(outcome_names).index(outcome)
        try:
            outcome = int(outcome)
        except ValueError as exc:
            valid = ", ".join(outcome_names)
            msg = f"unknown outcome {outcome!r}; valid options: {valid}"
            raise InvalidHoldingsError(msg) from exc
    if not (0 <= outcome < len(outcome_names)):
        msg = f"outcome index must be in [0, {len(outcome_names)}), got {outcome}"
        raise InvalidHoldingsError(msg)
    return outcome
