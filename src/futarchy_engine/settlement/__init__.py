"""Binary per-outcome settlement of resolved futarchy markets."""

from futarchy_engine.settlement.resolver import (
    preview_payouts,
    resolve,
    resolve_outcome_index,
    settle,
)

__all__ = ["preview_payouts", "resolve", "resolve_outcome_index", "settle"]
