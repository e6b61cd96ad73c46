"""Outcome pricing for n-outcome futarchy markets.

Normalize oracle weights into YES/NO prices, detect full-set arbitrage,
price full-set mints and redemptions, cost individual trades and
assemble market snapshots.
"""

from futarchy_engine.pricing.arbitrage import detect, detect_sum
from futarchy_engine.pricing.full_set import mint_full_set, redeem_full_set
from futarchy_engine.pricing.market_state import update_market_state
from futarchy_engine.pricing.normalizer import normalize, weights_from_pairs
from futarchy_engine.pricing.trade_cost import (
    calculate_odds,
    calculate_profit_margin,
    trade_cost,
)

__all__ = [
    "calculate_odds",
    "calculate_profit_margin",
    "detect",
    "detect_sum",
    "mint_full_set",
    "normalize",
    "redeem_full_set",
    "trade_cost",
    "update_market_state",
    "weights_from_pairs",
]
