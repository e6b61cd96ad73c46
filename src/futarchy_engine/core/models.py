"""Core data models shared across the futarchy engine.

Define the immutable value objects that flow between the pricing,
arbitrage, full-set, trade-cost and settlement modules. Every monetary
amount is denominated in PT and every price is a plain fraction in
``[0, 1]``, both held as ``Decimal``.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum

from futarchy_engine.core.exceptions import InvalidHoldingsError, InvalidInputError

ZERO = Decimal(0)
ONE = Decimal(1)

FULL_SET_COST = ONE
DEFAULT_SPREAD = Decimal("0.01")
ARBITRAGE_TOLERANCE = Decimal("0.001")
MIN_OUTCOMES = 2
PRICE_QUANTUM = Decimal("1e-18")

Numeric = Decimal | int | float | str


def to_decimal(value: Numeric, *, field_name: str = "value") -> Decimal:
    """Convert a numeric input into a finite ``Decimal``.

    Floats go through ``str`` first so that ``0.1`` becomes
    ``Decimal("0.1")`` rather than its binary expansion.

    Args:
        value: Number or numeric string to convert.
        field_name: Name used in the error message.

    Returns:
        The value as a finite ``Decimal``.

    Raises:
        InvalidInputError: If the value is not a finite number.

    """
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value)) if isinstance(value, float) else Decimal(value)
        except (InvalidOperation, TypeError, ValueError) as exc:
            msg = f"{field_name} must be a number, got {value!r}"
            raise InvalidInputError(msg) from exc
    if not result.is_finite():
        msg = f"{field_name} must be finite, got {value!r}"
        raise InvalidInputError(msg)
    return result


def _decimal_tuple(values: Iterable[Numeric], label: str) -> tuple[Decimal, ...]:
    """Convert every entry of ``values`` to Decimal, naming its index on error."""
    return tuple(to_decimal(v, field_name=f"{label}[{i}]") for i, v in enumerate(values))


class TokenType(Enum):
    """Side of an outcome a token pays out on: YES (wins) or NO (loses)."""

    YES = "yes"
    NO = "no"


class ArbitrageOpportunity(Enum):
    """Full-set trade that profits from the current YES price sum."""

    MINT_AND_SELL = "mint_and_sell"
    BUY_AND_REDEEM = "buy_and_redeem"
    NONE = "none"


@dataclass(frozen=True)
class OutcomeWeight:
    """Raw oracle input for one outcome before normalization.

    ``weight`` may be observed trading interest or an unnormalized
    probability; both are divided by the total across outcomes.

    Args:
        id: Stable outcome identifier.
        name: Display label.
        weight: Non-negative raw weight.

    Raises:
        InvalidInputError: If the weight is not a number or is negative.

    """

    id: str
    name: str
    weight: Decimal

    def __post_init__(self) -> None:
        """Convert the weight to Decimal and check it is non-negative."""
        object.__setattr__(self, "weight", to_decimal(self.weight, field_name="weight"))
        if self.weight < ZERO:
            msg = f"weight for outcome {self.id!r} must be >= 0, got {self.weight}"
            raise InvalidInputError(msg)


@dataclass(frozen=True)
class OutcomeToken:
    """Priced state of one outcome in an n-outcome market.

    The theoretical NO price is derived from ``yes_price`` on every
    access and is never stored, so ``yes_price + no_price == 1`` holds
    for every token.

    Args:
        id: Stable outcome identifier.
        name: Display label, not used in calculations.
        yes_price: Market-implied probability that this outcome wins.
        actual_no_price: Tradable NO price, the theoretical NO price
            plus half the spread.

    Raises:
        InvalidInputError: If ``yes_price`` is outside ``[0, 1]`` or the
            tradable NO price is below the theoretical one.

    """

    id: str
    name: str
    yes_price: Decimal
    actual_no_price: Decimal

    def __post_init__(self) -> None:
        """Convert both prices to Decimal and validate the range and NO floor."""
        object.__setattr__(self, "yes_price", to_decimal(self.yes_price, field_name="yes_price"))
        object.__setattr__(
            self,
            "actual_no_price",
            to_decimal(self.actual_no_price, field_name="actual_no_price"),
        )
        if not (ZERO <= self.yes_price <= ONE):
            msg = f"yes_price must be between 0 and 1, got {self.yes_price}"
            raise InvalidInputError(msg)
        if self.actual_no_price < self.no_price:
            msg = (
                f"actual_no_price {self.actual_no_price} is below the "
                f"theoretical no_price {self.no_price}"
            )
            raise InvalidInputError(msg)

    @property
    def no_price(self) -> Decimal:
        """Return the theoretical NO price, ``1 - yes_price``."""
        return ONE - self.yes_price


@dataclass(frozen=True)
class MarketState:
    """Snapshot of every outcome in one market plus its arbitrage status.

    Args:
        outcomes: Priced outcomes, index-aligned with trade identifiers.
        total_yes_price_sum: Sum of all YES prices (equilibrium is 1).
        is_arbitrage_opportunity: Whether the sum is outside the tolerance band.
        full_set_cost: Cost of one full set, always 1 PT.

    """

    outcomes: tuple[OutcomeToken, ...]
    total_yes_price_sum: Decimal
    is_arbitrage_opportunity: bool
    full_set_cost: Decimal = FULL_SET_COST


@dataclass(frozen=True)
class ArbitrageResult:
    """Outcome of inspecting a market's YES price sum."""

    total_yes_sum: Decimal
    opportunity: ArbitrageOpportunity
    profit_potential: Decimal


@dataclass(frozen=True)
class MintResult:
    """PT paid and YES tokens received for minting one full set."""

    cost: Decimal
    tokens_received: int


@dataclass(frozen=True)
class RedeemResult:
    """PT returned for redeeming one full set, and whether it succeeded."""

    pt_returned: Decimal
    success: bool


@dataclass(frozen=True)
class TradeCost:
    """Cost and payoff profile of buying tokens of one outcome.

    Args:
        cost: PT paid up front.
        potential_payout: PT received if the token's side wins.
        profit_if_win: ``potential_payout - cost``.
        loss_if_lose: ``-cost``; losing tokens are worthless.

    """

    cost: Decimal
    potential_payout: Decimal
    profit_if_win: Decimal
    loss_if_lose: Decimal


@dataclass(frozen=True)
class UserHoldings:
    """YES and NO token quantities a user holds, one slot per outcome.

    A zero quantity is a valid holding. Both tuples must be the same
    length, the market's outcome count. Plain numbers are converted to
    ``Decimal`` on construction.

    Raises:
        InvalidInputError: If a quantity is not a finite number.
        InvalidHoldingsError: If the tuples differ in length or hold a
            negative quantity.

    """

    yes_tokens: tuple[Decimal, ...]
    no_tokens: tuple[Decimal, ...]

    def __post_init__(self) -> None:
        """Convert quantities to Decimal tuples and validate lengths and signs."""
        object.__setattr__(self, "yes_tokens", _decimal_tuple(self.yes_tokens, "yes_tokens"))
        object.__setattr__(self, "no_tokens", _decimal_tuple(self.no_tokens, "no_tokens"))
        if len(self.yes_tokens) != len(self.no_tokens):
            msg = (
                f"yes_tokens has {len(self.yes_tokens)} entries but "
                f"no_tokens has {len(self.no_tokens)}"
            )
            raise InvalidHoldingsError(msg)
        for label, tokens in (("yes_tokens", self.yes_tokens), ("no_tokens", self.no_tokens)):
            for index, amount in enumerate(tokens):
                if amount < ZERO:
                    msg = f"{label}[{index}] must be >= 0, got {amount}"
                    raise InvalidHoldingsError(msg)

    @classmethod
    def of(cls, yes_tokens: Iterable[Numeric], no_tokens: Iterable[Numeric]) -> "UserHoldings":
        """Build holdings from plain numbers.

        Args:
            yes_tokens: YES quantities per outcome.
            no_tokens: NO quantities per outcome.

        Returns:
            Validated ``UserHoldings`` with ``Decimal`` quantities.

        """
        return cls(
            yes_tokens=tuple(yes_tokens),  # pyright: ignore[reportArgumentType]
            no_tokens=tuple(no_tokens),  # pyright: ignore[reportArgumentType]
        )

    @property
    def outcome_count(self) -> int:
        """Return the number of outcome slots."""
        return len(self.yes_tokens)


@dataclass(frozen=True)
class Resolution:
    """Terminal state of a market: the single winning outcome.

    Created once when the market closes and never changed afterwards.

    Raises:
        InvalidHoldingsError: If ``winner_index`` is outside ``[0, outcome_count)``.

    """

    winner_index: int
    outcome_count: int

    def __post_init__(self) -> None:
        """Validate that the winner is one of the market's outcomes."""
        if not (0 <= self.winner_index < self.outcome_count):
            msg = f"winner_index must be in [0, {self.outcome_count}), got {self.winner_index}"
            raise InvalidHoldingsError(msg)


@dataclass(frozen=True)
class ResolutionPayout:
    """Per-token and total PT paid to one holder at settlement."""

    total_payout: Decimal
    yes_token_payouts: tuple[Decimal, ...]
    no_token_payouts: tuple[Decimal, ...]
