"""Tests for core futarchy data models."""

from decimal import Decimal

import pytest

from futarchy_engine.core.exceptions import InvalidHoldingsError, InvalidInputError
from futarchy_engine.core.models import (
    FULL_SET_COST,
    ONE,
    ZERO,
    MarketState,
    OutcomeToken,
    OutcomeWeight,
    Resolution,
    UserHoldings,
    to_decimal,
)

_YES_PRICE = Decimal("0.4")
_ACTUAL_NO_PRICE = Decimal("0.605")
_OUTCOME_COUNT = 3


def _token() -> OutcomeToken:
    """Create outcome "a" priced at 0.4 YES with a 1% spread."""
    return OutcomeToken(id="a", name="A", yes_price=_YES_PRICE, actual_no_price=_ACTUAL_NO_PRICE)


class TestToDecimal:
    """Tests for the to_decimal conversion helper."""

    def test_float_keeps_decimal_representation(self) -> None:
        """Convert floats through str so 0.1 stays exactly 0.1."""
        assert to_decimal(0.1) == Decimal("0.1")

    def test_int_and_string(self) -> None:
        """Convert ints and numeric strings."""
        assert to_decimal(40) == Decimal(40)
        assert to_decimal("0.35") == Decimal("0.35")

    def test_decimal_passthrough(self) -> None:
        """Return Decimal inputs unchanged."""
        value = Decimal("0.25")
        assert to_decimal(value) is value

    def test_non_numeric_string_raises(self) -> None:
        """Raise InvalidInputError for text that is not a number."""
        with pytest.raises(InvalidInputError, match="weight must be a number"):
            to_decimal("abc", field_name="weight")

    def test_non_finite_raises(self) -> None:
        """Raise InvalidInputError for NaN and infinity."""
        with pytest.raises(InvalidInputError, match="must be finite"):
            to_decimal("NaN")
        with pytest.raises(InvalidInputError, match="must be finite"):
            to_decimal(float("inf"))


class TestOutcomeWeight:
    """Tests for the OutcomeWeight oracle input."""

    def test_zero_weight_is_valid(self) -> None:
        """Accept a zero weight."""
        weight = OutcomeWeight(id="a", name="A", weight=ZERO)
        assert weight.weight == ZERO

    def test_negative_weight_raises(self) -> None:
        """Reject a negative weight."""
        with pytest.raises(InvalidInputError, match="must be >= 0"):
            OutcomeWeight(id="a", name="A", weight=Decimal(-1))

    def test_float_weight_is_converted(self) -> None:
        """Store a plain float weight as its exact Decimal value."""
        weight = OutcomeWeight(id="a", name="A", weight=0.4)  # pyright: ignore[reportArgumentType]
        assert weight.weight == Decimal("0.4")
        assert isinstance(weight.weight, Decimal)

    def test_non_numeric_weight_raises(self) -> None:
        """Reject a weight that is not a number."""
        with pytest.raises(InvalidInputError, match="weight must be a number"):
            OutcomeWeight(id="a", name="A", weight="lots")  # pyright: ignore[reportArgumentType]


class TestOutcomeToken:
    """Tests for the OutcomeToken frozen dataclass."""

    def test_no_price_is_complement(self) -> None:
        """Derive the theoretical NO price as 1 - yes_price."""
        token = _token()
        assert token.no_price == Decimal("0.6")
        assert token.yes_price + token.no_price == ONE

    def test_frozen(self) -> None:
        """Reject attribute assignment after creation."""
        token = _token()
        with pytest.raises(AttributeError):
            token.yes_price = ONE  # type: ignore[misc]

    def test_yes_price_above_one_raises(self) -> None:
        """Reject a YES price above 1."""
        with pytest.raises(InvalidInputError, match="yes_price must be between 0 and 1"):
            OutcomeToken(id="a", name="A", yes_price=Decimal("1.1"), actual_no_price=ONE)

    def test_negative_yes_price_raises(self) -> None:
        """Reject a negative YES price."""
        with pytest.raises(InvalidInputError, match="yes_price must be between 0 and 1"):
            OutcomeToken(id="a", name="A", yes_price=Decimal("-0.1"), actual_no_price=ONE)

    def test_actual_no_price_below_theoretical_raises(self) -> None:
        """Reject a tradable NO price below the theoretical complement."""
        with pytest.raises(InvalidInputError, match="below the theoretical no_price"):
            OutcomeToken(id="a", name="A", yes_price=_YES_PRICE, actual_no_price=Decimal("0.59"))

    def test_float_prices_are_converted(self) -> None:
        """Store plain float prices as Decimal so no_price can be derived."""
        token = OutcomeToken(
            id="a",
            name="A",
            yes_price=0.4,  # pyright: ignore[reportArgumentType]
            actual_no_price=0.605,  # pyright: ignore[reportArgumentType]
        )
        assert token.yes_price == _YES_PRICE
        assert token.actual_no_price == _ACTUAL_NO_PRICE
        assert token.no_price == Decimal("0.6")

    def test_boundary_prices_are_valid(self) -> None:
        """Accept YES prices of exactly 0 and 1."""
        assert OutcomeToken(id="a", name="A", yes_price=ZERO, actual_no_price=ONE).no_price == ONE
        assert OutcomeToken(id="b", name="B", yes_price=ONE, actual_no_price=ZERO).no_price == ZERO


class TestMarketState:
    """Tests for the MarketState snapshot."""

    def test_full_set_cost_defaults_to_one(self) -> None:
        """Default the full set cost to 1 PT."""
        state = MarketState(outcomes=(), total_yes_price_sum=ZERO, is_arbitrage_opportunity=True)
        assert state.full_set_cost == FULL_SET_COST == ONE


class TestUserHoldings:
    """Tests for UserHoldings validation."""

    def test_of_converts_plain_numbers(self) -> None:
        """Build Decimal holdings from ints and floats."""
        holdings = UserHoldings.of([2, 1, 0.5], [0, 1, 1])
        assert holdings.yes_tokens == (Decimal(2), Decimal(1), Decimal("0.5"))
        assert holdings.outcome_count == _OUTCOME_COUNT

    def test_direct_construction_converts_floats(self) -> None:
        """Convert plain float tuples passed straight to the constructor."""
        holdings = UserHoldings(
            yes_tokens=(2.0, 1.0),  # pyright: ignore[reportArgumentType]
            no_tokens=(0.0, 1.0),  # pyright: ignore[reportArgumentType]
        )
        assert holdings.yes_tokens == (Decimal(2), ONE)
        assert all(isinstance(v, Decimal) for v in holdings.no_tokens)

    def test_non_numeric_quantity_raises(self) -> None:
        """Reject a quantity that is not a number, naming its slot."""
        with pytest.raises(InvalidInputError, match=r"yes_tokens\[1\] must be a number"):
            UserHoldings.of([1, "x"], [0, 0])

    def test_zero_holding_is_valid(self) -> None:
        """Accept a zero quantity as a real holding."""
        holdings = UserHoldings.of([0, 0], [0, 0])
        assert holdings.no_tokens == (ZERO, ZERO)

    def test_mismatched_lengths_raise(self) -> None:
        """Reject YES and NO tuples of different lengths."""
        with pytest.raises(InvalidHoldingsError, match="yes_tokens has 3 entries"):
            UserHoldings.of([1, 1, 1], [1, 1])

    def test_negative_quantity_raises(self) -> None:
        """Reject a negative token quantity."""
        with pytest.raises(InvalidHoldingsError, match=r"no_tokens\[1\] must be >= 0"):
            UserHoldings.of([1, 1], [0, -1])


class TestResolution:
    """Tests for the immutable Resolution record."""

    def test_valid_resolution(self) -> None:
        """Accept a winner inside the outcome range."""
        resolution = Resolution(winner_index=2, outcome_count=_OUTCOME_COUNT)
        assert resolution.winner_index == 2

    @pytest.mark.parametrize("winner", [-1, 3])
    def test_out_of_range_winner_raises(self, winner: int) -> None:
        """Reject a winner outside [0, outcome_count)."""
        with pytest.raises(InvalidHoldingsError, match="winner_index must be in"):
            Resolution(winner_index=winner, outcome_count=_OUTCOME_COUNT)

    def test_frozen(self) -> None:
        """Reject changing the winner once set."""
        resolution = Resolution(winner_index=0, outcome_count=_OUTCOME_COUNT)
        with pytest.raises(AttributeError):
            resolution.winner_index = 1  # type: ignore[misc]
