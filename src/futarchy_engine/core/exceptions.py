"""Exception hierarchy for futarchy engine errors.

Provide a base exception tagged with an ``ErrorKind`` and one specialised
subclass per failure mode. Every engine function fails fast with one of
these; none of them is retried or recovered inside the engine.
"""

from enum import Enum


class ErrorKind(Enum):
    """Category of an engine failure, independent of the exception class."""

    INVALID_INPUT = "invalid_input"
    INVALID_MARKET = "invalid_market"
    INVALID_AMOUNT = "invalid_amount"
    INVALID_HOLDINGS = "invalid_holdings"


class FutarchyError(ValueError):
    """Base exception for all futarchy engine errors.

    Subclass ``ValueError`` so callers that already guard numeric input
    with ``except ValueError`` catch engine failures too.

    Args:
        msg: Human-readable description of the error.

    """

    kind: ErrorKind

    def __init__(self, msg: str) -> None:
        """Initialize the engine error.

        Args:
            msg: Human-readable description of the error.

        """
        super().__init__(msg)
        self.msg = msg


class InvalidInputError(FutarchyError):
    """Raise when price inputs cannot be normalized or are out of range."""

    kind = ErrorKind.INVALID_INPUT


class InvalidMarketError(FutarchyError):
    """Raise when a market has fewer than two outcomes."""

    kind = ErrorKind.INVALID_MARKET


class InvalidAmountError(FutarchyError):
    """Raise when a trade amount is not strictly positive."""

    kind = ErrorKind.INVALID_AMOUNT


class InvalidHoldingsError(FutarchyError):
    """Raise when holdings or the winning index do not fit the market."""

    kind = ErrorKind.INVALID_HOLDINGS
