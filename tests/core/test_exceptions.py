"""Tests for the futarchy engine exception hierarchy."""

import pytest

from futarchy_engine.core.exceptions import (
    ErrorKind,
    FutarchyError,
    InvalidAmountError,
    InvalidHoldingsError,
    InvalidInputError,
    InvalidMarketError,
)


class TestFutarchyError:
    """Test suite for FutarchyError base exception."""

    def test_is_value_error(self) -> None:
        """Test FutarchyError can be caught as ValueError."""
        assert issubclass(FutarchyError, ValueError)

    def test_stores_message(self) -> None:
        """Test the message is kept on the exception and in str()."""
        error = InvalidInputError("bad weights")
        assert error.msg == "bad weights"
        assert str(error) == "bad weights"


class TestErrorKinds:
    """Test suite for the specialised engine errors."""

    @pytest.mark.parametrize(
        ("error_cls", "kind"),
        [
            (InvalidInputError, ErrorKind.INVALID_INPUT),
            (InvalidMarketError, ErrorKind.INVALID_MARKET),
            (InvalidAmountError, ErrorKind.INVALID_AMOUNT),
            (InvalidHoldingsError, ErrorKind.INVALID_HOLDINGS),
        ],
    )
    def test_kind_and_base(self, error_cls: type[FutarchyError], kind: ErrorKind) -> None:
        """Test each error carries its kind and inherits from FutarchyError."""
        error = error_cls("fail")
        assert error.kind is kind
        assert isinstance(error, FutarchyError)

    def test_kinds_are_distinct(self) -> None:
        """Test every error class maps to a different kind."""
        kinds = {
            InvalidInputError.kind,
            InvalidMarketError.kind,
            InvalidAmountError.kind,
            InvalidHoldingsError.kind,
        }
        assert kinds == set(ErrorKind)
