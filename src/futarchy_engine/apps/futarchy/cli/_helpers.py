"""Shared helpers for futarchy CLI commands.

Centralise argument parsing, verbose logging setup, configured pricing
defaults and the error exit used by every command module.
"""

import logging
from decimal import Decimal
from typing import NoReturn

import typer

from futarchy_engine.core.config import ConfigError, PricingConfig, get_config
from futarchy_engine.core.exceptions import FutarchyError
from futarchy_engine.core.models import OutcomeWeight, to_decimal
from futarchy_engine.pricing.normalizer import weights_from_pairs

PERCENTAGE_MULTIPLIER = Decimal(100)
ENGINE_LOGGER = "futarchy_engine"


def fail(message: str) -> NoReturn:
    """Print ``message`` to stderr and exit with status 1."""
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(code=1)


def configure_verbose_logging() -> None:
    """Enable INFO-level logging for engine output on stderr."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(message)s",
        datefmt="%H:%M:%S",
    )
    logging.getLogger(ENGINE_LOGGER).setLevel(logging.INFO)


def load_pricing_config() -> PricingConfig:
    """Return configured pricing defaults, exiting on a configuration error."""
    try:
        return get_config().get_pricing_config()
    except ConfigError as exc:
        fail(str(exc))


def parse_outcomes(outcomes: str) -> tuple[OutcomeWeight, ...]:
    """Parse ``name=weight,name=weight`` into oracle inputs.

    Args:
        outcomes: Comma-separated ``name=weight`` pairs.

    Returns:
        One ``OutcomeWeight`` per pair, in order.

    """
    pairs: list[tuple[str, str]] = []
    for item in outcomes.split(","):
        item = item.strip()  # noqa: PLW2901
        if not item:
            continue
        name, sep, weight = item.partition("=")
        if not sep or not name.strip():
            fail(f"Outcome '{item}' must be written as name=weight.")
        pairs.append((name.strip(), weight.strip()))
    if not pairs:
        fail("At least one outcome is required.")
    try:
        return weights_from_pairs(pairs)
    except FutarchyError as exc:
        fail(str(exc))


def parse_amounts(values: str, label: str) -> tuple[Decimal, ...]:
    """Parse a comma-separated list of numbers.

    Args:
        values: Comma-separated numbers, e.g. ``"2,1,1"``.
        label: Option name used in error messages.

    Returns:
        The numbers as ``Decimal`` values, in order.

    """
    try:
        return tuple(
            to_decimal(v.strip(), field_name=label) for v in values.split(",") if v.strip()
        )
    except FutarchyError as exc:
        fail(str(exc))


def parse_names(names: str | None) -> tuple[str, ...]:
    """Split a comma-separated list of outcome names, dropping blanks."""
    if not names:
        return ()
    return tuple(n.strip() for n in names.split(",") if n.strip())


def format_percent(fraction: Decimal) -> str:
    """Format a price fraction as a percentage for display."""
    return f"{fraction * PERCENTAGE_MULTIPLIER:.1f}%"
