"""Shared test configuration and fixtures."""

import os
from collections.abc import Iterator
from unittest.mock import patch

import pytest

import futarchy_engine.core.config as config_module

_PRICING_ENV_VARS = ("FUTARCHY_SPREAD", "FUTARCHY_ARBITRAGE_TOLERANCE")


@pytest.fixture(autouse=True)
def _isolate_pricing_config() -> Iterator[None]:  # pyright: ignore[reportUnusedFunction]
    """Run every test against the packaged pricing defaults.

    The default ``settings.yaml`` reads ``${FUTARCHY_SPREAD}`` and
    ``${FUTARCHY_ARBITRAGE_TOLERANCE}`` from the environment. Strip any
    values inherited from the developer's shell, stop ``load_dotenv`` from
    reading them back from a local ``.env``, and drop the cached
    ``ConfigLoader`` so each test loads configuration afresh.
    """
    clean = {k: v for k, v in os.environ.items() if k not in _PRICING_ENV_VARS}
    with (
        patch.dict(os.environ, clean, clear=True),
        patch.object(config_module, "load_dotenv"),
    ):
        config_module._config = None
        yield
    config_module._config = None
