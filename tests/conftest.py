"""Pytest configuration for layered-raster tests."""

from typing import Any

import numpy as np
import pytest


def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "scenario: end-to-end behaviour of a layered image",
    )


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(20240601)
