"""Fixtures shared by the gcdlab tests."""

import random

import numpy as np
import pytest


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "perf: wall-clock timing checks, skipped unless run with -m perf",
    )


@pytest.fixture
def seeded_rng(request: pytest.FixtureRequest) -> int:
    """Make operand sampling reproducible.

    Seeds ``random`` and ``numpy.random`` with ``request.param`` under
    indirect parametrization, otherwise with 42, and returns the seed so
    a failing batch can be replayed.
    """
    seed = getattr(request, "param", 42)
    random.seed(seed)
    np.random.seed(seed)
    return seed
