"""Shared test fixtures for the visualizer test suite.

Provides the canonical sample input, a seeded Random for the
randomized generators, trace assertion helpers and a Flask test client.
"""

import random

import pytest

import main

SAMPLE_INPUT = [5, 3, 8, 4, 2, 1, 9, 7, 6]


@pytest.fixture
def sample_input():
    """The default textarea input; a fresh list per test."""
    return list(SAMPLE_INPUT)


@pytest.fixture
def rng():
    """Seeded Random so search targets and synthesised graphs are pinned."""
    return random.Random(42)


@pytest.fixture
def rng_factory():
    """Build independent Randoms with the same seed, for idempotence checks."""
    def _make(seed=42):
        return random.Random(seed)
    return _make


@pytest.fixture
def client():
    main.app.config["TESTING"] = True
    with main.app.test_client() as c:
        yield c


def assert_well_formed(steps):
    """Trace contract shared by every generator."""
    assert len(steps) >= 2
    for i, step in enumerate(steps):
        assert step.step_number == i
        assert step.is_final == (i == len(steps) - 1)
    assert steps[0].message.startswith("Starting")
    assert "complete" in steps[-1].message.lower()
