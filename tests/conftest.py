"""Pytest configuration and shared fixtures."""

import os

import pytest
from hypothesis import Verbosity, settings

# Configure Hypothesis profiles
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, verbosity=Verbosity.verbose)

# Load profile from environment or default to "dev"
profile = os.environ.get("HYPOTHESIS_PROFILE", "dev")
settings.load_profile(profile)


@pytest.fixture
def session():
    """Provide a fresh Session with default settings."""
    from exprcalc.session import Session

    return Session()


@pytest.fixture
def clean_env(monkeypatch):
    """Remove exprcalc variables from the environment."""
    for name in ("EXPRCALC_LOG_LEVEL", "EXPRCALC_PRECISION", "EXPRCALC_HISTORY_LIMIT"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def sample_expressions():
    """Expressions paired with their expected values."""
    return [
        ("3 + 4 * 2", 11.0),
        ("(3 + 4) * 2", 14.0),
        ("2 ^ 3", 8.0),
        ("2 ^ 3 ^ 2", 64.0),
        ("-5 + 3", -2.0),
        ("5 - -3", 8.0),
        ("10 % 4", 2.0),
        ("1.5 * 4", 6.0),
        ("+7", 7.0),
    ]
