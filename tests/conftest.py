"""Pytest configuration and shared fixtures."""

import logging
import os

import pytest
from hypothesis import Verbosity, settings

# Configure Hypothesis profiles
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, verbosity=Verbosity.verbose)

profile = os.environ.get("HYPOTHESIS_PROFILE", "dev")
settings.load_profile(profile)


@pytest.fixture
def session():
    """Provide a fresh CalculatorSession."""
    from string_calculator import CalculatorSession

    return CalculatorSession()


@pytest.fixture
def fresh_settings(monkeypatch):
    """Clear cached settings and any calculator variables from the environment."""
    from string_calculator.settings import get_settings

    for name in ("STRING_CALCULATOR_UPPER_BOUND", "STRING_CALCULATOR_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()

    # Drop the console handler setup_logging installs on the root logger
    root = logging.getLogger()
    for handler in list(root.handlers):
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(logging.WARNING)
