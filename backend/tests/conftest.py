"""Shared test configuration."""

import pytest

from services.scoring.registry import clear as clear_scorers


@pytest.fixture(autouse=True)
def _reset_scorers():
    """Scorers are process-wide singletons; start every test without them."""
    clear_scorers()
    yield
    clear_scorers()
