"""Shared fixtures for training calculator tests."""

from datetime import timedelta

import pytest
import structlog

from fitness_tracker.core.constants import LEN_STEP, SWIMMING_LEN_STEP
from fitness_tracker.core.logging import configure_default_logging
from fitness_tracker.models.training import Training
from fitness_tracker.services.calories import Running, Swimming, Walking


@pytest.fixture(autouse=True)
def reset_structlog():
    """Keep structlog configuration from leaking between tests."""
    yield
    structlog.reset_defaults()
    configure_default_logging()


@pytest.fixture
def swimming() -> Swimming:
    return Swimming(
        training=Training("Swimming", 2000, SWIMMING_LEN_STEP, timedelta(minutes=90), 85),
        length_pool=50,
        count_pool=40,
    )


@pytest.fixture
def walking() -> Walking:
    return Walking(
        training=Training("Walking", 20000, LEN_STEP, timedelta(hours=3, minutes=45), 85),
        height=185,
    )


@pytest.fixture
def running() -> Running:
    return Running(training=Training("Running", 5000, LEN_STEP, timedelta(minutes=30), 85))
