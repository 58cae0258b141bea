"""
pytest plugin installing decimal-aware assertpy comparisons for a test session.

Enable it from a conftest.py::

    pytest_plugins = ["decimal_assert.pytest_plugin"]
"""

import assertpy
import pytest

from decimal_assert.adapters.assertpy import (
    DecimalRegistry,
    install,
    installed_registry,
    uninstall,
)
from decimal_assert.shared.config import get_settings
from decimal_assert.shared.logging import configure_logging, get_logger

logger = get_logger(__name__)


def pytest_configure(config) -> None:
    settings = get_settings()

    if settings.CONFIGURE_LOGGING:
        configure_logging(log_level=settings.LOG_LEVEL, json_logs=settings.JSON_LOGS)

    install(assertpy, settings)


def pytest_unconfigure(config) -> None:
    uninstall(assertpy)


@pytest.fixture(scope="session")
def decimal_assertions() -> DecimalRegistry:
    registry = installed_registry(assertpy)

    if registry is None:
        logger.warning("decimal_assertions_missing", host=assertpy.__name__)
        registry = install(assertpy)

    return registry
