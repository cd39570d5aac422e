"""Test fixtures."""

from __future__ import annotations

import pytest
import structlog
from safir.logging import LogLevel, Profile, configure_logging
from structlog.stdlib import BoundLogger

from idpmapper.config import Config
from idpmapper.constants import LOGGER_NAME
from idpmapper.factory import Factory

from .support.config import config_path


@pytest.fixture(autouse=True)
def _logging() -> None:
    """Log everything in JSON so that log messages can be checked."""
    configure_logging(
        name=LOGGER_NAME, profile=Profile.production, log_level=LogLevel.DEBUG
    )


@pytest.fixture
def logger() -> BoundLogger:
    return structlog.get_logger(LOGGER_NAME)


@pytest.fixture
def config() -> Config:
    """Return the default test configuration."""
    return Config.from_file(config_path("mappers"))


@pytest.fixture
def factory(config: Config, logger: BoundLogger) -> Factory:
    return Factory(config, logger)
