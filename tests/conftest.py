"""
Shared pytest fixtures
"""
import logging
from pathlib import Path

import pytest

from mdlinks.config import Config
from mdlinks.logging_config import APP_LOGGER

MARKDOWN_DIR = Path(__file__).parent / "test_markdown"


@pytest.fixture
def markdown_dir() -> Path:
    return MARKDOWN_DIR


@pytest.fixture(autouse=True)
def reset_app_state():
    """Drop logging handlers and the config singleton between tests"""
    Config.reset_instance()
    yield
    Config.reset_instance()
    logger = logging.getLogger(APP_LOGGER)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
