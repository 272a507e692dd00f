import logging

import pytest

from cladelayout.logger import layout_logger


def pytest_configure(config):
    """Set up test environment before tests run."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@pytest.fixture
def enabled_layout_logger():
    layout_logger.disabled = False
    layout_logger.clear()
    yield layout_logger
    layout_logger.disabled = True
    layout_logger.clear()
