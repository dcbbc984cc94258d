import logging

import pytest

from thetasort.model import Vector2D


@pytest.fixture
def five_vectors() -> list[Vector2D]:
    return [Vector2D(1, 1), Vector2D(1, 2), Vector2D(1, 3), Vector2D(1, 4), Vector2D(1, 5)]


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drops handlers installed by `setup_logging` so they do not outlive a test."""
    yield
    logger = logging.getLogger("thetasort")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
