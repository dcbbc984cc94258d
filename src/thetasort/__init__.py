"""Angles between every pair of 2D vectors read from a text file."""
from thetasort.config import APP_VERSION as __version__

__all__ = ["__version__"]
