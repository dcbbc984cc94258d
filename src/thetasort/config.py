"""
Configuration & Path Management
===============================
This module serves as the central registry for file names, output formats
and global constants.

Why is this file needed?
------------------------
1. Abstraction: It keeps the default input name and the output line format
   in one place instead of scattering literals through the driver.
2. Deployment: It reads the installed package version, which is missing
   when running from a source checkout.

Exports:
    DEFAULT_FNAME (str): Input file read when no name is given.
    APP_VERSION (str): Installed version of the package.
"""
import os
from importlib.metadata import version, PackageNotFoundError
from pathlib import Path

try:
    APP_VERSION: str = version("thetasort")
except PackageNotFoundError:
    APP_VERSION = "0.0.0-dev"

# Global Constants
DEFAULT_FNAME: str = "test.txt"
INPUT_ENCODING: str = "utf-8"

THETA: str = "θ"
VECTOR_FORMAT: str = "g"  # shortest natural representation
ANGLE_FORMAT: str = "f"  # fixed point, 6 decimals


def resolve_input_path(filename: str) -> Path:
    """
    Get absolute path to an input file. Relative names are taken relative to
    the current working directory.
    """
    return Path(os.path.abspath(os.path.expanduser(filename)))
