"""
Error Types
===========
Fatal failures of a run. Library code raises them; only the command-line
driver catches them and turns them into an exit status.
"""


class ThetaSortError(Exception):
    """Base class for all errors raised by thetasort."""


class FileOpenError(ThetaSortError, OSError):
    """The input file could not be opened for reading."""

    def __init__(self, filename: str) -> None:
        super().__init__(f"no input file: '{filename}'")
        self.filename = filename


class MalformedInputError(ThetaSortError, ValueError):
    """The input does not describe a whole number of vectors."""
