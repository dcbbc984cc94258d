"""
Command-Line Driver
===================
Reads vectors from a file and prints every pair of them ordered by the
angle between the two vectors.

Why is this file needed?
------------------------
It is the only place where the outside world is touched. It:
1. Parses the command line and sets up logging.
2. Opens the input file and hands the stream to the model layer.
3. Prints the results and turns failures into an exit status.

Usage:
    $ thetasort [filename]
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence, TextIO

from thetasort.config import (
    ANGLE_FORMAT, APP_VERSION, DEFAULT_FNAME, INPUT_ENCODING, THETA, resolve_input_path
)
from thetasort.errors import FileOpenError, MalformedInputError, ThetaSortError
from thetasort.logging_config import setup_logging, verbosity_to_level
from thetasort.model.io import ingest
from thetasort.model.pairs import sort_with_angles
from thetasort.model.vector import Vector2D

logger = logging.getLogger(__name__)

EXIT_FAILURE = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="thetasort",
        description="Print every pair of 2D vectors in a file, ordered by the angle between them.",
    )
    parser.add_argument(
        "filename", nargs="?", default=DEFAULT_FNAME,
        help=f"whitespace-separated numbers read as x y pairs (default: {DEFAULT_FNAME})",
    )
    parser.add_argument("-v", "--verbose", action="count", default=0, help="log more detail to stderr (-vv for debug)")
    parser.add_argument("--log-file", default=None, help="also write the log to this file")
    parser.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")
    return parser


def load_vectors(path: Path) -> list[Vector2D]:
    """
    Read all vectors from the file at `path`.

    Raises:
        FileOpenError: If the file cannot be opened.
        MalformedInputError: If the file is not text or holds an odd count of numbers.
    """
    try:
        f = open(path, mode='r', encoding=INPUT_ENCODING)
    except OSError as e:
        raise FileOpenError(str(path)) from e

    with f:
        try:
            return ingest(f)
        except UnicodeDecodeError as e:
            raise MalformedInputError(f"input is not {INPUT_ENCODING} text") from e


def format_line(a: Vector2D, b: Vector2D, angle: float) -> str:
    """Renders one result line, e.g. 'θ([1, 1], [1, 2]) = 0.321751'."""
    return f"{THETA}({a}, {b}) = {angle:{ANGLE_FORMAT}}"


def write_results(vectors: Sequence[Vector2D], out: TextIO) -> int:
    """Writes the angle-sorted pairs of `vectors` to `out`, returns the number of lines."""
    pairs, angles = sort_with_angles(vectors)
    for (a, b), angle in zip(pairs, angles):
        out.write(format_line(a, b, float(angle)) + "\n")
    return len(pairs)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    setup_logging(level=verbosity_to_level(args.verbose), log_file=args.log_file)

    path = resolve_input_path(args.filename)
    logger.info(f"Reading vectors from: {path}")

    try:
        vectors = load_vectors(path)
    except ThetaSortError as e:
        logger.error(f"Run aborted: {e}")
        return EXIT_FAILURE

    n_lines = write_results(vectors, sys.stdout)
    logger.info(f"Printed {n_lines} pairs from {len(vectors)} vectors.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
