"""
Input Reader
Parses whitespace-separated floating point numbers into 2D vectors.
"""
from __future__ import annotations

import logging
import re
from typing import Iterator, TextIO

from thetasort.errors import MalformedInputError
from thetasort.model.vector import Vector2D

# Get module logger
logger = logging.getLogger(__name__)

# Decimal number with optional sign, fraction and exponent
FLOAT_TOKEN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def read_floats(stream: TextIO) -> Iterator[float]:
    """
    Yield the numbers of `stream` in the order they appear.

    A token that starts with a number gives that number (`4abc` reads as 4).
    Reading stops at the first character that does not belong to a number;
    the rest of the stream is ignored.
    """
    for line_no, line in enumerate(stream, start=1):
        for token in line.split():
            match = FLOAT_TOKEN.match(token)
            if match is None:
                logger.warning(f"Stopped reading at non-numeric token '{token}' on line {line_no}.")
                return
            yield float(match.group())
            if match.end() < len(token):
                logger.warning(f"Stopped reading at '{token[match.end():]}' on line {line_no}.")
                return


def ingest(stream: TextIO) -> list[Vector2D]:
    """
    Read vectors from a text stream, two numbers per vector.

    Args:
        stream: Text stream of whitespace-separated numbers, read as x1 y1 x2 y2 ...

    Raises:
        MalformedInputError: If the numbers cannot be split evenly into (x, y) pairs.

    Returns:
        The vectors in input order. An empty stream gives an empty list.
    """
    numbers = read_floats(stream)
    output: list[Vector2D] = []

    for x in numbers:
        y = next(numbers, None)
        if y is None:
            raise MalformedInputError("mismatched vector elements")
        output.append(Vector2D(x, y))

    logger.debug(f"Ingested {len(output)} vectors.")
    return output
