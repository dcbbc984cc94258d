"""
Vector Primitives
=================
A two-component vector value type and the products defined on it.

Angles are evaluated in numpy float64 arithmetic so that degenerate input
(a zero vector, or a cosine pushed just outside [-1, 1] by rounding) yields
NaN instead of raising.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, TYPE_CHECKING
import math

import numpy as np

from thetasort.config import VECTOR_FORMAT

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Vector2D:
    """
    A vector in 2D space. Two vectors are equal when both components are
    exactly equal.
    """
    x: float
    y: float

    def norm(self) -> float:
        """Returns the euclidean 2-norm."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y], dtype=np.float64)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __str__(self) -> str:
        return format(self, VECTOR_FORMAT)

    def __format__(self, format_spec: str) -> str:
        # Same spec for both components
        spec = format_spec or VECTOR_FORMAT
        return f"[{self.x:{spec}}, {self.y:{spec}}]"


def dot(a: Vector2D, b: Vector2D) -> float:
    """Returns the dot product of `a` and `b`."""
    return a.x * b.x + a.y * b.y


def angle_between(a: Vector2D, b: Vector2D) -> float:
    """
    Angle theta between two vectors, arccos(a.b / (|a| |b|)).

    The cosine is not clamped to [-1, 1].

    Args:
        a: First vector.
        b: Second vector.

    Returns:
        The angle in radians in [0, pi], or NaN when either vector is zero or
        the cosine falls outside the domain of arccos.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        cosine = np.float64(dot(a, b)) / (np.float64(a.norm()) * np.float64(b.norm()))
        return float(np.arccos(cosine))
