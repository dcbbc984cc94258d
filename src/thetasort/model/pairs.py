"""
Vector Pairs
============
Enumeration of unordered vector pairs and their ordering by angle.

A pair is identified by the positions of its vectors in the input, so two
equal vectors read from different positions still form a pair.
"""
from __future__ import annotations

import logging
from typing import Iterator, NamedTuple, Sequence, TYPE_CHECKING

import numpy as np

from thetasort.model.vector import Vector2D, angle_between

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


class VectorPair(NamedTuple):
    a: Vector2D
    b: Vector2D

    @property
    def angle(self) -> float:
        return angle_between(self.a, self.b)


def enumerate_index_pairs(n: int) -> Iterator[tuple[int, int]]:
    """Yields every (i, j) with 0 <= i < j < n, ordered by i, then j."""
    for i in range(n):
        for j in range(i + 1, n):
            yield i, j


def enumerate_pairs(vectors: Sequence[Vector2D]) -> list[VectorPair]:
    """
    Returns all unique pairs of vectors in `vectors`, excluding pairs of a
    vector with itself.

    For n vectors this is n(n-1)/2 pairs. The pair of positions (i, j) is
    emitted once as (vectors[i], vectors[j]) with i < j, in lexicographic
    order of (i, j).
    """
    pairs = [VectorPair(vectors[i], vectors[j]) for i, j in enumerate_index_pairs(len(vectors))]
    logger.debug(f"Enumerated {len(pairs)} pairs from {len(vectors)} vectors.")
    return pairs


def pair_angles(pairs: Sequence[VectorPair]) -> npt.NDArray[np.float64]:
    """
    Compute the angle of every pair in one pass.

    Gives the same values as `angle_between` applied pair by pair.

    Args:
        pairs: Pairs of vectors.

    Returns:
        Array of angles in radians, NaN where a pair contains a zero vector.
    """
    if len(pairs) == 0:
        return np.empty(0, dtype=np.float64)

    first = np.array([p.a.to_array() for p in pairs])
    second = np.array([p.b.to_array() for p in pairs])

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        dots = first[:, 0] * second[:, 0] + first[:, 1] * second[:, 1]
        norms_first = np.sqrt(first[:, 0] * first[:, 0] + first[:, 1] * first[:, 1])
        norms_second = np.sqrt(second[:, 0] * second[:, 0] + second[:, 1] * second[:, 1])
        return np.arccos(dots / (norms_first * norms_second))


def sort_with_angles(vectors: Sequence[Vector2D]) -> tuple[list[VectorPair], npt.NDArray[np.float64]]:
    """
    Pairs of `vectors` ordered by angle, together with their angles.

    The sort is stable: pairs with equal angles keep their enumeration
    order. Pairs whose angle is NaN are placed last.

    Returns:
        The sorted pairs and an array holding the angle of each, in the same order.
    """
    pairs = enumerate_pairs(vectors)
    angles = pair_angles(pairs)

    n_undefined = int(np.count_nonzero(np.isnan(angles)))
    if n_undefined:
        logger.warning(f"{n_undefined} of {len(pairs)} pairs have an undefined angle (NaN).")

    # numpy sorts NaN to the end
    order = np.argsort(angles, kind="stable")
    return [pairs[i] for i in order], angles[order]


def sort_by_angle(vectors: Sequence[Vector2D]) -> list[VectorPair]:
    """Return the pairs of `vectors` ordered by angle in ascending order."""
    pairs, _ = sort_with_angles(vectors)
    return pairs
