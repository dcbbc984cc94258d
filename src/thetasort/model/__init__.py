"""
The MODEL layer contains pure data structures and the angle computations.
It has NO knowledge of the command line or of how results are printed.
It deals with Vectors, Pairs, and I/O.
"""
from thetasort.model.vector import Vector2D, dot, angle_between
from thetasort.model.pairs import (
    VectorPair, enumerate_pairs, enumerate_index_pairs, pair_angles, sort_by_angle, sort_with_angles
)
from thetasort.model.io import ingest

__all__ = [
    "Vector2D",
    "VectorPair",
    "angle_between",
    "dot",
    "enumerate_index_pairs",
    "enumerate_pairs",
    "ingest",
    "pair_angles",
    "sort_by_angle",
    "sort_with_angles",
]
