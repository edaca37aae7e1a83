"""Recursion and memoisation problems."""

from .magic_index import find_magic_index
from .robot_grid import (
    Grid,
    GridPoint,
    GridValidationError,
    build_networkx_graph,
    format_path,
    render_grid,
    robot_traverse_grid,
)
from .staircase import (
    AlgorithmProfile,
    StaircaseInputError,
    profile_algorithms,
    stair_combinations_brute,
    stair_combinations_memoized,
)

__all__ = [
    "AlgorithmProfile",
    "Grid",
    "GridPoint",
    "GridValidationError",
    "StaircaseInputError",
    "build_networkx_graph",
    "find_magic_index",
    "format_path",
    "profile_algorithms",
    "render_grid",
    "robot_traverse_grid",
    "stair_combinations_brute",
    "stair_combinations_memoized",
]
