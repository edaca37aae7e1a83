"""Robot-in-a-grid pathfinding with a best-first frontier.

A robot sits in the upper-left corner of a grid with ``r`` rows and ``c``
columns.  It can only move right or down and some cells are off-limits.  The
solver finds *a* path from the top-left to the bottom-right corner.

Design notes:

* **Immutable inputs** - ``Grid`` wraps a read-only NumPy boolean array where
  ``True`` marks a passable cell.  Malformed payloads surface a
  ``GridValidationError`` immediately instead of being coerced.
* **Best-first search** - the frontier is a binary heap ordered by Manhattan
  distance to the target, ties broken by insertion order.  Accumulated path
  cost is not tracked; with right/down moves only the heuristic equals the true
  remaining distance, so the search answers the reachability question exactly.
* **NetworkX integration** - ``build_networkx_graph`` converts a grid into an
  ``nx.DiGraph`` of legal moves.  NetworkX is imported lazily so the solver
  stays usable without it.
"""

from __future__ import annotations

from dataclasses import dataclass
import heapq
import itertools
import logging
from typing import (
    TYPE_CHECKING,
    Any,
    Dict,
    Iterable,
    List,
    Mapping,
    Optional,
    Sequence,
    Set,
    Tuple,
    TypeAlias,
    Union,
)

import numpy as np

if TYPE_CHECKING:  # pragma: no cover - import is for type checking only
    import networkx as nx  # type: ignore[import-not-found,import-untyped]

    NxDiGraph: TypeAlias = nx.DiGraph
else:  # pragma: no cover - alias keeps runtime dependency optional
    NxDiGraph: TypeAlias = Any

logger = logging.getLogger(__name__)

PASSABLE_SYMBOLS = frozenset({".", "_"})
BLOCKED_SYMBOLS = frozenset({"#", "X", "x"})

GridInput = Union[Sequence[Sequence[bool]], np.ndarray]

__all__ = [
    "BLOCKED_SYMBOLS",
    "Grid",
    "GridPoint",
    "GridValidationError",
    "PASSABLE_SYMBOLS",
    "build_networkx_graph",
    "format_path",
    "render_grid",
    "robot_traverse_grid",
]


class GridValidationError(ValueError):
    """Raised when a grid violates structural constraints."""


@dataclass(frozen=True, order=True)
class GridPoint:
    """A ``(row, column)`` cell coordinate."""

    row: int
    column: int

    def right(self) -> "GridPoint":
        return GridPoint(self.row, self.column + 1)

    def down(self) -> "GridPoint":
        return GridPoint(self.row + 1, self.column)

    def distance(self, other: "GridPoint") -> int:
        """Number of horizontal and vertical steps needed to reach *other*."""

        return abs(self.row - other.row) + abs(self.column - other.column)

    def __str__(self) -> str:
        return f"({self.row},{self.column})"


@dataclass(frozen=True, eq=False)
class Grid:
    """Immutable rectangular passability table.

    The backing array is validated and copied into a read-only buffer on
    construction, whichever constructor is used.
    """

    cells: np.ndarray

    def __post_init__(self) -> None:
        cells = self.cells
        if not isinstance(cells, np.ndarray):
            raise GridValidationError("Grid cells must be a NumPy array")
        if cells.ndim != 2:
            raise GridValidationError("Grid must be two-dimensional")
        if cells.size == 0:
            raise GridValidationError("Grid must contain at least one cell")
        if cells.dtype != np.bool_:
            raise GridValidationError("Grid cells must be booleans")
        frozen = cells.copy()
        frozen.setflags(write=False)
        object.__setattr__(self, "cells", frozen)

    @classmethod
    def from_rows(cls, rows: GridInput) -> "Grid":
        if rows is None:
            raise GridValidationError("Grid must not be None")
        if isinstance(rows, np.ndarray):
            return cls.from_array(rows)
        materialised: List[List[object]] = []
        for row in rows:
            if isinstance(row, (str, bytes)) or not isinstance(row, (Sequence, np.ndarray)):
                raise GridValidationError("Grid must be two-dimensional")
            materialised.append(list(row))
        if not materialised or not materialised[0]:
            raise GridValidationError("Grid must contain at least one cell")
        width = len(materialised[0])
        for index, row in enumerate(materialised):
            if len(row) != width:
                raise GridValidationError(
                    f"Grid rows must all have {width} columns; row {index} has {len(row)}"
                )
            for cell in row:
                if not isinstance(cell, (bool, np.bool_)):
                    raise GridValidationError("Grid cells must be booleans")
        return cls(np.array(materialised, dtype=bool))

    @classmethod
    def from_array(cls, array: np.ndarray) -> "Grid":
        if array is None:
            raise GridValidationError("Grid must not be None")
        return cls(array)

    @classmethod
    def parse(cls, text: str) -> "Grid":
        """Build a grid from lines of ``.`` (passable) and ``#`` (blocked).

        Blank lines and surrounding whitespace are ignored; ``_`` and ``X`` are
        accepted as aliases.
        """

        rows: List[List[bool]] = []
        for line in text.splitlines():
            stripped = line.replace(" ", "").strip()
            if not stripped:
                continue
            row: List[bool] = []
            for symbol in stripped:
                if symbol in PASSABLE_SYMBOLS:
                    row.append(True)
                elif symbol in BLOCKED_SYMBOLS:
                    row.append(False)
                else:
                    raise GridValidationError(f"Unknown grid symbol: {symbol!r}")
            rows.append(row)
        return cls.from_rows(rows)

    @property
    def rows(self) -> int:
        return int(self.cells.shape[0])

    @property
    def columns(self) -> int:
        return int(self.cells.shape[1])

    @property
    def start(self) -> GridPoint:
        return GridPoint(0, 0)

    @property
    def end(self) -> GridPoint:
        return GridPoint(self.rows - 1, self.columns - 1)

    def __contains__(self, point: object) -> bool:
        return (
            isinstance(point, GridPoint)
            and 0 <= point.row < self.rows
            and 0 <= point.column < self.columns
        )

    def is_passable(self, point: GridPoint) -> bool:
        """Return ``True`` when *point* lies inside the grid and is open."""

        return point in self and bool(self.cells[point.row, point.column])


def robot_traverse_grid(grid: Union[GridInput, Grid]) -> List[GridPoint]:
    """Find a right/down path from the top-left to the bottom-right corner.

    Parameters
    ----------
    grid:
        A :class:`Grid` or a rectangular table of booleans where ``True`` marks
        a passable cell.

    Returns
    -------
    list[GridPoint]
        The cells visited in travel order, both corners included.  An empty
        list is returned when no path exists.

    Raises
    ------
    GridValidationError
        If the grid is ``None``, empty or malformed.
    """

    board = grid if isinstance(grid, Grid) else Grid.from_rows(grid)
    start, end = board.start, board.end
    if not board.is_passable(start):
        logger.debug("Start cell %s is blocked", start)
        return []

    # Ties are broken by insertion order through the counter.
    counter = itertools.count()
    frontier: List[Tuple[int, int, GridPoint]] = [(start.distance(end), next(counter), start)]
    evaluated: Set[GridPoint] = set()
    previous: Dict[GridPoint, GridPoint] = {}

    while frontier:
        _, _, point = heapq.heappop(frontier)
        if point in evaluated:
            continue
        evaluated.add(point)
        if point == end:
            path = _reconstruct_path(previous, point)
            logger.debug(
                "Found path of %d cells after evaluating %d cells",
                len(path),
                len(evaluated),
            )
            return path

        for candidate in (point.right(), point.down()):
            if candidate in evaluated:
                continue
            if candidate.row > end.row or candidate.column > end.column:
                continue
            if not board.is_passable(candidate):
                continue
            heapq.heappush(frontier, (candidate.distance(end), next(counter), candidate))
            previous[candidate] = point

    logger.debug("No path to %s after evaluating %d cells", end, len(evaluated))
    return []


def _reconstruct_path(
    previous: Mapping[GridPoint, GridPoint], end: GridPoint
) -> List[GridPoint]:
    path: List[GridPoint] = []
    cursor: Optional[GridPoint] = end
    while cursor is not None:
        path.append(cursor)
        cursor = previous.get(cursor)
    path.reverse()
    return path


def format_path(path: Sequence[GridPoint]) -> str:
    """Render *path* as a human-readable arrow chain."""

    if not path:
        return "no path"
    return " → ".join(str(point) for point in path)


def render_grid(grid: Union[GridInput, Grid], path: Iterable[GridPoint] = ()) -> str:
    """Render *grid* as ASCII, marking cells of *path* with ``*``."""

    board = grid if isinstance(grid, Grid) else Grid.from_rows(grid)
    on_path = set(path)
    lines: List[str] = []
    for row in range(board.rows):
        symbols: List[str] = []
        for column in range(board.columns):
            point = GridPoint(row, column)
            if point in on_path:
                symbols.append("*")
            elif board.is_passable(point):
                symbols.append(".")
            else:
                symbols.append("#")
        lines.append("".join(symbols))
    return "\n".join(lines)


def build_networkx_graph(grid: Union[GridInput, Grid]) -> NxDiGraph:
    """Convert *grid* to a NetworkX ``DiGraph`` of legal robot moves.

    Nodes are ``GridPoint`` instances for passable cells; edges connect each
    passable cell to its passable right and down neighbours.  NetworkX is
    imported lazily to avoid forcing the dependency on solver-only callers.
    """

    try:
        import networkx as nx  # type: ignore[import-not-found]
    except ImportError as exc:  # pragma: no cover - exercised via tests when missing
        raise ModuleNotFoundError(
            "NetworkX is required for graph export. Install it via 'pip install networkx'."
        ) from exc

    board = grid if isinstance(grid, Grid) else Grid.from_rows(grid)
    nx_graph = nx.DiGraph()
    for row, column in zip(*np.nonzero(board.cells)):
        point = GridPoint(int(row), int(column))
        nx_graph.add_node(point)
        for neighbor in (point.right(), point.down()):
            if board.is_passable(neighbor):
                nx_graph.add_edge(point, neighbor)
    return nx_graph
