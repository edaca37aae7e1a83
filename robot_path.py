"""Command line tool for the robot-in-a-grid pathfinder.

The grid is read from ``--grid-file`` or from repeated ``--row`` flags using
``.`` for passable and ``#`` for blocked cells.  Without either, a built-in
demonstration grid is solved.  Results are rendered with Rich: the grid with
the path overlaid, a table of the visited cells and a summary panel.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from exercises.recursion_and_memoization.robot_grid import (
    Grid,
    GridPoint,
    GridValidationError,
    format_path,
    render_grid,
    robot_traverse_grid,
)

logger = logging.getLogger(__name__)

DEMO_GRID = """
.....
.#.#.
.#.##
.#...
"""


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--grid-file",
        type=Path,
        default=None,
        help="Text file containing one grid row per line",
    )
    source.add_argument(
        "--row",
        dest="rows",
        action="append",
        default=None,
        help="Grid row such as '..#.'; repeat for each row",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        help="Logging verbosity for diagnostic output.",
    )
    return parser


def _load_grid(args: argparse.Namespace) -> Grid:
    if args.grid_file is not None:
        return Grid.parse(args.grid_file.read_text(encoding="utf-8"))
    if args.rows:
        return Grid.parse("\n".join(args.rows))
    return Grid.parse(DEMO_GRID)


def _path_table(path: Sequence[GridPoint]) -> Table:
    table = Table(title="Robot Path")
    table.add_column("Step", justify="right")
    table.add_column("Row", justify="right")
    table.add_column("Column", justify="right")
    table.add_column("Move", justify="left")

    for index, point in enumerate(path):
        if index == 0:
            move = "start"
        elif point.row > path[index - 1].row:
            move = "down"
        else:
            move = "right"
        table.add_row(str(index), str(point.row), str(point.column), move)
    return table


def main(argv: Sequence[str] | None = None, *, console: Console | None = None) -> int:
    """CLI entry point; returns the process exit status."""

    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))
    if console is None:
        console = Console()

    try:
        grid = _load_grid(args)
    except (GridValidationError, OSError) as exc:
        logger.error("Failed to load grid: %s", exc)
        return 1

    path: List[GridPoint] = robot_traverse_grid(grid)
    console.print(render_grid(grid, path), markup=False, highlight=False)
    if path:
        console.print(_path_table(path))
        console.print(
            Panel.fit(
                f"[bold green]Path found with {len(path)} cells[/]\n{format_path(path)}"
            )
        )
    else:
        console.print(Panel.fit("[bold red]No path to the bottom-right corner"))
    logger.info("Solved %dx%d grid", grid.rows, grid.columns)
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry
    raise SystemExit(main())
