"""
Helpers for row-major grids (``grid[y][x]``) and sparse point maps.
"""
from typing import Any, Callable, Dict, List, Optional, Sequence, TypeVar

from aoc.world.points import Point

T = TypeVar("T")
G = TypeVar("G")

Grid = List[List[T]]


def as_grid(mapping: Dict[Point, T], mapper: Callable[[Optional[T]], G]) -> List[List[G]]:
    """
    Dense grid covering the bounding box of ``mapping``. Points missing from
    the map are passed to ``mapper`` as None. Row 0 is the smallest y.
    """
    if not mapping:
        return []
    min_x = min(p.x for p in mapping)
    max_x = max(p.x for p in mapping)
    min_y = min(p.y for p in mapping)
    max_y = max(p.y for p in mapping)
    return [
        [mapper(mapping.get(Point(x, y))) for x in range(min_x, max_x + 1)]
        for y in range(min_y, max_y + 1)
    ]


def as_char_grid(mapping: Dict[Point, str], empty_space: str = ".") -> List[List[str]]:
    return as_grid(mapping, lambda c: empty_space if not c else c)


def as_printable(
    grid: Sequence[Sequence[Any]],
    mapper: Optional[Callable[[Any], str]] = None,
    separator: Optional[str] = None,
    pad_length: Optional[int] = None,
    default: str = "",
    line_separator: Optional[str] = "\n",
) -> str:
    """
    Render a grid as text. ``separator`` follows every cell and
    ``line_separator`` every row, the last ones included. Cells are
    right-aligned to ``pad_length`` when given.
    """
    if mapper is None:
        mapper = lambda value: default if value is None else str(value)

    lines = []
    for row in grid:
        cells = []
        for value in row:
            text = mapper(value)
            if text is None:
                text = default
            if pad_length is not None:
                text = text.rjust(pad_length)
            if separator is not None:
                text += separator
            cells.append(text)
        line = "".join(cells)
        if line_separator is not None:
            line += line_separator
        lines.append(line)
    return "".join(lines)


def map_as_printable(mapping: Dict[Point, T], mapper: Callable[[Optional[T]], Any]) -> str:
    return as_printable(as_grid(mapping, mapper))


def set_area(grid: Grid, corner_a: Point, corner_b: Point, mapper: Callable[[T], T]) -> Grid:
    """
    Apply ``mapper`` in place to every cell of the rectangle spanned by the
    two corners, clamped to the grid. Returns the same grid.
    """
    if not grid:
        return grid
    min_x = max(min(corner_a.x, corner_b.x), 0)
    max_x = min(max(corner_a.x, corner_b.x), len(grid[0]) - 1)
    min_y = max(min(corner_a.y, corner_b.y), 0)
    max_y = min(max(corner_a.y, corner_b.y), len(grid) - 1)

    for y in range(min_y, max_y + 1):
        row = grid[y]
        for x in range(min_x, max_x + 1):
            row[x] = mapper(row[x])
    return grid


def transpose(grid: Sequence[Sequence[T]], default_if_jagged: Optional[T] = None) -> List[List[Optional[T]]]:
    """Swap rows and columns. Short rows are padded with ``default_if_jagged``."""
    if not grid:
        return []
    columns = max(len(row) for row in grid)
    return [
        [row[c] if c < len(row) else default_if_jagged for row in grid]
        for c in range(columns)
    ]


def diagonal_lines_down(grid: Sequence[Sequence[T]]) -> List[List[T]]:
    """
    All top-left to bottom-right diagonals: first those starting in column 0
    (top to bottom), then those starting in row 0 from column 1 on.
    """
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    lines: List[List[T]] = []

    for start_row in range(rows):
        lines.append([grid[start_row + i][i] for i in range(min(rows - start_row, cols))])
    for start_col in range(1, cols):
        lines.append([grid[i][start_col + i] for i in range(min(rows, cols - start_col))])
    return lines


def diagonal_lines_up(grid: Sequence[Sequence[T]]) -> List[List[T]]:
    """
    All anti-diagonals, each read from its top-right end: first those
    starting in the last column (top to bottom), then those starting in
    row 0 from the second to last column leftwards.
    """
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    lines: List[List[T]] = []

    for start_row in range(rows):
        lines.append([grid[start_row + i][cols - 1 - i] for i in range(min(rows - start_row, cols))])
    for start_col in range(cols - 2, -1, -1):
        lines.append([grid[i][start_col - i] for i in range(min(rows, start_col + 1))])
    return lines
