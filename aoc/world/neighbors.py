from typing import Callable, List, Sequence, TypeVar

from aoc.world.points import Point, get_neighbor_points

T = TypeVar("T")

Traversable = Callable[[Point, Point], bool]


def get_neighbors_filtered(
    point: Point,
    is_traversable: Traversable,
    max_height: int,
    max_width: int,
    include_diagonals: bool = False,
) -> List[Point]:
    """
    Neighbours of ``point`` inside ``[0, max_width) x [0, max_height)`` that
    ``is_traversable(point, neighbour)`` accepts. Order follows
    ``get_neighbor_points``.
    """
    return [
        candidate
        for candidate in get_neighbor_points(point, include_diagonals)
        if 0 <= candidate.x < max_width
        and 0 <= candidate.y < max_height
        and is_traversable(point, candidate)
    ]


def map_neighbors(
    point: Point,
    mapper: Callable[[Point, Point], T],
    is_traversable: Traversable,
    max_height: int,
    max_width: int,
    include_diagonals: bool = False,
) -> List[T]:
    return [
        mapper(point, candidate)
        for candidate in get_neighbors_filtered(point, is_traversable, max_height, max_width, include_diagonals)
    ]


def get_grid_neighbors(
    grid: Sequence[Sequence[T]],
    y: int,
    x: int,
    include_diagonals: bool = False,
) -> List[T]:
    """Values of the in-bounds neighbours of ``grid[y][x]``. Width is taken from the first row."""
    height = len(grid)
    width = len(grid[0]) if height > 0 else 0
    return [
        grid[candidate.y][candidate.x]
        for candidate in get_neighbor_points(Point(x, y), include_diagonals)
        if 0 <= candidate.x < width and 0 <= candidate.y < height
    ]
