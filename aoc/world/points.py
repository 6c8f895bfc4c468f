from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, List, Tuple

from aoc.core.errors import UnknownDirectionError


@dataclass(frozen=True)
class Point:
    """Immutable grid coordinate. ``y`` grows downward."""
    x: int
    y: int

    def __str__(self) -> str:
        return f"({self.x},{self.y})"


class Direction(Enum):
    UP = ("U", "^", 0, -1)
    DOWN = ("D", "v", 0, 1)
    LEFT = ("L", "<", -1, 0)
    RIGHT = ("R", ">", 1, 0)
    UP_LEFT = ("UL", "↖", -1, -1)
    UP_RIGHT = ("UR", "↗", 1, -1)
    DOWN_LEFT = ("DL", "↙", -1, 1)
    DOWN_RIGHT = ("DR", "↘", 1, 1)

    def __init__(self, code: str, glyph: str, dx: int, dy: int):
        self.code = code
        self.glyph = glyph
        self.dx = dx
        self.dy = dy

    @property
    def offset(self) -> Tuple[int, int]:
        return self.dx, self.dy

    @property
    def opposite(self) -> "Direction":
        return _BY_OFFSET[(-self.dx, -self.dy)]

    @property
    def is_diagonal(self) -> bool:
        return self.dx != 0 and self.dy != 0


CARDINAL_DIRECTIONS = (Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT)
DIAGONAL_DIRECTIONS = (Direction.UP_LEFT, Direction.UP_RIGHT, Direction.DOWN_LEFT, Direction.DOWN_RIGHT)

_BY_OFFSET: Dict[Tuple[int, int], Direction] = {d.offset: d for d in Direction}
_BY_CODE: Dict[str, Direction] = {d.code: d for d in Direction}
_BY_CODE.update({d.glyph: d for d in Direction})


def _clamp(value: int) -> int:
    return max(-1, min(1, value))


# ── Stepping ──────────────────────────────────────────────────────────

def step_in_direction(point: Point, direction: Direction) -> Point:
    """Return the point one unit away from ``point`` in ``direction``."""
    if not isinstance(direction, Direction):
        raise UnknownDirectionError(direction)
    return Point(point.x + direction.dx, point.y + direction.dy)


def step_towards(
    point: Point,
    target: Point,
    allow_diagonal: bool = True,
    prefer_diagonal: bool = True,
    prefer_horizontal: bool = True,
) -> Point:
    """
    Return the point one step closer to ``target``.

    With ``allow_diagonal`` and ``prefer_diagonal`` both axes move at once.
    With ``allow_diagonal`` only, a diagonal is taken on an exact diagonal
    line. Otherwise a horizontal step is taken when ``prefer_horizontal`` and
    the x axis still differs, falling back to a vertical step.
    """
    if point == target:
        return point
    dx = target.x - point.x
    dy = target.y - point.y
    x_step, y_step = _clamp(dx), _clamp(dy)

    if allow_diagonal and (prefer_diagonal or abs(dx) == abs(dy)):
        return Point(point.x + x_step, point.y + y_step)
    if prefer_horizontal and dx != 0:
        return Point(point.x + x_step, point.y)
    if not prefer_horizontal and dy == 0:
        return Point(point.x + x_step, point.y)
    return Point(point.x, point.y + y_step)


def walk_directly_towards(
    start: Point,
    target: Point,
    allow_diagonal: bool = True,
    prefer_diagonal: bool = True,
    prefer_horizontal: bool = True,
    include_start: bool = False,
) -> Iterator[Point]:
    """Yield every point on a straight walk to ``target``. No obstacle checks."""
    current = start
    if include_start:
        yield current
    while current != target:
        current = step_towards(current, target, allow_diagonal, prefer_diagonal, prefer_horizontal)
        yield current


# ── Directions ────────────────────────────────────────────────────────

def get_direction_towards(point: Point, target: Point) -> Direction:
    """
    Direction of the next step towards ``target``, preferring diagonals.
    Returns ``Direction.UP`` if both points are equal.
    """
    if point == target:
        return Direction.UP
    step = (_clamp(target.x - point.x), _clamp(target.y - point.y))
    direction = _BY_OFFSET.get(step)
    if direction is None:
        raise UnknownDirectionError(point, target)
    return direction


def get_direction_char_towards(point: Point, target: Point) -> str:
    return direction_glyph(get_direction_towards(point, target))


def direction_glyph(direction: Direction) -> str:
    if not isinstance(direction, Direction):
        raise UnknownDirectionError(direction)
    return direction.glyph


def parse_direction(code: str) -> Direction:
    """Parse a direction from its code (``U``, ``DR``...) or glyph (``^``, ``↘``...)."""
    direction = _BY_CODE.get(code) if isinstance(code, str) else None
    if direction is None:
        raise UnknownDirectionError(code)
    return direction


# ── Comparisons ───────────────────────────────────────────────────────

def manhattan_distance(a: Point, b: Point) -> int:
    return abs(a.x - b.x) + abs(a.y - b.y)


def chebyshev_distance(a: Point, b: Point) -> int:
    return max(abs(a.x - b.x), abs(a.y - b.y))


def euclidean_distance(a: Point, b: Point) -> int:
    # Truncated, not rounded
    dx = a.x - b.x
    dy = a.y - b.y
    return math.isqrt(dx * dx + dy * dy)


def is_within_reach(a: Point, b: Point) -> bool:
    return chebyshev_distance(a, b) <= 1


def get_neighbor_points(point: Point, include_diagonals: bool = True) -> List[Point]:
    directions = CARDINAL_DIRECTIONS + DIAGONAL_DIRECTIONS if include_diagonals else CARDINAL_DIRECTIONS
    return [step_in_direction(point, d) for d in directions]
