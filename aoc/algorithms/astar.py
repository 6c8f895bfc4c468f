from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass, field
from heapq import heappush, heappop
from typing import Callable, Dict, List, Optional, Set, Union

from aoc.world.neighbors import Traversable, get_neighbors_filtered
from aoc.world.points import Point, manhattan_distance

logger = logging.getLogger("AStar")

Number = Union[int, float]
Heuristic = Callable[[Point, Point], Number]
StepCost = Callable[[Number], Number]


def _unit_step(cost: Number) -> Number:
    return cost + 1


@dataclass(order=True)
class _Field:
    priority: Number
    # Insertion order breaks ties between equal priorities (FIFO)
    sequence: int
    position: Point = field(compare=False)
    cost: Number = field(compare=False)
    distance: Number = field(compare=False)
    parent: Optional["_Field"] = field(default=None, compare=False, repr=False)


class AStar:
    """
    A* search on a bounded grid ``[0, max_width) x [0, max_height)``.

    Traversal is decided by ``is_traversable(current, neighbour)``. The
    heuristic defaults to Manhattan distance and ``step_cost`` maps the
    accumulated cost to the cost after one more step (default ``+1``).

    An open position is only replaced by a candidate with a strictly lower
    priority and closed positions are never expanded again, so costs must be
    non-negative.
    """

    def __init__(
        self,
        is_traversable: Traversable,
        max_height: int,
        max_width: int,
        heuristic: Optional[Heuristic] = None,
        step_cost: Optional[StepCost] = None,
        include_diagonals: bool = False,
    ):
        self.is_traversable = is_traversable
        self.max_height = max_height
        self.max_width = max_width
        self.heuristic = heuristic or manhattan_distance
        self.step_cost = step_cost or _unit_step
        self.include_diagonals = include_diagonals

    def find_path(self, start: Point, goal: Point) -> Optional[List[Point]]:
        """Points from the step after ``start`` up to ``goal``, or None if unreachable."""
        end_field = self._search(start, goal)
        if end_field is None:
            return None
        return self._reconstruct_path(end_field)

    def find_path_distance(self, start: Point, goal: Point) -> Optional[Number]:
        end_field = self._search(start, goal)
        return end_field.cost if end_field is not None else None

    def _search(self, start: Point, goal: Point) -> Optional[_Field]:
        counter = itertools.count()
        start_distance = self.heuristic(start, goal)
        open_set: List[_Field] = []
        heappush(open_set, _Field(
            priority=start_distance,
            sequence=next(counter),
            position=start,
            cost=0,
            distance=start_distance,
        ))
        # Lowest priority currently queued per open position
        open_priority: Dict[Point, Number] = {start: start_distance}
        closed: Set[Point] = set()

        while open_set:
            current = heappop(open_set)
            if current.position in closed:
                continue

            if current.position == goal:
                logger.debug(f"Reached {goal} from {start} with cost {current.cost} after {len(closed)} expansions")
                return current

            closed.add(current.position)
            del open_priority[current.position]

            neighbors = get_neighbors_filtered(
                current.position,
                self.is_traversable,
                self.max_height,
                self.max_width,
                self.include_diagonals,
            )
            for neighbor in neighbors:
                if neighbor in closed:
                    continue
                cost = self.step_cost(current.cost)
                distance = self.heuristic(neighbor, goal)
                priority = cost + distance
                queued = open_priority.get(neighbor)
                if queued is not None and queued <= priority:
                    continue

                open_priority[neighbor] = priority
                heappush(open_set, _Field(
                    priority=priority,
                    sequence=next(counter),
                    position=neighbor,
                    cost=cost,
                    distance=distance,
                    parent=current,
                ))

        logger.debug(f"No path from {start} to {goal} after {len(closed)} expansions")
        return None

    @staticmethod
    def _reconstruct_path(current: _Field) -> List[Point]:
        # The start field has no parent and is left out
        path: List[Point] = []
        while current.parent is not None:
            path.append(current.position)
            current = current.parent
        path.reverse()
        return path


def find_path(
    start: Point,
    end: Point,
    is_traversable: Traversable,
    max_height: int,
    max_width: int,
    heuristic: Optional[Heuristic] = None,
    step_cost: Optional[StepCost] = None,
    include_diagonals: bool = False,
) -> Optional[List[Point]]:
    """
    Shortest path from ``start`` to ``end`` with ``start`` excluded and
    ``end`` included. ``[]`` if both are equal, None if ``end`` is unreachable.
    """
    astar = AStar(is_traversable, max_height, max_width, heuristic, step_cost, include_diagonals)
    return astar.find_path(start, end)


def find_path_distance(
    start: Point,
    end: Point,
    is_traversable: Traversable,
    max_height: int,
    max_width: int,
    heuristic: Optional[Heuristic] = None,
    step_cost: Optional[StepCost] = None,
    include_diagonals: bool = False,
) -> Optional[Number]:
    """Accumulated cost at ``end``, or None if it is unreachable."""
    astar = AStar(is_traversable, max_height, max_width, heuristic, step_cost, include_diagonals)
    return astar.find_path_distance(start, end)
