from __future__ import annotations

import logging
from dataclasses import dataclass, field
from itertools import permutations
from typing import Dict, List, Optional, Sequence, Tuple

logger = logging.getLogger("TSP")


@dataclass(frozen=True)
class Edge:
    start: str
    end: str
    cost: int


@dataclass
class TSPResult:
    success: bool
    path: List[str] = field(default_factory=list)
    distance: int = 0

    def __str__(self) -> str:
        return f"{{ Success = {self.success}, Path = [{'->'.join(self.path)}], Distance = {self.distance} }}"


def _collect_nodes(edges: Sequence[Edge]) -> List[str]:
    # First-seen order keeps results reproducible
    nodes: Dict[str, None] = {}
    for edge in edges:
        nodes.setdefault(edge.start)
        nodes.setdefault(edge.end)
    return list(nodes)


def _route_cost(route: Tuple[str, ...], costs: Dict[Tuple[str, str], int]) -> Optional[int]:
    total = 0
    for a, b in zip(route, route[1:]):
        cost = costs.get((a, b))
        if cost is None:
            return None
        total += cost
    return total


def solve_tsp(edges: Sequence[Edge], find_longest: bool = False, symmetrical: bool = True) -> TSPResult:
    """
    Visit every node exactly once along known edges, minimising (or with
    ``find_longest`` maximising) the summed edge cost. The route is open: it
    does not return to its first node.

    Exhaustive over all orderings, so only suitable for a handful of nodes.
    """
    if not edges:
        return TSPResult(False)

    nodes = _collect_nodes(edges)
    costs: Dict[Tuple[str, str], int] = {}
    for edge in edges:
        costs[(edge.start, edge.end)] = edge.cost
        if symmetrical:
            costs[(edge.end, edge.start)] = edge.cost

    index = {node: i for i, node in enumerate(nodes)}
    best_route: Optional[Tuple[str, ...]] = None
    best_cost: Optional[int] = None
    for route in permutations(nodes):
        # A reversed route costs the same on symmetrical graphs
        if symmetrical and len(route) > 1 and index[route[0]] > index[route[-1]]:
            continue
        cost = _route_cost(route, costs)
        if cost is None:
            continue
        if best_cost is None or (cost > best_cost if find_longest else cost < best_cost):
            best_route, best_cost = route, cost

    if best_route is None:
        logger.debug(f"No route visits all {len(nodes)} nodes")
        return TSPResult(False)

    result = TSPResult(True, list(best_route), best_cost)
    logger.debug(f"Solved TSP over {len(nodes)} nodes: {result}")
    return result


def solve_seating_arrangement(edges: Sequence[Edge]) -> TSPResult:
    """
    Seat every node at a round table maximising total happiness. An edge
    ``a -> b`` is the happiness ``a`` gains sitting next to ``b``; both
    directions count for each neighbouring pair. Missing edges count as 0.
    """
    if not edges:
        return TSPResult(False)

    nodes = _collect_nodes(edges)
    happiness: Dict[Tuple[str, str], int] = {(e.start, e.end): e.cost for e in edges}

    def evaluate(seating: Tuple[str, ...]) -> int:
        total = 0
        for i, person in enumerate(seating):
            neighbor = seating[(i + 1) % len(seating)]
            total += happiness.get((person, neighbor), 0) + happiness.get((neighbor, person), 0)
        return total

    # Rotations are equivalent, so the first node stays fixed
    head, rest = nodes[0], nodes[1:]
    best_seating: Tuple[str, ...] = (head,)
    best_total: Optional[int] = None
    for order in permutations(rest):
        seating = (head,) + order
        total = evaluate(seating)
        if best_total is None or total > best_total:
            best_seating, best_total = seating, total

    result = TSPResult(True, list(best_seating), best_total)
    logger.debug(f"Solved seating arrangement for {len(nodes)} guests: {result}")
    return result
