"""
Exact solver: enumerate every closed tour starting at city 0.

Fixing city 0 removes rotations of the same tour; mirror images are still
visited, which doubles the work but not the answer. Use only for small inputs,
the search is O((n - 1)!).
"""

import logging
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .base import City, Route, Tour, build_distance_matrix, path_length


logger = logging.getLogger(__name__)


def _search(
    matrix: np.ndarray, route: Route, visited: List[bool]
) -> Tuple[float, Route]:
    n = len(visited)
    if len(route) == n:
        closed = route + [route[0]]
        return path_length(matrix, closed), closed

    best: Optional[Tuple[float, Route]] = None
    for city in range(n):
        if visited[city]:
            continue
        visited[city] = True
        route.append(city)
        result = _search(matrix, route, visited)
        route.pop()
        visited[city] = False
        # Strict comparison keeps the first of equally short tours.
        if best is None or result[0] < best[0]:
            best = result
    return best


def solve(cities: Sequence[City]) -> Tour:
    matrix = build_distance_matrix(cities)
    n = matrix.shape[0]
    if n == 0:
        return Tour()

    visited = [False] * n
    visited[0] = True
    _, route = _search(matrix, [0], visited)
    tour = Tour.from_route(matrix, route)
    logger.info("brute force: %d cities, distance %.4f", n, tour.distance)
    return tour
