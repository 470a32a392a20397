import math
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

import numpy as np

from ..errors import InvalidArgumentError


City = Tuple[float, float]
Route = List[int]


def _as_coords(cities: Sequence[City]) -> np.ndarray:
    try:
        coords = np.asarray(cities, dtype=float)
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentError(f"cities must be (x, y) pairs: {exc}") from exc
    if coords.ndim == 1 and coords.size == 0:
        return np.zeros((0, 2), dtype=float)
    if coords.ndim != 2 or coords.shape[1] != 2:
        raise InvalidArgumentError(f"cities must be (x, y) pairs, got shape {coords.shape}")
    if not np.isfinite(coords).all():
        raise InvalidArgumentError("city coordinates must be finite")
    return coords


def build_distance_matrix(cities: Sequence[City]) -> np.ndarray:
    coords = _as_coords(cities)
    diff = coords[:, None, :] - coords[None, :, :]
    matrix = np.sqrt((diff ** 2).sum(axis=-1))
    matrix.setflags(write=False)
    return matrix


def check_matrix(matrix: np.ndarray) -> np.ndarray:
    matrix = np.asarray(matrix, dtype=float)
    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
        raise InvalidArgumentError(f"distance matrix must be square, got shape {matrix.shape}")
    return matrix


def path_length(matrix: np.ndarray, route: Sequence[int]) -> float:
    # Unchecked: callers guarantee valid indices.
    if len(route) < 2:
        return 0.0
    idx = np.asarray(route, dtype=np.intp)
    return float(matrix[idx[:-1], idx[1:]].sum())


def route_distance(matrix: np.ndarray, route: Sequence[int]) -> float:
    matrix = check_matrix(matrix)
    n = matrix.shape[0]
    for city in route:
        if isinstance(city, bool) or not isinstance(city, (int, np.integer)):
            raise InvalidArgumentError(f"route entries must be integers, got {city!r}")
        if not 0 <= city < n:
            raise InvalidArgumentError(f"city index {city} out of range for {n} cities")
    return path_length(matrix, route)


@dataclass
class Tour:
    distance: float = 0.0
    route: Route = field(default_factory=list)

    @classmethod
    def from_route(cls, matrix: np.ndarray, route: Sequence[int]) -> "Tour":
        route = [int(city) for city in route]
        return cls(distance=route_distance(matrix, route), route=route)

    def gap(self, optimum: Optional[float]) -> float:
        if optimum is None or math.isclose(optimum, 0.0):
            return float("inf")
        return (self.distance - optimum) / optimum
