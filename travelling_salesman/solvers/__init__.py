from .base import City, Route, Tour, build_distance_matrix, route_distance
from .candidate import Candidate, TravellingSalesman
from .approximate import (
    METHODS,
    hill_climbing,
    random_restarts,
    random_search,
    simulated_annealing,
    solve,
    steepest_ascent,
)
from . import brute_force

__all__ = [
    "City",
    "Route",
    "Tour",
    "build_distance_matrix",
    "route_distance",
    "Candidate",
    "TravellingSalesman",
    "METHODS",
    "brute_force",
    "hill_climbing",
    "random_restarts",
    "random_search",
    "simulated_annealing",
    "solve",
    "steepest_ascent",
]
