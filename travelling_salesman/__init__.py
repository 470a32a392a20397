"""
Travelling Salesman solvers over 2-D cities: exact brute force for small inputs
and local search (hill climbing, restarts, steepest ascent, simulated annealing,
random search) for larger ones.
"""

from .errors import InvalidArgumentError
from .metaheuristics import SearchConfig
from .solvers import (
    Tour,
    brute_force,
    build_distance_matrix,
    route_distance,
    solve,
)

__version__ = "0.1.0"

__all__ = [
    "data",
    "metaheuristics",
    "solvers",
    "InvalidArgumentError",
    "SearchConfig",
    "Tour",
    "brute_force",
    "build_distance_matrix",
    "route_distance",
    "solve",
]
