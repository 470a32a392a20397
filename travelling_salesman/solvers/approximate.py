import logging
import random
from typing import Callable, Dict, Optional, Sequence

from .. import metaheuristics
from ..errors import InvalidArgumentError
from ..metaheuristics import Driver, SearchConfig
from . import brute_force
from .base import City, Tour, build_distance_matrix
from .candidate import TravellingSalesman


logger = logging.getLogger(__name__)


def _solve(
    name: str,
    default_driver: Driver,
    cities: Sequence[City],
    config: Optional[SearchConfig],
    rng: Optional[random.Random],
    driver: Optional[Driver],
) -> Tour:
    config = config or SearchConfig()
    matrix = build_distance_matrix(cities)
    if matrix.shape[0] == 0:
        return Tour()
    rng = rng or config.make_rng()
    tsp = TravellingSalesman(matrix, rng)
    logger.info("%s: %d cities, runtime %.2fs", name, tsp.size, config.runtime)
    best = (driver or default_driver)(tsp, config, rng)
    tour = Tour.from_route(matrix, best.route)
    logger.info("%s: distance %.4f", name, tour.distance)
    return tour


def hill_climbing(cities, config=None, rng=None, driver=None) -> Tour:
    return _solve("hill_climbing", metaheuristics.hill_climbing, cities, config, rng, driver)


def random_restarts(cities, config=None, rng=None, driver=None) -> Tour:
    """Hill climbing that restarts from a fresh tour with ``config.restart_probability``."""
    return _solve("random_restarts", metaheuristics.random_restarts, cities, config, rng, driver)


def steepest_ascent(cities, config=None, rng=None, driver=None) -> Tour:
    """Hill climbing that samples ``config.tries`` extra neighbours per step."""
    return _solve("steepest_ascent", metaheuristics.steepest_ascent, cities, config, rng, driver)


def simulated_annealing(cities, config=None, rng=None, driver=None) -> Tour:
    return _solve(
        "simulated_annealing", metaheuristics.simulated_annealing, cities, config, rng, driver
    )


def random_search(cities, config=None, rng=None, driver=None) -> Tour:
    return _solve("random_search", metaheuristics.random_search, cities, config, rng, driver)


METHODS: Dict[str, Callable[..., Tour]] = {
    "hill_climbing": hill_climbing,
    "random_restarts": random_restarts,
    "steepest_ascent": steepest_ascent,
    "simulated_annealing": simulated_annealing,
    "random_search": random_search,
}


def solve(
    cities: Sequence[City],
    method: str = "hill_climbing",
    config: Optional[SearchConfig] = None,
    rng: Optional[random.Random] = None,
) -> Tour:
    if method == "brute_force":
        return brute_force.solve(cities)
    if method not in METHODS:
        known = ", ".join(["brute_force"] + sorted(METHODS))
        raise InvalidArgumentError(f"unknown method {method!r}; expected one of {known}")
    return METHODS[method](cities, config=config, rng=rng)
