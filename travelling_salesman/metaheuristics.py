"""
Generic local-search drivers.

Each driver explores a problem through four capabilities only (clone, generate,
rank, tweak) and returns the best candidate it found once its budget runs out.
Higher rank is better. Nothing here knows about the travelling salesman.
"""

import logging
import math
import random
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

from .errors import InvalidArgumentError


logger = logging.getLogger(__name__)

C = TypeVar("C")


class Problem(ABC, Generic[C]):
    @abstractmethod
    def clone(self, candidate: C) -> C:
        raise NotImplementedError

    @abstractmethod
    def generate(self) -> C:
        raise NotImplementedError

    @abstractmethod
    def rank(self, candidate: C) -> float:
        raise NotImplementedError

    @abstractmethod
    def tweak(self, candidate: C) -> C:
        raise NotImplementedError


@dataclass
class SearchConfig:
    runtime: float = 1.0
    max_iterations: Optional[int] = None
    restart_probability: float = 0.0
    tries: int = 1
    initial_temperature: float = 1.0
    random_seed: Optional[int] = None

    def __post_init__(self):
        if not self.runtime > 0:
            raise InvalidArgumentError(f"runtime must be positive, got {self.runtime}")
        if self.max_iterations is not None and self.max_iterations < 0:
            raise InvalidArgumentError(f"max_iterations must be >= 0, got {self.max_iterations}")
        if not 0.0 <= self.restart_probability < 1.0:
            raise InvalidArgumentError(
                f"restart_probability must be in [0, 1), got {self.restart_probability}"
            )
        if self.tries < 1:
            raise InvalidArgumentError(f"tries must be >= 1, got {self.tries}")
        if not self.initial_temperature > 0:
            raise InvalidArgumentError(
                f"initial_temperature must be positive, got {self.initial_temperature}"
            )

    def make_rng(self) -> random.Random:
        return random.Random(self.random_seed)


Driver = Callable[[Problem, SearchConfig, random.Random], object]


class Budget:
    """Tracks wall-clock time and iterations spent against a SearchConfig."""

    def __init__(self, config: SearchConfig):
        self.config = config
        self.start = time.perf_counter()
        self.iterations = 0

    def elapsed(self) -> float:
        return time.perf_counter() - self.start

    def progress(self) -> float:
        frac = self.elapsed() / self.config.runtime
        if self.config.max_iterations:
            frac = max(frac, self.iterations / self.config.max_iterations)
        return min(frac, 1.0)

    def tick(self) -> bool:
        if self.config.max_iterations is not None and self.iterations >= self.config.max_iterations:
            return False
        if self.elapsed() >= self.config.runtime:
            return False
        self.iterations += 1
        return True


def hill_climbing(problem: Problem, config: SearchConfig, rng: random.Random):
    best = problem.generate()
    best_rank = problem.rank(best)
    budget = Budget(config)
    while budget.tick():
        nxt = problem.tweak(best)
        nxt_rank = problem.rank(nxt)
        if nxt_rank > best_rank:
            best, best_rank = nxt, nxt_rank
    logger.debug("hill climbing: %d iterations, best rank %.4f", budget.iterations, best_rank)
    return best


def random_restarts(problem: Problem, config: SearchConfig, rng: random.Random):
    best = problem.generate()
    best_rank = problem.rank(best)
    current, current_rank = problem.clone(best), best_rank
    restarts = 0
    budget = Budget(config)
    while budget.tick():
        nxt = problem.tweak(current)
        nxt_rank = problem.rank(nxt)
        if nxt_rank > current_rank:
            current, current_rank = nxt, nxt_rank
        if current_rank > best_rank:
            best, best_rank = problem.clone(current), current_rank
        if rng.random() < config.restart_probability:
            current = problem.generate()
            current_rank = problem.rank(current)
            restarts += 1
    logger.debug(
        "random restarts: %d iterations, %d restarts, best rank %.4f",
        budget.iterations,
        restarts,
        best_rank,
    )
    return best


def steepest_ascent(problem: Problem, config: SearchConfig, rng: random.Random):
    current = problem.generate()
    current_rank = problem.rank(current)
    budget = Budget(config)
    while budget.tick():
        steepest = problem.tweak(current)
        steepest_rank = problem.rank(steepest)
        for _ in range(config.tries):
            nxt = problem.tweak(current)
            nxt_rank = problem.rank(nxt)
            if nxt_rank > steepest_rank:
                steepest, steepest_rank = nxt, nxt_rank
        if steepest_rank > current_rank:
            current, current_rank = steepest, steepest_rank
    logger.debug("steepest ascent: %d iterations, best rank %.4f", budget.iterations, current_rank)
    return current


def simulated_annealing(problem: Problem, config: SearchConfig, rng: random.Random):
    current = problem.generate()
    current_rank = problem.rank(current)
    best, best_rank = problem.clone(current), current_rank
    budget = Budget(config)
    while budget.tick():
        temperature = config.initial_temperature * (1.0 - budget.progress())
        nxt = problem.tweak(current)
        nxt_rank = problem.rank(nxt)
        delta = nxt_rank - current_rank
        if delta > 0 or (temperature > 0 and rng.random() < math.exp(delta / temperature)):
            current, current_rank = nxt, nxt_rank
        if current_rank > best_rank:
            best, best_rank = problem.clone(current), current_rank
    logger.debug("simulated annealing: %d iterations, best rank %.4f", budget.iterations, best_rank)
    return best


def random_search(problem: Problem, config: SearchConfig, rng: random.Random):
    best = problem.generate()
    best_rank = problem.rank(best)
    budget = Budget(config)
    while budget.tick():
        nxt = problem.generate()
        nxt_rank = problem.rank(nxt)
        if nxt_rank > best_rank:
            best, best_rank = nxt, nxt_rank
    logger.debug("random search: %d iterations, best rank %.4f", budget.iterations, best_rank)
    return best
