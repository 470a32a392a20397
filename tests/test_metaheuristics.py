import random

import pytest

from travelling_salesman import InvalidArgumentError, SearchConfig, metaheuristics
from travelling_salesman.metaheuristics import Budget, Problem


class PeakProblem(Problem):
    """Integers in [0, 100]; rank peaks at 70."""

    def __init__(self, rng):
        self.rng = rng
        self.generated = 0

    def clone(self, candidate):
        return candidate

    def generate(self):
        self.generated += 1
        return self.rng.randint(0, 100)

    def rank(self, candidate):
        return -abs(candidate - 70)

    def tweak(self, candidate):
        return min(100, max(0, candidate + self.rng.choice([-1, 1])))


DRIVERS = [
    metaheuristics.hill_climbing,
    metaheuristics.random_restarts,
    metaheuristics.steepest_ascent,
    metaheuristics.simulated_annealing,
    metaheuristics.random_search,
]


@pytest.mark.parametrize("driver", DRIVERS)
def test_driver_finds_peak(driver):
    rng = random.Random(7)
    config = SearchConfig(runtime=10.0, max_iterations=2000, restart_probability=0.05, tries=3)
    best = driver(PeakProblem(rng), config, rng)
    assert best == 70


@pytest.mark.parametrize("driver", DRIVERS)
def test_driver_is_reproducible(driver):
    config = SearchConfig(runtime=10.0, max_iterations=30, restart_probability=0.3, tries=2)
    results = []
    for _ in range(2):
        rng = random.Random(99)
        results.append(driver(PeakProblem(rng), config, rng))
    assert results[0] == results[1]


def test_hill_climbing_never_gets_worse():
    rng = random.Random(3)
    problem = PeakProblem(rng)
    start = problem.generate()
    rng.seed(3)
    best = metaheuristics.hill_climbing(PeakProblem(rng), SearchConfig(max_iterations=5), rng)
    assert problem.rank(best) >= problem.rank(start)


def test_random_restarts_regenerates():
    rng = random.Random(11)
    problem = PeakProblem(rng)
    config = SearchConfig(runtime=10.0, max_iterations=200, restart_probability=0.5)
    metaheuristics.random_restarts(problem, config, rng)
    assert problem.generated > 1


def test_random_restarts_without_restarts_generates_once():
    rng = random.Random(11)
    problem = PeakProblem(rng)
    metaheuristics.random_restarts(problem, SearchConfig(max_iterations=50), rng)
    assert problem.generated == 1


def test_zero_iterations_returns_initial_candidate():
    rng = random.Random(5)
    problem = PeakProblem(rng)
    first = random.Random(5).randint(0, 100)
    assert metaheuristics.hill_climbing(problem, SearchConfig(max_iterations=0), rng) == first


def test_budget_stops_on_iterations():
    budget = Budget(SearchConfig(runtime=60.0, max_iterations=3))
    assert [budget.tick() for _ in range(5)] == [True, True, True, False, False]
    assert budget.progress() == 1.0


def test_budget_stops_on_runtime():
    budget = Budget(SearchConfig(runtime=1e-9))
    budget.start -= 1.0
    assert not budget.tick()


@pytest.mark.parametrize(
    "kwargs",
    [
        {"runtime": 0.0},
        {"runtime": -1.0},
        {"max_iterations": -1},
        {"restart_probability": 1.0},
        {"restart_probability": -0.1},
        {"tries": 0},
        {"initial_temperature": 0.0},
    ],
)
def test_search_config_rejects_invalid_values(kwargs):
    with pytest.raises(InvalidArgumentError):
        SearchConfig(**kwargs)


def test_problem_is_abstract():
    with pytest.raises(TypeError):
        Problem()
