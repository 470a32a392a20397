import random


FOUR_CITIES = [(27.0, 78.0), (18.0, 24.0), (48.0, 62.0), (83.0, 17.0)]
FIVE_CITIES = [(27.0, 78.0), (18.0, 24.0), (48.0, 62.0), (83.0, 77.0), (55.0, 56.0)]


def random_cities(rng: random.Random, n: int):
    return [(rng.uniform(0, 100), rng.uniform(0, 100)) for _ in range(n)]


def assert_closed_permutation(route, n):
    assert route[0] == route[-1]
    assert sorted(route[:-1]) == list(range(n))
