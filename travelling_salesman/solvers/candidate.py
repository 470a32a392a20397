import random
from dataclasses import dataclass, field

import numpy as np

from ..errors import InvalidArgumentError
from ..metaheuristics import Problem
from .base import Route, check_matrix, path_length


@dataclass
class Candidate:
    """A closed working route. Its cost is never cached; rank recomputes it."""

    route: Route = field(default_factory=list)


def _close(route: Route) -> Route:
    return route + route[:1]


class TravellingSalesman(Problem[Candidate]):
    """
    Exposes a distance matrix to the generic drivers in ``metaheuristics``.

    The matrix is read only. ``rng`` belongs to the caller of the solve and is
    the only random source used by generate and tweak, so a seeded generator
    reproduces a search run exactly.

    rank and tweak accept only closed tours over every city of the matrix
    (``[c0, ..., c(n-1), c0]``, or ``[]`` for no cities) and raise
    ``InvalidArgumentError`` otherwise.
    """

    def __init__(self, distance_matrix: np.ndarray, rng: random.Random):
        matrix = check_matrix(distance_matrix)
        if matrix.flags.writeable:
            matrix = matrix.copy()
            matrix.setflags(write=False)
        self.distance_matrix = matrix
        self.rng = rng

    @property
    def size(self) -> int:
        return self.distance_matrix.shape[0]

    def check(self, candidate: Candidate) -> None:
        route = np.asarray(candidate.route)
        if self.size == 0 and route.size == 0:
            return
        if route.ndim != 1 or route.size != self.size + 1 or route.dtype.kind not in "iu":
            raise InvalidArgumentError(
                f"expected a closed route of {self.size + 1} city indices, got {candidate.route!r}"
            )
        if route[0] != route[-1] or not np.array_equal(np.sort(route[:-1]), np.arange(self.size)):
            raise InvalidArgumentError(
                f"route is not a closed permutation of {self.size} cities: {candidate.route!r}"
            )

    def clone(self, candidate: Candidate) -> Candidate:
        return Candidate(route=candidate.route[:])

    def generate(self) -> Candidate:
        route = list(range(self.size))
        self.rng.shuffle(route)
        return Candidate(route=_close(route))

    def rank(self, candidate: Candidate) -> float:
        self.check(candidate)
        return -path_length(self.distance_matrix, candidate.route)

    def tweak(self, candidate: Candidate) -> Candidate:
        self.check(candidate)
        # Drop the closing city; positions are drawn over the open route.
        route = candidate.route[:-1]
        n = len(route)
        if n <= 3:
            return self.clone(candidate)

        a = self.rng.randrange(n)
        b = self.rng.randrange(n)
        if a > b:
            a, b = b, a

        swapped = route[:]
        swapped[a], swapped[b] = swapped[b], swapped[a]
        swapped = _close(swapped)

        reversed_ = route[:]
        reversed_[a + 1 : b] = reversed(route[a + 1 : b])
        reversed_ = _close(reversed_)

        if path_length(self.distance_matrix, reversed_) < path_length(self.distance_matrix, swapped):
            return Candidate(route=reversed_)
        return Candidate(route=swapped)
