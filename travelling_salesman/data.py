import itertools
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import tsplib95

from .errors import InvalidArgumentError
from .solvers.base import City, Tour, build_distance_matrix


logger = logging.getLogger(__name__)


@dataclass
class Instance:
    name: str
    path: Path
    cities: List[City]
    optimum: Optional[float]

    def gap(self, tour: Tour) -> float:
        return tour.gap(self.optimum)


def _header(path: Path) -> Dict[str, str]:
    # Specification part only: "KEY : VALUE" lines up to the first section.
    fields = {}
    with path.open("r") as f:
        for line in f:
            key, sep, value = line.partition(":")
            if not sep:
                break
            fields[key.strip().upper()] = value.strip()
    return fields


def _fits(path: Path, max_nodes: Optional[int]) -> bool:
    if max_nodes is None:
        return True
    dimension = _header(path).get("DIMENSION", "")
    if not dimension.isdigit():
        return True
    if int(dimension) > max_nodes:
        logger.debug("skipping %s: %s cities > %d", path.name, dimension, max_nodes)
        return False
    return True


def _tour_path(path: Path) -> Optional[Path]:
    solutions = path.parent / "solutions"
    options = [path.with_suffix(".opt.tour")]
    options += [solutions / (path.stem + ext) for ext in (".opt.tour", ".opt", ".tour")]
    return next((p for p in options if p.exists()), None)


def _cities(problem, path: Path) -> Tuple[List[City], Dict[int, int]]:
    if not problem.node_coords:
        raise InvalidArgumentError(f"{path} has no NODE_COORD_SECTION")
    nodes = sorted(problem.node_coords)
    index = {node: i for i, node in enumerate(nodes)}
    cities = []
    for node in nodes:
        x, y = problem.node_coords[node][:2]
        cities.append((float(x), float(y)))
    return cities, index


def _load_optimum(cities: List[City], index: Dict[int, int], path: Path) -> Optional[float]:
    tour_path = _tour_path(path)
    if tour_path is None:
        return None
    tour_file = tsplib95.parse(tour_path.read_text())
    if not tour_file.tours:
        logger.warning("%s has no TOUR_SECTION, ignoring", tour_path)
        return None
    try:
        route = [index[node] for node in tour_file.tours[0]]
    except KeyError as exc:
        raise InvalidArgumentError(f"{tour_path} visits unknown node {exc}") from exc
    return Tour.from_route(build_distance_matrix(cities), route + route[:1]).distance


def load_instance(path: Path) -> Instance:
    path = Path(path)
    problem = tsplib95.load(path)
    cities, index = _cities(problem, path)
    optimum = _load_optimum(cities, index, path)
    logger.debug("loaded %s: %d cities, optimum %s", problem.name, len(cities), optimum)
    return Instance(name=problem.name or path.stem, path=path, cities=cities, optimum=optimum)


def load_tsplib_instances(
    root: Path, max_nodes: Optional[int] = None, max_instances: Optional[int] = None
) -> List[Instance]:
    paths = (p for p in sorted(Path(root).glob("*.tsp")) if _fits(p, max_nodes))
    return [load_instance(p) for p in itertools.islice(paths, max_instances)]
