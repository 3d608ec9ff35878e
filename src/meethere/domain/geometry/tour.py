from collections.abc import Sequence

import numpy as np

from meethere.app.protocols import DistanceMetric
from meethere.domain.entities.geography import Point
from meethere.domain.errors import InvalidArgument
from meethere.runtime.registries import make_metric


def _coords(points: Sequence[Point]) -> np.ndarray:
    return np.array([(p.x, p.y) for p in points], dtype=float).reshape(-1, 2)


def heuristic_tour(
    points: Sequence[Point],
    start_index: int = 0,
    metric: str | DistanceMetric = "euclidean",
) -> list[int]:
    """
    Visiting order by nearest-neighbour construction.

    From ``start_index`` keep moving to the closest unvisited point under
    ``metric``; equal distances go to the lowest index. Naive, typically
    within ~25% of the optimal tour on random instances.
    """
    m = make_metric(metric)
    n = len(points)
    if n == 0:
        return []
    if not 0 <= start_index < n:
        raise InvalidArgument(f"start_index {start_index} out of range for {n} points")
    if n == 1:
        return [0]

    dist = m.pairwise(_coords(points))
    visited = np.zeros(n, dtype=bool)
    order = [start_index]
    visited[start_index] = True
    current = start_index
    for _ in range(n - 1):
        row = np.where(visited, np.inf, dist[current])
        current = int(np.argmin(row))  # first minimum => lowest index on ties
        visited[current] = True
        order.append(current)
    return order


def tour_length(
    points: Sequence[Point],
    order: Sequence[int],
    metric: str | DistanceMetric = "euclidean",
    *,
    closed: bool = False,
) -> float:
    m = make_metric(metric)
    legs = list(zip(order, order[1:]))
    if closed and len(order) > 1:
        legs.append((order[-1], order[0]))
    return sum(m.distance(points[i], points[j]) for i, j in legs)
