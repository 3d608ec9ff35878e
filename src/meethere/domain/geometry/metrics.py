import math

import numpy as np

from meethere.app.protocols import DistanceMetric
from meethere.domain.entities.geography import Point


class EuclideanMetric(DistanceMetric):
    name = "euclidean"

    def distance(self, a: Point, b: Point) -> float:
        return math.hypot(b.x - a.x, b.y - a.y)

    def pairwise(self, xy: np.ndarray) -> np.ndarray:
        d = xy[:, None, :] - xy[None, :, :]
        return np.hypot(d[..., 0], d[..., 1])


class ManhattanMetric(DistanceMetric):
    name = "manhattan"

    def distance(self, a: Point, b: Point) -> float:
        return abs(b.x - a.x) + abs(b.y - a.y)

    def pairwise(self, xy: np.ndarray) -> np.ndarray:
        d = np.abs(xy[:, None, :] - xy[None, :, :])
        return d[..., 0] + d[..., 1]
