from typing import Any, Protocol, runtime_checkable

import numpy as np

from meethere.domain.entities.geography import Point


# ------------- Geometry --------------------
@runtime_checkable
class DistanceMetric(Protocol):
    """
    Responsibilities:
      • Distance between two points.
      • Full pairwise distance matrix for an (n, 2) coordinate array.
    """

    name: str

    def distance(self, a: Point, b: Point) -> float: ...
    def pairwise(self, xy: np.ndarray) -> np.ndarray: ...


@runtime_checkable
class SearchHooks(Protocol):
    """Observers for the geometric median pattern search."""

    def search_start(self, *, n: int, center: Point, score: float, step: float): ...
    def improved(self, *, center: Point, score: float, step: float, direction: int): ...
    def step_halved(self, *, step: float, score: float): ...
    def search_end(self, *, center: Point, score: float, iterations: int, wall_ms: float): ...
    def error(self, *, reason: str, **kw): ...


# --------------- Collaborators -------------------------


@runtime_checkable
class MapsClient(Protocol):
    """
    Mapping-service collaborator. Receives plain coordinate tuples and
    returns opaque responses; transport, auth and retries are its own.
    """

    def places_nearby(self, **params: Any) -> Any: ...
    def nearest_roads(self, **params: Any) -> Any: ...
    def timezone(self, **params: Any) -> Any: ...
    def distance_matrix(self, **params: Any) -> Any: ...
