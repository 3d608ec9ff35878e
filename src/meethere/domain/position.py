# domain/position.py
from collections.abc import Iterable, Mapping
from typing import Any

from meethere.app.protocols import SearchHooks
from meethere.config.models import PositionOptions, merge_model
from meethere.domain.entities.geography import CenterResult, Point, PointLike, to_point, to_points
from meethere.domain.errors import NOT_FOUND, InvalidArgument
from meethere.domain.geometry.center import centroid, geometric_median, improvement
from meethere.domain.geometry.polynomial import best_fit_polynomial, guess_degree
from meethere.domain.geometry.tour import heuristic_tour


class Position:
    """
    A mutable, ordered set of points on a plane.

    Derived values (center, median, path, ...) are recomputed on every read
    from the current points; mutate, then read.
    """

    def __init__(
        self,
        locations: Iterable[PointLike] = (),
        options: PositionOptions | Mapping[str, Any] | None = None,
        *,
        hooks: SearchHooks | None = None,
        defaults: PositionOptions | None = None,
    ):
        self.locations: list[Point] = to_points(locations)
        self.options: PositionOptions = merge_model(defaults or PositionOptions(), options)
        self.hooks = hooks

    def __repr__(self) -> str:
        return f"Position({len(self.locations)} points, {self.options!r})"

    # --------------- Mutators -----------------------------

    def add(self, location: PointLike) -> None:
        self.locations.append(to_point(location))

    def _index(self, location: PointLike) -> int:
        p = to_point(location)
        for i, q in enumerate(self.locations):
            if q == p:
                return i
        return NOT_FOUND

    def remove(self, location: PointLike) -> Point | int:
        """Drop the first point equal to ``location``; return it, or -1 if absent."""
        i = self._index(location)
        if i == NOT_FOUND:
            return NOT_FOUND
        return self.locations.pop(i)

    def adjust(self, location: PointLike, to: PointLike) -> Point | int:
        """Replace the first point equal to ``location`` in place; return the old one, or -1."""
        i = self._index(location)
        if i == NOT_FOUND:
            return NOT_FOUND
        old, self.locations[i] = self.locations[i], to_point(to)
        return old

    # --------------- Derived values -----------------------------

    def _points(self) -> list[Point]:
        if not self.locations:
            raise InvalidArgument("position has no locations")
        return self.locations

    def _geometric(self) -> CenterResult:
        o = self.options
        return geometric_median(
            self._points(), o.subsearch, o.epsilon, o.bounds, hooks=self.hooks
        )

    @property
    def center(self) -> Point:
        """Geometric median of the locations."""
        return self._geometric().center

    @property
    def median(self) -> Point:
        """Center of mass (arithmetic mean), a rough estimate of ``center``."""
        return centroid(self._points()).center

    @property
    def median_cost(self) -> float:
        return centroid(self._points()).score

    @property
    def center_cost(self) -> float:
        return self._geometric().score

    @property
    def score(self) -> float:
        """Fractional improvement in total distance of ``center`` over ``median``."""
        return improvement(self.median_cost, self.center_cost)

    @property
    def path(self) -> list[int]:
        return heuristic_tour(self._points(), self.options.start_index, "euclidean")

    best_path = path

    @property
    def naive_drive(self) -> list[int]:
        return heuristic_tour(self._points(), self.options.start_index, "manhattan")

    quick_path = naive_drive

    @property
    def polynomial(self) -> list[float]:
        points = self._points()
        degree = self.options.degree
        if degree == "guess":
            degree = guess_degree(points)
        return best_fit_polynomial(points, degree)
