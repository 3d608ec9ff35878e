from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from math import isfinite

from meethere.domain.errors import InvalidArgument


# Core geometry types used by the engine
@dataclass(frozen=True)
class Point:
    x: float  # plane coordinates, no CRS
    y: float

    def __post_init__(self):
        try:
            finite = isfinite(self.x) and isfinite(self.y)
        except (TypeError, OverflowError) as e:
            raise InvalidArgument(f"point coordinates must be real numbers: {e}") from e
        if not finite:
            raise InvalidArgument(f"point coordinates must be finite, got ({self.x}, {self.y})")

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class CenterResult:
    center: Point
    score: float  # sum of euclidean distances to center


PointLike = Point | Sequence[float]


def to_point(p: PointLike) -> Point:
    if isinstance(p, Point):
        return p
    if isinstance(p, (str, bytes)) or not isinstance(p, Iterable):
        raise InvalidArgument(f"point must be a pair of numbers, got {p!r}")
    coords = tuple(p)
    if len(coords) != 2:
        raise InvalidArgument(f"point must have 2 coordinates, got {len(coords)}")
    try:
        x, y = float(coords[0]), float(coords[1])
    except (TypeError, ValueError, OverflowError) as e:
        raise InvalidArgument(f"point must be a pair of numbers, got {p!r}") from e
    return Point(x, y)


def to_points(points: Iterable[PointLike]) -> list[Point]:
    return [to_point(p) for p in points]
