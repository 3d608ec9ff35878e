# domain/geometry/center.py
import math
import time
from collections.abc import Sequence

from meethere.app.protocols import SearchHooks
from meethere.domain.entities.geography import CenterResult, Point
from meethere.domain.errors import InvalidArgument, NumericDegeneracy
from meethere.domain.geometry.hooks import NoopHooks

#            (0,1)
#     (-S2,S2)   (S2,S2)
#  (-1,0)      x       (1,0)
#     (-S2,-S2)  (S2,-S2)
#           (0,-1)
S2 = math.sqrt(2) / 2
DIRECTIONS: tuple[tuple[float, float], ...] = (
    (-1.0, 0.0),  # W
    (-S2, S2),  # NW
    (0.0, 1.0),  # N
    (S2, S2),  # NE
    (1.0, 0.0),  # E
    (S2, -S2),  # SE
    (0.0, -1.0),  # S
    (-S2, -S2),  # SW
)
CARDINAL = DIRECTIONS[::2]


def _require_points(points: Sequence[Point]) -> None:
    if not points:
        raise InvalidArgument("at least one point is required")


def _cost_xy(points: Sequence[Point], x: float, y: float) -> float:
    total = 0.0
    for p in points:
        total += math.hypot(p.x - x, p.y - y)
    return total


def cost(points: Sequence[Point], candidate: Point) -> float:
    """Sum of euclidean distances from every point to ``candidate``."""
    return _cost_xy(points, candidate.x, candidate.y)


def manhattan_cost(points: Sequence[Point], candidate: Point) -> float:
    """Sum of |dx| + |dy| from every point to ``candidate`` (taxi-cab problems)."""
    return sum(abs(p.x - candidate.x) + abs(p.y - candidate.y) for p in points)


def centroid(points: Sequence[Point]) -> CenterResult:
    _require_points(points)
    n = len(points)
    # mean of x / n keeps huge coordinates from overflowing the sum
    x = math.fsum(p.x / n for p in points)
    y = math.fsum(p.y / n for p in points)
    return CenterResult(center=Point(x, y), score=_cost_xy(points, x, y))


def geometric_median(
    points: Sequence[Point],
    subsearch: bool = False,
    epsilon: float = 1e-3,
    bounds: float = 10.0,
    *,
    hooks: SearchHooks | None = None,
) -> CenterResult:
    """
    Geometric median (Fermat-Weber point) by compass search.

    Starts at the centroid with a step of ``bounds`` times the mean
    point-to-centroid distance. Tries the cardinal directions (all eight
    with ``subsearch``) in fixed order and takes the first strictly cheaper
    candidate; when none is cheaper the step is halved. Stops once
    ``step <= epsilon``. The objective is convex, so there are no local
    minima to get stuck in.
    """
    hooks = hooks or NoopHooks()
    if not epsilon > 0:
        hooks.error(reason="bad_epsilon", epsilon=epsilon)
        raise InvalidArgument(f"epsilon must be > 0, got {epsilon}")
    if not bounds > 0:
        hooks.error(reason="bad_bounds", bounds=bounds)
        raise InvalidArgument(f"bounds must be > 0, got {bounds}")

    t0 = time.perf_counter()
    start = centroid(points)
    x, y, score = start.center.x, start.center.y, start.score
    step = score / len(points) * bounds
    if not (math.isfinite(score) and math.isfinite(step)):
        hooks.error(reason="overflow", score=score, step=step)
        raise NumericDegeneracy(f"total distance overflows a double (score={score}, step={step})")
    directions = DIRECTIONS if subsearch else CARDINAL
    hooks.search_start(n=len(points), center=start.center, score=score, step=step)

    iterations = 0
    while step > epsilon:
        iterations += 1
        for i, (dx, dy) in enumerate(directions):
            nx, ny = x + step * dx, y + step * dy
            n_score = _cost_xy(points, nx, ny)
            if n_score < score:
                x, y, score = nx, ny, n_score
                hooks.improved(center=Point(x, y), score=score, step=step, direction=i)
                break
        else:
            step /= 2
            hooks.step_halved(step=step, score=score)

    center = Point(x, y)
    hooks.search_end(
        center=center,
        score=score,
        iterations=iterations,
        wall_ms=(time.perf_counter() - t0) * 1000,
    )
    return CenterResult(center=center, score=score)


def improvement(centroid_cost: float, median_cost: float) -> float:
    """Fractional reduction in total distance of the median over the centroid."""
    if centroid_cost == 0:
        return 0.0
    score = (centroid_cost - median_cost) / centroid_cost
    if score < 0:
        raise RuntimeError(
            f"median search ended above the centroid cost: {median_cost} > {centroid_cost}"
        )
    return score
