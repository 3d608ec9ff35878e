# domain/geometry/polynomial.py
from collections.abc import Sequence

import numpy as np

from meethere.domain.entities.geography import Point
from meethere.domain.errors import InvalidArgument, NumericDegeneracy

BASE_DEGREE = 2


def guess_degree(points: Sequence[Point]) -> int:
    """
    Guess a fitting degree from the shape of the data: order the points by x
    and count the turning points of y. Capped at n - 1.
    """
    n = len(points)
    if n < 2:
        return 0
    ys = [p.y for p in sorted(points, key=lambda p: p.x)]
    rising = ys[0] < ys[1]
    extrema = 0
    for a, b in zip(ys[1:], ys[2:]):
        if (a < b) != rising:
            extrema += 1
            rising = not rising
    return min(BASE_DEGREE + extrema, n - 1)


def best_fit_polynomial(points: Sequence[Point], degree: int | None = None) -> list[float]:
    """
    Least-squares polynomial ``y = c0 + c1*x + ... + ck*x**k``.

    Returns the coefficients by ascending power. ``degree=None`` fits
    ``n - 1``, i.e. interpolates distinct x values exactly. The fit runs on
    x scaled to [-1, 1] and is converted back, so clustered coordinates far
    from the origin (longitudes) stay well conditioned.
    """
    n = len(points)
    if n == 0:
        raise InvalidArgument("at least one point is required")
    if degree is not None and (
        isinstance(degree, bool) or not isinstance(degree, (int, np.integer))
    ):
        raise InvalidArgument(f"degree must be an integer, got {degree!r}")
    k = n - 1 if degree is None else int(degree)
    if k < 0:
        raise InvalidArgument(f"degree must be >= 0, got {k}")
    if k >= n:
        raise InvalidArgument(f"degree {k} is underdetermined for {n} points")

    x = np.array([p.x for p in points], dtype=float)
    y = np.array([p.y for p in points], dtype=float)
    distinct = len(np.unique(x))
    if distinct <= k:
        raise NumericDegeneracy(
            f"degree {k} needs {k + 1} distinct x values, got {distinct}"
        )
    if k == 0:
        return [float(np.mean(y))]
    coeffs = np.polynomial.Polynomial.fit(x, y, k).convert().coef
    # convert() trims exact trailing zeros
    coeffs = np.pad(coeffs, (0, k + 1 - len(coeffs)))
    return [float(c) for c in coeffs]
