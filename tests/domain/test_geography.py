import math

import numpy as np
import pytest

from meethere.domain.entities.geography import Point, to_point, to_points
from meethere.domain.errors import InvalidArgument


def test_pairs_and_points_convert():
    assert to_point([1, 2.5]) == Point(1.0, 2.5)
    assert to_point((3, -4)) == Point(3.0, -4.0)
    assert to_point(np.array([0.5, 0.25])) == Point(0.5, 0.25)
    p = Point(1, 1)
    assert to_point(p) is p
    assert to_points([[0, 0], Point(1, 2)]) == [Point(0, 0), Point(1, 2)]


@pytest.mark.parametrize(
    "bad",
    [
        "ab",
        b"ab",
        5,
        None,
        [1.0],
        [1.0, 2.0, 3.0],
        ["x", 1.0],
        [None, 1.0],
        [10**400, 0],
        [0, -(10**400)],
        [float("nan"), 0.0],
        [0.0, float("inf")],
    ],
)
def test_bad_inputs_raise_invalid_argument(bad):
    with pytest.raises(InvalidArgument):
        to_point(bad)


@pytest.mark.parametrize(
    "x, y", [(math.nan, 0.0), (0.0, math.inf), (-math.inf, 1.0), ("1", 0.0), (10**400, 0.0)]
)
def test_point_rejects_non_finite_coordinates(x, y):
    with pytest.raises(InvalidArgument):
        Point(x, y)


def test_invalid_argument_is_a_value_error():
    with pytest.raises(ValueError):
        to_point("ab")
