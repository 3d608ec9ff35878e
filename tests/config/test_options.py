import pytest
from pydantic import ValidationError

from meethere.config.models import (
    MEET_HERE_POSITION,
    LogModel,
    PlacesOptions,
    PositionOptions,
    merge_model,
)
from meethere.domain.errors import InvalidArgument
from meethere.domain.position import Position


def test_defaults():
    o = PositionOptions()
    assert (o.subsearch, o.epsilon, o.bounds, o.start_index, o.degree) == (
        False,
        1e-3,
        10.0,
        0,
        None,
    )


def test_partial_override_keeps_other_defaults():
    o = merge_model(PositionOptions(), {"epsilon": 1e-5})
    assert o.epsilon == 1e-5
    assert o.bounds == 10.0 and o.subsearch is False


def test_override_on_custom_base():
    o = merge_model(MEET_HERE_POSITION, {"bounds": 3})
    assert o.subsearch is True and o.epsilon == 1e-4 and o.bounds == 3.0


def test_camel_case_alias():
    assert merge_model(PositionOptions(), {"startIndex": 2}).start_index == 2
    assert Position([[0, 0]], {"startIndex": 0}).options.start_index == 0


def test_model_overrides_only_apply_set_fields():
    o = merge_model(MEET_HERE_POSITION, PositionOptions(bounds=2))
    assert o.bounds == 2.0 and o.subsearch is True


def test_none_override_returns_base():
    assert merge_model(MEET_HERE_POSITION, None) is MEET_HERE_POSITION


@pytest.mark.parametrize(
    "bad",
    [
        {"epsilon": 0},
        {"epsilon": -1e-3},
        {"epsilon": float("nan")},
        {"bounds": 0},
        {"bounds": float("inf")},
        {"start_index": -1},
        {"degree": -2},
        {"degree": "auto"},
        {"precision": 3},
    ],
)
def test_invalid_options(bad):
    with pytest.raises(InvalidArgument):
        Position([[0, 0]], bad)


def test_options_are_frozen():
    o = PositionOptions()
    with pytest.raises(ValidationError):
        o.epsilon = 1.0


def test_places_defaults_and_bounds():
    p = PlacesOptions()
    assert p.language == "English" and p.rankby == "distance"
    with pytest.raises(InvalidArgument):
        merge_model(p, {"maxprice": 9})


def test_log_model():
    assert LogModel().level == "INFO"
    with pytest.raises(ValidationError):
        LogModel(level="TRACE")
