from collections.abc import Mapping
from typing import Any, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from meethere.domain.errors import InvalidArgument

M = TypeVar("M", bound=BaseModel)


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False
    sample_every: int = Field(default=1, ge=1)


# ----------------- GEOMETRY ---------------------


class PositionOptions(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)
    subsearch: bool = False  # try the diagonals too
    epsilon: float = Field(default=1e-3, gt=0, allow_inf_nan=False)
    bounds: float = Field(default=10.0, gt=0, allow_inf_nan=False)
    start_index: int = Field(default=0, ge=0, alias="startIndex")
    # None => n - 1 (interpolate), "guess" => from the turning points of y
    degree: int | Literal["guess"] | None = None

    @field_validator("degree")
    @classmethod
    def _nonneg_degree(cls, v):
        if isinstance(v, int) and v < 0:
            raise ValueError(f"degree must be >= 0, got {v}")
        return v


# ------------------ MAPS REQUESTS -----------------------------


class PlacesOptions(BaseModel):
    model_config = ConfigDict(extra="forbid")
    language: str = "English"
    rankby: Literal["prominence", "distance"] | None = "distance"
    radius: float | None = None
    keyword: str | None = None
    minprice: int | None = Field(default=None, ge=0, le=4)
    maxprice: int | None = Field(default=None, ge=0, le=4)
    name: str | None = None
    opennow: bool | None = None
    type: str | None = None
    pagetoken: str | None = None
    location: tuple[float, float] | None = None


class TimeZoneOptions(BaseModel):
    model_config = ConfigDict(extra="forbid")
    timestamp: int | None = None  # epoch seconds, filled with "now" when missing
    language: str | None = None
    location: tuple[float, float] | None = None


class DistanceOptions(BaseModel):
    model_config = ConfigDict(extra="forbid")
    mode: Literal["driving", "walking", "bicycling", "transit"] | None = None
    units: Literal["metric", "imperial"] | None = None
    language: str | None = None
    avoid: Literal["tolls", "highways", "ferries", "indoor"] | None = None
    departure_time: int | None = None
    arrival_time: int | None = None
    origins: list[tuple[float, float]] | None = None
    destinations: list[tuple[float, float]] | None = None


# ------------------------------------------------------------------

# center options used by the meet-here facade unless overridden
MEET_HERE_POSITION = PositionOptions(subsearch=True, epsilon=1e-4)


class MeetHereModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    position: PositionOptions = MEET_HERE_POSITION
    places: PlacesOptions = Field(default_factory=PlacesOptions)
    timezone: TimeZoneOptions = Field(default_factory=TimeZoneOptions)
    distance: DistanceOptions = Field(default_factory=DistanceOptions)
    log: LogModel | None = None


def _by_field_name(model_cls: type[BaseModel], overrides: Mapping[str, Any]) -> dict[str, Any]:
    aliases = {f.alias: name for name, f in model_cls.model_fields.items() if f.alias}
    return {aliases.get(k, k): v for k, v in overrides.items()}


def merge_model(base: M, overrides: Mapping[str, Any] | BaseModel | None = None) -> M:
    """
    New model of ``type(base)`` with ``overrides`` applied field by field.
    Validation problems surface as InvalidArgument.
    """
    if overrides is None:
        return base
    if isinstance(overrides, BaseModel):
        overrides = overrides.model_dump(exclude_unset=True)
    cls = type(base)
    try:
        return cls.model_validate({**base.model_dump(), **_by_field_name(cls, overrides)})
    except ValidationError as e:
        raise InvalidArgument(f"invalid {cls.__name__}: {e}") from e
