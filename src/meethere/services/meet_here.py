# services/meet_here.py
import time
from collections.abc import Iterable, Mapping
from typing import Any

from meethere.app.protocols import MapsClient, SearchHooks
from meethere.config.models import (
    MEET_HERE_POSITION,
    DistanceOptions,
    MeetHereModel,
    PlacesOptions,
    PositionOptions,
    TimeZoneOptions,
    merge_model,
)
from meethere.domain.entities.geography import Point, PointLike
from meethere.domain.position import Position
from meethere.io.search_logging import SearchLogging

Options = Mapping[str, Any] | None


class MeetHere:
    """
    A set of points on a map plus a mapping-service client.

    The geometry lives in a ``Position``; this class only turns its
    center (or median) and locations into request parameters. Responses
    and client errors are passed through untouched.
    """

    def __init__(
        self,
        locations: Iterable[PointLike],
        client: MapsClient,
        options: PositionOptions | Options = None,
        *,
        model: MeetHereModel | None = None,
        hooks: SearchHooks | None = None,
    ):
        self.model = model or MeetHereModel()
        self.position = Position(locations, options, hooks=hooks, defaults=self.model.position)
        self.client = client

    @classmethod
    def from_config(cls, locations, client: MapsClient, cfg: Mapping[str, Any], *, run_id="local"):
        cfg = dict(cfg)
        # position overrides apply on top of the facade defaults, not the bare ones
        position = merge_model(MEET_HERE_POSITION, cfg.pop("position", None))
        model = merge_model(MeetHereModel(), cfg)
        model = model.model_copy(update={"position": position})
        hooks = SearchLogging.from_model(model.log, run_id=run_id) if model.log else None
        return cls(locations, client, model=model, hooks=hooks)

    # --------------- Geometry passthrough -----------------------------

    @property
    def locations(self) -> list[Point]:
        return self.position.locations

    @property
    def options(self) -> PositionOptions:
        return self.position.options

    @property
    def meet_here(self) -> Point:
        return self.position.center

    def middle(self, geometric: bool = True) -> Point:
        return self.position.center if geometric else self.position.median

    # --------------- Client requests -----------------------------

    def nearby(self, options: Options = None, geometric: bool = True) -> Any:
        params: PlacesOptions = merge_model(self.model.places, options)
        params = params.model_copy(update={"location": self.middle(geometric).as_tuple()})
        return self.client.places_nearby(**params.model_dump(exclude_none=True))

    def roads(self, geometric: bool = True) -> Any:
        return self.client.nearest_roads(points=[self.middle(geometric).as_tuple()])

    def timezone(self, options: Options = None, geometric: bool = True, now=None) -> Any:
        params: TimeZoneOptions = merge_model(self.model.timezone, options)
        update = {"location": self.middle(geometric).as_tuple()}
        if params.timestamp is None:
            update["timestamp"] = int(now if now is not None else time.time())
        params = params.model_copy(update=update)
        return self.client.timezone(**params.model_dump(exclude_none=True))

    def travel(self, options: Options = None, geometric: bool = True) -> Any:
        params: DistanceOptions = merge_model(self.model.distance, options)
        params = params.model_copy(
            update={
                "origins": [p.as_tuple() for p in self.locations],
                "destinations": [self.middle(geometric).as_tuple()],
            }
        )
        return self.client.distance_matrix(**params.model_dump(exclude_none=True))
