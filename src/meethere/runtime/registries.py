# runtime/registries.py
from collections.abc import Callable

from meethere.app.protocols import DistanceMetric
from meethere.domain.errors import InvalidArgument
from meethere.domain.geometry.metrics import EuclideanMetric, ManhattanMetric

MetricFactory = Callable[[], DistanceMetric]

_metric_registry: dict[str, MetricFactory] = {}


# ------------------- Distance metrics ---------------------------


def register_metric(kind: str):
    def deco(fn: MetricFactory):
        _metric_registry[kind] = fn
        return fn

    return deco


def make_metric(kind: str | DistanceMetric) -> DistanceMetric:
    if isinstance(kind, DistanceMetric):
        return kind
    try:
        return _metric_registry[kind]()
    except KeyError:
        raise InvalidArgument(
            f"Unknown metric {kind!r}; expected one of {sorted(_metric_registry)}"
        ) from None


@register_metric("euclidean")
def _make_euclidean():
    return EuclideanMetric()


@register_metric("manhattan")
def _make_manhattan():
    return ManhattanMetric()
