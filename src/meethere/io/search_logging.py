# io/search_logging.py
import json
import logging
import sys

from meethere.config.models import LogModel
from meethere.domain.entities.geography import Point
from meethere.domain.geometry.hooks import NoopHooks


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)
        return json.dumps(payload, default=str)


def json_logger(name="meethere", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)
        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
        logger.setLevel(level)
    return logger


def _xy(p: Point) -> list[float]:
    return [p.x, p.y]


class SearchLogging(NoopHooks):
    """
    Structured logs for the geometric median search. Start/end at INFO,
    per-move records at DEBUG (sampled) when ``debug`` is on.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        sample_every: int = 1,
        logger: logging.Logger | None = None,
    ):
        self.run_id, self.debug, self.sample_every = run_id, debug, max(1, sample_every)
        self.log = logger or json_logger(level=level)
        self._moves = 0

    @classmethod
    def from_model(cls, model: LogModel, *, run_id: str = "local", logger=None):
        return cls(
            run_id=run_id,
            level=model.level,
            debug=model.debug,
            sample_every=model.sample_every,
            logger=logger,
        )

    def _emit(self, level: str, msg: str, **extra):
        self.log.log(
            getattr(logging, level), msg, extra={"extra": {"run_id": self.run_id, **extra}}
        )

    def _sampled(self) -> bool:
        self._moves += 1
        return self.debug and (self._moves % self.sample_every) == 0

    # --------------------------------------------------------

    def search_start(self, *, n: int, center: Point, score: float, step: float):
        self._moves = 0
        self._emit("INFO", "search_start", n=n, center=_xy(center), score=score, step=step)

    def improved(self, *, center: Point, score: float, step: float, direction: int):
        if self._sampled():
            self._emit(
                "DEBUG", "improved", center=_xy(center), score=score, step=step, direction=direction
            )

    def step_halved(self, *, step: float, score: float):
        if self._sampled():
            self._emit("DEBUG", "step_halved", step=step, score=score)

    def search_end(self, *, center: Point, score: float, iterations: int, wall_ms: float):
        self._emit(
            "INFO",
            "search_end",
            center=_xy(center),
            score=score,
            iterations=iterations,
            wall_ms=wall_ms,
        )

    def error(self, *, reason: str, **kw):
        self._emit("ERROR", "search_error", reason=reason, **kw)
