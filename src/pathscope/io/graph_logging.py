# io/graph_logging.py
import json
import logging
import math
import sys

from pathscope.sim.hooks import NoopHooks


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
        return json.dumps(payload)


def _default_json_logger(name="pathscope", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)
        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
        logger.setLevel(level)
    return logger


class GraphLogging(NoopHooks):
    """
    Structured logs for graph regeneration and path queries.
    Under-placement is a WARNING; everything else is INFO or debug-only.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        logger: logging.Logger | None = None,
    ):
        self.run_id, self.debug = run_id, debug
        self.log = logger or _default_json_logger(level=level)

    def _emit(self, level: str, msg: str, **extra):
        self.log.log(getattr(logging, level), msg, extra={"extra": {"run_id": self.run_id, **extra}})

    def vertices_placed(self, *, requested: int, placed: int, attempts: int):
        if placed < requested:
            self._emit(
                "WARNING",
                "under_placement",
                requested=requested,
                placed=placed,
                attempts=attempts,
            )
        elif self.debug:
            self._emit("DEBUG", "vertices_placed", placed=placed, attempts=attempts)

    def graph_built(self, *, vertices: int, edges: int, radius: float, max_degree: int):
        self._emit(
            "INFO", "graph_built", vertices=vertices, edges=edges, radius=radius, max_degree=max_degree
        )

    def search_done(self, *, algorithm: str, found: bool, path_len: int, visited: int, cost: float):
        # json has no inf
        self._emit(
            "INFO",
            "search_done",
            algorithm=algorithm,
            found=found,
            path_len=path_len,
            visited=visited,
            cost=cost if math.isfinite(cost) else None,
        )
