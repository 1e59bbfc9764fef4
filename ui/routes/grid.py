"""Simulation routes."""

import threading

from fastapi import APIRouter

from core.errors import InvalidRunParameters
from internal.logging import get_logger
from langton.direction import Direction
from langton.engine import simulate

router = APIRouter(prefix="/api/v1", tags=["grid"])

# These will be set by app.py
_config = None
_stats = {"runs": 0, "failures": 0}
_stats_lock = threading.Lock()


def init(simulation_config):
    """Initialize with the default scenario and size limits."""
    global _config
    _config = simulation_config


def get_stats():
    with _stats_lock:
        return dict(_stats)


def _count(key):
    with _stats_lock:
        _stats[key] += 1


def _check_limits(rows, cols, steps):
    if rows * cols > _config.max_cells:
        raise InvalidRunParameters(f"Grid of {rows}x{cols} exceeds the {_config.max_cells} cell limit",
                                   parameter="rows*cols", value=rows * cols)
    if steps > _config.max_steps:
        raise InvalidRunParameters(f"{steps} steps exceeds the {_config.max_steps} step limit",
                                   parameter="steps", value=steps)


@router.get("/grid")
def grid(rows: int | None = None, cols: int | None = None, ant_row: int | None = None,
         ant_col: int | None = None, direction: str | None = None, steps: int | None = None):
    """Run one simulation; omitted parameters come from the configured scenario."""
    params = _config.scenario()
    supplied = {"rows": rows, "cols": cols, "ant_row": ant_row, "ant_col": ant_col,
                "direction": direction, "steps": steps}
    params.update({key: value for key, value in supplied.items() if value is not None})
    try:
        Direction.from_glyph(params["direction"])
        _check_limits(params["rows"], params["cols"], params["steps"])
        result = simulate(params["rows"], params["cols"], params["ant_row"], params["ant_col"],
                          params["direction"], params["steps"])
    except Exception:
        _count("failures")
        raise
    _count("runs")
    get_logger().debug("grid served", run_id=result.id, steps=result.steps)
    return result.to_dict()
