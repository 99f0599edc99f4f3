from __future__ import annotations

from dataclasses import dataclass
import logging

import numpy as np


LOGGER = logging.getLogger(__name__)

TICK_DECIMALS = 2


@dataclass(frozen=True)
class PlotBounds:
    xmin: float
    xmax: float
    ymin: float
    ymax: float

    @property
    def x_range(self) -> float:
        return self.xmax - self.xmin

    @property
    def y_range(self) -> float:
        return self.ymax - self.ymin


def resolve_bounds(
    x: np.ndarray,
    y: np.ndarray,
    *,
    xmin: float | None = None,
    xmax: float | None = None,
    ymin: float | None = None,
    ymax: float | None = None,
) -> PlotBounds:
    mask = np.isfinite(x) & np.isfinite(y)
    dxmin, dxmax = _finite_extrema(x[mask])
    dymin, dymax = _finite_extrema(y[mask])
    return PlotBounds(
        xmin=dxmin if xmin is None else float(xmin),
        xmax=dxmax if xmax is None else float(xmax),
        ymin=dymin if ymin is None else float(ymin),
        ymax=dymax if ymax is None else float(ymax),
    )


def _finite_extrema(values: np.ndarray) -> tuple[float, float]:
    if values.size == 0:
        return (0.0, 0.0)
    return (float(np.min(values)), float(np.max(values)))


def map_points(
    x: np.ndarray,
    y: np.ndarray,
    bounds: PlotBounds,
    dots_width: int,
    dots_height: int,
) -> tuple[np.ndarray, np.ndarray]:
    if dots_width <= 0 or dots_height <= 0:
        raise ValueError("dot grid width/height must be > 0")
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    # NaN compares false everywhere, so non-finite points fall out here too.
    keep = (x >= bounds.xmin) & (x <= bounds.xmax) & (y >= bounds.ymin) & (y <= bounds.ymax)
    dropped = int(x.size - np.count_nonzero(keep))
    if dropped:
        LOGGER.debug("discarded %d of %d points outside %s", dropped, x.size, bounds)

    px = _interpolate(x[keep], bounds.xmin, bounds.x_range, dots_width)
    py = _interpolate(y[keep], bounds.ymin, bounds.y_range, dots_height)
    if bounds.y_range != 0:
        py = (dots_height - 1) - py
    return px, py


def map_point(
    px: float,
    py: float,
    bounds: PlotBounds,
    dots_width: int,
    dots_height: int,
) -> tuple[int, int] | None:
    xs, ys = map_points(np.asarray([px]), np.asarray([py]), bounds, dots_width, dots_height)
    if xs.size == 0:
        return None
    return (int(xs[0]), int(ys[0]))


def _interpolate(values: np.ndarray, vmin: float, span: float, dots: int) -> np.ndarray:
    if span == 0:
        return np.full(values.shape, dots // 2, dtype=np.int64)
    frac = (values - vmin) / span
    return np.floor(frac * (dots - 1)).astype(np.int64)


def nearest_cell(value: float, vmin: float, span: float, cells: int, *, invert: bool = False) -> int:
    if span == 0:
        return cells // 2
    pos = int(np.floor(((value - vmin) / span) * (cells - 1) + 0.5))
    if invert:
        pos = (cells - 1) - pos
    return min(max(pos, 0), cells - 1)


def generate_nice_ticks(vmin: float, vmax: float, count: int) -> np.ndarray:
    if count < 2:
        raise ValueError("tick count must be >= 2")
    if vmin > vmax:
        raise ValueError("vmin must be <= vmax")
    if vmin == vmax:
        return np.asarray([vmin], dtype=np.float64)

    span = nice_number(vmax - vmin, round_result=False)
    step = nice_number(span / (count - 1), round_result=True)
    lower = np.floor(vmin / step) * step
    upper = np.ceil(vmax / step) * step

    ticks = np.arange(lower, upper + 0.5 * step, step, dtype=np.float64)
    # Snap to exact multiples of step so drift like 0.30000000000000004 or -0.0 disappears.
    ticks = np.rint(ticks / step) * step
    ticks[np.isclose(ticks, 0.0, rtol=0.0, atol=step * 1e-9)] = 0.0
    return ticks


def nice_number(value: float, *, round_result: bool) -> float:
    if not np.isfinite(value) or value <= 0:
        raise ValueError("nice_number requires a positive finite value")
    exp = np.floor(np.log10(value))
    frac = value / (10**exp)

    if round_result:
        if frac < 1.5:
            nice_frac = 1.0
        elif frac < 3.0:
            nice_frac = 2.0
        elif frac < 7.0:
            nice_frac = 5.0
        else:
            nice_frac = 10.0
    else:
        if frac <= 1.0:
            nice_frac = 1.0
        elif frac <= 2.0:
            nice_frac = 2.0
        elif frac <= 5.0:
            nice_frac = 5.0
        else:
            nice_frac = 10.0

    return float(nice_frac * (10**exp))


def format_tick(value: float) -> str:
    if not np.isfinite(value):
        return str(value)
    out = f"{value:.{TICK_DECIMALS}f}"
    if out.startswith("-") and float(out) == 0.0:
        out = out[1:]
    return out


def format_ticks(ticks: np.ndarray) -> list[str]:
    return [format_tick(float(v)) for v in ticks]
