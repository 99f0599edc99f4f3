from __future__ import annotations

import logging
from typing import Any, Mapping

import numpy as np

from braille_plot.adapters import normalize_xy
from braille_plot.errors import PlotConfigError
from braille_plot.layout import compose, compute_layout
from braille_plot.options import PlotOptions, resolve_options
from braille_plot.raster import DotCanvas
from braille_plot.scales import PlotBounds, format_ticks, generate_nice_ticks, map_points, resolve_bounds


LOGGER = logging.getLogger(__name__)


def plot(
    x: Any,
    y: Any,
    options: PlotOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> str:
    opts = resolve_options(options, **overrides)
    xs, ys = normalize_xy(x, y)
    bounds = resolve_bounds(xs, ys, xmin=opts.xmin, xmax=opts.xmax, ymin=opts.ymin, ymax=opts.ymax)
    if bounds.xmin > bounds.xmax or bounds.ymin > bounds.ymax:
        raise PlotConfigError(f"resolved bounds are inverted: {bounds}")

    x_ticks = _plan_ticks(bounds.xmin, bounds.xmax, opts.xlabels)
    y_ticks = _plan_ticks(bounds.ymin, bounds.ymax, opts.ylabels)
    regions = compute_layout(
        opts.width,
        opts.height,
        y_tick_labels=format_ticks(y_ticks),
        x_labels=opts.xlabels > 0,
        border=opts.border,
        title=opts.title,
    )

    canvas = DotCanvas(regions.plot_width, regions.plot_height)
    if opts.origin:
        _draw_origin(canvas, bounds)
    dot_x, dot_y = map_points(xs, ys, bounds, canvas.dots_width, canvas.dots_height)
    canvas.set_many(dot_x, dot_y)
    LOGGER.debug("rasterized %d of %d points on %dx%d dots", dot_x.size, xs.size, canvas.dots_width, canvas.dots_height)

    return compose(
        canvas.render(),
        bounds,
        regions,
        x_ticks=x_ticks,
        y_ticks=y_ticks,
        title=opts.title,
    )


def _plan_ticks(vmin: float, vmax: float, count: int) -> np.ndarray:
    if count < 2:
        return np.empty(0, dtype=np.float64)
    return generate_nice_ticks(vmin, vmax, count)


def _draw_origin(canvas: DotCanvas, bounds: PlotBounds) -> None:
    last_x = canvas.dots_width - 1
    last_y = canvas.dots_height - 1
    if bounds.xmin <= 0.0 <= bounds.xmax:
        zx, _ = map_points(np.zeros(1), np.asarray([bounds.ymin]), bounds, canvas.dots_width, canvas.dots_height)
        canvas.draw_vline(int(zx[0]), 0, last_y)
    if bounds.ymin <= 0.0 <= bounds.ymax:
        _, zy = map_points(np.asarray([bounds.xmin]), np.zeros(1), bounds, canvas.dots_width, canvas.dots_height)
        canvas.draw_hline(0, last_x, int(zy[0]))
