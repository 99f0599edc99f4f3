from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Sequence

import numpy as np

from braille_plot.errors import PlotConfigError
from braille_plot.scales import PlotBounds, format_tick, nearest_cell


LOGGER = logging.getLogger(__name__)

BORDER_TOP_LEFT = "┌"
BORDER_TOP_RIGHT = "┐"
BORDER_BOTTOM_LEFT = "└"
BORDER_BOTTOM_RIGHT = "┘"
BORDER_HORIZONTAL = "─"
BORDER_VERTICAL = "│"
Y_TICK_CONNECTOR = "┤"
X_TICK_CONNECTOR = "┬"

X_LABEL_ROWS = 1
TITLE_ROWS = 1


@dataclass(frozen=True)
class LayoutRegions:
    width: int
    height: int
    y_label_width: int
    x_label_height: int
    title_height: int
    border: int
    plot_width: int
    plot_height: int

    @property
    def plot_x0(self) -> int:
        return self.y_label_width + self.border

    @property
    def plot_y0(self) -> int:
        return self.title_height + self.border

    @property
    def plot_x1(self) -> int:
        return self.plot_x0 + self.plot_width

    @property
    def plot_y1(self) -> int:
        return self.plot_y0 + self.plot_height


def compute_layout(
    width: int,
    height: int,
    *,
    y_tick_labels: Sequence[str] = (),
    x_labels: bool = False,
    border: bool = False,
    title: str | None = None,
) -> LayoutRegions:
    if width <= 0 or height <= 0:
        raise PlotConfigError("width and height must be > 0")
    y_label_width = max((len(label) for label in y_tick_labels), default=0)
    if y_label_width:
        y_label_width += 1
    x_label_height = X_LABEL_ROWS if x_labels else 0
    title_height = TITLE_ROWS if title else 0
    thickness = 1 if border else 0

    plot_width = width - y_label_width - 2 * thickness
    plot_height = height - x_label_height - title_height - 2 * thickness
    if plot_width < 1 or plot_height < 1:
        raise PlotConfigError(
            f"{width}x{height} leaves no room for the plot region "
            f"(labels={y_label_width}x{x_label_height}, title={title_height}, border={thickness})"
        )
    regions = LayoutRegions(
        width=width,
        height=height,
        y_label_width=y_label_width,
        x_label_height=x_label_height,
        title_height=title_height,
        border=thickness,
        plot_width=plot_width,
        plot_height=plot_height,
    )
    LOGGER.debug("layout resolved: %s", regions)
    return regions


def compose(
    plot_text: str,
    bounds: PlotBounds,
    regions: LayoutRegions,
    *,
    x_ticks: Sequence[float] = (),
    y_ticks: Sequence[float] = (),
    title: str | None = None,
) -> str:
    grid = np.full((regions.height, regions.width), " ", dtype="<U1")

    for row, line in enumerate(plot_text.splitlines()[: regions.plot_height]):
        _write(grid, regions.plot_y0 + row, regions.plot_x0, line[: regions.plot_width])

    if regions.border:
        _draw_border(grid, regions)

    connector_col = regions.plot_x0 - 1
    if regions.y_label_width:
        for value in y_ticks:
            row = regions.plot_y0 + nearest_cell(
                float(value), bounds.ymin, bounds.y_range, regions.plot_height, invert=True
            )
            label = format_tick(float(value))
            _write(grid, row, max(0, connector_col - len(label)), label)
            _write(grid, row, connector_col, Y_TICK_CONNECTOR)

    if regions.x_label_height:
        label_row = regions.height - 1
        for value in x_ticks:
            col = regions.plot_x0 + nearest_cell(float(value), bounds.xmin, bounds.x_range, regions.plot_width)
            if regions.border:
                _write(grid, regions.plot_y1, col, X_TICK_CONNECTOR)
            label = format_tick(float(value))
            _write(grid, label_row, _fit_start(col - len(label) // 2, len(label), regions.width), label)

    if regions.title_height and title:
        start = regions.plot_x0 + (regions.plot_width - len(title)) // 2
        _write(grid, 0, start, title)

    return "".join("".join(row) + "\n" for row in grid.tolist())


def _draw_border(grid: np.ndarray, regions: LayoutRegions) -> None:
    left = regions.plot_x0 - 1
    right = regions.plot_x1
    top = regions.plot_y0 - 1
    bottom = regions.plot_y1
    grid[top, regions.plot_x0 : right] = BORDER_HORIZONTAL
    grid[bottom, regions.plot_x0 : right] = BORDER_HORIZONTAL
    grid[regions.plot_y0 : bottom, left] = BORDER_VERTICAL
    grid[regions.plot_y0 : bottom, right] = BORDER_VERTICAL
    grid[top, left] = BORDER_TOP_LEFT
    grid[top, right] = BORDER_TOP_RIGHT
    grid[bottom, left] = BORDER_BOTTOM_LEFT
    grid[bottom, right] = BORDER_BOTTOM_RIGHT


def _fit_start(start: int, length: int, width: int) -> int:
    # Shift inward so the whole label stays visible; only wider-than-grid text is cut.
    return max(0, min(start, width - length))


def _write(grid: np.ndarray, row: int, col: int, text: str) -> None:
    height, width = grid.shape
    if row < 0 or row >= height or not text:
        return
    start = max(0, col)
    stop = min(width, col + len(text))
    if start >= stop:
        return
    grid[row, start:stop] = list(text[start - col : stop - col])
