from braille_plot.api import plot
from braille_plot.errors import PlotConfigError, PlotDataError, PlotError
from braille_plot.layout import LayoutRegions, compose, compute_layout
from braille_plot.options import PlotOptions
from braille_plot.raster import DotCanvas
from braille_plot.scales import PlotBounds, generate_nice_ticks, map_point, map_points

__all__ = [
    "DotCanvas",
    "LayoutRegions",
    "PlotBounds",
    "PlotConfigError",
    "PlotDataError",
    "PlotError",
    "PlotOptions",
    "compose",
    "compute_layout",
    "generate_nice_ticks",
    "map_point",
    "map_points",
    "plot",
]
