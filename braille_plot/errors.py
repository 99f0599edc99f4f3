from __future__ import annotations


class PlotError(Exception):
    """Base class for errors raised by braille_plot."""


class PlotDataError(PlotError, ValueError):
    pass


class PlotConfigError(PlotError, ValueError):
    pass
