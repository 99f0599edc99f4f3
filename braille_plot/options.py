from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Mapping

from braille_plot.errors import PlotConfigError


DEFAULT_WIDTH = 80
DEFAULT_HEIGHT = 24
DEFAULT_XLABELS = 0
DEFAULT_YLABELS = 0


@dataclass(frozen=True)
class PlotOptions:
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    xmin: float | None = None
    xmax: float | None = None
    ymin: float | None = None
    ymax: float | None = None
    xlabels: int = DEFAULT_XLABELS
    ylabels: int = DEFAULT_YLABELS
    border: bool = False
    title: str | None = None
    origin: bool = False

    def validate(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise PlotConfigError("width and height must be > 0")
        for name in ("xlabels", "ylabels"):
            count = getattr(self, name)
            if count < 0 or count == 1:
                raise PlotConfigError(f"{name} must be 0 (disabled) or >= 2, got {count}")
        if self.xmin is not None and self.xmax is not None and self.xmin > self.xmax:
            raise PlotConfigError("xmin must be <= xmax")
        if self.ymin is not None and self.ymax is not None and self.ymin > self.ymax:
            raise PlotConfigError("ymin must be <= ymax")


OPTION_NAMES = frozenset(f.name for f in fields(PlotOptions))


def resolve_options(options: PlotOptions | Mapping[str, Any] | None = None, **overrides: Any) -> PlotOptions:
    if options is None:
        base = PlotOptions()
    elif isinstance(options, PlotOptions):
        base = options
    else:
        base = PlotOptions()
        overrides = {**dict(options), **overrides}

    unknown = sorted(set(overrides) - OPTION_NAMES)
    if unknown:
        raise PlotConfigError(f"unknown plot option(s): {', '.join(unknown)}")
    resolved = replace(base, **overrides) if overrides else base
    resolved.validate()
    return resolved
