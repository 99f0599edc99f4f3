from __future__ import annotations

import argparse
import csv
import logging
from pathlib import Path

import numpy as np

from braille_plot import PlotError, plot


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="braille-plot")
    parser.add_argument("--verbose", action="store_true", help="Enable DEBUG logging.")
    sub = parser.add_subparsers(dest="command", required=True)

    demo = sub.add_parser("demo", help="Plot random points scattered around y = x.")
    demo.add_argument("--points", type=int, default=1000)
    demo.add_argument("--seed", type=int, default=None)
    _add_plot_arguments(demo, width=100, height=30, labels=5)

    from_csv = sub.add_parser("csv", help="Plot two numeric columns of a CSV file.")
    from_csv.add_argument("path", type=Path)
    from_csv.add_argument("--x", required=True, help="Column name for x values.")
    from_csv.add_argument("--y", required=True, help="Column name for y values.")
    _add_plot_arguments(from_csv, width=80, height=24, labels=0)

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    if args.command == "demo":
        if args.points < 0:
            parser.error("--points must be >= 0")
        rng = np.random.default_rng(args.seed)
        x = rng.uniform(0.0, 100.0, size=args.points)
        y = x + rng.uniform(-5.0, 5.0, size=args.points)
    elif args.command == "csv":
        x, y = _read_columns(args.path, args.x, args.y)
    else:
        raise RuntimeError(f"unsupported command: {args.command}")

    try:
        text = plot(x, y, **_plot_options(args))
    except PlotError as exc:
        parser.exit(2, f"braille-plot: error: {exc}\n")
    print(text, end="")
    return 0


def _add_plot_arguments(parser: argparse.ArgumentParser, *, width: int, height: int, labels: int) -> None:
    parser.add_argument("--width", type=int, default=width)
    parser.add_argument("--height", type=int, default=height)
    parser.add_argument("--xmin", type=float, default=None)
    parser.add_argument("--xmax", type=float, default=None)
    parser.add_argument("--ymin", type=float, default=None)
    parser.add_argument("--ymax", type=float, default=None)
    parser.add_argument("--xlabels", type=int, default=labels, help="X tick count; 0 disables.")
    parser.add_argument("--ylabels", type=int, default=labels, help="Y tick count; 0 disables.")
    parser.add_argument("--border", action="store_true")
    parser.add_argument("--origin", action="store_true", help="Draw reference lines at x=0 and y=0.")
    parser.add_argument("--title", default=None)


def _plot_options(args: argparse.Namespace) -> dict[str, object]:
    names = ("width", "height", "xmin", "xmax", "ymin", "ymax", "xlabels", "ylabels", "border", "origin", "title")
    return {name: getattr(args, name) for name in names}


def _read_columns(path: Path, x_name: str, y_name: str) -> tuple[list[float | None], list[float | None]]:
    xs: list[float | None] = []
    ys: list[float | None] = []
    with path.open(newline="") as fh:
        reader = csv.DictReader(fh)
        missing = {x_name, y_name} - set(reader.fieldnames or ())
        if missing:
            raise SystemExit(f"braille-plot: error: column(s) not found in {path}: {', '.join(sorted(missing))}")
        for row in reader:
            xs.append(_parse_cell(row[x_name]))
            ys.append(_parse_cell(row[y_name]))
    return xs, ys


def _parse_cell(raw: str | None) -> float | None:
    if raw is None or not raw.strip():
        return None
    try:
        return float(raw)
    except ValueError:
        return None


if __name__ == "__main__":
    raise SystemExit(main())
