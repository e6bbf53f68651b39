# Copyright (c) 2021 Alethea Katherine Flowers.
# Published under the standard MIT License.
# Full text available at: https://opensource.org/licenses/MIT

import argparse
import io
import pathlib
import sys

from . import _geometry, _writers
from ._guard import InvalidArgumentError
from ._print import print, printv, set_timing, set_verbose, warn
from ._utils import default_param_value, parse_points
from .segments import BezierLineSegment, Path


class ConversionError(RuntimeError):
    pass


def _read_source(source: pathlib.Path) -> str:
    if str(source) == "-":
        return sys.stdin.read()

    try:
        return source.read_text()
    except OSError as e:
        raise ConversionError(f"Unable to read {source}: {e.strerror}") from e


def convert(
    *,
    source: pathlib.Path,
    segments_per_curve: int = _geometry.SEGMENTS_PER_CURVE,
    strict: bool = False,
    closed: bool = False,
    format: str = "text",
) -> str:
    """Flattens the bezier control points in source and returns the rendered output."""
    if format not in _writers.WRITERS:
        raise ConversionError(
            f"Unknown format {format!r}, expected one of {', '.join(_writers.WRITERS)}"
        )

    try:
        control_points = parse_points(_read_source(source))
    except ValueError as e:
        raise ConversionError(f"{source}: {e}") from e

    printv(f"Read {len(control_points)} control points from {source}")

    leftover = _geometry.leftover_points(len(control_points))
    if leftover and not strict and len(control_points) >= 4:
        warn(
            f"ignoring {leftover} trailing control point(s) that don't make a whole curve"
        )

    curve = BezierLineSegment(
        control_points, segments_per_curve=segments_per_curve, strict=strict
    )
    path = Path([curve], closed=closed)
    points = path.as_polyline()

    print(
        f"[green]Flattened[/green] [cyan]{_geometry.curve_count(len(control_points))}[/cyan] curves into [cyan]{len(points)}[/cyan] points"
    )

    out = io.StringIO()
    if format == "svg":
        _writers.write_svg(out, points, curve.control_points)
    else:
        _writers.WRITERS[format](out, points)

    return out.getvalue()


def main():
    parser = argparse.ArgumentParser(
        "convert", formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument("source", type=pathlib.Path)
    parser.add_argument("dest", nargs="?", type=pathlib.Path, default=None)
    parser.add_argument("-v", "--verbose", action="count", default=0)
    parser.add_argument("--time", action="store_true")

    parser.add_argument(
        "--format",
        choices=list(_writers.WRITERS),
        default=default_param_value(convert, "format"),
    )
    parser.add_argument(
        "--segments-per-curve",
        type=int,
        default=default_param_value(convert, "segments_per_curve"),
    )
    parser.add_argument(
        "--strict",
        action=argparse.BooleanOptionalAction,
        default=default_param_value(convert, "strict"),
    )
    parser.add_argument(
        "--closed",
        action=argparse.BooleanOptionalAction,
        default=default_param_value(convert, "closed"),
    )

    args = parser.parse_args()

    set_verbose(args.verbose)
    set_timing(args.time)

    try:
        output = convert(
            source=args.source,
            segments_per_curve=args.segments_per_curve,
            strict=args.strict,
            closed=args.closed,
            format=args.format,
        )
    except (ConversionError, InvalidArgumentError) as e:
        print(f"[red]Conversion error:[/red] {e}")
        sys.exit(1)

    if args.dest is None:
        sys.stdout.write(output)
        return

    args.dest.write_text(output)

    print(f"[bold][green]Written to {args.dest} :purple_heart:")


if __name__ == "__main__":
    main()
