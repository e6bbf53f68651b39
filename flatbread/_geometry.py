# Copyright (c) 2022 Alethea Katherine Flowers.
# Published under the standard MIT License.
# Full text available at: https://opensource.org/licenses/MIT

"""Helpers for flattening cubic bezier curves into polylines"""

import numpy as np

from . import _guard
from ._print import printv, printvv

# Number of line segments each cubic curve is approximated with.
SEGMENTS_PER_CURVE = 50


def bezier_point(t, p0, p1, p2, p3) -> np.ndarray:
    """Evaluates a cubic bezier curve at t using the Bernstein basis.

    t may be a scalar, giving a single (x, y) point, or a column of shape
    (n, 1), giving an (n, 2) array of points. t is not clamped, values
    outside [0, 1] extrapolate past the curve's end points.
    """
    p0, p1, p2, p3 = (np.asarray(p, dtype=float) for p in (p0, p1, p2, p3))

    u = 1 - t
    tt = t * t
    uu = u * u
    uuu = uu * u
    ttt = tt * t

    p = uuu * p0
    p = p + 3 * uu * t * p1
    p = p + 3 * u * tt * p2
    p = p + ttt * p3

    return p


def _as_point_array(points, name: str) -> np.ndarray:
    _guard.not_none(points, name)

    if len(points) == 0:
        return np.zeros((0, 2), dtype=float)

    try:
        arr = np.array(points, dtype=float)
    except (ValueError, TypeError) as e:
        raise _guard.InvalidArgumentError(
            f"expected a sequence of (x, y) points: {e}", name
        ) from e

    if arr.ndim != 2 or arr.shape[1] != 2:
        raise _guard.InvalidArgumentError(
            f"expected a sequence of (x, y) points, got shape {arr.shape}", name
        )

    return arr


def curve_count(point_count: int) -> int:
    """Number of whole cubic curves in a chain of point_count control points."""
    return max(point_count - 1, 0) // 3


def leftover_points(point_count: int) -> int:
    """Number of control points after the last whole curve, which are ignored."""
    return (point_count - 1) % 3 if point_count else 0


def flatten(
    control_points,
    segments_per_curve: int = SEGMENTS_PER_CURVE,
    strict: bool = False,
) -> np.ndarray:
    """Converts a chain of cubic bezier curves into a read-only polyline.

    Each group of four control points, advancing by three, is one curve, so
    consecutive curves share their end points. Every curve contributes
    segments_per_curve points, and the start of the chain is emitted once
    ahead of them, giving ``segments_per_curve * curves + 1`` points.

    Control points left over after the last whole curve are ignored unless
    strict is set, in which case they raise InvalidArgumentError.
    """
    points = _as_point_array(control_points, "control_points")
    _guard.must_be_integer(segments_per_curve, "segments_per_curve")
    _guard.must_be_at_least(segments_per_curve, 1, "segments_per_curve")

    count = curve_count(len(points))
    leftover = leftover_points(len(points))

    if leftover:
        if strict:
            raise _guard.InvalidArgumentError(
                f"{len(points)} control points do not form whole cubic curves, "
                "expected 3n + 1 points",
                "control_points",
            )
        printv(f"Ignoring {leftover} trailing control point(s) after {count} curves")

    drawing_points = np.zeros((segments_per_curve * count + 1, 2), dtype=float)

    # Shared by every curve, t = 1/n .. n/n.
    ts = (np.arange(1, segments_per_curve + 1) / segments_per_curve)[:, np.newaxis]

    position = 0
    for i in range(0, len(points) - 3, 3):
        p0, p1, p2, p3 = points[i : i + 4]

        # Only the first curve emits its start point, the others start on
        # the previous curve's end point.
        if i == 0:
            drawing_points[position] = bezier_point(0, p0, p1, p2, p3)
            position += 1

        drawing_points[position : position + segments_per_curve] = bezier_point(
            ts, p0, p1, p2, p3
        )
        position += segments_per_curve

    printvv(f"Flattened {count} curves into {len(drawing_points)} points")

    drawing_points.flags.writeable = False
    return drawing_points
