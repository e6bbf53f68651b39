# Copyright (c) 2022 Alethea Katherine Flowers.
# Published under the standard MIT License.
# Full text available at: https://opensource.org/licenses/MIT

"""Path segments that can be approximated as polylines.

Every segment kind offers ``as_polyline()``, which returns a read-only
(n, 2) numpy array of points. Polylines are computed once, when the segment
is built, so asking for them repeatedly is free and always gives the same
array.
"""

from typing import Protocol, Sequence, runtime_checkable

import numpy as np

from . import _guard
from ._geometry import SEGMENTS_PER_CURVE, _as_point_array, flatten
from ._print import printvv


@runtime_checkable
class Segment(Protocol):
    def as_polyline(self) -> np.ndarray:
        ...


def _readonly(arr: np.ndarray) -> np.ndarray:
    arr.flags.writeable = False
    return arr


class LinearLineSegment:
    """A straight polyline through two or more points."""

    def __init__(self, points):
        _guard.must_have_at_least(points, 2, "points")
        self._points = _readonly(_as_point_array(points, "points"))

    def __repr__(self):
        return f"LinearLineSegment({len(self._points)} points)"

    def as_polyline(self) -> np.ndarray:
        return self._points


class BezierLineSegment:
    """One or more chained cubic bezier curves.

    points holds 3n + 1 control points, where each curve's end point is the
    next curve's start point. The curves are flattened when the segment is
    created, see flatten() for the details.
    """

    def __init__(
        self,
        points,
        *,
        segments_per_curve: int = SEGMENTS_PER_CURVE,
        strict: bool = False,
    ):
        _guard.must_have_at_least(points, 4, "points")

        self._control_points = _readonly(_as_point_array(points, "points"))
        self.segments_per_curve = segments_per_curve
        self._line_points = flatten(
            self._control_points, segments_per_curve=segments_per_curve, strict=strict
        )

    def __repr__(self):
        return (
            f"BezierLineSegment({len(self._control_points)} control points, "
            f"{len(self._line_points)} line points)"
        )

    @property
    def control_points(self) -> np.ndarray:
        return self._control_points

    def as_polyline(self) -> np.ndarray:
        return self._line_points


class Path:
    """Joins segments end to end into a single polyline."""

    def __init__(self, segments: Sequence[Segment], closed: bool = False):
        _guard.must_have_at_least(segments, 1, "segments", what="segments")

        self.segments = tuple(segments)
        self.closed = closed

        for segment in self.segments:
            if not isinstance(segment, Segment):
                raise _guard.InvalidArgumentError(
                    f"{type(segment).__name__} can not be approximated as a polyline",
                    "segments",
                )

        self._points = _readonly(self._join())

    def _join(self) -> np.ndarray:
        parts = []
        last = None

        for segment in self.segments:
            points = segment.as_polyline()
            if not len(points):
                continue

            # Segments that pick up where the previous one ended don't repeat
            # the joint.
            if last is not None and np.array_equal(points[0], last):
                points = points[1:]

            if len(points):
                parts.append(points)
                last = points[-1]

        joined = np.concatenate(parts) if parts else np.zeros((0, 2), dtype=float)

        if self.closed and len(joined) and not np.array_equal(joined[0], joined[-1]):
            joined = np.concatenate([joined, joined[:1]])

        printvv(f"Joined {len(self.segments)} segments into {len(joined)} points")

        return joined

    def __repr__(self):
        return f"Path({len(self.segments)} segments, closed={self.closed})"

    def as_polyline(self) -> np.ndarray:
        return self._points


def as_polyline(segment: Segment) -> np.ndarray:
    """Returns the polyline approximating any kind of segment."""
    return segment.as_polyline()
