# Copyright (c) 2022 Alethea Katherine Flowers.
# Published under the standard MIT License.
# Full text available at: https://opensource.org/licenses/MIT

"""
Flatbread turns chains of cubic bezier curves into dense polylines that line
drawing and polygon filling code can consume directly.
"""

from ._geometry import SEGMENTS_PER_CURVE, bezier_point, flatten
from ._guard import InvalidArgumentError
from .segments import BezierLineSegment, LinearLineSegment, Path, Segment, as_polyline

__version__ = "2026.10.17"

__all__ = [
    "SEGMENTS_PER_CURVE",
    "bezier_point",
    "flatten",
    "InvalidArgumentError",
    "Segment",
    "LinearLineSegment",
    "BezierLineSegment",
    "Path",
    "as_polyline",
]
