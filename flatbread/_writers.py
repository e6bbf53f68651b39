# Copyright (c) 2022 Alethea Katherine Flowers.
# Published under the standard MIT License.
# Full text available at: https://opensource.org/licenses/MIT

"""Writes flattened polylines out as text, JSON, or an SVG preview"""

import json
from typing import TextIO

import numpy as np

from ._utils import format_number


def write_text(fh: TextIO, points: np.ndarray):
    for x, y in points:
        fh.write(f"{format_number(x)} {format_number(y)}\n")


def write_json(fh: TextIO, points: np.ndarray):
    json.dump([[float(x), float(y)] for x, y in points], fh)
    fh.write("\n")


def _points_attr(points) -> str:
    return " ".join(f"{format_number(x)},{format_number(y)}" for x, y in points)


def write_svg(
    fh: TextIO,
    points: np.ndarray,
    control_points: np.ndarray | None = None,
    *,
    stroke: str = "black",
    width: float = 1,
    padding: float = 10,
):
    """Writes a standalone SVG document drawing the polyline.

    When control_points are given their control polygon is drawn underneath
    as a dashed grey line, which makes it easy to eyeball a flattening.
    """
    everything = points if control_points is None else np.vstack([points, control_points])

    xmin, ymin = everything.min(axis=0) - padding
    xmax, ymax = everything.max(axis=0) + padding
    view_box = " ".join(
        format_number(v) for v in (xmin, ymin, xmax - xmin, ymax - ymin)
    )

    fh.write(
        f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="{view_box}" '
        f'width="{format_number(xmax - xmin)}" height="{format_number(ymax - ymin)}">\n'
    )

    if control_points is not None:
        fh.write(
            f'  <polyline id="control-polygon" points="{_points_attr(control_points)}" '
            f'fill="none" stroke="grey" stroke-width="{format_number(width / 2)}" '
            'stroke-dasharray="4 2"/>\n'
        )

    fh.write(
        f'  <polyline id="polyline" points="{_points_attr(points)}" '
        f'fill="none" stroke="{stroke}" stroke-width="{format_number(width)}"/>\n'
    )
    fh.write("</svg>\n")


WRITERS = {
    "text": write_text,
    "json": write_json,
    "svg": write_svg,
}
