# Copyright (c) 2022 Alethea Katherine Flowers.
# Published under the standard MIT License.
# Full text available at: https://opensource.org/licenses/MIT

import numpy as np
import pytest

from flatbread import (
    BezierLineSegment,
    InvalidArgumentError,
    LinearLineSegment,
    Path,
    Segment,
    as_polyline,
)

from .utils import LINE, S_CURVE


@pytest.mark.parametrize(
    ["points", "expected_length"],
    [(S_CURVE[:4], 51), (S_CURVE, 101), (S_CURVE + S_CURVE[1:4], 151)],
)
def test_bezier_segment_length(points, expected_length):
    curve = BezierLineSegment(points)

    assert len(as_polyline(curve)) == expected_length


def test_bezier_segment_end_points():
    polyline = BezierLineSegment(S_CURVE[:4]).as_polyline()

    assert tuple(polyline[0]) == pytest.approx(S_CURVE[0])
    assert tuple(polyline[50]) == pytest.approx(S_CURVE[3])


def test_bezier_segment_chained_joint():
    polyline = BezierLineSegment(S_CURVE).as_polyline()

    np.testing.assert_array_equal(polyline[50], S_CURVE[3])
    assert np.all(polyline == np.array(S_CURVE[3]), axis=1).sum() == 1


def test_bezier_segment_requires_points():
    with pytest.raises(InvalidArgumentError) as exc_info:
        BezierLineSegment(None)

    assert exc_info.value.param_name == "points"
    assert "missing input" in str(exc_info.value)


@pytest.mark.parametrize("count", [0, 1, 2, 3])
def test_bezier_segment_requires_four_points(count):
    with pytest.raises(InvalidArgumentError) as exc_info:
        BezierLineSegment(S_CURVE[:count])

    assert exc_info.value.param_name == "points"
    assert "insufficient points" in str(exc_info.value)


def test_bezier_segment_as_polyline_is_idempotent():
    curve = BezierLineSegment(S_CURVE)

    first = curve.as_polyline()
    second = curve.as_polyline()

    assert first is second
    np.testing.assert_array_equal(first, second)


def test_bezier_segment_is_read_only():
    curve = BezierLineSegment(S_CURVE)

    with pytest.raises(ValueError):
        curve.as_polyline()[0] = (1, 1)

    with pytest.raises(ValueError):
        curve.control_points[0] = (1, 1)


def test_bezier_segment_copies_control_points():
    points = np.array(S_CURVE, dtype=float)
    curve = BezierLineSegment(points)

    points[3] = (100, 100)

    np.testing.assert_array_equal(curve.control_points[3], S_CURVE[3])
    np.testing.assert_array_equal(curve.as_polyline()[50], S_CURVE[3])


def test_bezier_segment_options():
    curve = BezierLineSegment(S_CURVE, segments_per_curve=10)
    assert len(curve.as_polyline()) == 21

    with pytest.raises(InvalidArgumentError):
        BezierLineSegment(S_CURVE[:6], strict=True)

    assert len(BezierLineSegment(S_CURVE[:6]).as_polyline()) == 51


def test_linear_segment():
    line = LinearLineSegment([(0, 0), (5, 5), (10, 0)])

    np.testing.assert_array_equal(line.as_polyline(), [(0, 0), (5, 5), (10, 0)])
    assert line.as_polyline() is as_polyline(line)


@pytest.mark.parametrize("points", [None, [], [(0, 0)]])
def test_linear_segment_requires_two_points(points):
    with pytest.raises(InvalidArgumentError):
        LinearLineSegment(points)


def test_segment_kinds_share_protocol():
    assert isinstance(LinearLineSegment(LINE), Segment)
    assert isinstance(BezierLineSegment(LINE), Segment)
    assert isinstance(Path([LinearLineSegment(LINE)]), Segment)
    assert not isinstance(object(), Segment)


def test_path_joins_segments_once():
    curve = BezierLineSegment(S_CURVE[:4])
    line = LinearLineSegment([S_CURVE[3], (20, 0), (20, 20)])

    path = Path([curve, line])
    polyline = path.as_polyline()

    assert len(polyline) == 51 + 2
    np.testing.assert_array_equal(polyline[50], S_CURVE[3])
    np.testing.assert_array_equal(polyline[-1], (20, 20))


def test_path_keeps_disjoint_segments():
    first = LinearLineSegment([(0, 0), (1, 0)])
    second = LinearLineSegment([(5, 5), (6, 5)])

    polyline = Path([first, second]).as_polyline()

    np.testing.assert_array_equal(polyline, [(0, 0), (1, 0), (5, 5), (6, 5)])


def test_path_closed():
    line = LinearLineSegment([(0, 0), (10, 0), (10, 10)])

    polyline = Path([line], closed=True).as_polyline()

    np.testing.assert_array_equal(polyline[-1], (0, 0))
    assert len(polyline) == 4


def test_path_closed_already_closed():
    line = LinearLineSegment([(0, 0), (10, 0), (10, 10), (0, 0)])

    assert len(Path([line], closed=True).as_polyline()) == 4


def test_path_nests():
    inner = Path([LinearLineSegment([(0, 0), (1, 1)])])
    outer = Path([inner, LinearLineSegment([(1, 1), (2, 0)])])

    np.testing.assert_array_equal(outer.as_polyline(), [(0, 0), (1, 1), (2, 0)])


def test_path_is_read_only_and_idempotent():
    path = Path([BezierLineSegment(S_CURVE)])

    assert path.as_polyline() is path.as_polyline()
    with pytest.raises(ValueError):
        path.as_polyline()[0] = (3, 3)


@pytest.mark.parametrize("segments", [None, []])
def test_path_requires_segments(segments):
    with pytest.raises(InvalidArgumentError) as exc_info:
        Path(segments)

    assert exc_info.value.param_name == "segments"


def test_path_rejects_non_segments():
    with pytest.raises(InvalidArgumentError):
        Path([LinearLineSegment(LINE), "not a segment"])


@pytest.mark.parametrize(
    "points", [[[], [], [], []], [(0, 0), (1,), (2, 2), (3, 3)]]
)
def test_bezier_segment_rejects_malformed_points(points):
    with pytest.raises(InvalidArgumentError) as exc_info:
        BezierLineSegment(points)

    assert exc_info.value.param_name == "points"
