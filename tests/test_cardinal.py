"""Tests for cardinal and Catmull-Rom spline stitching."""

import numpy as np
import pytest

from splinefit.builder.path_builder import PathBuilder
from splinefit.fitting.cardinal import cardinal_spline, catmull_rom_spline


class TestCardinalSpline:
    """Tests for cardinal_spline."""

    def test_no_points(self):
        """Test an empty point list emits nothing."""
        builder = PathBuilder()

        segments = cardinal_spline(builder, 0.5)

        assert segments == []
        assert builder.segments == []
        assert np.allclose(builder.current_position(), [0.0, 0.0])

    def test_two_points(self):
        """Test handles for a two-point spline from the origin."""
        builder = PathBuilder()

        segments = cardinal_spline(builder, 0.5, (50, 0), (100, 50))

        assert len(segments) == 2
        first, second = segments
        assert np.allclose(first.bezier.control1, [50 / 3, 0.0])
        assert np.allclose(first.bezier.control2, [100 / 3, -25 / 3])
        assert np.allclose(first.terminal_point, [50.0, 0.0])
        assert np.allclose(second.bezier.control1, [200 / 3, 25 / 3])
        assert np.allclose(second.bezier.control2, [250 / 3, 100 / 3])
        assert np.allclose(builder.current_position(), [100.0, 50.0])

    def test_single_point_is_straight(self):
        """Test one point gives a straight segment from the cursor."""
        builder = PathBuilder()

        segments = cardinal_spline(builder, 0.5, (30, 40))

        assert len(segments) == 1
        bez = segments[0].bezier
        assert np.allclose(bez.control1, [10.0, 40 / 3])
        assert np.allclose(bez.control2, [20.0, 80 / 3])
        assert np.allclose(bez.end, [30.0, 40.0])

    def test_velocity_continuity(self):
        """Test each stitch leaves with the velocity the previous one arrived with."""
        builder = PathBuilder((0, 0))
        points = [(10, 20), (30, 25), (45, 5), (60, 30), (80, 0)]

        segments = cardinal_spline(builder, 0.3, *points)

        assert len(segments) == len(points)
        for a, b in zip(segments, segments[1:]):
            assert np.allclose(a.terminal_point, b.start_point)
            assert np.allclose(a.end_velocity, b.start_velocity)

    def test_passes_through_points(self):
        """Test segment ends land on the given points in order."""
        builder = PathBuilder((5, 5))
        points = [(10, 0), (20, 10), (30, 0)]

        segments = cardinal_spline(builder, 0.8, *points)

        ends = [seg.terminal_point.tolist() for seg in segments]
        assert ends == [[10.0, 0.0], [20.0, 10.0], [30.0, 0.0]]

    def test_zero_tension_polyline(self):
        """Test tension 0 collapses handles onto the segment ends."""
        builder = PathBuilder()

        segments = cardinal_spline(builder, 0.0, (10, 0), (10, 10))

        for seg in segments:
            assert np.allclose(seg.bezier.control1, seg.start_point)
            assert np.allclose(seg.bezier.control2, seg.terminal_point)


class TestCatmullRom:
    """Tests for catmull_rom_spline."""

    @pytest.mark.parametrize("points", [
        [(50, 0), (100, 50)],
        [(1, 1), (2, 3), (4, 2), (7, 7)],
    ])
    def test_matches_half_tension(self, points):
        """Test Catmull-Rom is the cardinal spline with tension 0.5."""
        a = PathBuilder((0, 0))
        b = PathBuilder((0, 0))

        catmull_rom_spline(a, *points)
        cardinal_spline(b, 0.5, *points)

        assert [s.bezier for s in a.segments] == [s.bezier for s in b.segments]

    def test_empty(self):
        """Test no points emits nothing."""
        assert catmull_rom_spline(PathBuilder()) == []
