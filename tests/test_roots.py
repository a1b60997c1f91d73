"""Tests for root finding and critical point detection."""

import math

import numpy as np
import pytest

from splinefit.errors import InvalidDomain
from splinefit.fitting.roots import find_critical_params, find_roots


class TestFindRoots:
    """Tests for the stepping root finder."""

    def test_linear_root(self):
        """Test root of t - 0.5 on [0, 1] is found near 0.5."""
        roots = find_roots(lambda t: t - 0.5, 0.0, 1.0)

        assert len(roots) >= 1
        for root in roots:
            assert abs(root - 0.5) < 0.01

    def test_root_on_start_boundary(self):
        """Test a root exactly at t_start is returned as t_start itself."""
        roots = find_roots(lambda t: t - 0.5, 0.5, 1.0)

        assert roots == [0.5]

    def test_sine_roots(self):
        """Test sign changes are refined by bisection."""
        roots = find_roots(math.sin, 1.0, 7.0)

        assert len(roots) == 2
        assert roots[0] == pytest.approx(math.pi, abs=1e-6)
        assert roots[1] == pytest.approx(2 * math.pi, abs=1e-6)

    def test_roots_ascending(self):
        """Test roots come back in ascending order."""
        roots = find_roots(lambda t: math.sin(3 * t), 0.5, 6.0)

        assert len(roots) == 5
        assert roots == sorted(roots)

    def test_no_roots(self):
        """Test a function bounded away from zero yields nothing."""
        roots = find_roots(lambda t: 2.0 + math.cos(t), 0.0, 10.0)

        assert roots == []

    def test_near_flat_touching_root(self):
        """Test a double root with no sign change is caught by the slope gate."""
        roots = find_roots(lambda t: (t - 0.55) ** 2, 0.0, 1.0)

        assert len(roots) == 1
        assert abs(roots[0] - 0.55) <= 0.1

    def test_flat_function_far_from_zero(self):
        """Test slope changes away from zero are ignored."""
        roots = find_roots(lambda t: 5.0 + (t - 0.5) ** 2, 0.0, 1.0)

        assert roots == []

    @pytest.mark.parametrize("bounds", [
        (0.0, math.inf),
        (-math.inf, 1.0),
        (math.nan, 1.0),
        (0.0, math.nan),
    ])
    def test_non_finite_bounds(self, bounds):
        """Test non-finite bounds raise InvalidDomain."""
        with pytest.raises(InvalidDomain):
            find_roots(lambda t: t, *bounds)


class TestCriticalParams:
    """Tests for critical point detection."""

    def test_wave_extrema_and_inflection(self, wave):
        """Test y = sin(x) has extrema at pi/2, 3pi/2 and an inflection at pi."""
        params = find_critical_params(wave, 0.5, 6.0)

        assert len(params) == 3
        assert np.allclose(params, [math.pi / 2, math.pi, 3 * math.pi / 2], atol=1e-5)

    def test_sorted_and_distinct(self, circle):
        """Test output is strictly ascending with no near-duplicates."""
        params = find_critical_params(circle, 0.0, 2 * math.pi)

        assert len(params) >= 2
        for a, b in zip(params, params[1:]):
            assert b - a > 0.5e-8

    def test_rounded_to_eight_decimals(self, wave):
        """Test params are rounded to absorb floating noise."""
        params = find_critical_params(wave, 0.5, 6.0)

        for t in params:
            assert t == round(t, 8)

    def test_circle_axis_crossings(self):
        """Test the circle's coordinate extrema are among the critical params."""
        from splinefit.curves.shapes import Circle

        # Radius 5 keeps the constant curvature (0.2) above the flat-crossing gate
        params = find_critical_params(Circle(5), 0.0, 2 * math.pi)

        for expected in (0.0, math.pi / 2, math.pi, 3 * math.pi / 2, 2 * math.pi):
            assert any(abs(t - expected) < 1e-6 for t in params)

    def test_no_endpoint_injection(self):
        """Test interval endpoints are not added when nothing vanishes there."""
        from splinefit.curves.shapes import Circle

        params = find_critical_params(Circle(5), 0.2, 0.4)

        assert params == []

    def test_straight_bezier(self):
        """Test a straight Bezier has zero curvature from the first sample."""
        from splinefit.curves.bezier import CubicBezierCurve

        line = CubicBezierCurve((0, 0), (1, 1), (2, 2), (3, 3))
        params = find_critical_params(line, 0.0, 1.0)

        assert params == [0.0]
