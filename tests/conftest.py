"""Pytest fixtures for splinefit tests."""

import math
import tempfile

import pytest


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield tmpdir


@pytest.fixture
def circle():
    """Circle of radius 10 centred on the origin."""
    from splinefit.curves.shapes import Circle
    return Circle(10)


@pytest.fixture
def circle_builder():
    """Path builder with its cursor at the circle's t=0 point."""
    from splinefit.builder.path_builder import PathBuilder
    return PathBuilder((10.0, 0.0))


@pytest.fixture
def wave():
    """Sine wave y = sin(t) parametrized by x = t, with finite-difference derivatives."""
    from splinefit.curves.parametric import FunctionCurve
    return FunctionCurve(lambda t: t, math.sin)


@pytest.fixture
def default_config():
    """Create default splinefit configuration."""
    from splinefit.config import SplineFitConfig
    return SplineFitConfig()
