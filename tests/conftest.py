"""Pytest fixtures for bezierflat tests."""

import tempfile

import pytest


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield tmpdir


@pytest.fixture
def line_curve():
    """Open straight line from (0, 0) to (10, 0)."""
    from bezierflat.curves.bezier import BezierCurve

    curve = BezierCurve()
    curve.add(0, 0)
    curve.add(10, 0)
    return curve


@pytest.fixture
def quadratic_curve():
    """Open quadratic arch: endpoint (0, 0), midpoint (5, 10), endpoint (10, 0)."""
    from bezierflat.curves.bezier import BezierCurve

    curve = BezierCurve()
    curve.add(0, 0)
    curve.add(5, 10).mid()
    curve.add(10, 0)
    return curve


@pytest.fixture
def square_curve():
    """Closed square built from four endpoints."""
    from bezierflat.curves.bezier import BezierCurve

    curve = BezierCurve()
    curve.add(0, 0)
    curve.add(10, 0)
    curve.add(10, 10)
    curve.add(0, 10)
    curve.close()
    return curve


@pytest.fixture
def default_config():
    """Create default configuration."""
    from bezierflat.config import PipelineConfig
    return PipelineConfig()


@pytest.fixture
def tracer_off():
    """Make sure the global tracer is disabled after the test."""
    from bezierflat.tracer import configure_tracer

    yield
    configure_tracer(enabled=False)
