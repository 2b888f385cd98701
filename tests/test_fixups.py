"""Tests for the fixup steps run before flattening."""

import math

import pytest

from bezierflat.curves.bezier import BezierCurve
from bezierflat.curves.fixups import (
    close_curve, expand_handles, run_fixups, validate_vertices,
)
from bezierflat.errors import InvalidCurveError
from bezierflat.models import Vertex, VertexKind

E = VertexKind.ENDPOINT
M = VertexKind.MIDPOINT


def _v(x, y, kind=E):
    return Vertex(kind=kind, point=(x, y))


class TestExpandHandles:
    """Tests for converting handles into midpoints."""

    def test_handle_symmetry(self):
        """Test that a symmetric handle yields opposite midpoints at equal distance."""
        curve = BezierCurve()
        curve.add(10, 10).handle(0.3, 4, 4)
        curve.add(20, 0)

        expanded = expand_handles(curve.vertices)

        # the reverse midpoint of the first vertex is rotated to the end
        assert [v.kind for v in expanded] == [E, M, E, M]
        anchor = expanded[0].point
        fwd = expanded[1].point
        rev = expanded[3].point

        assert math.hypot(fwd[0] - anchor[0], fwd[1] - anchor[1]) == pytest.approx(4)
        assert math.hypot(rev[0] - anchor[0], rev[1] - anchor[1]) == pytest.approx(4)
        assert fwd[0] - anchor[0] == pytest.approx(anchor[0] - rev[0])
        assert fwd[1] - anchor[1] == pytest.approx(anchor[1] - rev[1])
        assert fwd == pytest.approx((10 + 4 * math.cos(0.3), 10 + 4 * math.sin(0.3)))

    def test_reverse_before_forward_after(self):
        """Test midpoint placement around an interior vertex."""
        curve = BezierCurve()
        curve.add(0, 0)
        curve.add(10, 0).handle(math.pi / 2, 2, 3)
        curve.add(20, 0)

        expanded = expand_handles(curve.vertices)

        assert [v.kind for v in expanded] == [E, M, E, M, E]
        assert expanded[1].point == pytest.approx((10, -3))
        assert expanded[3].point == pytest.approx((10, 2))

    def test_handles_cleared(self):
        """Test that expanded vertices no longer carry handles."""
        curve = BezierCurve()
        curve.add(0, 0).handle_fwd(0.0, 5)
        curve.add(10, 0)

        expanded = expand_handles(curve.vertices)

        assert not any(v.has_handles for v in expanded)
        assert curve.vertices[0].has_handles

    def test_no_handles_unchanged(self):
        """Test that a curve without handles passes through."""
        vertices = (_v(0, 0), _v(5, 5, M), _v(10, 0))

        assert expand_handles(vertices) == vertices


class TestCloseCurve:
    """Tests for curve closure."""

    def test_open_is_noop(self):
        """Test that open curves are not modified."""
        vertices = (_v(0, 0), _v(10, 0))

        assert close_curve(vertices, closed=False) == vertices

    def test_endpoint_appends_first(self):
        """Test that a closing vertex is added when the end differs from the start."""
        vertices = (_v(0, 0), _v(10, 0), _v(10, 10))

        closed = close_curve(vertices, closed=True)

        assert len(closed) == 4
        assert closed[-1] == vertices[0]

    def test_already_closed(self):
        """Test that a curve ending at its start is left alone."""
        vertices = (_v(0, 0), _v(10, 0), _v(10, 10), _v(0, 0))

        assert close_curve(vertices, closed=True) == vertices

    def test_midpoint_appends_first(self):
        """Test that a trailing midpoint always gets a closing endpoint."""
        vertices = (_v(0, 0), _v(10, 0), _v(0, 0, M))

        closed = close_curve(vertices, closed=True)

        assert len(closed) == 4
        assert closed[-1] == vertices[0]

    def test_first_must_be_endpoint(self):
        """Test that a closed curve cannot start on a midpoint."""
        with pytest.raises(InvalidCurveError):
            close_curve((_v(0, 0, M), _v(10, 0)), closed=True)


class TestValidate:
    """Tests for structural validation."""

    def test_valid(self):
        """Test that a well-formed list passes."""
        validate_vertices((_v(0, 0), _v(5, 5, M), _v(10, 0)), closed=False)

    @pytest.mark.parametrize("vertices, closed", [
        ((), False),
        ((_v(0, 0),), False),
        ((_v(0, 0, M),), False),
        ((_v(0, 0, M), _v(10, 0)), False),
        ((_v(0, 0), _v(10, 0, M)), False),
    ])
    def test_invalid(self, vertices, closed):
        """Test rejection of malformed vertex lists."""
        with pytest.raises(InvalidCurveError):
            validate_vertices(vertices, closed)

    def test_closed_may_end_on_midpoint(self):
        """Test that the end tag check only applies to open curves."""
        validate_vertices((_v(0, 0), _v(10, 0, M)), closed=True)


class TestRunFixups:
    """Tests for the full fixup sequence."""

    def test_input_not_modified(self):
        """Test that fixups work on a copy of the curve's vertices."""
        curve = BezierCurve()
        curve.add(0, 0).handle(0.0, 2, 2)
        curve.add(10, 0)
        curve.close()
        original = curve.vertices

        fixed = run_fixups(curve.vertices, curve.closed)

        assert curve.vertices == original
        assert len(fixed) > len(original)

    def test_closed_with_leading_reverse_handle(self):
        """Test that the rotated reverse midpoint feeds the closing spline."""
        curve = BezierCurve()
        curve.add(0, 0).handle_rev(math.pi, 3)
        curve.add(10, 0)
        curve.close()

        fixed = run_fixups(curve.vertices, curve.closed)

        assert [v.kind for v in fixed] == [E, E, M, E]
        assert fixed[2].point == pytest.approx((-3, 0))
        assert fixed[-1].point == (0.0, 0.0)

    def test_single_midpoint_rejected(self):
        """Test that a curve made of one midpoint is invalid."""
        curve = BezierCurve()
        curve.add(1, 1).mid()

        with pytest.raises(InvalidCurveError):
            run_fixups(curve.vertices, curve.closed)
