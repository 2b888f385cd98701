"""
Bezier curve builder.

A curve is assembled in traversal order: add an endpoint, then optionally
mark it as a midpoint or give it tangent handles, and finally close the
curve if it should loop back to its start.

    curve = BezierCurve()
    curve.add(0, 0).handle_fwd(0.0, 5)
    curve.add(5, 10).mid()
    curve.add(10, 0)
    polygon = curve.polygon()
"""

import math

from bezierflat.curves.flatten import flatten
from bezierflat.errors import InvalidOperationError
from bezierflat.models import CurveData, PolarHandle, Vertex, VertexKind


class VertexRef:
    """Reference to one vertex of a curve, for chaining builder calls."""

    __slots__ = ("curve", "index")

    def __init__(self, curve, index):
        self.curve = curve
        self.index = index

    @property
    def vertex(self):
        return self.curve.vertices[self.index]

    def mid(self):
        """Mark the vertex as a mid-curve control point."""
        vertex = self.vertex
        if vertex.has_handles:
            raise InvalidOperationError("can't mark a vertex with handles as a curve midpoint")
        self.curve._replace(self.index, vertex.model_copy(update={"kind": VertexKind.MIDPOINT}))
        return self

    def handle_fwd(self, theta, r):
        """Set the slope handle in the forward direction."""
        self._set_handle("handle_fwd", theta, r)
        return self

    def handle_rev(self, theta, r):
        """Set the slope handle in the reverse direction."""
        self._set_handle("handle_rev", theta, r)
        return self

    def handle(self, theta, fwd, rev):
        """Set a symmetric slope handle: forward at theta, reverse at theta + pi."""
        self.handle_fwd(theta, fwd)
        self.handle_rev(theta + math.pi, rev)
        return self

    def _set_handle(self, field, theta, r):
        vertex = self.vertex
        if vertex.is_midpoint:
            raise InvalidOperationError("can't place a handle on a curve midpoint")
        handle = PolarHandle(angle=theta, radius=r)
        self.curve._replace(self.index, vertex.model_copy(update={field: handle}))


class BezierCurve:
    """
    An ordered list of Bezier vertices plus a closed flag.

    Structural checks happen when the curve is flattened, not while building.
    """

    def __init__(self, vertices=None, closed=False):
        self._vertices = list(vertices or [])
        self.closed = closed

    @property
    def vertices(self):
        return tuple(self._vertices)

    def __len__(self):
        return len(self._vertices)

    def _replace(self, index, vertex):
        self._vertices[index] = vertex

    def _last(self):
        if not self._vertices:
            raise InvalidOperationError("curve has no vertices yet")
        return VertexRef(self, len(self._vertices) - 1)

    def add_endpoint(self, point):
        """Append an endpoint vertex and return a reference to it."""
        self._vertices.append(Vertex(kind=VertexKind.ENDPOINT, point=(float(point[0]), float(point[1]))))
        return VertexRef(self, len(self._vertices) - 1)

    def add(self, x, y):
        return self.add_endpoint((x, y))

    def mark_as_midpoint(self):
        return self._last().mid()

    def set_forward_handle(self, angle, radius):
        return self._last().handle_fwd(angle, radius)

    def set_reverse_handle(self, angle, radius):
        return self._last().handle_rev(angle, radius)

    def set_handle(self, angle, forward_radius, reverse_radius):
        return self._last().handle(angle, forward_radius, reverse_radius)

    def close(self):
        self.closed = True

    def polygon(self, config=None):
        """Return a polygon approximating the curve."""
        return flatten(self, config)

    def to_data(self):
        return CurveData(vertices=list(self._vertices), closed=self.closed)

    @classmethod
    def from_data(cls, data):
        """
        Build a curve from a CurveData model or its dict form.

        Dict input is validated; a midpoint carrying a handle raises
        pydantic's ValidationError.
        """
        if not isinstance(data, CurveData):
            data = CurveData.model_validate(data)
        return cls(vertices=data.vertices, closed=data.closed)

    def __repr__(self):
        return f"BezierCurve(vertices={len(self._vertices)}, closed={self.closed})"
