"""
Planar Bezier splines: one polynomial per axis built from 2-5 points.
"""

import math

from bezierflat.curves.polynomial import BezierPolynomial
from bezierflat.errors import InvalidOrderError


class BezierSpline:
    """A single linear/quadratic/cubic/quartic Bezier segment."""

    __slots__ = ("px", "py")

    def __init__(self, px, py):
        self.px = px
        self.py = py

    @classmethod
    def from_points(cls, points):
        """Build the x and y polynomials from an ordered list of 2-5 (x, y) points."""
        points = list(points)
        if not 2 <= len(points) <= 5:
            raise InvalidOrderError(f"a spline needs 2-5 points, got {len(points)}")
        xs = [p[0] for p in points]
        ys = [p[1] for p in points]
        return cls(
            BezierPolynomial.from_control_values(xs),
            BezierPolynomial.from_control_values(ys),
        )

    @property
    def order(self):
        return self.px.order

    def evaluate(self, t):
        """Point on the spline at parameter t."""
        return (self.px.value(t), self.py.value(t))

    def slope(self, t):
        """Tangent direction (radians) at parameter t."""
        return math.atan2(self.py.first_derivative(t), self.px.first_derivative(t))

    def slope_rate(self, t):
        """
        Rate of change of the tangent slope dy/dx at parameter t.

        Diagnostic only; flattening does not use it. Returns math.inf where
        the x derivative vanishes.
        """
        x1 = self.px.first_derivative(t)
        y1 = self.py.first_derivative(t)
        x2 = self.px.second_derivative(t)
        y2 = self.py.second_derivative(t)
        if x1 == 0:
            return math.inf
        return (x1 * y2 - y1 * x2) / (x1 * x1)

    def __repr__(self):
        return f"BezierSpline(order={self.order}, start={self.evaluate(0.0)}, end={self.evaluate(1.0)})"
