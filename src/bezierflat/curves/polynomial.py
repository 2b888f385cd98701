"""
Bezier polynomials in power-basis form.

A Bezier curve of order n along one axis is expanded from its n+1 control
values into a + b*t + c*t^2 + d*t^3 + e*t^4 so that value and derivatives
can be evaluated with Horner's scheme.
"""

import numpy as np

from bezierflat.errors import InvalidOrderError, InvalidStateError

# Coefficients smaller than this fraction of the coefficient magnitude sum are snapped to zero.
POLY_EPSILON = 1e-12

# Rows give a, b, c, ... as combinations of the control values x0..xn.
_EXPANSION = {
    1: np.array([
        [1, 0],
        [-1, 1],
    ], dtype=float),
    2: np.array([
        [1, 0, 0],
        [-2, 2, 0],
        [1, -2, 1],
    ], dtype=float),
    3: np.array([
        [1, 0, 0, 0],
        [-3, 3, 0, 0],
        [3, -6, 3, 0],
        [-1, 3, -3, 1],
    ], dtype=float),
    4: np.array([
        [1, 0, 0, 0, 0],
        [-4, 4, 0, 0, 0],
        [6, -12, 6, 0, 0],
        [-4, 12, -12, 4, 0],
        [1, -4, 6, -4, 1],
    ], dtype=float),
}


def zero_small(coefficients, epsilon=POLY_EPSILON):
    """Replace coefficients with |c| <= epsilon * sum(|c|) by exactly 0."""
    total = sum(abs(c) for c in coefficients)
    return [0.0 if abs(c) <= epsilon * total else c for c in coefficients]


class BezierPolynomial:
    """
    Fixed-order (1-4) parametric polynomial derived from Bezier control values.

    Use from_control_values() to build one; instances are not modified afterwards.
    """

    __slots__ = ("_order", "_coefficients")

    def __init__(self, order, coefficients):
        if len(coefficients) > 5:
            raise InvalidStateError(f"at most 5 coefficients, got {len(coefficients)}")
        self._order = order
        padded = list(coefficients) + [0.0] * (5 - len(coefficients))
        self._coefficients = tuple(float(c) for c in padded[:5])

    @classmethod
    def from_control_values(cls, values):
        """
        Expand control values x0..xn into power-basis coefficients.

        Raises InvalidOrderError unless 2-5 values are given.
        """
        values = np.asarray(values, dtype=float).ravel()
        order = len(values) - 1
        if order not in _EXPANSION:
            raise InvalidOrderError(f"bad polynomial order {order}, need 2-5 control values")

        coefficients = (_EXPANSION[order] @ values).tolist()
        return cls(order, zero_small(coefficients))

    @property
    def order(self):
        return self._order

    @property
    def coefficients(self):
        """(a, b, c, d, e); unused higher terms are 0."""
        return self._coefficients

    def _check_order(self):
        if self._order not in _EXPANSION:
            raise InvalidStateError(f"bad polynomial order {self._order}")

    def value(self, t):
        self._check_order()
        a, b, c, d, e = self._coefficients
        n = self._order
        if n == 1:
            return a + t * b
        if n == 2:
            return a + t * (b + t * c)
        if n == 3:
            return a + t * (b + t * (c + t * d))
        return a + t * (b + t * (c + t * (d + t * e)))

    def first_derivative(self, t):
        self._check_order()
        _, b, c, d, e = self._coefficients
        n = self._order
        if n == 1:
            return b
        if n == 2:
            return b + t * 2 * c
        if n == 3:
            return b + t * (2 * c + t * 3 * d)
        return b + t * (2 * c + t * (3 * d + t * 4 * e))

    def second_derivative(self, t):
        self._check_order()
        _, _, c, d, e = self._coefficients
        n = self._order
        if n == 1:
            return 0.0
        if n == 2:
            return 2 * c
        if n == 3:
            return 2 * (c + t * 3 * d)
        return 2 * (c + t * 3 * (d + t * 2 * e))

    def __repr__(self):
        used = self._coefficients[:self._order + 1] if self._order in _EXPANSION else self._coefficients
        return f"BezierPolynomial(order={self._order}, coefficients={list(used)})"
