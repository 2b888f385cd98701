"""
Exception types for bezierflat.

Every error is fatal for the curve that raised it. Nothing here is retried.
"""


class BezierError(ValueError):
    """Base class for errors caused by bad curve input or builder usage."""


class InvalidOrderError(BezierError):
    """Control value count does not match a supported polynomial order (1-4)."""


class InvalidOperationError(BezierError):
    """Builder call that is not allowed on the targeted vertex."""


class InvalidCurveError(BezierError):
    """Vertex sequence is structurally malformed."""


class InvalidStateError(RuntimeError):
    """Internal inconsistency: a polynomial or segmentation bug, not bad input."""
