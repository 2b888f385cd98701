"""
Curve flattening.

The fixed-up vertex list is cut into splines (one per run of vertices between
two endpoints), then each spline is sampled with a step size that shrinks
where the tangent direction turns quickly.
"""

from enum import Enum

from bezierflat.config import FlattenConfig, check_flatten_config
from bezierflat.curves.fixups import run_fixups
from bezierflat.curves.spline import BezierSpline
from bezierflat.errors import InvalidCurveError, InvalidStateError
from bezierflat.models import Polygon, VertexKind
from bezierflat.tracer import get_tracer, trace

MAX_SPLINE_POINTS = 5


class _State(Enum):
    AT_ENDPOINT = 0
    IN_MIDRUN = 1


def segment_splines(vertices):
    """
    Group a fixed-up vertex list into splines.

    Each spline runs from one endpoint to the next, with up to three
    midpoints in between. The closing endpoint of one spline starts the next.
    """
    splines = []
    run = []
    state = _State.AT_ENDPOINT
    n = len(vertices)
    i = 0

    while i < n:
        v = vertices[i]
        if state == _State.AT_ENDPOINT:
            if v.kind != VertexKind.ENDPOINT:
                raise InvalidStateError(f"expected an endpoint at vertex {i}, got {v.kind.value}")
            run = [v.point]
            i += 1
            state = _State.IN_MIDRUN
        elif state == _State.IN_MIDRUN:
            if v.kind == VertexKind.MIDPOINT:
                run.append(v.point)
                i += 1
            elif v.kind == VertexKind.ENDPOINT:
                run.append(v.point)
                if len(run) > MAX_SPLINE_POINTS:
                    raise InvalidCurveError(
                        f"too many consecutive midpoints ({len(run) - 2}) before vertex {i}, at most 3 allowed"
                    )
                splines.append(BezierSpline.from_points(run))
                # this endpoint starts the next spline, don't advance
                state = _State.AT_ENDPOINT
                if i == n - 1:
                    break
            else:
                raise InvalidStateError(f"bad vertex type {v.kind!r}")
        else:
            raise InvalidStateError(f"bad segmentation state {state!r}")

    return splines


def sample_spline(spline, samples=1000, epsilon=0.1):
    """
    Sample a spline into a list of (x, y) points.

    Lines give their two endpoints. Higher orders step by 1/(samples-1) where
    the slope changes by at least epsilon radians per step, and by
    proportionally larger steps elsewhere. The end point is always included.
    """
    if spline.order == 1:
        return [spline.evaluate(0.0), spline.evaluate(1.0)]

    if samples < 2:
        raise ValueError(f"samples must be at least 2, got {samples}")
    dt_min = 1.0 / (samples - 1)
    points = []
    t = 0.0
    while t < 1.0:
        points.append(spline.evaluate(t))
        dtheta = abs(spline.slope(t + dt_min) - spline.slope(t))
        if dtheta == 0:
            # straight from here on
            break
        if dtheta < epsilon:
            t += dt_min * (epsilon / dtheta)
        else:
            t += dt_min
    points.append(spline.evaluate(1.0))
    return points


@trace(label="flatten")
def flatten(curve, config=None):
    """
    Flatten a Bezier curve into a polygon.

    Args:
        curve: object with `vertices` and `closed` (normally a BezierCurve)
        config: FlattenConfig, PipelineConfig or None for defaults

    Returns:
        Polygon with points in curve order. Adjacent splines share their
        boundary point, so it appears twice.
    """
    tracer = get_tracer()
    config = _flatten_config(config)

    vertices = run_fixups(curve.vertices, curve.closed)
    splines = segment_splines(vertices)

    polygon = Polygon()
    for spline in splines:
        polygon.extend(sample_spline(spline, config.samples, config.curvature_epsilon))

    tracer.event(f"Flattened {len(splines)} splines into {len(polygon)} points")

    return polygon


@trace(label="flatten_curves")
def flatten_curves(curves, config=None):
    """Flatten independent curves, one polygon each."""
    return [flatten(curve, config) for curve in curves]


def _flatten_config(config):
    if config is None:
        return FlattenConfig()
    if not isinstance(config, FlattenConfig):
        config = config.flatten
    check_flatten_config(config)
    return config
