"""
Post-definition fixups for Bezier vertex lists.

Run once before flattening: handles become control midpoints, closed
curves get their closing vertex, then the structure is validated. Each
step returns a new tuple and leaves its input untouched.
"""

from bezierflat.errors import InvalidCurveError, InvalidStateError
from bezierflat.models import NO_HANDLE, Vertex, VertexKind, add_points, points_equal
from bezierflat.tracer import get_tracer


def expand_handles(vertices):
    """
    Convert polar handles into midpoint vertices.

    A reverse handle adds a midpoint before its vertex, a forward handle one
    after it. The result is rotated to start at the first endpoint.
    """
    expanded = []
    for v in vertices:
        if not v.has_handles:
            expanded.append(v)
            continue
        if v.handle_rev.is_set:
            expanded.append(_control_midpoint(v, v.handle_rev))
        expanded.append(v.model_copy(update={"handle_fwd": NO_HANDLE, "handle_rev": NO_HANDLE}))
        if v.handle_fwd.is_set:
            expanded.append(_control_midpoint(v, v.handle_fwd))

    start = next((i for i, v in enumerate(expanded) if v.is_endpoint), 0)
    return tuple(expanded[start:] + expanded[:start])


def _control_midpoint(vertex, handle):
    return Vertex(kind=VertexKind.MIDPOINT, point=add_points(vertex.point, handle.offset()))


def close_curve(vertices, closed):
    """Append the first vertex when a closed curve does not already end on it."""
    vertices = tuple(vertices)
    if not closed:
        return vertices
    if not vertices:
        raise InvalidCurveError("bezier curve must have at least two points")

    first = vertices[0]
    last = vertices[-1]
    if not first.is_endpoint:
        raise InvalidCurveError("first control vertex should be an endpoint")

    if last.kind == VertexKind.ENDPOINT:
        if not points_equal(last.point, first.point):
            return vertices + (first,)
        return vertices
    if last.kind == VertexKind.MIDPOINT:
        return vertices + (first,)
    raise InvalidStateError(f"bad vertex type {last.kind!r}")


def validate_vertices(vertices, closed):
    """Basic structural checks on a fixed-up vertex list."""
    n = len(vertices)
    if n < 2:
        raise InvalidCurveError("bezier curve must have at least two points")
    if not vertices[0].is_endpoint:
        raise InvalidCurveError("bezier curve must start with an endpoint")
    if not closed and not vertices[-1].is_endpoint:
        raise InvalidCurveError("non-closed bezier curve must end with an endpoint")


def run_fixups(vertices, closed):
    """Handle expansion, closure and validation, in that order."""
    tracer = get_tracer()

    fixed = expand_handles(vertices)
    fixed = close_curve(fixed, closed)
    validate_vertices(fixed, closed)

    tracer.event(f"Fixups: {len(vertices)} -> {len(fixed)} vertices", level="DEBUG")

    return fixed
