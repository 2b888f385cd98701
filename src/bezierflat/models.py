"""
Pydantic data models for bezierflat.

Vertices are frozen values; the curve builder replaces them instead of
mutating them. Polygons only ever grow by appending points.
"""

import math
from enum import Enum
from typing import List, Tuple

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from bezierflat.errors import InvalidOperationError


class VertexKind(str, Enum):
    """Role of a vertex within a Bezier curve."""
    ENDPOINT = "endpoint"
    MIDPOINT = "midpoint"


class PolarHandle(BaseModel):
    """Tangent handle as a polar offset from its vertex. Radius 0 means unset."""
    angle: float = 0.0
    radius: float = 0.0

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("radius")
    @classmethod
    def _absolute_radius(cls, value):
        return abs(value)

    @property
    def is_set(self):
        return self.radius != 0

    def offset(self):
        """Cartesian offset of the handle tip from its vertex."""
        return polar_to_xy(self.radius, self.angle)


NO_HANDLE = PolarHandle()


class Vertex(BaseModel):
    """A tagged curve vertex with optional forward/reverse handles."""
    kind: VertexKind = VertexKind.ENDPOINT
    point: Tuple[float, float]
    handle_fwd: PolarHandle = NO_HANDLE
    handle_rev: PolarHandle = NO_HANDLE

    model_config = ConfigDict(frozen=True, extra="forbid")

    @property
    def is_endpoint(self):
        return self.kind == VertexKind.ENDPOINT

    @property
    def is_midpoint(self):
        return self.kind == VertexKind.MIDPOINT

    @property
    def has_handles(self):
        return self.handle_fwd.is_set or self.handle_rev.is_set

    @model_validator(mode="after")
    def _no_handles_on_midpoint(self):
        # raised inside validation, so callers see it as a pydantic ValidationError
        if self.is_midpoint and self.has_handles:
            raise InvalidOperationError("can't place a handle on a curve midpoint")
        return self


class CurveData(BaseModel):
    """Serializable snapshot of a Bezier curve."""
    vertices: List[Vertex] = Field(default_factory=list)
    closed: bool = False

    model_config = ConfigDict(extra="forbid")


class Polygon(BaseModel):
    """Flattened output: an ordered, append-only list of [x, y] points."""
    points: List[List[float]] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")

    def add_point(self, point):
        self.points.append([float(point[0]), float(point[1])])

    def extend(self, points):
        for point in points:
            self.add_point(point)

    def __len__(self):
        return len(self.points)

    def as_array(self):
        """Return the points as an (N, 2) float array."""
        if not self.points:
            return np.zeros((0, 2))
        return np.array(self.points, dtype=float)

    def bbox(self):
        return compute_bbox(self.points)

    def to_shapely(self, closed=False):
        """
        Convert to a shapely geometry for downstream modeling.

        Returns a Polygon when closed (needs at least 3 points), else a LineString.
        """
        from shapely.geometry import LineString
        from shapely.geometry import Polygon as ShapelyPolygon

        if closed:
            return ShapelyPolygon(self.points)
        return LineString(self.points)


# Point helpers

def polar_to_xy(radius, theta):
    """Convert polar (radius, theta) to a cartesian (x, y) tuple."""
    return (radius * math.cos(theta), radius * math.sin(theta))


def add_points(p, q):
    return (p[0] + q[0], p[1] + q[1])


def points_equal(p, q):
    """Exact coordinate equality, no tolerance."""
    return p[0] == q[0] and p[1] == q[1]


def compute_bbox(points):
    """
    Compute bounding box from a list of [x, y] points.

    Returns [min_x, min_y, max_x, max_y].
    """
    if not points:
        return [0.0, 0.0, 0.0, 0.0]

    xs = [p[0] for p in points]
    ys = [p[1] for p in points]
    return [min(xs), min(ys), max(xs), max(ys)]
