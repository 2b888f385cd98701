"""
SVG previews of flattened curves.

Draws each polygon as a polyline (or closed polygon) and can mark the curve's
control vertices: filled dots for endpoints, hollow ones for midpoints.
"""

import svgwrite

from bezierflat.config import PreviewConfig
from bezierflat.models import compute_bbox
from bezierflat.tracer import get_tracer, trace


@trace(label="create_preview_svg")
def create_preview_svg(polygons, curves=None, config=None):
    """
    Create an SVG document showing flattened polygons.

    Args:
        polygons: list of Polygon objects
        curves: matching list of BezierCurve objects (optional); used for the
            closed flag and, when enabled, the control vertex markers
        config: PreviewConfig (defaults when None)

    Returns:
        svgwrite.Drawing object
    """
    tracer = get_tracer()
    config = config or PreviewConfig()
    curves = list(curves or [])

    all_points = [p for polygon in polygons for p in polygon.points]
    if config.show_control_points:
        all_points += [list(v.point) for curve in curves for v in curve.vertices]

    min_x, min_y, max_x, max_y = compute_bbox(all_points)
    m = config.margin
    width = max(max_x - min_x, 1.0) + 2 * m
    height = max(max_y - min_y, 1.0) + 2 * m

    dwg = svgwrite.Drawing(size=(f"{width:.2f}px", f"{height:.2f}px"))
    dwg.viewbox(min_x - m, min_y - m, width, height)

    group = dwg.g(id="polygons", fill="none", stroke=config.stroke_color,
                  stroke_width=config.stroke_width)

    for i, polygon in enumerate(polygons):
        if len(polygon) < 2:
            continue
        points = [(p[0], p[1]) for p in polygon.points]
        closed = i < len(curves) and curves[i].closed
        if closed:
            group.add(dwg.polygon(points=points, id=f"polygon_{i}"))
        else:
            group.add(dwg.polyline(points=points, id=f"polygon_{i}"))

    dwg.add(group)

    if config.show_control_points and curves:
        dwg.add(_control_point_group(dwg, curves, config))

    tracer.event(f"Preview SVG with {len(polygons)} polygons")

    return dwg


def _control_point_group(dwg, curves, config):
    radius = 2 * config.stroke_width
    group = dwg.g(id="control_points", stroke=config.stroke_color,
                  stroke_width=config.stroke_width / 2)

    for curve in curves:
        for v in curve.vertices:
            fill = config.stroke_color if v.is_endpoint else "none"
            group.add(dwg.circle(center=v.point, r=radius, fill=fill))

    return group
