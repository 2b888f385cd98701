"""
Artifact reading and writing for bezierflat.

Handles curve JSON input plus polygon JSON and SVG preview output.
"""

import json
import os

from bezierflat.models import CurveData
from bezierflat.tracer import get_tracer


def ensure_dir(path):
    """Create directory if it does not exist."""
    if path:
        os.makedirs(path, exist_ok=True)


def load_curve_data(path):
    """
    Load a curve description saved as CurveData JSON.

    Raises FileNotFoundError for a missing file and pydantic's
    ValidationError for malformed content.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Curve file not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    get_tracer().event(f"Loaded curve: {path}")
    return CurveData.model_validate(data)


def save_json(data, path, indent=2):
    """
    Save a dictionary or Pydantic model to JSON.
    """
    tracer = get_tracer()

    ensure_dir(os.path.dirname(path))

    if hasattr(data, "model_dump"):
        data = data.model_dump(mode="json")

    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent, default=str)

    tracer.event(f"Saved JSON: {path}")


def save_svg(svg_content, path):
    """
    Save SVG content (an svgwrite Drawing or a string) to file.
    """
    tracer = get_tracer()

    ensure_dir(os.path.dirname(path))

    if hasattr(svg_content, "tostring"):
        content = svg_content.tostring()
    else:
        content = str(svg_content)

    with open(path, "w", encoding="utf-8") as f:
        f.write(content)

    tracer.event(f"Saved SVG: {path}")
