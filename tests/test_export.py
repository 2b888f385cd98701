"""Tests for polygon models, JSON artifacts and SVG previews."""

import json
import os

import numpy as np
import pytest

from bezierflat.config import PreviewConfig
from bezierflat.curves.flatten import flatten
from bezierflat.export.svg_preview import create_preview_svg
from bezierflat.io.save_artifacts import load_curve_data, save_json, save_svg
from bezierflat.models import Polygon


class TestPolygon:
    """Tests for the polygon output container."""

    def test_add_point_converts_to_float(self):
        """Test that points are stored as float pairs."""
        polygon = Polygon()
        polygon.add_point((1, 2))
        polygon.extend([np.array([3, 4])])

        assert polygon.points == [[1.0, 2.0], [3.0, 4.0]]
        assert len(polygon) == 2

    def test_as_array_and_bbox(self, quadratic_curve):
        """Test numpy and bbox views of a flattened arch."""
        polygon = flatten(quadratic_curve)

        arr = polygon.as_array()
        assert arr.shape == (len(polygon), 2)
        assert polygon.bbox()[0] == 0.0
        assert polygon.bbox()[2] == 10.0

    def test_empty_as_array(self):
        """Test that an empty polygon gives an empty (0, 2) array."""
        assert Polygon().as_array().shape == (0, 2)

    def test_to_shapely(self, square_curve):
        """Test conversion of a closed square to a shapely polygon."""
        polygon = flatten(square_curve)

        assert polygon.to_shapely(closed=True).area == pytest.approx(100.0)
        assert polygon.to_shapely().length == pytest.approx(40.0)


class TestArtifacts:
    """Tests for JSON input and output."""

    def test_polygon_json(self, temp_dir, line_curve):
        """Test saving a polygon as JSON."""
        path = os.path.join(temp_dir, "out", "polygon.json")
        save_json(flatten(line_curve), path)

        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)

        assert data == {"points": [[0.0, 0.0], [10.0, 0.0]]}

    def test_curve_json_round_trip(self, temp_dir, quadratic_curve):
        """Test that a saved curve loads back with the same vertices."""
        from bezierflat.curves.bezier import BezierCurve

        quadratic_curve.close()
        path = os.path.join(temp_dir, "curve.json")
        save_json(quadratic_curve.to_data(), path)

        loaded = BezierCurve.from_data(load_curve_data(path))

        assert loaded.closed
        assert loaded.vertices == quadratic_curve.vertices

    def test_missing_curve_file(self, temp_dir):
        """Test that a missing curve file is reported."""
        with pytest.raises(FileNotFoundError):
            load_curve_data(os.path.join(temp_dir, "nope.json"))


class TestSvgPreview:
    """Tests for SVG preview generation."""

    def test_open_curve_is_polyline(self, quadratic_curve):
        """Test that an open curve is drawn as a polyline."""
        polygon = flatten(quadratic_curve)

        svg = create_preview_svg([polygon], [quadratic_curve]).tostring()

        assert "<polyline" in svg
        assert "<circle" not in svg

    def test_closed_curve_is_polygon(self, square_curve):
        """Test that a closed curve is drawn as a polygon."""
        svg = create_preview_svg([flatten(square_curve)], [square_curve]).tostring()

        assert "<polygon" in svg

    def test_control_points(self, quadratic_curve):
        """Test that control vertices are marked when enabled."""
        config = PreviewConfig(show_control_points=True)

        svg = create_preview_svg([flatten(quadratic_curve)], [quadratic_curve], config).tostring()

        assert svg.count("<circle") == 3

    def test_save_svg(self, temp_dir, line_curve):
        """Test writing a preview to disk."""
        path = os.path.join(temp_dir, "preview.svg")
        save_svg(create_preview_svg([flatten(line_curve)]), path)

        with open(path, "r", encoding="utf-8") as f:
            assert f.read().startswith("<svg")
