"""Tests for the render pipeline: clearing, transform, paint order and chart placement."""
from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from PyQt6.QtCore import QPointF, QRectF
from PyQt6.QtGui import QImage, QPainter

from canvas.render import paint_shapes, paint_texts, render_scene
from models import ChartSpec
from settings import CanvasSettings


def _is_blank(image: QImage) -> bool:
    blank = QImage(image.size(), image.format())
    blank.fill(0)
    return image == blank


def _assert_color(image: QImage, x: int, y: int, rgb, alpha: int, tol: int = 4):
    c = image.pixelColor(x, y)
    assert abs(c.alpha() - alpha) <= tol, f"alpha at ({x},{y}) = {c.alpha()}"
    for got, want in zip((c.red(), c.green(), c.blue()), rgb):
        assert abs(got - want) <= tol, f"color at ({x},{y}) = {c.getRgb()}"


TEAL = (75, 192, 192)
MAGENTA = (192, 75, 192)


class TestEmptyScene:
    def test_empty_scene_leaves_surface_blank(self, surface, scene):
        render_scene(surface, scene)
        assert _is_blank(surface.image)

    def test_repeated_render_is_idempotent(self, surface, scene, chart_adapter):
        render_scene(surface, scene, chart_adapter)
        render_scene(surface, scene, chart_adapter)
        assert _is_blank(surface.image)

    def test_render_clears_previous_pixels(self, surface, scene):
        scene.add_rectangle()
        render_scene(surface, scene)
        assert not _is_blank(surface.image)
        render_scene(surface, type(scene)())
        assert _is_blank(surface.image)


class TestShapePixels:
    def test_rectangle_fill(self, surface, scene):
        scene.add_rectangle()
        render_scene(surface, scene)
        _assert_color(surface.image, 100, 75, TEAL, 128)
        assert surface.image.pixelColor(160, 75).alpha() == 0

    def test_circle_fill(self, surface, scene):
        scene.add_circle()
        render_scene(surface, scene)
        _assert_color(surface.image, 300, 100, MAGENTA, 128)
        assert surface.image.pixelColor(300, 160).alpha() == 0

    def test_later_shape_painted_on_top(self, surface, scene):
        scene.add_rectangle()
        scene.add_rectangle()
        render_scene(surface, scene)
        # Two 50% layers composite to 75% coverage
        assert surface.image.pixelColor(100, 75).alpha() == pytest.approx(191, abs=4)

    def test_render_is_deterministic(self, surface, scene):
        scene.add_rectangle()
        scene.add_circle()
        render_scene(surface, scene)
        first = surface.snapshot()
        render_scene(surface, scene)
        assert surface.image == first


class TestTransform:
    def test_rotation_pivots_on_center(self, surface, scene):
        # 400x300 surface: center (200, 150). 180° maps (100, 75) to (300, 225)
        scene.add_rectangle()
        for _ in range(4):
            scene.rotate()
        render_scene(surface, scene)
        _assert_color(surface.image, 300, 225, TEAL, 128)
        assert surface.image.pixelColor(100, 75).alpha() == 0

    def test_rotation_is_clockwise_on_screen(self, surface, scene):
        # 90°: (x, y) relative to center -> (-y, x); (100, 75) -> (275, 50)
        scene.add_rectangle()
        scene.rotate()
        scene.rotate()
        render_scene(surface, scene)
        _assert_color(surface.image, 275, 50, TEAL, 128)

    def test_zoom_scales_about_center(self, surface, scene):
        # zoom 2: (140, 90) -> (200 + 2 * -60, 150 + 2 * -60) = (80, 30)
        scene.add_rectangle()
        scene.zoom_level = 2.0
        render_scene(surface, scene)
        _assert_color(surface.image, 80, 30, TEAL, 128)

    def test_zoom_out_shrinks_toward_center(self, surface, scene):
        scene.add_rectangle()
        for _ in range(5):
            scene.zoom_out()
        render_scene(surface, scene)
        # zoom 0.5: (60, 55) -> (130, 102.5)
        _assert_color(surface.image, 130, 102, TEAL, 128)
        assert surface.image.pixelColor(60, 55).alpha() == 0


class TestChartLayer:
    def test_chart_painted_when_configured(self, surface, scene, chart_adapter):
        chart_adapter.set_config(ChartSpec.from_form("T", "bar", "3,1,2"))
        render_scene(surface, scene, chart_adapter)
        assert not _is_blank(surface.image)

    def test_chart_ignores_scene_transform(self, surface, scene, chart_adapter):
        chart_adapter.set_config(ChartSpec.from_form("T", "bar", "3,1,2"))
        render_scene(surface, scene, chart_adapter)
        upright = surface.snapshot()
        scene.rotate()
        scene.zoom_in()
        render_scene(surface, scene, chart_adapter)
        assert surface.image == upright

    def test_shapes_painted_over_chart(self, surface, scene, chart_adapter):
        chart_adapter.set_config(ChartSpec.from_form("", "bar", "1"))
        scene.add_rectangle()
        render_scene(surface, scene, chart_adapter)
        c = surface.image.pixelColor(100, 75)
        assert c.alpha() >= 128


class TestPaintOrder:
    def test_shapes_in_insertion_order(self, qapp, scene):
        scene.add_rectangle()
        scene.add_circle()
        painter = MagicMock(spec=QPainter)
        paint_shapes(painter, scene, CanvasSettings())
        calls = [c[0] for c in painter.method_calls if c[0] in ("fillRect", "drawEllipse")]
        assert calls == ["fillRect", "drawEllipse"]
        painter.fillRect.assert_called_once()
        assert painter.fillRect.call_args[0][0] == QRectF(50, 50, 100, 50)
        painter.drawEllipse.assert_called_once_with(QPointF(300, 100), 50, 50)

    def test_texts_in_insertion_order(self, qapp, scene):
        scene.add_text("first")
        scene.add_text("second")
        painter = MagicMock(spec=QPainter)
        paint_texts(painter, scene, CanvasSettings())
        drawn = [c.args for c in painter.drawText.call_args_list]
        assert drawn == [(QPointF(100, 100), "first"), (QPointF(100, 100), "second")]

    def test_text_font(self, qapp, scene):
        scene.add_text("x")
        painter = MagicMock(spec=QPainter)
        paint_texts(painter, scene, CanvasSettings())
        font = painter.setFont.call_args[0][0]
        assert font.pixelSize() == 20
        assert font.family() == "Arial"

    def test_no_texts_no_font_change(self, qapp, scene):
        painter = MagicMock(spec=QPainter)
        paint_texts(painter, scene, CanvasSettings())
        painter.setFont.assert_not_called()
