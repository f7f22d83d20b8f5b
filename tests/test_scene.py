"""Tests for the Scene model: default geometry, paint order, zoom clamping, rotation."""
from __future__ import annotations

import pytest

from canvas.scene import MIN_ZOOM, Scene
from models import Circle, Rectangle, TextAnnotation


class TestShapes:
    def test_add_rectangle_default_geometry(self, scene):
        rect = scene.add_rectangle()
        assert rect == Rectangle(50, 50, 100, 50)
        assert scene.shapes == [rect]

    def test_add_circle_default_geometry(self, scene):
        circle = scene.add_circle()
        assert circle == Circle(300, 100, 50)

    def test_rectangle_then_circle_paint_order(self, scene):
        scene.add_rectangle()
        scene.add_circle()
        assert len(scene.shapes) == 2
        assert scene.shapes[0].kind == "rectangle"
        assert scene.shapes[1].kind == "circle"

    def test_shapes_are_append_only(self, scene):
        for _ in range(3):
            scene.add_circle()
        scene.add_rectangle()
        assert [s.kind for s in scene.shapes] == ["circle", "circle", "circle", "rectangle"]

    def test_negative_dimensions_rejected(self):
        with pytest.raises(ValueError):
            Rectangle(0, 0, -1, 10)
        with pytest.raises(ValueError):
            Rectangle(0, 0, 10, -1)
        with pytest.raises(ValueError):
            Circle(0, 0, -5)

    def test_zero_dimensions_allowed(self):
        assert Rectangle(0, 0, 0, 0).width == 0
        assert Circle(0, 0, 0).radius == 0


class TestTexts:
    def test_add_text_default_position(self, scene):
        ann = scene.add_text("hello")
        assert ann == TextAnnotation("hello", 100, 100)
        assert scene.texts == [ann]

    def test_add_empty_text_is_kept(self, scene):
        scene.add_text("")
        assert scene.texts[0].content == ""

    def test_add_none_text_rejected(self, scene):
        with pytest.raises(ValueError):
            scene.add_text(None)
        assert scene.texts == []

    def test_texts_do_not_affect_shapes(self, scene):
        scene.add_text("a")
        scene.add_rectangle()
        assert len(scene.shapes) == 1
        assert len(scene.texts) == 1


class TestZoom:
    def test_default_zoom(self, scene):
        assert scene.zoom_level == 1.0

    def test_zoom_in_increments(self, scene):
        scene.zoom_in()
        assert scene.zoom_level == pytest.approx(1.1)
        scene.zoom_in()
        assert scene.zoom_level == pytest.approx(1.2)

    def test_zoom_out_clamps_at_floor(self, scene):
        for _ in range(20):
            scene.zoom_out()
        assert scene.zoom_level == 0.1

    def test_zoom_never_below_floor(self, scene):
        steps = ["out"] * 15 + ["in"] * 3 + ["out"] * 10 + ["in"]
        for step in steps:
            if step == "in":
                scene.zoom_in()
            else:
                scene.zoom_out()
            assert scene.zoom_level >= MIN_ZOOM

    def test_zoom_in_from_floor(self, scene):
        for _ in range(20):
            scene.zoom_out()
        scene.zoom_in()
        assert scene.zoom_level == pytest.approx(0.2)


class TestRotation:
    def test_default_rotation(self, scene):
        assert scene.rotation_angle == 0

    def test_rotate_steps_45(self, scene):
        assert scene.rotate() == 45
        assert scene.rotate() == 90

    def test_eight_rotations_return_to_zero(self, scene):
        for _ in range(8):
            scene.rotate()
        assert scene.rotation_angle == 0

    def test_rotation_stays_in_range(self, scene):
        for _ in range(30):
            angle = scene.rotate()
            assert 0 <= angle < 360


class TestHelpers:
    def test_is_empty(self, scene):
        assert scene.is_empty()
        scene.add_text("x")
        assert not scene.is_empty()

    def test_transform_label(self, scene):
        scene.zoom_in()
        scene.rotate()
        assert scene.transform_label() == "Zoom 110% | Rotation 45°"
