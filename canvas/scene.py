"""
canvas/scene.py

In-memory scene: shapes, text annotations and the view transform.
"""

from __future__ import annotations

from typing import List, Optional

from models import (
    DEFAULT_CIRCLE,
    DEFAULT_RECTANGLE,
    DEFAULT_TEXT_POS,
    Circle,
    Rectangle,
    Shape,
    TextAnnotation,
)

ZOOM_STEP = 0.1
MIN_ZOOM = 0.1
ROTATION_STEP = 45


class Scene:
    """
    Append-only scene model.

    Shapes and texts are painted in insertion order; all texts are painted
    after all shapes. The zoom level never drops below MIN_ZOOM and the
    rotation angle always stays in [0, 360).

    Mutators only change state. Re-rendering is the caller's job.
    """

    def __init__(self):
        self.shapes: List[Shape] = []
        self.texts: List[TextAnnotation] = []
        self.zoom_level: float = 1.0
        self.rotation_angle: float = 0

    def add_rectangle(self) -> Rectangle:
        """Append a rectangle with the default geometry."""
        rect = Rectangle(*DEFAULT_RECTANGLE)
        self.shapes.append(rect)
        return rect

    def add_circle(self) -> Circle:
        """Append a circle with the default geometry."""
        circle = Circle(*DEFAULT_CIRCLE)
        self.shapes.append(circle)
        return circle

    def add_text(self, content: Optional[str]) -> TextAnnotation:
        """Append a text annotation at the default position.

        Raises:
            ValueError: If content is None.
        """
        if content is None:
            raise ValueError("Text annotation content must not be None")
        x, y = DEFAULT_TEXT_POS
        annotation = TextAnnotation(content, x, y)
        self.texts.append(annotation)
        return annotation

    def zoom_in(self) -> float:
        self.zoom_level = max(MIN_ZOOM, self.zoom_level + ZOOM_STEP)
        return self.zoom_level

    def zoom_out(self) -> float:
        self.zoom_level = max(MIN_ZOOM, self.zoom_level - ZOOM_STEP)
        return self.zoom_level

    def rotate(self) -> float:
        self.rotation_angle = (self.rotation_angle + ROTATION_STEP) % 360
        return self.rotation_angle

    def is_empty(self) -> bool:
        return not self.shapes and not self.texts

    def transform_label(self) -> str:
        """Human-readable zoom/rotation summary, e.g. ``"Zoom 110% | Rotation 45°"``."""
        return f"Zoom {round(self.zoom_level * 100)}% | Rotation {self.rotation_angle:g}°"
