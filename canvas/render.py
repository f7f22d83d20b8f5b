"""
canvas/render.py

Full-redraw render pipeline for the scene.

Every call clears the surface and repaints the chart, then shapes, then
text, under a zoom + rotation transform pivoted on the surface center.
"""

from __future__ import annotations

from typing import Optional

from PyQt6.QtCore import QPointF, QRectF, Qt
from PyQt6.QtGui import QBrush, QFont, QPainter, QPen

from canvas.scene import Scene
from canvas.surface import DrawingSurface
from chart.adapter import ChartAdapter
from debug_trace import PAINT, trace
from models import Circle, Rectangle
from settings import CanvasSettings, get_settings
from utils import css_to_qcolor


def apply_scene_transform(painter: QPainter, surface: DrawingSurface, scene: Scene) -> None:
    """Scale and rotate about the surface center, keeping the drawing origin in place."""
    cx = surface.width() / 2
    cy = surface.height() / 2
    painter.translate(cx, cy)
    painter.scale(scene.zoom_level, scene.zoom_level)
    painter.rotate(scene.rotation_angle)
    painter.translate(-cx, -cy)


def paint_shapes(painter: QPainter, scene: Scene, style: CanvasSettings) -> None:
    rect_color = css_to_qcolor(style.shapes.rectangle_fill)
    circle_color = css_to_qcolor(style.shapes.circle_fill)
    painter.setPen(Qt.PenStyle.NoPen)
    for shape in scene.shapes:
        if isinstance(shape, Rectangle):
            painter.fillRect(QRectF(shape.x, shape.y, shape.width, shape.height), rect_color)
        elif isinstance(shape, Circle):
            painter.setBrush(QBrush(circle_color))
            painter.drawEllipse(QPointF(shape.x, shape.y), shape.radius, shape.radius)


def paint_texts(painter: QPainter, scene: Scene, style: CanvasSettings) -> None:
    if not scene.texts:
        return
    font = QFont(style.text.font_family)
    font.setPixelSize(style.text.font_size)
    painter.setFont(font)
    painter.setPen(QPen(css_to_qcolor(style.text.color)))
    for text in scene.texts:
        # Position is the start of the text baseline
        painter.drawText(QPointF(text.x, text.y), text.content)


def render_scene(
    surface: DrawingSurface,
    scene: Scene,
    chart: Optional[ChartAdapter] = None,
    style: Optional[CanvasSettings] = None,
) -> None:
    """
    Repaint the whole surface from the scene.

    Args:
        surface: Target surface; its previous pixels are discarded.
        scene: Shapes, texts and the zoom/rotation transform.
        chart: Chart adapter whose live chart (if any) is repainted first.
        style: Canvas colors and fonts (defaults to the global settings).
    """
    if style is None:
        style = get_settings().settings.canvas
    trace(
        f"render: shapes={len(scene.shapes)} texts={len(scene.texts)} "
        f"zoom={scene.zoom_level:.2f} rotation={scene.rotation_angle}",
        PAINT,
    )

    surface.clear()
    with surface.painting() as painter:
        painter.save()
        apply_scene_transform(painter, surface, scene)
        if chart is not None:
            chart.repaint(painter)
        paint_shapes(painter, scene, style)
        paint_texts(painter, scene, style)
        painter.restore()
