"""
canvas/view.py

Widget that displays the drawing surface and maps the mouse wheel to zoom.
"""

from __future__ import annotations

from typing import Callable, Optional

from PyQt6.QtCore import QSize
from PyQt6.QtGui import QPainter
from PyQt6.QtWidgets import QSizePolicy, QWidget

from canvas.surface import DrawingSurface
from settings import get_settings


class SurfaceView(QWidget):
    """
    Fixed-size view of a DrawingSurface.

    The view never paints scene content itself; it only copies the surface
    pixels, so what is shown is exactly what export captures.
    """

    def __init__(self, surface: DrawingSurface, parent=None):
        super().__init__(parent)
        self.surface = surface
        self.on_zoom_in: Optional[Callable[[], None]] = None
        self.on_zoom_out: Optional[Callable[[], None]] = None
        self.setFixedSize(surface.size())
        self.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed)

    def sizeHint(self) -> QSize:
        return self.surface.size()

    def set_zoom_callbacks(self, on_zoom_in: Callable[[], None], on_zoom_out: Callable[[], None]):
        """Set callbacks invoked for wheel up / wheel down."""
        self.on_zoom_in = on_zoom_in
        self.on_zoom_out = on_zoom_out

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.drawImage(0, 0, self.surface.image)
        painter.end()

    def wheelEvent(self, event):
        """Zoom with mouse wheel (one step per notch)."""
        if not get_settings().settings.canvas.zoom.wheel_enabled:
            super().wheelEvent(event)
            return
        delta = event.angleDelta().y()
        if delta > 0 and self.on_zoom_in:
            self.on_zoom_in()
        elif delta < 0 and self.on_zoom_out:
            self.on_zoom_out()
        event.accept()
