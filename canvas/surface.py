"""
canvas/surface.py

Off-screen drawing surface backed by a QImage.

The surface is the single raster target: the render pipeline paints into it,
the view displays it, and export encodes its current pixels.
"""

from __future__ import annotations

import base64
from contextlib import contextmanager
from typing import Iterator, Optional

from PyQt6.QtCore import QBuffer, QByteArray, QIODevice, QRect, QSize, Qt
from PyQt6.QtGui import QColor, QImage, QPainter

# Qt image writer names for the supported mime types
_QT_IMAGE_FORMATS = {
    "image/png": "PNG",
    "image/jpeg": "JPEG",
}


class DrawingSurface:
    """
    Fixed-size ARGB raster surface.

    Args:
        width: Surface width in pixels (must be positive).
        height: Surface height in pixels (must be positive).
    """

    def __init__(self, width: int, height: int):
        width, height = int(width), int(height)
        if width <= 0 or height <= 0:
            raise ValueError(f"Surface size must be positive, got {width}x{height}")
        self._image = QImage(QSize(width, height), QImage.Format.Format_ARGB32_Premultiplied)
        self._image.fill(Qt.GlobalColor.transparent)
        self._painting = False

    @classmethod
    def for_screen(cls, available: QRect, width_fraction: float, height_fraction: float) -> "DrawingSurface":
        """Create a surface sized as a fraction of a screen's available geometry."""
        return cls(
            max(1, int(available.width() * width_fraction)),
            max(1, int(available.height() * height_fraction)),
        )

    def width(self) -> int:
        return self._image.width()

    def height(self) -> int:
        return self._image.height()

    def size(self) -> QSize:
        return self._image.size()

    def rect(self) -> QRect:
        return self._image.rect()

    @property
    def image(self) -> QImage:
        """The live backing image (do not paint into it directly)."""
        return self._image

    def snapshot(self) -> QImage:
        """Return a detached copy of the current pixels."""
        return self._image.copy()

    def clear(self) -> None:
        """Reset every pixel to fully transparent."""
        if self._painting:
            raise RuntimeError("Cannot clear the surface while a painter is active")
        self._image.fill(Qt.GlobalColor.transparent)

    @contextmanager
    def painting(self) -> Iterator[QPainter]:
        """Open an antialiased QPainter on the surface for the duration of the block."""
        if self._painting:
            raise RuntimeError("Surface is already being painted")
        painter = QPainter(self._image)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
        painter.setRenderHint(QPainter.RenderHint.TextAntialiasing, True)
        painter.setRenderHint(QPainter.RenderHint.SmoothPixmapTransform, True)
        self._painting = True
        try:
            yield painter
        finally:
            painter.end()
            self._painting = False

    def encode(self, mime: str, quality: int = -1, background: Optional[QColor] = None) -> bytes:
        """
        Encode the current pixels.

        Args:
            mime: "image/png" or "image/jpeg".
            quality: Encoder quality 0-100, or -1 for the Qt default.
            background: Color to flatten transparent pixels onto (formats
                without alpha render transparency as black otherwise).

        Returns:
            Encoded image bytes.

        Raises:
            ValueError: If the mime type is not supported.
            RuntimeError: If Qt fails to encode the image.
        """
        qt_format = _QT_IMAGE_FORMATS.get(mime)
        if qt_format is None:
            raise ValueError(f"Unsupported image mime type: {mime}")

        image = self._image
        if background is not None:
            flat = QImage(image.size(), QImage.Format.Format_RGB32)
            flat.fill(background)
            painter = QPainter(flat)
            painter.drawImage(0, 0, image)
            painter.end()
            image = flat

        data = QByteArray()
        buf = QBuffer(data)
        buf.open(QIODevice.OpenModeFlag.WriteOnly)
        ok = image.save(buf, qt_format, quality)
        buf.close()
        if not ok:
            raise RuntimeError(f"Failed to encode surface as {qt_format}")
        return bytes(data)

    def to_data_uri(self, mime: str, quality: int = -1, background: Optional[QColor] = None) -> str:
        """Encode the current pixels as a ``data:<mime>;base64,...`` URI."""
        payload = base64.b64encode(self.encode(mime, quality, background)).decode("ascii")
        return f"data:{mime};base64,{payload}"
