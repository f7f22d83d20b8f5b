"""
chart/base.py

Renderable chart capability implemented by chart backends.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from PyQt6.QtGui import QPainter

from models import ChartSpec

if TYPE_CHECKING:
    from canvas.surface import DrawingSurface


class RenderableChart(ABC):
    """
    A chart bound to one drawing surface and one ChartSpec.

    Lifecycle: ``create`` acquires backend resources, ``update`` paints the
    chart with its current configuration, ``destroy`` releases everything.
    A destroyed chart must not be updated again.
    """

    spec: ChartSpec

    @classmethod
    @abstractmethod
    def create(cls, spec: ChartSpec, surface: "DrawingSurface") -> "RenderableChart":
        """Build a chart for ``spec`` sized to ``surface``."""

    @abstractmethod
    def update(self, painter: QPainter) -> None:
        """Redraw the chart through ``painter``."""

    @abstractmethod
    def destroy(self) -> None:
        """Release backend resources. Safe to call more than once."""

    @property
    @abstractmethod
    def alive(self) -> bool:
        """True until destroy() has been called."""
