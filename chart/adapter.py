"""
chart/adapter.py

Owns the lifecycle of the single live chart bound to a drawing surface.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Optional

from PyQt6.QtGui import QPainter

from chart.backend import MatplotlibChart
from chart.base import RenderableChart
from models import ChartSpec

if TYPE_CHECKING:
    from canvas.surface import DrawingSurface

log = logging.getLogger(__name__)

ChartFactory = Callable[[ChartSpec, "DrawingSurface"], RenderableChart]


class ChartAdapter:
    """
    Keeps at most one chart alive for a surface.

    Replacing the configuration destroys the previous chart before the new
    one is created, so backend resources never pile up.

    Args:
        surface: The drawing surface charts are sized to.
        factory: Callable building a chart from (spec, surface). Defaults to
            the matplotlib backend.
    """

    def __init__(self, surface: "DrawingSurface", factory: Optional[ChartFactory] = None):
        self._surface = surface
        self._factory: ChartFactory = factory or MatplotlibChart.create
        self._chart: Optional[RenderableChart] = None

    @property
    def instance(self) -> Optional[RenderableChart]:
        return self._chart

    @property
    def has_chart(self) -> bool:
        return self._chart is not None

    @property
    def live_count(self) -> int:
        return 1 if self._chart is not None else 0

    def set_config(self, spec: ChartSpec) -> RenderableChart:
        """Replace the live chart with a new one built from ``spec``."""
        self.destroy()
        self._chart = self._factory(spec, self._surface)
        log.info("Chart configured: type=%s title=%r points=%d",
                 spec.chart_type, spec.title, len(spec.values))
        return self._chart

    def repaint(self, painter: QPainter) -> None:
        """Redraw the live chart, if any, with its current configuration."""
        if self._chart is None:
            return
        self._chart.update(painter)

    def destroy(self) -> None:
        """Release the live chart. Does nothing when there is none."""
        if self._chart is None:
            return
        self._chart.destroy()
        self._chart = None
