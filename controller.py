"""
controller.py

User actions: mutate the scene or the chart, then repaint the surface.

Every action runs to completion synchronously and ends with a full render,
so the surface always reflects the current state when it is exported.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional

from canvas.render import render_scene
from canvas.scene import Scene
from canvas.surface import DrawingSurface
from chart.adapter import ChartAdapter
from debug_trace import ACTION, trace
from export import DirectorySink, DownloadSink, export_image
from models import ChartSpec
from settings import SettingsManager, get_settings

log = logging.getLogger(__name__)

CHART_UPDATED_MESSAGE = "Chart updated successfully!"


class InteractionController:
    """
    Maps toolbar/form actions to scene and chart mutations.

    Args:
        scene: Scene model to mutate.
        surface: Surface every action repaints.
        chart: Chart adapter bound to ``surface``.
        settings_manager: Settings source (defaults to the global manager).
        sink: Export destination (defaults to the configured export directory).
        on_status: Called with a status message after a chart update.
        on_rendered: Called after each render so views can refresh.
    """

    def __init__(
        self,
        scene: Scene,
        surface: DrawingSurface,
        chart: ChartAdapter,
        settings_manager: Optional[SettingsManager] = None,
        sink: Optional[DownloadSink] = None,
        on_status: Optional[Callable[[str], None]] = None,
        on_rendered: Optional[Callable[[], None]] = None,
    ):
        self.scene = scene
        self.surface = surface
        self.chart = chart
        self.settings_manager = settings_manager or get_settings()
        self.sink: DownloadSink = sink or DirectorySink(self.settings_manager.get_export_dir())
        self.on_status = on_status
        self.on_rendered = on_rendered

    def render(self) -> None:
        render_scene(self.surface, self.scene, self.chart, self.settings_manager.settings.canvas)
        if self.on_rendered:
            self.on_rendered()

    # ----------------------------
    # Scene actions
    # ----------------------------

    def add_rectangle(self) -> None:
        self.scene.add_rectangle()
        self.render()

    def add_circle(self) -> None:
        self.scene.add_circle()
        self.render()

    def add_text(self, content: Optional[str]) -> bool:
        """Add a text annotation.

        Args:
            content: Text from the prompt, or None if the prompt was cancelled.

        Returns:
            True if an annotation was added, False if the action was aborted.
        """
        if content is None:
            trace("add_text aborted: prompt cancelled", ACTION)
            return False
        self.scene.add_text(content)
        self.render()
        return True

    def zoom_in(self) -> None:
        self.scene.zoom_in()
        self.render()

    def zoom_out(self) -> None:
        self.scene.zoom_out()
        self.render()

    def rotate(self) -> None:
        self.scene.rotate()
        self.render()

    # ----------------------------
    # Chart and export
    # ----------------------------

    def update_chart(self, title: str, chart_type: str, data_text: str) -> ChartSpec:
        """Rebuild the chart from the current form values and repaint.

        Args:
            title: Chart title.
            chart_type: One of models.CHART_TYPES.
            data_text: Comma-separated values; bad tokens become NaN.

        Returns:
            The spec the new chart was built from.
        """
        spec = ChartSpec.from_form(
            title, chart_type, data_text,
            label_prefix=self.settings_manager.settings.chart.label_prefix,
        )
        trace(f"update_chart: {chart_type} with {len(spec.values)} values", ACTION)
        self.chart.set_config(spec)
        if self.on_status:
            self.on_status(CHART_UPDATED_MESSAGE)
        self.render()
        return spec

    def export(self, fmt: str) -> Path:
        """Export the surface as it is currently painted."""
        path = export_image(self.surface, fmt, self.sink, self.settings_manager.settings.export)
        trace(f"exported {fmt} to {path}", ACTION)
        return path

    def shutdown(self) -> None:
        """Release the live chart."""
        self.chart.destroy()
