"""
chart/backend.py

matplotlib chart backend.

Each chart owns a ``Figure`` with an Agg canvas sized to the drawing surface.
``update`` re-draws the figure and blits the RGBA buffer onto the surface in
device coordinates, so the chart fills the surface regardless of the zoom and
rotation applied to shapes and text.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Callable, Dict, List, Optional, Sequence, Tuple

import numpy as np
from matplotlib.axes import Axes
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure
from PyQt6.QtGui import QImage, QPainter

from chart.base import RenderableChart
from models import ChartSpec
from settings import ChartSettings, get_settings
from utils import css_to_mpl_color

if TYPE_CHECKING:
    from canvas.surface import DrawingSurface

log = logging.getLogger(__name__)

RGBA = Tuple[float, float, float, float]

# Radar and polar area charts start at 12 o'clock and run clockwise
_POLAR_THETA_OFFSET = math.pi / 2
_DOUGHNUT_RING_WIDTH = 0.5
_RADAR_FILL_ALPHA = 0.2


def cycle_colors(palette: Sequence[str], count: int, fallback: str) -> List[RGBA]:
    """Assign one palette color per data point, wrapping around the palette."""
    if not palette:
        return [css_to_mpl_color(fallback)] * count
    return [css_to_mpl_color(palette[i % len(palette)]) for i in range(count)]


def finite_or_nan(values: Sequence[float]) -> List[float]:
    """Replace infinite values with NaN."""
    return [v if math.isfinite(v) else math.nan for v in values]


class MatplotlibChart(RenderableChart):
    """
    Chart rendered with matplotlib's Agg backend.

    Args:
        spec: Chart configuration.
        width: Figure width in pixels.
        height: Figure height in pixels.
        style: Chart styling (palette, border, dpi).
    """

    def __init__(self, spec: ChartSpec, width: int, height: int, style: ChartSettings):
        self.spec = spec
        self._style = style
        dpi = style.dpi or 100
        self._figure: Optional[Figure] = Figure(
            figsize=(width / dpi, height / dpi),
            dpi=dpi,
            facecolor="none",
            layout="constrained",
        )
        self._canvas: Optional[FigureCanvasAgg] = FigureCanvasAgg(self._figure)
        self._image: Optional[QImage] = None
        self._build()
        log.debug("Created %s chart with %d values", spec.chart_type, len(spec.values))

    @classmethod
    def create(cls, spec: ChartSpec, surface: "DrawingSurface",
               style: Optional[ChartSettings] = None) -> "MatplotlibChart":
        if style is None:
            style = get_settings().settings.chart
        return cls(spec, surface.width(), surface.height(), style)

    @property
    def alive(self) -> bool:
        return self._figure is not None

    @property
    def figure(self) -> Optional[Figure]:
        return self._figure

    # ----------------------------
    # Lifecycle
    # ----------------------------

    def update(self, painter: QPainter) -> None:
        if not self.alive:
            raise RuntimeError("Cannot update a destroyed chart")
        image = self.render_image()
        painter.save()
        painter.resetTransform()
        painter.drawImage(0, 0, image)
        painter.restore()

    def destroy(self) -> None:
        if self._figure is None:
            return
        self._figure.clear()
        self._figure = None
        self._canvas = None
        self._image = None
        log.debug("Destroyed %s chart", self.spec.chart_type)

    def render_image(self) -> QImage:
        """Draw the figure and return its pixels as a QImage."""
        self._canvas.draw()
        buf = np.asarray(self._canvas.buffer_rgba())
        h_px, w_px = buf.shape[:2]
        data = buf.tobytes()
        self._image = QImage(data, w_px, h_px, 4 * w_px, QImage.Format.Format_RGBA8888).copy()
        return self._image

    # ----------------------------
    # Figure construction
    # ----------------------------

    def _build(self) -> None:
        spec = self.spec
        polar = spec.chart_type in ("radar", "polarArea")
        ax = self._figure.add_subplot(projection="polar" if polar else None)
        ax.set_facecolor("none")

        colors = cycle_colors(self._style.palette, len(spec.values), self._style.border_color)
        builder = _BUILDERS[spec.chart_type]
        builder(ax, finite_or_nan(spec.values), spec.labels, colors, self._style)

        if spec.title:
            ax.set_title(spec.title)


def _plot_bar(ax: Axes, values: List[float], labels: List[str], colors: List[RGBA],
              style: ChartSettings) -> None:
    x = np.arange(len(values))
    ax.bar(x, values, color=colors, edgecolor=css_to_mpl_color(style.border_color),
           linewidth=style.border_width)
    ax.set_xticks(x, labels)


def _plot_line(ax: Axes, values: List[float], labels: List[str], colors: List[RGBA],
               style: ChartSettings) -> None:
    x = np.arange(len(values))
    border = css_to_mpl_color(style.border_color)
    ax.plot(x, values, color=border, linewidth=style.border_width)
    ax.scatter(x, values, c=colors, edgecolors=[border], linewidths=style.border_width, zorder=3)
    ax.set_xticks(x, labels)


def _pie_slices(values: List[float], labels: List[str], colors: List[RGBA]):
    """Keep only wedges with a finite positive size."""
    kept = [(v, lbl, c) for v, lbl, c in zip(values, labels, colors) if math.isfinite(v) and v > 0]
    return [k[0] for k in kept], [k[1] for k in kept], [k[2] for k in kept]


def _plot_pie(ax: Axes, values: List[float], labels: List[str], colors: List[RGBA],
              style: ChartSettings, ring_width: Optional[float] = None) -> None:
    sizes, kept_labels, kept_colors = _pie_slices(values, labels, colors)
    ax.set_aspect("equal")
    ax.set_axis_off()
    if not sizes:
        return
    wedgeprops: Dict[str, object] = {
        "edgecolor": css_to_mpl_color(style.border_color),
        "linewidth": style.border_width,
    }
    if ring_width is not None:
        wedgeprops["width"] = ring_width
    ax.pie(sizes, labels=kept_labels, colors=kept_colors, startangle=90,
           counterclock=False, wedgeprops=wedgeprops)


def _plot_doughnut(ax: Axes, values: List[float], labels: List[str], colors: List[RGBA],
                   style: ChartSettings) -> None:
    _plot_pie(ax, values, labels, colors, style, ring_width=_DOUGHNUT_RING_WIDTH)


def _polar_angles(count: int) -> np.ndarray:
    return np.linspace(0.0, 2 * math.pi, count, endpoint=False)


def _setup_polar(ax: Axes, angles: np.ndarray, labels: List[str]) -> None:
    ax.set_theta_offset(_POLAR_THETA_OFFSET)
    ax.set_theta_direction(-1)
    ax.set_xticks(angles, labels)


def _plot_radar(ax: Axes, values: List[float], labels: List[str], colors: List[RGBA],
                style: ChartSettings) -> None:
    if not values:
        return
    angles = _polar_angles(len(values))
    border = css_to_mpl_color(style.border_color)
    closed_angles = np.append(angles, angles[0])
    closed_values = np.append(values, values[0])
    ax.plot(closed_angles, closed_values, color=border, linewidth=style.border_width)
    fill = colors[0][:3] + (_RADAR_FILL_ALPHA,)
    ax.fill(closed_angles, np.nan_to_num(closed_values), color=fill)
    ax.scatter(angles, values, c=colors, zorder=3)
    _setup_polar(ax, angles, labels)


def _plot_polar_area(ax: Axes, values: List[float], labels: List[str], colors: List[RGBA],
                     style: ChartSettings) -> None:
    if not values:
        return
    angles = _polar_angles(len(values))
    # Polar bars cannot be drawn with a NaN radius
    radii = np.nan_to_num(np.asarray(values, dtype=float), nan=0.0)
    ax.bar(angles, radii, width=2 * math.pi / len(values), color=colors,
           edgecolor=css_to_mpl_color(style.border_color), linewidth=style.border_width,
           align="edge")
    _setup_polar(ax, angles, labels)


_BUILDERS: Dict[str, Callable[..., None]] = {
    "bar": _plot_bar,
    "line": _plot_line,
    "pie": _plot_pie,
    "doughnut": _plot_doughnut,
    "radar": _plot_radar,
    "polarArea": _plot_polar_area,
}
