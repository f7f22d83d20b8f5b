"""
chart package

Chart lifecycle management and the matplotlib chart backend.
"""

from chart.base import RenderableChart
from chart.backend import MatplotlibChart
from chart.adapter import ChartAdapter

__all__ = [
    "RenderableChart",
    "MatplotlibChart",
    "ChartAdapter",
]
