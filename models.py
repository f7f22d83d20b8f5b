"""
models.py

Data models and constants for the ChartSketch application.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import List, Tuple, Union


# ----------------------------
# Shape models
# ----------------------------

@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned rectangle in canvas units, painted as a filled box."""
    KIND = "rectangle"

    x: float
    y: float
    width: float
    height: float

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise ValueError(
                f"Rectangle dimensions must be non-negative, got {self.width}x{self.height}"
            )

    @property
    def kind(self) -> str:
        return self.KIND


@dataclass(frozen=True)
class Circle:
    """Circle given by its center and radius, painted as a filled disk."""
    KIND = "circle"

    x: float
    y: float
    radius: float

    def __post_init__(self):
        if self.radius < 0:
            raise ValueError(f"Circle radius must be non-negative, got {self.radius}")

    @property
    def kind(self) -> str:
        return self.KIND


Shape = Union[Rectangle, Circle]


@dataclass(frozen=True)
class TextAnnotation:
    """A text string anchored at its baseline start point."""
    content: str
    x: float
    y: float


# Default geometry for shapes/text created by the toolbar actions
DEFAULT_RECTANGLE = (50.0, 50.0, 100.0, 50.0)  # x, y, width, height
DEFAULT_CIRCLE = (300.0, 100.0, 50.0)          # x, y, radius
DEFAULT_TEXT_POS = (100.0, 100.0)              # x, y


# ----------------------------
# Chart models
# ----------------------------

# Chart types offered by the chart backend.
CHART_TYPES: Tuple[str, ...] = ("bar", "line", "pie", "doughnut", "radar", "polarArea")


# Numeric token grammar of the data values field: signed decimals with an
# optional exponent, signed Infinity, and unsigned 0x/0o/0b integer literals.
_DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_INFINITY_RE = re.compile(r"[+-]?Infinity")
_RADIX_RE = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")


def parse_number(token: str) -> float:
    """Convert one trimmed token to a float; an empty token is 0, anything malformed is NaN."""
    if not token:
        return 0.0
    if _DECIMAL_RE.fullmatch(token):
        return float(token)
    if _INFINITY_RE.fullmatch(token):
        return -math.inf if token.startswith("-") else math.inf
    if _RADIX_RE.fullmatch(token):
        try:
            return float(int(token, 0))
        except OverflowError:
            return math.inf
    return math.nan


def parse_data_values(text: str) -> List[float]:
    """
    Parse a comma-separated list of numbers.

    Tokens are trimmed. An empty token counts as 0. Anything that is not a
    number literal (see ``parse_number``) becomes NaN instead of raising, so
    malformed input shows up as a gap in the chart rather than an error.
    Spellings such as ``inf``, ``nan`` or ``1_000`` are malformed.

    Args:
        text: Raw text from the data values field, e.g. "1, 2, 3".

    Returns:
        One float per comma-separated token (never empty).
    """
    return [parse_number(token.strip()) for token in (text or "").split(",")]


def make_point_labels(count: int, prefix: str = "Point") -> List[str]:
    """Build 1-indexed category labels: ``["Point 1", "Point 2", ...]``."""
    return [f"{prefix} {i + 1}" for i in range(count)]


@dataclass(frozen=True)
class ChartSpec:
    """Chart configuration rebuilt from the form on every chart update.

    Attributes:
        title: Title shown above the chart (empty hides it).
        chart_type: One of CHART_TYPES.
        values: The single data series; NaN marks unparseable entries.
        label_prefix: Prefix for the synthesized category labels.
    """
    title: str
    chart_type: str
    values: Tuple[float, ...] = field(default_factory=tuple)
    label_prefix: str = "Point"

    def __post_init__(self):
        if self.chart_type not in CHART_TYPES:
            raise ValueError(
                f"Unsupported chart type {self.chart_type!r}; expected one of {', '.join(CHART_TYPES)}"
            )
        # Accept any sequence but store an immutable tuple
        object.__setattr__(self, "values", tuple(float(v) for v in self.values))

    @property
    def labels(self) -> List[str]:
        return make_point_labels(len(self.values), self.label_prefix)

    @classmethod
    def from_form(cls, title: str, chart_type: str, data_text: str,
                  label_prefix: str = "Point") -> "ChartSpec":
        """Build a spec from raw form values.

        Args:
            title: Title field text.
            chart_type: Selected chart type.
            data_text: Comma-separated data values.
            label_prefix: Prefix for category labels.
        """
        return cls(
            title=title or "",
            chart_type=chart_type,
            values=tuple(parse_data_values(data_text)),
            label_prefix=label_prefix,
        )


# ----------------------------
# Export constants
# ----------------------------

class ExportFormat:
    """Supported image export formats."""
    PNG = "png"
    JPEG = "jpeg"


EXPORT_MIME_TYPES = {
    ExportFormat.PNG: "image/png",
    ExportFormat.JPEG: "image/jpeg",
}
