"""
utils.py

Color helpers shared by the render pipeline, the chart backend and export.

Colors in settings use CSS syntax (named colors, ``#RRGGBB``, ``#RRGGBBAA``,
``rgb(r, g, b)`` and ``rgba(r, g, b, a)`` with alpha in 0..1), so the same
strings drive both QPainter and matplotlib.
"""

from __future__ import annotations

import re
from typing import Optional, Tuple

from PyQt6.QtGui import QColor

_RGB_FUNC_RE = re.compile(
    r"^rgba?\(\s*([0-9.]+)\s*,\s*([0-9.]+)\s*,\s*([0-9.]+)\s*(?:,\s*([0-9.]+)\s*)?\)$",
    re.IGNORECASE,
)


def parse_rgb_function(s: str) -> Optional[Tuple[int, int, int, float]]:
    """
    Parse a CSS ``rgb()``/``rgba()`` color.

    Args:
        s: String like "rgba(75, 192, 192, 0.5)"

    Returns:
        Tuple of (r, g, b, alpha) with alpha in 0..1, or None if not an rgb function
    """
    match = _RGB_FUNC_RE.match((s or "").strip())
    if not match:
        return None
    r, g, b = (max(0, min(255, int(float(match.group(i))))) for i in (1, 2, 3))
    alpha = float(match.group(4)) if match.group(4) is not None else 1.0
    return r, g, b, max(0.0, min(1.0, alpha))


def hex_to_qcolor(s: str, fallback: QColor) -> QColor:
    """
    Parse a hex string to a QColor.

    Args:
        s: Hex string like "#RRGGBB" or "#RRGGBBAA"
        fallback: Color to return if parsing fails

    Returns:
        Parsed QColor or fallback
    """
    if not s:
        return QColor(fallback)
    s = s.strip()
    if s.startswith("#"):
        s = s[1:]
    try:
        if len(s) == 6:
            r = int(s[0:2], 16)
            g = int(s[2:4], 16)
            b = int(s[4:6], 16)
            return QColor(r, g, b)
        if len(s) == 8:
            r = int(s[0:2], 16)
            g = int(s[2:4], 16)
            b = int(s[4:6], 16)
            a = int(s[6:8], 16)
            return QColor(r, g, b, a)
    except ValueError:
        pass
    return QColor(fallback)


def css_to_qcolor(s: str, fallback: Optional[QColor] = None) -> QColor:
    """
    Convert a CSS color string to a QColor.

    Args:
        s: Named color, hex, rgb() or rgba() string
        fallback: Color to return if parsing fails (default: black)

    Returns:
        Parsed QColor or fallback
    """
    if fallback is None:
        fallback = QColor(0, 0, 0)
    rgba = parse_rgb_function(s)
    if rgba is not None:
        r, g, b, alpha = rgba
        return QColor(r, g, b, round(alpha * 255))
    if s and s.strip().startswith("#"):
        return hex_to_qcolor(s, fallback)
    color = QColor(s.strip()) if s else QColor()
    return color if color.isValid() else QColor(fallback)


def css_to_mpl_color(s: str) -> Tuple[float, float, float, float]:
    """
    Convert a CSS color string to a matplotlib RGBA tuple (components in 0..1).

    Args:
        s: Named color, hex, rgb() or rgba() string

    Returns:
        Tuple (r, g, b, a); unparseable strings map to opaque black
    """
    c = css_to_qcolor(s)
    return c.redF(), c.greenF(), c.blueF(), c.alphaF()

