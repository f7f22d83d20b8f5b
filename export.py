"""
export.py

Export the drawing surface as a PNG or JPEG image.

The surface is encoded to a data URI and handed to a download sink together
with a suggested filename, the same contract a browser download link offers.
"""

from __future__ import annotations

import base64
import binascii
import logging
import re
from pathlib import Path
from typing import Optional, Protocol, Tuple, Union

from canvas.surface import DrawingSurface
from models import EXPORT_MIME_TYPES, ExportFormat
from settings import ExportSettings, get_settings
from utils import css_to_qcolor

log = logging.getLogger(__name__)

_DATA_URI_RE = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+);base64,(?P<payload>.*)$", re.DOTALL)


class DownloadSink(Protocol):
    """Receives an encoded image and its suggested filename."""

    def deliver(self, data_uri: str, filename: str) -> Path:
        ...


def decode_data_uri(data_uri: str) -> Tuple[str, bytes]:
    """
    Split a base64 data URI into its mime type and decoded bytes.

    Args:
        data_uri: String like "data:image/png;base64,iVBORw0..."

    Returns:
        Tuple of (mime, payload bytes)

    Raises:
        ValueError: If the string is not a base64 data URI.
    """
    match = _DATA_URI_RE.match(data_uri or "")
    if not match:
        raise ValueError("Not a base64 data URI")
    try:
        payload = base64.b64decode(match.group("payload"), validate=True)
    except binascii.Error as e:
        raise ValueError(f"Invalid base64 payload in data URI: {e}") from e
    return match.group("mime"), payload


class DirectorySink:
    """
    Writes downloads into a directory, like a browser's downloads folder.

    Args:
        directory: Target directory (created on first delivery).
    """

    def __init__(self, directory: Union[str, Path]):
        self.directory = Path(directory)

    def deliver(self, data_uri: str, filename: str) -> Path:
        _mime, payload = decode_data_uri(data_uri)
        # Only the final path component is honored
        name = Path(filename).name
        if not name:
            raise ValueError(f"Invalid download filename: {filename!r}")
        self.directory.mkdir(parents=True, exist_ok=True)
        target = self.directory / name
        target.write_bytes(payload)
        log.info("Saved %d bytes to %s", len(payload), target)
        return target


def export_filename(fmt: str, stem: str = "graphic") -> str:
    """Suggested filename for an export, e.g. ``graphic.png``."""
    return f"{stem}.{fmt}"


def export_image(
    surface: DrawingSurface,
    fmt: str,
    sink: DownloadSink,
    style: Optional[ExportSettings] = None,
) -> Path:
    """
    Encode the surface's current pixels and hand them to ``sink``.

    The surface is not re-rendered first; whatever is painted right now is
    exported.

    Args:
        surface: Surface to capture.
        fmt: "png" or "jpeg".
        sink: Download destination.
        style: Export settings (defaults to the global settings).

    Returns:
        Path reported by the sink.

    Raises:
        ValueError: If ``fmt`` is not a supported format.
    """
    if style is None:
        style = get_settings().settings.export
    mime = EXPORT_MIME_TYPES.get(fmt)
    if mime is None:
        raise ValueError(f"Unsupported export format {fmt!r}; expected png or jpeg")

    if fmt == ExportFormat.JPEG:
        data_uri = surface.to_data_uri(
            mime,
            quality=style.jpeg_quality,
            background=css_to_qcolor(style.jpeg_background),
        )
    else:
        data_uri = surface.to_data_uri(mime)

    return sink.deliver(data_uri, export_filename(fmt, style.filename_stem))
