"""
settings.py

Persistent settings management for ChartSketch.

Handles cross-platform settings storage using TOML format with platformdirs
for proper user config directory detection.

Settings file location:
    - Windows: %APPDATA%/chartsketch/settings.toml
    - macOS: ~/Library/Application Support/chartsketch/settings.toml
    - Linux: ~/.config/chartsketch/settings.toml

Default values are documented in comments throughout this file.
If settings.toml is corrupted, these defaults will be used.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import platformdirs

# TOML reading - use tomllib for Python 3.11+, tomli for earlier versions
if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

import tomli_w

APP_NAME = "chartsketch"

# Global settings manager instance (singleton)
_settings_manager: Optional["SettingsManager"] = None


def get_settings() -> "SettingsManager":
    """Get the global settings manager instance.

    Returns:
        The singleton SettingsManager instance.
    """
    global _settings_manager
    if _settings_manager is None:
        _settings_manager = SettingsManager()
    return _settings_manager


def set_settings(manager: Optional["SettingsManager"]) -> None:
    """Replace the global settings manager (None resets to lazy creation)."""
    global _settings_manager
    _settings_manager = manager


# =============================================================================
# Canvas Settings
# =============================================================================

@dataclass
class CanvasSurfaceSettings:
    """Drawing surface size, relative to the available screen area.

    Defaults:
        width_fraction: 0.9
        height_fraction: 0.4
    """
    width_fraction: float = 0.9   # Default: 90% of screen width
    height_fraction: float = 0.4  # Default: 40% of screen height


@dataclass
class CanvasShapeSettings:
    """Shape fill colors (CSS color syntax).

    Defaults:
        rectangle_fill: "rgba(75, 192, 192, 0.5)"
        circle_fill: "rgba(192, 75, 192, 0.5)"
    """
    rectangle_fill: str = "rgba(75, 192, 192, 0.5)"  # Default: translucent teal
    circle_fill: str = "rgba(192, 75, 192, 0.5)"     # Default: translucent magenta


@dataclass
class CanvasTextSettings:
    """Text annotation appearance.

    Defaults:
        color: "black"
        font_family: "Arial"
        font_size: 20
    """
    color: str = "black"        # Default: "black"
    font_family: str = "Arial"  # Default: "Arial"
    font_size: int = 20         # Default: 20 pixels


@dataclass
class CanvasZoomSettings:
    """Zoom behavior settings.

    Defaults:
        wheel_enabled: True
    """
    wheel_enabled: bool = True  # Default: True (wheel steps map to zoom in/out)


@dataclass
class CanvasSettings:
    """All canvas-related settings."""
    surface: CanvasSurfaceSettings = field(default_factory=CanvasSurfaceSettings)
    shapes: CanvasShapeSettings = field(default_factory=CanvasShapeSettings)
    text: CanvasTextSettings = field(default_factory=CanvasTextSettings)
    zoom: CanvasZoomSettings = field(default_factory=CanvasZoomSettings)


# =============================================================================
# Chart Settings
# =============================================================================

@dataclass
class ChartSettings:
    """Chart styling settings.

    Defaults:
        palette: ["red", "blue", "green", "yellow", "purple", "orange"]
        border_color: "rgba(75, 192, 192, 1)"
        border_width: 1
        label_prefix: "Point"
        default_type: "bar"
        dpi: 100
    """
    palette: List[str] = field(
        default_factory=lambda: ["red", "blue", "green", "yellow", "purple", "orange"]
    )  # Default: six named colors, applied cyclically per data point
    border_color: str = "rgba(75, 192, 192, 1)"  # Default: teal
    border_width: float = 1                      # Default: 1 pixel
    label_prefix: str = "Point"                  # Default: "Point" -> "Point 1", "Point 2", ...
    default_type: str = "bar"                    # Default: "bar"
    dpi: int = 100                               # Default: 100 (figure inches = pixels / dpi)


# =============================================================================
# Export Settings
# =============================================================================

@dataclass
class ExportSettings:
    """Image export settings.

    Defaults:
        default_format: "png"
        filename_stem: "graphic"
        directory: "" (user downloads directory)
        jpeg_quality: 92
        jpeg_background: "#FFFFFF"
    """
    default_format: str = "png"         # Default: "png"
    filename_stem: str = "graphic"      # Default: "graphic" -> graphic.png / graphic.jpeg
    directory: str = ""                 # Default: "" (platformdirs user downloads dir)
    jpeg_quality: int = 92              # Default: 92 (0-100)
    jpeg_background: str = "#FFFFFF"    # Default: white (JPEG has no alpha channel)


# =============================================================================
# Main App Settings
# =============================================================================

@dataclass
class AppSettings:
    """Application settings with default values.

    Attributes:
        theme: The UI theme name (must match a key in styles.STYLES).
        canvas: Canvas-related settings.
        chart: Chart styling settings.
        export: Image export settings.
    """
    # UI Settings
    theme: str = "Tailwind"  # Default: "Tailwind"

    # Nested settings categories
    canvas: CanvasSettings = field(default_factory=CanvasSettings)
    chart: ChartSettings = field(default_factory=ChartSettings)
    export: ExportSettings = field(default_factory=ExportSettings)


# =============================================================================
# Settings Manager
# =============================================================================

class SettingsManager:
    """Manages loading, saving, and accessing application settings.

    Settings are stored in a TOML file at the platform-appropriate location.
    If the settings file doesn't exist, defaults are used and the file is
    created on first save.

    Args:
        app_name: Application name used for the config directory.
        settings_dir: Explicit directory for settings.toml (overrides app_name lookup).
    """

    def __init__(self, app_name: str = APP_NAME, settings_dir: Optional[Union[str, Path]] = None):
        if settings_dir is not None:
            self.settings_dir = Path(settings_dir)
        else:
            self.settings_dir = Path(platformdirs.user_config_dir(app_name))
        self.settings_file = self.settings_dir / "settings.toml"
        self.settings = self.load()
        self._needs_save = not self.settings_file.exists()  # Save if file didn't exist

    def ensure_file_complete(self) -> None:
        """Ensure settings file exists with all sections. Call once at startup."""
        if self._needs_save or not self.settings_file.exists():
            self.save()
            self._needs_save = False

    def load(self) -> AppSettings:
        """Load settings from the TOML file.

        Returns:
            AppSettings instance with values from file or defaults if file
            doesn't exist or is invalid.
        """
        if not self.settings_file.exists():
            return AppSettings()

        try:
            with open(self.settings_file, "rb") as f:
                data = tomllib.load(f)

            return self._parse_toml(data)
        except Exception:
            # If file is corrupted or invalid, return defaults
            return AppSettings()

    def _parse_toml(self, data: Dict[str, Any]) -> AppSettings:
        """Parse TOML data into AppSettings.

        Args:
            data: Parsed TOML dictionary.

        Returns:
            AppSettings instance populated from TOML data.
        """
        settings = AppSettings()

        # General section
        general = data.get("general", {})
        settings.theme = general.get("theme", settings.theme)

        # Canvas section
        canvas = data.get("canvas", {})
        if "surface" in canvas:
            s = canvas["surface"]
            settings.canvas.surface.width_fraction = s.get("width_fraction", settings.canvas.surface.width_fraction)
            settings.canvas.surface.height_fraction = s.get("height_fraction", settings.canvas.surface.height_fraction)
        if "shapes" in canvas:
            sh = canvas["shapes"]
            settings.canvas.shapes.rectangle_fill = sh.get("rectangle_fill", settings.canvas.shapes.rectangle_fill)
            settings.canvas.shapes.circle_fill = sh.get("circle_fill", settings.canvas.shapes.circle_fill)
        if "text" in canvas:
            t = canvas["text"]
            settings.canvas.text.color = t.get("color", settings.canvas.text.color)
            settings.canvas.text.font_family = t.get("font_family", settings.canvas.text.font_family)
            settings.canvas.text.font_size = t.get("font_size", settings.canvas.text.font_size)
        if "zoom" in canvas:
            z = canvas["zoom"]
            settings.canvas.zoom.wheel_enabled = z.get("wheel_enabled", settings.canvas.zoom.wheel_enabled)

        # Chart section
        chart = data.get("chart", {})
        settings.chart.palette = list(chart.get("palette", settings.chart.palette))
        settings.chart.border_color = chart.get("border_color", settings.chart.border_color)
        settings.chart.border_width = chart.get("border_width", settings.chart.border_width)
        settings.chart.label_prefix = chart.get("label_prefix", settings.chart.label_prefix)
        settings.chart.default_type = chart.get("default_type", settings.chart.default_type)
        settings.chart.dpi = chart.get("dpi", settings.chart.dpi)

        # Export section
        export = data.get("export", {})
        settings.export.default_format = export.get("default_format", settings.export.default_format)
        settings.export.filename_stem = export.get("filename_stem", settings.export.filename_stem)
        settings.export.directory = export.get("directory", settings.export.directory)
        settings.export.jpeg_quality = export.get("jpeg_quality", settings.export.jpeg_quality)
        settings.export.jpeg_background = export.get("jpeg_background", settings.export.jpeg_background)

        return settings

    def save(self) -> None:
        """Save current settings to the TOML file.

        Creates the settings directory if it doesn't exist.
        """
        # Ensure directory exists
        self.settings_dir.mkdir(parents=True, exist_ok=True)

        # Convert settings to TOML structure
        data = self._to_toml_dict()

        with open(self.settings_file, "wb") as f:
            tomli_w.dump(data, f)

    def _to_toml_dict(self) -> Dict[str, Any]:
        """Convert settings to a TOML-compatible dictionary structure.

        Returns:
            Dictionary organized by TOML sections.
        """
        s = self.settings
        return {
            "general": {
                "theme": s.theme,
            },
            "canvas": {
                "surface": {
                    "width_fraction": s.canvas.surface.width_fraction,
                    "height_fraction": s.canvas.surface.height_fraction,
                },
                "shapes": {
                    "rectangle_fill": s.canvas.shapes.rectangle_fill,
                    "circle_fill": s.canvas.shapes.circle_fill,
                },
                "text": {
                    "color": s.canvas.text.color,
                    "font_family": s.canvas.text.font_family,
                    "font_size": s.canvas.text.font_size,
                },
                "zoom": {
                    "wheel_enabled": s.canvas.zoom.wheel_enabled,
                },
            },
            "chart": {
                "palette": list(s.chart.palette),
                "border_color": s.chart.border_color,
                "border_width": s.chart.border_width,
                "label_prefix": s.chart.label_prefix,
                "default_type": s.chart.default_type,
                "dpi": s.chart.dpi,
            },
            "export": {
                "default_format": s.export.default_format,
                "filename_stem": s.export.filename_stem,
                "directory": s.export.directory,
                "jpeg_quality": s.export.jpeg_quality,
                "jpeg_background": s.export.jpeg_background,
            },
        }

    def to_toml(self) -> str:
        """Convert current settings to a TOML-formatted string.

        Returns:
            TOML representation of the current settings.
        """
        data = self._to_toml_dict()
        return tomli_w.dumps(data)

    def get_export_dir(self) -> Path:
        """Get the resolved export directory path.

        Returns:
            Path to the export directory. Falls back to the user's downloads
            directory if the export directory setting is empty.
        """
        if self.settings.export.directory:
            return Path(self.settings.export.directory)
        return Path(platformdirs.user_downloads_dir())
