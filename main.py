"""
main.py

ChartSketch - Main Application

PyQt6 application for composing a chart with simple annotations:
- Chart title, type and comma-separated data values
- Rectangle, circle and text annotations drawn over the chart
- Center-pivoted zoom and 45° rotation steps
- PNG / JPEG export of the composite

Usage:
    python main.py

Dependencies:
    pip install PyQt6 matplotlib numpy platformdirs tomli-w

Environment:
    CHARTSKETCH_TRACE=1|all|<categories> (optional, enables debug tracing)
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from PyQt6.QtCore import QRect, Qt
from PyQt6.QtGui import QAction, QActionGroup, QGuiApplication, QKeySequence
from PyQt6.QtWidgets import (
    QApplication,
    QComboBox,
    QHBoxLayout,
    QInputDialog,
    QLabel,
    QLineEdit,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QToolBar,
    QVBoxLayout,
    QWidget,
)

from canvas.scene import Scene
from canvas.surface import DrawingSurface
from canvas.view import SurfaceView
from chart.adapter import ChartAdapter
from controller import InteractionController
from debug_trace import CRASH, DEBUG_TRACE, MAIN, close_log, trace, trace_exception
from export import DirectorySink, DownloadSink
from models import CHART_TYPES, ExportFormat
from settings import SettingsManager, get_settings
from styles import DEFAULT_STYLE, STYLES

log = logging.getLogger(__name__)

# Used when no screen is available (e.g. some offscreen platforms)
_FALLBACK_SCREEN = QRect(0, 0, 1280, 800)


class MainWindow(QMainWindow):
    """Main application window for ChartSketch.

    Args:
        settings_manager: The SettingsManager instance for application settings.
        sink: Export destination. Defaults to the configured export directory.
    """

    def __init__(self, settings_manager: SettingsManager, sink: Optional[DownloadSink] = None):
        super().__init__()
        self.settings_manager = settings_manager
        self.setWindowTitle("ChartSketch - Chart Annotation")

        # Surface is sized once from the screen; it does not follow later resizes
        surface_cfg = settings_manager.settings.canvas.surface
        self.surface = DrawingSurface.for_screen(
            self._available_screen_geometry(),
            surface_cfg.width_fraction,
            surface_cfg.height_fraction,
        )
        self.scene = Scene()
        self.chart = ChartAdapter(self.surface)
        self.view = SurfaceView(self.surface)

        self.controller = InteractionController(
            self.scene,
            self.surface,
            self.chart,
            settings_manager=settings_manager,
            sink=sink or DirectorySink(settings_manager.get_export_dir()),
            on_status=self._on_chart_status,
            on_rendered=self._on_rendered,
        )
        self.view.set_zoom_callbacks(self.controller.zoom_in, self.controller.zoom_out)

        central = QWidget(self)
        layout = QVBoxLayout(central)
        layout.addLayout(self._build_chart_form())
        layout.addWidget(self.view, 0, Qt.AlignmentFlag.AlignHCenter)
        layout.addLayout(self._build_download_row())
        layout.addStretch(1)
        self.setCentralWidget(central)

        self._build_menus()
        self._build_toolbar()

        self._transform_label = QLabel()
        self.statusBar().addPermanentWidget(self._transform_label)
        self.statusBar().showMessage("Enter chart data and press Update Chart.")

        self.controller.render()

    @staticmethod
    def _available_screen_geometry() -> QRect:
        screen = QGuiApplication.primaryScreen()
        if screen is None:
            return QRect(_FALLBACK_SCREEN)
        return screen.availableGeometry()

    # ----------------------------
    # UI construction
    # ----------------------------

    def _build_chart_form(self) -> QHBoxLayout:
        """Build the title / type / data row with the update button and status label."""
        row = QHBoxLayout()

        self.title_edit = QLineEdit()
        self.title_edit.setPlaceholderText("Chart title")
        row.addWidget(QLabel("Title:"))
        row.addWidget(self.title_edit, 2)

        self.chart_type_combo = QComboBox()
        self.chart_type_combo.addItems(CHART_TYPES)
        default_type = self.settings_manager.settings.chart.default_type
        if default_type in CHART_TYPES:
            self.chart_type_combo.setCurrentText(default_type)
        row.addWidget(QLabel("Type:"))
        row.addWidget(self.chart_type_combo)

        self.data_edit = QLineEdit()
        self.data_edit.setPlaceholderText("Values, e.g. 10, 20, 30")
        self.data_edit.returnPressed.connect(self.update_chart)
        row.addWidget(QLabel("Data:"))
        row.addWidget(self.data_edit, 3)

        self.update_btn = QPushButton("Update Chart")
        self.update_btn.clicked.connect(self.update_chart)
        row.addWidget(self.update_btn)

        self.chart_status = QLabel("")
        self.chart_status.setObjectName("chart_status")
        row.addWidget(self.chart_status)
        return row

    def _build_download_row(self) -> QHBoxLayout:
        row = QHBoxLayout()
        row.addStretch(1)

        self.download_format_combo = QComboBox()
        self.download_format_combo.addItems([ExportFormat.PNG, ExportFormat.JPEG])
        default_format = self.settings_manager.settings.export.default_format
        if default_format in (ExportFormat.PNG, ExportFormat.JPEG):
            self.download_format_combo.setCurrentText(default_format)
        row.addWidget(QLabel("Format:"))
        row.addWidget(self.download_format_combo)

        self.download_btn = QPushButton("Download")
        self.download_btn.clicked.connect(self.download)
        row.addWidget(self.download_btn)
        return row

    def _build_menus(self):
        """Build the application menu bar."""
        file_menu = self.menuBar().addMenu("&File")
        export_act = QAction("&Download Image", self)
        export_act.setShortcut(QKeySequence("Ctrl+S"))
        export_act.triggered.connect(self.download)
        file_menu.addAction(export_act)
        file_menu.addSeparator()
        quit_act = QAction("&Quit", self)
        quit_act.setShortcut(QKeySequence("Ctrl+Q"))
        quit_act.triggered.connect(self.close)
        file_menu.addAction(quit_act)

        view_menu = self.menuBar().addMenu("&View")
        theme_menu = view_menu.addMenu("Theme")
        theme_group = QActionGroup(self)
        theme_group.setExclusive(True)
        current = self.settings_manager.settings.theme
        for name in STYLES:
            act = QAction(name, self)
            act.setCheckable(True)
            act.setChecked(name == current)
            act.triggered.connect(lambda checked, n=name: self.apply_theme(n))
            theme_group.addAction(act)
            theme_menu.addAction(act)

    def _build_toolbar(self):
        """Build the annotation / transform toolbar."""
        tb = QToolBar("Tools")
        self.addToolBar(tb)

        def add_action(text: str, shortcut: str, tooltip: str, slot):
            act = QAction(text, self)
            act.setShortcut(shortcut)
            act.setToolTip(f"{tooltip} ({shortcut})")
            act.setStatusTip(tooltip)
            act.triggered.connect(slot)
            tb.addAction(act)
            return act

        self.act_rect = add_action("Rectangle", "R", "Add a rectangle", self.controller.add_rectangle)
        self.act_circle = add_action("Circle", "C", "Add a circle", self.controller.add_circle)
        self.act_text = add_action("Text", "T", "Add a text annotation", self.prompt_text)
        tb.addSeparator()
        self.act_zoom_in = add_action("Zoom In", "+", "Zoom in 10%", self.controller.zoom_in)
        self.act_zoom_out = add_action("Zoom Out", "-", "Zoom out 10%", self.controller.zoom_out)
        self.act_rotate = add_action("Rotate", "O", "Rotate 45° clockwise", self.controller.rotate)

    # ----------------------------
    # Actions
    # ----------------------------

    def update_chart(self):
        """Rebuild the chart from the form fields."""
        self.controller.update_chart(
            self.title_edit.text(),
            self.chart_type_combo.currentText(),
            self.data_edit.text(),
        )

    def prompt_text(self):
        """Ask for annotation text; cancelling adds nothing."""
        text, ok = QInputDialog.getText(self, "Add Text", "Enter the text to add:")
        if not self.controller.add_text(text if ok else None):
            self.statusBar().showMessage("Text annotation cancelled.", 3000)

    def download(self):
        """Export the surface in the selected format."""
        fmt = self.download_format_combo.currentText()
        try:
            path = self.controller.export(fmt)
        except (OSError, ValueError, RuntimeError) as e:
            log.exception("Export failed")
            trace_exception("Export failed")
            QMessageBox.critical(self, "Download failed", f"Could not save image:\n{e}")
            self.statusBar().showMessage("Download failed.")
            return
        self.statusBar().showMessage(f"Saved {path}", 5000)

    def apply_theme(self, name: str):
        """Apply a stylesheet from STYLES and remember it in settings."""
        if name not in STYLES:
            return
        app = QApplication.instance()
        if app is not None:
            app.setStyleSheet(STYLES[name])
        self.settings_manager.settings.theme = name

    # ----------------------------
    # Controller callbacks
    # ----------------------------

    def _on_chart_status(self, message: str):
        self.chart_status.setText(message)
        self.statusBar().showMessage(message, 3000)

    def _on_rendered(self):
        self.view.update()
        self._transform_label.setText(self.scene.transform_label())

    def closeEvent(self, event):
        self.controller.shutdown()
        super().closeEvent(event)


def main():
    """Application entry point."""
    logging.basicConfig(
        level=logging.DEBUG if DEBUG_TRACE else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    trace("Application starting", MAIN)
    app = QApplication(sys.argv)

    # Load settings (use singleton to ensure single instance)
    trace("Loading settings", MAIN)
    settings_manager = get_settings()

    # Ensure settings file has all sections
    settings_manager.ensure_file_complete()

    # Apply saved theme (or default if not set)
    initial_style = settings_manager.settings.theme
    if initial_style not in STYLES:
        initial_style = DEFAULT_STYLE
        settings_manager.settings.theme = initial_style
    app.setStyleSheet(STYLES[initial_style])

    # Save settings on application quit
    def save_on_quit():
        trace("Saving settings on quit", MAIN)
        settings_manager.save()
        close_log()

    app.aboutToQuit.connect(save_on_quit)

    trace("Creating MainWindow", MAIN)
    w = MainWindow(settings_manager)
    w.show()
    trace("Entering event loop", MAIN)
    sys.exit(app.exec())


if __name__ == "__main__":
    # Set up global exception handler to catch crashes
    def excepthook(exc_type, exc_value, exc_tb):
        import traceback
        trace("UNCAUGHT EXCEPTION:", CRASH)
        trace("".join(traceback.format_exception(exc_type, exc_value, exc_tb)), CRASH)
        close_log()
        sys.__excepthook__(exc_type, exc_value, exc_tb)

    sys.excepthook = excepthook

    try:
        main()
    except Exception as e:
        trace(f"FATAL: {type(e).__name__}: {e}", CRASH)
        trace_exception("Fatal exception")
        close_log()
        raise
