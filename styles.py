"""
styles.py

Application stylesheets - Tailwind (light) and Foundation (dark) themes.
"""

TAILWIND_STYLE = """
/* === Tailwind CSS-inspired Theme === */
/* Primary: #6366f1 (Indigo-500), Slate grays */

QMainWindow {
    background-color: #f8fafc;
}

QWidget {
    background-color: #f8fafc;
    color: #1e293b;
    font-family: "Inter", "Segoe UI", sans-serif;
    font-size: 13px;
}

/* === Toolbar === */
QToolBar {
    background-color: #ffffff;
    border: none;
    border-bottom: 1px solid #e2e8f0;
    padding: 2px 3px;
    spacing: 1px;
}

QToolBar::separator {
    width: 1px;
    background-color: #e2e8f0;
    margin: 3px 7px;
}

QToolBar QToolButton {
    background-color: #f8fafc;
    color: #475569;
    border: 1px solid #e2e8f0;
    border-radius: 4px;
    padding: 2px 6px;
    min-width: 24px;
}

QToolBar QToolButton:hover {
    background-color: #f1f5f9;
    border-color: #cbd5e1;
    color: #6366f1;
}

QToolBar QToolButton:pressed {
    background-color: #e2e8f0;
}

/* === Form Elements === */
QLabel {
    color: #475569;
    background-color: transparent;
}

QLabel#chart_status {
    color: #16a34a;
    font-weight: 600;
}

QLineEdit {
    background-color: #ffffff;
    color: #1e293b;
    border: 1px solid #cbd5e1;
    border-radius: 6px;
    padding: 6px 8px;
    selection-background-color: #c7d2fe;
}

QLineEdit:focus {
    border-color: #6366f1;
}

QComboBox {
    background-color: #ffffff;
    color: #1e293b;
    border: 1px solid #cbd5e1;
    border-radius: 6px;
    padding: 6px 8px;
    min-width: 80px;
}

QComboBox:focus {
    border-color: #6366f1;
}

QComboBox QAbstractItemView {
    background-color: #ffffff;
    color: #1e293b;
    border: 1px solid #e2e8f0;
    selection-background-color: #e0e7ff;
}

/* === Buttons === */
QPushButton {
    background-color: #6366f1;
    color: #ffffff;
    border: none;
    border-radius: 6px;
    padding: 8px 16px;
    font-weight: 500;
    min-width: 70px;
}

QPushButton:hover {
    background-color: #4f46e5;
}

QPushButton:pressed {
    background-color: #4338ca;
}

/* === Drawing Surface === */
SurfaceView {
    background-color: #ffffff;
    border: 1px solid #e2e8f0;
}

/* === Status Bar === */
QStatusBar {
    background-color: #ffffff;
    color: #64748b;
    border-top: 1px solid #e2e8f0;
    padding: 4px;
}

QStatusBar::item {
    border: none;
}
"""

FOUNDATION_STYLE = """
/* === Base Colors === */
QMainWindow {
    background-color: #1e1e1e;
}

QWidget {
    background-color: #252526;
    color: #cccccc;
    font-family: "Segoe UI", "SF Pro Display", sans-serif;
    font-size: 13px;
}

/* === Toolbar === */
QToolBar {
    background-color: #333333;
    border: none;
    border-bottom: 1px solid #404040;
    padding: 2px 3px;
    spacing: 1px;
}

QToolBar::separator {
    width: 1px;
    background-color: #505050;
    margin: 3px 6px;
}

QToolBar QToolButton {
    background-color: #3c3c3c;
    color: #cccccc;
    border: 1px solid #505050;
    border-radius: 3px;
    padding: 2px 6px;
    min-width: 24px;
}

QToolBar QToolButton:hover {
    background-color: #4a4a4a;
    border-color: #606060;
}

QToolBar QToolButton:pressed {
    background-color: #094771;
}

/* === Form Elements === */
QLabel {
    color: #cccccc;
    background-color: transparent;
}

QLabel#chart_status {
    color: #4ec9b0;
    font-weight: bold;
}

QLineEdit {
    background-color: #3c3c3c;
    color: #cccccc;
    border: 1px solid #505050;
    border-radius: 4px;
    padding: 6px 8px;
    selection-background-color: #094771;
}

QLineEdit:focus {
    border-color: #0e639c;
    background-color: #404040;
}

QComboBox {
    background-color: #3c3c3c;
    color: #cccccc;
    border: 1px solid #505050;
    border-radius: 4px;
    padding: 6px 8px;
    min-width: 80px;
}

QComboBox:focus {
    border-color: #0e639c;
}

QComboBox QAbstractItemView {
    background-color: #2d2d30;
    color: #cccccc;
    border: 1px solid #404040;
    selection-background-color: #094771;
}

/* === Buttons === */
QPushButton {
    background-color: #0e639c;
    color: #ffffff;
    border: none;
    border-radius: 6px;
    padding: 8px 16px;
    font-weight: 500;
    min-width: 70px;
}

QPushButton:hover {
    background-color: #1177bb;
}

QPushButton:pressed {
    background-color: #094771;
}

/* === Drawing Surface === */
SurfaceView {
    background-color: #ffffff;
    border: 1px solid #404040;
}

/* === Status Bar === */
QStatusBar {
    background-color: #007acc;
    color: #ffffff;
    border: none;
    padding: 4px;
}

QStatusBar::item {
    border: none;
}
"""

# Style registry for easy access
STYLES = {
    "Tailwind": TAILWIND_STYLE,
    "Foundation (Dark)": FOUNDATION_STYLE,
}

DEFAULT_STYLE = "Tailwind"
