"""Shared fixtures: offscreen QApplication and an isolated settings file."""
from __future__ import annotations

import os
import sys
from pathlib import Path

# Must be set before any Qt / matplotlib import
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ.setdefault("MPLBACKEND", "Agg")

# Ensure project root is on sys.path so imports work
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from PyQt6.QtWidgets import QApplication

import settings
from canvas.scene import Scene
from canvas.surface import DrawingSurface
from chart.adapter import ChartAdapter


SURFACE_W = 400
SURFACE_H = 300


@pytest.fixture(scope="session")
def qapp():
    """Provide a single QApplication for the entire test session."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path):
    """Point the settings singleton at a fresh directory for every test."""
    manager = settings.SettingsManager(settings_dir=tmp_path / "config")
    manager.settings.export.directory = str(tmp_path / "downloads")
    settings.set_settings(manager)
    yield manager
    settings.set_settings(None)


@pytest.fixture()
def surface(qapp):
    return DrawingSurface(SURFACE_W, SURFACE_H)


@pytest.fixture()
def scene():
    return Scene()


@pytest.fixture()
def chart_adapter(surface):
    adapter = ChartAdapter(surface)
    yield adapter
    adapter.destroy()


class RecordingSink:
    """Download sink that keeps deliveries in memory."""

    def __init__(self):
        self.deliveries = []

    def deliver(self, data_uri, filename):
        self.deliveries.append((data_uri, filename))
        return Path(filename)


@pytest.fixture()
def recording_sink():
    return RecordingSink()
