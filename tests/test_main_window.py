"""Smoke tests for MainWindow wiring (offscreen)."""
from __future__ import annotations

import pytest
from PyQt6.QtWidgets import QInputDialog

from controller import CHART_UPDATED_MESSAGE


@pytest.fixture()
def main_window(qapp, isolated_settings, recording_sink):
    """Create a fresh MainWindow for each test."""
    from main import MainWindow
    mw = MainWindow(isolated_settings, sink=recording_sink)
    mw.show()
    qapp.processEvents()
    yield mw
    mw.close()


class TestMainWindow:
    def test_surface_sized_from_screen(self, main_window):
        geo = main_window._available_screen_geometry()
        assert main_window.surface.width() == int(geo.width() * 0.9)
        assert main_window.surface.height() == int(geo.height() * 0.4)

    def test_update_chart_from_form(self, main_window):
        main_window.title_edit.setText("Sales")
        main_window.chart_type_combo.setCurrentText("line")
        main_window.data_edit.setText("3,4,x")
        main_window.update_btn.click()
        assert main_window.chart.has_chart
        assert main_window.chart.instance.spec.chart_type == "line"
        assert main_window.chart_status.text() == CHART_UPDATED_MESSAGE

    def test_toolbar_actions(self, main_window):
        main_window.act_rect.trigger()
        main_window.act_circle.trigger()
        main_window.act_zoom_in.trigger()
        main_window.act_rotate.trigger()
        assert [s.kind for s in main_window.scene.shapes] == ["rectangle", "circle"]
        assert main_window.scene.rotation_angle == 45
        assert main_window._transform_label.text() == "Zoom 110% | Rotation 45°"

    def test_text_prompt_cancel_adds_nothing(self, main_window, monkeypatch):
        monkeypatch.setattr(QInputDialog, "getText", staticmethod(lambda *a, **k: ("ignored", False)))
        main_window.prompt_text()
        assert main_window.scene.texts == []

    def test_text_prompt_accept(self, main_window, monkeypatch):
        monkeypatch.setattr(QInputDialog, "getText", staticmethod(lambda *a, **k: ("Hello", True)))
        main_window.prompt_text()
        assert main_window.scene.texts[0].content == "Hello"

    def test_download_uses_selected_format(self, main_window, recording_sink):
        main_window.download_format_combo.setCurrentText("jpeg")
        main_window.download_btn.click()
        assert recording_sink.deliveries[-1][1] == "graphic.jpeg"

    def test_close_releases_chart(self, main_window):
        main_window.data_edit.setText("1,2")
        main_window.update_chart()
        main_window.close()
        assert not main_window.chart.has_chart
