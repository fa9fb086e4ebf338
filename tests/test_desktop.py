"""Tests for desktop.py -- explorer and browser launchers."""

import subprocess
import webbrowser
from pathlib import Path
from unittest.mock import patch

from gallery_mover.desktop import open_in_browser, open_in_explorer


class TestOpenInExplorer:
    @patch("gallery_mover.desktop.platform.system", return_value="Linux")
    @patch("gallery_mover.desktop.subprocess.run")
    def test_linux_uses_xdg_open(self, mock_run, _system):
        assert open_in_explorer(Path("/tmp/art")) is True
        mock_run.assert_called_once_with(["xdg-open", "/tmp/art"], check=True)

    @patch("gallery_mover.desktop.platform.system", return_value="Darwin")
    @patch("gallery_mover.desktop.subprocess.run")
    def test_macos_uses_open(self, mock_run, _system):
        open_in_explorer(Path("/tmp/art"))
        mock_run.assert_called_once_with(["open", "/tmp/art"], check=True)

    @patch("gallery_mover.desktop.platform.system", return_value="Linux")
    @patch("gallery_mover.desktop.subprocess.run", side_effect=FileNotFoundError("xdg-open"))
    def test_missing_launcher_is_not_fatal(self, _run, _system, log_messages):
        assert open_in_explorer(Path("/tmp/art")) is False
        assert any("Failed to launch system explorer" in m for m in log_messages)

    @patch("gallery_mover.desktop.platform.system", return_value="Linux")
    @patch(
        "gallery_mover.desktop.subprocess.run",
        side_effect=subprocess.CalledProcessError(4, ["xdg-open"]),
    )
    def test_launcher_failure_is_not_fatal(self, _run, _system):
        assert open_in_explorer(Path("/tmp/art")) is False


class TestOpenInBrowser:
    @patch("gallery_mover.desktop.webbrowser.open", return_value=True)
    def test_opens(self, mock_open):
        assert open_in_browser("https://example.com") is True
        mock_open.assert_called_once_with("https://example.com")

    @patch("gallery_mover.desktop.webbrowser.open", return_value=False)
    def test_no_browser(self, _open, log_messages):
        assert open_in_browser("https://example.com") is False
        assert any("copy the link manually" in m for m in log_messages)

    @patch("gallery_mover.desktop.webbrowser.open", side_effect=webbrowser.Error("boom"))
    def test_error(self, _open):
        assert open_in_browser("https://example.com") is False
