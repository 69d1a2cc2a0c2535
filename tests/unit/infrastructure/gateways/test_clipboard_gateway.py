import subprocess
import unittest
from unittest.mock import MagicMock, patch

from quicktype_paste.infrastructure.gateways.clipboard_gateway import (
    MACOS_COMMANDS,
    POSIX_COMMANDS,
    WINDOWS_COMMANDS,
    ClipboardGateway,
    StaticTextSource,
)


class TestClipboardGateway(unittest.TestCase):
    def test_candidate_commands_per_platform(self) -> None:
        self.assertEqual(ClipboardGateway("darwin").candidate_commands(), MACOS_COMMANDS)
        self.assertEqual(ClipboardGateway("win32").candidate_commands(), WINDOWS_COMMANDS)
        self.assertEqual(ClipboardGateway("linux").candidate_commands(), POSIX_COMMANDS)

    @patch("subprocess.run")
    @patch("shutil.which")
    def test_reads_from_first_available_tool(self, mock_which, mock_run) -> None:
        mock_which.side_effect = lambda name: "/usr/bin/xclip" if name == "xclip" else None
        mock_run.return_value = MagicMock(returncode=0, stdout='{"a":1}', stderr="")

        text = ClipboardGateway("linux").read_text()

        self.assertEqual(text, '{"a":1}')
        self.assertEqual(mock_run.call_args[0][0], ["xclip", "-selection", "clipboard", "-o"])

    @patch("subprocess.run")
    @patch("shutil.which", return_value="/usr/bin/tool")
    def test_falls_through_failing_tools(self, _mock_which, mock_run) -> None:
        mock_run.side_effect = [
            MagicMock(returncode=1, stdout="", stderr="no wayland"),
            subprocess.TimeoutExpired("xclip", 10),
            MagicMock(returncode=0, stdout="[1,2]", stderr=""),
        ]
        self.assertEqual(ClipboardGateway("linux").read_text(), "[1,2]")
        self.assertEqual(mock_run.call_count, 3)

    @patch("subprocess.run")
    @patch("shutil.which", return_value=None)
    def test_no_tool_returns_empty_text(self, _mock_which, mock_run) -> None:
        with self.assertLogs("quicktype_paste.infrastructure.gateways.clipboard_gateway", level="WARNING"):
            self.assertEqual(ClipboardGateway("linux").read_text(), "")
        mock_run.assert_not_called()


def test_static_text_source() -> None:
    assert StaticTextSource('{"x": true}').read_text() == '{"x": true}'
