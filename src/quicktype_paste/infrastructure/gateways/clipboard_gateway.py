"""Clipboard Gateway - read the system clipboard through the platform's own CLI tool."""

import logging
import shutil
import subprocess
import sys
from typing import Optional

from quicktype_paste.domain.protocols import ClipboardPort

logger = logging.getLogger(__name__)

# First available command wins.
POSIX_COMMANDS: tuple[tuple[str, ...], ...] = (
    ("wl-paste", "--no-newline"),
    ("xclip", "-selection", "clipboard", "-o"),
    ("xsel", "--clipboard", "--output"),
)
MACOS_COMMANDS: tuple[tuple[str, ...], ...] = (("pbpaste",),)
WINDOWS_COMMANDS: tuple[tuple[str, ...], ...] = (
    ("powershell", "-NoProfile", "-Command", "Get-Clipboard -Raw"),
)

CLIPBOARD_TIMEOUT = 10


class ClipboardGateway(ClipboardPort):
    """Infrastructure implementation of ClipboardPort using subprocess."""

    def __init__(self, platform: Optional[str] = None) -> None:
        self._platform = platform or sys.platform

    def candidate_commands(self) -> tuple[tuple[str, ...], ...]:
        if self._platform == "darwin":
            return MACOS_COMMANDS
        if self._platform == "win32":
            return WINDOWS_COMMANDS
        return POSIX_COMMANDS

    def read_text(self) -> str:
        """Return clipboard text, or "" when no clipboard tool is usable."""
        for cmd in self.candidate_commands():
            if shutil.which(cmd[0]) is None:
                continue
            try:
                result = subprocess.run(
                    list(cmd),
                    capture_output=True,
                    text=True,
                    encoding="utf-8",
                    errors="replace",
                    timeout=CLIPBOARD_TIMEOUT,
                    check=False,
                )
            except (OSError, subprocess.TimeoutExpired) as exc:
                logger.warning("Clipboard command %s failed: %s", cmd[0], exc)
                continue
            if result.returncode != 0:
                logger.debug("Clipboard command %s exited %s: %s", cmd[0], result.returncode, result.stderr.strip())
                continue
            return result.stdout
        logger.warning("No clipboard tool available (tried: %s)", ", ".join(c[0] for c in self.candidate_commands()))
        return ""


class StaticTextSource(ClipboardPort):
    """Stands in for the clipboard when text comes from a file or stdin."""

    def __init__(self, text: str) -> None:
        self._text = text

    def read_text(self) -> str:
        return self._text
