"""Raw generator output log: one appended entry per quicktype run."""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from quicktype_paste.domain.config import DEFAULT_LOG_DIR
from quicktype_paste.domain.protocols import RawLogPort

logger = logging.getLogger(__name__)

SEPARATOR = "=" * 60


class SubprocessLoggingService(RawLogPort):
    """Append stdout/stderr of each run to <log_dir>/raw_<tool>.log.

    The log is a debugging aid: a write failure is logged and reported as
    False, and the paste it belongs to carries on.
    """

    def __init__(self, log_dir: str = DEFAULT_LOG_DIR) -> None:
        self._log_dir = Path(log_dir)

    @property
    def log_dir(self) -> str:
        return str(self._log_dir)

    def log_path(self, tool: str) -> Path:
        return self._log_dir / f"raw_{tool}.log"

    @staticmethod
    def format_entry(tool: str, stdout: str, stderr: str, when: Optional[datetime] = None) -> str:
        """Header plus one section per non-empty stream, each ending in a newline."""
        stamp = (when or datetime.now(timezone.utc)).strftime("%Y-%m-%dT%H:%M:%SZ")
        parts = [f"\n{SEPARATOR}\n[{stamp}] {tool.upper()} raw output\n{SEPARATOR}\n"]
        for label, text in (("stdout", stdout), ("stderr", stderr)):
            if not text:
                continue
            parts.append(f"--- {label} ---\n{text}")
            if not text.endswith("\n"):
                parts.append("\n")
        return "".join(parts)

    def log_raw(self, tool: str, stdout: str, stderr: str) -> bool:
        entry = self.format_entry(tool, stdout, stderr)
        try:
            self._log_dir.mkdir(parents=True, exist_ok=True)
            with self.log_path(tool).open("a", encoding="utf-8", errors="replace") as f:
                f.write(entry)
        except OSError as exc:
            logger.warning("Could not write raw %s output under %s: %s", tool, self.log_dir, exc)
            return False
        return True
