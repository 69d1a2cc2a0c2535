"""Quicktype adapter: run the generator as a subprocess and capture its output."""

import logging
import shutil
import subprocess
import threading
import time
from typing import TYPE_CHECKING, Optional

from quicktype_paste.domain.entities import GeneratorOutput
from quicktype_paste.domain.errors import (
    GenerationCancelledError,
    GenerationTimeoutError,
    ToolNotFoundError,
)
from quicktype_paste.domain.protocols import GeneratorPort

if TYPE_CHECKING:
    from quicktype_paste.domain.protocols import RawLogPort

logger = logging.getLogger(__name__)

# Only defined on Windows; keeps the console window of quicktype.cmd hidden.
CREATE_NO_WINDOW = getattr(subprocess, "CREATE_NO_WINDOW", 0)

CANCEL_POLL_INTERVAL = 0.1


class QuicktypeAdapter(GeneratorPort):
    """Adapter for running quicktype and collecting stdout/stderr."""

    TOOL = "quicktype"

    def __init__(
        self,
        executable: str,
        raw_log_port: Optional["RawLogPort"] = None,
    ) -> None:
        self.executable = executable
        self._raw_log_port = raw_log_port

    def build_command(
        self,
        artifact_path: str,
        target_language: str,
        top_level_name: str,
    ) -> list[str]:
        """Argument vector in the order quicktype expects. Never run through a shell."""
        return [
            self.resolve_executable() or self.executable,
            "--telemetry", "disable",
            "--lang", target_language,
            "--top-level", top_level_name,
            artifact_path,
        ]

    def resolve_executable(self) -> Optional[str]:
        return shutil.which(self.executable)

    def generate(
        self,
        artifact_path: str,
        target_language: str,
        top_level_name: str,
        timeout: Optional[float] = None,
        cancel_event: Optional[threading.Event] = None,
    ) -> GeneratorOutput:
        """Run quicktype once and wait for it to exit.

        Args:
            artifact_path: JSON file quicktype reads
            target_language: value for --lang, passed through as given
            top_level_name: value for --top-level
            timeout: seconds before the process is killed; None waits forever
            cancel_event: when set, the process is killed and the run is abandoned

        Returns:
            GeneratorOutput with the exit code and both captured streams
        """
        cmd = self.build_command(artifact_path, target_language, top_level_name)
        logger.debug("Running %s", cmd)

        try:
            process = subprocess.Popen(
                cmd,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                errors="replace",
                creationflags=CREATE_NO_WINDOW,
            )
        except OSError as exc:
            # FileNotFoundError when missing, PermissionError when not executable
            logger.warning("Could not launch %s: %s", self.executable, exc)
            raise ToolNotFoundError() from exc

        stdout, stderr = self._wait(process, timeout, cancel_event)
        stdout = stdout or ""
        stderr = stderr or ""
        if self._raw_log_port is not None:
            self._raw_log_port.log_raw(self.TOOL, stdout, stderr)

        logger.debug("%s exited with code %s", self.TOOL, process.returncode)
        return GeneratorOutput(returncode=process.returncode, stdout=stdout, stderr=stderr)

    def _wait(
        self,
        process: subprocess.Popen,
        timeout: Optional[float],
        cancel_event: Optional[threading.Event],
    ) -> tuple[str, str]:
        if cancel_event is None:
            try:
                return process.communicate(timeout=timeout)
            except subprocess.TimeoutExpired:
                self._kill(process)
                raise GenerationTimeoutError(timeout or 0) from None

        # Poll so a cancel request is noticed while quicktype is still running.
        deadline = None if timeout is None else time.monotonic() + timeout
        while True:
            if cancel_event.is_set():
                self._kill(process)
                raise GenerationCancelledError()
            wait = CANCEL_POLL_INTERVAL
            if deadline is not None:
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    self._kill(process)
                    raise GenerationTimeoutError(timeout or 0)
                wait = min(wait, remaining)
            try:
                return process.communicate(timeout=wait)
            except subprocess.TimeoutExpired:
                continue

    @staticmethod
    def _kill(process: subprocess.Popen) -> None:
        logger.warning("Killing %s (pid %s)", QuicktypeAdapter.TOOL, process.pid)
        process.kill()
        process.communicate()
