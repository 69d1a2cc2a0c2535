"""Filesystem Gateway - Infrastructure implementation of FileSystemProtocol."""

import logging
import os
import tempfile
from pathlib import Path

from quicktype_paste.domain.protocols import FileSystemProtocol

logger = logging.getLogger(__name__)

TEMP_PREFIX = "quicktype-paste-"


class FileSystemGateway(FileSystemProtocol):
    """Infrastructure implementation of FileSystemProtocol using pathlib and tempfile."""

    def write_temp_file(self, content: str, suffix: str = ".json") -> str:
        """Write content to a fresh file in the system temp dir. Name is unique per call.

        A failed write removes the half-written file before re-raising.
        """
        fd, path = tempfile.mkstemp(prefix=TEMP_PREFIX, suffix=suffix)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
        except BaseException:
            self.remove_file(path)
            raise
        return path

    def remove_file(self, path: str) -> bool:
        """Delete a file; report failure instead of raising."""
        try:
            Path(path).unlink(missing_ok=True)
        except OSError as exc:
            logger.warning("Could not remove temporary file %s: %s", path, exc)
            return False
        return True

    def exists(self, path: str) -> bool:
        return Path(path).exists()

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        return Path(path).read_text(encoding=encoding)

    def write_text(self, path: str, content: str, encoding: str = "utf-8") -> None:
        Path(path).write_text(content, encoding=encoding)
