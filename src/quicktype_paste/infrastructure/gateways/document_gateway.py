"""Document Gateway - text files acting as the editor's active document."""

import logging
from pathlib import Path
from typing import Optional

from quicktype_paste.domain.entities import CursorPosition
from quicktype_paste.domain.languages import LanguageTable
from quicktype_paste.domain.protocols import (
    DocumentPort,
    FileSystemProtocol,
    TextDocumentProtocol,
)

logger = logging.getLogger(__name__)


class TextDocument(TextDocumentProtocol):
    """A file on disk plus the cursor where generated text goes."""

    def __init__(
        self,
        path: str,
        cursor: CursorPosition,
        filesystem: FileSystemProtocol,
        language_override: Optional[str] = None,
    ) -> None:
        self.path = path
        self.cursor = cursor
        self._filesystem = filesystem
        self._language_override = language_override

    @property
    def language(self) -> Optional[str]:
        """Explicit override wins, otherwise detected from the file extension."""
        if self._language_override:
            return self._language_override.lower()
        return LanguageTable.for_path(self.path)

    def insert(self, text: str) -> None:
        content = self._filesystem.read_text(self.path) if self._filesystem.exists(self.path) else ""
        offset = self.offset_for(content, self.cursor)
        self._filesystem.write_text(self.path, content[:offset] + text + content[offset:])
        logger.info("Inserted %d characters into %s at offset %d", len(text), self.path, offset)

    @staticmethod
    def offset_for(content: str, cursor: CursorPosition) -> int:
        """Character offset of a zero-based line/column, clamped to the document."""
        if cursor.at_end:
            return len(content)
        lines = content.splitlines(keepends=True)
        if cursor.line >= len(lines):
            return len(content)
        line_start = sum(len(line) for line in lines[:cursor.line])
        line_text = lines[cursor.line].rstrip("\r\n")
        return line_start + min(max(cursor.column, 0), len(line_text))


class DocumentGateway(DocumentPort):
    """Open a path as a TextDocument. Missing parent or directory path means no target."""

    def __init__(self, filesystem: FileSystemProtocol) -> None:
        self._filesystem = filesystem

    def open(
        self,
        path: str,
        cursor: CursorPosition,
        language_override: Optional[str] = None,
    ) -> Optional[TextDocument]:
        target = Path(path)
        if target.is_dir() or not target.parent.is_dir():
            logger.debug("No document at %s", path)
            return None
        return TextDocument(str(target), cursor, self._filesystem, language_override)
