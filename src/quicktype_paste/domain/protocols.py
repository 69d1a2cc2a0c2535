import threading
from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    from quicktype_paste.domain.entities import (
        CursorPosition,
        InvocationRequest,
        GeneratorOutput,
        InvocationResult,
    )


class TelemetryPort(Protocol):
    """Protocol for telemetry/UI updates."""

    def step(self, message: str) -> None: ...
    def error(self, message: str) -> None: ...
    def warning(self, message: str) -> None: ...
    def debug(self, message: str) -> None: ...
    def handshake(self) -> None: ...


class RawLogPort(Protocol):
    """Persist raw stdout/stderr of external tools for later inspection."""

    def log_raw(self, tool: str, stdout: str, stderr: str) -> bool:
        """Return False when the output could not be stored. Never raises."""
        ...


class GeneratorPort(Protocol):
    """Runs the external code generator once. Implemented by QuicktypeAdapter."""

    def generate(
        self,
        artifact_path: str,
        target_language: str,
        top_level_name: str,
        timeout: Optional[float] = None,
        cancel_event: Optional[threading.Event] = None,
    ) -> "GeneratorOutput":
        """
        Launch the generator and wait for it.

        Raises ToolNotFoundError, GenerationTimeoutError or GenerationCancelledError.
        A non-zero exit is reported through GeneratorOutput.returncode, not raised.
        """
        ...

    def resolve_executable(self) -> Optional[str]:
        """Return the absolute path of the generator if it can be found."""
        ...


class FileSystemProtocol(Protocol):
    """Protocol for filesystem operations - abstracts Path usage."""

    def write_temp_file(self, content: str, suffix: str = ".json") -> str:
        """Write content to a new uniquely named temp file and return its path."""
        ...

    def remove_file(self, path: str) -> bool:
        """Delete a file. Returns False instead of raising when it cannot."""
        ...

    def exists(self, path: str) -> bool:
        ...

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        ...

    def write_text(self, path: str, content: str, encoding: str = "utf-8") -> None:
        ...


class ClipboardPort(Protocol):
    """Source of the JSON text to paste."""

    def read_text(self) -> str:
        ...


class InsertionSink(Protocol):
    """Destination for generated text. Written only after a successful run."""

    def insert(self, text: str) -> None:
        ...


class DocumentPort(Protocol):
    """Opens editor documents that can receive generated text."""

    def open(
        self,
        path: str,
        cursor: "CursorPosition",
        language_override: Optional[str] = None,
    ) -> Optional["TextDocumentProtocol"]:
        """Return the document, or None when there is nothing to paste into."""
        ...


class TextDocumentProtocol(InsertionSink, Protocol):
    path: str

    @property
    def language(self) -> Optional[str]:
        ...


class DispatcherProtocol(Protocol):
    def run(
        self,
        request: "InvocationRequest",
        sink: Optional[InsertionSink],
        cancel_event: Optional[threading.Event] = None,
    ) -> "InvocationResult":
        ...
