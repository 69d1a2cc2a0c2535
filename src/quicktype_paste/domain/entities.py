from dataclasses import dataclass
from enum import Enum
from typing import Optional


class FailureKind(Enum):
    """Terminal failure categories for a single paste invocation."""
    EMPTY_INPUT = "empty_input"
    UNSUPPORTED_LANGUAGE = "unsupported_language"
    NO_TARGET = "no_target"
    TOOL_NOT_FOUND = "tool_not_found"
    GENERATION_ERROR = "generation_error"
    TIMED_OUT = "timed_out"
    CANCELLED = "cancelled"
    IO_ERROR = "io_error"


@dataclass(frozen=True)
class InvocationRequest:
    """
    One request to turn JSON text into type definitions.

    Build through create() so the text is trimmed and the language lower-cased
    exactly once, before validation.
    """
    source_text: str
    target_language: str
    top_level_name: str
    timeout: Optional[float] = None

    @classmethod
    def create(
        cls,
        source_text: Optional[str],
        target_language: Optional[str],
        top_level_name: str,
        timeout: Optional[float] = None,
    ) -> "InvocationRequest":
        """Normalize raw caller input into a request."""
        return cls(
            source_text=(source_text or "").strip(),
            target_language=(target_language or "").strip().lower(),
            top_level_name=top_level_name,
            timeout=timeout,
        )


@dataclass(frozen=True)
class InvocationResult:
    """Tagged result of a paste: generated text on success, kind + message on failure."""
    generated_text: Optional[str] = None
    failure_kind: Optional[FailureKind] = None
    message: str = ""

    @classmethod
    def success(cls, generated_text: str) -> "InvocationResult":
        return cls(generated_text=generated_text)

    @classmethod
    def failure(cls, kind: FailureKind, message: str) -> "InvocationResult":
        return cls(failure_kind=kind, message=message)

    @property
    def ok(self) -> bool:
        return self.failure_kind is None

    def __bool__(self) -> bool:
        return self.ok


@dataclass(frozen=True)
class GeneratorOutput:
    """Raw outcome of one generator process run."""
    returncode: int
    stdout: str
    stderr: str


@dataclass(frozen=True)
class CursorPosition:
    """Zero-based insertion point inside a document. None means end of document."""
    line: Optional[int] = None
    column: int = 0

    @property
    def at_end(self) -> bool:
        return self.line is None
