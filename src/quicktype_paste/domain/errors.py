"""Exception hierarchy. The Dispatcher turns these into InvocationResult failures."""

from quicktype_paste.domain.entities import FailureKind

INSTALL_INSTRUCTIONS = (
    "Cannot paste - Cannot find quicktype, please install quicktype "
    "using `npm install -g quicktype`"
)


class QuicktypePasteError(Exception):
    """Base error. Subclasses pin the FailureKind they map to."""

    kind: FailureKind = FailureKind.GENERATION_ERROR

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(QuicktypePasteError):
    """Request rejected before any process is launched."""


class EmptyInputError(ValidationError):
    kind = FailureKind.EMPTY_INPUT

    def __init__(self, message: str = "Cannot paste - the clipboard is empty") -> None:
        super().__init__(message)


class UnsupportedLanguageError(ValidationError):
    kind = FailureKind.UNSUPPORTED_LANGUAGE

    def __init__(self, language: str) -> None:
        super().__init__(f'Language "{language}" not supported')
        self.language = language


class NoTargetError(ValidationError):
    kind = FailureKind.NO_TARGET

    def __init__(self, message: str = "Cannot paste - please open a document") -> None:
        super().__init__(message)


class ToolNotFoundError(QuicktypePasteError):
    kind = FailureKind.TOOL_NOT_FOUND

    def __init__(self, message: str = INSTALL_INSTRUCTIONS) -> None:
        super().__init__(message)


class GenerationTimeoutError(QuicktypePasteError):
    kind = FailureKind.TIMED_OUT

    def __init__(self, timeout: float) -> None:
        super().__init__(f"quicktype did not finish within {timeout:g} seconds")
        self.timeout = timeout


class GenerationCancelledError(QuicktypePasteError):
    kind = FailureKind.CANCELLED

    def __init__(self, message: str = "quicktype run was cancelled") -> None:
        super().__init__(message)


class ConfigurationError(QuicktypePasteError):
    """Invalid [tool.quicktype-paste] settings. Raised at load time, never mapped to a result."""


class LocalIOError(QuicktypePasteError):
    """Reading or writing a local file around the generator run failed."""

    kind = FailureKind.IO_ERROR


class ArtifactWriteError(LocalIOError):
    def __init__(self, detail: str) -> None:
        super().__init__(f"Cannot paste - could not write the temporary JSON file: {detail}")


class InsertionError(LocalIOError):
    def __init__(self, detail: str) -> None:
        super().__init__(f"Cannot paste - could not insert the generated code: {detail}")
