"""Use Case: Paste JSON as Code - the editor command built on the Dispatcher."""

import threading
from dataclasses import dataclass
from typing import Optional

from quicktype_paste.domain.config import PasteConfig
from quicktype_paste.domain.entities import (
    CursorPosition,
    FailureKind,
    InvocationRequest,
    InvocationResult,
)
from quicktype_paste.domain.errors import (
    EmptyInputError,
    NoTargetError,
    QuicktypePasteError,
)
from quicktype_paste.domain.naming import TopLevelNaming
from quicktype_paste.domain.protocols import (
    ClipboardPort,
    DispatcherProtocol,
    DocumentPort,
    InsertionSink,
    TelemetryPort,
)


@dataclass(frozen=True)
class PasteOutcome:
    """What the caller shows the user: the raw result plus a ready-made message."""
    result: InvocationResult
    message: str
    top_level_name: str = ""
    language: str = ""


class PasteJsonUseCase:
    """Read JSON, resolve the document, run the Dispatcher, word the outcome."""

    def __init__(
        self,
        dispatcher: DispatcherProtocol,
        clipboard: ClipboardPort,
        documents: DocumentPort,
        telemetry: TelemetryPort,
        config: PasteConfig,
    ) -> None:
        self.dispatcher = dispatcher
        self.clipboard = clipboard
        self.documents = documents
        self.telemetry = telemetry
        self.config = config

    def execute(
        self,
        document_path: Optional[str],
        cursor: CursorPosition = CursorPosition(),
        language: Optional[str] = None,
        top_level_name: Optional[str] = None,
        sink: Optional[InsertionSink] = None,
        cancel_event: Optional[threading.Event] = None,
    ) -> PasteOutcome:
        """
        Paste clipboard JSON into a document as generated types.

        Args:
            document_path: active document; None means no document is open
            cursor: insertion point inside the document
            language: overrides the language detected from the document
            top_level_name: overrides the name derived from the document
            sink: alternative destination (e.g. stdout); the document still
                supplies language and name
            cancel_event: set from another thread to abandon the run

        Returns:
            PasteOutcome with the Dispatcher result and a user-facing message
        """
        source_text = self.clipboard.read_text().strip()
        if not source_text:
            return self._reject(EmptyInputError())

        document = (
            self.documents.open(document_path, cursor, language_override=language)
            if document_path
            else None
        )
        if document is None:
            return self._reject(NoTargetError())

        target_language = document.language or ""
        name = top_level_name or TopLevelNaming.from_document(document.path)
        if self.config.sanitize_top_level:
            name = TopLevelNaming.sanitize(name)

        self.telemetry.step(
            f"Generating {target_language or '?'} types '{name}' for {document.path}..."
        )
        request = InvocationRequest.create(
            source_text, target_language, name, timeout=self.config.timeout
        )
        result = self.dispatcher.run(
            request, sink if sink is not None else document, cancel_event=cancel_event
        )
        return PasteOutcome(
            result=result,
            message=self.describe(result),
            top_level_name=name,
            language=request.target_language,
        )

    def _reject(self, error: QuicktypePasteError) -> PasteOutcome:
        result = InvocationResult.failure(error.kind, error.message)
        return PasteOutcome(result=result, message=self.describe(result))

    @staticmethod
    def describe(result: InvocationResult) -> str:
        """User-facing wording for a result, suitable for a modal message."""
        if result.ok:
            return "Pasted JSON as code."
        if result.failure_kind is FailureKind.GENERATION_ERROR:
            return f"quicktype could not process your JSON:\n\n{result.message}"
        return result.message
