"""Use Case: Dispatch - turn one validated request into one quicktype run."""

import logging
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Optional

from quicktype_paste.domain.entities import FailureKind, InvocationRequest, InvocationResult
from quicktype_paste.domain.errors import (
    ArtifactWriteError,
    EmptyInputError,
    InsertionError,
    NoTargetError,
    QuicktypePasteError,
    UnsupportedLanguageError,
)
from quicktype_paste.domain.languages import LanguageTable
from quicktype_paste.domain.protocols import (
    DispatcherProtocol,
    FileSystemProtocol,
    GeneratorPort,
    InsertionSink,
)

logger = logging.getLogger(__name__)


class Dispatcher(DispatcherProtocol):
    """
    Stateless pipeline: validate -> materialize -> invoke -> deliver.

    Holds only its collaborators, so one instance may serve any number of
    calls, including concurrent ones; each call owns its own temp file.
    """

    def __init__(self, generator: GeneratorPort, filesystem: FileSystemProtocol) -> None:
        self.generator = generator
        self.filesystem = filesystem

    def validate(self, request: InvocationRequest, sink: Optional[InsertionSink]) -> None:
        """Raise the first ValidationError that applies. Order: input, language, target."""
        if not request.source_text.strip():
            raise EmptyInputError()
        if not LanguageTable.is_supported(request.target_language):
            raise UnsupportedLanguageError(request.target_language)
        if sink is None:
            raise NoTargetError()

    @contextmanager
    def materialize(self, source_text: str) -> Iterator[str]:
        """Yield the path of a temp file holding source_text; always attempt deletion."""
        try:
            path = self.filesystem.write_temp_file(source_text, suffix=".json")
        except (OSError, UnicodeError) as exc:
            raise ArtifactWriteError(str(exc)) from exc
        logger.debug("Wrote %d characters to %s", len(source_text), path)
        try:
            yield path
        finally:
            if not self.filesystem.remove_file(path):
                logger.warning("Temporary file %s was left behind", path)

    def invoke(
        self,
        artifact_path: str,
        target_language: str,
        top_level_name: str,
        timeout: Optional[float] = None,
        cancel_event: Optional[threading.Event] = None,
    ) -> InvocationResult:
        """Run the generator and translate its exit status into a result."""
        try:
            output = self.generator.generate(
                artifact_path,
                target_language,
                top_level_name,
                timeout=timeout,
                cancel_event=cancel_event,
            )
        except QuicktypePasteError as exc:
            return InvocationResult.failure(exc.kind, exc.message)

        if output.returncode != 0:
            logger.info("quicktype failed with exit code %s", output.returncode)
            return InvocationResult.failure(FailureKind.GENERATION_ERROR, output.stderr)
        return InvocationResult.success(output.stdout)

    def run(
        self,
        request: InvocationRequest,
        sink: Optional[InsertionSink],
        cancel_event: Optional[threading.Event] = None,
    ) -> InvocationResult:
        """Full pipeline. Never raises for a paste failure; the sink sees text only on success."""
        try:
            self.validate(request, sink)
        except QuicktypePasteError as exc:
            logger.info("Rejected request: %s", exc.message)
            return InvocationResult.failure(exc.kind, exc.message)

        try:
            with self.materialize(request.source_text) as artifact_path:
                result = self.invoke(
                    artifact_path,
                    request.target_language.lower(),
                    request.top_level_name,
                    timeout=request.timeout,
                    cancel_event=cancel_event,
                )
        except ArtifactWriteError as exc:
            logger.warning("%s", exc.message)
            return InvocationResult.failure(exc.kind, exc.message)

        if result.ok and sink is not None:
            return self.deliver(result, sink)
        return result

    @staticmethod
    def deliver(result: InvocationResult, sink: InsertionSink) -> InvocationResult:
        """Hand generated text to the sink; a failed write becomes an IO_ERROR result."""
        try:
            sink.insert(result.generated_text or "")
        except (OSError, UnicodeError) as exc:
            error = InsertionError(str(exc))
            logger.warning("%s", error.message)
            return InvocationResult.failure(error.kind, error.message)
        return result
