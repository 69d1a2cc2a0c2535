"""CLI entry points for quicktype-paste - Thin Controller using Typer."""

import sys
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import typer

from quicktype_paste.domain.config import PasteConfig
from quicktype_paste.domain.entities import CursorPosition
from quicktype_paste.domain.errors import INSTALL_INSTRUCTIONS
from quicktype_paste.domain.languages import LanguageTable
from quicktype_paste.domain.protocols import (
    ClipboardPort,
    DocumentPort,
    FileSystemProtocol,
    GeneratorPort,
    InsertionSink,
    TelemetryPort,
)
from quicktype_paste.infrastructure.gateways.clipboard_gateway import StaticTextSource
from quicktype_paste.use_cases.dispatch import Dispatcher
from quicktype_paste.use_cases.paste_json import PasteJsonUseCase, PasteOutcome


@dataclass(frozen=True)
class CLIDependencies:
    """Explicit dependencies for the CLI. All dependencies injected at composition root."""

    config: PasteConfig
    telemetry: TelemetryPort
    generator: GeneratorPort
    filesystem: FileSystemProtocol
    clipboard: ClipboardPort
    documents: DocumentPort


class StdoutSink(InsertionSink):
    """Print generated code instead of editing the document."""

    def insert(self, text: str) -> None:
        typer.echo(text, nl=False)


class CLIAppFactory:
    """Creates the Typer app. No top-level functions."""

    @staticmethod
    def read_input(input_path: Optional[str]) -> str:
        """Text from a file, or stdin for '-'."""
        if input_path == "-":
            return sys.stdin.read()
        return Path(input_path).read_text(encoding="utf-8")

    @staticmethod
    def to_cursor(line: Optional[int], column: Optional[int]) -> CursorPosition:
        """1-based editor coordinates to a zero-based CursorPosition."""
        if line is None:
            return CursorPosition()
        return CursorPosition(line=max(line - 1, 0), column=max((column or 1) - 1, 0))

    @staticmethod
    def run_cancellable(use_case: PasteJsonUseCase, **kwargs: object) -> PasteOutcome:
        """Run the paste on a worker thread so Ctrl+C kills quicktype instead of orphaning it."""
        cancel_event = threading.Event()
        with ThreadPoolExecutor(max_workers=1) as pool:
            future = pool.submit(use_case.execute, cancel_event=cancel_event, **kwargs)
            try:
                return future.result()
            except KeyboardInterrupt:
                cancel_event.set()
                return future.result()

    @staticmethod
    def create_app(deps: CLIDependencies) -> typer.Typer:
        """Create the Typer app with explicitly injected dependencies. No Service Locator."""
        app = typer.Typer(
            name="quicktype-paste",
            help="Paste JSON as code: generate type definitions from clipboard JSON with quicktype.",
            add_completion=False,
            no_args_is_help=True,
        )

        @app.command()
        def paste(
            document: Optional[Path] = typer.Argument(None, help="Document to paste into; its extension picks the language"),  # noqa: B008, RUF100
            lang: Optional[str] = typer.Option(None, "--lang", "-l", help="Target language (overrides detection)"),
            top_level: Optional[str] = typer.Option(None, "--top-level", "-t", help="Top-level type name (default: document base name)"),
            line: Optional[int] = typer.Option(None, "--line", min=1, help="1-based cursor line (default: end of document)"),
            column: Optional[int] = typer.Option(None, "--column", min=1, help="1-based cursor column"),
            input_path: Optional[str] = typer.Option(None, "--input", "-i", help="Read JSON from a file, or '-' for stdin, instead of the clipboard"),
            to_stdout: bool = typer.Option(False, "--stdout", help="Print the generated code instead of inserting it"),
            timeout: Optional[float] = typer.Option(None, "--timeout", min=0.001, help="Seconds before quicktype is killed"),
            sanitize_name: Optional[bool] = typer.Option(
                None, "--sanitize-name/--no-sanitize-name", help="Force the top-level name into a valid identifier"),
        ) -> None:
            """Generate types from clipboard JSON and insert them at the cursor."""
            deps.telemetry.handshake()
            config = deps.config.with_overrides(timeout=timeout, sanitize_top_level=sanitize_name)
            clipboard = deps.clipboard
            if input_path is not None:
                try:
                    clipboard = StaticTextSource(CLIAppFactory.read_input(input_path))
                except (OSError, UnicodeDecodeError) as exc:
                    deps.telemetry.error(f"Cannot read {input_path}: {exc}")
                    sys.exit(1)
            use_case = PasteJsonUseCase(
                dispatcher=Dispatcher(deps.generator, deps.filesystem),
                clipboard=clipboard,
                documents=deps.documents,
                telemetry=deps.telemetry,
                config=config,
            )
            outcome = CLIAppFactory.run_cancellable(
                use_case,
                document_path=str(document) if document is not None else None,
                cursor=CLIAppFactory.to_cursor(line, column),
                language=lang,
                top_level_name=top_level,
                sink=StdoutSink() if to_stdout else None,
            )
            if not outcome.result.ok:
                deps.telemetry.error(outcome.message)
                sys.exit(1)
            deps.telemetry.step(f"{outcome.message} ({outcome.language}, top-level '{outcome.top_level_name}')")
            sys.exit(0)

        @app.command()
        def languages() -> None:
            """List the accepted --lang spellings grouped by language."""
            for canonical, spellings in LanguageTable.aliases().items():
                typer.echo(f"{canonical}: {', '.join(spellings)}")

        @app.command()
        def doctor() -> None:
            """Check that the quicktype executable can be found."""
            deps.telemetry.handshake()
            resolved = deps.generator.resolve_executable()
            if resolved is None:
                deps.telemetry.error(INSTALL_INSTRUCTIONS)
                sys.exit(1)
            deps.telemetry.step(f"quicktype found: {resolved}")
            if deps.config.timeout is None:
                deps.telemetry.warning("No timeout configured; a hung quicktype run blocks until cancelled.")
            sys.exit(0)

        return app
