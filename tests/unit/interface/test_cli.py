"""Unit tests for Typer-based CLI interface."""

from pathlib import Path
from unittest.mock import Mock, patch

from typer.testing import CliRunner

from quicktype_paste.domain.config import PasteConfig
from quicktype_paste.domain.entities import CursorPosition, GeneratorOutput
from quicktype_paste.infrastructure.gateways.clipboard_gateway import StaticTextSource
from quicktype_paste.infrastructure.gateways.document_gateway import DocumentGateway
from quicktype_paste.infrastructure.gateways.filesystem_gateway import FileSystemGateway
from quicktype_paste.interface.cli import CLIAppFactory, CLIDependencies

runner = CliRunner()


def _make_deps(**overrides) -> CLIDependencies:
    """Create CLIDependencies with a mock generator and real file gateways."""
    filesystem = FileSystemGateway()
    generator = Mock()
    generator.generate.return_value = GeneratorOutput(0, "interface Foo { a: number; }\n", "")
    generator.resolve_executable.return_value = "/usr/bin/quicktype"
    defaults: dict = {
        "config": PasteConfig(),
        "telemetry": Mock(),
        "generator": generator,
        "filesystem": filesystem,
        "clipboard": StaticTextSource('{"a":1}'),
        "documents": DocumentGateway(filesystem),
    }
    defaults.update(overrides)
    return CLIDependencies(**defaults)


class TestToCursor:
    def test_no_line_means_end(self) -> None:
        assert CLIAppFactory.to_cursor(None, 5) == CursorPosition()

    def test_one_based_to_zero_based(self) -> None:
        assert CLIAppFactory.to_cursor(3, 7) == CursorPosition(line=2, column=6)
        assert CLIAppFactory.to_cursor(1, None) == CursorPosition(line=0, column=0)


class TestPasteCommand:
    def test_paste_inserts_into_document(self, tmp_path: Path) -> None:
        deps = _make_deps()
        document = tmp_path / "Foo.ts"
        document.write_text("", encoding="utf-8")

        result = runner.invoke(CLIAppFactory.create_app(deps), ["paste", str(document)])

        assert result.exit_code == 0, result.output
        assert document.read_text(encoding="utf-8") == "interface Foo { a: number; }\n"
        args = deps.generator.generate.call_args[0]
        assert args[1:] == ("typescript", "Foo")
        deps.telemetry.handshake.assert_called_once()
        deps.telemetry.error.assert_not_called()

    def test_paste_to_stdout_leaves_document_alone(self, tmp_path: Path) -> None:
        deps = _make_deps()
        document = tmp_path / "Foo.ts"

        result = runner.invoke(CLIAppFactory.create_app(deps), ["paste", str(document), "--stdout"])

        assert result.exit_code == 0
        assert "interface Foo { a: number; }" in result.stdout
        assert not document.exists()

    def test_paste_reads_input_file_and_options(self, tmp_path: Path) -> None:
        deps = _make_deps(clipboard=StaticTextSource(""))
        source = tmp_path / "sample.json"
        source.write_text('{"id": 7}', encoding="utf-8")
        document = tmp_path / "notes.txt"

        result = runner.invoke(
            CLIAppFactory.create_app(deps),
            ["paste", str(document), "--input", str(source), "--lang", "go",
             "--top-level", "Order", "--timeout", "3"],
        )

        assert result.exit_code == 0, result.output
        args, kwargs = deps.generator.generate.call_args
        assert args[1:] == ("go", "Order")
        assert kwargs["timeout"] == 3.0

    def test_paste_reads_stdin(self, tmp_path: Path) -> None:
        deps = _make_deps(clipboard=StaticTextSource(""))
        result = runner.invoke(
            CLIAppFactory.create_app(deps),
            ["paste", str(tmp_path / "Foo.cs"), "--input", "-", "--stdout"],
            input='{"b": true}',
        )
        assert result.exit_code == 0, result.output

    def test_unreadable_input_file(self, tmp_path: Path) -> None:
        deps = _make_deps()
        result = runner.invoke(
            CLIAppFactory.create_app(deps),
            ["paste", str(tmp_path / "Foo.cs"), "--input", str(tmp_path / "nope.json")],
        )
        assert result.exit_code == 1
        deps.telemetry.error.assert_called_once()
        deps.generator.generate.assert_not_called()

    def test_input_file_that_is_not_utf8(self, tmp_path: Path) -> None:
        deps = _make_deps()
        source = tmp_path / "in.json"
        source.write_bytes(b'{"a":"\xff"}')

        result = runner.invoke(
            CLIAppFactory.create_app(deps), ["paste", str(tmp_path / "Foo.ts"), "--input", str(source)]
        )

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert deps.telemetry.error.call_args[0][0].startswith(f"Cannot read {source}")
        deps.generator.generate.assert_not_called()

    def test_document_that_is_not_utf8(self, tmp_path: Path) -> None:
        deps = _make_deps()
        document = tmp_path / "Foo.ts"
        document.write_bytes(b"// caf\xe9\n")

        result = runner.invoke(CLIAppFactory.create_app(deps), ["paste", str(document)])

        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        message = deps.telemetry.error.call_args[0][0]
        assert message.startswith("Cannot paste - could not insert the generated code")
        assert document.read_bytes() == b"// caf\xe9\n"

    def test_empty_clipboard_fails(self, tmp_path: Path) -> None:
        deps = _make_deps(clipboard=StaticTextSource("\n"))
        result = runner.invoke(CLIAppFactory.create_app(deps), ["paste", str(tmp_path / "Foo.ts")])
        assert result.exit_code == 1
        deps.telemetry.error.assert_called_once_with("Cannot paste - the clipboard is empty")

    def test_missing_document_fails(self) -> None:
        deps = _make_deps()
        result = runner.invoke(CLIAppFactory.create_app(deps), ["paste"])
        assert result.exit_code == 1
        deps.telemetry.error.assert_called_once_with("Cannot paste - please open a document")

    def test_unsupported_language_fails(self, tmp_path: Path) -> None:
        deps = _make_deps()
        result = runner.invoke(CLIAppFactory.create_app(deps), ["paste", str(tmp_path / "script.py")])
        assert result.exit_code == 1
        deps.telemetry.error.assert_called_once_with('Language "" not supported')
        deps.generator.generate.assert_not_called()

    def test_generation_error_shows_stderr(self, tmp_path: Path) -> None:
        deps = _make_deps()
        deps.generator.generate.return_value = GeneratorOutput(1, "", "bad token at line 3")
        document = tmp_path / "Foo.ts"
        document.write_text("keep\n", encoding="utf-8")

        result = runner.invoke(CLIAppFactory.create_app(deps), ["paste", str(document)])

        assert result.exit_code == 1
        deps.telemetry.error.assert_called_once_with(
            "quicktype could not process your JSON:\n\nbad token at line 3"
        )
        assert document.read_text(encoding="utf-8") == "keep\n"

    def test_sanitize_name_flag(self, tmp_path: Path) -> None:
        deps = _make_deps()
        result = runner.invoke(
            CLIAppFactory.create_app(deps),
            ["paste", str(tmp_path / "user-profile.ts"), "--sanitize-name", "--stdout"],
        )
        assert result.exit_code == 0
        assert deps.generator.generate.call_args[0][2] == "UserProfile"


class TestLanguagesCommand:
    def test_lists_spellings(self) -> None:
        result = runner.invoke(CLIAppFactory.create_app(_make_deps()), ["languages"])
        assert result.exit_code == 0
        assert "typescript: ts, tsx, typescript" in result.stdout
        assert "csharp: cs, csharp" in result.stdout


class TestDoctorCommand:
    def test_found(self) -> None:
        deps = _make_deps(config=PasteConfig(timeout=30.0))
        result = runner.invoke(CLIAppFactory.create_app(deps), ["doctor"])
        assert result.exit_code == 0
        deps.telemetry.step.assert_called_once_with("quicktype found: /usr/bin/quicktype")
        deps.telemetry.warning.assert_not_called()

    def test_found_without_timeout_warns(self) -> None:
        deps = _make_deps()
        result = runner.invoke(CLIAppFactory.create_app(deps), ["doctor"])
        assert result.exit_code == 0
        deps.telemetry.warning.assert_called_once()

    def test_missing(self) -> None:
        deps = _make_deps()
        deps.generator.resolve_executable.return_value = None
        result = runner.invoke(CLIAppFactory.create_app(deps), ["doctor"])
        assert result.exit_code == 1
        assert "npm install -g quicktype" in deps.telemetry.error.call_args[0][0]


class TestRunCancellable:
    def test_keyboard_interrupt_sets_cancel_event(self) -> None:
        use_case = Mock()
        sentinel = object()

        with patch("concurrent.futures.Future.result", side_effect=[KeyboardInterrupt(), sentinel]):
            outcome = CLIAppFactory.run_cancellable(use_case, document_path="Foo.ts")

        assert outcome is sentinel
        cancel_event = use_case.execute.call_args.kwargs["cancel_event"]
        assert cancel_event.is_set()
