"""Terminal telemetry: rich console output mirrored to the logging tree."""

import logging

from rich.console import Console
from rich.markup import escape

from quicktype_paste.domain.protocols import TelemetryPort


class ProjectTelemetry(TelemetryPort):
    """Console + logger pair behind TelemetryPort."""

    def __init__(self, project_name: str, color: str, welcome: str) -> None:
        self.project_name = project_name
        self.color = color
        self.welcome = welcome
        self.tag = f"[{project_name}]"
        # stderr, so generated code printed to stdout stays clean
        self.console = Console(stderr=True)
        self.logger = logging.getLogger(project_name.lower())

    def handshake(self) -> None:
        self.console.print(f"[bold {self.color}]{escape(self.tag)}[/] {escape(self.welcome)}")
        self.logger.info("%s: %s", self.project_name, self.welcome)

    def step(self, message: str) -> None:
        self.console.print(f"[{self.color}]>[/] {escape(message)}", highlight=False)
        self.logger.info(message)

    def warning(self, message: str) -> None:
        self.console.print(f"[yellow]WARNING[/] {escape(message)}", highlight=False)
        self.logger.warning(message)

    def error(self, message: str) -> None:
        self.console.print(f"[bold red]ERROR[/] {escape(message)}", highlight=False)
        self.logger.error(message)

    def debug(self, message: str) -> None:
        self.logger.debug(message)
