import os
from typing import TYPE_CHECKING, Any, Optional, cast

from quicktype_paste.domain.config import PasteConfig
from quicktype_paste.infrastructure.adapters.quicktype_adapter import QuicktypeAdapter
from quicktype_paste.infrastructure.config_file_loader import ConfigFileLoader
from quicktype_paste.infrastructure.gateways.clipboard_gateway import ClipboardGateway
from quicktype_paste.infrastructure.gateways.document_gateway import DocumentGateway
from quicktype_paste.infrastructure.gateways.filesystem_gateway import FileSystemGateway
from quicktype_paste.infrastructure.services.subprocess_logging import (
    SubprocessLoggingService,
)
from quicktype_paste.interface.telemetry import ProjectTelemetry

if TYPE_CHECKING:
    from quicktype_paste.domain.protocols import (
        ClipboardPort,
        DocumentPort,
        FileSystemProtocol,
        GeneratorPort,
        TelemetryPort,
    )


class PasteContainer:
    """Dependency Injection Container for quicktype-paste."""

    def __init__(self, config: Optional[PasteConfig] = None) -> None:
        self._singletons: dict[str, Any] = {}
        self._register_defaults(config)

    def _register_defaults(self, config: Optional[PasteConfig]) -> None:
        """Register default implementations for protocols."""
        if config is None:
            config = PasteConfig.from_sources(
                ConfigFileLoader.load_config_from_fs(), dict(os.environ)
            )
        self.register_singleton("PasteConfig", config)

        telemetry = ProjectTelemetry("QUICKTYPE", "cyan", "Paste JSON as Code")
        self.register_singleton("TelemetryPort", telemetry)

        filesystem = FileSystemGateway()
        self.register_singleton("FileSystemGateway", filesystem)
        self.register_singleton("DocumentGateway", DocumentGateway(filesystem))
        self.register_singleton("ClipboardGateway", ClipboardGateway())

        # Raw generator output -> <log_dir>/raw_quicktype.log
        raw_log_service = SubprocessLoggingService(config.log_dir) if config.raw_log else None
        self.register_singleton("SubprocessLoggingService", raw_log_service)
        self.register_singleton(
            "QuicktypeAdapter",
            QuicktypeAdapter(config.executable, raw_log_port=raw_log_service),
        )

    def register_singleton(self, key: str, instance: Any) -> None:
        """Register a singleton instance."""
        self._singletons[key] = instance

    def get(self, key: str) -> Any:
        """Retrieve a dependency by key. Prefer explicit get_* methods for type safety."""
        if key in self._singletons:
            return self._singletons[key]
        raise ValueError(f"Dependency '{key}' not registered.")

    def get_config(self) -> PasteConfig:
        return cast(PasteConfig, self.get("PasteConfig"))

    def get_telemetry_port(self) -> "TelemetryPort":
        """Return the telemetry/UI port."""
        return cast("TelemetryPort", self.get("TelemetryPort"))

    def get_filesystem_gateway(self) -> "FileSystemProtocol":
        return cast("FileSystemProtocol", self.get("FileSystemGateway"))

    def get_document_gateway(self) -> "DocumentPort":
        return cast("DocumentPort", self.get("DocumentGateway"))

    def get_clipboard(self) -> "ClipboardPort":
        return cast("ClipboardPort", self.get("ClipboardGateway"))

    def get_generator(self) -> "GeneratorPort":
        """Return the quicktype subprocess adapter."""
        return cast("GeneratorPort", self.get("QuicktypeAdapter"))
