"""Package entry point - composition root. Wire dependencies and run the CLI app."""

import logging
import os
import sys

from quicktype_paste.domain.errors import ConfigurationError
from quicktype_paste.infrastructure.di.container import PasteContainer
from quicktype_paste.interface.cli import CLIAppFactory, CLIDependencies

LOG_LEVEL_ENV_VAR = "QUICKTYPE_PASTE_LOG_LEVEL"


def main() -> None:
    """Entry point: wire dependencies at composition root, create app, run."""
    # Telemetry already prints to the console; log records only when asked for.
    log_level = os.environ.get(LOG_LEVEL_ENV_VAR)
    if log_level:
        logging.basicConfig(
            level=log_level.upper(),
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )
    try:
        container = PasteContainer()
    except ConfigurationError as exc:
        print(f"[quicktype-paste] invalid [tool.quicktype-paste] configuration: {exc}", file=sys.stderr)
        sys.exit(2)

    deps = CLIDependencies(
        config=container.get_config(),
        telemetry=container.get_telemetry_port(),
        generator=container.get_generator(),
        filesystem=container.get_filesystem_gateway(),
        clipboard=container.get_clipboard(),
        documents=container.get_document_gateway(),
    )

    app = CLIAppFactory.create_app(deps)
    app()


if __name__ == "__main__":
    main()
