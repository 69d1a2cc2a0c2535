"""Load [tool.quicktype-paste] from pyproject.toml. Infrastructure I/O only."""

import logging
import sys
from pathlib import Path
from typing import Optional

if sys.version_info >= (3, 11):
    import tomllib as toml_lib
else:
    import tomli as toml_lib

logger = logging.getLogger(__name__)

TOOL_SECTION = "quicktype-paste"


class ConfigFileLoader:
    """
    Loads config from pyproject.toml. No top-level functions.
    """

    @staticmethod
    def load_config_from_fs(start: Optional[Path] = None) -> dict[str, object]:
        """Walk up from start (default CWD) to the first pyproject.toml and return its tool table."""
        current_path = (start or Path.cwd()).resolve()
        empty: dict[str, object] = {}
        for directory in (current_path, *current_path.parents):
            config_file = directory / "pyproject.toml"
            if not config_file.exists():
                continue
            try:
                with config_file.open("rb") as f:
                    data = toml_lib.load(f)
            except (OSError, toml_lib.TOMLDecodeError) as exc:
                logger.warning("Skipping unreadable %s: %s", config_file, exc)
                continue
            tool_section = data.get("tool", {}) or {}
            section = tool_section.get(TOOL_SECTION, {}) or {}
            logger.debug("Loaded [tool.%s] from %s", TOOL_SECTION, config_file)
            return dict(section)
        return empty
