"""Paste configuration. Immutable value object created by Infrastructure."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, replace
from typing import Optional

from quicktype_paste.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_EXECUTABLE = "quicktype.cmd" if sys.platform == "win32" else "quicktype"
DEFAULT_LOG_DIR = ".quicktype-paste/logs"
EXECUTABLE_ENV_VAR = "QUICKTYPE_PASTE_EXECUTABLE"

_KNOWN_KEYS = frozenset({"executable", "timeout", "sanitize_top_level", "raw_log", "log_dir"})


@dataclass(frozen=True)
class PasteConfig:
    """
    Settings for one process.

    Created at the composition root from ([tool.quicktype-paste], environment).
    Domain does not read the filesystem; ConfigFileLoader does.
    """
    executable: str = DEFAULT_EXECUTABLE
    timeout: Optional[float] = None
    sanitize_top_level: bool = False
    raw_log: bool = True
    log_dir: str = DEFAULT_LOG_DIR

    @classmethod
    def from_sources(
        cls,
        config_dict: dict[str, object],
        environ: Optional[dict[str, str]] = None,
    ) -> PasteConfig:
        """Validate the pyproject table and apply environment overrides on top."""
        unknown = set(config_dict) - _KNOWN_KEYS
        if unknown:
            logger.warning(
                "Configuration Warning: ignoring unknown [tool.quicktype-paste] keys: %s",
                ", ".join(sorted(unknown)),
            )

        config = cls(
            executable=cls._get_str(config_dict, "executable", DEFAULT_EXECUTABLE),
            timeout=cls._get_timeout(config_dict),
            sanitize_top_level=cls._get_bool(config_dict, "sanitize_top_level", False),
            raw_log=cls._get_bool(config_dict, "raw_log", True),
            log_dir=cls._get_str(config_dict, "log_dir", DEFAULT_LOG_DIR),
        )

        env_executable = (environ or {}).get(EXECUTABLE_ENV_VAR)
        if env_executable:
            config = replace(config, executable=env_executable)
        return config

    def with_overrides(
        self,
        timeout: Optional[float] = None,
        sanitize_top_level: Optional[bool] = None,
    ) -> PasteConfig:
        """Apply CLI overrides. None leaves the configured value."""
        config = self
        if timeout is not None:
            config = replace(config, timeout=timeout)
        if sanitize_top_level is not None:
            config = replace(config, sanitize_top_level=sanitize_top_level)
        return config

    @staticmethod
    def _get_str(config_dict: dict[str, object], key: str, default: str) -> str:
        value = config_dict.get(key, default)
        if not isinstance(value, str) or not value:
            raise ConfigurationError(f"'{key}' must be a non-empty string, got {value!r}")
        return value

    @staticmethod
    def _get_bool(config_dict: dict[str, object], key: str, default: bool) -> bool:
        value = config_dict.get(key, default)
        if not isinstance(value, bool):
            raise ConfigurationError(f"'{key}' must be true or false, got {value!r}")
        return value

    @staticmethod
    def _get_timeout(config_dict: dict[str, object]) -> Optional[float]:
        value = config_dict.get("timeout")
        if value is None:
            return None
        # bool is an int subclass; reject it explicitly
        if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
            raise ConfigurationError(f"'timeout' must be a positive number of seconds, got {value!r}")
        return float(value)
