"""Configuration management implementation.

Contains the ScaffoldConfig class, populated from environment variables.
"""

import logging
import os
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes")


def parse_inflections(raw: str) -> dict[str, str]:
    """Parse ``stem=Name`` pairs separated by commas.

    Blank items are skipped. Items without ``=`` or whose name is not a
    valid identifier are dropped with a warning.

    Example:
        >>> parse_inflections("html=HTML, ssl=SSL")
        {'html': 'HTML', 'ssl': 'SSL'}
    """
    result: dict[str, str] = {}
    for item in raw.split(","):
        item = item.strip()
        if not item:
            continue
        stem, sep, name = item.partition("=")
        if not sep:
            logger.warning(f"Ignoring malformed inflection {item!r} (expected stem=Name)")
            continue
        name = name.strip()
        if not name.isidentifier():
            logger.warning(f"Ignoring inflection {item!r}: {name!r} is not an identifier")
            continue
        result[stem.strip()] = name
    return result


class ScaffoldConfig:
    """Package configuration (Singleton pattern).

    Use the `config` instance from __init__.py instead of creating new instances.
    """

    _instance: "ScaffoldConfig | None" = None
    _initialized: bool

    def __new__(cls) -> "ScaffoldConfig":
        """Singleton implementation - only one instance allowed."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self) -> None:
        if self._initialized:
            return

        self._load_from_env()
        self._initialized = True
        logger.debug("Configuration initialized")

    def _load_from_env(self) -> None:
        # Logging
        self.log_level = os.getenv("LOG_LEVEL", "INFO").strip().upper()
        self.log_to_file = _env_flag("LOG_TO_FILE")
        log_file = os.getenv("LOG_FILE", "").strip()
        self.log_file: Path | None = Path(log_file) if log_file else None

        # Autoloading
        self.eager_load = _env_flag("SCAFFOLD_EAGER_LOAD")
        self.inflections = parse_inflections(os.getenv("SCAFFOLD_INFLECTIONS", ""))

    def reload(self) -> None:
        """Force reload configuration from environment variables."""
        logger.info("Reloading configuration from environment...")
        self._load_from_env()

    def validate(self) -> list[str]:
        """Validate configuration and return list of issues."""
        issues = []
        if self.log_level not in VALID_LOG_LEVELS:
            issues.append(f"Unknown LOG_LEVEL: {self.log_level}")
        if self.log_to_file and self.log_file is None:
            issues.append("LOG_TO_FILE is enabled but LOG_FILE is not set")
        return issues

    def to_dict(self) -> dict[str, Any]:
        """Export configuration as dictionary."""
        return {
            "log_level": self.log_level,
            "log_to_file": self.log_to_file,
            "log_file": str(self.log_file) if self.log_file else None,
            "eager_load": self.eager_load,
            "inflections": dict(self.inflections),
        }


__all__ = ["ScaffoldConfig", "parse_inflections"]
