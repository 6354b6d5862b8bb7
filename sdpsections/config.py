"""Configuration for logging and parser diagnostics.

Values come from environment variables by default, or from a YAML file
when one is specified (explicitly or via SDP_CONFIG_FILE).
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import structlog
import yaml


logger = structlog.get_logger(__name__)

LOG_FORMATS = ("console", "json")

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_bool(value: Any, name: str) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ValueError(f"'{name}' must be a boolean, got {value!r}")


@dataclass
class SystemConfig:
    """Logging settings.

    Fields:
        log_level: Standard logging level name
        log_format: "console" or "json"
        log_file: Optional path of an extra log file
    """

    log_level: str = "INFO"
    log_format: str = "console"
    log_file: Optional[str] = None

    def __post_init__(self) -> None:
        self.log_format = self.log_format.lower()
        if self.log_format not in LOG_FORMATS:
            raise ValueError(
                f"Unsupported log format: {self.log_format} (expected one of {LOG_FORMATS})"
            )


@dataclass
class ParserConfig:
    """SDP parser diagnostics."""

    log_dropped_sections: bool = True


@dataclass
class Config:
    """Top-level configuration."""

    system: SystemConfig = field(default_factory=SystemConfig)
    parser: ParserConfig = field(default_factory=ParserConfig)

    @classmethod
    def from_env(cls) -> "Config":
        """Build configuration from SDP_* environment variables.

        Runs at import time, so invalid values fall back to defaults
        with a warning instead of raising.
        """
        log_format = os.getenv("SDP_LOG_FORMAT", "console")
        if log_format.lower() not in LOG_FORMATS:
            logger.warning(
                "Ignoring invalid environment value",
                name="SDP_LOG_FORMAT",
                value=log_format,
                default="console",
            )
            log_format = "console"

        raw_dropped = os.getenv("SDP_LOG_DROPPED_SECTIONS", "true")
        try:
            log_dropped_sections = _parse_bool(raw_dropped, "SDP_LOG_DROPPED_SECTIONS")
        except ValueError:
            logger.warning(
                "Ignoring invalid environment value",
                name="SDP_LOG_DROPPED_SECTIONS",
                value=raw_dropped,
                default=True,
            )
            log_dropped_sections = True

        system = SystemConfig(
            log_level=os.getenv("SDP_LOG_LEVEL", "INFO"),
            log_format=log_format,
            log_file=os.getenv("SDP_LOG_FILE") or None,
        )
        parser = ParserConfig(log_dropped_sections=log_dropped_sections)
        return cls(system=system, parser=parser)

    @classmethod
    def from_yaml(cls, file_path: str | Path) -> "Config":
        """Load configuration from YAML file.

        Args:
            file_path: Path to YAML configuration file

        Returns:
            Config instance

        Raises:
            FileNotFoundError: If YAML file doesn't exist
            ValueError: If YAML file is invalid
        """
        file_path = Path(file_path)

        if not file_path.exists():
            raise FileNotFoundError(f"Config file not found: {file_path}")

        logger.info("Loading config from YAML", file_path=str(file_path))

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML file: {e}") from e

        # Empty file means defaults
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError("YAML file must contain a dictionary")

        system_data = cls._section(data, "system")
        parser_data = cls._section(data, "parser")

        try:
            system = SystemConfig(**system_data)
            parser = ParserConfig(**parser_data)
        except TypeError as e:
            raise ValueError(f"Unknown config field: {e}") from e

        parser.log_dropped_sections = _parse_bool(
            parser.log_dropped_sections, "log_dropped_sections"
        )

        logger.info(
            "Config loaded successfully",
            log_level=system.log_level,
            log_format=system.log_format,
            log_dropped_sections=parser.log_dropped_sections,
        )
        return cls(system=system, parser=parser)

    @classmethod
    def load(cls, file_path: Optional[str | Path] = None) -> "Config":
        """Load from YAML if a path is given (or SDP_CONFIG_FILE is set), else env."""
        file_path = file_path or os.getenv("SDP_CONFIG_FILE")
        if not file_path:
            return cls.from_env()

        # A specified file must load (fail-fast, no fallback to env)
        return cls.from_yaml(file_path)

    @staticmethod
    def _section(data: Dict, name: str) -> Dict:
        section = data.get(name) or {}
        if not isinstance(section, dict):
            raise ValueError(f"'{name}' section must be a dictionary")
        return section

    def to_dict(self) -> Dict:
        """Convert to dictionary for logging/debugging."""
        return {
            "system": {
                "log_level": self.system.log_level,
                "log_format": self.system.log_format,
                "log_file": self.system.log_file,
            },
            "parser": {
                "log_dropped_sections": self.parser.log_dropped_sections,
            },
        }


config = Config.from_env()
