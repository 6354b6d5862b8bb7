"""Structured logging configuration."""

import logging
import sys
from pathlib import Path
from typing import Optional

import structlog

from sdpsections.config import SystemConfig, config


def setup_logging(system_config: Optional[SystemConfig] = None) -> None:
    """Configure stdlib logging and structlog.

    Args:
        system_config: Logging settings (module config if None)
    """
    system_config = system_config or config.system

    log_level = getattr(logging, system_config.log_level.upper(), logging.INFO)

    # Console always, file when configured
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if system_config.log_file:
        log_file = Path(system_config.log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8", delay=True))

    # Replace existing root handlers so repeated calls take effect
    logging.basicConfig(
        format="%(message)s",
        level=log_level,
        handlers=handlers,
        force=True
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if system_config.log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger(__name__)
    logger.debug("Logging configured", level=system_config.log_level, format=system_config.log_format)
