"""Tests for logging configuration."""

import logging
from pathlib import Path
from typing import Iterator

import pytest
import structlog

from sdpsections.config import SystemConfig
from sdpsections.logging_setup import setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    """Put back the root handlers replaced by setup_logging."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)


class TestSetupLogging:
    """Test structlog configuration."""

    def test_json_renderer(self) -> None:
        """Test json format selects the JSON renderer."""
        setup_logging(SystemConfig(log_format="json"))

        processors = structlog.get_config()["processors"]
        assert structlog.is_configured()
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_console_renderer(self) -> None:
        setup_logging(SystemConfig(log_format="console"))

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_stdlib_logger_factory(self) -> None:
        setup_logging(SystemConfig())

        assert isinstance(structlog.get_config()["logger_factory"], structlog.stdlib.LoggerFactory)

    def test_log_level_applied(self) -> None:
        setup_logging(SystemConfig(log_level="warning"))

        assert logging.getLogger().level == logging.WARNING

    def test_records_reach_log_file(self, tmp_path: Path) -> None:
        """Test logged events are written to the configured file."""
        log_file = tmp_path / "logs" / "sdp.log"

        setup_logging(SystemConfig(log_format="json", log_file=str(log_file)))
        structlog.get_logger("sdpsections.test").warning("Failed to parse media section", header="m=video")

        for handler in logging.getLogger().handlers:
            handler.flush()
        content = log_file.read_text(encoding="utf-8")
        assert '"event": "Failed to parse media section"' in content
        assert '"header": "m=video"' in content

    def test_repeated_setup_replaces_handlers(self, tmp_path: Path) -> None:
        """Test a second call switches output to the new file."""
        first = tmp_path / "first.log"
        second = tmp_path / "second.log"

        setup_logging(SystemConfig(log_file=str(first)))
        setup_logging(SystemConfig(log_format="json", log_file=str(second)))
        structlog.get_logger("sdpsections.test").info("Logging moved")

        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "Logging moved" in second.read_text(encoding="utf-8")
        # delay=True: the first file is never opened
        assert not first.exists()
