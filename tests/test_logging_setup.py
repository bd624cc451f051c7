"""Tests for schedulsy.logging_setup module."""

from __future__ import annotations

import logging
from io import StringIO
from pathlib import Path

import pytest
from rich.console import Console
from rich.logging import RichHandler

from schedulsy.config import LoggingConfig
from schedulsy.logging_setup import setup_logging

pytestmark = pytest.mark.usefixtures("restore_root_logging")


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_console_only_by_default(self, temp_project: Path) -> None:
        """Test defaults install one rich handler and no log file."""
        log_file = setup_logging()

        root = logging.getLogger()
        assert log_file is None
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], RichHandler)
        assert root.handlers[0].level == logging.WARNING
        assert not (temp_project / ".schedulsy").exists()

    def test_console_respects_level(self) -> None:
        """Test messages below the console level are dropped."""
        output = StringIO()
        setup_logging(
            LoggingConfig(console_level="WARNING"),
            console=Console(file=output, width=200),
        )

        logger = logging.getLogger("schedulsy.test")
        logger.info("quiet message")
        logger.warning("loud message")

        text = output.getvalue()
        assert "loud message" in text
        assert "quiet message" not in text

    def test_file_handler(self, temp_project: Path) -> None:
        """Test file logging writes everything at the configured level."""
        config = LoggingConfig(level="DEBUG", file_enabled=True, directory="logs")
        log_file = setup_logging(config, console=Console(file=StringIO()))

        logging.getLogger("schedulsy.test").debug("to the file")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert log_file == Path("logs") / "schedulsy.log"
        content = (temp_project / "logs" / "schedulsy.log").read_text()
        assert "DEBUG schedulsy.test: to the file" in content

    def test_repeated_calls_do_not_duplicate(self) -> None:
        """Test calling twice leaves a single console handler."""
        setup_logging(console=Console(file=StringIO()))
        setup_logging(console=Console(file=StringIO()))
        assert len(logging.getLogger().handlers) == 1
