"""Logging configuration for the schedulsy CLI."""

from __future__ import annotations

import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from schedulsy.config import LoggingConfig

LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(config: LoggingConfig | None = None, console: Console | None = None) -> Path | None:
    """Configure root logging.

    Installs a rich console handler and, if enabled, a file handler that
    receives everything at `config.level`. Existing root handlers are
    removed so repeated calls don't duplicate output.

    Returns:
        Path of the log file, or None when file logging is disabled.
    """
    if config is None:
        config = LoggingConfig()

    root = logging.getLogger()
    root.setLevel(config.level)

    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    ch = RichHandler(console=console or Console(stderr=True), show_path=False)
    ch.setLevel(config.console_level)
    root.addHandler(ch)

    log_file: Path | None = None
    if config.file_enabled:
        log_dir = Path(config.directory)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / config.filename

        fh = logging.FileHandler(str(log_file), encoding="utf-8")
        fh.setLevel(config.level)
        fh.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
        root.addHandler(fh)

    # Route warnings.warn(...) into logging as 'py.warnings'
    logging.captureWarnings(True)

    return log_file
