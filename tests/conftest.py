"""Shared fixtures for schedulsy tests."""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Generator
from pathlib import Path

import pytest

from schedulsy.dashboard import Dashboard
from schedulsy.session import Session
from schedulsy.store import IdFactory, TaskStore


@pytest.fixture
def temp_project(tmp_path: Path) -> Generator[Path, None, None]:
    """Create a temporary project directory and change to it."""
    original_dir = os.getcwd()
    os.chdir(tmp_path)
    try:
        yield tmp_path
    finally:
        os.chdir(original_dir)


@pytest.fixture
def temp_schedulsy_dir(temp_project: Path) -> Path:
    """Create a temporary .schedulsy directory."""
    schedulsy_dir = temp_project / ".schedulsy"
    schedulsy_dir.mkdir()
    return schedulsy_dir


@pytest.fixture
def sample_config_data() -> dict:
    """Sample configuration data."""
    return {
        "display": {
            "title": "My Day",
            "show_descriptions": False,
            "max_title_length": 30,
            "progress_bar_width": 20,
        },
        "logging": {
            "level": "INFO",
            "console_level": "ERROR",
            "file_enabled": True,
            "directory": "logs",
        },
        "store": {"id_strategy": "timestamp"},
    }


@pytest.fixture
def sample_config_file(temp_schedulsy_dir: Path, sample_config_data: dict) -> Path:
    """Write the sample config to .schedulsy/config.json."""
    config_path = temp_schedulsy_dir / "config.json"
    config_path.write_text(json.dumps(sample_config_data))
    return config_path


@pytest.fixture
def sequential_ids() -> IdFactory:
    """Deterministic ids: task-1, task-2, ..."""
    counter = 0

    def factory() -> str:
        nonlocal counter
        counter += 1
        return f"task-{counter}"

    return factory


@pytest.fixture
def store(sequential_ids: IdFactory) -> TaskStore:
    """An empty store with deterministic ids."""
    return TaskStore(id_factory=sequential_ids)


@pytest.fixture
def active_dashboard(store: TaskStore) -> Dashboard:
    """A dashboard for a signed-in user."""
    return Dashboard(store, Session.authenticated(name="Ada Lovelace", email="ada@example.com"))


@pytest.fixture
def restore_root_logging() -> Generator[None, None, None]:
    """Put the root logger back the way it was after a test reconfigures it."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    try:
        yield
    finally:
        for handler in list(root.handlers):
            if handler not in handlers:
                root.removeHandler(handler)
                handler.close()
        for handler in handlers:
            if handler not in root.handlers:
                root.addHandler(handler)
        root.setLevel(level)
        logging.captureWarnings(False)
