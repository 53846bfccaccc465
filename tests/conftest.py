"""Pytest configuration and fixtures for filehand tests."""

import logging
import os
import tempfile
from pathlib import Path

import pytest

# Keep test runs away from the user's real config and log files. This must
# happen before any filehand module creates its logger.
_TEST_ROOT = Path(tempfile.gettempdir()) / f"filehand-tests-{os.getpid()}"
os.environ.setdefault("FILEHAND_LOG_DIR", str(_TEST_ROOT / "logs"))
os.environ.setdefault("FILEHAND_CONFIG_DIR", str(_TEST_ROOT / "config"))


@pytest.fixture(autouse=True)
def enable_log_propagation():
    """Enable log propagation so caplog sees filehand records.

    The root 'filehand' logger is created with propagate=False in
    production code.
    """
    original_propagation = {}
    for name in list(logging.Logger.manager.loggerDict.keys()):
        if name.startswith("filehand"):
            logger = logging.getLogger(name)
            original_propagation[name] = logger.propagate
            logger.propagate = True

    yield

    for name, propagate_value in original_propagation.items():
        logger = logging.getLogger(name)
        logger.propagate = propagate_value


@pytest.fixture
def demo_config():
    """Demo names matching the shipped defaults."""
    return {
        "sample_file": "Sample.txt",
        "directory": "test_directory",
        "copy_name": "example_copy.txt",
        "search_extension": ".txt",
    }


@pytest.fixture
def global_config(demo_config):
    """A complete, valid global configuration."""
    return {
        "config_version": "1.0.0",
        "log_level": "INFO",
        "console_log_level": "INFO",
        "encoding": "utf-8",
        "demo": demo_config,
    }
