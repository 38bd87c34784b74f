"""
Pytest configuration and shared fixtures for strings_explorer tests.

Provides helpers that write localization tables into a temporary directory.
"""

import json
import logging
import plistlib
from pathlib import Path
from typing import Dict

import pytest

from strings_explorer.codegen.core.config import GeneratorConfig
from strings_explorer.codegen.languages.swift import create_swift_generator, create_swift_sanitizer
from strings_explorer.logging_config import LOGGER_NAME


def _strings_literal(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
    return f'"{escaped}"'


def render_strings(table: Dict[str, str]) -> str:
    """Serialize a table in ``.strings`` syntax."""
    return "".join(
        f"{_strings_literal(key)} = {_strings_literal(value)};\n"
        for key, value in table.items()
    )


@pytest.fixture
def write_strings(tmp_path):
    """Write a ``.strings`` table and return its path."""

    def _write(name: str, table: Dict[str, str]) -> Path:
        path = tmp_path / name
        path.write_text(render_strings(table), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def write_json(tmp_path):
    """Write a JSON table and return its path."""

    def _write(name: str, data) -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def write_plist(tmp_path):
    """Write an XML property list and return its path."""

    def _write(name: str, data, fmt=plistlib.FMT_XML) -> Path:
        path = tmp_path / name
        path.write_bytes(plistlib.dumps(data, fmt=fmt))
        return path

    return _write


@pytest.fixture
def sample_tables():
    """Two tables sharing namespaces."""
    return {
        "Localizable.strings": {
            "home.title": "Welcome",
            "home.items": "%d items, %.2f total",
            "greeting": "Hello %@",
            "settings.account.logout": "Log out",
        },
        "Errors.strings": {
            "error.network": "No connection",
            "error.http": "Request failed with status %ld",
        },
    }


@pytest.fixture
def sanitizer():
    """A fresh Swift identifier sanitizer."""
    return create_swift_sanitizer()


@pytest.fixture
def swift_generator():
    """Swift generator with a plain default configuration."""
    return create_swift_generator(GeneratorConfig())


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Let records reach caplog and undo handler changes made by tests."""
    logger = logging.getLogger(LOGGER_NAME)
    handlers = logger.handlers[:]
    level = logger.level
    propagate = logger.propagate
    logger.propagate = True
    yield
    for handler in logger.handlers[:]:
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)
    logger.propagate = propagate
