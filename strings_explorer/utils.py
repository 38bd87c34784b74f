"""Utility functions for loading localization tables.

A table is a flat mapping of lookup keys to human-readable text. Tables can
be loaded from ``.strings`` files, XML or binary property lists, JSON files,
or JSON documents served over HTTP.
"""

import json
import plistlib
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Any
from urllib.parse import urlparse

import requests

from .logging_config import get_logger
from .strings_parser import StringsParseError, decode_strings_bytes, parse_strings

logger = get_logger(__name__)

PLIST_SIGNATURES = (b"bplist", b"<?xml", b"<!DOCTYPE plist", b"<plist")


class TableLoaderError(Exception):
    """Raised when a source cannot be loaded as a flat string table."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"Cannot load localization table {source}: {reason}")
        self.source = source
        self.reason = reason


def is_url(source: str | Path) -> bool:
    """Return True when ``source`` is an http(s) URL."""
    if isinstance(source, Path):
        return False
    parsed = urlparse(str(source))
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


def ensure_flat_table(data: Any, source: str) -> dict[str, str]:
    """Check that parsed data is a dictionary of strings to strings.

    Raises:
        TableLoaderError: If ``data`` is not a flat string table.
    """
    if not isinstance(data, dict):
        raise TableLoaderError(
            source, f"expected a dictionary, found {type(data).__name__}"
        )

    for key, value in data.items():
        if not isinstance(key, str):
            raise TableLoaderError(source, f"key {key!r} is not a string")
        if not isinstance(value, str):
            raise TableLoaderError(
                source, f"value for key '{key}' is {type(value).__name__}, not a string"
            )

    return data


def _parse_plist(data: bytes, source: str) -> Any:
    try:
        return plistlib.loads(data)
    except (plistlib.InvalidFileException, ValueError) as e:
        raise TableLoaderError(source, f"invalid property list: {e}") from e


def _parse_strings_bytes(data: bytes, source: str) -> dict[str, str]:
    if data.lstrip().startswith(PLIST_SIGNATURES):
        logger.debug("%s looks like a property list, using plistlib", source)
        return ensure_flat_table(_parse_plist(data, source), source)

    try:
        text = decode_strings_bytes(data)
    except UnicodeDecodeError as e:
        raise TableLoaderError(source, f"undecodable content: {e}") from e

    try:
        return parse_strings(text)
    except StringsParseError as e:
        raise TableLoaderError(source, str(e)) from e


def load_table_from_file(file_path: str | Path) -> dict[str, str]:
    """Load a localization table from a local file.

    The format is chosen by extension: ``.json`` is read as a JSON object,
    ``.plist`` with plistlib, anything else as a
    ``.strings`` file (which may itself be a property list).

    Args:
        file_path: Path to the table file.

    Returns:
        Mapping of lookup keys to text.

    Raises:
        TableLoaderError: If the file is missing, unreadable or not a flat
            string table.
    """
    file_path = Path(file_path)
    source = str(file_path)
    logger.debug(f"Attempting to load table from file: {file_path}")

    if not file_path.is_file():
        logger.error(f"Table file not found: {file_path}")
        raise TableLoaderError(source, "file not found")

    try:
        data = file_path.read_bytes()
    except OSError as e:
        logger.error(f"Error reading file {file_path}: {e}", exc_info=True)
        raise TableLoaderError(source, f"read error: {e}") from e

    suffix = file_path.suffix.lower()
    try:
        if suffix == ".json":
            try:
                parsed = json.loads(data.decode("utf-8-sig"))
            except (UnicodeDecodeError, json.JSONDecodeError) as e:
                raise TableLoaderError(source, f"invalid JSON: {e}") from e
            table = ensure_flat_table(parsed, source)
        elif suffix == ".plist":
            table = ensure_flat_table(_parse_plist(data, source), source)
        else:
            if suffix != ".strings":
                logger.warning(f"File does not have .strings extension: {file_path}")
            table = _parse_strings_bytes(data, source)
    except TableLoaderError as e:
        logger.error("Malformed table %s: %s", source, e.reason)
        raise

    logger.info(f"Loaded {len(table)} entries from {file_path}")
    return table


def load_table_from_url(url: str, timeout: int = 30) -> dict[str, str]:
    """Load a localization table served as a JSON object.

    Args:
        url: URL to fetch the table from.
        timeout: Request timeout in seconds.

    Returns:
        Mapping of lookup keys to text.

    Raises:
        TableLoaderError: If the request fails or the response is not a flat
            JSON object of strings.
    """
    logger.debug(f"Attempting to load table from URL: {url}")

    if not is_url(url):
        logger.error(f"Invalid URL format: {url}")
        raise TableLoaderError(url, "invalid URL")

    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.Timeout as e:
        logger.error(f"Request timeout for URL: {url}")
        raise TableLoaderError(url, "request timeout") from e
    except requests.exceptions.ConnectionError as e:
        logger.error(f"Connection error for URL {url}: {e}")
        raise TableLoaderError(url, "connection error") from e
    except requests.exceptions.HTTPError as e:
        logger.error(f"HTTP error {e.response.status_code} for URL: {url}")
        raise TableLoaderError(url, f"HTTP error {e.response.status_code}") from e
    except requests.exceptions.RequestException as e:
        logger.error(f"Request error for URL {url}: {e}", exc_info=True)
        raise TableLoaderError(url, f"request error: {e}") from e

    try:
        data = response.json()
    except ValueError as e:
        logger.error(f"Invalid JSON response from URL {url}: {e}")
        raise TableLoaderError(url, f"invalid JSON response: {e}") from e

    table = ensure_flat_table(data, url)
    logger.info(f"Loaded {len(table)} entries from {url}")
    return table


def load_table(source: str | Path, timeout: int = 30) -> dict[str, str]:
    """Load a table from a file path or an http(s) URL."""
    if is_url(source):
        return load_table_from_url(str(source), timeout)
    return load_table_from_file(source)


def load_tables(
    sources: list[str | Path], max_workers: int | None = None
) -> list[dict[str, str]]:
    """Load several tables, optionally in parallel.

    Tables are returned in the order of ``sources``. The first failure in that
    order is raised, so the reported source does not depend on thread timing.

    Args:
        sources: Paths or URLs to load.
        max_workers: Thread pool size; ``None`` or 1 loads sequentially.

    Raises:
        TableLoaderError: If any source cannot be loaded.
    """
    if not sources:
        return []

    if not max_workers or max_workers <= 1 or len(sources) == 1:
        return [load_table(source) for source in sources]

    logger.debug("Loading %d tables with %d workers", len(sources), max_workers)
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = [executor.submit(load_table, source) for source in sources]
        return [future.result() for future in futures]
