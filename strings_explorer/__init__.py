"""
Strings Explorer

Turns flat localization tables into nested, typed Swift accessors.
"""

from .logging_config import get_logger, setup_logging
from .utils import TableLoaderError, load_table, load_tables
from .codegen import (
    GenerationResult,
    MalformedTableError,
    build,
    generate_from_tables,
    list_supported_languages,
)

__version__ = "0.1.0"

__all__ = [
    "GenerationResult",
    "MalformedTableError",
    "TableLoaderError",
    "build",
    "generate_from_tables",
    "get_logger",
    "list_supported_languages",
    "load_table",
    "load_tables",
    "setup_logging",
]
