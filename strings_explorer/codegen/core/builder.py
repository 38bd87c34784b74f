"""
Localization table builder.

Loads localization tables, merges their keys into one namespace tree and
renders it. This is the entry point that ties the loader, the tree passes
and a language generator together.
"""

from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Union

from ...logging_config import get_logger
from ...utils import TableLoaderError, load_tables
from .generator import CodeGenerator, GeneratorError
from .naming import NameSanitizer
from .tree import Entry, NamespaceTree, Node

logger = get_logger(__name__)

TableSource = Union[str, Path]


class MalformedTableError(GeneratorError):
    """Raised when a table cannot be read as a flat string table."""

    def __init__(self, path: str, reason: Optional[str] = None):
        super().__init__(f"Invalid localization table at {path}")
        self.path = path
        self.reason = reason


def load_localization_tables(
    paths: List[TableSource], max_workers: Optional[int] = None
) -> List[Dict[str, str]]:
    """
    Load every table, failing the whole run on the first malformed one.

    Raises:
        MalformedTableError: Naming the offending path
    """
    try:
        return load_tables(paths, max_workers=max_workers)
    except TableLoaderError as e:
        raise MalformedTableError(e.source, e.reason) from e


def iter_entries(tables: Iterable[Dict[str, str]]) -> Iterator[Entry]:
    """Yield entries of all tables in order, warning about repeated keys."""
    seen = set()
    for table in tables:
        for key, text in table.items():
            if key in seen:
                logger.warning("Key '%s' is defined in more than one table", key)
            seen.add(key)
            yield Entry(key, text)


def build_tree(
    tables: Iterable[Dict[str, str]], top_level_name: str, sanitizer: NameSanitizer
) -> Node:
    """
    Merge tables into a sorted, collision-free namespace tree.

    Args:
        tables: Flat key/text tables
        top_level_name: Name of the root namespace
        sanitizer: Identifier sanitizer of the target language

    Returns:
        Root node of the finished tree
    """
    tree = NamespaceTree(top_level_name, sanitizer)
    count = tree.insert_all(iter_entries(tables))
    logger.debug("Inserted %d entries below '%s'", count, top_level_name)
    return tree.finalize()


def build(
    paths: List[TableSource],
    top_level_name: str,
    generator: Optional[CodeGenerator] = None,
    max_workers: Optional[int] = None,
) -> Optional[str]:
    """
    Build accessor declarations for the given tables.

    Args:
        paths: Table files (or URLs) to merge
        top_level_name: Name of the outermost namespace
        generator: Target language generator, Swift by default
        max_workers: Threads used to load tables

    Returns:
        Rendered declarations, or None when there is nothing to generate

    Raises:
        MalformedTableError: If any table cannot be loaded; nothing is rendered
    """
    tables = load_localization_tables(paths, max_workers)
    if not tables:
        logger.info("No localization tables given, nothing to generate")
        return None

    if generator is None:
        from ..languages.swift import create_swift_generator

        generator = create_swift_generator()

    root = build_tree(tables, top_level_name, generator.sanitizer)
    return generator.render(root, 0)
