"""
Strings Explorer Code Generation Module

Generates typed localization accessors from flat key/text tables.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..logging_config import get_logger
from .registry import (
    GeneratorRegistry,
    RegistryError,
    get_generator,
    get_registry,
    is_language_supported,
    list_all_language_info,
    list_supported_languages,
)
from .core.generator import CodeGenerator, GenerationResult, GeneratorError, generate_code
from .core.builder import MalformedTableError, build, build_tree, load_localization_tables
from .core.tree import Leaf, Namespace, NamespaceTree, Node
from .core.interpolation import InterpolationType, classify
from .core.config import ConfigError, ConfigManager, GeneratorConfig, load_config

logger = get_logger(__name__)

# Version info
__version__ = "0.1.0"


def generate_from_tables(
    paths: List[Union[str, Path]],
    language: str = "swift",
    config: Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]] = None,
    top_level_name: Optional[str] = None,
    max_workers: Optional[int] = None,
) -> GenerationResult:
    """
    Generate a complete source file from localization tables.

    Args:
        paths: Table files or URLs, merged in the given order
        language: Target language name
        config: Generator configuration, dict overrides or config file path
        top_level_name: Name of the outermost namespace, overrides the config
        max_workers: Threads used to load tables, overrides the config

    Returns:
        GenerationResult with generated code. ``is_empty`` is set when no
        tables were given; a malformed table yields a failed result.
    """
    generator = get_generator(language, config)
    root_name = top_level_name or generator.config.top_level_name
    workers = max_workers if max_workers is not None else generator.config.max_workers

    try:
        tables = load_localization_tables(paths, workers)
    except MalformedTableError as e:
        logger.error("%s", e)
        return GenerationResult.error(str(e), exception=e)

    if not tables:
        logger.info("No localization tables given, nothing to generate")
        return GenerationResult.empty()

    root = build_tree(tables, root_name, generator.sanitizer)
    return generate_code(generator, root)


# Export main interfaces
__all__ = [
    "GeneratorRegistry",
    "RegistryError",
    "CodeGenerator",
    "GenerationResult",
    "GeneratorError",
    "MalformedTableError",
    "ConfigError",
    "ConfigManager",
    "GeneratorConfig",
    "InterpolationType",
    "Leaf",
    "Namespace",
    "NamespaceTree",
    "Node",
    "build",
    "build_tree",
    "classify",
    "generate_code",
    "generate_from_tables",
    "get_generator",
    "get_registry",
    "is_language_supported",
    "list_all_language_info",
    "list_supported_languages",
    "load_config",
    "load_localization_tables",
]
