"""
Core code generation components.

Provides the namespace tree, placeholder classification, naming and the
base classes used by all language generators.
"""

from .generator import CodeGenerator, GeneratorError, GenerationResult, generate_code
from .tree import Entry, Leaf, Namespace, NamespaceTree, Node, sort_key
from .interpolation import InterpolationType, classify, find_placeholders
from .naming import NameSanitizer
from .config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .templates import TemplateEngine, TemplateError, create_template_engine
from .builder import MalformedTableError, build, build_tree, load_localization_tables

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GeneratorError",
    "GenerationResult",
    "generate_code",
    # Namespace tree
    "Entry",
    "Leaf",
    "Namespace",
    "NamespaceTree",
    "Node",
    "sort_key",
    # Placeholder classification
    "InterpolationType",
    "classify",
    "find_placeholders",
    # Naming utilities - language-agnostic
    "NameSanitizer",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system - language-agnostic
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
    # Table building
    "MalformedTableError",
    "build",
    "build_tree",
    "load_localization_tables",
]
