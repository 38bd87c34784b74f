"""
Base generator interface for all code generation targets.

Defines the contract that all language generators must implement.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional

from ...logging_config import get_logger
from .config import GeneratorConfig
from .interpolation import classify
from .naming import NameSanitizer
from .templates import TemplateEngine, create_template_engine
from .tree import Leaf, Namespace, Node

logger = get_logger(__name__)


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize generator with optional configuration."""
        self.config = config or GeneratorConfig()
        self._template_engine = None
        self._setup_templates()
        self.sanitizer = self.create_sanitizer()

    def _setup_templates(self):
        """Setup template engine for this generator."""
        template_dir = self.get_template_directory()
        self._template_engine = create_template_engine(template_dir)

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'swift')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.swift')."""
        pass

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing templates for this generator.

        Subclasses should override this to provide their template directory.
        Return None when the generator has no templates.
        """
        return None

    def create_sanitizer(self) -> NameSanitizer:
        """Return the identifier sanitizer for the target language."""
        return NameSanitizer()

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    def indent(self, level: int) -> str:
        """Whitespace prefix for ``level`` levels of nesting."""
        return self.config.indent_unit * level

    @abstractmethod
    def render(self, node: Node, indent_level: int = 0) -> str:
        """
        Render a finished tree node and its descendants.

        Args:
            node: Namespace or leaf node
            indent_level: Nesting depth of ``node``

        Returns:
            Declaration text without trailing newline
        """
        pass

    @abstractmethod
    def generate(self, root: Node) -> str:
        """
        Generate a complete source file for the tree below ``root``.

        Args:
            root: Sorted and sanitized root namespace

        Returns:
            Generated code as a string
        """
        pass

    def renamed_leaves(self, root: Node) -> List[Leaf]:
        """Leaves whose accessor name differs from their sanitized last key segment."""
        renamed = []
        for leaf in root.leaves():
            segments = [segment for segment in leaf.key.split(".") if segment]
            if leaf.name != self.sanitizer.sanitize(segments[-1]):
                renamed.append(leaf)
        return renamed

    def validate_tree(self, root: Node) -> List[str]:
        """
        Report renamed accessors and empty namespaces.

        Language generators can extend this with language-specific checks.

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []

        for node in root.walk():
            if isinstance(node.value, Namespace) and not node.children:
                warnings.append(f"Namespace '{node.name}' has no accessors")

        for leaf in self.renamed_leaves(root):
            warnings.append(
                f"Key '{leaf.key}' renamed to '{leaf.name}' to avoid a name collision"
            )

        return warnings

    def format_code(self, code: str) -> str:
        """
        Apply final formatting to generated code.

        Strips trailing whitespace, collapses runs of blank lines and
        applies the configured line ending. Doc comment lines carry
        localized text and are kept verbatim.
        """
        lines = code.split("\n")
        formatted_lines = []
        blank_count = 0

        for line in lines:
            if line.lstrip().startswith("///"):
                blank_count = 0
                formatted_lines.append(line)
                continue

            stripped = line.rstrip()
            if not stripped:
                blank_count += 1
                if blank_count <= 2:  # Allow max 2 consecutive blank lines
                    formatted_lines.append("")
            else:
                blank_count = 0
                formatted_lines.append(stripped)

        return self.config.line_ending.join(formatted_lines)

    # Template helper methods

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render a template with context."""
        return self.template_engine.render_template(template_name, context)

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        return self.template_engine.template_exists(template_name)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self, code: str, warnings: List[str] = None, metadata: Dict[str, Any] = None
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.code = code
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message = None
        self.exception = None

    @property
    def is_empty(self) -> bool:
        """True when generation succeeded but there was nothing to generate."""
        return self.success and not self.code

    @classmethod
    def empty(cls) -> "GenerationResult":
        """Create a successful result signalling that there was no input."""
        return cls(code="", metadata={"empty": True})

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(code="")
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_code(generator: CodeGenerator, root: Node) -> GenerationResult:
    """
    Generate code using the specified generator with error handling.

    Args:
        generator: Code generator instance
        root: Sorted and sanitized tree root

    Returns:
        GenerationResult with code, warnings, and metadata
    """
    try:
        warnings = generator.validate_tree(root)

        code = generator.generate(root)
        formatted_code = generator.format_code(code)

        leaves = root.leaves()
        function_count = sum(1 for leaf in leaves if classify(leaf.text))
        metadata = {
            "language": generator.language_name,
            "file_extension": generator.file_extension,
            "top_level_name": root.name,
            "namespace_count": sum(
                1 for node in root.walk() if isinstance(node.value, Namespace)
            ),
            "accessor_count": len(leaves),
            "function_count": function_count,
            "renamed_count": len(generator.renamed_leaves(root)),
        }

        logger.info(
            "Generated %d accessors for '%s' (%s)",
            len(leaves),
            root.name,
            generator.language_name,
        )
        return GenerationResult(formatted_code, warnings, metadata)

    except Exception as e:
        logger.error("Code generation failed: %s", e, exc_info=True)
        return GenerationResult.error(f"Code generation failed: {str(e)}", exception=e)
