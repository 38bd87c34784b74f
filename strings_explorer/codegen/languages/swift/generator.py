"""
Swift code generator implementation.

Renders a namespace tree as nested Swift enums whose static members return
localized strings.
"""

from pathlib import Path
from typing import List, Optional

from ...core.config import GeneratorConfig
from ...core.generator import CodeGenerator
from ...core.interpolation import classify
from ...core.naming import NameSanitizer
from ...core.tree import Leaf, Namespace, Node
from .config import SwiftConfig
from .naming import create_swift_sanitizer


class SwiftGenerator(CodeGenerator):
    """Code generator for Swift localization accessors."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize Swift generator with configuration."""
        super().__init__(config)

        self.swift_config = SwiftConfig(**self.config.language_config)

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "swift"

    @property
    def file_extension(self) -> str:
        """Return Swift file extension."""
        return ".swift"

    def get_template_directory(self) -> Path:
        """Return the Swift templates directory."""
        return Path(__file__).parent / "templates"

    def create_sanitizer(self) -> NameSanitizer:
        return create_swift_sanitizer()

    def generate(self, root: Node) -> str:
        """Generate a complete Swift file for the tree below ``root``."""
        context = {
            "add_header": self.config.add_header,
            "import_module": self.swift_config.import_module,
            "body": self.render(root),
        }
        return self.render_template("file.swift.j2", context) + "\n"

    def render(self, node: Node, indent_level: int = 0) -> str:
        """Render ``node`` as an enum or a static accessor."""
        value = node.value

        if isinstance(value, Namespace):
            children = [self.render(child, indent_level + 1) for child in node.children]
            return self.render_template(
                "namespace.swift.j2",
                {
                    "indent": self.indent(indent_level),
                    "access_prefix": self.swift_config.access_prefix,
                    "name": value.name,
                    "body": "\n\n".join(children),
                },
            )

        assert not node.children, f"Leaf '{value.name}' has children"
        return self._render_leaf(value, indent_level)

    def _render_leaf(self, leaf: Leaf, indent_level: int) -> str:
        context = {
            "indent": self.indent(indent_level),
            "indent_unit": self.config.indent_unit,
            "access_prefix": self.swift_config.access_prefix,
            "add_comments": self.config.add_comments,
            "name": leaf.name,
            "text": leaf.text,
            "lookup": self.swift_config.lookup_expression(leaf.key),
        }

        types = classify(leaf.text)
        if not types:
            return self.render_template("constant.swift.j2", context)

        prefix = self.swift_config.parameter_prefix
        context["parameters"] = [
            f"_ {prefix}{index}: {interpolation.type_name}"
            for index, interpolation in enumerate(types, start=1)
        ]
        context["arguments"] = [f"{prefix}{index}" for index in range(1, len(types) + 1)]
        return self.render_template("function.swift.j2", context)

    def validate_tree(self, root: Node) -> List[str]:
        """Validate the tree for Swift generation."""
        warnings = super().validate_tree(root)

        if not root.name.isidentifier():
            warnings.append(f"Top-level name '{root.name}' is not a valid Swift identifier")

        for leaf in root.leaves():
            if "%s" in leaf.text.replace("%%", ""):
                warnings.append(
                    f"Key '{leaf.key}' uses %s, which expects a C string; use %@ instead"
                )

        # Validate template availability
        for template_name in ("file.swift.j2", "namespace.swift.j2",
                              "constant.swift.j2", "function.swift.j2"):
            if not self.template_exists(template_name):
                warnings.append(f"Template {template_name} not found")

        return warnings


def create_swift_generator(config: Optional[GeneratorConfig] = None) -> SwiftGenerator:
    """Create a Swift generator, using default configuration when none is given."""
    if config is None:
        from ...core.config import load_config

        config = load_config("swift")

    return SwiftGenerator(config)
