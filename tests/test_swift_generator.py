"""
Tests for the Swift declaration renderer.
"""

import pytest

from strings_explorer.codegen.core.config import GeneratorConfig
from strings_explorer.codegen.core.generator import generate_code
from strings_explorer.codegen.core.tree import Entry, Leaf, NamespaceTree, Node
from strings_explorer.codegen.languages.swift import (
    SwiftConfig,
    SwiftGenerator,
    swift_string_literal,
)


def make_tree(generator, entries, name="L10n"):
    tree = NamespaceTree(name, generator.sanitizer)
    tree.insert_all(Entry(key, text) for key, text in entries)
    return tree.finalize()


class TestRender:
    """Rendering of single nodes and whole trees."""

    def test_constant_accessor(self, swift_generator):
        node = Node(Leaf("title", "home.title", "Welcome"))

        assert swift_generator.render(node, 0) == (
            "/// Welcome\n"
            'public static var title: String { return NSLocalizedString("home.title", comment: "") }'
        )

    def test_function_accessor(self, swift_generator):
        node = Node(Leaf("items", "home.items", "%d items, %.2f total"))

        assert swift_generator.render(node, 1) == (
            "    /// %d items, %.2f total\n"
            "    public static func items(_ value1: Int, _ value2: Double) -> String {\n"
            '        return String(format: NSLocalizedString("home.items", comment: ""), value1, value2)\n'
            "    }"
        )

    def test_multiline_text_gives_multiline_comment(self, swift_generator):
        node = Node(Leaf("body", "body", "First line\n\nThird line"))

        rendered = swift_generator.render(node, 0)

        assert rendered.splitlines()[:3] == ["/// First line", "///", "/// Third line"]

    def test_namespace_tree(self, swift_generator):
        root = make_tree(
            swift_generator,
            [("greeting", "Hello %@"), ("home.title", "Welcome"), ("home.count", "%ld")],
        )

        assert swift_generator.render(root, 0) == (
            "public enum L10n {\n"
            "    public enum home {\n"
            "        /// %ld\n"
            "        public static func count(_ value1: Int64) -> String {\n"
            '            return String(format: NSLocalizedString("home.count", comment: ""), value1)\n'
            "        }\n"
            "\n"
            "        /// Welcome\n"
            '        public static var title: String { return NSLocalizedString("home.title", comment: "") }\n'
            "    }\n"
            "\n"
            "    /// Hello %@\n"
            "    public static func greeting(_ value1: String) -> String {\n"
            '        return String(format: NSLocalizedString("greeting", comment: ""), value1)\n'
            "    }\n"
            "}"
        )

    def test_renamed_leaf_keeps_lookup_key(self, swift_generator):
        root = make_tree(
            swift_generator, [("greeting-title", "A"), ("greeting_title", "B")]
        )

        rendered = swift_generator.render(root, 0)

        assert 'static var greeting_title: String { return NSLocalizedString("greeting-title"' in rendered
        assert 'static var greeting_title_: String { return NSLocalizedString("greeting_title"' in rendered

    def test_key_is_escaped(self, swift_generator):
        node = Node(Leaf("quote", 'say "hi"', "Hi"))

        assert 'NSLocalizedString("say \\"hi\\"", comment: "")' in swift_generator.render(node, 0)

    def test_leaf_with_children_is_a_fault(self, swift_generator):
        node = Node(Leaf("a", "a", "text"), [Node(Leaf("b", "b", "text"))])

        with pytest.raises(AssertionError):
            swift_generator.render(node, 0)

    def test_output_is_reproducible(self, swift_generator):
        entries = [("b.x", "%u"), ("a", "A"), ("b.y", "%@ %d")]
        first = swift_generator.render(make_tree(swift_generator, entries), 0)
        second = swift_generator.render(make_tree(swift_generator, entries[::-1]), 0)

        assert first == second


class TestConfiguration:
    """Configuration driven rendering options."""

    def test_tabs_and_access_level(self):
        config = GeneratorConfig(
            use_tabs=True, add_comments=False, language_config={"access_level": "internal"}
        )
        generator = SwiftGenerator(config)
        root = make_tree(generator, [("a.b", "B")], name="S")

        assert generator.render(root, 0) == (
            "internal enum S {\n"
            "\tinternal enum a {\n"
            '\t\tinternal static var b: String { return NSLocalizedString("a.b", comment: "") }\n'
            "\t}\n"
            "}"
        )

    def test_default_access_level_omits_modifier(self):
        generator = SwiftGenerator(
            GeneratorConfig(add_comments=False, language_config={"access_level": ""})
        )
        node = Node(Leaf("b", "b", "B"))

        assert generator.render(node, 0).startswith("static var b: String")

    def test_table_name_and_bundle(self):
        generator = SwiftGenerator(
            GeneratorConfig(
                add_comments=False,
                indent_size=2,
                language_config={"table_name": "Errors", "bundle": ".module"},
            )
        )
        node = Node(Leaf("network", "error.network", "No connection"))

        assert generator.render(node, 1) == (
            '  public static var network: String { return NSLocalizedString("error.network", '
            'tableName: "Errors", bundle: .module, comment: "") }'
        )

    def test_invalid_access_level(self):
        with pytest.raises(ValueError, match="Invalid access_level"):
            SwiftGenerator(GeneratorConfig(language_config={"access_level": "open"}))

    def test_parameter_prefix(self):
        config = SwiftConfig(parameter_prefix="arg")
        assert config.parameter_prefix == "arg"
        with pytest.raises(ValueError):
            SwiftConfig(parameter_prefix="1x")


class TestGenerate:
    """Whole-file generation through generate_code."""

    def test_generate_file(self, swift_generator):
        root = make_tree(swift_generator, [("title", "Welcome")])

        result = generate_code(swift_generator, root)

        assert result.success
        assert result.code == (
            "// Generated by strings-explorer. Do not edit.\n"
            "\n"
            "import Foundation\n"
            "\n"
            "public enum L10n {\n"
            "    /// Welcome\n"
            '    public static var title: String { return NSLocalizedString("title", comment: "") }\n'
            "}\n"
        )

    def test_generate_without_header(self):
        generator = SwiftGenerator(GeneratorConfig(add_header=False, add_comments=False))
        root = make_tree(generator, [("title", "Welcome")])

        code = generate_code(generator, root).code

        assert code.startswith("import Foundation\n\npublic enum L10n {\n")

    def test_metadata(self, swift_generator):
        root = make_tree(
            swift_generator,
            [("a.b", "%d"), ("a.c", "C"), ("x", "X"), ("x", "Y")],
        )

        result = generate_code(swift_generator, root)

        assert result.metadata == {
            "language": "swift",
            "file_extension": ".swift",
            "top_level_name": "L10n",
            "namespace_count": 2,
            "accessor_count": 4,
            "function_count": 1,
            "renamed_count": 1,
        }

    def test_warnings(self, swift_generator):
        root = make_tree(swift_generator, [("x", "%s"), ("x", "Y")], name="bad name")

        warnings = generate_code(swift_generator, root).warnings

        assert "Top-level name 'bad name' is not a valid Swift identifier" in warnings
        assert any("uses %s" in warning for warning in warnings)
        assert any("renamed to 'x_'" in warning for warning in warnings)

    def test_generation_failure_is_reported(self, swift_generator):
        broken = Node(Leaf("a", "a", "text"), [Node(Leaf("b", "b", "text"))])
        root = Node(make_tree(swift_generator, []).value, [broken])

        result = generate_code(swift_generator, root)

        assert not result.success
        assert result.error_message.startswith("Code generation failed")
        assert isinstance(result.exception, AssertionError)


def test_swift_string_literal():
    assert swift_string_literal('a"b\\c\nd') == '"a\\"b\\\\c\\nd"'
