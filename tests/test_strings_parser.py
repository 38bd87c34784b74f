"""
Tests for the ``.strings`` file parser.
"""

import pytest

from strings_explorer.strings_parser import (
    StringsParseError,
    decode_strings_bytes,
    parse_strings,
)


class TestParseStrings:
    """Well-formed input."""

    def test_basic_pairs(self):
        text = '"home.title" = "Welcome";\n"home.items" = "%d items";\n'
        assert parse_strings(text) == {"home.title": "Welcome", "home.items": "%d items"}

    def test_comments_and_whitespace(self):
        text = """
        /* Title of the main screen */
        "title" = "Main"; // trailing comment
        /*
         * multi-line
         */
        "subtitle"   =   "Sub"  ;
        """
        assert parse_strings(text) == {"title": "Main", "subtitle": "Sub"}

    def test_unquoted_strings(self):
        assert parse_strings("greeting = Hello;\nsettings.title = 'Settings';") == {
            "greeting": "Hello",
            "settings.title": "Settings",
        }

    def test_key_shorthand(self):
        assert parse_strings('"Cancel";') == {"Cancel": "Cancel"}

    def test_braces(self):
        assert parse_strings('{ "a" = "A"; }') == {"a": "A"}

    def test_escapes(self):
        text = r'"k" = "line\nnext \"quoted\" tab\t back\\slash \U00e9 \101";'
        assert parse_strings(text) == {
            "k": 'line\nnext "quoted" tab\t back\\slash é A'
        }

    def test_surrogate_pair_escape(self):
        assert parse_strings(r'"smile" = "Hi \UD83D\UDE00";') == {"smile": "Hi \U0001F600"}
        assert parse_strings(r'"k" = "\ud83d\ude00";')["k"].encode("utf-8") == b"\xf0\x9f\x98\x80"

    def test_later_definition_wins(self):
        assert parse_strings('"a" = "1";\n"a" = "2";') == {"a": "2"}

    def test_empty_input(self):
        assert parse_strings("") == {}
        assert parse_strings("/* nothing here */\n") == {}

    def test_preserves_file_order(self):
        table = parse_strings('"b" = "1"; "a" = "2"; "c" = "3";')
        assert list(table) == ["b", "a", "c"]


class TestParseErrors:
    """Malformed input reports position."""

    def test_missing_semicolon(self):
        with pytest.raises(StringsParseError) as exc_info:
            parse_strings('"a" = "A"\n"b" = "B";')

        error = exc_info.value
        assert error.reason.startswith("Expected ';'")
        assert (error.line, error.column) == (2, 1)

    def test_unterminated_string(self):
        with pytest.raises(StringsParseError, match="Unterminated string") as exc_info:
            parse_strings('"a" = "never closed;')

        assert exc_info.value.column == 7

    def test_unterminated_comment(self):
        with pytest.raises(StringsParseError, match="Unterminated comment"):
            parse_strings('"a" = "A"; /* open')

    def test_missing_closing_brace(self):
        with pytest.raises(StringsParseError, match="Missing closing"):
            parse_strings('{ "a" = "A";')

    @pytest.mark.parametrize("value", ['{ "x" = "y"; }', '( "x" )', "<data>"])
    def test_non_string_values(self, value):
        with pytest.raises(StringsParseError, match="is not a string"):
            parse_strings(f'"a" = {value};')

    @pytest.mark.parametrize(
        "value", [r'"\UD83D"', r'"\UD83D x"', r'"\UD83D\U0041"', r'"\UDE00"']
    )
    def test_unpaired_surrogate(self, value):
        with pytest.raises(StringsParseError, match="Unpaired"):
            parse_strings(f'"a" = {value};')

    def test_garbage(self):
        with pytest.raises(StringsParseError, match="Unexpected character"):
            parse_strings('"a" = "A";\n!')

    def test_is_a_value_error(self):
        with pytest.raises(ValueError):
            parse_strings('"a" =')


class TestDecode:
    """Byte order mark handling."""

    def test_utf16_with_bom(self):
        data = '"a" = "é";'.encode("utf-16")
        assert decode_strings_bytes(data) == '"a" = "é";'

    def test_utf8_with_bom(self):
        data = b"\xef\xbb\xbf" + '"a" = "é";'.encode("utf-8")
        assert decode_strings_bytes(data) == '"a" = "é";'

    def test_plain_utf8(self):
        assert decode_strings_bytes('"ü" = "x";'.encode("utf-8")) == '"ü" = "x";'

    def test_invalid_utf8(self):
        with pytest.raises(UnicodeDecodeError):
            decode_strings_bytes(b'"a" = "\xff";')
