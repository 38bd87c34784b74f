"""Parser for ``.strings`` localization tables.

A ``.strings`` file is an old-style property list holding a flat dictionary::

    /* Title of the main screen */
    "home.title" = "Welcome";
    "home.items" = "%d items";
    greeting = "Hello %@";
    "standalone.key";

Supported syntax: quoted (double or single quotes) and unquoted strings,
``"key";`` shorthand whose value is the key itself, ``/* */`` and ``//``
comments, an optional enclosing ``{ }``, and the usual backslash escapes
including ``\\Uxxxx`` (surrogate pairs combine into one character) and
octal sequences.
"""

from __future__ import annotations

import string

from .logging_config import get_logger

logger = get_logger(__name__)

UNQUOTED_CHARS = frozenset(string.ascii_letters + string.digits + "_$+/:.-")

SIMPLE_ESCAPES = {
    "a": "\a",
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
    '"': '"',
    "'": "'",
    "\\": "\\",
    "\n": "\n",
}


class StringsParseError(ValueError):
    """Raised when ``.strings`` content is not a flat string table."""

    def __init__(self, message: str, line: int, column: int) -> None:
        super().__init__(f"{message} (line {line}, column {column})")
        self.reason = message
        self.line = line
        self.column = column


class StringsFileParser:
    """Recursive-descent parser turning ``.strings`` text into a dict.

    Later definitions of the same key override earlier ones, matching how
    the platform loads these files.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    @classmethod
    def parse(cls, text: str) -> dict[str, str]:
        """Parse ``.strings`` text.

        Args:
            text: Decoded file contents.

        Returns:
            Mapping of keys to values in file order.

        Raises:
            StringsParseError: If the content is not a flat string table.
        """
        return cls(text)._parse_table()

    def _parse_table(self) -> dict[str, str]:
        table: dict[str, str] = {}

        self._skip_trivia()
        braced = self._peek() == "{"
        if braced:
            self.pos += 1

        while True:
            self._skip_trivia()
            char = self._peek()

            if char is None:
                if braced:
                    self._fail("Missing closing '}'")
                break
            if braced and char == "}":
                self.pos += 1
                self._skip_trivia()
                if self._peek() is not None:
                    self._fail("Unexpected content after closing '}'")
                break

            key = self._parse_string("key")
            self._skip_trivia()

            if self._peek() == ";":
                self.pos += 1
                value = key
            else:
                self._expect("=")
                self._skip_trivia()
                if self._peek() in ("{", "(", "<"):
                    self._fail(f"Value for key '{key}' is not a string")
                value = self._parse_string("value")
                self._skip_trivia()
                self._expect(";")

            if key in table:
                logger.debug("Key '%s' redefined, keeping the later value", key)
            table[key] = value

        return table

    def _parse_string(self, what: str) -> str:
        char = self._peek()
        if char in ('"', "'"):
            return self._parse_quoted(char)
        if char is not None and char in UNQUOTED_CHARS:
            start = self.pos
            while self._peek() is not None and self._peek() in UNQUOTED_CHARS:
                self.pos += 1
            return self.text[start : self.pos]
        if char is None:
            self._fail(f"Unexpected end of input, expected {what}")
        self._fail(f"Unexpected character {char!r}, expected {what}")

    def _parse_quoted(self, quote: str) -> str:
        start = self.pos
        self.pos += 1
        chunks: list[str] = []

        while True:
            char = self._peek()
            if char is None:
                self.pos = start
                self._fail("Unterminated string")
            self.pos += 1
            if char == quote:
                return "".join(chunks)
            if char == "\\":
                chunks.append(self._parse_escape())
            else:
                chunks.append(char)

    def _parse_escape(self) -> str:
        char = self._peek()
        if char is None:
            self._fail("Unterminated escape sequence")

        if char in ("U", "u"):
            code = self._parse_code_unit()
            if 0xDC00 <= code <= 0xDFFF:
                self._fail("Unpaired low surrogate in \\U escape sequence")
            if 0xD800 <= code <= 0xDBFF:
                # A non-BMP character is written as a UTF-16 surrogate pair.
                if self.text[self.pos : self.pos + 2] not in ("\\U", "\\u"):
                    self._fail("Unpaired high surrogate in \\U escape sequence")
                self.pos += 1
                low = self._parse_code_unit()
                if not 0xDC00 <= low <= 0xDFFF:
                    self._fail("Unpaired high surrogate in \\U escape sequence")
                code = 0x10000 + ((code - 0xD800) << 10) + (low - 0xDC00)
            return chr(code)

        if char in "01234567":
            end = self.pos
            while end < len(self.text) and end - self.pos < 3 and self.text[end] in "01234567":
                end += 1
            value = int(self.text[self.pos : end], 8)
            self.pos = end
            return chr(value)

        self.pos += 1
        return SIMPLE_ESCAPES.get(char, char)

    def _parse_code_unit(self) -> int:
        """Read ``Uxxxx`` at the current position as one UTF-16 code unit."""
        digits = self.text[self.pos + 1 : self.pos + 5]
        if len(digits) != 4 or not all(d in string.hexdigits for d in digits):
            self._fail("Invalid \\U escape sequence")
        self.pos += 5
        return int(digits, 16)

    def _skip_trivia(self) -> None:
        """Skip whitespace and comments."""
        while self.pos < len(self.text):
            char = self.text[self.pos]
            if char.isspace():
                self.pos += 1
            elif self.text.startswith("//", self.pos):
                newline = self.text.find("\n", self.pos)
                self.pos = len(self.text) if newline == -1 else newline + 1
            elif self.text.startswith("/*", self.pos):
                end = self.text.find("*/", self.pos + 2)
                if end == -1:
                    self._fail("Unterminated comment")
                self.pos = end + 2
            else:
                break

    def _expect(self, char: str) -> None:
        if self._peek() != char:
            found = self._peek()
            self._fail(
                f"Expected '{char}'"
                + (f" but found {found!r}" if found is not None else " before end of input")
            )
        self.pos += 1

    def _peek(self) -> str | None:
        if self.pos < len(self.text):
            return self.text[self.pos]
        return None

    def _fail(self, message: str) -> None:
        line = self.text.count("\n", 0, self.pos) + 1
        column = self.pos - (self.text.rfind("\n", 0, self.pos) + 1) + 1
        raise StringsParseError(message, line, column)


def decode_strings_bytes(data: bytes) -> str:
    """Decode raw ``.strings`` bytes, honoring UTF-8 and UTF-16 byte order marks.

    Raises:
        UnicodeDecodeError: If the bytes are not valid in the detected encoding.
    """
    if data.startswith((b"\xff\xfe", b"\xfe\xff")):
        return data.decode("utf-16")
    if data.startswith(b"\xef\xbb\xbf"):
        return data.decode("utf-8-sig")
    return data.decode("utf-8")


def parse_strings(text: str) -> dict[str, str]:
    """Parse ``.strings`` text into a flat dictionary."""
    return StringsFileParser.parse(text)
