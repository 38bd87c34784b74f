"""
Naming utilities for safe code generation.

Turns arbitrary localization key segments into identifiers that are valid in
the target language, and perturbs identifiers that collide.
"""

import re
import unicodedata
from typing import Dict, Optional, Set

DEFAULT_ESCAPE_MARKER = "_"

_INVALID_CHARS = re.compile(r"[^A-Za-z0-9_]")


class NameSanitizer:
    """Handles identifier sanitization and collision renaming."""

    def __init__(
        self,
        reserved_words: Optional[Set[str]] = None,
        escape_marker: str = DEFAULT_ESCAPE_MARKER,
    ):
        """
        Initialize name sanitizer.

        Args:
            reserved_words: Words that cannot be used as bare identifiers
            escape_marker: Prefix added to names starting with a digit or
                matching a reserved word
        """
        self.reserved_words = reserved_words or set()
        self.escape_marker = escape_marker
        self._name_cache: Dict[str, str] = {}

    def sanitize(self, segment: str) -> str:
        """
        Sanitize a key segment into a valid, readable identifier.

        The result only depends on ``segment``: letters with a Unicode
        decomposition are reduced to their ASCII base letter, other invalid
        characters become underscores, and case is kept as is.

        Args:
            segment: Raw key segment (any characters)

        Returns:
            Identifier safe for use in generated code
        """
        if segment in self._name_cache:
            return self._name_cache[segment]

        cleaned = _INVALID_CHARS.sub("_", self._transliterate(segment))

        if not cleaned:
            cleaned = self.escape_marker
        elif cleaned[0].isdigit() or cleaned in self.reserved_words:
            cleaned = f"{self.escape_marker}{cleaned}"

        self._name_cache[segment] = cleaned
        return cleaned

    def underscore(self, identifier: str) -> str:
        """Return a new valid identifier derived from ``identifier``."""
        return f"{identifier}_"

    def _transliterate(self, value: str) -> str:
        """Replace accented letters by their ASCII base letter."""
        decomposed = unicodedata.normalize("NFKD", value)
        chars = []
        for char in decomposed:
            if unicodedata.combining(char):
                continue
            chars.append(char)
        return "".join(chars)
