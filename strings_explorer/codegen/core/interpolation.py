"""
Format placeholder classification.

Infers the parameter types of a localized string from the printf-style
placeholders embedded in its text.
"""

import re
from enum import Enum
from typing import List


class InterpolationType(Enum):
    """Argument types that a placeholder can require."""

    UINT = "UInt"
    INT = "Int"
    INT64 = "Int64"
    DOUBLE = "Double"
    STRING = "String"

    @classmethod
    def from_token(cls, token: str) -> "InterpolationType":
        """
        Classify a single placeholder token such as ``%ld`` or ``%1$@``.

        Rules are checked in order, first match wins.
        """
        if "ld" in token:
            return cls.INT64
        if "d" in token or "i" in token:
            return cls.INT
        if "u" in token:
            return cls.UINT
        if "f" in token:
            return cls.DOUBLE
        return cls.STRING

    @property
    def type_name(self) -> str:
        """Name of the type in generated signatures."""
        return self.value


# %% is an escaped percent sign; it is matched so that it can be skipped.
PLACEHOLDER_PATTERN = re.compile(
    r"%%"
    r"|%(?:\d+\$)?(?:[-+ #0']*\d*(?:\.\d*)?(?:hh|h|ll|l|q|z|t|j)?[diuf]|@)"
)


def find_placeholders(text: str) -> List[str]:
    """Return placeholder tokens in the order they appear in ``text``."""
    return [
        match.group(0)
        for match in PLACEHOLDER_PATTERN.finditer(text)
        if match.group(0) != "%%"
    ]


def classify(text: str) -> List[InterpolationType]:
    """
    Infer accessor parameter types from the placeholders in ``text``.

    Positional markers like ``%2$@`` do not reorder the result: parameters
    follow the order in which placeholders appear.

    Args:
        text: Localized text

    Returns:
        One type per placeholder; empty when the text has none
    """
    return [InterpolationType.from_token(token) for token in find_placeholders(text)]
