"""
Swift code generator module.

Generates nested Swift enums of localized string accessors.
"""

from .generator import SwiftGenerator, create_swift_generator
from .naming import SWIFT_RESERVED_WORDS, create_swift_sanitizer
from .config import SwiftConfig, swift_string_literal

__all__ = [
    "SwiftGenerator",
    "create_swift_generator",
    "SWIFT_RESERVED_WORDS",
    "create_swift_sanitizer",
    "SwiftConfig",
    "swift_string_literal",
]
