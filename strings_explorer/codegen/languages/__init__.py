"""
Language-specific code generators.

This module contains generators for different target languages.
"""

from .swift import SwiftGenerator, create_swift_generator

__all__ = ["SwiftGenerator", "create_swift_generator"]
