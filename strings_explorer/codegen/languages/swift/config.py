"""
Swift-specific configuration.

Controls access modifiers and how generated accessors look up their
localized strings.
"""

from typing import Optional

SWIFT_ACCESS_LEVELS = ("public", "internal", "fileprivate", "private", "")


def swift_string_literal(value: str) -> str:
    """Quote ``value`` as a Swift string literal."""
    escaped = (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
        .replace("\0", "\\0")
    )
    return f'"{escaped}"'


class SwiftConfig:
    """Swift-specific configuration."""

    def __init__(self, **kwargs):
        """Initialize Swift configuration from ``language_config`` settings."""
        access_level = kwargs.get("access_level")
        self.access_level = "public" if access_level is None else str(access_level)
        self.table_name: Optional[str] = kwargs.get("table_name")
        self.bundle: Optional[str] = kwargs.get("bundle")
        self.import_module: str = kwargs.get("import_module") or "Foundation"
        self.parameter_prefix: str = kwargs.get("parameter_prefix") or "value"

        self._validate()

    def _validate(self):
        """Validate Swift-specific configuration."""
        if self.access_level not in SWIFT_ACCESS_LEVELS:
            raise ValueError(
                f"Invalid access_level: {self.access_level!r} "
                f"(expected one of {', '.join(level for level in SWIFT_ACCESS_LEVELS if level)})"
            )
        if not self.parameter_prefix.isidentifier():
            raise ValueError(f"Invalid parameter_prefix: {self.parameter_prefix!r}")

    @property
    def access_prefix(self) -> str:
        """Access modifier followed by a space, or nothing for the default level."""
        return f"{self.access_level} " if self.access_level else ""

    def lookup_expression(self, key: str) -> str:
        """Swift expression returning the localized string for ``key``."""
        arguments = [swift_string_literal(key)]
        if self.table_name:
            arguments.append(f"tableName: {swift_string_literal(self.table_name)}")
        if self.bundle:
            arguments.append(f"bundle: {self.bundle}")
        arguments.append('comment: ""')
        return f"NSLocalizedString({', '.join(arguments)})"
