from typing import Any


class ArgAlignError(Exception):
    """Base class for all errors raised by argalign."""


class UnsupportedCalleeShapeError(ArgAlignError, ValueError):
    """Raised when a callee is neither an identifier nor a member-access chain."""

    def __init__(self, expression: Any) -> None:
        self.expression = expression
        super().__init__(f"Unsupported callee shape: {expression!r}")


class ConfigError(ArgAlignError, ValueError):
    """Raised when a configuration file cannot be turned into an AlignmentConfig."""


class SourceReadError(ArgAlignError, ValueError):
    """Raised when a source file cannot be read or is not a Python file."""
