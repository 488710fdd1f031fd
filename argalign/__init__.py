"""Argument layout checks for call expressions.

Reports calls whose arguments are split across lines inconsistently
(``arguments.mixed.lines``) or placed one per line without sharing a column
(``arguments.misaligned``).
"""

from argalign.errors import (
    ArgAlignError,
    ConfigError,
    SourceReadError,
    UnsupportedCalleeShapeError,
)
from argalign.models import (
    AlignmentConfig,
    ArgumentPosition,
    CallSite,
    Diagnostic,
    DiagnosticKind,
    Finding,
)
from argalign.services.alignment_analyzer import ArgumentAlignmentAnalyzer, analyze
from argalign.services.name_resolver import resolve_callee_name

__all__ = [
    "AlignmentConfig",
    "ArgAlignError",
    "ArgumentAlignmentAnalyzer",
    "ArgumentPosition",
    "CallSite",
    "ConfigError",
    "Diagnostic",
    "DiagnosticKind",
    "Finding",
    "SourceReadError",
    "UnsupportedCalleeShapeError",
    "analyze",
    "resolve_callee_name",
]
