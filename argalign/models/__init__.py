from .call_site import ArgumentPosition, CallSite, ExtractedCall
from .config import DEFAULT_CONFIG, AlignmentConfig
from .diagnostic import Diagnostic, DiagnosticKind, Finding
from .expressions import CallExpression, Identifier, MemberAccess, OpaqueExpression

__all__ = [
    "AlignmentConfig",
    "ArgumentPosition",
    "CallExpression",
    "CallSite",
    "DEFAULT_CONFIG",
    "Diagnostic",
    "DiagnosticKind",
    "ExtractedCall",
    "Finding",
    "Identifier",
    "MemberAccess",
    "OpaqueExpression",
]
