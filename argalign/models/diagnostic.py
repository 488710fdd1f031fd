from enum import StrEnum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class DiagnosticKind(StrEnum):
    """Layout violations reported by the alignment check."""

    MISALIGNED = "arguments.misaligned"
    MIXED_LINES = "arguments.mixed.lines"


MESSAGES: dict[DiagnosticKind, str] = {
    DiagnosticKind.MISALIGNED: "Arguments of '{name}' are not aligned in one column.",
    DiagnosticKind.MIXED_LINES: (
        "Arguments of '{name}' are split across lines; "
        "put all on one line or each on its own line."
    ),
}


def format_message(kind: DiagnosticKind, callee_name: str) -> str:
    return MESSAGES[kind].format(name=callee_name)


class Diagnostic(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: DiagnosticKind
    callee_name: str

    @classmethod
    def misaligned(cls, callee_name: str) -> "Diagnostic":
        return cls(kind=DiagnosticKind.MISALIGNED, callee_name=callee_name)

    @classmethod
    def mixed_lines(cls, callee_name: str) -> "Diagnostic":
        return cls(kind=DiagnosticKind.MIXED_LINES, callee_name=callee_name)

    @property
    def message(self) -> str:
        return format_message(self.kind, self.callee_name)


class Finding(BaseModel):
    """A diagnostic placed at the call expression it was raised for.

    Attributes:
        file: Path to the source file containing the call.
        line: Line number of the call (1-based).
        column: Column number of the call (0-based).
        kind: Which layout rule was violated.
        callee_name: Non-qualified name of the called function.
    """

    model_config = ConfigDict(frozen=True)

    file: Path
    line: int = Field(..., ge=1)
    column: int = Field(..., ge=0)
    kind: DiagnosticKind
    callee_name: str

    @classmethod
    def from_diagnostic(
        cls, diagnostic: Diagnostic, file: Path, line: int, column: int
    ) -> "Finding":
        return cls(
            file=file,
            line=line,
            column=column,
            kind=diagnostic.kind,
            callee_name=diagnostic.callee_name,
        )

    @property
    def message(self) -> str:
        return format_message(self.kind, self.callee_name)

    def sort_key(self) -> tuple[str, int, int]:
        return (self.file.as_posix(), self.line, self.column)
