from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from pathlib import Path
from typing import TypedDict

import yaml

from argalign.models.diagnostic import Finding

logger = logging.getLogger(__name__)


class FindingRow(TypedDict):
    file: str
    line: int
    column: int
    kind: str
    callee: str
    message: str


class ReportPayload(TypedDict):
    findings: list[FindingRow]
    count: int


def _to_row(finding: Finding) -> FindingRow:
    return {
        "file": finding.file.as_posix(),
        "line": finding.line,
        "column": finding.column,
        "kind": str(finding.kind),
        "callee": finding.callee_name,
        "message": finding.message,
    }


def build_payload(findings: Sequence[Finding]) -> ReportPayload:
    return {"findings": [_to_row(f) for f in findings], "count": len(findings)}


def render_text(findings: Sequence[Finding]) -> str:
    """Render findings one per line as ``file:line:column: kind message``."""

    return "\n".join(
        f"{f.file.as_posix()}:{f.line}:{f.column}: {f.kind} {f.message}" for f in findings
    )


def to_json(findings: Sequence[Finding], indent: int = 2) -> str:
    return json.dumps(build_payload(findings), ensure_ascii=False, indent=indent)


def to_yaml(findings: Sequence[Finding], indent: int = 2) -> str:
    return yaml.safe_dump(
        dict(build_payload(findings)),
        allow_unicode=True,
        sort_keys=False,
        default_flow_style=False,
        indent=indent,
        width=4096,  # keep messages on one line
    )


class JsonReportLoader:
    """Persist findings as a JSON document ``{"findings": [...], "count": n}``."""

    def __init__(self, output_path: str | Path, indent: int = 2) -> None:
        self.output_path: Path = Path(output_path)
        self.indent: int = indent

    def dumps(self, findings: Sequence[Finding]) -> str:
        return to_json(findings, indent=self.indent)

    def load(self, findings: Sequence[Finding]) -> None:
        """Write findings to the configured JSON file.

        Args:
            findings: Findings to persist.
        """
        if self.output_path.parent and not self.output_path.parent.exists():
            self.output_path.parent.mkdir(parents=True, exist_ok=True)

        try:
            with self.output_path.open("w", encoding="utf-8") as f:
                f.write(self.dumps(findings))
        except OSError:
            logger.exception("Failed to write JSON report to %s", self.output_path)
            raise


class YamlReportLoader:
    """Persist findings as YAML, mirroring the JSON report layout."""

    def __init__(self, output_path: str | Path, indent: int = 2) -> None:
        self.output_path: Path = Path(output_path)
        self.indent: int = indent

    def dumps(self, findings: Sequence[Finding]) -> str:
        return to_yaml(findings, indent=self.indent)

    def load(self, findings: Sequence[Finding]) -> None:
        if self.output_path.parent and not self.output_path.parent.exists():
            self.output_path.parent.mkdir(parents=True, exist_ok=True)

        try:
            with self.output_path.open("w", encoding="utf-8") as f:
                f.write(self.dumps(findings))
        except OSError:
            logger.exception("Failed to write YAML report to %s", self.output_path)
            raise
