import logging
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from argalign.errors import SourceReadError, UnsupportedCalleeShapeError
from argalign.models.call_site import CallSite
from argalign.models.config import AlignmentConfig
from argalign.models.diagnostic import Finding
from argalign.services.alignment_analyzer import analyze, is_filtered
from argalign.services.call_site_extractor import CallSiteExtractor
from argalign.services.name_resolver import resolve_callee_name

logger = logging.getLogger(__name__)


class AlignmentLintService(BaseModel):
    """Run the argument alignment check over Python files and directories."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    config: AlignmentConfig = Field(default_factory=AlignmentConfig)
    extractor: CallSiteExtractor = Field(default_factory=CallSiteExtractor)
    on_error: Literal["raise", "skip"] = "raise"
    exclude_dir_names: set[str] = Field(
        default_factory=lambda: {
            "__pycache__",
            ".git",
            ".venv",
            "venv",
            ".mypy_cache",
            ".pytest_cache",
            "node_modules",
            "build",
            "dist",
        }
    )

    def lint_source(self, source: str | bytes, path: Path) -> list[Finding]:
        """Check every call in a piece of source code.

        Args:
            source: Python source text or UTF-8 bytes.
            path: Path reported in the findings.

        Returns:
            Findings in source order.
        """

        findings: list[Finding] = []
        for call in self.extractor.extract(source):
            try:
                name = resolve_callee_name(call.callee)
            except UnsupportedCalleeShapeError as e:
                logger.debug("Skipping call at %s:%d: %s", path, call.line, e)
                continue
            if is_filtered(name, self.config):
                continue
            diagnostic = analyze(CallSite(callee_name=name, arguments=call.arguments), self.config)
            if diagnostic is not None:
                findings.append(
                    Finding.from_diagnostic(diagnostic, file=path, line=call.line, column=call.column)
                )
        return findings

    def lint_file(self, path: Path) -> list[Finding]:
        """Read and check a single Python file.

        Raises:
            SourceReadError: If the path is not a readable Python file.
        """

        if not path.is_file():
            raise SourceReadError(f"Path is not a file: {path}")
        if path.suffix != ".py":
            raise SourceReadError(f"File is not a Python file: {path}")
        try:
            source = path.read_bytes()
            source.decode("utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise SourceReadError(f"Failed to read file {path}: {e}") from e
        return self.lint_source(source, path)

    def lint_paths(self, paths: Iterable[Path]) -> list[Finding]:
        """Check files and, recursively, the Python files under directories.

        Returns:
            Findings sorted by file, line and column.
        """

        findings: list[Finding] = []
        for file_path in self.iter_source_files(paths):
            try:
                findings.extend(self.lint_file(file_path))
            except SourceReadError:
                if self.on_error == "raise":
                    raise
                logger.exception("Failed to check Python file: %s", file_path)
        return sorted(findings, key=Finding.sort_key)

    def iter_source_files(self, paths: Iterable[Path]) -> Iterator[Path]:
        for path in paths:
            if path.is_dir():
                yield from sorted(
                    candidate
                    for candidate in path.rglob("*.py")
                    if candidate.is_file() and not self._is_excluded(candidate, path)
                )
            else:
                yield path

    def _is_excluded(self, candidate: Path, root: Path) -> bool:
        relative_parts = candidate.relative_to(root).parts[:-1]
        return any(part in self.exclude_dir_names for part in relative_parts)
