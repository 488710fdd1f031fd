from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Annotated, Optional

import typer
import yaml
from click.core import ParameterSource

from argalign.errors import ConfigError, SourceReadError
from argalign.loaders.config_loader import load_config
from argalign.loaders.report_loader import (
    JsonReportLoader,
    YamlReportLoader,
    render_text,
    to_json,
    to_yaml,
)
from argalign.models.config import AlignmentConfig
from argalign.models.diagnostic import Finding
from argalign.services.lint_service import AlignmentLintService

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="argalign",
    add_completion=False,
    no_args_is_help=True,
    help="Check that call arguments are on one line or aligned one per line.",
)

EXIT_FINDINGS = 1
EXIT_USAGE = 2


class ReportFormat(Enum):
    TEXT = "text"
    JSON = "json"
    YAML = "yaml"


ConfigOption = Annotated[
    Optional[Path],
    typer.Option(
        "--config",
        "-c",
        help="YAML file with include/exclude/column_alignment settings.",
        envvar="ARGALIGN_CONFIG",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        resolve_path=True,
    ),
]
IncludeOption = Annotated[
    Optional[str],
    typer.Option("--include", help="Comma-separated call names to check; others are skipped."),
]
ExcludeOption = Annotated[
    Optional[str],
    typer.Option("--exclude", help="Comma-separated call names that are never checked."),
]
ColumnAlignmentOption = Annotated[
    bool,
    typer.Option(
        "--column-alignment/--no-column-alignment",
        help="Check column alignment of arguments placed one per line.",
    ),
]
ColumnAlignmentFirstOption = Annotated[
    bool,
    typer.Option(
        "--column-alignment-first/--no-column-alignment-first",
        help="Require the first argument to share the column of the others.",
    ),
]


def _given(ctx: typer.Context, name: str, value: bool) -> bool | None:
    """Return a flag value only when it was passed on the command line or via env."""
    source = ctx.get_parameter_source(name)
    if source in (ParameterSource.COMMANDLINE, ParameterSource.ENVIRONMENT):
        return value
    return None


def _resolve_config(
    ctx: typer.Context,
    config_path: Path | None,
    include: str | None,
    exclude: str | None,
    column_alignment: bool,
    column_alignment_first: bool,
) -> AlignmentConfig:
    """Combine the config file, if any, with command-line overrides.

    Flags left at their defaults do not override the config file.

    Raises:
        typer.Exit: With code 2 when the config file is invalid.
    """
    try:
        base = load_config(config_path) if config_path is not None else AlignmentConfig()
    except ConfigError as e:
        typer.secho(str(e), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=EXIT_USAGE) from e
    return base.merged_with(
        include_names=include,
        exclude_names=exclude,
        column_alignment=_given(ctx, "column_alignment", column_alignment),
        column_alignment_first=_given(ctx, "column_alignment_first", column_alignment_first),
    )


def _write_report(findings: list[Finding], report_format: ReportFormat, output: Path | None) -> None:
    if report_format is ReportFormat.JSON:
        if output is None:
            typer.echo(to_json(findings))
        else:
            JsonReportLoader(output).load(findings)
    elif report_format is ReportFormat.YAML:
        if output is None:
            typer.echo(to_yaml(findings), nl=False)
        else:
            YamlReportLoader(output).load(findings)
    else:
        text = render_text(findings)
        if output is not None:
            output.parent.mkdir(parents=True, exist_ok=True)
            output.write_text(text + "\n" if text else "", encoding="utf-8")
        elif text:
            typer.echo(text)


@app.callback()
def main_callback(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log debug messages to stderr."),
    ] = False,
) -> None:
    """Check argument layout of Python calls."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@app.command("check")
def check(
    ctx: typer.Context,
    paths: Annotated[
        list[Path],
        typer.Argument(
            help="Python files or directories to check.",
            exists=True,
            file_okay=True,
            dir_okay=True,
            readable=True,
        ),
    ],
    config_path: ConfigOption = None,
    include: IncludeOption = None,
    exclude: ExcludeOption = None,
    column_alignment: ColumnAlignmentOption = True,
    column_alignment_first: ColumnAlignmentFirstOption = False,
    report_format: Annotated[
        ReportFormat,
        typer.Option("--format", "-f", case_sensitive=False, help="Report format."),
    ] = ReportFormat.TEXT,
    output: Annotated[
        Optional[Path],
        typer.Option(
            "--output",
            "-o",
            help="Write the report to this file instead of stdout.",
            file_okay=True,
            dir_okay=False,
            writable=True,
            resolve_path=True,
        ),
    ] = None,
    skip_errors: Annotated[
        bool,
        typer.Option("--skip-errors", help="Log unreadable files and keep going."),
    ] = False,
) -> None:
    """Check argument layout of every call in the given paths.

    Args:
        ctx: Click context, used to tell given flags from defaults.
        paths: Files or directories to check.
        config_path: Optional YAML configuration file.
        include: Call names to restrict the check to.
        exclude: Call names to leave out of the check.
        column_alignment: Override the column alignment setting.
        column_alignment_first: Override the first-argument alignment setting.
        report_format: Output format of the report.
        output: Optional report destination.
        skip_errors: Whether to skip files that cannot be read.
    """
    config = _resolve_config(ctx, config_path, include, exclude, column_alignment, column_alignment_first)
    logger.debug("Effective configuration: %s", config)

    service = AlignmentLintService(config=config, on_error="skip" if skip_errors else "raise")
    try:
        findings = service.lint_paths(paths)
    except SourceReadError as e:
        typer.secho(str(e), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=EXIT_USAGE) from e

    try:
        _write_report(findings, report_format, output)
    except OSError as e:
        typer.secho(f"Failed to write report to {output}: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=EXIT_USAGE) from e

    if report_format is ReportFormat.TEXT or output is not None:
        if findings:
            typer.secho(f"Found {len(findings)} argument layout issue(s)", fg=typer.colors.RED, err=True)
        else:
            typer.secho("No argument layout issues found", fg=typer.colors.GREEN, err=True)
    if findings:
        raise typer.Exit(code=EXIT_FINDINGS)


@app.command("show-config")
def show_config(
    ctx: typer.Context,
    config_path: ConfigOption = None,
    include: IncludeOption = None,
    exclude: ExcludeOption = None,
    column_alignment: ColumnAlignmentOption = True,
    column_alignment_first: ColumnAlignmentFirstOption = False,
) -> None:
    """Print the effective configuration as YAML."""
    config = _resolve_config(ctx, config_path, include, exclude, column_alignment, column_alignment_first)
    payload = {
        "include": sorted(config.include_names),
        "exclude": sorted(config.exclude_names),
        "column_alignment": config.column_alignment,
        "column_alignment_first": config.column_alignment_first,
    }
    typer.echo(yaml.safe_dump(payload, sort_keys=False, default_flow_style=False), nl=False)


def main() -> None:
    """Entry point for executing the Typer application."""
    app()


if __name__ == "__main__":
    main()
