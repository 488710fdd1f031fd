from pydantic import BaseModel, ConfigDict, Field

from argalign.models.call_site import CallSite
from argalign.models.config import DEFAULT_CONFIG, AlignmentConfig
from argalign.models.diagnostic import Diagnostic


def is_filtered(callee_name: str, config: AlignmentConfig) -> bool:
    """Tell whether include/exclude settings take a call out of the check."""

    if config.include_names and callee_name not in config.include_names:
        return True
    return callee_name in config.exclude_names


def analyze(site: CallSite, config: AlignmentConfig = DEFAULT_CONFIG) -> Diagnostic | None:
    """Check the argument layout of a single call site.

    Arguments all on one line are always accepted. Otherwise every argument
    must start on its own line, and with ``column_alignment`` enabled those
    lines must start at the same column. The first argument is left out of the
    column comparison unless ``column_alignment_first`` is set, since it
    usually sits right after the opening parenthesis.

    Args:
        site: Call site with its resolved name and argument positions.
        config: Check settings.

    Returns:
        The violated rule, or None when the layout is acceptable or the call
        is filtered out.
    """

    if is_filtered(site.callee_name, config):
        return None
    if not site.arguments:
        return None

    lines: set[int] = {argument.line for argument in site.arguments}
    if len(lines) == 1:
        return None

    if len(site.arguments) != len(lines):
        return Diagnostic.mixed_lines(site.callee_name)

    if not config.column_alignment:
        return None

    compared = site.arguments if config.column_alignment_first else site.arguments[1:]
    columns: set[int] = {argument.column for argument in compared}
    if len(columns) > 1:
        return Diagnostic.misaligned(site.callee_name)
    return None


class ArgumentAlignmentAnalyzer(BaseModel):
    """Binds an AlignmentConfig for checking many call sites."""

    model_config = ConfigDict(frozen=True)

    config: AlignmentConfig = Field(default_factory=AlignmentConfig)

    def is_filtered(self, callee_name: str) -> bool:
        return is_filtered(callee_name, self.config)

    def analyze(self, site: CallSite) -> Diagnostic | None:
        return analyze(site, self.config)
