from pathlib import Path

import pytest

from argalign.models import AlignmentConfig, Diagnostic, DiagnosticKind, Finding
from argalign.services.alignment_analyzer import (
    ArgumentAlignmentAnalyzer,
    analyze,
    is_filtered,
)


def test_analyze__aligned_arguments__returns_none(make_site, default_config) -> None:
    site = make_site("foo", (1, 5), (2, 5), (3, 5))

    assert analyze(site, default_config) is None


def test_analyze__misaligned_arguments__returns_misaligned(make_site, default_config) -> None:
    site = make_site("foo", (1, 5), (2, 7), (3, 5))

    assert analyze(site, default_config) == Diagnostic.misaligned("foo")


def test_analyze__two_arguments_share_a_line__returns_mixed_lines(make_site, default_config) -> None:
    site = make_site("foo", (1, 5), (1, 10), (2, 5))

    assert analyze(site, default_config) == Diagnostic.mixed_lines("foo")


def test_analyze__mixed_lines_with_aligned_columns__still_mixed_lines(make_site) -> None:
    site = make_site("foo", (1, 5), (2, 5), (2, 5), (3, 5))
    config = AlignmentConfig(column_alignment_first=True)

    result = analyze(site, config)

    assert result is not None
    assert result.kind is DiagnosticKind.MIXED_LINES


@pytest.mark.parametrize(
    "config",
    [
        AlignmentConfig(),
        AlignmentConfig(column_alignment=False),
        AlignmentConfig(column_alignment_first=True),
        AlignmentConfig(include_names="foo"),
    ],
)
def test_analyze__no_arguments__returns_none(make_site, config: AlignmentConfig) -> None:
    assert analyze(make_site("foo"), config) is None


def test_analyze__single_line_with_different_columns__returns_none(make_site) -> None:
    site = make_site("foo", (4, 3), (4, 9), (4, 20))

    assert analyze(site, AlignmentConfig(column_alignment_first=True)) is None


def test_analyze__single_argument__returns_none(make_site, default_config) -> None:
    assert analyze(make_site("foo", (1, 4)), default_config) is None


def test_analyze__column_alignment_disabled__ignores_columns(make_site) -> None:
    site = make_site("foo", (1, 5), (2, 7), (3, 11))

    assert analyze(site, AlignmentConfig(column_alignment=False)) is None


def test_analyze__column_alignment_disabled__still_reports_mixed_lines(make_site) -> None:
    site = make_site("foo", (1, 5), (1, 8), (2, 5))

    assert analyze(site, AlignmentConfig(column_alignment=False)) == Diagnostic.mixed_lines("foo")


def test_analyze__first_argument_off_column__ignored_by_default(make_site, default_config) -> None:
    site = make_site("foo", (1, 12), (2, 4), (3, 4))

    assert analyze(site, default_config) is None


def test_analyze__first_argument_off_column__reported_when_first_is_checked(make_site) -> None:
    site = make_site("foo", (1, 12), (2, 4), (3, 4))

    result = analyze(site, AlignmentConfig(column_alignment_first=True))

    assert result == Diagnostic.misaligned("foo")


def test_analyze__two_arguments_on_separate_lines__first_excluded(make_site, default_config) -> None:
    site = make_site("foo", (1, 12), (2, 4))

    assert analyze(site, default_config) is None


def test_analyze__first_argument_order_not_position(make_site) -> None:
    # lexical order decides which argument is first, not the smallest line
    site = make_site("foo", (3, 9), (1, 4), (2, 4))

    assert analyze(site, AlignmentConfig()) is None
    assert analyze(site, AlignmentConfig(column_alignment_first=True)) == Diagnostic.misaligned("foo")


def test_analyze__name_not_included__returns_none(make_site) -> None:
    site = make_site("bar", (1, 5), (1, 10), (2, 5))

    assert analyze(site, AlignmentConfig(include_names={"foo"})) is None


def test_analyze__name_included__is_checked(make_site) -> None:
    site = make_site("foo", (1, 5), (1, 10), (2, 5))

    assert analyze(site, AlignmentConfig(include_names={"foo"})) == Diagnostic.mixed_lines("foo")


def test_analyze__name_excluded__returns_none(make_site) -> None:
    site = make_site("foo", (1, 5), (2, 7), (3, 5))

    assert analyze(site, AlignmentConfig(exclude_names={"foo"})) is None


def test_analyze__misspelled_filter_name__has_no_effect(make_site) -> None:
    site = make_site("foo", (1, 5), (2, 7), (3, 5))

    assert analyze(site, AlignmentConfig(exclude_names={"fooo"})) == Diagnostic.misaligned("foo")


def test_is_filtered__exclude_wins_over_include() -> None:
    config = AlignmentConfig(include_names={"foo"}, exclude_names={"foo"})

    assert is_filtered("foo", config) is True
    assert is_filtered("bar", config) is True
    assert is_filtered("bar", AlignmentConfig()) is False


def test_argument_alignment_analyzer__uses_bound_config(make_site) -> None:
    analyzer = ArgumentAlignmentAnalyzer(config=AlignmentConfig(column_alignment_first=True))
    site = make_site("assertEquals", (1, 12), (2, 4), (3, 4))

    assert analyzer.analyze(site) == Diagnostic.misaligned("assertEquals")
    assert analyzer.is_filtered("assertEquals") is False


def test_diagnostic__message_names_the_callee() -> None:
    assert Diagnostic.misaligned("foo").message == "Arguments of 'foo' are not aligned in one column."
    assert "split across lines" in Diagnostic.mixed_lines("foo").message
    assert str(DiagnosticKind.MIXED_LINES) == "arguments.mixed.lines"


def test_finding__message_matches_its_diagnostic() -> None:
    diagnostic = Diagnostic.mixed_lines("format")

    finding = Finding.from_diagnostic(diagnostic, file=Path("pkg/module.py"), line=3, column=4)

    assert finding.message == diagnostic.message
