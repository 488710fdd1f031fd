import pytest
from pydantic import ValidationError

from argalign.models import AlignmentConfig
from argalign.models.config import split_names


def test_alignment_config__defaults() -> None:
    config = AlignmentConfig()

    assert config.include_names == frozenset()
    assert config.exclude_names == frozenset()
    assert config.column_alignment is True
    assert config.column_alignment_first is False


def test_alignment_config__comma_separated_names__are_split() -> None:
    config = AlignmentConfig(include_names="assertEquals, assertThat ,", exclude="format")

    assert config.include_names == frozenset({"assertEquals", "assertThat"})
    assert config.exclude_names == frozenset({"format"})


def test_alignment_config__empty_string__means_no_restriction() -> None:
    assert AlignmentConfig(include_names="").include_names == frozenset()


def test_alignment_config__list_of_names__accepted() -> None:
    config = AlignmentConfig(include=["foo", "bar", "foo"])

    assert config.include_names == frozenset({"foo", "bar"})


def test_alignment_config__non_string_name__rejected() -> None:
    with pytest.raises(ValidationError):
        AlignmentConfig(exclude_names=["foo", 3])


def test_alignment_config__unknown_setting__rejected() -> None:
    with pytest.raises(ValidationError):
        AlignmentConfig(column_alignement=False)


def test_alignment_config__is_frozen() -> None:
    config = AlignmentConfig()

    with pytest.raises(ValidationError):
        config.column_alignment = False


def test_alignment_config__merged_with__skips_none() -> None:
    base = AlignmentConfig(include_names="foo", column_alignment_first=True)

    merged = base.merged_with(include_names=None, exclude_names="bar", column_alignment=False)

    assert merged.include_names == frozenset({"foo"})
    assert merged.exclude_names == frozenset({"bar"})
    assert merged.column_alignment is False
    assert merged.column_alignment_first is True
    assert base.column_alignment is True


def test_split_names__none__returns_empty_set() -> None:
    assert split_names(None) == frozenset()
