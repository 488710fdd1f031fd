from collections.abc import Iterable
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


def split_names(raw: str | Iterable[Any] | None) -> frozenset[str]:
    """Normalize a name list into a set of non-qualified names.

    Accepts the comma-separated form used by lint configuration files
    (``"info,debug"``) as well as any iterable of strings. Surrounding
    whitespace is stripped and empty entries are dropped.

    Args:
        raw: Comma-separated names, an iterable of names, or None.

    Returns:
        Frozen set of names.

    Raises:
        ValueError: If an entry is not a string.
    """

    if raw is None:
        return frozenset()
    items: Iterable[Any] = raw.split(",") if isinstance(raw, str) else raw
    names: set[str] = set()
    for item in items:
        if not isinstance(item, str):
            raise ValueError(f"Call names must be strings, got {item!r}")
        name = item.strip()
        if name:
            names.add(name)
    return frozenset(names)


class AlignmentConfig(BaseModel):
    """Settings of the argument alignment check.

    Attributes:
        include_names: Only calls with these non-qualified names are checked.
            Empty means every call is checked.
        exclude_names: Calls with these non-qualified names are never checked.
        column_alignment: Check that arguments placed one per line share a column.
        column_alignment_first: Also require the first argument to share that
            column, instead of letting it stay next to the opening parenthesis.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    include_names: frozenset[str] = Field(
        default_factory=frozenset,
        validation_alias=AliasChoices("include_names", "include"),
        description="Non-qualified call names to check; empty checks all calls",
    )
    exclude_names: frozenset[str] = Field(
        default_factory=frozenset,
        validation_alias=AliasChoices("exclude_names", "exclude"),
        description="Non-qualified call names that are never checked",
    )
    column_alignment: bool = Field(
        default=True, description="Check column alignment of one-per-line arguments"
    )
    column_alignment_first: bool = Field(
        default=False, description="Include the first argument in the column check"
    )

    @field_validator("include_names", "exclude_names", mode="before")
    @classmethod
    def _parse_names(cls, value: Any) -> frozenset[str]:
        return split_names(value)

    def merged_with(self, **overrides: Any) -> "AlignmentConfig":
        """Return a copy with the given settings replaced, skipping ``None`` values."""

        payload: dict[str, Any] = self.model_dump()
        payload.update({key: value for key, value in overrides.items() if value is not None})
        return AlignmentConfig.model_validate(payload)


DEFAULT_CONFIG = AlignmentConfig()
