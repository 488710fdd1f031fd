import pytest

from argalign.models import AlignmentConfig, ArgumentPosition, CallSite


@pytest.fixture
def default_config() -> AlignmentConfig:
    return AlignmentConfig()


@pytest.fixture
def make_site():
    def _make(name: str, *positions: tuple[int, int]) -> CallSite:
        return CallSite(
            callee_name=name,
            arguments=tuple(ArgumentPosition(line=line, column=column) for line, column in positions),
        )

    return _make
