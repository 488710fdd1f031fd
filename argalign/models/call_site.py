from pydantic import BaseModel, ConfigDict, Field

from .expressions import CallExpression


class ArgumentPosition(BaseModel):
    """Source position of the first token of one argument expression."""

    model_config = ConfigDict(frozen=True)

    line: int = Field(..., ge=1, description="1-based line of the argument's first token")
    column: int = Field(..., ge=0, description="0-based column of the argument's first token")


class CallSite(BaseModel):
    """A call with its resolved callee name and arguments in source order."""

    model_config = ConfigDict(frozen=True)

    callee_name: str = Field(..., description="Non-qualified name of the called function")
    arguments: tuple[ArgumentPosition, ...] = Field(
        default=(), description="Argument positions in source order"
    )


class ExtractedCall(BaseModel):
    """A call expression as found in source text, before name resolution."""

    model_config = ConfigDict(frozen=True)

    callee: CallExpression
    arguments: tuple[ArgumentPosition, ...] = ()
    line: int = Field(..., ge=1, description="1-based line where the call starts")
    column: int = Field(..., ge=0, description="0-based column where the call starts")
