from pydantic import BaseModel, ConfigDict, Field


class Identifier(BaseModel):
    """A plain name used as a callee, e.g. ``foo`` in ``foo(x)``."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Simple identifier text")


class MemberAccess(BaseModel):
    """A dotted callee ``object.member``; chains nest on the ``object`` side."""

    model_config = ConfigDict(frozen=True)

    object: "CallExpression" = Field(..., description="Expression left of the dot")
    member: "CallExpression" = Field(..., description="Expression right of the dot")


class OpaqueExpression(BaseModel):
    """Any other callee shape, such as a subscript or the result of another call."""

    model_config = ConfigDict(frozen=True)

    kind: str = Field(..., description="Parser node type of the callee")
    text: str = Field(default="", description="Source snippet of the callee")


CallExpression = Identifier | MemberAccess | OpaqueExpression

MemberAccess.model_rebuild()

