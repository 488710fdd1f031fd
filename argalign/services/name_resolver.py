from argalign.errors import UnsupportedCalleeShapeError
from argalign.models.expressions import CallExpression, Identifier, MemberAccess


def resolve_callee_name(expression: CallExpression) -> str:
    """Return the non-qualified name of a callee.

    Only the final simple name is kept: ``a.b.c`` resolves to ``"c"``. The
    qualification is discarded, so include/exclude lists match on bare names.

    Args:
        expression: Callee of a call expression.

    Returns:
        The simple name of the called function or method.

    Raises:
        UnsupportedCalleeShapeError: If the callee is not an identifier or a
            member-access chain ending in one.
    """

    if isinstance(expression, Identifier):
        return expression.name
    if isinstance(expression, MemberAccess):
        return resolve_callee_name(expression.member)
    raise UnsupportedCalleeShapeError(expression)
