from argalign.models import CallExpression, Identifier, MemberAccess


def member_chain(*names: str) -> CallExpression:
    """Build the callee for a dotted name, e.g. ``member_chain("a", "b", "c")`` for ``a.b.c``."""

    expression: CallExpression = Identifier(name=names[0])
    for name in names[1:]:
        expression = MemberAccess(object=expression, member=Identifier(name=name))
    return expression
