"""
Stateless helpers shared by the rules.
"""
from typing import List, Set, cast

from ..syntax import FieldDecl, MethodDecl, Node, NodeKind, Span, SyntaxTree
from ..walker import descendants


def body_lines(method: MethodDecl, tree: SyntaxTree) -> List[str]:
    """
    Physical lines of the method body, from its opening to closing brace.

    Methods without a body have no lines.
    """
    if method.body is None:
        return []
    return tree.source.lines(method.body)


def field_identifiers(class_node: Node) -> Set[str]:
    """Identifiers of every field variable declared anywhere under the class."""
    identifiers: Set[str] = set()
    for node in descendants(class_node, NodeKind.FIELD_DECL):
        identifiers.update(cast(FieldDecl, node).variables)
    return identifiers


def is_field_member(expression: Span | None, fields: Set[str], tree: SyntaxTree) -> bool:
    """
    Check if an expression is, textually, one of the class's fields.

    Only an exact match counts: `this.x` is not `x`.
    A missing expression never matches.
    """
    if expression is None:
        return False
    return tree.text(expression) in fields
