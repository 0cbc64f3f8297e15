"""
Data class rule.

A class is a data class when none of its methods is a behaviour method.
Every method must be short and either a pure field getter or a pure
field setter. A class without methods is a data class.

Fields and methods are collected from the whole class subtree, nested
classes included. Getter and setter recognition is textual: a getter
must return a field by its bare name, a setter must assign to one.
"""
from typing import List, Set, cast

from . import RuleContext
from ..data_structures import SmellKind
from ..syntax import (
    Assignment,
    ClassDecl,
    MethodDecl,
    NodeKind,
    ReturnStatement,
    SyntaxTree,
)
from ..walker import descendants, descendants_in_body
from .utils import body_lines, field_identifiers, is_field_member

# Independent of size.METHOD_LINE_COUNT_LIMIT
DATA_CLASS_METHOD_LINE_LIMIT = 5


def is_short_method(method: MethodDecl, tree: SyntaxTree) -> bool:
    return len(body_lines(method, tree)) <= DATA_CLASS_METHOD_LINE_LIMIT


def is_getter(method: MethodDecl, fields: Set[str], tree: SyntaxTree) -> bool:
    """
    Detect a pure getter.

    Matches:
    - non-void return type
    - no parameters
    - no expression statements in the body
    - exactly one return statement, returning a field by name
    """
    if method.returns_void:
        return False

    if method.parameter_count > 0:
        return False

    if descendants_in_body(method, NodeKind.EXPRESSION_STATEMENT):
        return False

    returns = descendants_in_body(method, NodeKind.RETURN_STATEMENT)
    if len(returns) != 1:
        return False

    return_node = cast(ReturnStatement, returns[0])
    return is_field_member(return_node.expression, fields, tree)


def is_setter(method: MethodDecl, fields: Set[str], tree: SyntaxTree) -> bool:
    """
    Detect a pure setter.

    Matches:
    - exactly one parameter
    - no return statements in the body
    - void return type
    - a single simple assignment (`=`, not `+=`) to a field by name

    A body with no assignment at all has no left-hand side to match,
    so it is not a setter.
    """
    if method.parameter_count != 1:
        return False

    if descendants_in_body(method, NodeKind.RETURN_STATEMENT):
        return False

    if not method.returns_void:
        return False

    assignment = None
    assignment_count = 0

    for candidate in descendants_in_body(method, NodeKind.ASSIGNMENT):
        node = cast(Assignment, candidate)
        if not node.is_simple:
            return False

        assignment = node
        assignment_count += 1

        if assignment_count > 1:
            return False

    left = assignment.left if assignment is not None else None
    return is_field_member(left, fields, tree)


def has_long_method(methods: List[MethodDecl], tree: SyntaxTree) -> bool:
    return any(not is_short_method(method, tree) for method in methods)


def has_short_behaviour_method(
    methods: List[MethodDecl],
    fields: Set[str],
    tree: SyntaxTree,
) -> bool:
    for method in methods:
        if not is_getter(method, fields, tree) and not is_setter(method, fields, tree):
            return True
    return False


def contains_behaviour_method(
    methods: List[MethodDecl],
    fields: Set[str],
    tree: SyntaxTree,
) -> bool:
    if has_long_method(methods, tree):
        return True

    if has_short_behaviour_method(methods, fields, tree):
        return True

    return False


def check_data_class(node: ClassDecl, context: RuleContext) -> None:
    """Report DataClass (unlocated) for classes exposing only data access."""
    fields = field_identifiers(node)
    methods = [
        method for method in descendants(node, NodeKind.METHOD_DECL)
        if isinstance(method, MethodDecl)
    ]

    if contains_behaviour_method(methods, fields, context.tree):
        return

    context.report(SmellKind.DATA_CLASS)
