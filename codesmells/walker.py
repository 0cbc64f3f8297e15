"""
Tree walker.

Pre-order, depth-first traversal over child links. The walker holds no
analysis state; visitors do all the work through their own context.
Traversal uses an explicit stack, so deep trees are not limited by the
interpreter's recursion limit.
"""
from typing import Callable, Iterable, Iterator, List, Optional

from .exceptions import TraversalError
from .syntax import MethodDecl, Node, NodeKind, SyntaxTree

Visitor = Callable[[Node], None]


def _preorder(nodes: Iterable[Node]) -> Iterator[Node]:
    """Yield nodes and all their descendants in pre-order."""
    stack = list(reversed(tuple(nodes)))
    seen: set[int] = set()

    while stack:
        node = stack.pop()
        if id(node) in seen:
            raise TraversalError(
                f"Node {node.kind.value} at {node.span.start}-{node.span.end} "
                f"reached twice; the tree is cyclic"
            )
        seen.add(id(node))

        yield node

        stack.extend(reversed(node.children))


def walk(root: Node, visitor: Visitor) -> None:
    """Visit every descendant of root (not root itself) in pre-order."""
    for node in _preorder(root.children):
        visitor(node)


def walk_tree(tree: SyntaxTree, visitor: Visitor) -> None:
    """Visit every node of the tree's forest in pre-order."""
    for node in _preorder(tree.roots):
        visitor(node)


def descendants(node: Node, kind: Optional[NodeKind] = None) -> Iterator[Node]:
    """
    Pre-order descendants of node, optionally restricted to one kind.

    Example:
        descendants(class_node, NodeKind.METHOD_DECL)  # all nested methods
    """
    for child in _preorder(node.children):
        if kind is None or child.kind == kind:
            yield child


def descendants_in_body(method: MethodDecl, kind: NodeKind) -> List[Node]:
    """
    Descendants of a method of one kind whose span intersects its body.

    Intersection, not containment: a node that only touches the body
    span at one end is included. Methods without a body yield nothing.
    """
    if method.body is None:
        return []

    return [
        node for node in descendants(method, kind)
        if node.span.intersects_with(method.body)
    ]
