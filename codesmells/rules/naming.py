"""
Qualified file name construction.

Not a smell rule: it relies on the walker reaching a namespace before
the classes nested in it. The first namespace names the file; every
class visited afterwards appends ".<identifier>".
"""
from . import RuleContext
from ..syntax import ClassDecl, NamespaceDecl


def enter_namespace(node: NamespaceDecl, context: RuleContext) -> None:
    if not context.name:
        context.name = node.name


def enter_class(node: ClassDecl, context: RuleContext) -> None:
    # Classes outside any namespace leave the name empty
    if context.name:
        context.name += f".{node.identifier}"
