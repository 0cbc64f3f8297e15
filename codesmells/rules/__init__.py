"""
Smell rules.

Rules are plain functions: (node, context) -> None

Design principles:
- Each rule consumes one node kind reached by the walker
- Findings are appended to the context, never returned
- Rules are independent; none reads another rule's findings
- Absence (no body, no return statement) disqualifies, it never raises
"""
from dataclasses import dataclass, field
from typing import Callable, List

from ..config import DEFAULT_WHITELISTS, Whitelists
from ..data_structures import UNLOCATED, FileRecord, Finding, SmellKind
from ..syntax import Node, Span, SyntaxTree


@dataclass
class RuleContext:
    """
    Per-file accumulator threaded through one traversal.

    Owned by a single analysis pass; freeze() hands the result off
    as an immutable FileRecord.
    """
    tree: SyntaxTree
    whitelists: Whitelists = DEFAULT_WHITELISTS
    name: str = ""
    findings: List[Finding] = field(default_factory=list)

    def report(self, kind: SmellKind, line: int = UNLOCATED) -> None:
        self.findings.append(Finding(kind=kind, line=line))

    def line_of(self, node: Node) -> int:
        return self.tree.line_of(node.span)

    def text(self, span: Span) -> str:
        return self.tree.text(span)

    def freeze(self) -> FileRecord:
        return FileRecord(
            path=self.tree.path,
            name=self.name,
            findings=tuple(self.findings),
        )


# Rule type signature
Rule = Callable[[Node, RuleContext], None]


from .data_class import check_data_class, is_getter, is_setter
from .literals import check_literal
from .naming import enter_class, enter_namespace
from .parameters import check_parameter_list
from .size import check_method_size

__all__ = [
    'RuleContext',
    'Rule',
    'check_parameter_list',
    'check_method_size',
    'check_literal',
    'check_data_class',
    'is_getter',
    'is_setter',
    'enter_namespace',
    'enter_class',
]
