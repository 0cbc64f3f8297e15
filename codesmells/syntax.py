"""
Syntax model consumed by the smell rules.

A SyntaxTree is an ordered forest of Nodes over a SourceText.
Node kinds form a closed set; every node class carries the attributes
its rules need and nothing else. Spans are byte offsets into the source.
"""
import re
from bisect import bisect_right
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, List, Optional, Tuple

_LINE_BREAK = re.compile(rb"\r\n|\r|\n")


@dataclass(frozen=True)
class Span:
    """Half-open byte range [start, end)."""

    start: int
    end: int

    def intersects_with(self, other: "Span") -> bool:
        """
        True if the spans overlap at all, endpoints included.

        Two spans that merely abut (one ends where the other starts)
        intersect, and so does an empty span touching another.
        """
        return self.start <= other.end and other.start <= self.end


class SourceText:
    """Raw source bytes with line lookup."""

    def __init__(self, data: bytes, encoding: str = "utf-8"):
        self.data = data
        self.encoding = encoding
        self._line_starts = [0] + [m.end() for m in _LINE_BREAK.finditer(data)]

    @classmethod
    def from_text(cls, text: str, encoding: str = "utf-8") -> "SourceText":
        return cls(text.encode(encoding), encoding)

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    def text(self, span: Span) -> str:
        return self.data[span.start:span.end].decode(self.encoding, errors="replace")

    def line_of(self, offset: int) -> int:
        """1-based line number containing the byte offset."""
        return bisect_right(self._line_starts, offset)

    def lines(self, span: Span) -> List[str]:
        """
        Physical lines of the span's text, without line breaks.

        A span ending in a line break yields a final empty line.
        """
        chunk = self.data[span.start:span.end]
        return [
            line.decode(self.encoding, errors="replace")
            for line in _LINE_BREAK.split(chunk)
        ]


class NodeKind(Enum):
    NAMESPACE            = "namespace"
    CLASS_DECL           = "class"
    METHOD_DECL          = "method"
    FIELD_DECL           = "field"
    PARAMETER_LIST       = "parameters"
    LITERAL              = "literal"
    STATEMENT            = "statement"
    RETURN_STATEMENT     = "return"
    EXPRESSION_STATEMENT = "expression_statement"
    ASSIGNMENT           = "assignment"
    OTHER                = "other"  # blocks, types, identifiers, other expressions


class LiteralKind(Enum):
    NUMERIC   = "numeric"
    CHARACTER = "character"
    STRING    = "string"
    BOOLEAN   = "boolean"
    NULL      = "null"


@dataclass(frozen=True, eq=False)
class Node:
    """Base syntax node. Used directly for NodeKind.OTHER."""

    kind: ClassVar[NodeKind] = NodeKind.OTHER

    span: Span
    children: Tuple["Node", ...]


@dataclass(frozen=True, eq=False)
class NamespaceDecl(Node):
    kind: ClassVar[NodeKind] = NodeKind.NAMESPACE

    name: str


@dataclass(frozen=True, eq=False)
class ClassDecl(Node):
    kind: ClassVar[NodeKind] = NodeKind.CLASS_DECL

    identifier: str


@dataclass(frozen=True, eq=False)
class ParameterList(Node):
    kind: ClassVar[NodeKind] = NodeKind.PARAMETER_LIST

    parameters: Tuple[str, ...]

    @property
    def count(self) -> int:
        return len(self.parameters)


@dataclass(frozen=True, eq=False)
class MethodDecl(Node):
    """
    A method declaration.

    body is the span of the block body, or None when the method has no
    block (abstract, interface, extern or expression-bodied members).
    """

    kind: ClassVar[NodeKind] = NodeKind.METHOD_DECL

    return_type: str  # first token of the declared return type
    parameter_list: ParameterList
    body: Optional[Span]

    @property
    def returns_void(self) -> bool:
        return self.return_type == "void"

    @property
    def parameter_count(self) -> int:
        return self.parameter_list.count


@dataclass(frozen=True, eq=False)
class FieldDecl(Node):
    kind: ClassVar[NodeKind] = NodeKind.FIELD_DECL

    variables: Tuple[str, ...]


@dataclass(frozen=True, eq=False)
class Literal(Node):
    kind: ClassVar[NodeKind] = NodeKind.LITERAL

    token_kind: LiteralKind


@dataclass(frozen=True, eq=False)
class Statement(Node):
    kind: ClassVar[NodeKind] = NodeKind.STATEMENT


@dataclass(frozen=True, eq=False)
class ReturnStatement(Node):
    kind: ClassVar[NodeKind] = NodeKind.RETURN_STATEMENT

    expression: Optional[Span]


@dataclass(frozen=True, eq=False)
class ExpressionStatement(Node):
    kind: ClassVar[NodeKind] = NodeKind.EXPRESSION_STATEMENT


@dataclass(frozen=True, eq=False)
class Assignment(Node):
    kind: ClassVar[NodeKind] = NodeKind.ASSIGNMENT

    left: Span
    operator: str

    @property
    def is_simple(self) -> bool:
        return self.operator == "="


@dataclass(frozen=True)
class SyntaxTree:
    """Parsed file: identifier, source and top-level nodes in order."""

    path: str
    source: SourceText
    roots: Tuple[Node, ...]

    def text(self, span: Span) -> str:
        return self.source.text(span)

    def line_of(self, span: Span) -> int:
        """1-based line of the span's start."""
        return self.source.line_of(span.start)
