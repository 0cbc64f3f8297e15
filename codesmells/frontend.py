"""
C# frontend: source discovery and parsing.

Parses C# with tree-sitter and converts the concrete syntax tree into
the node model the rules consume. Only named tree-sitter nodes are kept;
punctuation and keywords are dropped. Spans are byte offsets.
"""
import codecs
import logging
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import tree_sitter_c_sharp as tscsharp
from tree_sitter import Language, Parser
from tree_sitter import Node as TSNode

from .exceptions import ParseError
from .syntax import (
    Assignment,
    ClassDecl,
    ExpressionStatement,
    FieldDecl,
    Literal,
    LiteralKind,
    MethodDecl,
    NamespaceDecl,
    Node,
    ParameterList,
    ReturnStatement,
    SourceText,
    Span,
    Statement,
    SyntaxTree,
)

logger = logging.getLogger(__name__)

CSHARP_LANGUAGE = Language(tscsharp.language())

SOURCE_SUFFIX = ".cs"

# Build output directories
_SKIPPED_DIRS = {"bin", "obj"}

_NAMESPACE_TYPES = {"namespace_declaration", "file_scoped_namespace_declaration"}

_PARAMETER_SKIPPED = {"(", ")", "comment"}

_LITERAL_KINDS: Dict[str, LiteralKind] = {
    "integer_literal":         LiteralKind.NUMERIC,
    "real_literal":            LiteralKind.NUMERIC,
    "character_literal":       LiteralKind.CHARACTER,
    "string_literal":          LiteralKind.STRING,
    "verbatim_string_literal": LiteralKind.STRING,
    "raw_string_literal":      LiteralKind.STRING,
    "boolean_literal":         LiteralKind.BOOLEAN,
    "null_literal":            LiteralKind.NULL,
}


# Discovery

def discover_sources(root: str | Path) -> List[Path]:
    """
    Find C# source files under root, sorted by path.

    A root that is itself a file is returned as the only source.
    Hidden directories and bin/obj build output are skipped.
    """
    root = Path(root)
    if root.is_file():
        return [root]

    sources = []
    for path in root.rglob(f"*{SOURCE_SUFFIX}"):
        directories = path.relative_to(root).parts[:-1]
        if any(part.startswith(".") or part in _SKIPPED_DIRS for part in directories):
            continue
        if path.is_file():
            logger.debug("Found source file %s", path)
            sources.append(path)

    return sorted(sources)


# Conversion helpers

def _span(node: TSNode) -> Span:
    return Span(node.start_byte, node.end_byte)


def _field(node: TSNode, *names: str) -> Optional[TSNode]:
    """First child found under any of the field names (grammar versions differ)."""
    for name in names:
        child = node.child_by_field_name(name)
        if child is not None:
            return child
    return None


def _first_leaf(node: TSNode) -> TSNode:
    while node.children:
        node = node.children[0]
    return node


def _named_child_of_type(node: TSNode, *types: str) -> Optional[TSNode]:
    for child in node.named_children:
        if child.type in types:
            return child
    return None


def _first_error(root: TSNode) -> Optional[TSNode]:
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == "ERROR" or node.is_missing:
            return node
        if node.has_error:
            stack.extend(reversed(node.children))
    return None


class _Converter:
    """Turns a tree-sitter C# tree into syntax Nodes."""

    def __init__(self, data: bytes):
        self.data = data

    def text(self, node: TSNode) -> str:
        return self.data[node.start_byte:node.end_byte].decode("utf-8", errors="replace")

    def convert(self, node: TSNode) -> Node:
        children = tuple(self.convert(child) for child in node.named_children)
        span = _span(node)
        kind = node.type

        if kind in _NAMESPACE_TYPES:
            return NamespaceDecl(span, children, name=self._namespace_name(node))
        if kind == "class_declaration":
            return ClassDecl(span, children, identifier=self._identifier(node))
        if kind == "method_declaration":
            return self._method(node, span, children)
        if kind == "field_declaration":
            return FieldDecl(span, children, variables=self._field_variables(node))
        if kind == "parameter_list":
            return ParameterList(span, children, parameters=self._parameters(node))
        if kind in _LITERAL_KINDS:
            return Literal(span, children, token_kind=_LITERAL_KINDS[kind])
        if kind == "return_statement":
            return ReturnStatement(span, children, expression=self._return_expression(node))
        if kind == "expression_statement":
            return ExpressionStatement(span, children)
        if kind == "assignment_expression":
            return self._assignment(node, span, children)
        if kind == "block" or kind.endswith("_statement"):
            return Statement(span, children)
        return Node(span, children)

    def _namespace_name(self, node: TSNode) -> str:
        name = node.child_by_field_name("name")
        if name is None:
            name = _named_child_of_type(node, "qualified_name", "identifier")
        return self.text(name) if name is not None else ""

    def _identifier(self, node: TSNode) -> str:
        name = node.child_by_field_name("name")
        if name is None:
            name = _named_child_of_type(node, "identifier")
        return self.text(name) if name is not None else ""

    def _method(self, node: TSNode, span: Span, children: Tuple[Node, ...]) -> MethodDecl:
        returns = _field(node, "returns", "type")
        return_type = self.text(_first_leaf(returns)) if returns is not None else ""

        parameter_node = node.child_by_field_name("parameters")
        parameter_list = None
        if parameter_node is not None:
            parameter_span = _span(parameter_node)
            for child in children:
                if isinstance(child, ParameterList) and child.span == parameter_span:
                    parameter_list = child
                    break
        else:
            parameter_list = next(
                (child for child in children if isinstance(child, ParameterList)), None
            )
        if parameter_list is None:
            parameter_list = ParameterList(Span(span.start, span.start), (), parameters=())

        body_node = node.child_by_field_name("body")
        if body_node is None or body_node.type != "block":
            body_node = _named_child_of_type(node, "block")
        body = _span(body_node) if body_node is not None else None

        return MethodDecl(
            span,
            children,
            return_type=return_type,
            parameter_list=parameter_list,
            body=body,
        )

    def _field_variables(self, node: TSNode) -> Tuple[str, ...]:
        declaration = _named_child_of_type(node, "variable_declaration")
        if declaration is None:
            return ()

        variables = []
        for declarator in declaration.named_children:
            if declarator.type != "variable_declarator":
                continue
            variables.append(self._identifier(declarator))
        return tuple(variables)

    def _parameters(self, node: TSNode) -> Tuple[str, ...]:
        """Parameter texts, split on the list's own commas."""
        groups: List[List[TSNode]] = [[]]
        for child in node.children:
            if child.type in _PARAMETER_SKIPPED:
                continue
            if child.type == ",":
                groups.append([])
            else:
                groups[-1].append(child)

        return tuple(
            self.data[group[0].start_byte:group[-1].end_byte].decode("utf-8", errors="replace")
            for group in groups if group
        )

    def _return_expression(self, node: TSNode) -> Optional[Span]:
        for child in node.named_children:
            if child.type != "comment":
                return _span(child)
        return None

    def _assignment(self, node: TSNode, span: Span, children: Tuple[Node, ...]) -> Assignment:
        named = [child for child in node.named_children if child.type != "comment"]
        left = _field(node, "left")
        if left is None:
            left = named[0]
        right = _field(node, "right")
        if right is None:
            right = named[-1]
        operator = _field(node, "operator")
        if operator is None:
            # First token between the operands; comments may sit there too
            operator = next(
                child for child in node.children
                if child.type != "comment"
                and left.end_byte <= child.start_byte < right.start_byte
            )
        return Assignment(span, children, left=_span(left), operator=self.text(operator))


# Parsing

def parse_source(data: bytes, path: str = "<source>") -> SyntaxTree:
    """
    Parse C# source bytes into a SyntaxTree.

    Raises:
        ParseError: If the source has syntax errors or nests too deeply.
    """
    if data.startswith(codecs.BOM_UTF8):
        data = data[len(codecs.BOM_UTF8):]

    parser = Parser(CSHARP_LANGUAGE)
    ts_tree = parser.parse(data)
    root = ts_tree.root_node

    if root.has_error:
        error = _first_error(root)
        line = error.start_point[0] + 1 if error is not None else 0
        raise ParseError(f"Syntax error in {path} at line {line}", path=path)

    converter = _Converter(data)
    try:
        roots = tuple(converter.convert(child) for child in root.named_children)
    except RecursionError as e:
        raise ParseError(f"Syntax tree of {path} is nested too deeply", path=path) from e

    return SyntaxTree(path=path, source=SourceText(data), roots=roots)


def parse_file(path: str | Path) -> SyntaxTree:
    """Read and parse a C# source file."""
    path = Path(path)
    logger.debug("Parsing %s", path)
    return parse_source(path.read_bytes(), str(path))
