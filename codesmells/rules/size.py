"""
Method size rule.

A method body longer than METHOD_LINE_COUNT_LIMIT physical lines is
reported, unless it only looks long because of padding: blank lines
and lines holding nothing but braces are noise and do not count.
"""
from typing import Iterable

from . import RuleContext
from ..data_structures import SmellKind
from ..syntax import MethodDecl
from .utils import body_lines

METHOD_LINE_COUNT_LIMIT = 10
BRACKETS_COUNT = 2

_BRACES = frozenset("{}")


def is_empty_line(line: str) -> bool:
    return len(line) == 0


def is_bracket_only(line: str) -> bool:
    """
    Check if a line holds only braces, at most BRACKETS_COUNT of them.

    Matches "{", "}" and "{}" with any indentation.
    Rejects "};", "{ x" and whitespace-only lines.
    """
    stripped = line.strip()
    if not stripped or len(stripped) > BRACKETS_COUNT:
        return False
    return set(stripped) <= _BRACES


def is_valid_line(line: str) -> bool:
    """A line counts toward method size unless it is noise."""
    if is_empty_line(line):
        return False
    if is_bracket_only(line):
        return False
    return True


def count_valid_lines(lines: Iterable[str]) -> int:
    return sum(1 for line in lines if is_valid_line(line))


def check_method_size(node: MethodDecl, context: RuleContext) -> None:
    """Report LongMethod (unlocated) for oversized method bodies."""
    lines = body_lines(node, context.tree)

    if len(lines) <= METHOD_LINE_COUNT_LIMIT:
        return

    if count_valid_lines(lines) < METHOD_LINE_COUNT_LIMIT:
        return

    context.report(SmellKind.LONG_METHOD)
