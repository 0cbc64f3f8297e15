"""
Magic attribute rule.

Numeric, character and string literals are reported unless their exact
source text matches a whitelisted value rendered as C# source. Matching
is textual: `1.0` does not match the whitelisted number 1, whose
rendering is `1`. Boolean and null literals are never checked.
"""
import math
from decimal import Decimal
from typing import Callable, Dict, FrozenSet

from . import RuleContext
from ..config import Whitelists
from ..data_structures import SmellKind
from ..syntax import Literal, LiteralKind

_ESCAPES = {
    "\0": "\\0",
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
}


def format_number(value: float) -> str:
    """
    Culture-invariant rendering of a number.

    Integral values below 1E+15 have no fractional part (1.0 -> "1").
    Others use the shortest round-trip digits, switching to exponent
    notation from 1E+15 upward (1e15 -> "1E+15").
    """
    number = float(value)
    if number.is_integer() and abs(number) < 1e15:
        return str(int(number))

    text = repr(number)
    if math.isfinite(number) and abs(number) >= 1e15 and "e" not in text:
        # repr() only switches to exponent notation at 1e16
        text = format(Decimal(text).normalize(), "E")
    return text.replace("e", "E")


def _escape(char: str, quote: str) -> str:
    if char == quote:
        return "\\" + char
    if char in _ESCAPES:
        return _ESCAPES[char]
    if ord(char) < 0x20:
        return f"\\u{ord(char):04x}"
    return char


def render_character(char: str) -> str:
    """Render a character as a C# character literal: '\\n' -> `'\\n'`."""
    return "'" + _escape(char, "'") + "'"


def render_string(value: str) -> str:
    """Render a string as a regular C# string literal: "" -> `""`."""
    return '"' + "".join(_escape(char, '"') for char in value) + '"'


_RENDERERS: Dict[LiteralKind, Callable[[Whitelists], FrozenSet[str]]] = {
    LiteralKind.NUMERIC:   lambda w: frozenset(format_number(n) for n in w.numbers),
    LiteralKind.CHARACTER: lambda w: frozenset(render_character(c) for c in w.characters),
    LiteralKind.STRING:    lambda w: frozenset(render_string(s) for s in w.strings),
}


def can_be_magic_attribute(node: Literal) -> bool:
    return node.token_kind in _RENDERERS


def is_in_whitelist(node: Literal, context: RuleContext) -> bool:
    rendered = _RENDERERS[node.token_kind](context.whitelists)
    return context.text(node.span) in rendered


def check_literal(node: Literal, context: RuleContext) -> None:
    """Report MagicAttribute at the literal's line."""
    if not can_be_magic_attribute(node):
        return

    if is_in_whitelist(node, context):
        return

    context.report(SmellKind.MAGIC_ATTRIBUTE, context.line_of(node))
