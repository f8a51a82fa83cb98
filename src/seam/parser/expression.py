"""Classify a replacement class value by parsing it as an expression.

The writer never asks callers what kind of value they are sending. A value
that parses as a conditional becomes an expression container, a value that
parses as a single string literal becomes that literal, and everything else
(including text that does not parse at all) is stored verbatim as a literal.

Values are parsed with the same grammar as the file they are written into,
wrapped as a parenthesized expression statement, so anything the language
accepts as an expression is classified the way the file would see it.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from tree_sitter import Node

from seam.parser.errors import ParseError
from seam.parser.source import parse_source

__all__ = ["ExpressionShape", "ParsedExpression", "try_parse_expression"]

# The value sits on its own lines so a trailing `//` comment cannot swallow
# the closing parenthesis.
_OPEN = "(\n"
_CLOSE = "\n);"


class ExpressionShape(Enum):
    """What a replacement value turned out to be."""

    TERNARY = "ternary"
    STRING = "string"
    OTHER = "other"
    INVALID = "invalid"


@dataclass(frozen=True)
class ParsedExpression:
    """Tagged result of try_parse_expression.

    Attributes:
        shape: The classification of the text.
        text: The input with surrounding whitespace removed.
        value: Decoded string value when shape is STRING, else None.
        error: Parser message when shape is INVALID, else None.
        ends_in_line_comment: True when the last line of text holds a `//`
            comment, so anything placed after it on that line is commented out.
    """

    shape: ExpressionShape
    text: str
    value: str | None = None
    error: str | None = None
    ends_in_line_comment: bool = False

    @property
    def is_ternary(self) -> bool:
        return self.shape is ExpressionShape.TERNARY

    @property
    def is_string(self) -> bool:
        return self.shape is ExpressionShape.STRING


_SIMPLE_ESCAPES = {
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "b": "\b",
    "f": "\f",
    "v": "\v",
    "0": "\0",
}

_ESCAPE_RE = re.compile(
    r"\\(?:x([0-9a-fA-F]{2})|u\{([0-9a-fA-F]+)\}|u([0-9a-fA-F]{4})|(\r\n|[\s\S]))"
)


def _unescape(match: re.Match[str]) -> str:
    hex2, braced, hex4, char = match.groups()
    if hex2 or braced or hex4:
        return chr(int(hex2 or braced or hex4, 16))
    if char in ("\n", "\r\n", "\r", "\u2028", "\u2029"):
        return ""  # line continuation
    return _SIMPLE_ESCAPES.get(char, char)


def decode_string_literal(raw: str) -> str:
    """Decode a quoted JavaScript string literal into its value."""
    return _ESCAPE_RE.sub(_unescape, raw[1:-1])


def _code_children(node: Node) -> list[Node]:
    """Named children of *node*, comments excluded."""
    return [child for child in node.named_children if child.type != "comment"]


def _wrapped_expression(root: Node, size: int) -> Node | None:
    """The parenthesized expression spanning the whole wrapper, if any.

    Text such as `a) + (b` also parses once wrapped, but not as one
    parenthesized expression; those come back as None.
    """
    statements = _code_children(root)
    if len(statements) != 1 or statements[0].type != "expression_statement":
        return None
    expressions = _code_children(statements[0])
    if len(expressions) != 1:
        return None
    node = expressions[0]
    if (
        node.type != "parenthesized_expression"
        or node.start_byte != 0
        or node.end_byte != size - 1
    ):
        return None
    return node


def _unwrap(node: Node) -> Node:
    # Parentheses do not change the shape: `(a ? b : c)` is a conditional.
    while node.type == "parenthesized_expression":
        inner = _code_children(node)
        if len(inner) != 1:
            break
        node = inner[0]
    return node


def _line_comment_on_row(root: Node, data: bytes, row: int) -> bool:
    stack = [root]
    while stack:
        node = stack.pop()
        if (
            node.type == "comment"
            and node.start_point[0] == row
            and data[node.start_byte:node.start_byte + 2] == b"//"
        ):
            return True
        stack.extend(node.children)
    return False


def try_parse_expression(text: str, dialect: str = "tsx") -> ParsedExpression:
    """Parse *text* as a standalone expression and report its shape.

    Never raises for bad input: a parse failure comes back as INVALID.
    """
    stripped = text.strip()
    if not stripped:
        return ParsedExpression(ExpressionShape.INVALID, stripped, error="Empty expression")

    try:
        tree = parse_source(_OPEN + stripped + _CLOSE, dialect)
    except ParseError as e:
        return ParsedExpression(ExpressionShape.INVALID, stripped, error=str(e))

    wrapped = _wrapped_expression(tree.root, len(tree.data))
    if wrapped is None:
        return ParsedExpression(
            ExpressionShape.INVALID, stripped, error="Not a single expression"
        )

    node = _unwrap(wrapped)
    if node.type == "ternary_expression":
        last_row = stripped.count("\n") + 1
        return ParsedExpression(
            ExpressionShape.TERNARY,
            stripped,
            ends_in_line_comment=_line_comment_on_row(tree.root, tree.data, last_row),
        )
    if node.type == "string":
        value = decode_string_literal(tree.node_text(node))
        return ParsedExpression(ExpressionShape.STRING, stripped, value=value)
    return ParsedExpression(ExpressionShape.OTHER, stripped)
