"""Generic depth-first walk over a tree-sitter tree."""

from __future__ import annotations

from typing import Callable, Mapping

from tree_sitter import Node

Visitor = Callable[[Node], None]

# Opening constructs only: closing tags, text and comments are never visited.
OPENING_ELEMENT_TYPES = ("jsx_opening_element", "jsx_self_closing_element")


def walk(root: Node, visitors: Mapping[str, Visitor]) -> None:
    """Visit *root* and its descendants in document order.

    *visitors* maps a node type to the callback run for nodes of that
    type; other nodes are traversed without a callback.
    """
    stack = [root]
    while stack:
        node = stack.pop()
        visit = visitors.get(node.type)
        if visit is not None:
            visit(node)
        stack.extend(reversed(node.children))
