"""Locate JSX elements by tag name and ordinal."""

from __future__ import annotations

from collections import Counter

from tree_sitter import Node

from seam.engine.walker import OPENING_ELEMENT_TYPES, walk
from seam.model import Attribute, Element, SourceTree, ValueKind

__all__ = ["count_elements", "locate", "outline"]

_VALUE_KINDS = {
    "string": ValueKind.LITERAL,
    "jsx_expression": ValueKind.EXPRESSION,
    "jsx_element": ValueKind.ELEMENT,
    "jsx_self_closing_element": ValueKind.ELEMENT,
    "jsx_fragment": ValueKind.ELEMENT,
}


def _significant_children(node: Node) -> list[Node]:
    return [c for c in node.named_children if c.type != "comment"]


def _build_attribute(tree: SourceTree, node: Node) -> Attribute:
    line = node.start_point[0] + 1
    if node.type == "jsx_expression":
        # {...props}
        return Attribute(
            name=None,
            kind=ValueKind.SPREAD,
            start=node.start_byte,
            end=node.end_byte,
            name_end=node.start_byte,
            line=line,
        )

    children = _significant_children(node)
    name_node = children[0]
    value_node = children[1] if len(children) > 1 else None
    if value_node is None:
        return Attribute(
            name=tree.node_text(name_node),
            kind=ValueKind.ABSENT,
            start=node.start_byte,
            end=node.end_byte,
            name_end=name_node.end_byte,
            line=line,
        )
    return Attribute(
        name=tree.node_text(name_node),
        kind=_VALUE_KINDS.get(value_node.type, ValueKind.EXPRESSION),
        start=node.start_byte,
        end=node.end_byte,
        name_end=name_node.end_byte,
        value_start=value_node.start_byte,
        value_end=value_node.end_byte,
        value_node=value_node,
        line=line,
    )


def _build_element(
    tree: SourceTree, node: Node, name_node: Node, ordinal: int
) -> Element:
    attribute_nodes = node.children_by_field_name("attribute")
    # New attributes go after the last attribute, the type arguments or the
    # name; never after a trailing comment.
    anchors = [name_node, *node.children_by_field_name("type_arguments"), *attribute_nodes]
    return Element(
        tag_name=tree.node_text(name_node),
        ordinal=ordinal,
        self_closing=node.type == "jsx_self_closing_element",
        start=node.start_byte,
        end=node.end_byte,
        insert_at=max(anchor.end_byte for anchor in anchors),
        line=node.start_point[0] + 1,
        name_line=name_node.start_point[0] + 1,
        attributes=[_build_attribute(tree, a) for a in attribute_nodes],
        node=node,
    )


def locate(tree: SourceTree, tag_name: str, ordinal: int | None = None) -> list[Element]:
    """Find elements named *tag_name* in document order.

    With an ordinal, at most the one element whose running count equals it
    is returned; without one, every match is returned. An empty list means
    not found.
    """
    found: list[Element] = []
    seen = 0

    def visit(node: Node) -> None:
        nonlocal seen
        name_node = node.child_by_field_name("name")
        if name_node is None or tree.node_text(name_node) != tag_name:
            return
        current = seen
        seen += 1
        if ordinal is not None and current != ordinal:
            return
        found.append(_build_element(tree, node, name_node, current))

    walk(tree.root, {kind: visit for kind in OPENING_ELEMENT_TYPES})
    return found


def count_elements(tree: SourceTree, tag_name: str) -> int:
    """Number of elements named *tag_name* in the file."""
    return len(locate(tree, tag_name))


def outline(tree: SourceTree) -> list[Element]:
    """Every named element in document order, each with its per-tag ordinal."""
    elements: list[Element] = []
    seen: Counter[str] = Counter()

    def visit(node: Node) -> None:
        name_node = node.child_by_field_name("name")
        if name_node is None:
            return
        tag_name = tree.node_text(name_node)
        elements.append(_build_element(tree, node, name_node, seen[tag_name]))
        seen[tag_name] += 1

    walk(tree.root, {kind: visit for kind in OPENING_ELEMENT_TYPES})
    return elements
