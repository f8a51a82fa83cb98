"""Read a class attribute off a located element."""

from __future__ import annotations

from seam.engine.printer import print_span
from seam.model import Attribute, Element, SourceTree, ValueKind

__all__ = ["DEFAULT_ATTRIBUTE", "read_attribute_value", "read_class_attribute"]

DEFAULT_ATTRIBUTE = "className"


def _expression_bounds(attr: Attribute) -> tuple[int, int] | None:
    """Byte span of the expression inside `{ ... }`, braces excluded."""
    node = attr.value_node
    if node is None:
        return None
    children = node.children
    start = children[0].end_byte if children and children[0].type == "{" else node.start_byte
    end = children[-1].start_byte if children and children[-1].type == "}" else node.end_byte
    return start, end


def read_attribute_value(tree: SourceTree, attr: Attribute) -> str | None:
    """Return an attribute's value as text, or None when it has none.

    Literals come back verbatim without their quotes. Expression containers
    come back as the source of the inner expression.
    """
    if attr.value_start is None or attr.value_end is None:
        return None
    if attr.kind is ValueKind.LITERAL:
        return print_span(tree, attr.value_start + 1, attr.value_end - 1)
    if attr.kind is ValueKind.EXPRESSION:
        bounds = _expression_bounds(attr)
        if bounds is None:
            return None
        text = print_span(tree, *bounds).strip()
        return text or None
    if attr.kind is ValueKind.ELEMENT:
        return print_span(tree, attr.value_start, attr.value_end)
    return None


def read_class_attribute(
    tree: SourceTree, element: Element, attribute: str = DEFAULT_ATTRIBUTE
) -> str | None:
    """Return the value of *attribute* on *element*, or None if absent."""
    attr = element.find_attribute(attribute)
    if attr is None:
        return None
    return read_attribute_value(tree, attr)
