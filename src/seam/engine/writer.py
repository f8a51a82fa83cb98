"""Write a class attribute onto located elements."""

from __future__ import annotations

import json
import logging

from seam.engine.locator import locate
from seam.engine.reader import DEFAULT_ATTRIBUTE
from seam.model import Element, SourceTree
from seam.parser.expression import ExpressionShape, try_parse_expression

__all__ = ["apply_class_value", "render_class_value", "render_literal", "write_class_attribute"]

logger = logging.getLogger(__name__)


def render_literal(text: str) -> str:
    """Render *text* as a JSX attribute literal.

    JSX attribute strings have no escape sequences, so the quote character
    is chosen to fit; text holding both quote kinds goes into an expression
    container as a JavaScript string.
    """
    if '"' not in text:
        return f'"{text}"'
    if "'" not in text:
        return f"'{text}'"
    return "{" + json.dumps(text, ensure_ascii=False) + "}"


def render_class_value(new_value: str, dialect: str = "tsx") -> str:
    """Turn a caller-supplied value into attribute value source text."""
    parsed = try_parse_expression(new_value, dialect)
    if parsed.shape is ExpressionShape.TERNARY:
        # A trailing `//` comment would swallow a brace on the same line.
        closing = "\n}" if parsed.ends_in_line_comment else "}"
        return "{" + parsed.text + closing
    if parsed.shape is ExpressionShape.STRING and parsed.value is not None:
        return render_literal(parsed.value)
    if parsed.shape is ExpressionShape.INVALID:
        logger.debug("Storing %r as a literal: %s", new_value, parsed.error)
    return render_literal(new_value)


def apply_class_value(
    tree: SourceTree,
    element: Element,
    rendered: str,
    attribute: str = DEFAULT_ATTRIBUTE,
) -> None:
    """Record the edit that gives *element* the rendered attribute value."""
    attr = element.find_attribute(attribute)
    if attr is not None and attr.value_start is not None and attr.value_end is not None:
        tree.add_edit(attr.value_start, attr.value_end, rendered)
    elif attr is not None:
        # `<input className>` gains a value right after the name.
        tree.add_edit(attr.name_end, attr.name_end, "=" + rendered)
    else:
        if element.multiline_attributes:
            separator = "\n" + tree.line_indent(element.attributes[-1].start)
        else:
            separator = " "
        tree.add_edit(
            element.insert_at,
            element.insert_at,
            f"{separator}{attribute}={rendered}",
        )


def write_class_attribute(
    tree: SourceTree,
    tag_name: str,
    new_value: str,
    ordinal: int | None = None,
    attribute: str = DEFAULT_ATTRIBUTE,
) -> bool:
    """Set *attribute* to *new_value* on the addressed element(s).

    Without an ordinal every element named *tag_name* is updated. Returns
    True when the tree was mutated, False when nothing matched.
    """
    elements = locate(tree, tag_name, ordinal)
    if not elements:
        logger.debug("No <%s> at ordinal %s; nothing to update", tag_name, ordinal)
        return False
    if ordinal is None and len(elements) > 1:
        logger.warning(
            "No ordinal given for <%s>; updating all %d occurrences",
            tag_name,
            len(elements),
        )

    rendered = render_class_value(new_value, tree.dialect)
    for element in elements:
        apply_class_value(tree, element, rendered, attribute)
    return True
