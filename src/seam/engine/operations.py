"""The two operations hosts call: read a class value, update a class value.

Each call parses the text it is given from scratch; nothing is cached
between calls because the file may have changed in between.
"""

from __future__ import annotations

import logging

from seam.engine.locator import locate
from seam.engine.printer import print_tree
from seam.engine.reader import DEFAULT_ATTRIBUTE, read_class_attribute
from seam.engine.writer import write_class_attribute
from seam.parser import ParseError, parse_source

__all__ = [
    "get_class_expression",
    "read_all_class_expressions",
    "read_class_expression",
    "update_class",
]

logger = logging.getLogger(__name__)


def read_class_expression(
    source: str,
    tag_name: str,
    ordinal: int | None = None,
    attribute: str = DEFAULT_ATTRIBUTE,
    dialect: str = "tsx",
) -> str | None:
    """Return the class value of the addressed element.

    Raises ParseError when *source* does not parse. Returns None when the
    element or the attribute is missing. Without an ordinal the last
    occurrence in document order answers.
    """
    tree = parse_source(source, dialect)
    elements = locate(tree, tag_name, ordinal)
    if not elements:
        return None
    if ordinal is None and len(elements) > 1:
        logger.warning(
            "No ordinal given for <%s> with %d occurrences; reporting the last",
            tag_name,
            len(elements),
        )
    return read_class_attribute(tree, elements[-1], attribute)


def get_class_expression(
    source: str,
    tag_name: str,
    ordinal: int | None = None,
    attribute: str = DEFAULT_ATTRIBUTE,
    dialect: str = "tsx",
) -> str | None:
    """Like read_class_expression, but a parse failure also yields None."""
    try:
        return read_class_expression(source, tag_name, ordinal, attribute, dialect)
    except ParseError as e:
        logger.error("Could not parse source: %s", e)
        return None


def read_all_class_expressions(
    source: str,
    tag_name: str,
    attribute: str = DEFAULT_ATTRIBUTE,
    dialect: str = "tsx",
) -> list[str | None]:
    """Class value of every element named *tag_name*, in document order."""
    tree = parse_source(source, dialect)
    return [read_class_attribute(tree, e, attribute) for e in locate(tree, tag_name)]


def update_class(
    source: str,
    tag_name: str,
    new_value: str,
    ordinal: int | None = None,
    attribute: str = DEFAULT_ATTRIBUTE,
    dialect: str = "tsx",
) -> str:
    """Return *source* with the addressed element's class value replaced.

    Returns *source* unchanged when no element matches. Raises ParseError
    only when *source* itself does not parse.
    """
    tree = parse_source(source, dialect)
    if not write_class_attribute(tree, tag_name, new_value, ordinal, attribute):
        return source
    return print_tree(tree)
