from seam.engine.locator import count_elements, locate, outline
from seam.engine.operations import (
    get_class_expression,
    read_all_class_expressions,
    read_class_expression,
    update_class,
)
from seam.engine.printer import print_span, print_tree
from seam.engine.reader import DEFAULT_ATTRIBUTE, read_attribute_value, read_class_attribute
from seam.engine.walker import walk
from seam.engine.writer import render_class_value, render_literal, write_class_attribute

__all__ = [
    "DEFAULT_ATTRIBUTE",
    "count_elements",
    "get_class_expression",
    "locate",
    "outline",
    "print_span",
    "print_tree",
    "read_all_class_expressions",
    "read_attribute_value",
    "read_class_attribute",
    "read_class_expression",
    "render_class_value",
    "render_literal",
    "update_class",
    "walk",
    "write_class_attribute",
]
