"""Seam: edit JSX/TSX className attributes in place, preserving the source."""
from __future__ import annotations

__version__ = "0.1.0"

from seam.engine import (  # noqa: E402
    get_class_expression,
    read_all_class_expressions,
    read_class_expression,
    update_class,
)
from seam.parser import ParseError, dialect_for_path, parse_source  # noqa: E402

__all__ = [
    "ParseError",
    "__version__",
    "dialect_for_path",
    "get_class_expression",
    "parse_source",
    "read_all_class_expressions",
    "read_class_expression",
    "update_class",
]
