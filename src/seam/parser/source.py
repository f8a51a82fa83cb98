"""Tree-sitter front end: parse JSX/TSX source text into a SourceTree."""

from __future__ import annotations

from functools import lru_cache
from pathlib import PurePath

import tree_sitter_typescript
from tree_sitter import Language, Node, Parser

from seam.model.tree import SourceTree
from seam.parser.errors import ParseError

__all__ = ["DIALECTS", "dialect_for_path", "parse_source"]

# "tsx" covers .jsx/.tsx/.js; plain .ts files need the grammar without JSX so
# that `<T>value` casts parse.
DIALECTS: dict[str, object] = {
    "tsx": tree_sitter_typescript.language_tsx,
    "typescript": tree_sitter_typescript.language_typescript,
}

_TYPESCRIPT_SUFFIXES = {".ts", ".mts", ".cts"}


def dialect_for_path(path: str | PurePath) -> str:
    """Pick the grammar dialect for a source file based on its suffix."""
    if PurePath(path).suffix.lower() in _TYPESCRIPT_SUFFIXES:
        return "typescript"
    return "tsx"


@lru_cache(maxsize=None)
def _language_for(dialect: str) -> Language:
    try:
        factory = DIALECTS[dialect]
    except KeyError:
        raise ValueError(
            f"Unknown dialect {dialect!r} (expected one of {sorted(DIALECTS)})"
        ) from None
    return Language(factory())  # type: ignore[operator]


def _first_problem(root: Node) -> Node | None:
    """Return the first ERROR or MISSING node in document order."""
    stack = [root]
    while stack:
        node = stack.pop()
        if node.is_error or node.is_missing:
            return node
        if node.has_error:
            stack.extend(reversed(node.children))
    return None


def _describe(node: Node, data: bytes) -> str:
    line = node.start_point[0] + 1
    column = node.start_point[1] + 1
    if node.is_missing:
        return f"Missing {node.type!r} at line {line}, column {column}"
    snippet = data[node.start_byte:node.end_byte].decode("utf-8", "replace")
    snippet = snippet.splitlines()[0] if snippet.strip() else snippet
    if len(snippet) > 40:
        snippet = snippet[:40] + "..."
    return f"Unexpected {snippet!r} at line {line}, column {column}"


def parse_source(source: str, dialect: str = "tsx") -> SourceTree:
    """Parse a source string into a SourceTree.

    Raises ParseError on the first syntax problem; there is no partial parse.
    """
    data = source.encode("utf-8")
    # Parsers hold per-parse state; languages are safe to share.
    tree = Parser(_language_for(dialect)).parse(data)
    root = tree.root_node
    if root.has_error:
        problem = _first_problem(root) or root
        raise ParseError(
            _describe(problem, data),
            line=problem.start_point[0] + 1,
            column=problem.start_point[1] + 1,
        )
    return SourceTree(source=source, data=data, tree=tree, dialect=dialect)
