"""Print a SourceTree back to text.

Untouched regions come straight from the original source, so everything
outside an edited span is byte-identical to the input.
"""

from __future__ import annotations

import logging

from seam.model import Edit, SourceTree

__all__ = ["print_span", "print_tree"]

logger = logging.getLogger(__name__)


def _ordered(edits: list[Edit]) -> list[Edit]:
    # Stable sort keeps insertions at the same offset in the order recorded.
    return sorted(edits, key=lambda e: (e.start, e.end))


def print_span(tree: SourceTree, start: int, end: int) -> str:
    """Print bytes [start, end) of the tree with pending edits applied.

    Edits that start inside a span already replaced by an earlier edit are
    dropped: the outer replacement wins.
    """
    out: list[bytes] = []
    cursor = start
    for edit in _ordered(tree.edits):
        if edit.start < start or edit.end > end:
            continue
        if edit.start < cursor:
            logger.debug(
                "Dropping edit at [%d, %d): inside an earlier replacement",
                edit.start,
                edit.end,
            )
            continue
        out.append(tree.data[cursor:edit.start])
        out.append(edit.text.encode("utf-8"))
        cursor = edit.end
    out.append(tree.data[cursor:end])
    return b"".join(out).decode("utf-8")


def print_tree(tree: SourceTree) -> str:
    """Print the whole file."""
    if not tree.mutated:
        return tree.source
    return print_span(tree, 0, len(tree.data))
