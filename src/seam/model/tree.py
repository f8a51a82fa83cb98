"""SourceTree: one parsed file plus the edits pending against it."""

from __future__ import annotations

from dataclasses import dataclass, field

from tree_sitter import Node, Tree


@dataclass(frozen=True)
class Edit:
    """Replace bytes [start, end) of the original source with *text*.

    An insertion is an edit with start == end.
    """

    start: int
    end: int
    text: str

    def __post_init__(self) -> None:
        if self.start < 0 or self.end < self.start:
            raise ValueError(f"Invalid edit span [{self.start}, {self.end})")


@dataclass
class SourceTree:
    """A parsed source file.

    Built fresh for every operation and discarded after printing. The
    tree-sitter tree itself is never modified; mutations are recorded as
    byte-range edits over the original text so that everything outside
    them prints back unchanged.
    """

    source: str
    data: bytes
    tree: Tree
    dialect: str = "tsx"
    edits: list[Edit] = field(default_factory=list)

    @property
    def root(self) -> Node:
        return self.tree.root_node

    @property
    def mutated(self) -> bool:
        return bool(self.edits)

    def text(self, start: int, end: int) -> str:
        """Original source between two byte offsets."""
        return self.data[start:end].decode("utf-8")

    def node_text(self, node: Node) -> str:
        return self.text(node.start_byte, node.end_byte)

    def add_edit(self, start: int, end: int, text: str) -> None:
        self.edits.append(Edit(start, end, text))

    def line_indent(self, offset: int) -> str:
        """Leading whitespace of the line containing byte *offset*."""
        line_start = self.data.rfind(b"\n", 0, offset) + 1
        line = self.data[line_start:offset]
        return line[: len(line) - len(line.lstrip(b" \t"))].decode("utf-8")
