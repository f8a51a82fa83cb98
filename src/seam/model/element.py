"""Element and Attribute views over tree-sitter JSX nodes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from tree_sitter import Node


class ValueKind(Enum):
    """What sits on the right of `name=` in a JSX attribute."""

    ABSENT = "absent"  # <input disabled>
    LITERAL = "literal"  # className="a b"
    EXPRESSION = "expression"  # className={cond ? 'a' : 'b'}
    ELEMENT = "element"  # icon=<Icon />
    SPREAD = "spread"  # {...props}


@dataclass
class Attribute:
    """One entry in an element's attribute list.

    Offsets are byte offsets into the original source. ``name`` is None for
    spread attributes, which never match a lookup by name.
    """

    name: str | None
    kind: ValueKind
    start: int
    end: int
    name_end: int
    value_start: int | None = None
    value_end: int | None = None
    value_node: Node | None = field(default=None, repr=False, compare=False)
    line: int = 0

    @property
    def has_value(self) -> bool:
        return self.value_start is not None


@dataclass
class Element:
    """One opening construct (`<Tag ...>` or `<Tag ... />`).

    Attributes:
        tag_name: Full element name as written (`div`, `Card`, `Motion.div`).
        ordinal: Zero-based position among elements with the same tag name.
        self_closing: True for `<Tag />`.
        start: Byte offset of the opening `<`.
        end: Byte offset just past the closing `>` of the opening construct.
        insert_at: Byte offset where a new attribute is appended.
        line: 1-based line of the opening `<`.
        attributes: Attribute list in source order.
    """

    tag_name: str
    ordinal: int
    self_closing: bool
    start: int
    end: int
    insert_at: int
    line: int
    attributes: list[Attribute] = field(default_factory=list)
    name_line: int = 0
    node: Node | None = field(default=None, repr=False, compare=False)

    def find_attribute(self, name: str) -> Attribute | None:
        """Return the first attribute called *name* (case-sensitive)."""
        for attr in self.attributes:
            if attr.name == name:
                return attr
        return None

    @property
    def multiline_attributes(self) -> bool:
        """True when attributes start on lines below the tag name."""
        return bool(self.attributes) and self.attributes[-1].line > self.name_line
