"""Tests for locating elements by tag name and ordinal."""

from pathlib import Path

import pytest

from seam.engine import count_elements, locate, outline
from seam.model import SourceTree, ValueKind
from seam.parser import parse_source

FIXTURES = Path(__file__).parent.parent / "fixtures"

THREE_DIVS = """\
const grid = (
  <section>
    <Div className="one" />
    <Div className="two" />
    <Div className="three" />
  </section>
);
"""


@pytest.fixture()
def board() -> SourceTree:
    return parse_source((FIXTURES / "TaskBoard.tsx").read_text(encoding="utf-8"))


# ---------------------------------------------------------------------------
# Matching
# ---------------------------------------------------------------------------


class TestLocate:
    def test_single_match(self, board: SourceTree) -> None:
        found = locate(board, "h1")
        assert len(found) == 1
        assert found[0].tag_name == "h1"
        assert found[0].ordinal == 0
        assert found[0].line == 17

    def test_ordinal_selects_one(self) -> None:
        tree = parse_source(THREE_DIVS)
        found = locate(tree, "Div", 1)
        assert len(found) == 1
        assert found[0].ordinal == 1
        assert found[0].line == 4

    def test_no_ordinal_returns_all_in_document_order(self) -> None:
        tree = parse_source(THREE_DIVS)
        found = locate(tree, "Div")
        assert [e.ordinal for e in found] == [0, 1, 2]
        assert [e.line for e in found] == [3, 4, 5]

    def test_case_sensitive(self) -> None:
        tree = parse_source(THREE_DIVS)
        assert locate(tree, "div") == []

    def test_missing_tag(self, board: SourceTree) -> None:
        assert locate(board, "NonexistentTag") == []

    def test_ordinal_out_of_range(self) -> None:
        tree = parse_source(THREE_DIVS)
        assert locate(tree, "Div", 3) == []

    def test_negative_ordinal(self) -> None:
        tree = parse_source(THREE_DIVS)
        assert locate(tree, "Div", -1) == []

    def test_closing_tags_are_not_counted(self) -> None:
        tree = parse_source("const a = <b><b>x</b></b>;\n")
        assert count_elements(tree, "b") == 2

    def test_member_expression_tag(self) -> None:
        tree = parse_source('const a = <Motion.div className="m" />;\n')
        found = locate(tree, "Motion.div")
        assert len(found) == 1
        assert found[0].self_closing

    def test_fragments_are_skipped(self) -> None:
        tree = parse_source('const a = <><p className="x" /></>;\n')
        assert count_elements(tree, "p") == 1

    def test_elements_inside_attribute_values_are_found(self) -> None:
        tree = parse_source('const a = <Card icon={<Icon className="i" />} />;\n')
        assert count_elements(tree, "Icon") == 1

    def test_each_call_starts_counting_from_zero(self) -> None:
        tree = parse_source(THREE_DIVS)
        assert locate(tree, "Div", 0)[0].line == 3
        assert locate(tree, "Div", 0)[0].line == 3


# ---------------------------------------------------------------------------
# Element shape
# ---------------------------------------------------------------------------


class TestElementShape:
    def test_attributes_in_order(self, board: SourceTree) -> None:
        (button,) = locate(board, "button")
        assert [a.name for a in button.attributes] == ["type", "onClick", "className"]
        assert button.multiline_attributes

    def test_attribute_kinds(self) -> None:
        tree = parse_source(
            'const a = <input disabled {...rest} id="x" value={v} icon=<I /> />;\n'
        )
        (element,) = locate(tree, "input")
        kinds = [a.kind for a in element.attributes]
        assert kinds == [
            ValueKind.ABSENT,
            ValueKind.SPREAD,
            ValueKind.LITERAL,
            ValueKind.EXPRESSION,
            ValueKind.ELEMENT,
        ]
        assert element.attributes[1].name is None

    def test_find_attribute(self, board: SourceTree) -> None:
        (span,) = locate(board, "span")
        assert span.find_attribute("id") is not None
        assert span.find_attribute("className") is None
        assert span.find_attribute("ID") is None

    def test_insert_point_follows_last_attribute(self) -> None:
        source = 'const a = <span id="x" />;\n'
        tree = parse_source(source)
        (span,) = locate(tree, "span")
        assert source.encode()[: span.insert_at].endswith(b'id="x"')

    def test_insert_point_without_attributes(self) -> None:
        source = "const a = <p>text</p>;\n"
        tree = parse_source(source)
        (p,) = locate(tree, "p")
        assert source.encode()[: p.insert_at].endswith(b"<p")
        assert not p.multiline_attributes


# ---------------------------------------------------------------------------
# Outline
# ---------------------------------------------------------------------------


class TestOutline:
    def test_per_tag_ordinals(self) -> None:
        tree = parse_source(THREE_DIVS)
        addresses = [(e.tag_name, e.ordinal) for e in outline(tree)]
        assert addresses == [("section", 0), ("Div", 0), ("Div", 1), ("Div", 2)]

    def test_fixture_outline(self, board: SourceTree) -> None:
        tags = [e.tag_name for e in outline(board)]
        assert tags == ["main", "h1", "p", "button", "ul", "li", "span"]
