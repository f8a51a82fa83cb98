"""Tests for replacement-value classification."""

import pytest

from seam.parser import ExpressionShape, try_parse_expression
from seam.parser.expression import decode_string_literal


# ---------------------------------------------------------------------------
# Ternaries
# ---------------------------------------------------------------------------


class TestTernary:
    @pytest.mark.parametrize(
        "text",
        [
            "isActive ? 'bg-green-500' : 'bg-red-500'",
            "(isActive ? 'a' : 'b')",
            "a ? b ? 'x' : 'y' : 'z'",
            "user?.isAdmin ? 'admin' : 'user'",
            "cond ? styles.on : styles['off']",
            "count > 0 && !hidden ? `p-${count}` : ''",
            "open ? clsx('menu', { visible: open }) : 'menu'",
            "typeof window !== 'undefined' ? 'a' : 'b'",
            "item instanceof Foo ? 'a' : 'b'",
            "new Date().getDay() > 5 ? 'a' : 'b'",
            "items.some((i) => i.done) ? 'a' : 'b'",
            "(mode as string) === 'x' ? 'a' : 'b'",
            "'k' in obj ? 'a' : 'b'",
            "list?.[0] ? 'a' : 'b'",
            "on ? 'a' : 'b' // toggle",
        ],
    )
    def test_is_ternary(self, text: str) -> None:
        parsed = try_parse_expression(text)
        assert parsed.shape is ExpressionShape.TERNARY
        assert parsed.is_ternary

    def test_text_is_stripped(self) -> None:
        parsed = try_parse_expression("  a ? 'x' : 'y'\n")
        assert parsed.text == "a ? 'x' : 'y'"

    def test_trailing_line_comment_is_flagged(self) -> None:
        parsed = try_parse_expression("on ? 'a' : 'b' // toggle")
        assert parsed.is_ternary
        assert parsed.ends_in_line_comment

    def test_line_comment_on_earlier_line_is_not_flagged(self) -> None:
        parsed = try_parse_expression("on // toggle\n  ? 'a'\n  : 'b'")
        assert parsed.is_ternary
        assert not parsed.ends_in_line_comment

    def test_block_comment_is_not_flagged(self) -> None:
        parsed = try_parse_expression("on ? 'a' : 'b' /* toggle */")
        assert parsed.is_ternary
        assert not parsed.ends_in_line_comment

    def test_typescript_dialect_cast(self) -> None:
        parsed = try_parse_expression("(<string>mode) === 'x' ? 'a' : 'b'", "typescript")
        assert parsed.is_ternary


# ---------------------------------------------------------------------------
# String literals
# ---------------------------------------------------------------------------


class TestStringLiteral:
    def test_single_quoted(self) -> None:
        parsed = try_parse_expression("'text-lg font-bold'")
        assert parsed.shape is ExpressionShape.STRING
        assert parsed.value == "text-lg font-bold"

    def test_double_quoted(self) -> None:
        parsed = try_parse_expression('"p-2"')
        assert parsed.is_string
        assert parsed.value == "p-2"

    def test_escapes_are_decoded(self) -> None:
        parsed = try_parse_expression(r"'it\'s'")
        assert parsed.value == "it's"

    def test_parenthesized_string(self) -> None:
        parsed = try_parse_expression("('m-1')")
        assert parsed.shape is ExpressionShape.STRING
        assert parsed.value == "m-1"

    @pytest.mark.parametrize(
        "raw, value",
        [
            (r"'a\nb'", "a\nb"),
            (r"'\x41'", "A"),
            (r"'é'", "é"),
            (r"'\u{1F600}'", "\U0001F600"),
            (r"'back\\slash'", "back\\slash"),
            ('"say \\"hi\\""', 'say "hi"'),
        ],
    )
    def test_decode(self, raw: str, value: str) -> None:
        assert decode_string_literal(raw) == value


# ---------------------------------------------------------------------------
# Other expressions and invalid input
# ---------------------------------------------------------------------------


class TestOtherShapes:
    @pytest.mark.parametrize(
        "text",
        [
            "p-2",
            "flex",
            "isActive && 'ring-2'",
            "clsx('a', { b: isOn })",
            "`p-${size}`",
            "styles.button",
            "[base, extra].join(' ')",
            "'a' + 'b'",
        ],
    )
    def test_other(self, text: str) -> None:
        parsed = try_parse_expression(text)
        assert parsed.shape is ExpressionShape.OTHER
        assert parsed.value is None

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "   ",
            "flex items-center",
            "text-4xl font-bold",
            "a ? 'x'",
            "w-1/2 md:w-1/3",
            "a) + (b",
            "a); (b",
            "on ? 'a' : 'b' // x\n) + (y",
        ],
    )
    def test_invalid(self, text: str) -> None:
        parsed = try_parse_expression(text)
        assert parsed.shape is ExpressionShape.INVALID
        assert parsed.error
