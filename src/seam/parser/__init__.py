from seam.parser.errors import ParseError
from seam.parser.expression import ExpressionShape, ParsedExpression, try_parse_expression
from seam.parser.source import DIALECTS, dialect_for_path, parse_source

__all__ = [
    "DIALECTS",
    "ExpressionShape",
    "ParseError",
    "ParsedExpression",
    "dialect_for_path",
    "parse_source",
    "try_parse_expression",
]
