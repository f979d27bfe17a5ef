"""Failure reporting for the scanner, parsers and printer."""

from enum import Enum
from typing import TypeAlias

Position: TypeAlias = int


class ErrorKind(Enum):
    """
    Classifies why a document was rejected.

    Every failure surfaces as a single exception type; the kind lets callers
    and tests tell the individual conditions apart without parsing messages.
    """

    UNEXPECTED_TOKEN = "unexpected_token"
    UNEXPECTED_END = "unexpected_end"
    EXTRA_DATA = "extra_data"
    EXPECTED_DIGIT = "expected_digit"
    LEADING_ZERO = "leading_zero"
    INVALID_NUMBER = "invalid_number"
    NUMBER_TOO_LARGE = "number_too_large"
    INVALID_ESCAPE = "invalid_escape"
    INVALID_HEX = "invalid_hex"
    UNTERMINATED_STRING = "unterminated_string"
    INVALID_CONTROL_CHARACTER = "invalid_control_character"
    EXPECTED_COMMA_OR_CLOSE_BRACKET = "expected_comma_or_close_bracket"
    UNEXPECTED_CHARACTER_IN_OBJECT = "unexpected_character_in_object"
    EXPECTED_PROPERTY_NAME = "expected_property_name"
    EXPECTED_COLON = "expected_colon"
    TRAILING_COMMA = "trailing_comma"
    EXPECTED_BOOLEAN_LITERAL = "expected_boolean_literal"
    EXPECTED_NULL_LITERAL = "expected_null_literal"
    MALFORMED_UTF8 = "malformed_utf8"
    MALFORMED_BOM = "malformed_bom"
    MAX_DEPTH_EXCEEDED = "max_depth_exceeded"


class InvalidJSON(ValueError):
    """
    Handles JSON parsing failures with position information.

    The scanner never holds the whole document, so line and column are
    tracked while reading and handed over here instead of being recomputed
    from the source text.
    """

    def __init__(
        self,
        msg: str,
        kind: ErrorKind = ErrorKind.UNEXPECTED_TOKEN,
        pos: Position = 0,
        lineno: int = 1,
        colno: int | None = None,
    ) -> None:
        if not isinstance(msg, str):
            raise TypeError("msg must be a string")
        if not isinstance(pos, int) or pos < 0:
            raise ValueError("pos must be a non-negative integer")

        self.msg = msg
        self.kind = kind
        self.pos = pos
        self.lineno = lineno
        self.colno = pos + 1 if colno is None else colno

        super().__init__(f"{msg} at line {self.lineno}, column {self.colno}")


class MaxDepthExceeded(InvalidJSON):
    """Raised when containers nest deeper than the configured maximum."""

    def __init__(
        self,
        msg: str,
        pos: Position = 0,
        lineno: int = 1,
        colno: int | None = None,
    ) -> None:
        super().__init__(
            msg, ErrorKind.MAX_DEPTH_EXCEEDED, pos, lineno, colno
        )
