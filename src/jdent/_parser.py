"""
Streaming recursive-descent parsers.

Scalar parsers consume exactly one value from the scanner and return it.
The structural parsers never build a container: parse_array and
parse_object call a visitor once per element or field, and the visitor
decides what the value becomes by consuming it with these same functions.
Memory use is bounded by nesting depth, not document size.
"""

import contextlib
from collections.abc import Callable
from collections.abc import Iterator

from jdent._config import ParseConfig
from jdent._errors import ErrorKind
from jdent._errors import InvalidJSON
from jdent._errors import MaxDepthExceeded
from jdent._number import ExactDecimal
from jdent._number import NumberMode
from jdent._profile import ProfileContext
from jdent._scanner import DIGITS
from jdent._scanner import EOF
from jdent._scanner import JsonType
from jdent._scanner import Scanner
from jdent._scanner import describe
from jdent._utf8 import decode_escape
from jdent._utf8 import encode_utf8

ArrayVisitor = Callable[[int], None]
ObjectVisitor = Callable[[bytes], None]

DEFAULT_CONFIG = ParseConfig()

QUOTE = ord('"')
BACKSLASH = ord("\\")
MINUS = ord("-")
PLUS = ord("+")
ZERO = ord("0")
DOT = ord(".")
COMMA = ord(",")
COLON = ord(":")
OPEN_BRACKET = ord("[")
CLOSE_BRACKET = ord("]")
OPEN_BRACE = ord("{")
CLOSE_BRACE = ord("}")

EXPONENT_MARKERS = frozenset(b"eE")
CONTROL_CHARACTERS = frozenset(range(0x20))

_STRING_STOPS = frozenset((QUOTE, BACKSLASH))
_STRICT_STRING_STOPS = _STRING_STOPS | CONTROL_CHARACTERS

_SIMPLE_ESCAPES = {
    ord('"'): b'"',
    ord("\\"): b"\\",
    ord("/"): b"/",
    ord("b"): b"\b",
    ord("f"): b"\f",
    ord("n"): b"\n",
    ord("r"): b"\r",
    ord("t"): b"\t",
}


def _read_escape(scanner: Scanner, out: bytearray) -> None:
    """Decodes the escape following a backslash into out."""
    byte = scanner.advance()
    escaped = _SIMPLE_ESCAPES.get(byte)
    if escaped is not None:
        out += escaped
        return
    if byte == ord("u"):
        digits = bytearray()
        for _ in range(4):
            digit = scanner.advance()
            if digit == EOF:
                break
            digits.append(digit)
        try:
            code_point = decode_escape(bytes(digits))
        except InvalidJSON as e:
            raise scanner.relocate(e) from e
        # Each escape stands alone; surrogate halves are not paired.
        out += encode_utf8(code_point)
        return
    if byte == EOF:
        raise scanner.error(
            "Unterminated string", ErrorKind.UNTERMINATED_STRING
        )
    raise scanner.error(
        f"Invalid escape sequence: \\{chr(byte)}", ErrorKind.INVALID_ESCAPE
    )


def parse_string(
    scanner: Scanner, config: ParseConfig = DEFAULT_CONFIG
) -> bytes:
    """
    Parses a quoted string and returns its content as UTF-8 bytes.

    Raw bytes are copied through unchanged and only validated when the
    string is printed. With config.strict, raw control characters are
    rejected.
    """
    with ProfileContext("parse_string", scanner):
        scanner.skip_whitespace()
        start = scanner.mark()
        scanner.expect(QUOTE, msg="Expecting string")
        stops = _STRICT_STRING_STOPS if config.strict else _STRING_STOPS

        out = bytearray()
        while True:
            out += scanner.read_until(stops)
            byte = scanner.peek()
            if byte == EOF:
                raise scanner.error(
                    "Unterminated string starting",
                    ErrorKind.UNTERMINATED_STRING,
                    at=start,
                )
            if byte not in _STRING_STOPS:
                raise scanner.error(
                    f"Invalid control character {describe(byte)} in string",
                    ErrorKind.INVALID_CONTROL_CHARACTER,
                )
            scanner.advance()
            if byte == QUOTE:
                return bytes(out)
            _read_escape(scanner, out)


def _digits_to_int(
    digits: bytes, scanner: Scanner, start: tuple[int, int, int]
) -> int:
    try:
        return int(digits)
    except ValueError as e:
        # digit runs beyond sys.get_int_max_str_digits()
        raise scanner.error(
            "Number too large", ErrorKind.NUMBER_TOO_LARGE, at=start
        ) from e


def parse_number(
    scanner: Scanner, config: ParseConfig = DEFAULT_CONFIG
) -> ExactDecimal | int | float:
    """
    Parses a numeric literal according to config.number_mode.

    Digits are accumulated exactly: every digit joins the mantissa and
    every fractional digit lowers the exponent by one. Only FLOAT mode
    rounds, when the exact value is finally converted.
    """
    with ProfileContext("parse_number", scanner):
        negative = scanner.skip_whitespace() == MINUS
        start = scanner.mark()
        if negative:
            scanner.advance()

        first = scanner.peek()
        if first == ZERO:
            scanner.advance()
            digits = b"0"
            if scanner.peek() in DIGITS:
                raise scanner.error(
                    "Leading zeros not allowed",
                    ErrorKind.LEADING_ZERO,
                    at=start,
                )
        elif first in DIGITS:
            digits = scanner.read_while(DIGITS)
        else:
            raise scanner.error(
                f"Expected digit, got {describe(first)}",
                ErrorKind.EXPECTED_DIGIT,
            )

        fraction = b""
        if scanner.peek() == DOT:
            scanner.advance()
            fraction = scanner.read_while(DIGITS)
            if not fraction:
                raise scanner.error(
                    "Invalid decimal number", ErrorKind.INVALID_NUMBER
                )

        exponent = 0
        has_exponent = scanner.peek() in EXPONENT_MARKERS
        if has_exponent:
            scanner.advance()
            sign = scanner.peek()
            if sign in (PLUS, MINUS):
                scanner.advance()
            exponent_digits = scanner.read_while(DIGITS)
            if not exponent_digits:
                raise scanner.error(
                    "Invalid exponent", ErrorKind.INVALID_NUMBER
                )
            exponent = _digits_to_int(exponent_digits, scanner, start)
            if sign == MINUS:
                exponent = -exponent

        if config.number_mode is NumberMode.INTEGER and (
            fraction or has_exponent
        ):
            raise scanner.error(
                "Expected an integer literal",
                ErrorKind.INVALID_NUMBER,
                at=start,
            )

        mantissa = _digits_to_int(digits + fraction, scanner, start)
        if negative:
            mantissa = -mantissa
        value = ExactDecimal(mantissa, exponent - len(fraction))

        if config.number_mode is NumberMode.EXACT:
            return value
        if config.number_mode is NumberMode.INTEGER:
            return mantissa

        result = value.to_float()
        if result in (float("inf"), float("-inf")):
            raise scanner.error(
                "Number out of range for a float",
                ErrorKind.NUMBER_TOO_LARGE,
                at=start,
            )
        return -result if negative and mantissa == 0 else result


def parse_boolean(scanner: Scanner) -> bool:
    """Parses the literal true or false."""
    byte = scanner.skip_whitespace()
    if byte == ord("t"):
        scanner.expect_literal(b"true", ErrorKind.EXPECTED_BOOLEAN_LITERAL)
        return True
    if byte == ord("f"):
        scanner.expect_literal(b"false", ErrorKind.EXPECTED_BOOLEAN_LITERAL)
        return False
    raise scanner.error(
        "Expecting 'true' or 'false'", ErrorKind.EXPECTED_BOOLEAN_LITERAL
    )


def parse_null(scanner: Scanner) -> None:
    """Parses the literal null."""
    scanner.skip_whitespace()
    scanner.expect_literal(b"null", ErrorKind.EXPECTED_NULL_LITERAL)


def _enter_container(
    scanner: Scanner, depth: int, config: ParseConfig
) -> None:
    if depth >= config.max_depth:
        pos, lineno, colno = scanner.mark()
        raise MaxDepthExceeded(
            f"Maximum nesting depth of {config.max_depth} exceeded",
            pos,
            lineno,
            colno,
        )


@contextlib.contextmanager
def recursion_guard(scanner: Scanner) -> Iterator[None]:
    """
    Reports exhaustion of the interpreter stack as MaxDepthExceeded.

    A max_depth above what sys.getrecursionlimit() can hold would otherwise
    surface as a bare RecursionError instead of a rejected document.
    """
    try:
        yield
    except RecursionError as e:
        pos, lineno, colno = scanner.mark()
        raise MaxDepthExceeded(
            "Maximum nesting depth exceeded", pos, lineno, colno
        ) from e


def parse_array(
    scanner: Scanner,
    visitor: ArrayVisitor,
    config: ParseConfig = DEFAULT_CONFIG,
    depth: int = 0,
) -> int:
    """
    Walks an array, calling visitor(index) once per element.

    The visitor must consume exactly one value. Returns the element count.
    """
    scanner.skip_whitespace()
    _enter_container(scanner, depth, config)
    scanner.expect(OPEN_BRACKET)
    if scanner.skip_whitespace() == CLOSE_BRACKET:
        scanner.advance()
        return 0

    index = 0
    while True:
        scanner.skip_whitespace()
        visitor(index)
        index += 1

        byte = scanner.skip_whitespace()
        if byte == CLOSE_BRACKET:
            scanner.advance()
            return index
        if byte != COMMA:
            raise scanner.error(
                f"Expecting ',' or ']', got {describe(byte)}",
                ErrorKind.EXPECTED_COMMA_OR_CLOSE_BRACKET,
            )
        comma = scanner.mark()
        scanner.advance()
        if scanner.skip_whitespace() == CLOSE_BRACKET:
            raise scanner.error(
                "Illegal trailing comma before end of array",
                ErrorKind.TRAILING_COMMA,
                at=comma,
            )


def parse_object(
    scanner: Scanner,
    visitor: ObjectVisitor,
    config: ParseConfig = DEFAULT_CONFIG,
    depth: int = 0,
) -> int:
    """
    Walks an object, calling visitor(name) once per field in source order.

    The name is the field name as UTF-8 bytes; the visitor must consume
    exactly one value. Leading, doubled and trailing commas are rejected.
    Returns the field count.
    """
    scanner.skip_whitespace()
    _enter_container(scanner, depth, config)
    scanner.expect(OPEN_BRACE)
    byte = scanner.skip_whitespace()
    if byte == CLOSE_BRACE:
        scanner.advance()
        return 0

    count = 0
    while True:
        if byte != QUOTE:
            raise scanner.error(
                "Expecting property name enclosed in double quotes",
                ErrorKind.EXPECTED_PROPERTY_NAME,
            )
        name = parse_string(scanner, config)
        scanner.expect(
            COLON, ErrorKind.EXPECTED_COLON, "Expecting ':' delimiter"
        )
        scanner.skip_whitespace()
        visitor(name)
        count += 1

        byte = scanner.skip_whitespace()
        if byte == CLOSE_BRACE:
            scanner.advance()
            return count
        if byte != COMMA:
            raise scanner.error(
                f"Unexpected character {describe(byte)} in object",
                ErrorKind.UNEXPECTED_CHARACTER_IN_OBJECT,
            )
        comma = scanner.mark()
        scanner.advance()
        byte = scanner.skip_whitespace()
        if byte == CLOSE_BRACE:
            raise scanner.error(
                "Illegal trailing comma before end of object",
                ErrorKind.TRAILING_COMMA,
                at=comma,
            )


def expect_value(scanner: Scanner) -> JsonType:
    """Like peek_type, but end of input is an error."""
    kind = scanner.peek_type()
    if kind is JsonType.END_OF_INPUT:
        raise scanner.error("Expecting value", ErrorKind.UNEXPECTED_END)
    return kind


def skip_value(
    scanner: Scanner, config: ParseConfig = DEFAULT_CONFIG, depth: int = 0
) -> None:
    """Parses one value of any type and discards it."""
    kind = expect_value(scanner)

    def skip_member(_: object) -> None:
        skip_value(scanner, config, depth + 1)

    if kind is JsonType.ARRAY:
        parse_array(scanner, skip_member, config, depth)
    elif kind is JsonType.OBJECT:
        parse_object(scanner, skip_member, config, depth)
    elif kind is JsonType.STRING:
        parse_string(scanner, config)
    elif kind is JsonType.NUMBER:
        parse_number(scanner, config)
    elif kind is JsonType.BOOLEAN:
        parse_boolean(scanner)
    else:
        parse_null(scanner)
