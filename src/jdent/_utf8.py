"""
UTF-8 encoding and decoding for string escapes.

Parsed strings are kept as UTF-8 bytes. A \\uXXXX escape is folded into that
byte space with encode_utf8, and on output every multi-byte sequence is
decoded back to a code point and written as an escape, so rendered text is
always 7-bit ASCII.

Surrogate code points are encoded like any other value. The pair
\\ud83d\\ude00 therefore becomes two 3-byte sequences rather than one 4-byte
sequence, and is rendered back as the same two escapes.
"""

import re
from typing import Final

from jdent._errors import ErrorKind
from jdent._errors import InvalidJSON

MAX_CODE_POINT: Final = 0x10FFFF

# (largest code point, lead byte prefix, continuation byte count)
_UTF8_CLASSES: Final = (
    (0x7FF, 0xC0, 1),
    (0xFFFF, 0xE0, 2),
    (MAX_CODE_POINT, 0xF0, 3),
)

# smallest code point each continuation byte count may encode
_MIN_CODE_POINT: Final = {1: 0x80, 2: 0x800, 3: 0x10000}

_SHORT_ESCAPES: Final = {
    ord('"'): '\\"',
    ord("\\"): "\\\\",
    ord("\b"): "\\b",
    ord("\f"): "\\f",
    ord("\n"): "\\n",
    ord("\r"): "\\r",
    ord("\t"): "\\t",
}

# Bytes that cannot be copied to the output verbatim
_NEEDS_ESCAPE: Final = re.compile(rb'[\x00-\x1f"\\\x80-\xff]')


def hex_value(byte: int) -> int:
    """Maps one ASCII hex digit to its value."""
    if 0x30 <= byte <= 0x39:
        return byte - 0x30
    if 0x41 <= byte <= 0x46:
        return byte - 0x41 + 10
    if 0x61 <= byte <= 0x66:
        return byte - 0x61 + 10
    raise InvalidJSON(
        f"Invalid unicode escape sequence: not a hex digit 0x{byte:02x}",
        ErrorKind.INVALID_HEX,
    )


def decode_escape(digits: bytes) -> int:
    """Decodes the four hex digits of a \\uXXXX escape."""
    if len(digits) != 4:
        raise InvalidJSON(
            "Incomplete unicode escape sequence", ErrorKind.INVALID_HEX
        )
    code_point = 0
    for digit in digits:
        code_point = code_point * 16 + hex_value(digit)
    return code_point


def encode_utf8(code_point: int) -> bytes:
    """Encodes a code point in the shortest UTF-8 form."""
    if code_point < 0 or code_point > MAX_CODE_POINT:
        raise ValueError(f"code point out of range: {code_point:#x}")
    if code_point <= 0x7F:
        return bytes((code_point,))

    for limit, prefix, count in _UTF8_CLASSES:
        if code_point <= limit:
            break
    encoded = bytearray((code_point >> 6 * count | prefix,))
    while count:
        count -= 1
        encoded.append(code_point >> 6 * count & 0x3F | 0x80)
    return bytes(encoded)


def decode_utf8(data: bytes, start: int = 0) -> tuple[int, int]:
    """
    Decodes the UTF-8 sequence at data[start].

    Returns:
        Tuple of (code_point, index just past the sequence)
    """
    lead = data[start]
    if lead < 0x80:
        return lead, start + 1
    if lead & 0xE0 == 0xC0:
        count, code_point = 1, lead & 0x1F
    elif lead & 0xF0 == 0xE0:
        count, code_point = 2, lead & 0x0F
    elif lead & 0xF8 == 0xF0:
        count, code_point = 3, lead & 0x07
    else:
        raise InvalidJSON(
            f"Malformed UTF-8 string: invalid lead byte 0x{lead:02x}",
            ErrorKind.MALFORMED_UTF8,
        )

    end = start + 1 + count
    if end > len(data):
        raise InvalidJSON(
            "Malformed UTF-8 string: truncated multibyte sequence",
            ErrorKind.MALFORMED_UTF8,
        )
    for byte in data[start + 1 : end]:
        if byte & 0xC0 != 0x80:
            raise InvalidJSON(
                "Illegal character in multibyte sequence",
                ErrorKind.MALFORMED_UTF8,
            )
        code_point = code_point << 6 | byte & 0x3F
    if code_point < _MIN_CODE_POINT[count] or code_point > MAX_CODE_POINT:
        raise InvalidJSON(
            f"Malformed UTF-8 string: invalid encoding of U+{code_point:04X}",
            ErrorKind.MALFORMED_UTF8,
        )
    return code_point, end


def _escape_code_point(code_point: int) -> str:
    if code_point > 0xFFFF:
        code_point -= 0x10000
        high = 0xD800 | code_point >> 10
        low = 0xDC00 | code_point & 0x3FF
        return f"\\u{high:04x}\\u{low:04x}"
    return f"\\u{code_point:04x}"


def escape_json_string(data: bytes) -> str:
    """Escapes UTF-8 string content for output, without the quotes."""
    result = []
    i = 0
    length = len(data)
    while i < length:
        match = _NEEDS_ESCAPE.search(data, i)
        if match is None:
            result.append(data[i:].decode("ascii"))
            break
        special = match.start()
        if special > i:
            result.append(data[i:special].decode("ascii"))

        byte = data[special]
        if byte in _SHORT_ESCAPES:
            result.append(_SHORT_ESCAPES[byte])
            i = special + 1
        elif byte < 0x20:
            result.append(f"\\u{byte:04x}")
            i = special + 1
        else:
            code_point, i = decode_utf8(data, special)
            result.append(_escape_code_point(code_point))
    return "".join(result)


def decode_string(data: bytes) -> str:
    """Converts parsed string bytes to str, keeping lone surrogates."""
    try:
        return data.decode("utf-8", "surrogatepass")
    except UnicodeDecodeError as e:
        raise InvalidJSON(
            f"Malformed UTF-8 string: {e.reason}", ErrorKind.MALFORMED_UTF8
        ) from e


def encode_string(text: str) -> bytes:
    """Inverse of decode_string."""
    return text.encode("utf-8", "surrogatepass")
