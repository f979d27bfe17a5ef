"""
Byte-level cursor over a JSON document.

The scanner reads its source in fixed-size chunks, so a document streamed
from a file is never held in memory as a whole. It knows nothing about JSON
structure beyond whitespace, literal text and the one-byte lookahead that
classifies the next value.
"""

from enum import Enum
from typing import IO

from jdent._config import DEFAULT_CHUNK_SIZE
from jdent._errors import ErrorKind
from jdent._errors import InvalidJSON
from jdent._errors import Position

EOF = -1

WHITESPACE = frozenset(b" \t\n\r")
DIGITS = frozenset(b"0123456789")

NEWLINE = ord("\n")
UTF8_BOM = b"\xef\xbb\xbf"


class JsonType(Enum):
    """Kind of the next value, decided by one byte of lookahead."""

    ARRAY = "array"
    OBJECT = "object"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    END_OF_INPUT = "end_of_input"


_TYPE_BY_LEAD = {
    ord("{"): JsonType.OBJECT,
    ord("["): JsonType.ARRAY,
    ord('"'): JsonType.STRING,
    ord("-"): JsonType.NUMBER,
    ord("t"): JsonType.BOOLEAN,
    ord("f"): JsonType.BOOLEAN,
    ord("n"): JsonType.NULL,
    **{digit: JsonType.NUMBER for digit in DIGITS},
}


def describe(byte: int) -> str:
    """Renders a byte for use in an error message."""
    if byte == EOF:
        return "end of input"
    if 0x20 <= byte < 0x7F:
        return repr(chr(byte))
    return f"byte 0x{byte:02x}"


class Scanner:
    """
    Tracks the read cursor over a byte source.

    Accepts either a bytes-like object or a binary stream with a read()
    method. Position, line and column of the cursor are maintained for
    error reporting.
    """

    def __init__(
        self,
        source: bytes | bytearray | memoryview | IO[bytes],
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> None:
        self._stream: IO[bytes] | None
        if isinstance(source, bytes | bytearray | memoryview):
            self._stream = None
            self._buffer = bytes(source)
        elif hasattr(source, "read"):
            self._stream = source
            self._buffer = b""
        else:
            kind = type(source).__name__
            msg = f"source must be bytes or a binary stream, not {kind}"
            raise TypeError(msg)

        self._chunk_size = chunk_size
        self._index = 0
        self.pos: Position = 0
        self.lineno = 1
        self._line_start: Position = 0

    @property
    def colno(self) -> int:
        return self.pos - self._line_start + 1

    def mark(self) -> tuple[Position, int, int]:
        """Returns the current (pos, lineno, colno) for later error reports."""
        return self.pos, self.lineno, self.colno

    def error(
        self,
        msg: str,
        kind: ErrorKind = ErrorKind.UNEXPECTED_TOKEN,
        at: tuple[Position, int, int] | None = None,
    ) -> InvalidJSON:
        """Builds an InvalidJSON located at the cursor or at a saved mark."""
        pos, lineno, colno = at if at is not None else self.mark()
        return InvalidJSON(msg, kind, pos, lineno, colno)

    def relocate(self, exc: InvalidJSON) -> InvalidJSON:
        """Re-anchors an error raised by a position-unaware helper."""
        return self.error(exc.msg, exc.kind)

    def _fill(self) -> bool:
        """Loads the next chunk once the current buffer is exhausted."""
        if self._stream is None:
            return False
        chunk = self._stream.read(self._chunk_size)
        if not chunk:
            self._stream = None
            return False
        if isinstance(chunk, str):
            raise TypeError("stream must be opened in binary mode")
        self._buffer = bytes(chunk)
        self._index = 0
        return True

    def peek(self) -> int:
        """Returns the next byte without consuming it, or EOF."""
        if self._index >= len(self._buffer) and not self._fill():
            return EOF
        return self._buffer[self._index]

    def advance(self) -> int:
        """Consumes and returns the next byte, or EOF."""
        byte = self.peek()
        if byte != EOF:
            self._index += 1
            self.pos += 1
            if byte == NEWLINE:
                self.lineno += 1
                self._line_start = self.pos
        return byte

    def _consume_run(
        self, members: frozenset[int], inside: bool, collect: bool
    ) -> bytes:
        parts = []
        while self._index < len(self._buffer) or self._fill():
            buffer = self._buffer
            start = end = self._index
            length = len(buffer)
            while end < length and (buffer[end] in members) == inside:
                end += 1
            if end > start:
                if collect:
                    parts.append(buffer[start:end])
                self._index = end
                self.pos += end - start
                newline = buffer.rfind(b"\n", start, end)
                if newline != -1:
                    self.lineno += buffer.count(b"\n", start, end)
                    self._line_start = self.pos - (end - newline - 1)
            if end < length:
                break
        return b"".join(parts)

    def read_while(self, members: frozenset[int]) -> bytes:
        """Consumes and returns the longest run of bytes in members."""
        return self._consume_run(members, True, True)

    def read_until(self, stops: frozenset[int]) -> bytes:
        """Consumes and returns bytes up to, not including, any stop byte."""
        return self._consume_run(stops, False, True)

    def skip_whitespace(self) -> int:
        """Skips JSON whitespace; returns the next byte or EOF."""
        self._consume_run(WHITESPACE, True, False)
        return self.peek()

    def at_end(self) -> bool:
        """True when nothing but whitespace remains."""
        return self.skip_whitespace() == EOF

    def expect(
        self,
        expected: int,
        kind: ErrorKind = ErrorKind.UNEXPECTED_TOKEN,
        msg: str | None = None,
    ) -> None:
        """Consumes the given byte after optional whitespace."""
        byte = self.skip_whitespace()
        if byte != expected:
            if msg is None:
                msg = f"Expecting {describe(expected)}, got {describe(byte)}"
            raise self.error(msg, kind)
        self.advance()

    def expect_literal(
        self, text: bytes, kind: ErrorKind = ErrorKind.UNEXPECTED_TOKEN
    ) -> None:
        """Consumes exactly the given text."""
        start = self.mark()
        for expected in text:
            if self.advance() != expected:
                raise self.error(
                    f"Expecting '{text.decode('ascii')}'", kind, at=start
                )

    def peek_type(self) -> JsonType:
        """Classifies the next value without consuming it."""
        byte = self.skip_whitespace()
        if byte == EOF:
            return JsonType.END_OF_INPUT
        kind = _TYPE_BY_LEAD.get(byte)
        if kind is None:
            raise self.error("Expecting value", ErrorKind.UNEXPECTED_TOKEN)
        return kind

    def skip_bom(self) -> None:
        """Skips a UTF-8 byte order mark at the very start of the input."""
        if self.pos != 0 or self.peek() != UTF8_BOM[0]:
            return
        start = self.mark()
        for expected in UTF8_BOM:
            if self.advance() != expected:
                raise self.error(
                    "Malformed byte order mark",
                    ErrorKind.MALFORMED_BOM,
                    at=start,
                )
        self._line_start = self.pos
