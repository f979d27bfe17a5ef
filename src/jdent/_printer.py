"""Indented re-serialization of a JSON document as it is parsed."""

import functools
from typing import IO

from jdent._config import MAX_PADDING
from jdent._config import ParseConfig
from jdent._config import RenderConfig
from jdent._errors import ErrorKind
from jdent._errors import InvalidJSON
from jdent._number import format_number
from jdent._parser import expect_value
from jdent._parser import parse_array
from jdent._parser import parse_boolean
from jdent._parser import parse_null
from jdent._parser import parse_number
from jdent._parser import parse_object
from jdent._parser import parse_string
from jdent._parser import recursion_guard
from jdent._profile import ProfileContext
from jdent._scanner import JsonType
from jdent._scanner import Scanner
from jdent._utf8 import escape_json_string


@functools.lru_cache(maxsize=256)
def padding(level: int, width: int, limit: int = MAX_PADDING) -> str:
    """Returns the indentation for a nesting level, capped at limit."""
    return " " * min(level * width, limit)


class PrettyPrinter:
    """
    Re-emits one value from the scanner as indented text.

    Rendering is a pure recursive consumer of the parsers: each nested
    container is one level of recursion and nothing is buffered, so text is
    written to the sink as soon as the corresponding input is read.
    """

    def __init__(
        self,
        scanner: Scanner,
        sink: IO[str],
        parse_config: ParseConfig,
        render_config: RenderConfig,
    ) -> None:
        self.scanner = scanner
        self.parse_config = parse_config
        self.render_config = render_config
        self._write = sink.write

    def _pad(self, level: int) -> str:
        config = self.render_config
        return padding(level, config.indent_width, config.max_padding)

    def _quote(self, data: bytes) -> str:
        try:
            return f'"{escape_json_string(data)}"'
        except InvalidJSON as e:
            raise self.scanner.relocate(e) from e

    def render(self, level: int = 0) -> None:
        """Writes exactly one value found at the cursor."""
        kind = expect_value(self.scanner)
        if kind is JsonType.ARRAY:
            self._render_array(level)
        elif kind is JsonType.OBJECT:
            self._render_object(level)
        elif kind is JsonType.STRING:
            data = parse_string(self.scanner, self.parse_config)
            self._write(self._quote(data))
        elif kind is JsonType.NUMBER:
            self._write(
                format_number(parse_number(self.scanner, self.parse_config))
            )
        elif kind is JsonType.BOOLEAN:
            self._write("true" if parse_boolean(self.scanner) else "false")
        else:
            parse_null(self.scanner)
            self._write("null")

    def _render_array(self, level: int) -> None:
        write = self._write
        inner = self._pad(level + 1)

        def element(index: int) -> None:
            write(",\n" if index else "\n")
            write(inner)
            self.render(level + 1)

        write("[")
        if parse_array(self.scanner, element, self.parse_config, level):
            write("\n")
            write(self._pad(level))
        write("]")

    def _render_object(self, level: int) -> None:
        write = self._write
        inner = self._pad(level + 1)
        written = 0

        def field(name: bytes) -> None:
            nonlocal written
            write(",\n" if written else "\n")
            written += 1
            write(inner)
            write(self._quote(name))
            write(": ")
            self.render(level + 1)

        write("{")
        if parse_object(self.scanner, field, self.parse_config, level):
            write("\n")
            write(self._pad(level))
        write("}")


def render(
    scanner: Scanner,
    sink: IO[str],
    parse_config: ParseConfig,
    render_config: RenderConfig,
) -> None:
    """
    Renders the single top-level document held by the scanner.

    A leading byte order mark is skipped; empty input and anything but
    whitespace after the value are errors.
    """
    with ProfileContext("render", scanner), recursion_guard(scanner):
        scanner.skip_bom()
        PrettyPrinter(scanner, sink, parse_config, render_config).render()
        if not scanner.at_end():
            raise scanner.error("Extra data", ErrorKind.EXTRA_DATA)
