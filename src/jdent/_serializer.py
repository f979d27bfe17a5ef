"""Writes Python values in the same indented layout as the printer."""

import contextlib
import decimal
from collections.abc import Iterator
from typing import IO
from typing import Any

from jdent._config import RenderConfig
from jdent._number import ExactDecimal
from jdent._number import format_number
from jdent._printer import padding
from jdent._utf8 import encode_string
from jdent._utf8 import escape_json_string


def _quote(text: str) -> str:
    return f'"{escape_json_string(encode_string(text))}"'


class Serializer:
    """Encodes None, bool, str, numbers, dicts, lists and tuples."""

    def __init__(self, sink: IO[str], config: RenderConfig) -> None:
        self.config = config
        self._write = sink.write
        self._markers: set[int] = set()

    def _pad(self, level: int) -> str:
        return padding(level, self.config.indent_width, self.config.max_padding)

    @contextlib.contextmanager
    def _entered(self, container: object) -> Iterator[None]:
        """Marks a container as open while its members are written."""
        marker = id(container)
        if marker in self._markers:
            raise ValueError("Circular reference detected")
        self._markers.add(marker)
        try:
            yield
        finally:
            self._markers.discard(marker)

    def write_value(self, obj: Any, level: int = 0) -> None:  # noqa: PLR0911
        """Encode any JSON-serializable value."""
        if obj is None:
            self._write("null")
        elif obj is True:
            self._write("true")
        elif obj is False:
            self._write("false")
        elif isinstance(obj, str):
            self._write(_quote(obj))
        elif isinstance(obj, ExactDecimal | int | float):
            self._write(format_number(obj))
        elif isinstance(obj, decimal.Decimal):
            self._write(str(ExactDecimal.from_decimal(obj)))
        elif isinstance(obj, dict):
            with self._entered(obj):
                self._write_object(obj, level)
        elif isinstance(obj, list | tuple):
            with self._entered(obj):
                self._write_array(obj, level)
        else:
            kind = type(obj).__name__
            msg = f"Object of type {kind} is not JSON serializable"
            raise TypeError(msg)

    def _write_array(
        self, arr: list[Any] | tuple[Any, ...], level: int
    ) -> None:
        if not arr:
            self._write("[]")
            return
        inner = self._pad(level + 1)
        self._write("[")
        for i, item in enumerate(arr):
            self._write(",\n" if i else "\n")
            self._write(inner)
            self.write_value(item, level + 1)
        self._write("\n")
        self._write(self._pad(level))
        self._write("]")

    def _write_object(self, d: dict[Any, Any], level: int) -> None:
        if not d:
            self._write("{}")
            return
        inner = self._pad(level + 1)
        self._write("{")
        for i, (key, value) in enumerate(d.items()):
            if not isinstance(key, str):
                msg = f"keys must be strings, not {type(key).__name__}"
                raise TypeError(msg)
            self._write(",\n" if i else "\n")
            self._write(inner)
            self._write(_quote(key))
            self._write(": ")
            self.write_value(value, level + 1)
        self._write("\n")
        self._write(self._pad(level))
        self._write("}")
