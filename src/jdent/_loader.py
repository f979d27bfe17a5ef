"""Materializes a document into Python values using the streaming parsers."""

from typing import Any

from jdent._config import ParseConfig
from jdent._errors import InvalidJSON
from jdent._parser import expect_value
from jdent._parser import parse_array
from jdent._parser import parse_boolean
from jdent._parser import parse_null
from jdent._parser import parse_number
from jdent._parser import parse_object
from jdent._parser import parse_string
from jdent._scanner import JsonType
from jdent._scanner import Scanner
from jdent._utf8 import decode_string


class Loader:
    """
    Builds lists and dicts by visiting the structural parsers.

    Objects become dicts in source field order unless an
    object_pairs_hook is configured, which then receives the raw pairs.
    """

    def __init__(self, scanner: Scanner, config: ParseConfig) -> None:
        self.scanner = scanner
        self.config = config

    def _decode(self, data: bytes) -> str:
        try:
            return decode_string(data)
        except InvalidJSON as e:
            raise self.scanner.relocate(e) from e

    def load(self, depth: int = 0) -> Any:
        """Parses and returns the value at the cursor."""
        scanner = self.scanner
        kind = expect_value(scanner)
        if kind is JsonType.ARRAY:
            items: list[Any] = []
            parse_array(
                scanner,
                lambda _: items.append(self.load(depth + 1)),
                self.config,
                depth,
            )
            return items
        if kind is JsonType.OBJECT:
            pairs: list[tuple[str, Any]] = []
            parse_object(
                scanner,
                lambda name: pairs.append(
                    (self._decode(name), self.load(depth + 1))
                ),
                self.config,
                depth,
            )
            if self.config.object_pairs_hook:
                return self.config.object_pairs_hook(pairs)
            return dict(pairs)
        if kind is JsonType.STRING:
            return self._decode(parse_string(scanner, self.config))
        if kind is JsonType.NUMBER:
            return parse_number(scanner, self.config)
        if kind is JsonType.BOOLEAN:
            return parse_boolean(scanner)
        parse_null(scanner)
        return None
