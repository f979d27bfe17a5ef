"""
Streaming JSON re-indenter that preserves field order and exact numbers.

Documents are read through a single-pass, callback-driven parser that never
builds a parse tree. Field order is kept exactly as written and numbers are
carried as exact decimals, so re-indented output differs from the input
only in whitespace and escaping.
"""

import io
import logging
from dataclasses import dataclass
from typing import IO
from typing import Any
from typing import TypeAlias

from jdent._config import DEFAULT_CHUNK_SIZE
from jdent._config import DEFAULT_INDENT_WIDTH
from jdent._config import DEFAULT_MAX_DEPTH
from jdent._config import MAX_PADDING
from jdent._config import ParseConfig
from jdent._config import RenderConfig
from jdent._config import split_options
from jdent._errors import ErrorKind
from jdent._errors import InvalidJSON
from jdent._errors import MaxDepthExceeded
from jdent._loader import Loader
from jdent._number import ExactDecimal
from jdent._number import NumberMode
from jdent._parser import parse_array
from jdent._parser import parse_boolean
from jdent._parser import parse_null
from jdent._parser import parse_number
from jdent._parser import parse_object
from jdent._parser import parse_string
from jdent._parser import recursion_guard
from jdent._parser import skip_value
from jdent._printer import PrettyPrinter
from jdent._printer import padding
from jdent._printer import render
from jdent._profile import HotPathStats
from jdent._profile import clear_hot_path_stats
from jdent._profile import disable_profiling
from jdent._profile import enable_profiling
from jdent._profile import get_hot_path_stats
from jdent._scanner import JsonType
from jdent._scanner import Scanner
from jdent._serializer import Serializer
from jdent._utf8 import decode_string
from jdent._utf8 import decode_utf8
from jdent._utf8 import encode_utf8
from jdent._utf8 import escape_json_string

__version__ = "0.1.0"

logger = logging.getLogger(__name__)

Source: TypeAlias = str | bytes | bytearray | IO[bytes]


def _as_source(data: Source) -> bytes | bytearray | IO[bytes]:
    if isinstance(data, str):
        return data.encode("utf-8", "surrogatepass")
    return data


@dataclass(frozen=True)
class DocumentResult:
    """
    Outcome of reformatting one document.

    Exactly one of text and error is set. text never carries output from a
    document that failed part way through.
    """

    text: str | None = None
    error: InvalidJSON | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def reformat_stream(source: Source, sink: IO[str], **kwargs: Any) -> None:
    """
    Streams the re-indented form of one document into sink.

    Output is written while input is read, so a failure leaves partial
    text in the sink. Keyword options are the fields of ParseConfig and
    RenderConfig.
    """
    parse_config, render_config = split_options(kwargs)
    scanner = Scanner(_as_source(source), parse_config.chunk_size)
    render(scanner, sink, parse_config, render_config)


def reformat(s: Source, **kwargs: Any) -> str:
    """
    Returns the re-indented form of one document, without a trailing newline.
    """
    sink = io.StringIO()
    reformat_stream(s, sink, **kwargs)
    return sink.getvalue()


def reformat_document(source: Source, **kwargs: Any) -> DocumentResult:
    """
    Reformats one document and reports failure as a value.

    Lets callers process many documents in sequence, abandoning a bad one
    and carrying on with the next, without handling exceptions themselves.
    """
    try:
        text = reformat(source, **kwargs)
    except InvalidJSON as e:
        logger.debug("document rejected: %s", e)
        return DocumentResult(error=e)
    logger.debug("document reformatted (%d characters)", len(text))
    return DocumentResult(text=text)


def load(fp: IO[bytes], **kwargs: Any) -> Any:
    """
    Parses JSON from a binary file-like object into Python values.
    """
    if not hasattr(fp, "read"):
        raise TypeError("fp must have a read() method")

    return loads(fp, **kwargs)


def loads(s: Source, **kwargs: Any) -> Any:
    """
    Parses one JSON document into Python values.

    Objects keep source field order and numbers follow number_mode,
    which defaults to exact decimals.
    """
    config = ParseConfig(**kwargs)
    scanner = Scanner(_as_source(s), config.chunk_size)
    scanner.skip_bom()
    with recursion_guard(scanner):
        result = Loader(scanner, config).load()
    if not scanner.at_end():
        raise scanner.error("Extra data", ErrorKind.EXTRA_DATA)
    return result


def dumps(obj: Any, **kwargs: Any) -> str:
    """
    Serializes Python values in the same layout reformat produces.
    """
    sink = io.StringIO()
    dump(obj, sink, **kwargs)
    return sink.getvalue()


def dump(obj: Any, fp: IO[str], **kwargs: Any) -> None:
    """
    Serializes Python values to a text file-like object.
    """
    if not hasattr(fp, "write"):
        raise TypeError("fp must have a write() method")

    Serializer(fp, RenderConfig(**kwargs)).write_value(obj)


__all__ = [
    "DEFAULT_CHUNK_SIZE",
    "DEFAULT_INDENT_WIDTH",
    "DEFAULT_MAX_DEPTH",
    "MAX_PADDING",
    "DocumentResult",
    "ErrorKind",
    "ExactDecimal",
    "HotPathStats",
    "InvalidJSON",
    "JsonType",
    "MaxDepthExceeded",
    "NumberMode",
    "ParseConfig",
    "PrettyPrinter",
    "RenderConfig",
    "Scanner",
    "clear_hot_path_stats",
    "decode_string",
    "decode_utf8",
    "disable_profiling",
    "dump",
    "dumps",
    "enable_profiling",
    "encode_utf8",
    "escape_json_string",
    "get_hot_path_stats",
    "load",
    "loads",
    "padding",
    "parse_array",
    "parse_boolean",
    "parse_null",
    "parse_number",
    "parse_object",
    "parse_string",
    "reformat",
    "reformat_document",
    "reformat_stream",
    "skip_value",
]
