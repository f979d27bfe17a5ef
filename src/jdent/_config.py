"""Immutable parse and render settings."""

from collections.abc import Callable
from dataclasses import dataclass
from dataclasses import fields
from typing import Any

from jdent._number import NumberMode

DEFAULT_MAX_DEPTH = 200
DEFAULT_CHUNK_SIZE = 64 * 1024
DEFAULT_INDENT_WIDTH = 2
MAX_PADDING = 8192

# Receives the (name, value) pairs of each materialized object in source order
ObjectPairsHook = Callable[[list[tuple[str, Any]]], Any] | None


@dataclass(frozen=True)
class ParseConfig:
    """
    Configures JSON parsing behavior with immutable settings.

    The number mode is chosen once per run and travels with the config
    through every parse call.
    """

    number_mode: NumberMode = NumberMode.EXACT
    strict: bool = False
    max_depth: int = DEFAULT_MAX_DEPTH
    chunk_size: int = DEFAULT_CHUNK_SIZE
    object_pairs_hook: ObjectPairsHook = None

    def __post_init__(self) -> None:
        if not isinstance(self.number_mode, NumberMode):
            raise TypeError("number_mode must be a NumberMode")
        if not isinstance(self.strict, bool):
            raise TypeError("strict must be a boolean")
        if not isinstance(self.max_depth, int) or self.max_depth < 1:
            raise ValueError("max_depth must be a positive integer")
        if not isinstance(self.chunk_size, int) or self.chunk_size < 1:
            raise ValueError("chunk_size must be a positive integer")
        if self.object_pairs_hook is not None and not callable(
            self.object_pairs_hook
        ):
            raise TypeError("object_pairs_hook must be callable")


@dataclass(frozen=True)
class RenderConfig:
    """
    Configures the indented output layout.

    Padding for a nesting level is indent_width spaces per level, never
    longer than max_padding characters.
    """

    indent_width: int = DEFAULT_INDENT_WIDTH
    max_padding: int = MAX_PADDING

    def __post_init__(self) -> None:
        if not isinstance(self.indent_width, int) or self.indent_width < 0:
            raise ValueError("indent_width must be a non-negative integer")
        if not isinstance(self.max_padding, int) or self.max_padding < 0:
            raise ValueError("max_padding must be a non-negative integer")


_RENDER_FIELDS = frozenset(f.name for f in fields(RenderConfig))


def split_options(
    options: dict[str, Any],
) -> tuple[ParseConfig, RenderConfig]:
    """Builds both configs from one set of keyword options."""
    render_options = {
        k: v for k, v in options.items() if k in _RENDER_FIELDS
    }
    parse_options = {
        k: v for k, v in options.items() if k not in _RENDER_FIELDS
    }
    return ParseConfig(**parse_options), RenderConfig(**render_options)
