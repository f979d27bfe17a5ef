"""
Optional accounting of time and input bytes spent in the hot paths.

Setting JDENT_PROFILE in the environment turns it on at import time;
enable_profiling() and disable_profiling() switch it at runtime. While off,
entering a section costs one flag check.
"""

import os
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING
from typing import Any

if TYPE_CHECKING:
    from jdent._scanner import Scanner

_enabled = "JDENT_PROFILE" in os.environ
_sections: dict[str, "HotPathStats"] = {}


@dataclass
class HotPathStats:
    """
    Totals for one named section of the scanner's work.

    bytes_scanned counts input bytes the cursor moved over while the
    section was active, so nested sections each include their children.
    """

    name: str
    calls: int = 0
    elapsed_ns: int = 0
    bytes_scanned: int = 0

    @property
    def bytes_per_second(self) -> float:
        if not self.elapsed_ns:
            return 0.0
        return self.bytes_scanned * 1e9 / self.elapsed_ns


class ProfileContext:
    """Credits the time and scanner advance of a block to a named section."""

    __slots__ = ("_name", "_scanner", "_start_ns", "_start_pos")

    def __init__(self, name: str, scanner: "Scanner") -> None:
        self._name = name
        self._scanner = scanner
        self._start_ns = 0
        self._start_pos = -1

    def __enter__(self) -> "ProfileContext":
        if _enabled:
            self._start_pos = self._scanner.pos
            self._start_ns = time.perf_counter_ns()
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        # not started when profiling was switched on inside the block
        if self._start_pos < 0:
            return
        elapsed = time.perf_counter_ns() - self._start_ns
        stats = _sections.get(self._name)
        if stats is None:
            stats = _sections[self._name] = HotPathStats(self._name)
        stats.calls += 1
        stats.elapsed_ns += elapsed
        stats.bytes_scanned += self._scanner.pos - self._start_pos


def enable_profiling() -> None:
    global _enabled
    _enabled = True


def disable_profiling() -> None:
    global _enabled
    _enabled = False


def get_hot_path_stats() -> dict[str, HotPathStats]:
    """Returns a snapshot of the totals recorded so far, keyed by section."""
    return dict(_sections)


def clear_hot_path_stats() -> None:
    _sections.clear()
