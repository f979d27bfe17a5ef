"""
Benchmark suite for jdent re-indenting performance.

Compares jdent against standard JSON libraries including:
- Python standard library json
- orjson (C-optimized)
- ujson (ultra-fast JSON)

Measures re-indenting speed and peak memory across different document kinds.
"""
