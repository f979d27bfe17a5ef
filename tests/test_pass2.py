"""
JSON_checker pass2 test from json.org test suite.

Validates re-indenting of a deeply nested array structure, one level of
recursion per container.
"""

import jdent

# from https://json.org/JSON_checker/test/pass2.json
JSON = r"""
[[[[[[[[[[[[[[[[[[["Not too deep"]]]]]]]]]]]]]]]]]]]
"""


def test_parse() -> None:
    """
    Validates layout and idempotence for deeply nested arrays.

    Each of the 19 levels opens on its own line, indented two spaces more
    than its parent, and the closing brackets unwind in the same columns.
    """
    res = jdent.reformat(JSON)
    lines = res.split("\n")

    assert len(lines) == 19 * 2 + 1
    assert lines[0] == "["
    assert lines[19] == " " * 38 + '"Not too deep"'
    assert lines[-1] == "]"
    assert jdent.reformat(res) == res
