"""
Test documents for re-indenting benchmarks.

Each generator returns compact JSON text, built from a seeded random source
so every run measures the same bytes:
- small and large records with typical API payload fields
- long mixed arrays and recursively nested objects
- escape-heavy and non-ASCII strings, which stress the output escaper
- high-precision numbers, which stress exact decimal handling
"""

import json
import random
import string
from typing import Any

DATA_TYPES = (
    "small_object",
    "large_object",
    "mixed_array",
    "nested_structure",
    "string_heavy",
    "unicode_heavy",
    "precise_numbers",
)

_SEED = 20240115
_ESCAPES = ('\\"', "\\\\", "\\/", "\\b", "\\f", "\\n", "\\r", "\\t")
_ESCAPE_PROBABILITY = 0.3
_NON_ASCII = "éüß€中文ЖΩ\U0001f600"


def generate_test_data(data_type: str, seed: int = _SEED) -> str:
    """Generates JSON text of the named kind."""
    generators = {
        "small_object": _small_object,
        "large_object": _large_object,
        "mixed_array": _mixed_array,
        "nested_structure": _nested_structure,
        "string_heavy": _string_heavy,
        "unicode_heavy": _unicode_heavy,
        "precise_numbers": _precise_numbers,
    }

    if data_type not in generators:
        raise ValueError(f"Unknown data type: {data_type}")

    return generators[data_type](random.Random(seed))


def generate_large_array(count: int, seed: int = _SEED) -> bytes:
    """Generates a top-level array of count records as UTF-8 bytes."""
    rng = random.Random(seed)
    records = ",".join(_record(rng, i) for i in range(count))
    return f"[{records}]".encode()


def _word(rng: random.Random, length: int) -> str:
    return "".join(rng.choices(string.ascii_letters, k=length))


def _timestamp(rng: random.Random) -> str:
    return (
        f"2024-{rng.randint(1, 12):02d}-{rng.randint(1, 28):02d}"
        f"T{rng.randint(0, 23):02d}:{rng.randint(0, 59):02d}:00Z"
    )


def _record(rng: random.Random, index: int) -> str:
    return json.dumps(
        {
            "id": f"evt_{index:07d}",
            "at": _timestamp(rng),
            "kind": rng.choice(["create", "update", "delete"]),
            "amount": round(rng.uniform(0, 5000), 2),
            "tags": [_word(rng, 5) for _ in range(rng.randint(0, 4))],
        }
    )


def _small_object(rng: random.Random) -> str:
    """A record under 1KB with basic field types."""
    data = {
        "id": 12345,
        "name": "Alice Johnson",
        "email": "alice@example.com",
        "active": True,
        "balance": 1234.56,
        "metadata": {"created": _timestamp(rng), "source": "api"},
    }
    return json.dumps(data)


def _large_object(rng: random.Random) -> str:
    """A profile over 10KB with nested sections and long lists."""
    data = {
        "user_id": rng.randint(1000000, 9999999),
        "profile": {
            "name": {"first": _word(rng, 10), "last": _word(rng, 12)},
            "address": {
                "street": f"{rng.randint(1, 9999)} {_word(rng, 8)} St",
                "city": _word(rng, 12),
                "zip": f"{rng.randint(10000, 99999)}",
            },
            "language": rng.choice(["en", "es", "fr", "de", "zh"]),
            "notifications": {
                channel: rng.choice([True, False])
                for channel in ("email", "sms", "push")
            },
        },
        "transactions": [json.loads(_record(rng, i)) for i in range(60)],
        "sessions": [
            {
                "started": _timestamp(rng),
                "ip": ".".join(str(rng.randint(1, 255)) for _ in range(4)),
                "agent": f"Mozilla/5.0 ({_word(rng, 20)})",
            }
            for _ in range(30)
        ],
    }
    return json.dumps(data)


def _mixed_array(rng: random.Random) -> str:
    """A 500 element array mixing every value type."""
    choices = [
        lambda i: rng.randint(-1000, 1000),
        lambda i: round(rng.uniform(-100.0, 100.0), 3),
        lambda i: _word(rng, rng.randint(5, 30)),
        lambda i: rng.choice([True, False]),
        lambda i: None,
        lambda i: {"index": i, "value": _word(rng, 10)},
        lambda i: [],
    ]
    array: list[Any] = [rng.choice(choices)(i) for i in range(500)]
    return json.dumps(array)


def _nested_structure(rng: random.Random) -> str:
    """An object tree eight levels deep with a fan-out of three."""

    def node(depth: int) -> dict[str, Any]:
        if depth <= 0:
            return {"leaf": _word(rng, 10)}
        return {
            "level": depth,
            "children": [node(depth - 1) for _ in range(3)],
            "label": _word(rng, 15),
        }

    return json.dumps(node(8))


def _escaped_text(rng: random.Random, length: int) -> str:
    alphabet = string.ascii_letters + string.digits + " "
    return "".join(
        rng.choice(_ESCAPES)
        if rng.random() < _ESCAPE_PROBABILITY
        else rng.choice(alphabet)
        for _ in range(length)
    )


def _string_heavy(rng: random.Random) -> str:
    """Strings dense with escape sequences."""
    strings = ",".join(f'"{_escaped_text(rng, 60)}"' for _ in range(150))
    escapes = ",".join(
        f'"\\u{rng.randint(0x20, 0x7E):04x}\\u{rng.randint(0x80, 0xD7FF):04x}"'
        for _ in range(80)
    )
    return f'{{"strings": [{strings}], "unicode_escapes": [{escapes}]}}'


def _unicode_heavy(rng: random.Random) -> str:
    """Raw non-ASCII text that must be re-escaped on output."""
    data = {
        f"k{i}_{rng.choice(_NON_ASCII)}": "".join(
            rng.choices(_NON_ASCII + string.ascii_lowercase, k=40)
        )
        for i in range(200)
    }
    return json.dumps(data, ensure_ascii=False)


def _precise_numbers(rng: random.Random) -> str:
    """Numbers with more digits than a double can carry."""
    literals = []
    for _ in range(400):
        digits = "".join(rng.choices(string.digits, k=rng.randint(18, 40)))
        whole, fraction = digits[:-8].lstrip("0") or "0", digits[-8:]
        exponent = rng.choice(["", f"e{rng.randint(-30, 30)}"])
        literals.append(f"{rng.choice(['', '-'])}{whole}.{fraction}{exponent}")
    return f"[{','.join(literals)}]"
