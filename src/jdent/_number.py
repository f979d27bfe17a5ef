"""Lossless representation of JSON numeric literals."""

import decimal
import math
from dataclasses import dataclass
from enum import Enum


class NumberMode(Enum):
    """
    Selects how numeric literals are materialized.

    EXACT keeps every digit as an integer mantissa and decimal exponent.
    INTEGER and FLOAT trade exactness for a native Python type.
    """

    EXACT = "exact"
    INTEGER = "integer"
    FLOAT = "float"


@dataclass(frozen=True)
class ExactDecimal:
    """
    A JSON number stored as mantissa * 10**exponent.

    Values are kept exactly as written and never normalized, so 1.50 is
    (150, -2) and compares unequal to (15, -1).
    """

    mantissa: int
    exponent: int = 0

    def __str__(self) -> str:
        if self.exponent:
            return f"{self.mantissa}e{self.exponent}"
        return str(self.mantissa)

    def to_decimal(self) -> decimal.Decimal:
        """Converts to decimal.Decimal without rounding."""
        return decimal.Decimal(str(self))

    def to_float(self) -> float:
        """Converts to the nearest float; may overflow to infinity."""
        return float(str(self))

    @classmethod
    def from_decimal(cls, value: decimal.Decimal) -> "ExactDecimal":
        """Builds an ExactDecimal from a finite decimal.Decimal."""
        sign, digits, exponent = value.as_tuple()
        if not isinstance(exponent, int):
            msg = "Out of range decimal values are not JSON compliant"
            raise ValueError(msg)
        mantissa = int("".join(map(str, digits)) or "0")
        return cls(-mantissa if sign else mantissa, exponent)


def format_number(value: ExactDecimal | int | float) -> str:
    """Formats any supported number the way the printer writes it."""
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            msg = "Out of range float values are not JSON compliant"
            raise ValueError(msg)
        return repr(value)
    return str(value)
