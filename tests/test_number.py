"""
Numeric literal parsing and exact-decimal rendering tests.
"""

import decimal

import pytest

import jdent
from jdent import ErrorKind
from jdent import ExactDecimal
from jdent import NumberMode
from jdent import ParseConfig
from jdent import Scanner
from jdent import parse_number


def _parse(literal: str, mode: NumberMode = NumberMode.EXACT) -> object:
    scanner = Scanner(literal.encode())
    value = parse_number(scanner, ParseConfig(number_mode=mode))
    assert scanner.at_end()
    return value


@pytest.mark.parametrize(
    "value,text",
    [
        (ExactDecimal(0), "0"),
        (ExactDecimal(42), "42"),
        (ExactDecimal(-5, 0), "-5"),
        (ExactDecimal(314, -2), "314e-2"),
        (ExactDecimal(1, 2), "1e2"),
        (ExactDecimal(0, -3), "0e-3"),
    ],
)
def test_exact_decimal_str(value: ExactDecimal, text: str) -> None:
    """
    Validates the mantissa-exponent text form.
    """
    assert str(value) == text


def test_exact_decimal_conversions() -> None:
    """
    Validates lossless conversion to and from decimal.Decimal.
    """
    value = ExactDecimal(110, -2)

    assert value.to_decimal() == decimal.Decimal("1.10")
    assert str(value.to_decimal()) == "1.10"
    assert ExactDecimal.from_decimal(decimal.Decimal("1.10")) == value
    assert ExactDecimal.from_decimal(decimal.Decimal("-0")) == ExactDecimal(0)
    assert value.to_float() == 1.1


def test_exact_decimal_from_special_decimal() -> None:
    """
    Validates rejection of infinite and NaN decimals.
    """
    with pytest.raises(ValueError):
        ExactDecimal.from_decimal(decimal.Decimal("Infinity"))


@pytest.mark.parametrize(
    "literal,rendered",
    [
        ("0", "0"),
        ("-0", "0"),
        ("100000000000000000000", "100000000000000000000"),
        ("-0.001", "-1e-3"),
        ("1E+2", "1e2"),
        ("1e-02", "1e-2"),
        ("0.10", "10e-2"),
        ("12.5E3", "125e2"),
        ("123456789012345678901234567890.5", "1234567890123456789012345678905e-1"),
    ],
)
def test_exact_mode_rendering(literal: str, rendered: str) -> None:
    """
    Validates that every digit survives parsing and printing.
    """
    assert str(_parse(literal)) == rendered
    assert jdent.reformat(literal) == rendered


@pytest.mark.parametrize(
    "literal,rendered",
    [
        ("1.5", "1.5"),
        ("10", "10.0"),
        ("-0", "-0.0"),
        ("1e-1", "0.1"),
        ("100000000000000000001", "1e+20"),
    ],
)
def test_float_mode_rendering(literal: str, rendered: str) -> None:
    """
    Validates shortest round-trip float output.
    """
    assert jdent.reformat(literal, number_mode=NumberMode.FLOAT) == rendered


def test_integer_mode_rendering() -> None:
    """
    Validates integer output and rejection of non-integers.
    """
    assert jdent.reformat("[7, -0]", number_mode=NumberMode.INTEGER) == (
        "[\n  7,\n  0\n]"
    )

    with pytest.raises(jdent.InvalidJSON) as exc_info:
        jdent.reformat("[7, 0.5]", number_mode=NumberMode.INTEGER)

    assert exc_info.value.kind is ErrorKind.INVALID_NUMBER
    assert exc_info.value.pos == 4


@pytest.mark.parametrize(
    "literal,kind",
    [
        ("-", ErrorKind.EXPECTED_DIGIT),
        ("-a", ErrorKind.EXPECTED_DIGIT),
        ("00", ErrorKind.LEADING_ZERO),
        ("-012", ErrorKind.LEADING_ZERO),
        ("1.", ErrorKind.INVALID_NUMBER),
        ("1.e5", ErrorKind.INVALID_NUMBER),
        ("1e", ErrorKind.INVALID_NUMBER),
        ("1e+", ErrorKind.INVALID_NUMBER),
        ("1e+-1", ErrorKind.INVALID_NUMBER),
        ("1e--1", ErrorKind.INVALID_NUMBER),
    ],
)
def test_malformed_numbers(literal: str, kind: ErrorKind) -> None:
    """
    Validates each grammar violation is reported by kind.
    """
    with pytest.raises(jdent.InvalidJSON) as exc_info:
        _parse(literal)

    assert exc_info.value.kind is kind


@pytest.mark.parametrize("literal", ["1.5.2", "1e5e5", "0x10", "1 2"])
def test_number_followed_by_junk(literal: str) -> None:
    """
    Validates that a number ends at the first byte outside its grammar.
    """
    with pytest.raises(jdent.InvalidJSON) as exc_info:
        jdent.reformat(literal)

    assert exc_info.value.kind is ErrorKind.EXTRA_DATA


def test_float_mode_overflow() -> None:
    """
    Validates that a literal too large for a float is rejected.
    """
    with pytest.raises(jdent.InvalidJSON) as exc_info:
        jdent.reformat("-1e400", number_mode=NumberMode.FLOAT)

    assert exc_info.value.kind is ErrorKind.NUMBER_TOO_LARGE
    assert exc_info.value.pos == 0
