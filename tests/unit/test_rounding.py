from decimal import Decimal, getcontext

import pytest

from decimal_formatting.domain.rounding import (
    DecimalParts,
    round_half_even,
    split_rounded,
    to_plain_string,
)


@pytest.mark.parametrize(
    ("value", "digits", "expected"),
    [
        ("0.125", 2, "0.12"),
        ("0.135", 2, "0.14"),
        ("2.5", 0, "2"),
        ("3.5", 0, "4"),
        ("-2.5", 0, "-2"),
        ("1.024", 2, "1.02"),
        ("1.026", 2, "1.03"),
        ("999.9", 0, "1000"),
        ("5", 3, "5.000"),
    ],
)
def test_round_half_even_rounds_ties_to_even_neighbor(
    value: str, digits: int, expected: str
) -> None:
    rounded = round_half_even(Decimal(value), digits)

    assert str(rounded) == expected


def test_round_half_even_handles_values_beyond_default_precision() -> None:
    value = Decimal("123456789012345678901234567890.5")

    rounded = round_half_even(value, 0)

    assert rounded == Decimal("123456789012345678901234567890")
    assert getcontext().prec == 28


def test_round_half_even_keeps_non_finite_values() -> None:
    assert round_half_even(Decimal("Infinity"), 2) == Decimal("Infinity")
    assert round_half_even(Decimal("NaN"), 2).is_nan()


def test_to_plain_string_never_uses_exponent_notation() -> None:
    assert to_plain_string(Decimal("1E+3")) == "1000"
    assert to_plain_string(Decimal("1E-7")) == "0.0000001"
    assert to_plain_string(Decimal("1.20")) == "1.20"


def test_split_rounded_returns_magnitude_parts() -> None:
    assert split_rounded(Decimal("-1000.026"), 2) == DecimalParts(
        negative=True, integral="1000", fraction="03"
    )
    assert split_rounded(Decimal("0.004"), 2) == DecimalParts(
        negative=False, integral="0", fraction="00"
    )


def test_split_rounded_drops_sign_of_values_rounding_to_zero() -> None:
    assert split_rounded(Decimal("-0.004"), 2).negative is False
    assert split_rounded(Decimal("-0"), 0).negative is False
