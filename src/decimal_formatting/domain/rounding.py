"""Decimal rounding helpers that never pass through binary floats."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Context, Decimal


@dataclass(frozen=True, slots=True)
class DecimalParts:
    """Sign flag and digit strings of a rounded decimal magnitude."""

    negative: bool
    integral: str
    fraction: str


def to_plain_string(value: Decimal) -> str:
    """Render value in fixed-point notation keeping its stored scale."""

    return format(value, "f")


def rounding_context(value: Decimal, fractional_digits: int) -> Context:
    """Build a local context wide enough to quantize value without overflow."""

    # One extra digit absorbs a carry such as 999.9 -> 1000.
    precision = max(1, value.adjusted() + fractional_digits + 2)
    return Context(prec=precision, rounding=ROUND_HALF_EVEN)


def round_half_even(value: Decimal, fractional_digits: int) -> Decimal:
    """Return value rounded to fractional_digits places with ties to even."""

    if not value.is_finite():
        return value
    quantum = Decimal((0, (1,), -fractional_digits))
    return value.quantize(
        quantum,
        context=rounding_context(value, fractional_digits),
    )


def split_rounded(value: Decimal, fractional_digits: int) -> DecimalParts:
    """Round value and split its magnitude into integral and fraction digits."""

    rounded = round_half_even(value, fractional_digits)
    integral, _, fraction = to_plain_string(rounded.copy_abs()).partition(".")
    return DecimalParts(
        negative=value.is_signed() and not rounded.is_zero(),
        integral=integral,
        fraction=fraction,
    )
