"""Thousands grouping for unsigned integral digit strings."""

from __future__ import annotations

from decimal_formatting.domain.errors import InvalidDigitsError

GROUPING_SEPARATOR = ","
GROUP_SIZE = 3


def group_digits(digits: str) -> str:
    """Insert a comma every three digits counted from the right.

    The input is the integral magnitude only: no sign, no decimal point.
    Digit strings of any length are accepted, so magnitudes beyond 64-bit
    integers group the same way as small ones.
    """

    if digits and not (digits.isascii() and digits.isdigit()):
        raise InvalidDigitsError(details={"digits": digits})

    chunks: list[str] = []
    for position, digit in enumerate(reversed(digits)):
        if position and position % GROUP_SIZE == 0:
            chunks.append(GROUPING_SEPARATOR)
        chunks.append(digit)
    return "".join(reversed(chunks))
