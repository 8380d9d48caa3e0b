"""Public formatting functions for plain, currency and grouped decimal text."""

from __future__ import annotations

import logging
from decimal import Decimal

from pydantic import ValidationError

from decimal_formatting.core.settings import DEFAULT_MAX_FRACTION_DIGITS, get_settings
from decimal_formatting.domain.errors import (
    CurrencyRenderError,
    InvalidFractionDigitsError,
    compose_error_message,
)
from decimal_formatting.domain.grouping import group_digits
from decimal_formatting.domain.money import USD, render_money
from decimal_formatting.domain.rounding import (
    round_half_even,
    split_rounded,
    to_plain_string,
)

logger = logging.getLogger(__name__)


def decimal_to_string_or_empty(value: Decimal | None) -> str:
    """Return the fixed-point text of value, or an empty string when absent."""

    if value is None:
        return ""
    return to_plain_string(value)


def decimal_to_currency_string(value: Decimal) -> str:
    """Render value as USD text rounded half-to-even to whole cents.

    Amounts the currency renderer rejects are returned as
    ``"(<rounded value> <error message>)"`` instead of raising.
    """

    rounded_text = to_plain_string(round_half_even(value, USD.exponent))
    try:
        return render_money(rounded_text, USD)
    except CurrencyRenderError as exc:
        logger.warning(
            "currency_render_failed",
            extra={"amount": rounded_text, "error_code": exc.code},
        )
        return f"({rounded_text} {exc})"


def _max_fraction_digits() -> int:
    try:
        return get_settings().max_fraction_digits
    except ValidationError as exc:
        logger.warning(
            "invalid_settings_ignored",
            extra={
                "errors": [".".join(map(str, error["loc"])) for error in exc.errors()],
                "max_fraction_digits": DEFAULT_MAX_FRACTION_DIGITS,
            },
        )
        return DEFAULT_MAX_FRACTION_DIGITS


def _validate_fractional_digits(fractional_digits: int) -> None:
    max_fraction_digits = _max_fraction_digits()
    if (
        isinstance(fractional_digits, bool)
        or not isinstance(fractional_digits, int)
        or not 0 <= fractional_digits <= max_fraction_digits
    ):
        raise InvalidFractionDigitsError(
            message=compose_error_message(
                cause=(
                    f"Fractional digit count {fractional_digits!r} is not an "
                    f"integer between 0 and {max_fraction_digits}."
                ),
                action="Pass a smaller non-negative integer digit count.",
            ),
            details={
                "fractional_digits": fractional_digits,
                "max_fraction_digits": max_fraction_digits,
            },
        )


def decimal_to_separated_string(value: Decimal, fractional_digits: int) -> str:
    """Round value half-to-even and render it with thousands separators."""

    _validate_fractional_digits(fractional_digits)
    if not value.is_finite():
        return to_plain_string(value)

    parts = split_rounded(value, fractional_digits)
    rendered = group_digits(parts.integral)
    if fractional_digits:
        rendered = f"{rendered}.{parts.fraction}"
    if parts.negative:
        rendered = f"-{rendered}"
    return rendered
