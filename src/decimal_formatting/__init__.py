"""Deterministic, locale-free text formatting for decimal values."""

from decimal_formatting.domain.errors import (
    CurrencyRenderError,
    FormattingError,
    InvalidDigitsError,
    InvalidFractionDigitsError,
)
from decimal_formatting.formatters import (
    decimal_to_currency_string,
    decimal_to_separated_string,
    decimal_to_string_or_empty,
)

__all__ = [
    "CurrencyRenderError",
    "FormattingError",
    "InvalidDigitsError",
    "InvalidFractionDigitsError",
    "decimal_to_currency_string",
    "decimal_to_separated_string",
    "decimal_to_string_or_empty",
]
