"""Currency symbol rendering for amounts already rounded to currency precision."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from decimal_formatting.domain.errors import CurrencyRenderError, compose_error_message
from decimal_formatting.domain.grouping import group_digits
from decimal_formatting.domain.rounding import split_rounded


@dataclass(frozen=True, slots=True)
class Currency:
    """ISO currency with its display symbol and minor unit exponent."""

    code: str
    symbol: str
    exponent: int

    def __post_init__(self) -> None:
        if self.exponent < 0:
            raise ValueError("Currency exponent must be non-negative")


USD = Currency(code="USD", symbol="$", exponent=2)


def parse_amount(amount_text: str, currency: Currency = USD) -> Decimal:
    """Parse amount text and check it fits the currency minor units."""

    try:
        amount = Decimal(amount_text)
    except InvalidOperation as exc:
        raise CurrencyRenderError(
            message=compose_error_message(
                cause=f"Amount {amount_text!r} is not a decimal number.",
                action="Pass the canonical text of a decimal value.",
            ),
            details={"amount": amount_text, "currency": currency.code},
        ) from exc

    if not amount.is_finite():
        raise CurrencyRenderError(
            message=compose_error_message(
                cause=f"Amount {amount_text!r} is not finite.",
                action="Pass a finite decimal value.",
            ),
            details={"amount": amount_text, "currency": currency.code},
        )

    exponent = amount.as_tuple().exponent
    if isinstance(exponent, int) and -exponent > currency.exponent:
        raise CurrencyRenderError(
            message=compose_error_message(
                cause=(
                    f"Amount {amount_text!r} has more than {currency.exponent} "
                    f"fractional digits for {currency.code}."
                ),
                action="Round the amount to the currency precision first.",
            ),
            details={"amount": amount_text, "currency": currency.code},
        )
    return amount


def render_money(amount_text: str, currency: Currency = USD) -> str:
    """Render rounded amount text with symbol, grouping and minor units."""

    amount = parse_amount(amount_text, currency)
    parts = split_rounded(amount, currency.exponent)
    sign = "-" if parts.negative else ""
    rendered = f"{sign}{currency.symbol}{group_digits(parts.integral)}"
    if parts.fraction:
        rendered = f"{rendered}.{parts.fraction}"
    return rendered
