"""Domain exceptions raised by formatting helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


def compose_error_message(*, cause: str, action: str) -> str:
    """Build a caller-facing error message with cause and corrective action."""

    return f"Cause: {cause} Action: {action}"


@dataclass(slots=True)
class FormattingError(Exception):
    """Base exception for predictable formatting failures."""

    code: str
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return self.message


class InvalidDigitsError(FormattingError):
    """Raised when digit grouping receives something other than plain digits."""

    def __init__(
        self,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code="INVALID_DIGITS",
            message=message
            or compose_error_message(
                cause="Grouping input must contain only decimal digits.",
                action="Pass the unsigned integral part without sign or point.",
            ),
            details=details or {},
        )


class InvalidFractionDigitsError(FormattingError):
    """Raised when the requested fractional digit count is out of range."""

    def __init__(
        self,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code="INVALID_FRACTION_DIGITS",
            message=message
            or compose_error_message(
                cause="Fractional digit count is outside the supported range.",
                action="Use a non-negative integer within the configured maximum.",
            ),
            details=details or {},
        )


class CurrencyRenderError(FormattingError):
    """Raised when an amount cannot be rendered with a currency symbol."""

    def __init__(
        self,
        message: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code="CURRENCY_RENDER_FAILED",
            message=message
            or compose_error_message(
                cause="Amount text is not a valid currency amount.",
                action="Round the value to the currency precision and retry.",
            ),
            details=details or {},
        )
