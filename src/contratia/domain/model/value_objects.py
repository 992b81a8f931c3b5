"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from contratia.domain.exceptions import ValidationError

_CENTS = Decimal("0.01")
_LEADING_NUMBER = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+))")


@dataclass(frozen=True)
class Money:
    """Monetary amount with currency.

    Uses Decimal to avoid floating-point rounding errors that would be
    unacceptable in financial calculations.
    """

    amount: Decimal
    currency: str = "USD"

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValidationError(
                f"Money amount must be a Decimal, got {type(self.amount).__name__}"
            )
        if self.amount < Decimal("0"):
            raise ValidationError(
                f"Money amount cannot be negative, got {self.amount}"
            )

    # --- Arithmetic helpers ---------------------------------------------------

    def __add__(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def minus_floor_zero(self, other: Money) -> Money:
        """Subtract, clamping the result at zero."""
        self._assert_same_currency(other)
        return Money(max(Decimal("0"), self.amount - other.amount), self.currency)

    def scale(self, factor: Decimal) -> Money:
        """Multiply by a non-negative decimal factor (e.g. a percentage)."""
        if not isinstance(factor, Decimal):
            raise TypeError(f"Can only scale Money by Decimal, got {type(factor).__name__}")
        return Money(self.amount * factor, self.currency)

    @property
    def is_zero(self) -> bool:
        return self.amount == Decimal("0")

    # --- Display --------------------------------------------------------------

    @property
    def plain(self) -> str:
        """Two-decimal string without symbol, as stored in order fields."""
        return str(self.amount.quantize(_CENTS, rounding=ROUND_HALF_UP))

    def __str__(self) -> str:
        return f"${self.plain}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValidationError(
                f"Cannot combine {self.currency} with {other.currency}"
            )

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def zero() -> Money:
        return Money(Decimal("0"))

    @staticmethod
    def parse(text: str | None) -> Money:
        """Lenient factory for user-typed amounts.

        Reads the leading number the way a form field would ("12.5abc"
        is 12.5).  Anything unparseable is zero and negative amounts
        clamp to zero.  Never raises.
        """
        match = _LEADING_NUMBER.match(text or "")
        if match is None:
            return Money.zero()
        value = Decimal(match.group(1))
        if value < Decimal("0"):
            return Money.zero()
        return Money(value)


_CLOCK_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})\s+(AM|PM)$", re.IGNORECASE)


@dataclass(frozen=True)
class ClockTime:
    """A wall-clock time of day.

    Stored on a 24-hour clock but read and written in the fixed
    ``H:MM AM|PM`` representation the order fields use.
    """

    hour: int
    minute: int

    def __post_init__(self) -> None:
        if not 0 <= self.hour <= 23:
            raise ValidationError(f"Hour out of range: {self.hour}")
        if not 0 <= self.minute <= 59:
            raise ValidationError(f"Minute out of range: {self.minute}")

    @property
    def minutes_since_midnight(self) -> int:
        return self.hour * 60 + self.minute

    @property
    def is_quarter_hour(self) -> bool:
        return self.minute in (0, 15, 30, 45)

    def shifted(self, hours: int) -> ClockTime:
        """Move by whole hours, wrapping around midnight."""
        total = (self.minutes_since_midnight + hours * 60) % (24 * 60)
        return ClockTime(total // 60, total % 60)

    def __str__(self) -> str:
        period = "PM" if self.hour >= 12 else "AM"
        hour12 = self.hour % 12 or 12
        return f"{hour12}:{self.minute:02d} {period}"

    @staticmethod
    def parse(text: str) -> ClockTime:
        match = _CLOCK_PATTERN.match((text or "").strip())
        if match is None:
            raise ValidationError(f"Invalid time {text!r}, expected 'H:MM AM|PM'")
        hour, minute, period = int(match.group(1)), int(match.group(2)), match.group(3).upper()
        if not 1 <= hour <= 12:
            raise ValidationError(f"Invalid 12-hour clock value: {text!r}")
        if period == "PM" and hour != 12:
            hour += 12
        if period == "AM" and hour == 12:
            hour = 0
        return ClockTime(hour, minute)

    @staticmethod
    def try_parse(text: str | None) -> ClockTime | None:
        try:
            return ClockTime.parse(text or "")
        except ValidationError:
            return None
