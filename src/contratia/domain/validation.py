"""Pure field predicates used by the order form.

Every "is this in the future" check is evaluated in the business
timezone, a fixed UTC-4 offset with no daylight-saving adjustment,
independent of the machine's local timezone.
"""

from __future__ import annotations

import re
from datetime import date, datetime, time, timedelta, timezone

from contratia.domain.model.value_objects import ClockTime

BUSINESS_TZ = timezone(timedelta(hours=-4), name="AST")

_PHONE = re.compile(r"^\+?1?\D?(\d{3})\D?(\d{3})\D?(\d{4})$")
_EMAIL = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]{2,}$")
_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def business_now(now: datetime | None = None) -> datetime:
    """Current wall-clock time in the business timezone.

    *now* may be any aware datetime (it is converted) or a naive one,
    which is taken to already be business-local.
    """
    if now is None:
        return datetime.now(BUSINESS_TZ)
    if now.tzinfo is None:
        return now.replace(tzinfo=BUSINESS_TZ)
    return now.astimezone(BUSINESS_TZ)


def is_valid_phone(value: str | None) -> bool:
    """PR/US shapes: optional +1, optional punctuation, 3+3+4 digits.

    >>> is_valid_phone("+1 787 555 1234")
    True
    """
    if not value:
        return False
    return _PHONE.match(value.strip()) is not None


def normalize_phone(value: str | None) -> str:
    """Canonical ``+1XXXXXXXXXX`` form, or ``""`` if the number is invalid."""
    if not is_valid_phone(value):
        return ""
    match = _PHONE.match(value.strip())  # type: ignore[union-attr]
    return f"+1{match.group(1)}{match.group(2)}{match.group(3)}"


def is_valid_email(value: str | None) -> bool:
    if not value:
        return False
    return _EMAIL.match(value.strip()) is not None


def parse_iso_date(value: str | None) -> date | None:
    """``YYYY-MM-DD`` to a date; None for bad shape or impossible dates."""
    if not value or not _ISO_DATE.match(value):
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None


def is_valid_date(value: str | None, now: datetime | None = None) -> bool:
    """True if *value* is a real date on or after business-today."""
    selected = parse_iso_date(value)
    if selected is None:
        return False
    return selected >= business_now(now).date()


def is_valid_time_slot(
    date_value: str | None,
    time_value: str | None,
    now: datetime | None = None,
) -> bool:
    """Validate a 12-hour time on quarter-hour boundaries for a date.

    Future dates accept any well-formed slot; today's date requires a
    slot strictly later than the current business-timezone clock.
    """
    if not date_value or not time_value or not is_valid_date(date_value, now):
        return False

    slot = ClockTime.try_parse(time_value)
    if slot is None or not slot.is_quarter_hour:
        return False

    current = business_now(now)
    selected = parse_iso_date(date_value)
    if selected > current.date():  # type: ignore[operator]
        return True

    slot_at = datetime.combine(
        selected, time(slot.hour, slot.minute), tzinfo=BUSINESS_TZ  # type: ignore[arg-type]
    )
    return slot_at > current
