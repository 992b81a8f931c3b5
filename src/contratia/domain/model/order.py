"""Order aggregate: one service engagement to be contracted.

Orders are frozen.  Every user edit goes through ``apply_edit`` which
returns a new order; the derived-field engine then brings the
engine-owned fields back in sync.  Changing kind never converts an
order, it starts a fresh one of the new kind.
"""

from __future__ import annotations

import dataclasses
import re
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, ClassVar

from contratia.domain.exceptions import ValidationError
from contratia.domain.locale import MONTH_TOKENS, Locale
from contratia.domain.model.value_objects import ClockTime
from contratia.domain.validation import is_valid_phone, normalize_phone, parse_iso_date


class OrderKind(Enum):
    MUSIC = "music"
    BOOTH = "booth"
    DJ = "dj"


class SoundOption(Enum):
    CLIENT = "client"
    BASIC = "basic"
    UPGRADE = "upgrade"
    PENDING = "pending"


class AddonOption(Enum):
    HIRE = "hire"
    NO_HIRE = "no_hire"
    PENDING = "pending"


class EventLocation(Enum):
    INDOOR = "indoor"
    OUTDOOR = "outdoor"
    UNSET = ""


class SetupType(Enum):
    PREMIUM = "premium"
    DELUXE = "deluxe"
    UNSET = ""


class Electrical(Enum):
    V110 = "110v"
    V240 = "240v"
    UNSET = ""


class SetupColor(Enum):
    BLACK = "black"
    WHITE = "white"
    UNSET = ""


class YesNo(Enum):
    YES = "yes"
    NO = "no"


# ---------------------------------------------------------------------------
# Field rules
# ---------------------------------------------------------------------------
BOOTH_SETUP_LEAD_HOURS = 2

DIGITS_ONLY_FIELDS = frozenset({"event_day", "event_year", "contract_number", "guest_count"})

_TRUE_WORDS = frozenset({"true", "yes", "1", "si", "sí", "on"})
_FALSE_WORDS = frozenset({"false", "no", "0", "off", ""})


@dataclass(frozen=True)
class Order:
    """Fields shared by every kind of order.

    All values are kept as the strings the user typed; money fields are
    decimal strings parsed leniently where they are used.
    """

    kind: ClassVar[OrderKind]
    derived_fields: ClassVar[frozenset[str]] = frozenset()

    contract_number: str = "001"
    client_name: str = ""
    client_email: str = ""
    client_phone: str = ""
    event_day: str = ""
    event_month: str = ""  # Spanish lowercase month token
    event_year: str = ""
    total_cost: str = "0.00"
    remaining_balance: str = "0.00"
    address: str = ""
    activity_type: str = ""
    notes: str = ""
    invoice_notes: str = ""
    deposit_applies: bool = True
    locale: Locale = Locale.ES
    parking_spaces: str = "2"

    # --- Computed properties --------------------------------------------------

    @property
    def event_date_iso(self) -> str:
        """``YYYY-MM-DD`` built from the three date parts, or ``""``."""
        if not self.event_day or not self.event_month or not self.event_year:
            return ""
        if self.event_month not in MONTH_TOKENS:
            return ""
        month = MONTH_TOKENS.index(self.event_month) + 1
        return f"{self.event_year}-{month:02d}-{int(self.event_day):02d}"

    @property
    def draft_key(self) -> str:
        return draft_key_for(self.kind)

    # --- Serialization --------------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"kind": self.kind.value}
        for f in dataclasses.fields(self):
            value = getattr(self, f.name)
            data[f.name] = value.value if isinstance(value, Enum) else value
        return data


@dataclass(frozen=True)
class MusicOrder(Order):
    kind: ClassVar[OrderKind] = OrderKind.MUSIC
    derived_fields: ClassVar[frozenset[str]] = frozenset({"remaining_balance"})

    total_cost: str = ""
    parking_spaces: str = "5"
    sound_option: SoundOption = SoundOption.PENDING
    service_description: str = ""
    service_time: str = ""


@dataclass(frozen=True)
class BoothOrder(Order):
    kind: ClassVar[OrderKind] = OrderKind.BOOTH
    derived_fields: ClassVar[frozenset[str]] = frozenset(
        {"remaining_balance", "service_description"}
    )

    photo_booth_selected: bool = False
    video360_selected: bool = False
    speaker_addon: AddonOption = AddonOption.NO_HIRE
    early_setup_addon: AddonOption = AddonOption.NO_HIRE
    branding_addon: AddonOption = AddonOption.NO_HIRE
    location: EventLocation = EventLocation.UNSET
    service_hours: str = "2 horas"
    service_time: str = ""
    service_description: str = ""

    @property
    def setup_time(self) -> ClockTime | None:
        """Crew arrival, a fixed lead ahead of the service time."""
        service_at = ClockTime.try_parse(self.service_time)
        if service_at is None:
            return None
        return service_at.shifted(-BOOTH_SETUP_LEAD_HOURS)

    @property
    def has_addons(self) -> bool:
        return AddonOption.HIRE in (self.speaker_addon, self.early_setup_addon, self.branding_addon)


@dataclass(frozen=True)
class DjOrder(Order):
    kind: ClassVar[OrderKind] = OrderKind.DJ
    derived_fields: ClassVar[frozenset[str]] = frozenset(
        {"duration_text", "deposit50", "balance50", "package_name", "remaining_balance"}
    )

    event_date: str = ""  # ISO date from the date picker
    start_time: str = ""
    end_time: str = ""
    duration_text: str = "0 horas"
    guest_count: str = ""
    venue_name: str = ""
    venue_floor: str = ""
    venue_contact: str = ""
    venue_phone: str = ""
    setup_restrictions: str = ""
    setup_type: SetupType = SetupType.UNSET
    electrical: Electrical = Electrical.UNSET
    is_outdoor: YesNo = YesNo.NO
    surface_type: str = ""
    protection_client_tent: bool = False
    protection_permanent_structure: bool = False
    protection_none: bool = False
    protection_level_area: bool = False
    protection_vehicle_access: bool = False
    package_name: str = ""
    setup_color: SetupColor = SetupColor.UNSET
    deposit50: str = "0.00"
    balance50: str = "0.00"


_ORDER_CLASSES: dict[OrderKind, type[Order]] = {
    OrderKind.MUSIC: MusicOrder,
    OrderKind.BOOTH: BoothOrder,
    OrderKind.DJ: DjOrder,
}


def draft_key_for(kind: OrderKind) -> str:
    return f"draft-{kind.value}"


def new_order(kind: OrderKind, today: date | None = None) -> Order:
    """Fresh order of *kind* with its initial values."""
    today = today or date.today()
    return _ORDER_CLASSES[kind](event_year=str(today.year))


# ---------------------------------------------------------------------------
# Editing
# ---------------------------------------------------------------------------

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")

_FIELD_ALIASES = {
    "event_date_iso": "event_date",
}


def canonical_field_name(name: str) -> str:
    """Accept both ``clientName`` and ``client_name`` spellings."""
    snake = _CAMEL_BOUNDARY.sub("_", name.strip()).lower().replace("-", "_")
    return _FIELD_ALIASES.get(snake, snake)


def field_names(order: Order) -> list[str]:
    return [f.name for f in dataclasses.fields(order)]


def apply_edit(order: Order, field: str, value: Any, today: date | None = None) -> Order:
    """Return a copy of *order* with one user edit applied.

    Unknown fields raise ``ValidationError``.  Edits to engine-owned
    fields are ignored and the order is returned unchanged.
    """
    name = canonical_field_name(field)
    if name not in field_names(order):
        raise ValidationError(f"Unknown field for {order.kind.value} order: {field!r}", field=field)
    if name in order.derived_fields:
        return order

    current = getattr(order, name)
    coerced = _coerce(name, current, value)

    if isinstance(order, DjOrder) and name == "event_date":
        return dataclasses.replace(order, **_date_parts(coerced, today))
    return dataclasses.replace(order, **{name: coerced})


def _coerce(name: str, current: Any, value: Any) -> Any:
    if isinstance(current, bool):
        return parse_bool(value, name)
    if isinstance(current, Enum):
        enum_type = type(current)
        raw = value.value if isinstance(value, Enum) else str(value or "").strip().lower()
        try:
            return enum_type(raw)
        except ValueError:
            allowed = ", ".join(repr(m.value) for m in enum_type)
            raise ValidationError(
                f"Invalid value {value!r} for {name}; expected one of {allowed}", field=name
            ) from None
    text = "" if value is None else str(value)
    if name in DIGITS_ONLY_FIELDS:
        text = re.sub(r"\D", "", text)
    elif name == "event_month":
        text = text.strip().lower()
        if text and text not in MONTH_TOKENS:
            raise ValidationError(
                f"Invalid month {value!r}; expected a Spanish month name such as 'enero'",
                field=name,
            )
    elif name == "client_phone" and is_valid_phone(text):
        text = normalize_phone(text)
    return text


def parse_bool(value: Any, name: str = "value") -> bool:
    if isinstance(value, bool):
        return value
    word = str(value if value is not None else "").strip().lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    raise ValidationError(f"Invalid boolean {value!r} for {name}", field=name)


def _date_parts(iso_value: str, today: date | None) -> dict[str, str]:
    """Keep the dj composite date and the three date parts in sync."""
    if not iso_value.strip():
        today = today or date.today()
        return {"event_date": "", "event_day": "", "event_month": "", "event_year": str(today.year)}
    selected = parse_iso_date(iso_value.strip())
    if selected is None:
        raise ValidationError(f"Invalid date {iso_value!r}, expected YYYY-MM-DD", field="event_date")
    return {
        "event_date": selected.isoformat(),
        "event_day": str(selected.day),
        "event_month": MONTH_TOKENS[selected.month - 1],
        "event_year": str(selected.year),
    }


# ---------------------------------------------------------------------------
# Reconstitution
# ---------------------------------------------------------------------------


def order_from_dict(data: dict[str, Any]) -> Order:
    """Rebuild an order from ``to_dict`` output.

    Unknown keys are ignored and missing or malformed values take the
    kind's initial value, so an old draft never blocks loading.
    """
    try:
        kind = OrderKind(data.get("kind"))
    except ValueError:
        raise ValidationError(f"Unknown order kind: {data.get('kind')!r}", field="kind") from None

    cls = _ORDER_CLASSES[kind]
    defaults = cls()
    values: dict[str, Any] = {}
    for f in dataclasses.fields(cls):
        if f.name not in data:
            continue
        try:
            values[f.name] = _coerce(f.name, getattr(defaults, f.name), data[f.name])
        except ValidationError:
            continue
    # Digits-only filtering is an input rule; legacy contract numbers keep their hyphen.
    if "contract_number" in data and isinstance(data["contract_number"], str):
        values["contract_number"] = data["contract_number"]
    return cls(**values)
