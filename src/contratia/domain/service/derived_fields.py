"""Derived-field computation engine.

A pure pass over an order that recomputes every engine-owned field from
the user-entered ones.  The caller diffs the result against the input
to learn what changed; nothing is mutated in place, so the engine can
never feed back into itself.
"""

from __future__ import annotations

import dataclasses
import logging
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Callable

from contratia.domain.model.order import (
    AddonOption,
    BoothOrder,
    DjOrder,
    MusicOrder,
    Order,
    SetupType,
    SoundOption,
)
from contratia.domain.model.value_objects import ClockTime, Money
from contratia.domain.pricing import DEFAULT_PRICING, Pricing

logger = logging.getLogger(__name__)

BOOTH_SERVICE_LABELS = (
    ("photo_booth_selected", "PHOTO BOOTH"),
    ("video360_selected", "VIDEO BOOTH 360"),
)

BOOTH_ADDON_LABELS = (
    ("speaker_addon", "Bocina"),
    ("early_setup_addon", "Early Setup"),
    ("branding_addon", "Full Branding"),
)

PACKAGE_NAMES = {
    SetupType.PREMIUM: "Paquete Premium",
    SetupType.DELUXE: "Paquete Deluxe",
}

ZERO_HOURS = "0 horas"

Rule = Callable[[Order], "dict[str, Any]"]


class DerivedFieldEngine:
    """Keeps balances, deposits, durations and generated text in sync."""

    def __init__(self, pricing: Pricing = DEFAULT_PRICING) -> None:
        self._pricing = pricing

    def recompute(self, order: Order) -> Order:
        """Return *order* with every derived field recomputed.

        Each rule writes only its own fields, once.  A rule that fails
        leaves its fields at their previous values.
        """
        updates: dict[str, Any] = {}
        for rule in self._rules_for(order):
            try:
                produced = rule(order)
            except (ArithmeticError, ValueError) as exc:
                logger.warning(
                    "Derivation %s failed for %s order, keeping previous values: %s",
                    rule.__name__, order.kind.value, exc,
                )
                continue
            updates.update(produced)

        changed = {k: v for k, v in updates.items() if getattr(order, k) != v}
        if not changed:
            return order
        return dataclasses.replace(order, **changed)

    def _rules_for(self, order: Order) -> list[Rule]:
        if isinstance(order, MusicOrder):
            return [self._contract_number, self._remaining_balance]
        if isinstance(order, BoothOrder):
            return [self._booth_description, self._remaining_balance]
        if isinstance(order, DjOrder):
            return [self._duration, self._dj_deposit, self._package_name]
        return []

    # --- Rules ----------------------------------------------------------------

    def _remaining_balance(self, order: Order) -> dict[str, Any]:
        total = Money.parse(order.total_cost)
        if isinstance(order, MusicOrder) and order.sound_option is SoundOption.UPGRADE:
            total = total + Money(self._pricing.sound_upgrade)
        if total.is_zero:
            return {"remaining_balance": "0.00"}
        deposit = Money(self._pricing.fixed_deposit) if order.deposit_applies else Money.zero()
        return {"remaining_balance": total.minus_floor_zero(deposit).plain}

    def _dj_deposit(self, order: DjOrder) -> dict[str, Any]:
        total = Money.parse(order.total_cost)
        if order.deposit_applies:
            percent = self._pricing.dj_deposit_percent
            deposit = total.scale(percent)
            balance = total.scale(Decimal("1") - percent)
        else:
            deposit = Money.zero()
            balance = total
        return {
            "deposit50": deposit.plain,
            "balance50": balance.plain,
            "remaining_balance": balance.plain,
        }

    @staticmethod
    def _booth_description(order: BoothOrder) -> dict[str, Any]:
        services = [label for attr, label in BOOTH_SERVICE_LABELS if getattr(order, attr)]
        description = " + ".join(services)
        if description and order.service_hours:
            description += f" - {order.service_hours}"

        addons = [
            label for attr, label in BOOTH_ADDON_LABELS
            if getattr(order, attr) is AddonOption.HIRE
        ]
        if addons:
            description += " + " + " + ".join(addons)
        return {"service_description": description}

    @staticmethod
    def _duration(order: DjOrder) -> dict[str, Any]:
        return {"duration_text": duration_text(order.start_time, order.end_time)}

    @staticmethod
    def _package_name(order: DjOrder) -> dict[str, Any]:
        return {"package_name": PACKAGE_NAMES.get(order.setup_type, "")}

    @staticmethod
    def _contract_number(order: MusicOrder) -> dict[str, Any]:
        if "-" not in order.contract_number:
            return {}
        return {"contract_number": order.contract_number.rsplit("-", 1)[1]}


def duration_text(start: str, end: str) -> str:
    """Hours between two ``H:MM AM|PM`` times, overnight when end <= start."""
    start_at = ClockTime.try_parse(start)
    end_at = ClockTime.try_parse(end)
    if start_at is None or end_at is None:
        return ZERO_HOURS

    minutes = end_at.minutes_since_midnight - start_at.minutes_since_midnight
    if minutes <= 0:
        minutes += 24 * 60
    hours = (Decimal(minutes) / Decimal(60)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    text = str(hours)
    if text.endswith(".0"):
        text = text[:-2]
    return f"{text} horas"


def diff(before: Order, after: Order) -> dict[str, Any]:
    """Minimal patch: the fields whose values differ between two orders."""
    if type(before) is not type(after):
        raise TypeError("Cannot diff orders of different kinds")
    return {
        f.name: getattr(after, f.name)
        for f in dataclasses.fields(after)
        if getattr(before, f.name) != getattr(after, f.name)
    }
