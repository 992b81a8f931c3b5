"""Immutable business configuration injected into the engine and builder.

Alternate pricing can be passed in tests without touching any logic.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Pricing:
    """All prices are in USD."""

    fixed_deposit: Decimal = Decimal("125.00")  # music and booth
    dj_deposit_percent: Decimal = Decimal("0.5")
    sound_upgrade: Decimal = Decimal("150.00")

    same_day_change_fee: Decimal = Decimal("100.00")
    date_change_fee: Decimal = Decimal("50.00")
    outdoor_tent_fee: Decimal = Decimal("150.00")


@dataclass(frozen=True)
class CompanyProfile:
    """Provider identity printed on every contract and invoice."""

    brand_title: str = "D' SHOW EVENTS"
    legal_name: str = "D' SHOW EVENTS LLC"
    email: str = "info@dshowevents.com"
    phone: str = "(787) 329-6680"
    postal_address: str = "PO BOX 4083, Bayamón, PR 00958"
    socials: str = "Instagram: @dshowevents | Facebook: D' Show Events | TikTok: @dshowevents"
    ath_movil: str = "/DSHOWEVENTS"
    checks_payable_to: str = "D' SHOW EVENTS LLC"
    default_contract_number: str = "DSE-2025-000"
    history_max: int = 50


DEFAULT_PRICING = Pricing()
DEFAULT_COMPANY = CompanyProfile()
