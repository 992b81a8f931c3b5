"""Application service: Validate Order use case.

Produces field-keyed, localized error messages.  Validation never
touches the order; it only decides whether it may be submitted.
"""

from __future__ import annotations

from datetime import datetime

from contratia.domain.exceptions import OrderValidationError
from contratia.domain.locale import catalog_for
from contratia.domain.model.order import BoothOrder, DjOrder, MusicOrder, Order, SetupType
from contratia.domain.validation import (
    is_valid_date,
    is_valid_email,
    is_valid_phone,
    is_valid_time_slot,
)


def validate_order(order: Order, now: datetime | None = None) -> dict[str, str]:
    """Return ``field -> message`` for every invalid field (empty if valid)."""
    form = catalog_for(order.locale).form
    errors: dict[str, str] = {}

    if not order.client_name.strip():
        errors["client_name"] = form.err_client_name
    if not is_valid_email(order.client_email):
        errors["client_email"] = form.err_email
    if not is_valid_phone(order.client_phone):
        errors["client_phone"] = form.err_phone
    if not order.activity_type.strip():
        errors["activity_type"] = (
            form.err_event_type if isinstance(order, DjOrder) else form.err_activity_type
        )
    if not order.contract_number.strip():
        errors["contract_number"] = form.err_contract_number

    if isinstance(order, (MusicOrder, BoothOrder)):
        if not order.address.strip():
            errors["address"] = form.err_address
        event_date = order.event_date_iso
        if not is_valid_date(event_date, now):
            errors["event_day"] = form.err_past_date
        elif not is_valid_time_slot(event_date, order.service_time, now):
            errors["service_time"] = form.err_time_slot
        if isinstance(order, MusicOrder) and not order.service_description.strip():
            errors["service_description"] = form.err_description
        if isinstance(order, BoothOrder) and not (order.photo_booth_selected or order.video360_selected):
            errors["photo_booth_selected"] = form.err_booth_service

    elif isinstance(order, DjOrder):
        if not is_valid_date(order.event_date, now):
            errors["event_date"] = form.err_past_date
        else:
            if not is_valid_time_slot(order.event_date, order.start_time, now):
                errors["start_time"] = form.err_start_slot
            if not is_valid_time_slot(order.event_date, order.end_time, now):
                errors["end_time"] = form.err_end_slot
        if not order.venue_name.strip():
            errors["venue_name"] = form.err_venue_name
        if not order.address.strip():
            errors["address"] = form.err_venue_address
        if order.setup_type is SetupType.UNSET:
            errors["setup_type"] = form.err_setup_type

    return errors


class ValidateOrderHandler:

    def handle(self, order: Order, now: datetime | None = None) -> None:
        """Raise ``OrderValidationError`` if *order* cannot be submitted."""
        errors = validate_order(order, now)
        if errors:
            raise OrderValidationError(errors)
