"""Tests for submission validation and its localized messages."""

from datetime import datetime

import pytest

from contratia.application.validate_order import ValidateOrderHandler, validate_order
from contratia.domain.exceptions import OrderValidationError
from contratia.domain.locale import Locale
from contratia.domain.model.order import BoothOrder, DjOrder, MusicOrder, SetupType
from contratia.domain.validation import BUSINESS_TZ

NOW = datetime(2026, 10, 19, 14, 0, tzinfo=BUSINESS_TZ)

COMMON = dict(
    contract_number="042",
    client_name="Ana Rivera",
    client_email="ana@example.com",
    client_phone="787-555-1234",
    activity_type="Boda",
    address="Calle Luna 5, San Juan",
)


def valid_music(**overrides) -> MusicOrder:
    fields = dict(
        COMMON,
        event_day="14", event_month="febrero", event_year="2027",
        service_time="7:00 PM", service_description="Trío romántico",
    )
    fields.update(overrides)
    return MusicOrder(**fields)


def valid_booth(**overrides) -> BoothOrder:
    fields = dict(
        COMMON,
        event_day="14", event_month="febrero", event_year="2027",
        service_time="7:00 PM", photo_booth_selected=True,
    )
    fields.update(overrides)
    return BoothOrder(**fields)


def valid_dj(**overrides) -> DjOrder:
    fields = dict(
        COMMON,
        event_date="2027-02-14", event_day="14", event_month="febrero", event_year="2027",
        start_time="8:00 PM", end_time="12:00 AM",
        venue_name="Hotel Vista", setup_type=SetupType.DELUXE,
    )
    fields.update(overrides)
    return DjOrder(**fields)


class TestValidOrders:

    @pytest.mark.parametrize("order", [valid_music(), valid_booth(), valid_dj()])
    def test_no_errors(self, order):
        assert validate_order(order, NOW) == {}

    def test_handler_passes(self):
        ValidateOrderHandler().handle(valid_music(), NOW)


class TestCommonFields:

    def test_every_common_field(self):
        order = valid_music(
            client_name=" ", client_email="nope", client_phone="123",
            activity_type="", contract_number="",
        )
        errors = validate_order(order, NOW)
        assert set(errors) >= {
            "client_name", "client_email", "client_phone", "activity_type", "contract_number",
        }

    def test_messages_follow_locale(self):
        assert validate_order(valid_music(client_name=""), NOW)["client_name"] == (
            "El nombre del cliente es requerido."
        )
        assert validate_order(valid_music(client_name="", locale=Locale.EN), NOW)["client_name"] == (
            "Client name is required."
        )

    def test_dj_activity_is_event_type(self):
        errors = validate_order(valid_dj(activity_type="", locale=Locale.EN), NOW)
        assert errors["activity_type"] == "Event type is required."


class TestMusicAndBooth:

    def test_past_date(self):
        errors = validate_order(valid_music(event_day="1", event_month="enero", event_year="2026"), NOW)
        assert "event_day" in errors
        assert "service_time" not in errors

    def test_off_grid_time(self):
        assert "service_time" in validate_order(valid_music(service_time="7:10 PM"), NOW)

    def test_today_needs_later_slot(self):
        today = dict(event_day="19", event_month="octubre", event_year="2026")
        assert "service_time" in validate_order(valid_music(service_time="1:00 PM", **today), NOW)
        assert "service_time" not in validate_order(valid_music(service_time="6:00 PM", **today), NOW)

    def test_music_needs_description(self):
        assert "service_description" in validate_order(valid_music(service_description=""), NOW)

    def test_booth_needs_a_service(self):
        errors = validate_order(valid_booth(photo_booth_selected=False), NOW)
        assert "photo_booth_selected" in errors

    def test_address_required(self):
        assert "address" in validate_order(valid_booth(address=""), NOW)


class TestDj:

    def test_bad_times(self):
        errors = validate_order(valid_dj(start_time="", end_time="8:05 PM"), NOW)
        assert {"start_time", "end_time"} <= set(errors)

    def test_past_date_skips_time_checks(self):
        errors = validate_order(valid_dj(event_date="2026-01-01", start_time=""), NOW)
        assert "event_date" in errors
        assert "start_time" not in errors

    def test_venue_and_setup(self):
        errors = validate_order(
            valid_dj(venue_name="", address="", setup_type=SetupType.UNSET, locale=Locale.EN), NOW
        )
        assert errors["venue_name"] == "Venue name is required."
        assert errors["address"] == "Venue address is required."
        assert errors["setup_type"] == "Setup type is required."


class TestHandler:

    def test_raises_with_all_errors(self):
        with pytest.raises(OrderValidationError) as exc_info:
            ValidateOrderHandler().handle(valid_music(client_name="", client_email=""), NOW)
        assert set(exc_info.value.errors) == {"client_name", "client_email"}
        assert "client_email" in str(exc_info.value)
