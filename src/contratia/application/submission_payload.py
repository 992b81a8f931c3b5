"""Flattened webhook payloads, one shape per order kind.

The remote document workflow fills its templates from these keys, so
the Spanish field vocabulary is part of the wire format and must not
be renamed.
"""

from __future__ import annotations

from datetime import date
from typing import Any

from contratia.domain.locale import catalog_for, format_long_date
from contratia.domain.model.order import (
    AddonOption,
    BoothOrder,
    DjOrder,
    Electrical,
    EventLocation,
    MusicOrder,
    Order,
    SetupType,
    YesNo,
)
from contratia.domain.model.value_objects import Money

MARK = "X"
BLANK_LINE = "___________________"
NO_SETUP_TIME = "---"
INVALID_SETUP_TIME = "Hora invalida"


def build_payload(order: Order, today: date | None = None) -> dict[str, Any]:
    today = today or date.today()
    if isinstance(order, MusicOrder):
        return _music_payload(order, today)
    if isinstance(order, BoothOrder):
        return _booth_payload(order, today)
    if isinstance(order, DjOrder):
        return _dj_payload(order, today)
    raise TypeError(f"No payload shape for {type(order).__name__}")


def _mark(selected: bool) -> str:
    return MARK if selected else ""


def _amount(text: str) -> str:
    return Money.parse(text).plain


def _event_date(order: Order) -> str:
    return catalog_for(order.locale).format_date(order.event_day, order.event_month, order.event_year)


def _music_payload(order: MusicOrder, today: date) -> dict[str, Any]:
    return {
        "contract_type": order.kind.value,
        "nombre_cliente": order.client_name,
        "email_cliente": order.client_email,
        "telefono_cliente": order.client_phone,
        "dia_evento": order.event_day,
        "mes_evento": order.event_month,
        "ano_evento": order.event_year,
        "direccion_evento": order.address,
        "tipo_actividad": order.activity_type,
        "hora_servicio": order.service_time,
        "notas_contrato": order.notes,
        "notas_factura": order.invoice_notes,
        "total_servicios": _amount(order.total_cost),
        "balance_restante": _amount(order.remaining_balance),
        "aplica_deposito": order.deposit_applies,
        "idioma": order.locale.value,
        "numero_contrato": order.contract_number,
        "ano_contrato": str(today.year),
        "servicio_contratado": order.service_description,
        "opcion_sonido": order.sound_option.value,
        "cantidad_estacionamientos": order.parking_spaces,
    }


def _setup_time(order: BoothOrder) -> str:
    if not order.service_time:
        return NO_SETUP_TIME
    setup_at = order.setup_time
    return str(setup_at) if setup_at else INVALID_SETUP_TIME


def _booth_payload(order: BoothOrder, today: date) -> dict[str, Any]:
    return {
        "ano_contrato": str(today.year),
        "numero_contrato": order.contract_number,
        "fecha_emision": f"{today.day}/{today.month}/{today.year}",
        "fecha_evento": _event_date(order),
        "nombre_cliente": order.client_name,
        "email_cliente": order.client_email,
        "telefono_cliente": order.client_phone,
        "dia_evento": order.event_day,
        "mes_evento": order.event_month,
        "ano_evento": order.event_year,
        "servicio_contratado": order.service_description,
        "hora_montaje": _setup_time(order),
        "hora_servicio": order.service_time,
        "duracion_servicio": order.service_hours,
        "servicio_photo_booth": _mark(order.photo_booth_selected),
        "servicio_video_booth_360": _mark(order.video360_selected),
        "bocina_photo": _mark(order.speaker_addon is AddonOption.HIRE),
        "early_setup_video": _mark(order.early_setup_addon is AddonOption.HIRE),
        "branding_photo": _mark(order.branding_addon is AddonOption.HIRE),
        "ubicacion_interior": _mark(order.location is EventLocation.INDOOR),
        "ubicacion_exterior": _mark(order.location is EventLocation.OUTDOOR),
        "direccion_evento": order.address,
        "tipo_actividad": order.activity_type,
        "cantidad_estacionamientos": order.parking_spaces,
        "total_servicios": _amount(order.total_cost),
        "balance_restante": _amount(order.remaining_balance),
        "notas_contrato": order.notes,
        "notas_factura": order.invoice_notes,
        "aplica_deposito": order.deposit_applies,
        "idioma": order.locale.value,
    }


def _dj_payload(order: DjOrder, today: date) -> dict[str, Any]:
    outdoor = order.is_outdoor is YesNo.YES
    placeholders = {
        "ano_contrato": str(today.year),
        "numero_contrato": order.contract_number,
        "fecha_contrato": format_long_date(order.locale, today),
        "nombre_cliente": order.client_name,
        "telefono_cliente": order.client_phone,
        "tipo_evento": order.activity_type,
        "fecha_evento": _event_date(order),
        "dia_evento": order.event_day,
        "mes_evento": order.event_month,
        "ano_evento": order.event_year,
        "hora_inicio": order.start_time,
        "hora_fin": order.end_time,
        "duracion_total": order.duration_text,
        "numero_invitados": order.guest_count,
        "venue_nombre": order.venue_name,
        "venue_direccion": order.address,
        "piso_evento": order.venue_floor or BLANK_LINE,
        "contacto_venue": order.venue_contact or BLANK_LINE,
        "telefono_venue": order.venue_phone or BLANK_LINE,
        "restricciones_horario": order.setup_restrictions or BLANK_LINE,
        "montaje_premium": _mark(order.setup_type is SetupType.PREMIUM),
        "montaje_deluxe": _mark(order.setup_type is SetupType.DELUXE),
        "electrico_110v": _mark(order.electrical is Electrical.V110),
        "electrico_240v": _mark(order.electrical is Electrical.V240),
        "tipo_superficie": order.surface_type if outdoor else "",
        "carpa_cliente": _mark(outdoor and order.protection_client_tent),
        "estructura_permanente": _mark(outdoor and order.protection_permanent_structure),
        "sin_proteccion": _mark(outdoor and order.protection_none),
        "area_nivelada": _mark(outdoor and order.protection_level_area),
        "acceso_vehiculos": _mark(outdoor and order.protection_vehicle_access),
        "nombre_paquete": order.package_name,
        "color_setup": order.setup_color.value,
        "cantidad_estacionamientos": order.parking_spaces,
        "aplica_deposito": order.deposit_applies,
        "honorarios_total": _amount(order.total_cost),
        "deposito_50": order.deposit50 or "0.00",
        "balance_50": order.balance50 or "0.00",
        "notas_factura": order.invoice_notes,
        "notas_adicionales_contrato": order.notes,
    }
    return {
        "formulario": "contrato_dj",
        "idioma": order.locale.value,
        "placeholders": placeholders,
    }
