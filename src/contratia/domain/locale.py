"""Locale catalog: every user-facing string plus two formatters.

The catalog is a typed mapping from the closed ``Locale`` enum to a
``LocaleCatalog`` record, so a missing label is an attribute error at
import time, never a silent gap at render time.  Locale only affects
rendering; order data stays canonical (months are always stored as
Spanish lowercase tokens).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Callable, Mapping


class Locale(Enum):
    ES = "es"
    EN = "en"


MONTH_TOKENS = (
    "enero", "febrero", "marzo", "abril", "mayo", "junio",
    "julio", "agosto", "septiembre", "octubre", "noviembre", "diciembre",
)

ENGLISH_MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

_ES_TO_EN_MONTHS = dict(zip(MONTH_TOKENS, ENGLISH_MONTHS))

DEFAULT_PARKING_SPACES = "5"


@dataclass(frozen=True)
class FormLabels:
    """Field labels and validation messages shown by the order form."""

    contract_number: str
    client_name: str
    client_email: str
    client_phone: str
    activity_type: str
    event_date: str
    service_time: str
    start_time: str
    end_time: str
    duration: str
    address: str
    venue_name: str
    setup_type: str
    service_description: str
    total_cost: str
    remaining_balance: str
    deposit50: str
    balance50: str
    deposit_applies: str
    parking_spaces: str
    # validation messages
    err_required: str
    err_client_name: str
    err_email: str
    err_phone: str
    err_activity_type: str
    err_event_type: str
    err_contract_number: str
    err_address: str
    err_venue_address: str
    err_past_date: str
    err_time_slot: str
    err_start_slot: str
    err_end_slot: str
    err_description: str
    err_booth_service: str
    err_venue_name: str
    err_setup_type: str
    err_form_invalid: str
    err_submission: str
    err_suggestion: str


@dataclass(frozen=True)
class DocumentLabels:
    """Every string that appears in the rendered contract and invoice.

    Templates containing ``{}`` fields are filled by the builder.
    """

    contract_title: str
    client_name_placeholder: str
    intro1: str
    intro2: str
    not_provided: str
    phone: str
    no_notes: str

    c_deposit_title: str
    c_deposit_p1_with_deposit: str  # {deposit}
    c_deposit_p2_with_deposit: str
    c_deposit_p3_with_deposit: str
    c_deposit_b1_with_deposit: str
    c_deposit_b2_with_deposit: str
    c_deposit_p4_with_deposit: str
    c_deposit_p1_no_deposit: str
    c_deposit_p2_no_deposit: str
    c_deposit_p3_no_deposit: str
    c_deposit_b1_no_deposit: str
    c_deposit_b2_no_deposit: str
    c_deposit_p4_no_deposit: str

    c_punctuality_title: str
    c_punctuality_p1: str  # {fee}
    c_punctuality_p2: str

    c_sound_title: str
    c_sound_opt_client: str
    c_sound_opt_basic: str
    c_sound_opt_upgrade: str  # {surcharge}
    c_sound_opt_pending_p1: str
    c_sound_opt_pending_b1: str
    c_sound_opt_pending_b2: str
    c_sound_opt_pending_b3: str  # {surcharge}
    c_sound_p2: str

    c_access_title: str
    c_access_p1: str  # {spaces}

    c_reschedule_title: str
    c_reschedule_p1: str  # {fee}
    c_reschedule_p2: str

    c_staff_images_title: str
    c_staff_images_p1: str
    c_safety_title: str
    c_safety_p1: str

    c_comms_title: str
    c_comms_provider: str
    c_comms_client: str
    c_comms_last: str

    c_client_content_title: str
    c_client_content_p1: str
    c_client_content_p2: str

    c_liability_title: str
    c_liability_p1: str
    c_indemnification_title: str
    c_indemnification_p1: str
    c_force_majeure_title: str
    c_force_majeure_p1: str
    c_jurisdiction_title: str
    c_jurisdiction_p1: str

    summary_details_title: str
    summary_service: str
    summary_time: str
    summary_total_cost: str
    summary_balance: str
    summary_address: str
    summary_activity: str
    summary_date: str
    summary_notes: str

    summary_payment_title: str
    summary_deposit: str
    summary_parking: str
    summary_ath_movil: str
    summary_checks: str

    booth_details_title: str
    booth_services: str
    booth_hours: str
    booth_setup_time: str
    booth_location: str
    booth_addons: str
    booth_location_indoor: str
    booth_location_outdoor: str

    dj_details_title: str
    dj_schedule: str
    dj_guests: str
    dj_venue: str
    dj_floor: str
    dj_venue_contact: str
    dj_restrictions: str
    dj_package: str
    dj_color: str
    dj_electrical: str
    dj_outdoor: str
    dj_surface: str
    dj_protection: str
    dj_protection_tent: str
    dj_protection_structure: str
    dj_protection_none: str  # {fee}
    dj_protection_level_area: str
    dj_protection_vehicle_access: str
    yes: str
    no: str
    color_black: str
    color_white: str

    c_confirmation_title: str
    c_confirmation_p1: str  # {date}

    signature_client: str  # {name}
    signature_provider: str

    invoice_title: str
    invoice_subtitle: str  # {number}
    invoice_bill_to: str
    invoice_from: str
    invoice_number: str
    invoice_issue_date: str
    invoice_event_date: str
    invoice_table_desc: str
    invoice_table_total: str
    invoice_service_desc: str
    invoice_service_desc_placeholder: str
    invoice_sound_upgrade: str
    invoice_subtotal: str
    invoice_deposit_paid: str
    invoice_balance_due: str
    invoice_notes: str
    invoice_notes_placeholder: str
    invoice_thank_you: str
    invoice_footer: str  # {email}


@dataclass(frozen=True)
class LocaleCatalog:
    locale: Locale
    form: FormLabels
    doc: DocumentLabels
    format_date: Callable[[str, str, str], str]
    format_parking: Callable[[str], str]


# --- Formatters ---------------------------------------------------------------


def _format_date_es(day: str, month: str, year: str) -> str:
    if not day or not month or not year:
        return "DD de Mes de AAAA"
    return f"{day} de {month[:1].upper()}{month[1:]} del {year}"


def _ordinal_suffix(day: int) -> str:
    if day in (1, 21, 31):
        return "st"
    if day in (2, 22):
        return "nd"
    if day in (3, 23):
        return "rd"
    return "th"


def _format_date_en(day: str, month: str, year: str) -> str:
    if not day or not month or not year:
        return "Month DDth, YYYY"
    try:
        d = int(day)
    except ValueError:
        return "Month DD, YYYY"
    english_month = _ES_TO_EN_MONTHS.get(month.lower(), "Month")
    return f"{english_month} {d}{_ordinal_suffix(d)}, {year}"


def _parking_count(spaces: str) -> str:
    return (spaces or "").strip() or DEFAULT_PARKING_SPACES


def _format_parking_es(spaces: str) -> str:
    count = _parking_count(spaces)
    return f"{count} espacio" if count == "1" else f"{count} espacios"


def _format_parking_en(spaces: str) -> str:
    count = _parking_count(spaces)
    return f"{count} space" if count == "1" else f"{count} spaces"


# --- Spanish ------------------------------------------------------------------

_ES_FORM = FormLabels(
    contract_number="No. de Contrato",
    client_name="Nombre Completo",
    client_email="Email",
    client_phone="Teléfono",
    activity_type="Tipo de Actividad",
    event_date="Fecha del Evento",
    service_time="Hora del Servicio",
    start_time="Hora de Inicio",
    end_time="Hora de Finalización",
    duration="Duración Total",
    address="Dirección del Evento",
    venue_name="Nombre del Venue",
    setup_type="Tipo de Montaje Requerido",
    service_description="Descripción del Servicio",
    total_cost="Costo Total (USD)",
    remaining_balance="Balance Restante (USD)",
    deposit50="Depósito (50%)",
    balance50="Balance Restante (50%)",
    deposit_applies="Aplica Depósito para reservar",
    parking_spaces="Espacios de Estacionamiento",
    err_required="Este campo es requerido.",
    err_client_name="El nombre del cliente es requerido.",
    err_email="Introduce un correo electrónico válido.",
    err_phone="Introduce un número válido de Puerto Rico/USA (10 dígitos o +1).",
    err_activity_type="El tipo de actividad es requerido.",
    err_event_type="El tipo de evento es requerido.",
    err_contract_number="El No. de Contrato es requerido.",
    err_address="La dirección del evento es requerida.",
    err_venue_address="La dirección del venue es requerida.",
    err_past_date="La fecha no puede ser en el pasado.",
    err_time_slot="Selecciona un horario válido en el futuro y en intervalos de 15 minutos.",
    err_start_slot="La hora de inicio debe ser futura y en un intervalo de 15 min.",
    err_end_slot="La hora de fin debe ser futura y en un intervalo de 15 min.",
    err_description="La descripción del servicio es requerida.",
    err_booth_service="Debe seleccionar al menos un Tipo de Servicio.",
    err_venue_name="El nombre del venue es requerido.",
    err_setup_type="El tipo de montaje es requerido.",
    err_form_invalid="Por favor, corrige los errores en el formulario antes de continuar.",
    err_submission="Se produjo un error al generar el contrato.",
    err_suggestion="No se pudo generar la sugerencia. Intenta de nuevo.",
)

_ES_DOC = DocumentLabels(
    contract_title="CONTRATO DE SERVICIOS",
    client_name_placeholder="Nombre del Cliente",
    intro1="Por una parte, ",
    intro2=(
        ", de ahora en adelante denominado \"CLIENTE\", y contratando los servicios de "
        "D' Show Events, de ahora en adelante el \"PROVEEDOR\", acuerdan los siguientes términos:"
    ),
    not_provided="No provisto",
    phone="Teléfono",
    no_notes="Sin notas adicionales.",

    c_deposit_title="DEPÓSITO Y PAGO FINAL",
    c_deposit_p1_with_deposit=(
        "El cliente acuerda realizar un depósito de {deposit} para reservar los servicios "
        "de D' Show Events. Este depósito no es reembolsable."
    ),
    c_deposit_p2_with_deposit=(
        "El balance restante se pagará en su totalidad ANTES de comenzar los servicios "
        "contratados en la fecha del evento."
    ),
    c_deposit_p3_with_deposit="En caso de cancelación por parte del cliente, se aplicarán los siguientes cargos:",
    c_deposit_b1_with_deposit=(
        "Menos de 5 días calendario antes del evento: se facturará un 50% del costo total "
        "(acreditando el depósito)."
    ),
    c_deposit_b2_with_deposit=(
        "48 horas o menos antes del evento: se facturará un 75% del costo total (acreditando el depósito)."
    ),
    c_deposit_p4_with_deposit="Si el proveedor cancela por cualquier razón, se devolverá al cliente el 100% del depósito.",
    c_deposit_p1_no_deposit=(
        "No se requiere depósito para reservar. La firma de este contrato formaliza la reserva "
        "de la fecha y los servicios."
    ),
    c_deposit_p2_no_deposit=(
        "El pago del 100% del costo total se realizará en su totalidad ANTES de comenzar los "
        "servicios contratados en la fecha del evento."
    ),
    c_deposit_p3_no_deposit=(
        "En caso de cancelación por parte del cliente, se aplicarán los siguientes cargos administrativos:"
    ),
    c_deposit_b1_no_deposit="Menos de 5 días calendario antes del evento: cargo del 50% del costo total.",
    c_deposit_b2_no_deposit="48 horas o menos antes del evento: cargo del 75% del costo total.",
    c_deposit_p4_no_deposit=(
        "Si el PROVEEDOR cancela, este contrato quedará sin efecto y el cliente no incurrirá en ningún cargo."
    ),

    c_punctuality_title="PUNTUALIDAD Y CAMBIOS DE HORARIO",
    c_punctuality_p1=(
        "La puntualidad del cliente es esencial. Si el cliente no cumple con la hora estipulada, "
        "el servicio podrá verse reducido. Si el retraso impide completamente la prestación, el "
        "cliente estará obligado al pago completo. Cambios de horario el mismo día del evento "
        "conllevan un cargo administrativo de {fee}."
    ),
    c_punctuality_p2=(
        "D' Show Events no ofrecerá reembolsos por servicios no prestados debido a retrasos del "
        "cliente, ni por causas externas inevitables (tránsito, condiciones imprevistas). No "
        "obstante, el proveedor hará esfuerzos razonables por adaptarse."
    ),

    c_sound_title="SONIDO",
    c_sound_opt_client=(
        "Opción seleccionada: Sonido provisto por el cliente. El cliente suple el sistema de "
        "sonido, incluyendo dos (2) micrófonos con stands, garantizando su óptimo funcionamiento."
    ),
    c_sound_opt_basic=(
        "Opción seleccionada: Sonido básico provisto por D' Show Events. Sistema compacto "
        "profesional para hasta 25 personas. Incluido sin costo adicional."
    ),
    c_sound_opt_upgrade=(
        "Opción seleccionada: Upgrade a sonido profesional grande. Sistema de mayor potencia "
        "para eventos grandes. Cargo adicional de {surcharge} USD."
    ),
    c_sound_opt_pending_p1="ACCIÓN REQUERIDA: Por favor, marque con una (X) la opción de sonido de su preferencia:",
    c_sound_opt_pending_b1=(
        "[__] Opción 1: Sonido provisto por el cliente. El cliente suple el sistema de sonido, "
        "incluyendo dos (2) micrófonos con stands."
    ),
    c_sound_opt_pending_b2=(
        "[__] Opción 2: Sonido básico (incluido). Sistema compacto profesional para hasta 25 personas."
    ),
    c_sound_opt_pending_b3=(
        "[__] Opción 3: Upgrade a sonido profesional (+{surcharge} USD). Sistema de mayor "
        "potencia para eventos grandes."
    ),
    c_sound_p2=(
        "El proveedor no se hace responsable por fallas técnicas o eléctricas fuera de su "
        "control. Si el daño es causado por negligencia directa del proveedor, este asumirá los costos."
    ),

    c_access_title="ACCESO Y ESTACIONAMIENTO",
    c_access_p1=(
        "El cliente cubrirá los gastos de estacionamiento del personal del proveedor ({spaces}) "
        "y gestionará los permisos de acceso. Si no se realizan estas gestiones, los "
        "retrasos o limitaciones que resulten no serán responsabilidad del proveedor."
    ),

    c_reschedule_title="CAMBIOS DE FECHA",
    c_reschedule_p1=(
        "El cliente podrá realizar un (1) cambio de fecha sin costo adicional, sujeto a la "
        "disponibilidad del PROVEEDOR, siempre que se notifique por escrito con más de 30 días "
        "de antelación a la fecha original del evento. Cambios adicionales o solicitados con "
        "menos de 30 días de antelación conllevan un cargo administrativo de {fee}."
    ),
    c_reschedule_p2=(
        "Toda cancelación o solicitud de cambio de fecha debe realizarse por escrito (email o "
        "mensaje confirmado) para ser válida."
    ),

    c_staff_images_title="DERECHO DE USO DE IMÁGENES DEL PERSONAL",
    c_staff_images_p1=(
        "El proveedor podrá utilizar fotografías o videos que incluyan exclusivamente a su "
        "personal (músicos, talentos, artistas) para promoción y redes, garantizando la "
        "privacidad del cliente."
    ),
    c_safety_title="SEGURIDAD DEL PERSONAL",
    c_safety_p1=(
        "La seguridad del personal de D' Show Events es prioritaria. Ante cualquier situación "
        "de acoso, hostilidad o peligro, el personal podrá retirarse sin penalidad ni reembolso."
    ),

    c_comms_title="COMUNICACIONES OFICIALES",
    c_comms_provider="Contacto del Proveedor",
    c_comms_client="Contacto del Cliente",
    c_comms_last="Las notificaciones serán válidas una vez confirmada su recepción por cualquiera de las partes.",

    c_client_content_title="CONTENIDO GENERADO POR EL CLIENTE",
    c_client_content_p1=(
        "El cliente y sus invitados pueden grabar o compartir libremente durante el evento. "
        "Se agradece (pero no se requiere) etiquetar a @dshowevents al publicar contenido en redes."
    ),
    c_client_content_p2="Nuestras Redes:",

    c_liability_title="LIMITACIÓN DE RESPONSABILIDAD",
    c_liability_p1=(
        "La responsabilidad total del proveedor no excederá el monto pagado por el cliente. No "
        "se responderá por daños indirectos, pérdida de ganancias, o problemas técnicos del "
        "venue o terceros."
    ),
    c_indemnification_title="INDEMNIZACIÓN",
    c_indemnification_p1=(
        "El cliente mantendrá indemne a D' Show Events LLC frente a cualquier reclamo o daño "
        "derivado de actos, omisiones o incumplimientos del cliente o sus invitados."
    ),
    c_force_majeure_title="FUERZA MAYOR",
    c_force_majeure_p1=(
        "Ninguna parte será responsable si el incumplimiento resulta de causas fuera de su "
        "control razonable (huracanes, apagones, pandemias, disturbios, restricciones "
        "gubernamentales, etc.). La parte afectada notificará dentro de 48 horas. Podrán "
        "reprogramar dentro de 30 días o, si no es posible, el proveedor reembolsará el "
        "depósito menos los gastos incurridos (máx. 25%)."
    ),
    c_jurisdiction_title="JURISDICCIÓN Y LEGISLACIÓN APLICABLE",
    c_jurisdiction_p1=(
        "Este contrato se regirá por las leyes del Estado Libre Asociado de Puerto Rico. "
        "Cualquier disputa será tratada primero mediante comunicación directa, luego "
        "mediación, y finalmente ante los tribunales de San Juan o Bayamón."
    ),

    summary_details_title="RESUMEN DE DETALLES DEL SERVICIO",
    summary_service="Servicio contratado:",
    summary_time="Hora de los servicios:",
    summary_total_cost="Costo total:",
    summary_balance="Balance restante:",
    summary_address="Dirección del evento:",
    summary_activity="Tipo de actividad:",
    summary_date="Fecha del evento:",
    summary_notes="Notas:",

    summary_payment_title="RESUMEN DE DEPÓSITO Y PAGO",
    summary_deposit="Depósito:",
    summary_parking="Estacionamientos requeridos:",
    summary_ath_movil="ATH Móvil Business:",
    summary_checks="Cheques a nombre de:",

    booth_details_title="DETALLES DEL BOOTH",
    booth_services="Servicios:",
    booth_hours="Horas de servicio:",
    booth_setup_time="Hora de montaje:",
    booth_location="Ubicación del evento:",
    booth_addons="Servicios adicionales:",
    booth_location_indoor="Interior",
    booth_location_outdoor="Exterior",

    dj_details_title="DETALLES DEL EVENTO Y DEL VENUE",
    dj_schedule="Horario:",
    dj_guests="Número de invitados:",
    dj_venue="Venue:",
    dj_floor="Piso del evento:",
    dj_venue_contact="Contacto del venue:",
    dj_restrictions="Restricciones de horario para montaje:",
    dj_package="Paquete:",
    dj_color="Color del setup:",
    dj_electrical="Requisitos eléctricos:",
    dj_outdoor="Evento al aire libre:",
    dj_surface="Tipo de superficie:",
    dj_protection="Protección disponible:",
    dj_protection_tent="Carpa/toldo proporcionado por cliente",
    dj_protection_structure="Estructura permanente (gazebo/pérgola)",
    dj_protection_none="Sin protección (+{fee} carpa D Show)",
    dj_protection_level_area="Área nivelada y con drenaje adecuado",
    dj_protection_vehicle_access="Acceso para vehículos de instalación",
    yes="Sí",
    no="No",
    color_black="Negro",
    color_white="Blanco",

    c_confirmation_title="CONFIRMACIÓN Y FIRMAS",
    c_confirmation_p1=(
        "Yo, ______________________, certifico en la fecha de hoy ____________ que entiendo y "
        "acepto los términos y condiciones establecidos en este documento, formalizando la "
        "contratación de los servicios para el día {date}."
    ),

    signature_client="Firma de {name} / Representante",
    signature_provider="Representante Autorizado",

    invoice_title="FACTURA",
    invoice_subtitle="Anexo al Contrato #{number}",
    invoice_bill_to="FACTURAR A",
    invoice_from="DE",
    invoice_number="No. Factura",
    invoice_issue_date="Fecha de Emisión",
    invoice_event_date="Fecha del Evento",
    invoice_table_desc="Descripción",
    invoice_table_total="Total",
    invoice_service_desc="Servicios Artísticos y Técnicos",
    invoice_service_desc_placeholder="Según descrito en contrato.",
    invoice_sound_upgrade="Upgrade de Sonido Profesional",
    invoice_subtotal="Subtotal",
    invoice_deposit_paid="Depósito Pagado",
    invoice_balance_due="Balance Restante",
    invoice_notes="Notas Adicionales",
    invoice_notes_placeholder=(
        "El balance restante debe ser saldado en su totalidad antes del comienzo del servicio "
        "en la fecha del evento."
    ),
    invoice_thank_you="¡Gracias por elegir a D' Show Events!",
    invoice_footer="Para preguntas sobre esta factura, contáctenos en {email}",
)

# --- English ------------------------------------------------------------------

_EN_FORM = FormLabels(
    contract_number="Contract No.",
    client_name="Full Name",
    client_email="Email",
    client_phone="Phone",
    activity_type="Activity Type",
    event_date="Event Date",
    service_time="Service Time",
    start_time="Start Time",
    end_time="End Time",
    duration="Total Duration",
    address="Event Address",
    venue_name="Venue Name",
    setup_type="Required Setup Type",
    service_description="Service Description",
    total_cost="Total Cost (USD)",
    remaining_balance="Remaining Balance (USD)",
    deposit50="Deposit (50%)",
    balance50="Remaining Balance (50%)",
    deposit_applies="Deposit Required to Book",
    parking_spaces="Parking Spaces",
    err_required="This field is required.",
    err_client_name="Client name is required.",
    err_email="Enter a valid email address.",
    err_phone="Enter a valid Puerto Rico/USA number (10 digits or +1).",
    err_activity_type="Activity type is required.",
    err_event_type="Event type is required.",
    err_contract_number="Contract number is required.",
    err_address="Event address is required.",
    err_venue_address="Venue address is required.",
    err_past_date="The date cannot be in the past.",
    err_time_slot="Select a valid future time in 15-minute intervals.",
    err_start_slot="Start time must be in the future and on a 15-minute interval.",
    err_end_slot="End time must be in the future and on a 15-minute interval.",
    err_description="Service description is required.",
    err_booth_service="Select at least one Service Type.",
    err_venue_name="Venue name is required.",
    err_setup_type="Setup type is required.",
    err_form_invalid="Please fix the errors in the form before continuing.",
    err_submission="An error occurred while generating the contract.",
    err_suggestion="Could not generate the suggestion. Please try again later.",
)

_EN_DOC = DocumentLabels(
    contract_title="SERVICE AGREEMENT",
    client_name_placeholder="Client Name",
    intro1="This agreement is made between ",
    intro2=(
        ", hereinafter referred to as the \"CLIENT\", and D' Show Events, hereinafter referred "
        "to as the \"PROVIDER\". Both parties agree to the following terms:"
    ),
    not_provided="Not provided",
    phone="Phone",
    no_notes="No additional notes.",

    c_deposit_title="DEPOSIT AND FINAL PAYMENT",
    c_deposit_p1_with_deposit=(
        "The CLIENT agrees to make a non-refundable deposit of {deposit} to reserve the "
        "services of D' Show Events."
    ),
    c_deposit_p2_with_deposit=(
        "The remaining balance must be paid in full BEFORE the contracted services begin on the event date."
    ),
    c_deposit_p3_with_deposit="In case of cancellation by the CLIENT, the following charges will apply:",
    c_deposit_b1_with_deposit=(
        "Less than 5 calendar days before the event: 50% of the total cost will be billed (deposit credited)."
    ),
    c_deposit_b2_with_deposit=(
        "48 hours or less before the event: 75% of the total cost will be billed (deposit credited)."
    ),
    c_deposit_p4_with_deposit="If the PROVIDER cancels for any reason, 100% of the deposit will be returned to the CLIENT.",
    c_deposit_p1_no_deposit=(
        "No deposit is required to book. Signing this contract formalizes the reservation of "
        "the date and services."
    ),
    c_deposit_p2_no_deposit=(
        "100% of the total cost must be paid in full BEFORE the contracted services begin on the event date."
    ),
    c_deposit_p3_no_deposit="In case of cancellation by the CLIENT, the following administrative charges will apply:",
    c_deposit_b1_no_deposit="Less than 5 calendar days before the event: a charge of 50% of the total cost.",
    c_deposit_b2_no_deposit="48 hours or less before the event: a charge of 75% of the total cost.",
    c_deposit_p4_no_deposit="If the PROVIDER cancels, this contract will be void, and the CLIENT will incur no charges.",

    c_punctuality_title="PUNCTUALITY AND SCHEDULE CHANGES",
    c_punctuality_p1=(
        "CLIENT's punctuality is essential. If the CLIENT fails to adhere to the stipulated "
        "time, the service may be shortened. If the delay completely prevents service "
        "delivery, the CLIENT is obligated to pay in full. Same-day schedule changes incur a "
        "{fee} administrative fee."
    ),
    c_punctuality_p2=(
        "D' Show Events will not offer refunds for services not rendered due to CLIENT delays "
        "or unavoidable external causes (traffic, unforeseen conditions). However, the "
        "PROVIDER will make reasonable efforts to adapt."
    ),

    c_sound_title="SOUND SYSTEM",
    c_sound_opt_client=(
        "Selected option: Sound provided by the client. The client supplies the sound system, "
        "including two (2) microphones with stands, ensuring their optimal functionality."
    ),
    c_sound_opt_basic=(
        "Selected option: Basic sound provided by D' Show Events. A compact professional "
        "system for up to 25 people. Included at no extra cost."
    ),
    c_sound_opt_upgrade=(
        "Selected option: Upgrade to large professional sound. A higher power system for "
        "large events. An additional charge of {surcharge} USD applies."
    ),
    c_sound_opt_pending_p1="ACTION REQUIRED: Please mark your preferred sound option with an (X):",
    c_sound_opt_pending_b1=(
        "[__] Option 1: Sound provided by the client. The client supplies the sound system, "
        "including two (2) microphones with stands, ensuring optimal functionality."
    ),
    c_sound_opt_pending_b2=(
        "[__] Option 2: Basic sound (included). Compact professional system for up to 25 "
        "people. Included at no extra cost."
    ),
    c_sound_opt_pending_b3=(
        "[__] Option 3: Upgrade to professional sound (+{surcharge} USD). Higher power system "
        "for large events. The additional charge will be added to the remaining balance."
    ),
    c_sound_p2=(
        "The PROVIDER is not responsible for technical or electrical failures beyond its "
        "control. If damage is caused by the PROVIDER's direct negligence, the PROVIDER will "
        "assume the costs."
    ),

    c_access_title="ACCESS AND PARKING",
    c_access_p1=(
        "The CLIENT will cover parking costs for the PROVIDER's staff ({spaces}) and "
        "will arrange any necessary access permits. Failure to do so may result in delays or "
        "limitations for which the PROVIDER is not responsible."
    ),

    c_reschedule_title="DATE CHANGES",
    c_reschedule_p1=(
        "The CLIENT may make one (1) date change at no additional cost, subject to the "
        "PROVIDER's availability, provided it is requested in writing more than 30 days "
        "before the original event date. Additional changes or those requested with less "
        "than 30 days' notice will incur a {fee} administrative fee."
    ),
    c_reschedule_p2=(
        "All cancellations or date change requests must be made in writing (confirmed email "
        "or message) to be valid."
    ),

    c_staff_images_title="USE OF STAFF IMAGERY",
    c_staff_images_p1=(
        "The PROVIDER may use photographs or videos that exclusively feature its personnel "
        "(musicians, talents, artists) for promotion and social media, ensuring the CLIENT's privacy."
    ),
    c_safety_title="STAFF SAFETY",
    c_safety_p1=(
        "The safety of D' Show Events staff is a priority. In any situation of harassment, "
        "hostility, or danger, the staff may withdraw without penalty or refund."
    ),

    c_comms_title="OFFICIAL COMMUNICATIONS",
    c_comms_provider="Provider's Contact",
    c_comms_client="Client's Contact",
    c_comms_last="Notifications are considered valid once receipt is confirmed by either party.",

    c_client_content_title="CLIENT-GENERATED CONTENT",
    c_client_content_p1=(
        "The CLIENT and their guests are free to record and share content during the event. "
        "Tagging @dshowevents on social media is appreciated but not required."
    ),
    c_client_content_p2="Our Socials:",

    c_liability_title="LIMITATION OF LIABILITY",
    c_liability_p1=(
        "The PROVIDER's total liability shall not exceed the amount paid by the CLIENT. The "
        "PROVIDER is not liable for indirect damages, loss of profits, or technical issues "
        "from the venue or third parties."
    ),
    c_indemnification_title="INDEMNIFICATION",
    c_indemnification_p1=(
        "The CLIENT will hold D' Show Events LLC harmless from any claim or damage arising "
        "from the acts, omissions, or breaches of the CLIENT or their guests."
    ),
    c_force_majeure_title="FORCE MAJEURE",
    c_force_majeure_p1=(
        "Neither party shall be liable for failure to perform due to causes beyond their "
        "reasonable control (hurricanes, blackouts, pandemics, riots, government "
        "restrictions, etc.). The affected party will notify within 48 hours. They may "
        "reschedule within 30 days or, if not possible, the PROVIDER will refund the deposit "
        "minus incurred expenses (max. 25%)."
    ),
    c_jurisdiction_title="JURISDICTION AND APPLICABLE LAW",
    c_jurisdiction_p1=(
        "This agreement shall be governed by the laws of the Commonwealth of Puerto Rico. Any "
        "dispute will first be addressed through direct communication, then mediation, and "
        "finally in the courts of San Juan or Bayamón."
    ),

    summary_details_title="SUMMARY OF SERVICE DETAILS",
    summary_service="Service contracted:",
    summary_time="Service time:",
    summary_total_cost="Total cost:",
    summary_balance="Remaining balance:",
    summary_address="Event address:",
    summary_activity="Activity type:",
    summary_date="Event date:",
    summary_notes="Notes:",

    summary_payment_title="DEPOSIT AND PAYMENT SUMMARY",
    summary_deposit="Deposit:",
    summary_parking="Parking spaces required:",
    summary_ath_movil="ATH Móvil Business:",
    summary_checks="Checks payable to:",

    booth_details_title="BOOTH DETAILS",
    booth_services="Services:",
    booth_hours="Service hours:",
    booth_setup_time="Setup time:",
    booth_location="Event location:",
    booth_addons="Additional services:",
    booth_location_indoor="Indoor",
    booth_location_outdoor="Outdoor",

    dj_details_title="EVENT AND VENUE DETAILS",
    dj_schedule="Schedule:",
    dj_guests="Number of guests:",
    dj_venue="Venue:",
    dj_floor="Event floor:",
    dj_venue_contact="Venue contact:",
    dj_restrictions="Setup time restrictions:",
    dj_package="Package:",
    dj_color="Setup color:",
    dj_electrical="Electrical requirements:",
    dj_outdoor="Outdoor event:",
    dj_surface="Surface type:",
    dj_protection="Available protection:",
    dj_protection_tent="Tent/canopy provided by client",
    dj_protection_structure="Permanent structure (gazebo/pergola)",
    dj_protection_none="No protection (+{fee} D Show tent)",
    dj_protection_level_area="Level area with proper drainage",
    dj_protection_vehicle_access="Access for setup vehicles",
    yes="Yes",
    no="No",
    color_black="Black",
    color_white="White",

    c_confirmation_title="CONFIRMATION AND SIGNATURES",
    c_confirmation_p1=(
        "I, ______________________, certify on this day ____________ that I understand and "
        "accept the terms and conditions set forth in this document, formalizing the hiring "
        "of services for the day {date}."
    ),

    signature_client="Signature of {name} / Representative",
    signature_provider="Authorized Representative",

    invoice_title="INVOICE",
    invoice_subtitle="Addendum to Agreement #{number}",
    invoice_bill_to="BILL TO",
    invoice_from="FROM",
    invoice_number="Invoice No.",
    invoice_issue_date="Issue Date",
    invoice_event_date="Event Date",
    invoice_table_desc="Description",
    invoice_table_total="Total",
    invoice_service_desc="Artistic and Technical Services",
    invoice_service_desc_placeholder="As described in the contract.",
    invoice_sound_upgrade="Professional Sound Upgrade",
    invoice_subtotal="Subtotal",
    invoice_deposit_paid="Deposit Paid",
    invoice_balance_due="Balance Due",
    invoice_notes="Additional Notes",
    invoice_notes_placeholder=(
        "The remaining balance must be paid in full before the service begins on the event date."
    ),
    invoice_thank_you="Thank you for choosing D' Show Events!",
    invoice_footer="For questions about this invoice, please contact us at {email}",
)


CATALOGS: Mapping[Locale, LocaleCatalog] = {
    Locale.ES: LocaleCatalog(
        locale=Locale.ES,
        form=_ES_FORM,
        doc=_ES_DOC,
        format_date=_format_date_es,
        format_parking=_format_parking_es,
    ),
    Locale.EN: LocaleCatalog(
        locale=Locale.EN,
        form=_EN_FORM,
        doc=_EN_DOC,
        format_date=_format_date_en,
        format_parking=_format_parking_en,
    ),
}


def catalog_for(locale: Locale) -> LocaleCatalog:
    return CATALOGS[locale]


def format_long_date(locale: Locale, value: date) -> str:
    """Calendar date in running text: ``19 de octubre de 2026`` / ``October 19, 2026``."""
    if locale is Locale.EN:
        return f"{ENGLISH_MONTHS[value.month - 1]} {value.day}, {value.year}"
    return f"{value.day} de {MONTH_TOKENS[value.month - 1]} de {value.year}"
