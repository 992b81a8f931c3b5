"""Document-definition builder.

Turns a fully derived order into the renderer-agnostic contract and
invoice trees.  Pure: the same order, issue date and configuration
always produce the same tree.
"""

from __future__ import annotations

from datetime import date

from contratia.domain.document.nodes import (
    BulletList,
    Clause,
    DocumentDefinition,
    DocumentNode,
    Header,
    Paragraph,
    Signatures,
    Spacer,
    Summary,
    Table,
    TextRun,
)
from contratia.domain.locale import DocumentLabels, LocaleCatalog, catalog_for
from contratia.domain.model.order import (
    AddonOption,
    BoothOrder,
    DjOrder,
    EventLocation,
    MusicOrder,
    Order,
    SetupColor,
    SoundOption,
    YesNo,
)
from contratia.domain.model.value_objects import Money
from contratia.domain.pricing import DEFAULT_COMPANY, DEFAULT_PRICING, CompanyProfile, Pricing
from contratia.domain.service.derived_fields import BOOTH_ADDON_LABELS, BOOTH_SERVICE_LABELS


class _ClauseCounter:
    """Single source of clause numbers for one contract build."""

    def __init__(self) -> None:
        self._next = 1

    def clause(self, title: str, *content) -> Clause:
        clause = Clause(number=self._next, title=title, content=tuple(content))
        self._next += 1
        return clause


class DocumentBuilder:

    def __init__(
        self,
        pricing: Pricing = DEFAULT_PRICING,
        company: CompanyProfile = DEFAULT_COMPANY,
    ) -> None:
        self._pricing = pricing
        self._company = company

    def build(self, order: Order, issued_on: date | None = None) -> DocumentDefinition:
        catalog = catalog_for(order.locale)
        return DocumentDefinition(
            contract=tuple(self._contract(order, catalog)),
            invoice=tuple(self._invoice(order, catalog, issued_on or date.today())),
        )

    # --- Contract -------------------------------------------------------------

    def _contract(self, order: Order, catalog: LocaleCatalog) -> list[DocumentNode]:
        t = catalog.doc
        counter = _ClauseCounter()
        nodes: list[DocumentNode] = [
            Header(self._company.brand_title, f"{t.contract_title} #{self._contract_number(order)}"),
            Paragraph((
                TextRun(t.intro1),
                TextRun(self._client_name(order, t), bold=True),
                TextRun(t.intro2),
            )),
            Spacer(),
            self._deposit_clause(order, t, counter),
            counter.clause(
                t.c_punctuality_title,
                Paragraph.of(t.c_punctuality_p1.format(fee=Money(self._pricing.same_day_change_fee))),
                Paragraph.of(t.c_punctuality_p2),
            ),
        ]
        if isinstance(order, MusicOrder):
            nodes.append(self._sound_clause(order, t, counter))

        nodes += [
            counter.clause(
                t.c_access_title,
                Paragraph.of(t.c_access_p1.format(spaces=catalog.format_parking(order.parking_spaces))),
            ),
            counter.clause(
                t.c_reschedule_title,
                Paragraph.of(t.c_reschedule_p1.format(fee=Money(self._pricing.date_change_fee))),
                Paragraph.of(t.c_reschedule_p2),
            ),
            counter.clause(t.c_staff_images_title, Paragraph.of(t.c_staff_images_p1)),
            counter.clause(t.c_safety_title, Paragraph.of(t.c_safety_p1)),
            counter.clause(
                t.c_comms_title,
                Paragraph.of(t.c_comms_provider, bold=True),
                Paragraph.of(f"Email: {self._company.email}"),
                Paragraph.of(f"WhatsApp/Message: {self._company.phone}"),
                Spacer(),
                Paragraph.of(t.c_comms_client, bold=True),
                Paragraph.of(f"Email: {order.client_email or t.not_provided}"),
                Paragraph.of(f"{t.phone}: {order.client_phone or t.not_provided}"),
                Paragraph.of(t.c_comms_last, italic=True),
            ),
            counter.clause(
                t.c_client_content_title,
                Paragraph.of(t.c_client_content_p1),
                Paragraph.of(t.c_client_content_p2, bold=True),
                Paragraph.of(self._company.socials),
            ),
            counter.clause(t.c_liability_title, Paragraph.of(t.c_liability_p1)),
            counter.clause(t.c_indemnification_title, Paragraph.of(t.c_indemnification_p1)),
            counter.clause(t.c_force_majeure_title, Paragraph.of(t.c_force_majeure_p1)),
            counter.clause(t.c_jurisdiction_title, Paragraph.of(t.c_jurisdiction_p1)),
            Spacer(),
            self._details_summary(order, catalog),
            self._payment_summary(order, catalog),
        ]

        if isinstance(order, BoothOrder):
            nodes.append(self._booth_summary(order, t))
        elif isinstance(order, DjOrder):
            nodes.append(self._dj_summary(order, t))

        event_date = catalog.format_date(order.event_day, order.event_month, order.event_year)
        nodes += [
            counter.clause(t.c_confirmation_title, Paragraph.of(t.c_confirmation_p1.format(date=event_date))),
            Signatures(
                client_label=t.signature_client.format(name=self._client_name(order, t)),
                provider_name=self._company.legal_name,
                provider_label=t.signature_provider,
            ),
        ]
        return nodes

    def _deposit_clause(self, order: Order, t: DocumentLabels, counter: _ClauseCounter) -> Clause:
        if order.deposit_applies:
            return counter.clause(
                t.c_deposit_title,
                Paragraph.of(t.c_deposit_p1_with_deposit.format(deposit=self._deposit(order))),
                Paragraph.of(t.c_deposit_p2_with_deposit),
                Paragraph.of(t.c_deposit_p3_with_deposit),
                BulletList((t.c_deposit_b1_with_deposit, t.c_deposit_b2_with_deposit)),
                Paragraph.of(t.c_deposit_p4_with_deposit),
            )
        return counter.clause(
            t.c_deposit_title,
            Paragraph.of(t.c_deposit_p1_no_deposit),
            Paragraph.of(t.c_deposit_p2_no_deposit),
            Paragraph.of(t.c_deposit_p3_no_deposit),
            BulletList((t.c_deposit_b1_no_deposit, t.c_deposit_b2_no_deposit)),
            Paragraph.of(t.c_deposit_p4_no_deposit),
        )

    def _sound_clause(self, order: MusicOrder, t: DocumentLabels, counter: _ClauseCounter) -> Clause:
        surcharge = Money(self._pricing.sound_upgrade)
        settled = {
            SoundOption.CLIENT: t.c_sound_opt_client,
            SoundOption.BASIC: t.c_sound_opt_basic,
            SoundOption.UPGRADE: t.c_sound_opt_upgrade.format(surcharge=surcharge),
        }
        if order.sound_option in settled:
            body = [Paragraph.of(settled[order.sound_option])]
        else:
            body = [
                Paragraph.of(t.c_sound_opt_pending_p1, bold=True),
                BulletList((
                    t.c_sound_opt_pending_b1,
                    t.c_sound_opt_pending_b2,
                    t.c_sound_opt_pending_b3.format(surcharge=surcharge),
                )),
            ]
        return counter.clause(t.c_sound_title, *body, Paragraph.of(t.c_sound_p2))

    # --- Summaries ------------------------------------------------------------

    def _details_summary(self, order: Order, catalog: LocaleCatalog) -> Summary:
        t = catalog.doc
        return Summary(t.summary_details_title, (
            (t.summary_service, self._service_label(order) or t.not_provided),
            (t.summary_time, self._service_time(order) or t.not_provided),
            (t.summary_total_cost, f"{Money.parse(order.total_cost)} USD"),
            (t.summary_balance, f"{Money.parse(order.remaining_balance)} USD"),
            (t.summary_address, order.address or t.not_provided),
            (t.summary_activity, order.activity_type or t.not_provided),
            (t.summary_date, catalog.format_date(order.event_day, order.event_month, order.event_year)),
            (t.summary_notes, order.notes or t.no_notes),
        ))

    def _payment_summary(self, order: Order, catalog: LocaleCatalog) -> Summary:
        t = catalog.doc
        details: list[tuple[str, str]] = []
        if order.deposit_applies:
            details.append((t.summary_deposit, f"{self._deposit(order)} USD"))
        details += [
            (t.summary_parking, catalog.format_parking(order.parking_spaces)),
            (t.summary_ath_movil, self._company.ath_movil),
            (t.summary_checks, self._company.checks_payable_to),
        ]
        return Summary(t.summary_payment_title, tuple(details))

    @staticmethod
    def _booth_summary(order: BoothOrder, t: DocumentLabels) -> Summary:
        services = [label for attr, label in BOOTH_SERVICE_LABELS if getattr(order, attr)]
        addons = [
            label for attr, label in BOOTH_ADDON_LABELS
            if getattr(order, attr) is AddonOption.HIRE
        ]
        locations = {
            EventLocation.INDOOR: t.booth_location_indoor,
            EventLocation.OUTDOOR: t.booth_location_outdoor,
        }
        setup_at = order.setup_time
        return Summary(t.booth_details_title, (
            (t.booth_services, " + ".join(services) or t.not_provided),
            (t.booth_hours, order.service_hours or t.not_provided),
            (t.booth_setup_time, str(setup_at) if setup_at else t.not_provided),
            (t.booth_location, locations.get(order.location, t.not_provided)),
            (t.booth_addons, ", ".join(addons) or t.not_provided),
        ))

    def _dj_summary(self, order: DjOrder, t: DocumentLabels) -> Summary:
        colors = {SetupColor.BLACK: t.color_black, SetupColor.WHITE: t.color_white}
        contact = " ".join(part for part in (order.venue_contact, order.venue_phone) if part)
        schedule = t.not_provided
        if order.start_time and order.end_time:
            schedule = f"{order.start_time} - {order.end_time} ({order.duration_text})"

        details = [
            (t.dj_schedule, schedule),
            (t.dj_guests, order.guest_count or t.not_provided),
            (t.dj_venue, order.venue_name or t.not_provided),
            (t.dj_floor, order.venue_floor or t.not_provided),
            (t.dj_venue_contact, contact or t.not_provided),
            (t.dj_restrictions, order.setup_restrictions or t.not_provided),
            (t.dj_package, order.package_name or t.not_provided),
            (t.dj_color, colors.get(order.setup_color, t.not_provided)),
            (t.dj_electrical, order.electrical.value or t.not_provided),
        ]
        outdoor = order.is_outdoor is YesNo.YES
        details.append((t.dj_outdoor, t.yes if outdoor else t.no))
        if outdoor:
            protections = [
                label for flag, label in (
                    (order.protection_client_tent, t.dj_protection_tent),
                    (order.protection_permanent_structure, t.dj_protection_structure),
                    (order.protection_none, t.dj_protection_none.format(fee=Money(self._pricing.outdoor_tent_fee))),
                    (order.protection_level_area, t.dj_protection_level_area),
                    (order.protection_vehicle_access, t.dj_protection_vehicle_access),
                ) if flag
            ]
            details += [
                (t.dj_surface, order.surface_type or t.not_provided),
                (t.dj_protection, "; ".join(protections) or t.not_provided),
            ]
        return Summary(t.dj_details_title, tuple(details))

    # --- Invoice --------------------------------------------------------------

    def _invoice(self, order: Order, catalog: LocaleCatalog, issued_on: date) -> list[DocumentNode]:
        t = catalog.doc
        company = self._company
        number = self._contract_number(order)

        base_cost = Money.parse(order.total_cost)
        upgrade = (
            Money(self._pricing.sound_upgrade)
            if isinstance(order, MusicOrder) and order.sound_option is SoundOption.UPGRADE
            else Money.zero()
        )
        subtotal = base_cost + upgrade
        balance_due = Money.parse(order.remaining_balance)

        rows = [(
            f"{t.invoice_service_desc}\n{self._service_label(order) or t.invoice_service_desc_placeholder}",
            str(base_cost),
        )]
        if not upgrade.is_zero:
            rows.append((t.invoice_sound_upgrade, str(upgrade)))

        totals = [(t.invoice_subtotal, str(subtotal))]
        if order.deposit_applies:
            totals.append((t.invoice_deposit_paid, f"-{self._deposit(order)}"))
        totals.append((t.invoice_balance_due, f"{balance_due} USD"))

        return [
            Header(company.brand_title, f"{t.invoice_title} | {t.invoice_subtitle.format(number=number)}"),
            Paragraph((
                TextRun(f"{t.invoice_bill_to}:", bold=True, line_break=True),
                TextRun(self._client_name(order, t), line_break=True),
                TextRun(order.client_email or t.not_provided, line_break=True),
                TextRun(order.client_phone or t.not_provided, line_break=True),
                TextRun("", line_break=True),
                TextRun(f"{t.invoice_from}:", bold=True, line_break=True),
                TextRun(company.legal_name, bold=True, line_break=True),
                TextRun(company.postal_address, line_break=True),
                TextRun(company.email, line_break=True),
                TextRun(company.phone),
            )),
            Paragraph((
                TextRun(f"{t.invoice_number}: {number}", bold=True, line_break=True),
                TextRun(
                    f"{t.invoice_issue_date}: {issued_on.day}/{issued_on.month}/{issued_on.year}",
                    bold=True, line_break=True,
                ),
                TextRun(
                    f"{t.invoice_event_date}: {order.event_day}/{order.event_month}/{order.event_year}",
                    bold=True,
                ),
            )),
            Table((t.invoice_table_desc, t.invoice_table_total), tuple(rows)),
            Summary("", tuple(totals), highlight_last=True),
            Paragraph((
                TextRun(f"{t.invoice_notes}:", bold=True, line_break=True),
                TextRun(order.invoice_notes or t.invoice_notes_placeholder, italic=True),
            )),
            Spacer(),
            Paragraph.of(t.invoice_thank_you, bold=True),
            Paragraph.of(t.invoice_footer.format(email=company.email), italic=True),
        ]

    # --- Internal helpers -----------------------------------------------------

    def _deposit(self, order: Order) -> Money:
        if isinstance(order, DjOrder):
            return Money.parse(order.deposit50)
        return Money(self._pricing.fixed_deposit)

    def _contract_number(self, order: Order) -> str:
        return order.contract_number or self._company.default_contract_number

    @staticmethod
    def _client_name(order: Order, t: DocumentLabels) -> str:
        return order.client_name or f"[{t.client_name_placeholder}]"

    @staticmethod
    def _service_label(order: Order) -> str:
        if isinstance(order, (MusicOrder, BoothOrder)):
            return order.service_description
        if isinstance(order, DjOrder):
            return order.package_name
        return ""

    @staticmethod
    def _service_time(order: Order) -> str:
        if isinstance(order, (MusicOrder, BoothOrder)):
            return order.service_time
        if isinstance(order, DjOrder) and order.start_time:
            return f"{order.start_time} - {order.end_time}" if order.end_time else order.start_time
        return ""
