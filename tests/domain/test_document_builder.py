"""Unit tests for the contract and invoice document tree."""

from datetime import date

import pytest

from contratia.domain.document.builder import DocumentBuilder
from contratia.domain.document.nodes import (
    BulletList,
    Clause,
    Header,
    Paragraph,
    Signatures,
    Summary,
    Table,
)
from contratia.domain.locale import Locale
from contratia.domain.model.order import (
    AddonOption,
    BoothOrder,
    DjOrder,
    EventLocation,
    MusicOrder,
    SetupType,
    SoundOption,
    YesNo,
)
from contratia.domain.pricing import CompanyProfile
from contratia.domain.service.derived_fields import DerivedFieldEngine

ISSUED = date(2026, 10, 19)
engine = DerivedFieldEngine()
builder = DocumentBuilder()


def _music(**overrides) -> MusicOrder:
    fields = dict(
        contract_number="042",
        client_name="Ana Rivera",
        client_email="ana@example.com",
        client_phone="787-555-1234",
        event_day="14",
        event_month="febrero",
        event_year="2027",
        total_cost="500.00",
        address="Calle Luna 5, San Juan",
        activity_type="Boda",
        service_description="Trío romántico",
        service_time="7:00 PM",
        sound_option=SoundOption.UPGRADE,
    )
    fields.update(overrides)
    return engine.recompute(MusicOrder(**fields))


def _summary(nodes, title: str) -> dict[str, str]:
    summary = next(n for n in nodes if isinstance(n, Summary) and n.title == title)
    return dict(summary.details)


def _all_text(nodes) -> str:
    parts: list[str] = []
    for node in nodes:
        children = node.content if isinstance(node, Clause) else (node,)
        if isinstance(node, Clause):
            parts.append(node.heading)
        for child in children:
            if isinstance(child, Paragraph):
                parts.append(child.text)
            elif isinstance(child, BulletList):
                parts.extend(child.items)
    return "\n".join(parts)


class TestClauseNumbering:

    @pytest.mark.parametrize("sound", list(SoundOption))
    @pytest.mark.parametrize("deposit_applies", [True, False])
    def test_music_sequential(self, sound, deposit_applies):
        order = _music(sound_option=sound, deposit_applies=deposit_applies)
        numbers = [c.number for c in builder.build(order, ISSUED).clauses]
        assert numbers == list(range(1, len(numbers) + 1))

    def test_sound_clause_only_for_music(self):
        music = builder.build(_music(), ISSUED).clauses
        booth = builder.build(engine.recompute(BoothOrder()), ISSUED).clauses
        assert len(music) == len(booth) + 1
        assert [c.number for c in booth] == list(range(1, len(booth) + 1))

    def test_dj_sequential(self):
        clauses = builder.build(engine.recompute(DjOrder()), ISSUED).clauses
        assert [c.number for c in clauses] == list(range(1, len(clauses) + 1))

    def test_first_and_last_clause(self):
        clauses = builder.build(_music(locale=Locale.EN), ISSUED).clauses
        assert clauses[0].heading == "1. DEPOSIT AND FINAL PAYMENT"
        assert clauses[-1].title == "CONFIRMATION AND SIGNATURES"


class TestContract:

    def test_header(self):
        header = builder.build(_music(), ISSUED).contract[0]
        assert header == Header("D' SHOW EVENTS", "CONTRATO DE SERVICIOS #042")

    def test_default_contract_number_when_empty(self):
        header = builder.build(_music(contract_number=""), ISSUED).contract[0]
        assert header.subtitle.endswith("#DSE-2025-000")

    def test_client_name_is_bold_in_intro(self):
        intro = builder.build(_music(), ISSUED).contract[1]
        assert any(run.bold and run.text == "Ana Rivera" for run in intro.runs)

    def test_client_name_placeholder(self):
        intro = builder.build(_music(client_name=""), ISSUED).contract[1]
        assert "[Nombre del Cliente]" in intro.text

    def test_deposit_amount_in_clause(self):
        text = _all_text(builder.build(_music(), ISSUED).contract)
        assert "$125.00" in text

    def test_no_deposit_branch(self):
        document = builder.build(_music(deposit_applies=False, locale=Locale.EN), ISSUED)
        payment = _summary(document.contract, "DEPOSIT AND PAYMENT SUMMARY")
        assert "Deposit:" not in payment

    def test_pending_sound_lists_options(self):
        document = builder.build(_music(sound_option=SoundOption.PENDING), ISSUED)
        sound = next(c for c in document.clauses if c.title == "SONIDO")
        assert any(isinstance(node, BulletList) and len(node.items) == 3 for node in sound.content)

    def test_parking_phrase(self):
        text = _all_text(builder.build(_music(parking_spaces="1", locale=Locale.EN), ISSUED).contract)
        assert "(1 space)" in text

    def test_missing_contact_uses_not_provided(self):
        text = _all_text(builder.build(_music(client_email="", locale=Locale.EN), ISSUED).contract)
        assert "Email: Not provided" in text

    def test_details_summary(self):
        details = _summary(builder.build(_music(locale=Locale.EN), ISSUED).contract, "SUMMARY OF SERVICE DETAILS")
        assert details["Total cost:"] == "$500.00 USD"
        assert details["Remaining balance:"] == "$525.00 USD"
        assert details["Event date:"] == "February 14th, 2027"
        assert details["Notes:"] == "No additional notes."

    def test_confirmation_and_signatures(self):
        contract = builder.build(_music(), ISSUED).contract
        assert "14 de Febrero del 2027" in contract[-2].content[0].text
        assert contract[-1] == Signatures(
            client_label="Firma de Ana Rivera / Representante",
            provider_name="D' SHOW EVENTS LLC",
            provider_label="Representante Autorizado",
        )

    def test_company_profile_is_injected(self):
        company = CompanyProfile(brand_title="ACME EVENTS")
        header = DocumentBuilder(company=company).build(_music(), ISSUED).contract[0]
        assert header.title == "ACME EVENTS"


class TestKindSummaries:

    def test_booth_summary(self):
        order = engine.recompute(BoothOrder(
            locale=Locale.EN,
            photo_booth_selected=True,
            video360_selected=True,
            service_time="7:00 PM",
            location=EventLocation.OUTDOOR,
            branding_addon=AddonOption.HIRE,
        ))
        booth = _summary(builder.build(order, ISSUED).contract, "BOOTH DETAILS")
        assert booth["Services:"] == "PHOTO BOOTH + VIDEO BOOTH 360"
        assert booth["Setup time:"] == "5:00 PM"
        assert booth["Event location:"] == "Outdoor"
        assert booth["Additional services:"] == "Full Branding"

    def test_dj_summary_and_deposit(self):
        order = engine.recompute(DjOrder(
            locale=Locale.EN,
            total_cost="1000",
            start_time="8:00 PM",
            end_time="12:00 AM",
            setup_type=SetupType.PREMIUM,
            is_outdoor=YesNo.YES,
            protection_none=True,
        ))
        contract = builder.build(order, ISSUED).contract
        dj = _summary(contract, "EVENT AND VENUE DETAILS")
        assert dj["Schedule:"] == "8:00 PM - 12:00 AM (4 horas)"
        assert dj["Package:"] == "Paquete Premium"
        assert dj["Available protection:"] == "No protection (+$150.00 D Show tent)"
        payment = _summary(contract, "DEPOSIT AND PAYMENT SUMMARY")
        assert payment["Deposit:"] == "$500.00 USD"

    def test_dj_indoor_hides_outdoor_details(self):
        order = engine.recompute(DjOrder(locale=Locale.EN))
        dj = _summary(builder.build(order, ISSUED).contract, "EVENT AND VENUE DETAILS")
        assert dj["Outdoor event:"] == "No"
        assert "Surface type:" not in dj


class TestInvoice:

    def test_upgrade_row_subtotal_and_balance(self):
        order = _music(locale=Locale.EN)
        invoice = builder.build(order, ISSUED).invoice
        table = next(n for n in invoice if isinstance(n, Table))
        assert table.rows[1] == ("Professional Sound Upgrade", "$150.00")
        totals = dict(next(n for n in invoice if isinstance(n, Summary)).details)
        assert totals["Subtotal"] == "$650.00"
        assert totals["Deposit Paid"] == "-$125.00"
        assert totals["Balance Due"] == f"${order.remaining_balance} USD"

    def test_no_upgrade_row_without_upgrade(self):
        invoice = builder.build(_music(sound_option=SoundOption.BASIC), ISSUED).invoice
        table = next(n for n in invoice if isinstance(n, Table))
        assert len(table.rows) == 1
        assert table.rows[0][1] == "$500.00"

    def test_balance_due_is_stored_value(self):
        order = MusicOrder(total_cost="500", remaining_balance="123.45")
        totals = next(n for n in builder.build(order, ISSUED).invoice if isinstance(n, Summary))
        assert totals.details[-1][1] == "$123.45 USD"
        assert totals.highlight_last

    def test_header_and_dates(self):
        invoice = builder.build(_music(locale=Locale.EN), ISSUED).invoice
        assert invoice[0] == Header("D' SHOW EVENTS", "INVOICE | Addendum to Agreement #042")
        dates = invoice[2].text
        assert "Issue Date: 19/10/2026" in dates
        assert "Event Date: 14/febrero/2027" in dates

    def test_dj_invoice_uses_half_deposit(self):
        order = engine.recompute(DjOrder(total_cost="1000"))
        totals = dict(next(n for n in builder.build(order, ISSUED).invoice if isinstance(n, Summary)).details)
        assert totals["Depósito Pagado"] == "-$500.00"
        assert totals["Balance Restante"] == "$500.00 USD"

    def test_build_is_deterministic(self):
        order = _music()
        assert builder.build(order, ISSUED) == builder.build(order, ISSUED)
