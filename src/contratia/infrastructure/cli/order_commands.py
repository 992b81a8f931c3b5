"""CLI commands for the Order aggregate."""

from __future__ import annotations

import sys
from enum import Enum
from pathlib import Path

import click

from contratia.application.validate_order import ValidateOrderHandler
from contratia.domain.exceptions import DomainException, OrderValidationError
from contratia.domain.model.order import Order, OrderKind
from contratia.infrastructure import bootstrap

KIND = click.Choice([kind.value for kind in OrderKind])


def _parse_assignments(raw: tuple[str, ...]) -> list[tuple[str, str]]:
    """Parse ``field=value`` pairs; values may contain ``=``."""
    edits: list[tuple[str, str]] = []
    for pair in raw:
        if "=" not in pair:
            raise click.BadParameter(
                f"Invalid assignment '{pair}'. Expected 'field=value'."
            )
        name, value = pair.split("=", 1)
        edits.append((name.strip(), value))
    return edits


def _load(settings, kind: str) -> Order:
    try:
        return bootstrap.start_order_handler(settings).handle(OrderKind(kind))
    except DomainException as exc:
        raise click.ClickException(str(exc))


def _display_order(order: Order) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"{order.kind.value.upper()} order #{order.contract_number or '-'}  (locale={order.locale.value})")
    click.echo()
    for name, value in order.to_dict().items():
        if name == "kind":
            continue
        marker = "*" if name in order.derived_fields else " "
        click.echo(f" {marker} {name:<32} {value}")
    click.echo()
    click.echo("  (* computed automatically)")


def _format_errors(exc: OrderValidationError) -> str:
    lines = [str(exc)]
    lines += [f"  {field}: {message}" for field, message in sorted(exc.errors.items())]
    return "\n".join(lines)


@click.command("new")
@click.argument("kind", type=KIND)
@click.pass_obj
def order_new(settings, kind: str) -> None:
    """Discard the saved draft and start a fresh order."""
    try:
        bootstrap.clear_draft_handler(settings).handle(OrderKind(kind))
    except DomainException as exc:
        raise click.ClickException(str(exc))
    _display_order(_load(settings, kind))


@click.command("set")
@click.argument("kind", type=KIND)
@click.argument("assignments", nargs=-1, required=True)
@click.pass_obj
def order_set(settings, kind: str, assignments: tuple[str, ...]) -> None:
    """Edit fields: contratia order set music client_name="Ana" total_cost=500."""
    edits = _parse_assignments(assignments)
    handler = bootstrap.edit_order_handler(settings)

    try:
        result = handler.handle(OrderKind(kind), edits)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not result.changed:
        click.echo("No changes.")
        return
    for name, value in result.patch.items():
        shown = value.value if isinstance(value, Enum) else value
        click.echo(f"  {name} = {shown}")


@click.command("show")
@click.argument("kind", type=KIND)
@click.pass_obj
def order_show(settings, kind: str) -> None:
    """Show the current draft."""
    _display_order(_load(settings, kind))


@click.command("validate")
@click.argument("kind", type=KIND)
@click.pass_obj
def order_validate(settings, kind: str) -> None:
    """Check whether the draft can be submitted."""
    order = _load(settings, kind)
    try:
        ValidateOrderHandler().handle(order)
    except OrderValidationError as exc:
        raise click.ClickException(_format_errors(exc))
    click.echo("Order is valid.")


@click.command("preview")
@click.argument("kind", type=KIND)
@click.pass_obj
def order_preview(settings, kind: str) -> None:
    """Print the contract and invoice to the terminal."""
    order = _load(settings, kind)
    handler = bootstrap.export_handler(styled_preview=sys.stdout.isatty())
    try:
        exported = handler.handle(order, "preview")
    except DomainException as exc:
        raise click.ClickException(str(exc))
    click.echo(exported.content.decode("utf-8"), nl=False)


@click.command("export")
@click.argument("kind", type=KIND)
@click.option(
    "--format", "format_name",
    type=click.Choice(["pdf", "docx", "preview"]), default="pdf", show_default=True,
)
@click.option("--output", "-o", type=click.Path(dir_okay=False, path_type=Path), help="Output file.")
@click.pass_obj
def order_export(settings, kind: str, format_name: str, output: Path | None) -> None:
    """Write the contract and invoice to a PDF, DOCX or text file."""
    order = _load(settings, kind)
    try:
        exported = bootstrap.export_handler().handle(order, format_name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    target = output or Path(exported.file_name)
    target.write_bytes(exported.content)
    click.echo(f"Wrote {target} ({len(exported.content)} bytes)")


@click.command("submit")
@click.argument("kind", type=KIND)
@click.pass_obj
def order_submit(settings, kind: str) -> None:
    """Validate and send the order to the contract workflow."""
    order = _load(settings, kind)
    try:
        result = bootstrap.submit_order_handler(settings).handle(order)
    except OrderValidationError as exc:
        raise click.ClickException(_format_errors(exc))
    except DomainException as exc:
        raise click.ClickException(f"Could not generate the contract.\n\n{exc}")

    click.echo(f"Contract generated ({result.history_id})")
    click.echo(f"  Document: {result.links.doc_url}")
    if result.links.pdf_url:
        click.echo(f"  PDF:      {result.links.pdf_url}")
    if result.links.pdf_download_url:
        click.echo(f"  Download: {result.links.pdf_download_url}")


@click.command("clear")
@click.argument("kind", type=KIND)
@click.pass_obj
def order_clear(settings, kind: str) -> None:
    """Delete the saved draft."""
    try:
        bootstrap.clear_draft_handler(settings).handle(OrderKind(kind))
    except DomainException as exc:
        raise click.ClickException(str(exc))
    click.echo(f"Draft for {kind} cleared.")
