"""CLI commands for the contract-generation history."""

from __future__ import annotations

import click

from contratia.domain.exceptions import DomainException
from contratia.infrastructure import bootstrap


@click.command("list")
@click.pass_obj
def history_list(settings) -> None:
    """List generated contracts, newest first."""
    try:
        entries = bootstrap.history_handler(settings).list()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not entries:
        click.echo("No contracts generated yet.")
        return

    click.echo(f"  {'ID':<24} {'Kind':<6} {'Client':<24} {'Event date':<24} Created")
    click.echo(f"  {'-'*100}")
    for entry in entries:
        click.echo(
            f"  {entry.id:<24} {entry.kind.value:<6} {entry.client_name[:24]:<24} "
            f"{entry.event_date[:24]:<24} {entry.created_at:%Y-%m-%d %H:%M}"
        )
        click.echo(f"    {entry.links.doc_url}")


@click.command("remove")
@click.argument("entry_id")
@click.pass_obj
def history_remove(settings, entry_id: str) -> None:
    """Remove one history entry."""
    try:
        bootstrap.history_handler(settings).remove(entry_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    click.echo(f"Removed {entry_id}.")


@click.command("clear")
@click.confirmation_option(prompt="Delete the whole history?")
@click.pass_obj
def history_clear(settings) -> None:
    """Delete every history entry."""
    try:
        count = bootstrap.history_handler(settings).clear()
    except DomainException as exc:
        raise click.ClickException(str(exc))
    click.echo(f"Removed {count} entries.")
