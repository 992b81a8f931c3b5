"""CLI command for AI text suggestions."""

from __future__ import annotations

import click

from contratia.domain.exceptions import DomainException
from contratia.infrastructure import bootstrap


@click.command("suggest")
@click.argument("prompt")
@click.pass_obj
def suggest(settings, prompt: str) -> None:
    """Ask the AI assistant to draft text (e.g. a service description)."""
    try:
        text = bootstrap.suggest_text_handler(settings).handle(prompt)
    except DomainException as exc:
        raise click.ClickException(str(exc))
    click.echo(text)
