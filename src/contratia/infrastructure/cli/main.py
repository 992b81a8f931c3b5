import logging

import click

from contratia.infrastructure.cli.history_commands import history_clear, history_list, history_remove
from contratia.infrastructure.cli.order_commands import (
    order_clear,
    order_export,
    order_new,
    order_preview,
    order_set,
    order_show,
    order_submit,
    order_validate,
)
from contratia.infrastructure.cli.suggest_commands import suggest
from contratia.infrastructure.config import Settings


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log at INFO level.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Contratia: contracts and invoices for D' Show Events."""
    if ctx.obj is None:
        ctx.obj = Settings.from_env()
    level = logging.INFO if verbose else getattr(logging, ctx.obj.log_level, logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


@cli.group()
def order() -> None:
    """Edit, preview, export and submit orders."""


@cli.group()
def history() -> None:
    """Browse generated contracts."""


# Register subcommands
order.add_command(order_clear)
order.add_command(order_export)
order.add_command(order_new)
order.add_command(order_preview)
order.add_command(order_set)
order.add_command(order_show)
order.add_command(order_submit)
order.add_command(order_validate)
history.add_command(history_clear)
history.add_command(history_list)
history.add_command(history_remove)
cli.add_command(suggest)
