import click

from rms.infrastructure.cli.dish_commands import (
    dish_add,
    dish_delete,
    dish_list,
    dish_show,
    dish_update,
    seed,
)
from rms.infrastructure.cli.order_commands import (
    order_create,
    order_delete,
    order_list,
    order_notes,
    order_show,
    order_status,
)
from rms.infrastructure.config import load_settings
from rms.infrastructure.logging_config import configure_logging


@click.group()
def cli() -> None:
    """RMS — Restaurant Order Management"""
    try:
        settings = load_settings()
    except ValueError as exc:
        raise click.ClickException(str(exc))
    configure_logging(settings.log_level)


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def dish() -> None:
    """Manage the menu."""


# Register subcommands
order.add_command(order_create)
order.add_command(order_delete)
order.add_command(order_list)
order.add_command(order_notes)
order.add_command(order_show)
order.add_command(order_status)
dish.add_command(dish_add)
dish.add_command(dish_delete)
dish.add_command(dish_list)
dish.add_command(dish_show)
dish.add_command(dish_update)
cli.add_command(seed)
