"""CLI commands for the Dish aggregate."""

from __future__ import annotations

import click

from rms.application.add_dish import AddDishHandler
from rms.application.delete_dish import DeleteDishHandler
from rms.application.dto import DishDTO
from rms.application.show_dish import ListDishesHandler, ShowDishHandler
from rms.application.update_dish import UpdateDishHandler
from rms.domain.exceptions import DomainException
from rms.domain.model.dish import Category
from rms.infrastructure.bootstrap import dish_repository, order_repository
from rms.infrastructure.cli.output import echo_json, fail
from rms.infrastructure.error_responses import HTTP_CREATED, HTTP_NO_CONTENT, HTTP_OK
from rms.infrastructure.seed import seed_dishes

json_option = click.option("--json", "as_json", is_flag=True, help="Print the JSON payload.")


def _display_dish(dto: DishDTO) -> None:
    click.echo(f"Dish {dto.id}")
    click.echo(f"  Name:        {dto.name}")
    click.echo(f"  Description: {dto.description}")
    click.echo(f"  Price:       {dto.price}")
    click.echo(f"  Category:    {dto.category}")
    click.echo(f"  Active:      {'yes' if dto.active else 'no'}")
    if dto.image:
        click.echo(f"  Image:       {dto.image}")


@click.command("add")
@click.option("--name", required=True, help="Dish name.")
@click.option("--description", required=True, help="Dish description.")
@click.option("--price", required=True, help="Price (e.g. 35.90).")
@click.option("--category", required=True, type=click.Choice(Category.values()))
@click.option("--image", default=None, help="Image URL (http or https).")
@click.option("--inactive", is_flag=True, default=False, help="Add the dish switched off.")
@json_option
def dish_add(
    name: str,
    description: str,
    price: str,
    category: str,
    image: str | None,
    inactive: bool,
    as_json: bool,
) -> None:
    """Add a new dish to the menu."""
    handler = AddDishHandler(dish_repo=dish_repository())
    payload = {
        "name": name,
        "description": description,
        "price": price,
        "category": category,
        "active": not inactive,
        "image": image,
    }

    try:
        dto = handler.handle(payload)
    except DomainException as exc:
        fail(exc, as_json)

    if as_json:
        echo_json(HTTP_CREATED, dto.to_dict())
        return
    click.echo(f"Dish {dto.id} '{dto.name}' added at {dto.price}")


@click.command("list")
@click.option("--category", default=None, type=click.Choice(Category.values()))
@click.option("--active/--inactive", "active", default=None, help="Filter by availability.")
@json_option
def dish_list(category: str | None, active: bool | None, as_json: bool) -> None:
    """List the menu."""
    handler = ListDishesHandler(dish_repo=dish_repository())

    try:
        dishes = handler.handle(category=category, active=active)
    except DomainException as exc:
        fail(exc, as_json)

    if as_json:
        echo_json(HTTP_OK, [d.to_dict() for d in dishes])
        return
    if not dishes:
        click.echo("No dishes found.")
        return

    click.echo(f"{'ID':<36}  {'Name':<24} {'Category':<12} {'Price':>9} {'Active':>7}")
    click.echo("-" * 92)
    for d in dishes:
        click.echo(
            f"{d.id:<36}  {d.name:<24} {d.category:<12} {d.price:>9} "
            f"{'yes' if d.active else 'no':>7}"
        )


@click.command("show")
@click.option("--id", "dish_id", required=True, help="Dish ID.")
@json_option
def dish_show(dish_id: str, as_json: bool) -> None:
    """Show one dish."""
    handler = ShowDishHandler(dish_repo=dish_repository())

    try:
        dto = handler.handle(dish_id)
    except DomainException as exc:
        fail(exc, as_json)

    if as_json:
        echo_json(HTTP_OK, dto.to_dict())
        return
    _display_dish(dto)


@click.command("update")
@click.option("--id", "dish_id", required=True, help="Dish ID.")
@click.option("--name", default=None)
@click.option("--description", default=None)
@click.option("--price", default=None, help="New price (e.g. 29.99).")
@click.option("--category", default=None, type=click.Choice(Category.values()))
@click.option("--image", default=None, help="New image URL; an empty string removes it.")
@click.option("--active/--inactive", "active", default=None)
@json_option
def dish_update(
    dish_id: str,
    name: str | None,
    description: str | None,
    price: str | None,
    category: str | None,
    image: str | None,
    active: bool | None,
    as_json: bool,
) -> None:
    """Update some fields of a dish."""
    handler = UpdateDishHandler(dish_repo=dish_repository())
    supplied = {
        "name": name,
        "description": description,
        "price": price,
        "category": category,
        "image": image,
        "active": active,
    }
    payload = {key: value for key, value in supplied.items() if value is not None}

    try:
        dto = handler.handle(dish_id, payload)
    except DomainException as exc:
        fail(exc, as_json)

    if as_json:
        echo_json(HTTP_OK, dto.to_dict())
        return
    click.echo(f"Dish {dto.id} updated.")
    _display_dish(dto)


@click.command("delete")
@click.option("--id", "dish_id", required=True, help="Dish ID.")
@json_option
def dish_delete(dish_id: str, as_json: bool) -> None:
    """Delete a dish that no order refers to."""
    handler = DeleteDishHandler(dish_repo=dish_repository(), order_repo=order_repository())

    try:
        handler.handle(dish_id)
    except DomainException as exc:
        fail(exc, as_json)

    if as_json:
        echo_json(HTTP_NO_CONTENT, None)
        return
    click.echo(f"Dish {dish_id} deleted.")


@click.command("seed")
def seed() -> None:
    """Load the default menu into the catalog."""
    try:
        added = seed_dishes(dish_repository())
    except DomainException as exc:
        fail(exc)

    click.echo(f"{added} dishes added.")
