"""CLI commands for the Order aggregate."""

from __future__ import annotations

import json

import click

from rms.application.create_order import CreateOrderHandler
from rms.application.delete_order import DeleteOrderHandler
from rms.application.dto import CreateOrderRequest, OrderDTO, OrderItemSpec
from rms.application.show_order import ListOrdersHandler, ShowOrderHandler
from rms.application.update_order_notes import UpdateOrderNotesHandler
from rms.application.update_order_status import UpdateOrderStatusHandler
from rms.domain.exceptions import DomainException
from rms.domain.model.order import OrderStatus
from rms.infrastructure.bootstrap import dish_repository, order_repository, status_policy
from rms.infrastructure.cli.output import echo_json, fail
from rms.infrastructure.error_responses import HTTP_CREATED, HTTP_NO_CONTENT, HTTP_OK

json_option = click.option("--json", "as_json", is_flag=True, help="Print the JSON payload.")


def _parse_items(raw_items: tuple[str, ...]) -> list[OrderItemSpec]:
    """Parse ('<dish-id>:2', '<dish-id>:1') into OrderItemSpec list."""
    specs: list[OrderItemSpec] = []
    for pair in raw_items:
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'DishId:Quantity'."
            )
        dish_id, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for dish '{dish_id}'."
            )
        specs.append(OrderItemSpec(dish_id=dish_id.strip(), quantity=qty))
    return specs


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order {dto.id}  (status={dto.status})")
    click.echo(f"Created:  {dto.created_at}")
    if dto.notes:
        click.echo(f"Notes:    {dto.notes}")
    click.echo()
    click.echo(f"  {'Dish':<24} {'Qty':>5} {'Price':>10} {'Subtotal':>10}")
    click.echo(f"  {'-'*51}")
    for item in dto.items:
        click.echo(
            f"  {item.dish.name:<24} {item.quantity:>5} {item.unit_price:>10} {item.subtotal:>10}"
        )
    click.echo(f"  {'-'*51}")
    click.echo(f"  {'Order Total':<30} {dto.total_value:>20}")


@click.command("create")
@click.option("--item", "items", multiple=True, help="Item as 'DishId:Qty'; repeat per dish.")
@click.option("--notes", default=None, help="Free-text notes for the kitchen.")
@click.option("--status", default=None, help="Initial status (defaults to RECEIVED).")
@click.option(
    "--file",
    "body_file",
    type=click.File("r"),
    default=None,
    help="Read the request body ({items, notes?, status?}) from a JSON file.",
)
@json_option
def order_create(
    items: tuple[str, ...],
    notes: str | None,
    status: str | None,
    body_file,
    as_json: bool,
) -> None:
    """Create a new order."""
    handler = CreateOrderHandler(
        order_repo=order_repository(),
        dish_repo=dish_repository(),
    )

    try:
        if body_file is not None:
            try:
                body = json.load(body_file)
            except ValueError as exc:
                raise click.BadParameter(f"Invalid JSON body: {exc}", param_hint="--file")
            request = CreateOrderRequest.from_payload(body)
        else:
            request = CreateOrderRequest(items=_parse_items(items), notes=notes, status=status)
        dto = handler.handle(request.items, notes=request.notes, status=request.status)
    except DomainException as exc:
        fail(exc, as_json)

    if as_json:
        echo_json(HTTP_CREATED, dto.to_dict())
        return
    click.echo("Order created.")
    _display_order(dto)


@click.command("list")
@click.option("--status", default=None, type=click.Choice(OrderStatus.values()))
@json_option
def order_list(status: str | None, as_json: bool) -> None:
    """List orders, newest first."""
    handler = ListOrdersHandler(order_repo=order_repository(), dish_repo=dish_repository())

    try:
        orders = handler.handle(status=status)
    except DomainException as exc:
        fail(exc, as_json)

    if as_json:
        echo_json(HTTP_OK, [o.to_dict() for o in orders])
        return
    if not orders:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<36}  {'Status':<10} {'Items':>5} {'Total':>10}  Created")
    click.echo("-" * 96)
    for o in orders:
        click.echo(
            f"{o.id:<36}  {o.status:<10} {len(o.items):>5} {o.total_value:>10}  {o.created_at}"
        )


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
@json_option
def order_show(order_id: str, as_json: bool) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository(), dish_repo=dish_repository())

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        fail(exc, as_json)

    if as_json:
        echo_json(HTTP_OK, dto.to_dict())
        return
    _display_order(dto)


@click.command("status")
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.option("--set", "new_status", required=True, help="New status.")
@json_option
def order_status(order_id: str, new_status: str, as_json: bool) -> None:
    """Move an order along RECEIVED -> PREPARING -> READY -> DELIVERED."""
    handler = UpdateOrderStatusHandler(
        order_repo=order_repository(),
        dish_repo=dish_repository(),
        policy=status_policy(),
    )

    try:
        dto = handler.handle(order_id, new_status)
    except DomainException as exc:
        fail(exc, as_json)

    if as_json:
        echo_json(HTTP_OK, dto.to_dict())
        return
    click.echo(f"Order {order_id} is now {dto.status}.")


@click.command("notes")
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.option("--text", "notes", required=True, help="New notes; empty clears them.")
@json_option
def order_notes(order_id: str, notes: str, as_json: bool) -> None:
    """Replace the notes of an order."""
    handler = UpdateOrderNotesHandler(order_repo=order_repository(), dish_repo=dish_repository())

    try:
        dto = handler.handle(order_id, notes)
    except DomainException as exc:
        fail(exc, as_json)

    if as_json:
        echo_json(HTTP_OK, dto.to_dict())
        return
    click.echo(f"Order {order_id} notes updated.")


@click.command("delete")
@click.option("--id", "order_id", required=True, help="Order ID to delete.")
@json_option
def order_delete(order_id: str, as_json: bool) -> None:
    """Delete an order together with its lines."""
    handler = DeleteOrderHandler(order_repo=order_repository())

    try:
        handler.handle(order_id)
    except DomainException as exc:
        fail(exc, as_json)

    if as_json:
        echo_json(HTTP_NO_CONTENT, None)
        return
    click.echo(f"Order {order_id} deleted.")
