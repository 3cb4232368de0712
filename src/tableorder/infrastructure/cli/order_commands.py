"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from tableorder.application.create_order import CreateOrderHandler
from tableorder.application.dto import AdjustmentInput, OrderItemSpec
from tableorder.application.list_orders import ListOrdersHandler
from tableorder.application.show_order import ShowOrderHandler
from tableorder.application.update_order_status import UpdateOrderStatusHandler
from tableorder.domain.exceptions import DomainException
from tableorder.infrastructure.bootstrap import order_repository
from tableorder.infrastructure.cli.formatting import display_order, display_order_row


def _parse_items(raw: str) -> list[OrderItemSpec]:
    """Parse 'm1:Beef Noodles:150:2,m2/large:Tea:40:1' into OrderItemSpecs.

    Each entry is ``menuItemId[/skuId]:name:price:quantity``.
    """
    specs: list[OrderItemSpec] = []
    for entry in raw.split(","):
        entry = entry.strip()
        parts = entry.split(":", 1)
        if len(parts) != 2 or parts[1].count(":") < 2:
            raise click.BadParameter(
                f"Invalid item format '{entry}'. Expected 'menuItemId:name:price:quantity'."
            )
        item_ref, rest = parts
        name, price_str, qty_str = rest.rsplit(":", 2)
        try:
            price = int(price_str)
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid price '{price_str}' or quantity '{qty_str}' for '{name}'."
            )
        menu_item_id, _, sku_id = item_ref.partition("/")
        specs.append(
            OrderItemSpec(
                menu_item_id=menu_item_id.strip(),
                name=name.strip(),
                price=price,
                quantity=qty,
                sku_id=sku_id.strip() or None,
            )
        )
    return specs


def _parse_adjustments(raw: tuple[str, ...]) -> list[AdjustmentInput]:
    """Parse entries like 'Service fee:surcharge:percentage:10'.

    Each entry is ``name:type:valueType:value``; the name may contain colons.
    """
    inputs: list[AdjustmentInput] = []
    for entry in raw:
        parts = entry.rsplit(":", 3)
        if len(parts) != 4:
            raise click.BadParameter(
                f"Invalid adjustment format '{entry}'. Expected 'name:type:valueType:value'."
            )
        name, adjustment_type, value_type, value_str = (p.strip() for p in parts)
        try:
            value = float(value_str)
        except ValueError:
            raise click.BadParameter(f"Invalid adjustment value '{value_str}' for '{name}'.")
        inputs.append(
            AdjustmentInput(
                name=name,
                type=adjustment_type,
                value_type=value_type,
                value=int(value) if value.is_integer() else value,
            )
        )
    return inputs


@click.command("create")
@click.option("--shop", "shop_id", required=True, help="Shop ID.")
@click.option("--table", "table_no", required=True, help="Table number.")
@click.option("--items", required=True, help="Items as 'menuItemId:name:price:qty,...'.")
@click.option("--guest-id", default=None, help="Ordering guest ID.")
@click.option("--guest-name", default=None, help="Ordering guest nickname.")
@click.option(
    "--adjustment",
    "adjustments",
    multiple=True,
    help="Starting adjustment 'name:type:valueType:value'; repeatable.",
)
def order_create(
    shop_id: str,
    table_no: str,
    items: str,
    guest_id: str | None,
    guest_name: str | None,
    adjustments: tuple[str, ...],
) -> None:
    """Place a new order for a table."""
    specs = _parse_items(items)
    starting = _parse_adjustments(adjustments)
    handler = CreateOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(
            shop_id=shop_id,
            table_no=table_no,
            item_specs=specs,
            adjustments=starting,
            guest_id=guest_id,
            guest_name=guest_name,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {dto.id} created  (status={dto.status})")
    display_order(dto)


@click.command("show")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
def order_show(order_id: str) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_order(dto)


@click.command("list")
@click.option("--shop", "shop_id", default=None, help="Only orders of this shop.")
@click.option("--guest-id", default=None, help="Only orders placed by this guest.")
@click.option("--status", default=None, help="Only orders in this status.")
def order_list(shop_id: str | None, guest_id: str | None, status: str | None) -> None:
    """List orders, newest first."""
    handler = ListOrdersHandler(order_repo=order_repository())

    try:
        dtos = handler.handle(shop_id=shop_id, guest_id=guest_id, status=status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not dtos:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<38} {'Table':<6} {'Status':<8} {'Total':>10}  Time")
    click.echo("-" * 72)
    for dto in dtos:
        display_order_row(dto)


def _change_status(order_id: str, status: str) -> None:
    handler = UpdateOrderStatusHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id, status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order {dto.id} is now {dto.status}.")


@click.command("status")
@click.option("--id", "order_id", required=True, help="Order ID.")
@click.option("--to", "status", required=True, help="Target status: new, served or paid.")
def order_status(order_id: str, status: str) -> None:
    """Move an order to another status."""
    _change_status(order_id, status)


@click.command("serve")
@click.option("--id", "order_id", required=True, help="Order ID.")
def order_serve(order_id: str) -> None:
    """Mark an order as served."""
    _change_status(order_id, "served")


@click.command("pay")
@click.option("--id", "order_id", required=True, help="Order ID.")
def order_pay(order_id: str) -> None:
    """Mark an order as paid."""
    _change_status(order_id, "paid")
