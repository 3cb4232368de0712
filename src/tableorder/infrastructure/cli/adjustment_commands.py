"""CLI commands for discounts and surcharges on an order."""

from __future__ import annotations

import click

from tableorder.application.add_adjustment import AddAdjustmentHandler
from tableorder.application.dto import AdjustmentInput, AdjustmentPatch
from tableorder.application.remove_adjustment import RemoveAdjustmentHandler
from tableorder.application.update_adjustment import UpdateAdjustmentHandler
from tableorder.domain.exceptions import DomainException
from tableorder.infrastructure.bootstrap import order_repository
from tableorder.infrastructure.cli.formatting import display_order

_TYPES = click.Choice(["discount", "surcharge"])
_VALUE_TYPES = click.Choice(["fixed", "percentage"])


@click.command("add")
@click.option("--order", "order_id", required=True, help="Order ID.")
@click.option("--name", required=True, help="Label shown on the bill.")
@click.option("--type", "adjustment_type", required=True, type=_TYPES)
@click.option("--value-type", required=True, type=_VALUE_TYPES)
@click.option("--value", required=True, type=float, help="Amount or percentage.")
def adjustment_add(
    order_id: str, name: str, adjustment_type: str, value_type: str, value: float
) -> None:
    """Add a discount or surcharge to an order."""
    handler = AddAdjustmentHandler(order_repo=order_repository())
    spec = AdjustmentInput(
        name=name,
        type=adjustment_type,
        value_type=value_type,
        value=int(value) if value.is_integer() else value,
    )

    try:
        dto = handler.handle(order_id, spec)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_order(dto)


@click.command("update")
@click.option("--order", "order_id", required=True, help="Order ID.")
@click.option("--id", "adjustment_id", required=True, help="Adjustment ID.")
@click.option("--name", default=None)
@click.option("--type", "adjustment_type", default=None, type=_TYPES)
@click.option("--value-type", default=None, type=_VALUE_TYPES)
@click.option("--value", default=None, type=float)
def adjustment_update(
    order_id: str,
    adjustment_id: str,
    name: str | None,
    adjustment_type: str | None,
    value_type: str | None,
    value: float | None,
) -> None:
    """Change fields of an existing adjustment."""
    handler = UpdateAdjustmentHandler(order_repo=order_repository())
    patch = AdjustmentPatch(
        name=name,
        type=adjustment_type,
        value_type=value_type,
        value=(int(value) if value.is_integer() else value) if value is not None else None,
    )

    try:
        dto = handler.handle(order_id, adjustment_id, patch)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_order(dto)


@click.command("remove")
@click.option("--order", "order_id", required=True, help="Order ID.")
@click.option("--id", "adjustment_id", required=True, help="Adjustment ID.")
def adjustment_remove(order_id: str, adjustment_id: str) -> None:
    """Remove an adjustment from an order."""
    handler = RemoveAdjustmentHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id, adjustment_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_order(dto)
