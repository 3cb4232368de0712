"""CLI commands for the Reservation aggregate."""

from __future__ import annotations

import click

from tableorder.application.create_reservation import CreateReservationHandler
from tableorder.application.list_reservations import ListReservationsHandler
from tableorder.application.show_reservation import ShowReservationHandler
from tableorder.application.update_reservation_status import (
    UpdateReservationStatusHandler,
)
from tableorder.domain.exceptions import DomainException
from tableorder.infrastructure.bootstrap import reservation_repository
from tableorder.infrastructure.cli.formatting import display_reservation


@click.command("create")
@click.option("--shop", "shop_id", required=True, help="Shop ID.")
@click.option("--table", "table_no", required=True, help="Table number.")
@click.option("--time", "time_", required=True, help="Booked time, e.g. '2024-05-01 19:00'.")
@click.option("--phone", default="", help="Contact phone.")
@click.option("--source", default="現場", help="預訂 (booking) or 現場 (walk-in).")
def reservation_create(
    shop_id: str, table_no: str, time_: str, phone: str, source: str
) -> None:
    """Register a booking or walk-in."""
    handler = CreateReservationHandler(reservation_repo=reservation_repository())

    try:
        dto = handler.handle(
            shop_id=shop_id, table_no=table_no, time=time_, phone=phone, source=source
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Reservation {dto.id} created  (status={dto.status})")


@click.command("show")
@click.option("--id", "reservation_id", required=True, help="Reservation ID.")
def reservation_show(reservation_id: str) -> None:
    """Show one reservation."""
    handler = ShowReservationHandler(reservation_repo=reservation_repository())

    try:
        dto = handler.handle(reservation_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    display_reservation(dto)


@click.command("list")
@click.option("--shop", "shop_id", default=None, help="Only reservations of this shop.")
@click.option("--status", default=None, help="Only reservations in this status.")
def reservation_list(shop_id: str | None, status: str | None) -> None:
    """List reservations by booked time."""
    handler = ListReservationsHandler(reservation_repo=reservation_repository())

    try:
        dtos = handler.handle(shop_id=shop_id, status=status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not dtos:
        click.echo("No reservations found.")
        return

    click.echo(f"{'ID':<38} {'Time':<18} {'Table':<6} {'Status':<6} Phone")
    click.echo("-" * 80)
    for dto in dtos:
        click.echo(
            f"{dto.id:<38} {dto.time:<18} {dto.table_no:<6} {dto.status:<6} {dto.phone}"
        )


def _change_status(reservation_id: str, status: str) -> None:
    handler = UpdateReservationStatusHandler(reservation_repo=reservation_repository())

    try:
        dto = handler.handle(reservation_id, status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Reservation {dto.id} is now {dto.status}.")


@click.command("status")
@click.option("--id", "reservation_id", required=True, help="Reservation ID.")
@click.option("--to", "status", required=True, help="待入座, 已入座 or 已取消.")
def reservation_status(reservation_id: str, status: str) -> None:
    """Move a reservation to another status."""
    _change_status(reservation_id, status)


@click.command("check-in")
@click.option("--id", "reservation_id", required=True, help="Reservation ID.")
def reservation_check_in(reservation_id: str) -> None:
    """Seat the party and stamp the check-in time."""
    _change_status(reservation_id, "已入座")


@click.command("cancel")
@click.option("--id", "reservation_id", required=True, help="Reservation ID.")
def reservation_cancel(reservation_id: str) -> None:
    """Cancel a reservation."""
    _change_status(reservation_id, "已取消")
