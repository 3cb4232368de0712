import click
import uvicorn

from tableorder.infrastructure.cli.adjustment_commands import (
    adjustment_add,
    adjustment_remove,
    adjustment_update,
)
from tableorder.infrastructure.cli.order_commands import (
    order_create,
    order_list,
    order_pay,
    order_serve,
    order_show,
    order_status,
)
from tableorder.infrastructure.cli.reservation_commands import (
    reservation_cancel,
    reservation_check_in,
    reservation_create,
    reservation_list,
    reservation_show,
    reservation_status,
)
from tableorder.infrastructure.config import configure_logging, get_settings


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log at the configured level.")
def cli(verbose: bool) -> None:
    """tableorder — restaurant orders and reservations"""
    configure_logging(get_settings().log_level if verbose else "WARNING")


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def adjustment() -> None:
    """Manage discounts and surcharges."""


@cli.group()
def reservation() -> None:
    """Manage reservations."""


@cli.command("serve")
@click.option("--host", default=None, help="Bind address (default from settings).")
@click.option("--port", default=None, type=int, help="Port (default from settings).")
def serve(host: str | None, port: int | None) -> None:
    """Run the HTTP API."""
    settings = get_settings()
    uvicorn.run(
        "tableorder.infrastructure.http.app:create_app",
        factory=True,
        host=host or settings.host,
        port=port or settings.port,
    )


# Register subcommands
order.add_command(order_create)
order.add_command(order_list)
order.add_command(order_pay)
order.add_command(order_serve)
order.add_command(order_show)
order.add_command(order_status)
adjustment.add_command(adjustment_add)
adjustment.add_command(adjustment_remove)
adjustment.add_command(adjustment_update)
reservation.add_command(reservation_cancel)
reservation.add_command(reservation_check_in)
reservation.add_command(reservation_create)
reservation.add_command(reservation_list)
reservation.add_command(reservation_show)
reservation.add_command(reservation_status)
