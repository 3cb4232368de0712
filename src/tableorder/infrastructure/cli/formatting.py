"""Shared table rendering for CLI output."""

from __future__ import annotations

import click

from tableorder.application.dto import OrderDTO, ReservationDTO
from tableorder.domain.model.value_objects import format_amount


def display_order(dto: OrderDTO) -> None:
    click.echo(f"Order {dto.id}  (status={dto.status})")
    click.echo(f"Shop: {dto.shop_id}  Table: {dto.table_no}")
    if dto.guest_name:
        click.echo(f"Guest: {dto.guest_name}")
    click.echo(f"Created:  {dto.created_at.strftime('%Y-%m-%d %H:%M UTC')}")
    click.echo()
    click.echo(f"  {'Item':<20} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*47}")
    for item in dto.items:
        click.echo(
            f"  {item.name:<20} {item.quantity:>5} "
            f"{format_amount(item.price):>10} {format_amount(item.line_total):>10}"
        )
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Subtotal':<27} {format_amount(dto.subtotal):>20}")
    for adj in dto.adjustments:
        label = f"{adj.name} ({adj.value}{'%' if adj.value_type == 'percentage' else ''})"
        click.echo(f"  {label:<27} {format_amount(adj.amount):>20}  [{adj.id}]")
    click.echo(f"  {'Order Total':<27} {format_amount(dto.total_price):>20}")


def display_order_row(dto: OrderDTO) -> None:
    click.echo(
        f"{dto.id:<38} {dto.table_no:<6} {dto.status:<8} "
        f"{format_amount(dto.total_price):>10}  {dto.created_at.strftime('%H:%M')}"
    )


def display_reservation(dto: ReservationDTO) -> None:
    checked_in = (
        dto.check_in_time.strftime("%Y-%m-%d %H:%M UTC") if dto.check_in_time else "-"
    )
    click.echo(f"Reservation {dto.id}  (status={dto.status})")
    click.echo(f"Shop: {dto.shop_id}  Table: {dto.table_no}  Time: {dto.time}")
    click.echo(f"Phone: {dto.phone or '-'}  Source: {dto.source}")
    click.echo(f"Checked in: {checked_in}")
