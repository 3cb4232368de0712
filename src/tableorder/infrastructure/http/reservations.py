"""Reservation endpoints: bookings, walk-ins, check-in and cancellation."""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from tableorder.application.create_reservation import CreateReservationHandler
from tableorder.application.list_reservations import ListReservationsHandler
from tableorder.application.show_reservation import ShowReservationHandler
from tableorder.application.update_reservation_status import (
    UpdateReservationStatusHandler,
)
from tableorder.domain.exceptions import ValidationError
from tableorder.domain.repository.reservation_repository import ReservationRepository
from tableorder.infrastructure.bootstrap import reservation_repository
from tableorder.infrastructure.http.schemas import (
    CreateReservationRequest,
    ReservationResponse,
    StatusUpdateRequest,
)

router = APIRouter(prefix="/api/reservations", tags=["reservations"])


@router.get("", response_model=List[ReservationResponse])
def list_reservations(
    shop_id: Optional[str] = Query(None, alias="shopId"),
    reservation_status: Optional[str] = Query(None, alias="status"),
    repo: ReservationRepository = Depends(reservation_repository),
) -> List[ReservationResponse]:
    dtos = ListReservationsHandler(repo).handle(shop_id=shop_id, status=reservation_status)
    return [ReservationResponse.from_dto(dto) for dto in dtos]


@router.post("", response_model=ReservationResponse, status_code=status.HTTP_201_CREATED)
def create_reservation(
    body: CreateReservationRequest,
    repo: ReservationRepository = Depends(reservation_repository),
) -> ReservationResponse:
    dto = CreateReservationHandler(repo).handle(
        shop_id=body.shopId,
        table_no=body.tableNo,
        time=body.time,
        phone=body.phone,
        source=body.source,
        status=body.status,
    )
    return ReservationResponse.from_dto(dto)


@router.get("/{reservation_id}", response_model=ReservationResponse)
def get_reservation(
    reservation_id: str,
    repo: ReservationRepository = Depends(reservation_repository),
) -> ReservationResponse:
    return ReservationResponse.from_dto(ShowReservationHandler(repo).handle(reservation_id))


@router.patch("/{reservation_id}", response_model=ReservationResponse)
def update_reservation(
    reservation_id: str,
    body: StatusUpdateRequest,
    repo: ReservationRepository = Depends(reservation_repository),
) -> ReservationResponse:
    if not body.status:
        raise ValidationError("No valid fields to update", fields={"status": "required"})
    dto = UpdateReservationStatusHandler(repo).handle(reservation_id, body.status)
    return ReservationResponse.from_dto(dto)
