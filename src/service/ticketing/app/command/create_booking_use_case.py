from typing import Any, Dict, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.ticketing_metrics import metrics
from src.service.ticketing.app.interface.i_booking_repo import IBookingRepo
from src.service.ticketing.domain.entity.booking_entity import BookingEntity
from src.service.ticketing.domain.field_name_rule import validate_field_names


class CreateBookingUseCase:
    """
    Store an intent to purchase.

    The booking is saved as sent plus `status: requested`. Neither the event
    id nor the inventory is checked here; both are settled when the booking
    is paid.
    """

    def __init__(self, *, booking_repo: IBookingRepo) -> None:
        self.booking_repo = booking_repo
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        booking_repo: IBookingRepo = Depends(Provide[Container.booking_repo]),
    ) -> Self:
        return cls(booking_repo=booking_repo)

    @Logger.io
    async def create_booking(
        self,
        *,
        email: str,
        event_id: str,
        tickets: int,
        total_price: Any,
        details: Optional[Dict[str, Any]] = None,
    ) -> str:
        with self.tracer.start_as_current_span(
            'use_case.create_booking',
            attributes={'event.id': event_id, 'booking.tickets': tickets},
        ):
            validate_field_names(details or {})
            booking = BookingEntity.create(
                email=email,
                event_id=event_id,
                tickets=tickets,
                total_price=total_price,
                details=details,
            )
            booking_id = await self.booking_repo.create(booking=booking)
            metrics.record_booking_created()

            Logger.base.info(
                f'📝 [CREATE-BOOKING] Booking {booking_id} for {tickets} ticket(s) '
                f'of event {event_id}'
            )
            return booking_id
