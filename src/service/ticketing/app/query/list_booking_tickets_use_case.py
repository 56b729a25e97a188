from typing import Any, Dict, List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from pymongo.errors import PyMongoError

from src.platform.config.di import Container
from src.platform.exception.exceptions import InternalError
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_booking_repo import IBookingRepo
from src.service.ticketing.app.interface.i_event_repo import IEventRepo


class ListBookingTicketsUseCase:
    """Bookings of one email, each enriched with the `{title, image}` of its event."""

    def __init__(self, *, booking_repo: IBookingRepo, event_repo: IEventRepo) -> None:
        self.booking_repo = booking_repo
        self.event_repo = event_repo

    @classmethod
    @inject
    def depends(
        cls,
        booking_repo: IBookingRepo = Depends(Provide[Container.booking_repo]),
        event_repo: IEventRepo = Depends(Provide[Container.event_repo]),
    ) -> Self:
        return cls(booking_repo=booking_repo, event_repo=event_repo)

    @Logger.io
    async def list_by_email(self, *, email: str) -> List[Dict[str, Any]]:
        try:
            bookings = await self.booking_repo.list_by_email(email=email)
            if not bookings:
                return []

            # One `$in` query for all events; duplicates collapse
            event_ids = list(dict.fromkeys(booking.event_id for booking in bookings))
            events = await self.event_repo.get_by_ids(event_ids=event_ids)
        except PyMongoError as e:
            raise InternalError() from e

        events_by_id = {event.id: event for event in events}

        enriched: List[Dict[str, Any]] = []
        for booking in bookings:
            event = events_by_id.get(booking.event_id)
            if event is None:
                Logger.base.warning(
                    f'⚠️ [BOOKING_TICKETS] Booking {booking.id} points at missing event '
                    f'{booking.event_id!r}'
                )
            enriched.append(
                {
                    **booking.to_response(),
                    'event': event.display_summary() if event is not None else None,
                }
            )

        Logger.base.info(f'🎟️ [BOOKING_TICKETS] {len(enriched)} booking(s) for {email}')
        return enriched
