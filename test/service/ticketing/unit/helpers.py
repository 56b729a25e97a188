"""
Test helpers for unit tests

Provides reusable test doubles (stubs, mocks, fakes) for common dependencies
"""

from datetime import datetime, timezone
from typing import List, Optional
from unittest.mock import AsyncMock

from src.service.ticketing.domain.entity.booking_entity import BookingEntity
from src.service.ticketing.domain.entity.event_entity import EventEntity
from src.service.ticketing.domain.entity.payment_entity import PaymentEntity
from src.service.ticketing.domain.enum.booking_status import BookingStatus


BOOKING_ID = '65f1c0ffee0000000000b001'
EVENT_ID = '65f1c0ffee0000000000e001'
PAYMENT_ID = '65f1c0ffee0000000000f001'
EMAIL = 'guest@example.com'


def make_booking(
    *,
    tickets: int = 2,
    status: BookingStatus = BookingStatus.REQUESTED,
    event_id: str = EVENT_ID,
) -> BookingEntity:
    return BookingEntity(
        id=BOOKING_ID,
        email=EMAIL,
        event_id=event_id,
        tickets=tickets,
        total_price=3000,
        status=status,
    )


def make_event(*, available: int = 10, event_id: str = EVENT_ID) -> EventEntity:
    return EventEntity(
        id=event_id,
        title='Dhaka Jazz Night',
        image='https://example.com/jazz.jpg',
        tickets={'available': available},
    )


def make_payment() -> PaymentEntity:
    return PaymentEntity(
        id=PAYMENT_ID,
        booking_id=BOOKING_ID,
        email=EMAIL,
        event_id=EVENT_ID,
        tickets=2,
        total_price=3000,
        payment_date=datetime(2025, 1, 10, 10, 30, tzinfo=timezone.utc),
    )


class RepositoryMocks:
    """
    Mock repositories container for testing use cases

    Organizes related mock repositories in one place for easier test setup.
    Defaults describe the happy path of a payment: no previous payment, the
    claim succeeds, inventory is sufficient and every write succeeds.

    Example:
        ```python
        mocks = RepositoryMocks(claimed=make_booking(tickets=3))
        use_case = ProcessPaymentUseCase(
            booking_repo=mocks.booking_repo,
            event_repo=mocks.event_repo,
            payment_repo=mocks.payment_repo,
        )
        ```
    """

    def __init__(
        self,
        *,
        claimed: Optional[BookingEntity] = None,
        stored: Optional[BookingEntity] = None,
        event: Optional[EventEntity] = None,
        existing_payment: Optional[PaymentEntity] = None,
        bookings: Optional[List[BookingEntity]] = None,
        events: Optional[List[EventEntity]] = None,
    ):
        claimed = claimed if claimed is not None else make_booking()

        # Booking repo
        self.booking_repo = AsyncMock()
        self.booking_repo.claim_for_payment = AsyncMock(return_value=claimed)
        self.booking_repo.get_by_id = AsyncMock(return_value=stored)
        self.booking_repo.set_status = AsyncMock(return_value=True)
        self.booking_repo.delete = AsyncMock(return_value=1)
        self.booking_repo.list_by_email = AsyncMock(return_value=bookings or [])

        # Event repo
        self.event_repo = AsyncMock()
        self.event_repo.decrement_available = AsyncMock(return_value=True)
        self.event_repo.increment_available = AsyncMock(return_value=True)
        self.event_repo.get_by_id = AsyncMock(return_value=event)
        self.event_repo.get_by_ids = AsyncMock(return_value=events or [])

        # Payment repo
        self.payment_repo = AsyncMock()
        self.payment_repo.get_by_booking_id = AsyncMock(return_value=existing_payment)
        self.payment_repo.create = AsyncMock(return_value=PAYMENT_ID)
