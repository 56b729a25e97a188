from datetime import datetime
from typing import Any, Dict, Optional

import attrs

from src.platform.exception.exceptions import ConflictError, DomainError
from src.service.ticketing.domain.entity.payment_entity import PaymentEntity
from src.service.ticketing.domain.enum.booking_status import BookingStatus


_CORE_FIELDS = ('_id', 'email', 'eventId', 'tickets', 'totalPrice', 'status')


def _parse_status(value: Any) -> BookingStatus:
    if value is None:
        return BookingStatus.REQUESTED
    return BookingStatus(value)


def _parse_ticket_count(value: Any) -> int:
    # Older clients sent the count as a string
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


@attrs.define
class BookingEntity:
    email: str
    event_id: str
    tickets: int
    total_price: Any = 0
    status: BookingStatus = BookingStatus.REQUESTED
    details: Dict[str, Any] = attrs.field(factory=dict)
    id: Optional[str] = None

    @classmethod
    def create(
        cls,
        *,
        email: str,
        event_id: str,
        tickets: int,
        total_price: Any,
        details: Optional[Dict[str, Any]] = None,
    ) -> 'BookingEntity':
        if tickets < 1:
            raise DomainError('tickets must be at least 1')
        return cls(
            email=email,
            event_id=event_id,
            tickets=tickets,
            total_price=total_price,
            status=BookingStatus.REQUESTED,
            details={k: v for k, v in (details or {}).items() if k not in _CORE_FIELDS},
        )

    def validate_can_be_paid(self) -> None:
        """
        Raises:
            ConflictError: a payment for this booking is already running
            DomainError: the booking failed earlier or holds no tickets
        """
        if self.status == BookingStatus.PAYMENT_PROCESSING:
            raise ConflictError('Payment for this ticket is already being processed')
        elif self.status == BookingStatus.FAILED:
            raise DomainError('Booking has failed and cannot be paid')
        elif self.tickets < 1:
            raise DomainError('Booking must contain at least one ticket')

    def to_payment(self, *, payment_details: Dict[str, Any], paid_at: datetime) -> PaymentEntity:
        if self.id is None:
            raise ValueError('Booking must be persisted before it can be paid')
        return PaymentEntity(
            booking_id=self.id,
            email=self.email,
            event_id=self.event_id,
            tickets=self.tickets,
            total_price=self.total_price,
            payment_date=paid_at,
            payment_details=dict(payment_details),
        )

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> 'BookingEntity':
        return cls(
            id=str(document['_id']) if document.get('_id') is not None else None,
            email=document.get('email', ''),
            event_id=str(document.get('eventId', '')),
            tickets=_parse_ticket_count(document.get('tickets')),
            total_price=document.get('totalPrice', 0),
            status=_parse_status(document.get('status')),
            details={k: v for k, v in document.items() if k not in _CORE_FIELDS},
        )

    def to_document(self) -> Dict[str, Any]:
        return {
            **self.details,
            'email': self.email,
            'eventId': self.event_id,
            'tickets': self.tickets,
            'totalPrice': self.total_price,
            'status': self.status.value,
        }

    def to_response(self) -> Dict[str, Any]:
        return {'_id': self.id, **self.to_document()}
