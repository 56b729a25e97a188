from datetime import datetime
from typing import Any, Dict, Optional

import attrs


_CORE_FIELDS = ('_id', 'bookingId', 'email', 'eventId', 'tickets', 'totalPrice', 'paymentDate')


@attrs.frozen
class PaymentEntity:
    """Append-only record of a completed booking. Never updated or deleted."""

    booking_id: str
    email: str
    event_id: str
    tickets: int
    total_price: Any
    payment_date: datetime
    payment_details: Dict[str, Any] = attrs.field(factory=dict)
    id: Optional[str] = None

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> 'PaymentEntity':
        return cls(
            id=str(document['_id']) if document.get('_id') is not None else None,
            booking_id=str(document.get('bookingId', '')),
            email=document.get('email', ''),
            event_id=str(document.get('eventId', '')),
            tickets=document.get('tickets', 0),
            total_price=document.get('totalPrice', 0),
            payment_date=document['paymentDate'],
            payment_details={k: v for k, v in document.items() if k not in _CORE_FIELDS},
        )

    def to_document(self) -> Dict[str, Any]:
        # Booking-derived fields win over anything the client put in paymentDetails
        details = {k: v for k, v in self.payment_details.items() if k not in _CORE_FIELDS}
        return {
            **details,
            'bookingId': self.booking_id,
            'email': self.email,
            'eventId': self.event_id,
            'tickets': self.tickets,
            'totalPrice': self.total_price,
            'paymentDate': self.payment_date,
        }
