from typing import Any, Dict, Optional

import attrs

from src.platform.exception.exceptions import DomainError


_CORE_FIELDS = ('_id', 'title', 'image', 'tickets')


def validate_ticket_inventory(tickets: Any) -> None:
    if not isinstance(tickets, dict):
        raise DomainError('tickets must be an object')
    available = tickets.get('available', 0)
    if not isinstance(available, int) or isinstance(available, bool):
        raise DomainError('tickets.available must be an integer')
    if available < 0:
        raise DomainError('tickets.available cannot be negative')


def _validate_tickets(instance: object, attribute: 'attrs.Attribute', value: Dict[str, Any]) -> None:
    validate_ticket_inventory(value)


@attrs.define
class EventEntity:
    title: str = ''
    image: str = ''
    tickets: Dict[str, Any] = attrs.field(factory=dict, validator=_validate_tickets)
    details: Dict[str, Any] = attrs.field(factory=dict)
    id: Optional[str] = None

    @property
    def available(self) -> int:
        return self.tickets.get('available', 0)

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> 'EventEntity':
        # Stored documents may predate validation
        with attrs.validators.disabled():
            return cls(
                id=str(document['_id']) if document.get('_id') is not None else None,
                title=document.get('title', ''),
                image=document.get('image', ''),
                tickets=dict(document.get('tickets') or {}),
                details={k: v for k, v in document.items() if k not in _CORE_FIELDS},
            )

    def to_document(self) -> Dict[str, Any]:
        return {
            **self.details,
            'title': self.title,
            'image': self.image,
            'tickets': self.tickets,
        }

    def to_response(self) -> Dict[str, Any]:
        return {'_id': self.id, **self.to_document()}

    def display_summary(self) -> Dict[str, Any]:
        return {'title': self.title, 'image': self.image}
