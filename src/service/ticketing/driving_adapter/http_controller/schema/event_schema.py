from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class TicketInventory(BaseModel):
    # Extra keys (categories, prices, ...) are stored as sent
    model_config = {'extra': 'allow'}

    available: int = Field(default=0, ge=0)


class EventCreateRequest(BaseModel):
    model_config = {
        'extra': 'allow',
        'json_schema_extra': {
            'example': {
                'title': 'Dhaka Jazz Night',
                'image': 'https://example.com/jazz.jpg',
                'tickets': {'available': 250},
                'date': '2025-03-14',
                'location': 'Bashundhara Convention Center',
                'price': 1500,
            }
        },
    }

    title: str = Field(min_length=1)
    image: str = ''
    tickets: TicketInventory = Field(default_factory=TicketInventory)

    def extra_fields(self) -> Dict[str, Any]:
        return dict(self.model_extra or {})


class EventUpdateRequest(BaseModel):
    """Partial update; only the fields sent are `$set`."""

    model_config = {'extra': 'allow'}

    title: Optional[str] = None
    image: Optional[str] = None
    tickets: Optional[TicketInventory] = None

    def to_fields(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True)
