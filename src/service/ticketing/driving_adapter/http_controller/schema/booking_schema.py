from typing import Any, Dict

from pydantic import BaseModel, Field


class BookingCreateRequest(BaseModel):
    model_config = {
        'extra': 'allow',
        'populate_by_name': True,
        'json_schema_extra': {
            'example': {
                'email': 'guest@example.com',
                'eventId': '65f1c0ffee0000000000beef',
                'tickets': 2,
                'totalPrice': 3000,
                'title': 'Dhaka Jazz Night',
            }
        },
    }

    email: str = Field(min_length=1)
    event_id: str = Field(alias='eventId', min_length=1)
    tickets: int = Field(ge=1)
    total_price: int | float = Field(default=0, alias='totalPrice')

    def extra_fields(self) -> Dict[str, Any]:
        return dict(self.model_extra or {})
