from typing import Any, Dict

from pydantic import BaseModel, Field


class ProcessPaymentRequest(BaseModel):
    model_config = {
        'populate_by_name': True,
        'json_schema_extra': {
            'example': {
                'ticketId': '65f1c0ffee0000000000cafe',
                'paymentDetails': {'method': 'card', 'transactionId': 'pi_3Nx'},
            }
        },
    }

    # The booking id; the name is kept for existing clients
    ticket_id: str = Field(alias='ticketId', min_length=1)
    payment_details: Dict[str, Any] = Field(default_factory=dict, alias='paymentDetails')


class ProcessPaymentResponse(BaseModel):
    model_config = {'populate_by_name': True}

    message: str
    payment_id: str = Field(alias='paymentId')
