from typing import Any, Dict, List

from fastapi import APIRouter, Depends, status
from opentelemetry import trace

from src.platform.constant import route_constant
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.command.create_booking_use_case import CreateBookingUseCase
from src.service.ticketing.app.command.process_payment_use_case import ProcessPaymentUseCase
from src.service.ticketing.app.query.list_booking_tickets_use_case import (
    ListBookingTicketsUseCase,
)
from src.service.ticketing.driving_adapter.http_controller.auth.role_auth import (
    get_current_email,
)
from src.service.ticketing.driving_adapter.http_controller.schema.booking_schema import (
    BookingCreateRequest,
)
from src.service.ticketing.driving_adapter.http_controller.schema.common_schema import (
    InsertResponse,
)
from src.service.ticketing.driving_adapter.http_controller.schema.payment_schema import (
    ProcessPaymentRequest,
    ProcessPaymentResponse,
)


router = APIRouter(tags=['booking'])
tracer = trace.get_tracer(__name__)


@router.post(route_constant.BOOKING_CREATE, status_code=status.HTTP_200_OK)
@Logger.io
async def create_booking(
    request: BookingCreateRequest,
    current_email: str = Depends(get_current_email),
    use_case: CreateBookingUseCase = Depends(CreateBookingUseCase.depends),
) -> InsertResponse:
    with tracer.start_as_current_span('controller.create_booking') as span:
        span.set_attribute('event_id', request.event_id)
        span.set_attribute('requested_by', current_email)

        booking_id = await use_case.create_booking(
            email=request.email,
            event_id=request.event_id,
            tickets=request.tickets,
            total_price=request.total_price,
            details=request.extra_fields(),
        )
        span.set_attribute('booking.id', booking_id)

        return InsertResponse(inserted_id=booking_id)


@router.get(route_constant.BOOKING_TICKETS, status_code=status.HTTP_200_OK)
@Logger.io
async def list_booking_tickets(
    email: str,
    use_case: ListBookingTicketsUseCase = Depends(ListBookingTicketsUseCase.depends),
) -> List[Dict[str, Any]]:
    return await use_case.list_by_email(email=email)


@router.post(route_constant.PROCESS_PAYMENT, status_code=status.HTTP_200_OK)
@Logger.io
async def process_payment(
    request: ProcessPaymentRequest,
    current_email: str = Depends(get_current_email),
    use_case: ProcessPaymentUseCase = Depends(ProcessPaymentUseCase.depends),
) -> ProcessPaymentResponse:
    result = await use_case.process_payment(
        booking_id=request.ticket_id, payment_details=request.payment_details
    )
    return ProcessPaymentResponse(message=result['message'], payment_id=result['paymentId'])
