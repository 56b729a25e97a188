import time
from datetime import datetime, timezone
from typing import Any, Dict, NoReturn, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace
from pymongo.errors import PyMongoError

from src.platform.config.di import Container
from src.platform.database.mongo_setting import to_object_id
from src.platform.exception.exceptions import (
    ConflictError,
    DomainError,
    InternalError,
    NotFoundError,
)
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.ticketing_metrics import metrics
from src.service.ticketing.app.interface.i_booking_repo import IBookingRepo
from src.service.ticketing.app.interface.i_event_repo import IEventRepo
from src.service.ticketing.app.interface.i_payment_repo import IPaymentRepo
from src.service.ticketing.domain.entity.booking_entity import BookingEntity
from src.service.ticketing.domain.entity.event_entity import EventEntity
from src.service.ticketing.domain.enum.booking_status import BookingStatus


PAYMENT_SUCCESS_MESSAGE = 'Payment processed and ticket deleted successfully'


class ProcessPaymentUseCase:
    """
    Pay a booking: requested -> payment_processing -> completed.

    Flow (compensating saga, no multi-document transaction):
    1. Replay: an existing payment is returned and any leftover booking removed
    2. Claim the booking atomically (requested -> payment_processing)
    3. Take the tickets from event inventory, only while enough remain
    4. Insert the payment; if no payment was stored, give the tickets back and release the claim
    5. Delete the booking (the payment stands even if this fails)
    """

    def __init__(
        self,
        *,
        booking_repo: IBookingRepo,
        event_repo: IEventRepo,
        payment_repo: IPaymentRepo,
    ) -> None:
        self.booking_repo = booking_repo
        self.event_repo = event_repo
        self.payment_repo = payment_repo
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        booking_repo: IBookingRepo = Depends(Provide[Container.booking_repo]),
        event_repo: IEventRepo = Depends(Provide[Container.event_repo]),
        payment_repo: IPaymentRepo = Depends(Provide[Container.payment_repo]),
    ) -> Self:
        return cls(booking_repo=booking_repo, event_repo=event_repo, payment_repo=payment_repo)

    @Logger.io
    async def process_payment(
        self, *, booking_id: str, payment_details: Dict[str, Any]
    ) -> Dict[str, Any]:
        """
        Raises:
            NotFoundError: the booking does not exist
            ConflictError: payment already running, or not enough tickets left
            DomainError: malformed id, failed booking, or booking without tickets
            InternalError: event missing, store failure, or booking not deleted
        """
        started_at = time.perf_counter()
        with self.tracer.start_as_current_span(
            'use_case.process_payment',
            attributes={'booking.id': booking_id},
        ) as span:
            try:
                response, tickets = await self._process(
                    booking_id=booking_id, payment_details=payment_details
                )
            except NotFoundError:
                self._record(result='not_found', started_at=started_at)
                raise
            except ConflictError:
                self._record(result='conflict', started_at=started_at)
                raise
            except Exception:
                self._record(result='failed', started_at=started_at)
                raise

            span.set_attribute('payment.id', response['paymentId'])
            self._record(
                result='completed' if tickets else 'replayed',
                started_at=started_at,
                tickets=tickets,
            )
            return response

    async def _process(
        self, *, booking_id: str, payment_details: Dict[str, Any]
    ) -> tuple[Dict[str, Any], int]:
        # Stored bookingIds are the canonical lowercase hex form
        booking_id = str(to_object_id(booking_id))

        # Step 1: Idempotent replay
        existing_payment = await self.payment_repo.get_by_booking_id(booking_id=booking_id)
        if existing_payment is not None and existing_payment.id is not None:
            Logger.base.info(
                f'🔁 [PAYMENT] Booking {booking_id} already paid as {existing_payment.id}'
            )
            # A previous attempt may have stopped before removing the booking
            await self._remove_booking(booking_id=booking_id, must_exist=False)
            return self._build_response(payment_id=existing_payment.id), 0

        # Step 2: Claim
        booking = await self.booking_repo.claim_for_payment(booking_id=booking_id)
        if booking is None:
            await self._raise_claim_failure(booking_id=booking_id)

        if booking.tickets < 1:
            await self._set_status(booking_id=booking_id, status=BookingStatus.FAILED)
            raise DomainError('Booking must contain at least one ticket')

        # Step 3: Inventory
        await self._take_inventory(booking=booking)

        # Step 4: Payment record
        payment = booking.to_payment(
            payment_details=payment_details, paid_at=datetime.now(timezone.utc)
        )
        try:
            payment_id = await self.payment_repo.create(payment=payment)
        except PyMongoError as e:
            Logger.base.error(f'💥 [PAYMENT] Payment insert failed for booking {booking_id}: {e}')
            payment_id = await self._recover_payment(booking=booking, error=e)

        # Step 5: Remove the paid booking
        await self._remove_booking(booking_id=booking_id, must_exist=True)

        Logger.base.info(
            f'💳 [PAYMENT] Booking {booking_id} paid as {payment_id} '
            f'({booking.tickets} ticket(s) of event {booking.event_id})'
        )
        return self._build_response(payment_id=payment_id), booking.tickets

    async def _raise_claim_failure(self, *, booking_id: str) -> NoReturn:
        booking = await self.booking_repo.get_by_id(booking_id=booking_id)
        if booking is None:
            raise NotFoundError('Ticket not found')

        booking.validate_can_be_paid()
        # Status changed between the claim and this read
        raise ConflictError('Payment for this ticket is already being processed')

    async def _take_inventory(self, *, booking: BookingEntity) -> None:
        assert booking.id is not None
        try:
            taken = await self.event_repo.decrement_available(
                event_id=booking.event_id, count=booking.tickets
            )
        except DomainError:
            # Malformed eventId: no such event
            taken = False
        except PyMongoError as e:
            await self._set_status(booking_id=booking.id, status=BookingStatus.REQUESTED)
            raise InternalError() from e

        if taken:
            return

        await self._set_status(booking_id=booking.id, status=BookingStatus.FAILED)
        event = await self._find_event(event_id=booking.event_id)
        if event is None:
            raise InternalError('Failed to update event tickets')
        raise ConflictError('Not enough tickets available')

    async def _find_event(self, *, event_id: str) -> Optional[EventEntity]:
        try:
            return await self.event_repo.get_by_id(event_id=event_id)
        except DomainError:
            return None

    async def _recover_payment(self, *, booking: BookingEntity, error: PyMongoError) -> str:
        """
        The insert error does not prove the write was lost (timeouts, duplicate key).
        Keep a stored payment; compensate only when none exists.
        """
        assert booking.id is not None
        try:
            stored = await self.payment_repo.get_by_booking_id(booking_id=booking.id)
        except PyMongoError as e:
            # Outcome unknown: the booking stays payment_processing with the tickets taken
            Logger.base.critical(
                f'🚨 [PAYMENT] Cannot tell whether booking {booking.id} was paid '
                f'(event {booking.event_id}, {booking.tickets} ticket(s)): {e}'
            )
            raise InternalError() from error

        if stored is not None and stored.id is not None:
            Logger.base.warning(
                f'⚠️ [PAYMENT] Insert for booking {booking.id} was applied as {stored.id} '
                f'despite: {error}'
            )
            return stored.id

        await self._compensate(booking=booking)
        raise InternalError() from error

    async def _remove_booking(self, *, booking_id: str, must_exist: bool) -> None:
        try:
            deleted_count = await self.booking_repo.delete(booking_id=booking_id)
        except PyMongoError as e:
            raise InternalError('Failed to delete the ticket') from e
        if must_exist and deleted_count == 0:
            raise InternalError('Failed to delete the ticket')

    async def _compensate(self, *, booking: BookingEntity) -> None:
        assert booking.id is not None
        try:
            await self.event_repo.increment_available(
                event_id=booking.event_id, count=booking.tickets
            )
            await self.booking_repo.set_status(
                booking_id=booking.id, status=BookingStatus.REQUESTED
            )
            Logger.base.warning(
                f'↩️ [PAYMENT] Compensated booking {booking.id}: '
                f'{booking.tickets} ticket(s) returned to event {booking.event_id}'
            )
        except PyMongoError as e:
            Logger.base.critical(
                f'🚨 [PAYMENT] Compensation failed for booking {booking.id} '
                f'(event {booking.event_id}, {booking.tickets} ticket(s)): {e}'
            )

    async def _set_status(self, *, booking_id: str, status: BookingStatus) -> None:
        try:
            await self.booking_repo.set_status(booking_id=booking_id, status=status)
        except PyMongoError as e:
            Logger.base.error(f'💥 [PAYMENT] Could not set booking {booking_id} to {status}: {e}')

    @staticmethod
    def _build_response(*, payment_id: str) -> Dict[str, Any]:
        return {'message': PAYMENT_SUCCESS_MESSAGE, 'paymentId': payment_id}

    @staticmethod
    def _record(*, result: str, started_at: float, tickets: int = 0) -> None:
        metrics.record_payment(
            result=result, duration=time.perf_counter() - started_at, tickets=tickets
        )
