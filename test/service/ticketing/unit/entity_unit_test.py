from datetime import datetime, timezone

from bson import ObjectId
import pytest

from src.platform.exception.exceptions import ConflictError, DomainError, ForbiddenError
from src.service.ticketing.domain.entity.booking_entity import BookingEntity
from src.service.ticketing.domain.entity.event_entity import EventEntity
from src.service.ticketing.domain.entity.user_entity import UserEntity, UserRole
from src.service.ticketing.domain.enum.booking_status import BookingStatus
from src.service.ticketing.domain.enum.capability import Capability


@pytest.mark.unit
class TestUserEntity:
    def test_admin_has_every_capability(self) -> None:
        user = UserEntity(email='a@example.com', role=UserRole.ADMIN)

        assert user.has_capability(Capability.MANAGE_EVENTS)
        assert user.has_capability(Capability.MANAGE_USERS)
        user.authorize(Capability.MANAGE_USERS)

    def test_guest_is_forbidden(self) -> None:
        user = UserEntity(email='g@example.com')

        with pytest.raises(ForbiddenError, match='Forbidden message'):
            user.authorize(Capability.MANAGE_EVENTS)

    def test_unknown_stored_role_is_guest(self) -> None:
        user = UserEntity.from_document({'_id': ObjectId(), 'email': 'x@example.com', 'role': 'vip'})

        assert user.role == UserRole.GUEST
        assert user.capabilities == frozenset()

    def test_register_strips_role_and_id(self) -> None:
        user = UserEntity.register(
            email='n@example.com', profile={'role': 'admin', '_id': 'x', 'name': 'N'}
        )

        assert user.role == UserRole.GUEST
        assert user.to_document() == {'name': 'N', 'email': 'n@example.com'}

    def test_register_requires_email(self) -> None:
        with pytest.raises(DomainError):
            UserEntity.register(email='  ', profile={})

    def test_response_renders_id_as_string(self) -> None:
        object_id = ObjectId()
        user = UserEntity.from_document(
            {'_id': object_id, 'email': 'a@example.com', 'role': 'admin', 'name': 'A'}
        )

        assert user.to_response() == {
            '_id': str(object_id),
            'name': 'A',
            'email': 'a@example.com',
            'role': 'admin',
        }


@pytest.mark.unit
class TestEventEntity:
    def test_negative_inventory_is_rejected(self) -> None:
        with pytest.raises(DomainError):
            EventEntity(title='x', tickets={'available': -1})

    def test_non_integer_inventory_is_rejected(self) -> None:
        with pytest.raises(DomainError):
            EventEntity(title='x', tickets={'available': '10'})

    def test_stored_document_loads_without_validation(self) -> None:
        event = EventEntity.from_document(
            {'_id': ObjectId(), 'title': 'Old', 'tickets': {'available': '7'}, 'venue': 'Hall'}
        )

        assert event.details == {'venue': 'Hall'}
        assert event.tickets == {'available': '7'}


@pytest.mark.unit
class TestBookingEntity:
    def test_create_requires_tickets(self) -> None:
        with pytest.raises(DomainError):
            BookingEntity.create(email='a@example.com', event_id='e', tickets=0, total_price=0)

    def test_create_starts_requested_and_keeps_extra_fields(self) -> None:
        booking = BookingEntity.create(
            email='a@example.com',
            event_id='e',
            tickets=2,
            total_price=100,
            details={'seat': 'A1', 'status': 'completed'},
        )

        assert booking.status == BookingStatus.REQUESTED
        assert booking.to_document() == {
            'seat': 'A1',
            'email': 'a@example.com',
            'eventId': 'e',
            'tickets': 2,
            'totalPrice': 100,
            'status': 'requested',
        }

    def test_document_without_status_is_requested(self) -> None:
        booking = BookingEntity.from_document(
            {'_id': ObjectId(), 'email': 'a@example.com', 'eventId': 'e', 'tickets': '3'}
        )

        assert booking.status == BookingStatus.REQUESTED
        assert booking.tickets == 3

    @pytest.mark.parametrize(
        ('status', 'error'),
        [
            (BookingStatus.PAYMENT_PROCESSING, ConflictError),
            (BookingStatus.FAILED, DomainError),
        ],
    )
    def test_validate_can_be_paid(self, status: BookingStatus, error: type) -> None:
        booking = BookingEntity(email='a', event_id='e', tickets=1, status=status)

        with pytest.raises(error):
            booking.validate_can_be_paid()

    def test_to_payment_requires_persisted_booking(self) -> None:
        booking = BookingEntity(email='a', event_id='e', tickets=1)

        with pytest.raises(ValueError):
            booking.to_payment(payment_details={}, paid_at=datetime.now(timezone.utc))
