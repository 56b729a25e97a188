from abc import ABC, abstractmethod
from typing import List, Optional

from src.service.ticketing.domain.entity.booking_entity import BookingEntity
from src.service.ticketing.domain.enum.booking_status import BookingStatus


class IBookingRepo(ABC):
    """Booking repository interface - `bookingCollection`"""

    @abstractmethod
    async def create(self, *, booking: BookingEntity) -> str:
        pass

    @abstractmethod
    async def get_by_id(self, *, booking_id: str) -> Optional[BookingEntity]:
        pass

    @abstractmethod
    async def list_by_email(self, *, email: str) -> List[BookingEntity]:
        pass

    @abstractmethod
    async def claim_for_payment(self, *, booking_id: str) -> Optional[BookingEntity]:
        """Atomically move a REQUESTED booking to PAYMENT_PROCESSING.

        Returns the claimed booking, or None when it is absent or not REQUESTED.
        """
        pass

    @abstractmethod
    async def set_status(self, *, booking_id: str, status: BookingStatus) -> bool:
        pass

    @abstractmethod
    async def delete(self, *, booking_id: str) -> int:
        """Return the deleted count."""
        pass
