from abc import ABC, abstractmethod
from typing import Optional

from src.service.ticketing.domain.entity.payment_entity import PaymentEntity


class IPaymentRepo(ABC):
    """Payment repository interface - `paymentCollection` (append-only)"""

    @abstractmethod
    async def create(self, *, payment: PaymentEntity) -> str:
        pass

    @abstractmethod
    async def get_by_booking_id(self, *, booking_id: str) -> Optional[PaymentEntity]:
        pass
