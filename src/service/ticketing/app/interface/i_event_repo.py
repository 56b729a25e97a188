from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from src.service.ticketing.domain.entity.event_entity import EventEntity


class IEventRepo(ABC):
    """Event repository interface - `eventCollection`"""

    @abstractmethod
    async def create(self, *, event: EventEntity) -> str:
        """Insert an event and return its id."""
        pass

    @abstractmethod
    async def list_all(self) -> List[EventEntity]:
        pass

    @abstractmethod
    async def get_by_id(self, *, event_id: str) -> Optional[EventEntity]:
        pass

    @abstractmethod
    async def get_by_ids(self, *, event_ids: List[str]) -> List[EventEntity]:
        """Load several events in one query. Malformed ids are skipped."""
        pass

    @abstractmethod
    async def update_fields(self, *, event_id: str, fields: Dict[str, Any]) -> int:
        """`$set` the given fields and return the modified count."""
        pass

    @abstractmethod
    async def delete(self, *, event_id: str) -> int:
        """Return the deleted count."""
        pass

    @abstractmethod
    async def decrement_available(self, *, event_id: str, count: int) -> bool:
        """Atomically take `count` tickets from inventory.

        Only matches while `tickets.available >= count`, so inventory never
        goes below zero. Returns False when the event is missing or short.
        """
        pass

    @abstractmethod
    async def increment_available(self, *, event_id: str, count: int) -> bool:
        """Give `count` tickets back (compensation)."""
        pass
