from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from src.service.ticketing.domain.entity.user_entity import UserEntity


class IUserRepo(ABC):
    """User repository interface - `userCollection`"""

    @abstractmethod
    async def create(self, *, user: UserEntity) -> UserEntity:
        """Insert a user and return it with its generated id.

        Raises:
            ConflictError: a user with the same email already exists
        """
        pass

    @abstractmethod
    async def get_by_email(self, *, email: str) -> Optional[UserEntity]:
        pass

    @abstractmethod
    async def get_by_id(self, *, user_id: str) -> Optional[UserEntity]:
        pass

    @abstractmethod
    async def list_all(self) -> List[UserEntity]:
        pass

    @abstractmethod
    async def update_fields(self, *, user_id: str, fields: Dict[str, Any]) -> Optional[UserEntity]:
        """`$set` the given fields and return the updated user, or None if absent."""
        pass

    @abstractmethod
    async def delete(self, *, user_id: str) -> Optional[UserEntity]:
        """Delete the user and return the removed record, or None if absent."""
        pass
