"""
User Query Use Cases (Use Case Layer)
"""

from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from pymongo.errors import PyMongoError

from src.platform.config.di import Container
from src.platform.exception.exceptions import InternalError
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_user_repo import IUserRepo
from src.service.ticketing.domain.entity.user_entity import UserEntity


class UserQueryUseCase:
    def __init__(self, *, user_repo: IUserRepo) -> None:
        self.user_repo = user_repo

    @classmethod
    @inject
    def depends(
        cls,
        user_repo: IUserRepo = Depends(Provide[Container.user_repo]),
    ) -> Self:
        return cls(user_repo=user_repo)

    @Logger.io
    async def list_users(self) -> List[UserEntity]:
        try:
            return await self.user_repo.list_all()
        except PyMongoError as e:
            raise InternalError('Error fetching users') from e

    @Logger.io
    async def is_admin(self, *, email: str) -> bool:
        """Unknown emails are simply not admins."""
        try:
            user = await self.user_repo.get_by_email(email=email)
        except PyMongoError as e:
            raise InternalError() from e
        return user is not None and user.is_admin
