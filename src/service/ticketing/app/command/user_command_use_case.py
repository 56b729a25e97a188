"""
User Command Use Cases (Use Case Layer)
"""

from typing import Any, Dict, Self, Tuple

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from pymongo.errors import PyMongoError

from src.platform.config.di import Container
from src.platform.exception.exceptions import (
    ConflictError,
    DomainError,
    InternalError,
    NotFoundError,
)
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_user_repo import IUserRepo
from src.service.ticketing.domain.entity.user_entity import UserEntity, UserRole
from src.service.ticketing.domain.field_name_rule import validate_field_names


class UserCommandUseCase:
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
    async def register_or_login(
        self, *, email: str, profile: Dict[str, Any]
    ) -> Tuple[UserEntity, bool]:
        """
        First call for an email stores the user as a guest; later calls are logins.

        Returns:
            The user and whether it was created by this call
        """
        existing = await self.user_repo.get_by_email(email=email)
        if existing is not None:
            Logger.base.info(f'🔑 [USER] Login for {email}')
            return existing, False

        user = UserEntity.register(email=email, profile=profile)
        try:
            created = await self.user_repo.create(user=user)
        except ConflictError:
            # Concurrent first sign-in won the unique email index
            existing = await self.user_repo.get_by_email(email=email)
            if existing is None:
                raise
            return existing, False

        Logger.base.info(f'👤 [USER] Registered {email}')
        return created, True

    @Logger.io
    async def update_user(self, *, user_id: str, fields: Dict[str, Any]) -> UserEntity:
        fields = {k: v for k, v in fields.items() if k != '_id'}
        if not fields:
            raise DomainError('No fields to update')
        validate_field_names(fields)
        if 'role' in fields:
            try:
                fields['role'] = UserRole(fields['role']).value
            except ValueError:
                raise DomainError(f'Unknown role: {fields["role"]}')

        try:
            user = await self.user_repo.update_fields(user_id=user_id, fields=fields)
        except PyMongoError as e:
            raise InternalError('Error updating user role') from e

        if user is None:
            raise NotFoundError('User not found')

        Logger.base.info(f'✏️ [USER] Updated {sorted(fields)} on user {user_id}')
        return user

    @Logger.io
    async def delete_user(self, *, user_id: str) -> UserEntity:
        try:
            user = await self.user_repo.delete(user_id=user_id)
        except PyMongoError as e:
            raise InternalError('Error deleting user') from e

        if user is None:
            raise NotFoundError('User not found')

        Logger.base.info(f'🗑️ [USER] Deleted user {user_id} ({user.email})')
        return user
