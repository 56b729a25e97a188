from pymongo.errors import PyMongoError

from src.platform.exception.exceptions import ForbiddenError, InternalError
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_user_repo import IUserRepo
from src.service.ticketing.domain.entity.user_entity import UserEntity
from src.service.ticketing.domain.enum.capability import Capability


class RoleAuthStrategy:
    """Resolves the requester's role into capabilities; routes never compare role strings."""

    def __init__(self, *, user_repo: IUserRepo) -> None:
        self.user_repo = user_repo

    @Logger.io
    async def authorize(self, *, email: str, capability: Capability) -> UserEntity:
        try:
            user = await self.user_repo.get_by_email(email=email)
        except PyMongoError as e:
            raise InternalError() from e

        # Unknown users have no role
        if user is None:
            raise ForbiddenError('Forbidden message')

        user.authorize(capability)
        return user
