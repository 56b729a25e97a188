from typing import Any, Dict, List, Optional

from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

from src.platform.database.mongo_setting import MongoDatabase, to_object_id
from src.platform.exception.exceptions import ConflictError
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_user_repo import IUserRepo
from src.service.ticketing.domain.entity.user_entity import UserEntity


class UserRepoImpl(IUserRepo):
    def __init__(self, database: MongoDatabase) -> None:
        self.database = database

    @Logger.io
    async def create(self, *, user: UserEntity) -> UserEntity:
        try:
            result = await self.database.users.insert_one(user.to_document())
        except DuplicateKeyError as e:
            raise ConflictError(f'User with email {user.email} already exists') from e
        return UserEntity.from_document({**user.to_document(), '_id': result.inserted_id})

    @Logger.io
    async def get_by_email(self, *, email: str) -> Optional[UserEntity]:
        document = await self.database.users.find_one({'email': email})
        return UserEntity.from_document(document) if document else None

    @Logger.io
    async def get_by_id(self, *, user_id: str) -> Optional[UserEntity]:
        document = await self.database.users.find_one({'_id': to_object_id(user_id)})
        return UserEntity.from_document(document) if document else None

    @Logger.io
    async def list_all(self) -> List[UserEntity]:
        documents = await self.database.users.find({}).to_list(length=None)
        return [UserEntity.from_document(document) for document in documents]

    @Logger.io
    async def update_fields(self, *, user_id: str, fields: Dict[str, Any]) -> Optional[UserEntity]:
        document = await self.database.users.find_one_and_update(
            {'_id': to_object_id(user_id)},
            {'$set': fields},
            upsert=False,
            return_document=ReturnDocument.AFTER,
        )
        return UserEntity.from_document(document) if document else None

    @Logger.io
    async def delete(self, *, user_id: str) -> Optional[UserEntity]:
        document = await self.database.users.find_one_and_delete({'_id': to_object_id(user_id)})
        return UserEntity.from_document(document) if document else None
