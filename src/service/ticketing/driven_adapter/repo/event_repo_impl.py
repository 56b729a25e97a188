from typing import Any, Dict, List, Optional

from bson import ObjectId

from src.platform.database.mongo_setting import MongoDatabase, to_object_id
from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_event_repo import IEventRepo
from src.service.ticketing.domain.entity.event_entity import EventEntity


class EventRepoImpl(IEventRepo):
    def __init__(self, database: MongoDatabase) -> None:
        self.database = database

    @Logger.io
    async def create(self, *, event: EventEntity) -> str:
        result = await self.database.events.insert_one(event.to_document())
        return str(result.inserted_id)

    @Logger.io
    async def list_all(self) -> List[EventEntity]:
        documents = await self.database.events.find({}).to_list(length=None)
        return [EventEntity.from_document(document) for document in documents]

    @Logger.io
    async def get_by_id(self, *, event_id: str) -> Optional[EventEntity]:
        document = await self.database.events.find_one({'_id': to_object_id(event_id)})
        return EventEntity.from_document(document) if document else None

    @Logger.io
    async def get_by_ids(self, *, event_ids: List[str]) -> List[EventEntity]:
        object_ids: List[ObjectId] = []
        for event_id in event_ids:
            try:
                object_ids.append(to_object_id(event_id))
            except DomainError:
                Logger.base.warning(f'⚠️ [EVENT_REPO] Skipping malformed event id: {event_id!r}')
        if not object_ids:
            return []

        documents = await self.database.events.find({'_id': {'$in': object_ids}}).to_list(
            length=None
        )
        return [EventEntity.from_document(document) for document in documents]

    @Logger.io
    async def update_fields(self, *, event_id: str, fields: Dict[str, Any]) -> int:
        result = await self.database.events.update_one(
            {'_id': to_object_id(event_id)},
            {'$set': fields},
            upsert=False,
        )
        return result.modified_count

    @Logger.io
    async def delete(self, *, event_id: str) -> int:
        result = await self.database.events.delete_one({'_id': to_object_id(event_id)})
        return result.deleted_count

    @Logger.io
    async def decrement_available(self, *, event_id: str, count: int) -> bool:
        result = await self.database.events.update_one(
            {'_id': to_object_id(event_id), 'tickets.available': {'$gte': count}},
            {'$inc': {'tickets.available': -count}},
        )
        return result.modified_count == 1

    @Logger.io
    async def increment_available(self, *, event_id: str, count: int) -> bool:
        result = await self.database.events.update_one(
            {'_id': to_object_id(event_id)},
            {'$inc': {'tickets.available': count}},
        )
        return result.modified_count == 1
