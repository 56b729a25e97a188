"""
MongoDB client lifecycle.

`MongoDatabase` is constructed once by the DI container and passed to the
repositories. The application lifespan calls `connect()` on startup and
`close()` on shutdown, so no connection exists as import-time global state.
"""

from typing import Any, Optional

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ASCENDING, AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.server_api import ServerApi

from src.platform.config.core_setting import Settings
from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger


class MongoDatabase:
    def __init__(self, *, settings: Settings) -> None:
        self._settings = settings
        self._client: Optional[AsyncMongoClient] = None
        self._db: Optional[AsyncDatabase] = None

    @property
    def client(self) -> AsyncMongoClient:
        if self._client is None:
            self._client = AsyncMongoClient(
                self._settings.MONGODB_URL,
                server_api=ServerApi('1', strict=True, deprecation_errors=True),
                serverSelectionTimeoutMS=self._settings.MONGODB_SERVER_SELECTION_TIMEOUT_MS,
                tz_aware=True,
            )
        return self._client

    @property
    def db(self) -> AsyncDatabase:
        if self._db is None:
            self._db = self.client[self._settings.MONGODB_DB_NAME]
        return self._db

    def collection(self, name: str) -> AsyncCollection:
        return self.db[name]

    @property
    def users(self) -> AsyncCollection:
        return self.collection(self._settings.USER_COLLECTION)

    @property
    def events(self) -> AsyncCollection:
        return self.collection(self._settings.EVENT_COLLECTION)

    @property
    def bookings(self) -> AsyncCollection:
        return self.collection(self._settings.BOOKING_COLLECTION)

    @property
    def payments(self) -> AsyncCollection:
        return self.collection(self._settings.PAYMENT_COLLECTION)

    async def connect(self) -> None:
        """Ping the deployment (fail-fast) and make sure the indexes exist."""
        await self.client.admin.command('ping')
        Logger.base.info(f'🍃 [MongoDB] Connected to database "{self._settings.MONGODB_DB_NAME}"')
        await self.ensure_indexes()

    async def ensure_indexes(self) -> None:
        await self.users.create_index([('email', ASCENDING)], unique=True)
        # One payment per booking: makes payment processing idempotent
        await self.payments.create_index(
            [('bookingId', ASCENDING)],
            unique=True,
            partialFilterExpression={'bookingId': {'$exists': True}},
        )
        await self.bookings.create_index([('email', ASCENDING)])
        Logger.base.info('🗂️  [MongoDB] Indexes ensured')

    async def close(self) -> None:
        if self._client is not None:
            await self._client.close()
            Logger.base.info('🍃 [MongoDB] Connection closed')
        self._client = None
        self._db = None


def to_object_id(value: Any) -> ObjectId:
    """Parse a client-supplied id; malformed ids are a 400, not a 500."""
    if isinstance(value, ObjectId):
        return value
    try:
        return ObjectId(str(value))
    except (InvalidId, TypeError):
        raise DomainError(f'Invalid id format: {value}')
