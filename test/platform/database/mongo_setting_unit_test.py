from unittest.mock import AsyncMock, MagicMock

from bson import ObjectId
import pytest

from src.platform.config.core_setting import Settings
from src.platform.database.mongo_setting import MongoDatabase, to_object_id
from src.platform.exception.exceptions import DomainError


@pytest.mark.unit
class TestToObjectId:
    def test_parses_hex_string(self) -> None:
        assert to_object_id('65f1c0ffee0000000000e001') == ObjectId('65f1c0ffee0000000000e001')

    def test_passes_object_id_through(self) -> None:
        object_id = ObjectId()

        assert to_object_id(object_id) is object_id

    @pytest.mark.parametrize('value', ['', 'not-an-id', '123', None])
    def test_malformed_id_is_domain_error(self, value: object) -> None:
        with pytest.raises(DomainError, match='Invalid id format'):
            to_object_id(value)


@pytest.mark.unit
class TestMongoDatabase:
    @pytest.mark.asyncio
    async def test_collections_use_configured_names(self) -> None:
        database = MongoDatabase(settings=Settings(MONGODB_DB_NAME='bookMyEvent_unit'))

        assert database.db.name == 'bookMyEvent_unit'
        assert database.users.name == 'userCollection'
        assert database.events.name == 'eventCollection'
        assert database.bookings.name == 'bookingCollection'
        assert database.payments.name == 'paymentCollection'

        await database.close()

    @pytest.mark.asyncio
    async def test_connect_pings_and_ensures_indexes(self) -> None:
        database = MongoDatabase(settings=Settings())
        client = MagicMock()
        client.admin.command = AsyncMock()
        database._client = client
        database.ensure_indexes = AsyncMock()  # type: ignore[method-assign]

        await database.connect()

        client.admin.command.assert_awaited_once_with('ping')
        database.ensure_indexes.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_close_releases_client(self) -> None:
        database = MongoDatabase(settings=Settings())
        client = MagicMock()
        client.close = AsyncMock()
        database._client = client

        await database.close()

        client.close.assert_awaited_once()
        assert database._client is None
