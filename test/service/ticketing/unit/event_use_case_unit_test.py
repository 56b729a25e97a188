from unittest.mock import AsyncMock

import pytest

from src.platform.exception.exceptions import DomainError, NotFoundError
from src.service.ticketing.app.command.create_event_use_case import CreateEventUseCase
from src.service.ticketing.app.command.delete_event_use_case import DeleteEventUseCase
from src.service.ticketing.app.command.update_event_use_case import UpdateEventUseCase
from test.service.ticketing.unit.helpers import EVENT_ID


@pytest.fixture
def mock_event_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.create = AsyncMock(return_value=EVENT_ID)
    repo.update_fields = AsyncMock(return_value=1)
    repo.delete = AsyncMock(return_value=1)
    return repo


@pytest.mark.unit
class TestCreateEvent:
    @pytest.mark.asyncio
    async def test_stores_extra_fields_as_sent(self, mock_event_repo: AsyncMock) -> None:
        use_case = CreateEventUseCase(event_repo=mock_event_repo)

        event_id = await use_case.create_event(
            title='Concert',
            image='img.png',
            tickets={'available': 50, 'vip': 10},
            details={'location': 'Dhaka', '_id': 'ignored'},
        )

        assert event_id == EVENT_ID
        event = mock_event_repo.create.await_args.kwargs['event']
        assert event.to_document() == {
            'location': 'Dhaka',
            'title': 'Concert',
            'image': 'img.png',
            'tickets': {'available': 50, 'vip': 10},
        }

    @pytest.mark.asyncio
    async def test_negative_inventory_is_rejected(self, mock_event_repo: AsyncMock) -> None:
        use_case = CreateEventUseCase(event_repo=mock_event_repo)

        with pytest.raises(DomainError):
            await use_case.create_event(
                title='Concert', image='', tickets={'available': -1}, details={}
            )

        mock_event_repo.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_operator_key_in_details_is_rejected(self, mock_event_repo: AsyncMock) -> None:
        use_case = CreateEventUseCase(event_repo=mock_event_repo)

        with pytest.raises(DomainError, match='Invalid field name'):
            await use_case.create_event(
                title='Concert', image='', tickets={'available': 5}, details={'$where': '1'}
            )

        mock_event_repo.create.assert_not_awaited()


@pytest.mark.unit
class TestUpdateEvent:
    @pytest.mark.asyncio
    async def test_body_id_is_ignored(self, mock_event_repo: AsyncMock) -> None:
        use_case = UpdateEventUseCase(event_repo=mock_event_repo)

        await use_case.update_event(event_id=EVENT_ID, fields={'_id': 'x', 'title': 'New'})

        mock_event_repo.update_fields.assert_awaited_once_with(
            event_id=EVENT_ID, fields={'title': 'New'}
        )

    @pytest.mark.asyncio
    async def test_nothing_modified_raises_not_found(self, mock_event_repo: AsyncMock) -> None:
        mock_event_repo.update_fields.return_value = 0
        use_case = UpdateEventUseCase(event_repo=mock_event_repo)

        with pytest.raises(NotFoundError, match='Event not found or no changes made.'):
            await use_case.update_event(event_id=EVENT_ID, fields={'title': 'Same'})

    @pytest.mark.asyncio
    async def test_empty_update_raises_domain_error(self, mock_event_repo: AsyncMock) -> None:
        use_case = UpdateEventUseCase(event_repo=mock_event_repo)

        with pytest.raises(DomainError):
            await use_case.update_event(event_id=EVENT_ID, fields={'_id': EVENT_ID})

    @pytest.mark.asyncio
    async def test_negative_inventory_update_is_rejected(self, mock_event_repo: AsyncMock) -> None:
        use_case = UpdateEventUseCase(event_repo=mock_event_repo)

        with pytest.raises(DomainError):
            await use_case.update_event(event_id=EVENT_ID, fields={'tickets': {'available': -5}})

        mock_event_repo.update_fields.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        'fields',
        [
            {'tickets.available': -5},
            {'title': 'New', 'tickets.available': 999},
            {'$inc': {'tickets.available': -5}},
        ],
    )
    async def test_dotted_or_operator_keys_are_rejected(
        self, mock_event_repo: AsyncMock, fields: dict
    ) -> None:
        use_case = UpdateEventUseCase(event_repo=mock_event_repo)

        with pytest.raises(DomainError, match='Invalid field name'):
            await use_case.update_event(event_id=EVENT_ID, fields=fields)

        mock_event_repo.update_fields.assert_not_awaited()


@pytest.mark.unit
class TestDeleteEvent:
    @pytest.mark.asyncio
    async def test_returns_deleted_count(self, mock_event_repo: AsyncMock) -> None:
        mock_event_repo.delete.return_value = 0
        use_case = DeleteEventUseCase(event_repo=mock_event_repo)

        assert await use_case.delete_event(event_id=EVENT_ID) == 0
