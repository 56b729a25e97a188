from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_event_repo import IEventRepo


class DeleteEventUseCase:
    def __init__(self, *, event_repo: IEventRepo) -> None:
        self.event_repo = event_repo

    @classmethod
    @inject
    def depends(
        cls,
        event_repo: IEventRepo = Depends(Provide[Container.event_repo]),
    ) -> Self:
        return cls(event_repo=event_repo)

    @Logger.io
    async def delete_event(self, *, event_id: str) -> int:
        """Returns the deleted count; deleting a missing event is not an error."""
        deleted_count = await self.event_repo.delete(event_id=event_id)
        if deleted_count:
            Logger.base.info(f'🗑️ [DELETE-EVENT] Deleted event {event_id}')
        return deleted_count
