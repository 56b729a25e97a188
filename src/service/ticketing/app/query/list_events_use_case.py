from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_event_repo import IEventRepo
from src.service.ticketing.domain.entity.event_entity import EventEntity


class ListEventsUseCase:
    def __init__(self, event_repo: IEventRepo) -> None:
        self.event_repo = event_repo

    @classmethod
    @inject
    def depends(
        cls,
        event_repo: IEventRepo = Depends(Provide[Container.event_repo]),
    ) -> Self:
        return cls(event_repo=event_repo)

    @Logger.io
    async def list_all(self) -> List[EventEntity]:
        """Get every event, sold out or not (no pagination)"""
        Logger.base.info('🌟 [LIST_EVENTS] Loading all events')

        events = await self.event_repo.list_all()

        Logger.base.info(f'✅ [LIST_EVENTS] Found {len(events)} events')
        return events
