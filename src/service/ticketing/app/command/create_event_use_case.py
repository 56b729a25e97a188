from typing import Any, Dict, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_event_repo import IEventRepo
from src.service.ticketing.domain.entity.event_entity import EventEntity
from src.service.ticketing.domain.field_name_rule import validate_field_names


class CreateEventUseCase:
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
    async def create_event(
        self,
        *,
        title: str,
        image: str,
        tickets: Dict[str, Any],
        details: Dict[str, Any],
    ) -> str:
        validate_field_names(details)
        event = EventEntity(
            title=title,
            image=image,
            tickets=tickets,
            details={k: v for k, v in details.items() if k != '_id'},
        )
        event_id = await self.event_repo.create(event=event)

        Logger.base.info(
            f'🎫 [CREATE-EVENT] Created event {event_id} "{title}" '
            f'with {event.available} tickets available'
        )
        return event_id
