from typing import Any, Dict, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import DomainError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_event_repo import IEventRepo
from src.service.ticketing.domain.entity.event_entity import validate_ticket_inventory
from src.service.ticketing.domain.field_name_rule import validate_field_names


class UpdateEventUseCase:
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
    async def update_event(self, *, event_id: str, fields: Dict[str, Any]) -> None:
        """
        Partial update with `$set` semantics.

        Raises:
            DomainError: no updatable fields, a dotted or $ field name, or invalid ticket inventory
            NotFoundError: nothing was modified (missing event or identical values)
        """
        # The id is taken from the path, never from the body
        fields = {k: v for k, v in fields.items() if k != '_id'}
        if not fields:
            raise DomainError('No fields to update')
        validate_field_names(fields)
        if 'tickets' in fields:
            validate_ticket_inventory(fields['tickets'])

        modified_count = await self.event_repo.update_fields(event_id=event_id, fields=fields)
        if modified_count == 0:
            raise NotFoundError('Event not found or no changes made.')

        Logger.base.info(f'✏️ [UPDATE-EVENT] Updated {sorted(fields)} on event {event_id}')
