from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse

from src.platform.constant import route_constant
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.command.create_event_use_case import CreateEventUseCase
from src.service.ticketing.app.command.delete_event_use_case import DeleteEventUseCase
from src.service.ticketing.app.command.update_event_use_case import UpdateEventUseCase
from src.service.ticketing.app.query.get_event_use_case import GetEventUseCase
from src.service.ticketing.app.query.list_events_use_case import ListEventsUseCase
from src.service.ticketing.domain.entity.user_entity import UserEntity
from src.service.ticketing.driving_adapter.http_controller.auth.role_auth import (
    require_manage_events,
)
from src.service.ticketing.driving_adapter.http_controller.schema.common_schema import (
    DeleteResponse,
    InsertResponse,
)
from src.service.ticketing.driving_adapter.http_controller.schema.event_schema import (
    EventCreateRequest,
    EventUpdateRequest,
)


router = APIRouter(tags=['event'])


@router.post(route_constant.EVENT_CREATE, status_code=status.HTTP_200_OK)
@Logger.io
async def create_event(
    request: EventCreateRequest,
    current_user: UserEntity = Depends(require_manage_events),
    use_case: CreateEventUseCase = Depends(CreateEventUseCase.depends),
) -> InsertResponse:
    event_id = await use_case.create_event(
        title=request.title,
        image=request.image,
        tickets=request.tickets.model_dump(),
        details=request.extra_fields(),
    )
    return InsertResponse(inserted_id=event_id)


@router.get(route_constant.EVENT_LIST, status_code=status.HTTP_200_OK)
@Logger.io
async def list_events(
    use_case: ListEventsUseCase = Depends(ListEventsUseCase.depends),
) -> List[Dict[str, Any]]:
    events = await use_case.list_all()
    return [event.to_response() for event in events]


@router.get(route_constant.EVENT_GET, status_code=status.HTTP_200_OK)
@Logger.io
async def get_event(
    event_id: str,
    use_case: GetEventUseCase = Depends(GetEventUseCase.depends),
) -> Optional[Dict[str, Any]]:
    event = await use_case.get_by_id(event_id=event_id)
    return event.to_response() if event else None


@router.put(
    route_constant.EVENT_UPDATE,
    status_code=status.HTTP_200_OK,
    response_class=PlainTextResponse,
)
@Logger.io
async def update_event(
    event_id: str,
    request: EventUpdateRequest,
    current_user: UserEntity = Depends(require_manage_events),
    use_case: UpdateEventUseCase = Depends(UpdateEventUseCase.depends),
) -> str:
    await use_case.update_event(event_id=event_id, fields=request.to_fields())
    return 'Event updated successfully!'


@router.delete(route_constant.EVENT_DELETE, status_code=status.HTTP_200_OK)
@Logger.io
async def delete_event(
    event_id: str,
    current_user: UserEntity = Depends(require_manage_events),
    use_case: DeleteEventUseCase = Depends(DeleteEventUseCase.depends),
) -> DeleteResponse:
    deleted_count = await use_case.delete_event(event_id=event_id)
    return DeleteResponse(deleted_count=deleted_count)
