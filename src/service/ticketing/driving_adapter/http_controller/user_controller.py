from typing import Any, Dict, List

from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, status

from src.platform.config.di import Container
from src.platform.constant import route_constant
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.command.user_command_use_case import UserCommandUseCase
from src.service.ticketing.app.query.user_query_use_case import UserQueryUseCase
from src.service.ticketing.domain.entity.user_entity import UserEntity
from src.service.ticketing.driving_adapter.http_controller.auth.jwt_auth import JwtAuth
from src.service.ticketing.driving_adapter.http_controller.auth.role_auth import (
    require_manage_users,
)
from src.service.ticketing.driving_adapter.http_controller.schema.user_schema import (
    AdminStatusResponse,
    LoginResponse,
    UserLoginRequest,
    UserUpdateRequest,
)


# === API Router ===

router = APIRouter(tags=['user'])


@router.post(
    route_constant.USER_LOGIN,
    status_code=status.HTTP_200_OK,
    response_model_exclude_none=True,
)
@Logger.io
@inject
async def register_or_login(
    request: UserLoginRequest,
    use_case: UserCommandUseCase = Depends(UserCommandUseCase.depends),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
) -> LoginResponse:
    user, created = await use_case.register_or_login(
        email=request.email, profile=request.profile_fields()
    )
    token = jwt_auth.create_jwt_token(user)

    if created:
        return LoginResponse.for_new_user(token=token)
    return LoginResponse.for_returning_user(token=token)


@router.get(route_constant.USER_LIST, status_code=status.HTTP_200_OK)
@Logger.io
async def list_users(
    use_case: UserQueryUseCase = Depends(UserQueryUseCase.depends),
) -> List[Dict[str, Any]]:
    users = await use_case.list_users()
    return [user.to_response() for user in users]


@router.get(route_constant.USER_IS_ADMIN, status_code=status.HTTP_200_OK)
@Logger.io
async def is_admin(
    email: str,
    use_case: UserQueryUseCase = Depends(UserQueryUseCase.depends),
) -> AdminStatusResponse:
    return AdminStatusResponse(admin=await use_case.is_admin(email=email))


@router.put(route_constant.USER_UPDATE, status_code=status.HTTP_200_OK)
@Logger.io
async def update_user(
    user_id: str,
    request: UserUpdateRequest,
    current_user: UserEntity = Depends(require_manage_users),
    use_case: UserCommandUseCase = Depends(UserCommandUseCase.depends),
) -> Dict[str, Any]:
    user = await use_case.update_user(user_id=user_id, fields=request.to_fields())
    return user.to_response()


@router.delete(route_constant.USER_DELETE, status_code=status.HTTP_200_OK)
@Logger.io
async def delete_user(
    user_id: str,
    current_user: UserEntity = Depends(require_manage_users),
    use_case: UserCommandUseCase = Depends(UserCommandUseCase.depends),
) -> Dict[str, Any]:
    user = await use_case.delete_user(user_id=user_id)
    return user.to_response()
