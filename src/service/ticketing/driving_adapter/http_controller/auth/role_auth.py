from typing import Optional

from dependency_injector.wiring import Provide, inject
from fastapi import Depends, Header
from opentelemetry import trace

from src.platform.config.di import Container
from src.service.ticketing.domain.entity.user_entity import UserEntity
from src.service.ticketing.domain.enum.capability import Capability
from src.service.ticketing.driving_adapter.http_controller.auth.jwt_auth import JwtAuth
from src.service.ticketing.driving_adapter.http_controller.auth.role_auth_strategy import (
    RoleAuthStrategy,
)


@inject
async def get_current_email(
    authorization: Optional[str] = Header(None),
    jwt_auth: JwtAuth = Depends(Provide[Container.jwt_auth]),
) -> str:
    """Verify the bearer token (stateless, no DB query) and return its email claim."""
    return jwt_auth.get_email_from_authorization(authorization)


@inject
async def get_role_auth_strategy(
    strategy: RoleAuthStrategy = Depends(Provide[Container.role_auth_strategy]),
) -> RoleAuthStrategy:
    return strategy


class RequireCapability:
    def __init__(self, capability: Capability) -> None:
        self.capability = capability
        self.tracer = trace.get_tracer(__name__)

    async def __call__(
        self,
        email: str = Depends(get_current_email),
        strategy: RoleAuthStrategy = Depends(get_role_auth_strategy),
    ) -> UserEntity:
        with self.tracer.start_as_current_span(
            'auth.require_capability',
            attributes={'auth.capability': self.capability.value},
        ):
            return await strategy.authorize(email=email, capability=self.capability)


def require_capability(capability: Capability) -> RequireCapability:
    return RequireCapability(capability)


require_manage_events = require_capability(Capability.MANAGE_EVENTS)
require_manage_users = require_capability(Capability.MANAGE_USERS)
