from typing import Any, Dict, Optional

from pydantic import BaseModel, Field

from src.service.ticketing.domain.entity.user_entity import UserRole


class UserLoginRequest(BaseModel):
    model_config = {
        'extra': 'allow',
        'json_schema_extra': {
            'example': {
                'email': 'guest@example.com',
                'name': 'Guest User',
                'photo': 'https://example.com/me.png',
            }
        },
    }

    email: str = Field(min_length=1)

    def profile_fields(self) -> Dict[str, Any]:
        # Roles are granted by an admin, never self-assigned
        return {k: v for k, v in (self.model_extra or {}).items() if k != 'role'}


class LoginResponse(BaseModel):
    """`{token}` for a new user, `{status, message, token}` for a returning one."""

    status: Optional[str] = None
    message: Optional[str] = None
    token: str

    @classmethod
    def for_new_user(cls, *, token: str) -> 'LoginResponse':
        return cls(token=token)

    @classmethod
    def for_returning_user(cls, *, token: str) -> 'LoginResponse':
        return cls(status='success', message='Login success', token=token)


class UserUpdateRequest(BaseModel):
    model_config = {'extra': 'allow'}

    email: Optional[str] = None
    role: Optional[UserRole] = None

    def to_fields(self) -> Dict[str, Any]:
        return self.model_dump(mode='json', exclude_unset=True)


class AdminStatusResponse(BaseModel):
    admin: bool
