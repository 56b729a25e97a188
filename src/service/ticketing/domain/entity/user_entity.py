from enum import StrEnum
from typing import Any, Dict, FrozenSet, Optional

import attrs

from src.platform.exception.exceptions import DomainError, ForbiddenError
from src.service.ticketing.domain.enum.capability import Capability


class UserRole(StrEnum):
    GUEST = 'guest'
    ADMIN = 'admin'


ROLE_CAPABILITIES: Dict[UserRole, FrozenSet[Capability]] = {
    UserRole.GUEST: frozenset(),
    UserRole.ADMIN: frozenset({Capability.MANAGE_EVENTS, Capability.MANAGE_USERS}),
}


def _parse_role(value: Any) -> UserRole:
    # Anything other than a known role string is treated as a guest
    try:
        return UserRole(value)
    except ValueError:
        return UserRole.GUEST


@attrs.define
class UserEntity:
    email: str
    role: UserRole = UserRole.GUEST
    profile: Dict[str, Any] = attrs.field(factory=dict)
    id: Optional[str] = None

    @property
    def capabilities(self) -> FrozenSet[Capability]:
        return ROLE_CAPABILITIES[self.role]

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    def has_capability(self, capability: Capability) -> bool:
        return capability in self.capabilities

    def authorize(self, capability: Capability) -> None:
        if not self.has_capability(capability):
            raise ForbiddenError('Forbidden message')

    @classmethod
    def register(cls, *, email: str, profile: Dict[str, Any]) -> 'UserEntity':
        """New users always start as guests; roles are granted by an admin."""
        if not email or not email.strip():
            raise DomainError('email is required')
        profile = {k: v for k, v in profile.items() if k not in ('_id', 'email', 'role')}
        return cls(email=email, role=UserRole.GUEST, profile=profile)

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> 'UserEntity':
        profile = {k: v for k, v in document.items() if k not in ('_id', 'email', 'role')}
        return cls(
            id=str(document['_id']) if document.get('_id') is not None else None,
            email=document.get('email', ''),
            role=_parse_role(document.get('role')),
            profile=profile,
        )

    def to_document(self) -> Dict[str, Any]:
        document: Dict[str, Any] = {**self.profile, 'email': self.email}
        if self.role != UserRole.GUEST:
            document['role'] = self.role.value
        return document

    def to_response(self) -> Dict[str, Any]:
        return {'_id': self.id, **self.to_document()}
