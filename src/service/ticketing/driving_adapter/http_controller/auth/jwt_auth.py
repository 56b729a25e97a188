"""
Bearer token issuing and verification
"""

from datetime import datetime, timedelta, timezone
from typing import Dict, Optional

import jwt

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import AuthenticationError
from src.service.ticketing.domain.entity.user_entity import UserEntity


NOT_AUTHORIZED_MESSAGE = 'You are not authorized'


class JwtAuth:
    def __init__(self) -> None:
        self.secret = settings.JWT_SECRET.get_secret_value()
        self.algorithm = settings.JWT_ALGORITHM
        self.token_expire_days = settings.ACCESS_TOKEN_EXPIRE_DAYS

    def create_jwt_token(self, user_entity: UserEntity) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            'email': user_entity.email,
            'iat': now,
            'exp': now + timedelta(days=self.token_expire_days),
        }

        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def decode_jwt_token(self, token: str) -> Dict:
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={'require': ['exp', 'iat']},
            )
            return payload
        except jwt.PyJWTError as e:
            raise AuthenticationError(NOT_AUTHORIZED_MESSAGE) from e

    @staticmethod
    def extract_bearer_token(authorization: Optional[str]) -> str:
        """Take the credential out of an `Authorization: Bearer <token>` header."""
        if not authorization:
            raise AuthenticationError(NOT_AUTHORIZED_MESSAGE)

        scheme, _, token = authorization.partition(' ')
        if scheme.lower() != 'bearer' or not token.strip():
            raise AuthenticationError(NOT_AUTHORIZED_MESSAGE)
        return token.strip()

    def get_email_from_authorization(self, authorization: Optional[str]) -> str:
        payload = self.decode_jwt_token(self.extract_bearer_token(authorization))

        email = payload.get('email')
        if not email or not isinstance(email, str):
            raise AuthenticationError(NOT_AUTHORIZED_MESSAGE)
        return email
