import json
from pathlib import Path
from typing import Annotated, List

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'BookMyEvent API'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production
    PORT: int = 5000

    # Security
    JWT_SECRET: SecretStr = SecretStr('test_secret_key_change_in_production')
    JWT_ALGORITHM: str = 'HS256'
    ACCESS_TOKEN_EXPIRE_DAYS: int = 7

    # CORS
    # Comma separated in .env; NoDecode keeps pydantic-settings from JSON-parsing it first
    BACKEND_CORS_ORIGINS: Annotated[List[str], NoDecode] = ['*']

    @field_validator('BACKEND_CORS_ORIGINS', mode='before')
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str) and v.startswith('['):
            return json.loads(v)
        elif isinstance(v, str):
            return [i.strip() for i in v.split(',') if i.strip()]
        elif isinstance(v, list):
            return v
        return []

    # MongoDB Configuration
    MONGODB_URL: str = 'mongodb://localhost:27017'
    MONGODB_DB_NAME: str = 'bookMyEvent'
    MONGODB_SERVER_SELECTION_TIMEOUT_MS: int = 5000

    # Collection names (kept from the existing bookMyEvent database)
    USER_COLLECTION: str = 'userCollection'
    EVENT_COLLECTION: str = 'eventCollection'
    BOOKING_COLLECTION: str = 'bookingCollection'
    PAYMENT_COLLECTION: str = 'paymentCollection'


settings = Settings()  # type: ignore
