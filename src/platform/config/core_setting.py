import json
from pathlib import Path
from typing import Annotated, List, Literal

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

    PROJECT_NAME: str = 'Cinema Booking System'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production

    # CORS: comma-separated or JSON list
    BACKEND_CORS_ORIGINS: Annotated[List[str], NoDecode] = []

    @field_validator('BACKEND_CORS_ORIGINS', mode='before')
    @classmethod
    def assemble_cors_origins(cls, v: str | List[str]) -> List[str]:
        if isinstance(v, str) and v.startswith('['):
            return json.loads(v)
        if isinstance(v, str):
            return [i.strip() for i in v.split(',') if i.strip()]
        elif isinstance(v, list):
            return v
        return []

    # Storage backend: 'postgres' for production, 'memory' for tests and local demos
    STORAGE_BACKEND: Literal['postgres', 'memory'] = 'postgres'

    # PostgreSQL Configuration
    POSTGRES_SERVER: str = 'localhost'
    POSTGRES_USER: str = 'postgres'
    POSTGRES_PASSWORD: SecretStr = SecretStr('postgres')
    POSTGRES_DB: str = 'cinema_booking'
    POSTGRES_PORT: int = 5432

    # Connection pool (write path only; reads share the same primary)
    DB_POOL_SIZE: int = 10
    DB_POOL_MAX_OVERFLOW: int = 5
    DB_POOL_TIMEOUT: int = 30  # seconds
    DB_POOL_RECYCLE: int = 1800  # seconds
    DB_POOL_PRE_PING: bool = True

    @property
    def DATABASE_URL_ASYNC(self) -> str:
        password = self.POSTGRES_PASSWORD.get_secret_value()
        return f'postgresql+asyncpg://{self.POSTGRES_USER}:{password}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}'

    # Booking reference, e.g. CT7K2M9QXA
    BOOKING_REFERENCE_PREFIX: str = 'CT'
    BOOKING_REFERENCE_LENGTH: int = 8
    BOOKING_REFERENCE_MAX_ATTEMPTS: int = 5

    # Tracing
    OTEL_SERVICE_NAME: str = 'cinema-booking-service'


settings = Settings()  # type: ignore
