from functools import lru_cache
from typing import Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application settings
    APP_NAME: str = "Job Board API"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    API_V1_STR: str = "/api/v1"

    # Database settings
    POSTGRES_SERVER: str = "localhost"
    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = "postgres"
    POSTGRES_DB: str = "jobboard"
    POSTGRES_PORT: int = 5432
    DATABASE_URL: Optional[str] = Field(default=None, validate_default=True)

    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 20
    AUTO_CREATE_TABLES: bool = Field(
        default=False,
        description="Create missing tables on startup instead of relying on Alembic"
    )

    @field_validator("DATABASE_URL", mode="before")
    @classmethod
    def assemble_db_connection(cls, v: Optional[str], info) -> str:
        if isinstance(v, str) and v:
            return v

        values = info.data

        server = values.get('POSTGRES_SERVER', 'localhost')
        user = values.get('POSTGRES_USER', 'postgres')
        password = values.get('POSTGRES_PASSWORD', 'postgres')
        port = values.get('POSTGRES_PORT', 5432)
        db = values.get('POSTGRES_DB', 'jobboard')

        return (
            f"postgresql+asyncpg://"
            f"{user}:{password}@{server}:{port}/{db}"
        )

    @property
    def DATABASE_URL_SYNC(self) -> str:
        """Synchronous DATABASE_URL for Alembic."""
        return (
            self.DATABASE_URL
            .replace("postgresql+asyncpg://", "postgresql+psycopg2://")
            .replace("sqlite+aiosqlite://", "sqlite://")
        )

    # CORS settings
    BACKEND_CORS_ORIGINS: list[str] = Field(
        default=["http://localhost:3000"],
        description="Allowed CORS origins"
    )

    TRUSTED_HOSTS: list[str] = Field(
        default=["localhost", "127.0.0.1"],
        description="Trusted host headers"
    )

    # Logging
    LOG_LEVEL: str = "INFO"


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
