"""Application settings loaded from environment variables."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

DEFAULT_PORT = 3000


class Settings(BaseSettings):
    # Listener
    host: str = "0.0.0.0"
    port: int = Field(default=DEFAULT_PORT, ge=0, le=65535)

    # Logging
    log_level: str = "info"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    @field_validator("port", mode="before")
    @classmethod
    def default_when_empty(cls, value):
        """Treat an empty PORT the same as an unset one."""
        if value is None or (isinstance(value, str) and not value.strip()):
            return DEFAULT_PORT
        return value


settings = Settings()
