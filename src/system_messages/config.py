from __future__ import annotations

from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    LOG_LEVEL: str = "info"

    JWT_SECRET: str = ""
    JWT_ALGORITHM: str = "HS256"

    CORS_ORIGINS: list[str] = ["*"]

    LOCALE: str = "en"

    INVITE_EMAIL_ENABLED: bool = True
    INVITE_SMS_ENABLED: bool = True

    DEFAULT_FONT: str = "system-regular-15"
    DEFAULT_BOLD_FONT: str = "system-semibold-15"
    DEFAULT_LARGE_FONT: str = "system-medium-24"
    DEFAULT_TEXT_COLOR: str = "#33373A"

    model_config = ConfigDict(
        env_file=".env",
        extra="ignore",
    )


settings = Settings()
