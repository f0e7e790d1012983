from functools import lru_cache
from typing import List, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration read from the environment (and .env)"""
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Session cookie
    session_secret: str = "oneringtorulethemall"
    session_max_age: int = 5 * 24 * 60 * 60  # 5 days in seconds
    session_https_only: bool = False

    # Page variables shared by every view
    app_name: str = "MicroBlog"
    copyright_year: int = 2024
    post_neo_type: str = "Post"

    # Comma-separated list
    allowed_origins: str = "http://localhost:3000"

    seed_file: Optional[str] = None
    avatar_font: str = "DejaVuSans-Bold.ttf"
    log_level: str = "INFO"

    @field_validator("seed_file")
    @classmethod
    def blank_seed_file_is_none(cls, value: Optional[str]) -> Optional[str]:
        return value or None

    @field_validator("log_level")
    @classmethod
    def upper_case_level(cls, value: str) -> str:
        return value.upper()

    @property
    def origins(self) -> List[str]:
        return [origin.strip() for origin in self.allowed_origins.split(",") if origin.strip()]


@lru_cache()
def get_settings() -> Settings:
    return Settings()
