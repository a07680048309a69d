"""
Service settings, loaded from the environment and .env.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import NameCaseOptions


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    # Default options for requests that don't set their own
    NAMECASE_LAZY: bool = True
    NAMECASE_IRISH: bool = True
    NAMECASE_SPANISH: bool = True

    LOG_LEVEL: str = "INFO"

    @property
    def default_options(self) -> NameCaseOptions:
        return NameCaseOptions(
            lazy=self.NAMECASE_LAZY,
            irish=self.NAMECASE_IRISH,
            spanish=self.NAMECASE_SPANISH,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
