from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    sendgrid_api_key: str = ""  # admin key used as the bearer token

    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        # Unknown names fall back to WARNING
        v = v.strip().upper()
        return v if v in LOG_LEVELS else "WARNING"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"  # a .env in the working directory may belong to another project


@lru_cache
def get_settings() -> Settings:
    return Settings()
