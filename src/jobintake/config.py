from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "Job Intake"
    app_env: str = "development"
    app_host: str = "127.0.0.1"
    app_port: int = Field(default=5000, validation_alias=AliasChoices("PORT", "APP_PORT"))
    log_level: str = "INFO"

    database_url: str = "sqlite:///./data/jobintake.db"
    data_dir: Path = Path("./data")
    upload_dir: Path = Path("./uploads")
    max_upload_bytes: int = 5 * 1024 * 1024

    cors_origins: str = "*"
    seed_sample_jobs: bool = True
    discard_orphaned_uploads: bool = False

    @field_validator("app_env")
    @classmethod
    def validate_env(cls, value: str) -> str:
        allowed = {"development", "staging", "production", "test"}
        if value not in allowed:
            raise ValueError(f"app_env must be one of {sorted(allowed)}")
        return value

    @field_validator("max_upload_bytes")
    @classmethod
    def validate_max_upload_bytes(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("max_upload_bytes must be positive")
        return value

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
