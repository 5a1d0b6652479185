from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = "Rental Assistance Intake"
    app_env: str = "development"
    app_host: str = "127.0.0.1"
    app_port: int = 3000
    log_level: str = "INFO"

    database_url: str = "sqlite:///./data/rental_assistance.db"
    data_dir: Path = Path("./data")
    upload_dir: Path = Path("./data/uploads")

    # Empty disables every admin endpoint.
    admin_password: str = ""

    max_upload_bytes: int = 5 * 1024 * 1024
    allowed_upload_types: str = "image/*"

    require_biography: bool = False
    affirmative_flag: str = "Yes"
    redact_log_pii: bool = True

    cors_origins: str = "*"

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

    @property
    def allowed_upload_type_list(self) -> list[str]:
        return [item.strip().lower() for item in self.allowed_upload_types.split(",") if item.strip()]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
