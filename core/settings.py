"""Centralised application configuration and environment validation."""

from __future__ import annotations

import json
import logging
from typing import Any, Mapping

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger("settings")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    LOG_LEVEL: str = Field(default="INFO")
    LOG_JSON: bool = Field(default=True)
    MAX_IN_LOG_BODY: int = Field(default=2048, ge=256, le=65536)
    ERROR_TEXT_MIN_LENGTH: int = Field(default=10, ge=1, le=200)

    @field_validator("LOG_LEVEL", mode="before")
    def _normalize_level(cls, value: Any) -> str:
        if value is None:
            return "INFO"
        text = str(value).strip().upper()
        if text not in logging._nameToLevel:  # type: ignore[attr-defined]
            return "INFO"
        return text

    def configuration_summary(self) -> Mapping[str, Any]:
        return {
            "LOG_LEVEL": self.LOG_LEVEL,
            "LOG_JSON": self.LOG_JSON,
            "MAX_IN_LOG_BODY": self.MAX_IN_LOG_BODY,
            "ERROR_TEXT_MIN_LENGTH": self.ERROR_TEXT_MIN_LENGTH,
        }


def _load_settings() -> Settings:
    try:
        return Settings()
    except ValidationError as exc:
        errors = []
        for entry in exc.errors():
            loc = "::".join(str(part) for part in entry.get("loc", ()))
            msg = entry.get("msg", "invalid value")
            errors.append(f"{loc}: {msg}")
        message = "Invalid configuration: " + ", ".join(errors)
        logger.error(message)
        raise RuntimeError(message) from exc


settings = _load_settings()


def reload_settings() -> Settings:
    """Reload settings from the environment and update module globals."""

    global settings
    settings = _load_settings()
    return settings


def configuration_summary_json() -> str:
    return json.dumps(settings.configuration_summary(), ensure_ascii=False)


__all__ = [
    "Settings",
    "settings",
    "configuration_summary_json",
    "reload_settings",
]
