import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field


class XAIConfig(BaseModel):
    api_key: str = ""
    base_url: str = "https://api.x.ai/v1"
    model: str = "grok-2-latest"
    temperature: float = 0.7
    timeout_s: float = 60.0


class AdzunaConfig(BaseModel):
    app_id: str = ""
    api_key: str = ""
    base_url: str = "https://api.adzuna.com/v1"
    timeout_s: float = 10.0


class AppConfig(BaseModel):
    """Explicit configuration handed to the clients and to logging setup."""
    xai: XAIConfig = Field(default_factory=XAIConfig)
    adzuna: AdzunaConfig = Field(default_factory=AdzunaConfig)
    is_dev: bool = False


def _env(name: str, default: str = "") -> str:
    return (os.getenv(name) or default).strip()


def load_config(env_file: Optional[str] = None) -> AppConfig:
    """Build an AppConfig from the environment (and a .env file, if present)."""
    load_dotenv(env_file)

    xai_defaults = XAIConfig()
    adzuna_defaults = AdzunaConfig()

    try:
        temperature = float(_env("XAI_TEMPERATURE", str(xai_defaults.temperature)))
    except ValueError:
        temperature = xai_defaults.temperature

    return AppConfig(
        xai=XAIConfig(
            api_key=_env("XAI_API_KEY"),
            base_url=_env("XAI_BASE_URL", xai_defaults.base_url).rstrip("/"),
            model=_env("XAI_MODEL", xai_defaults.model),
            temperature=temperature,
        ),
        adzuna=AdzunaConfig(
            app_id=_env("ADZUNA_APP_ID"),
            api_key=_env("ADZUNA_API_KEY"),
            base_url=_env("ADZUNA_BASE_URL", adzuna_defaults.base_url).rstrip("/"),
        ),
        is_dev=_env("APP_ENV", "production").lower() in ("dev", "development"),
    )
