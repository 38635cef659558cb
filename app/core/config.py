"""
Service configuration.

`load_settings()` is the only place the process environment is read. Values
from a ``.env`` file are loaded first (python-dotenv), without overriding
variables that are already exported. The resulting `Settings` object is handed
to `create_app()`; nothing below the HTTP layer looks at the environment.
"""

import os
from typing import List, Mapping, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field


DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:3001",
]


class Settings(BaseModel):
    perplexity_api_key: Optional[str] = None
    perplexity_api_url: str = "https://api.perplexity.ai/chat/completions"
    perplexity_model: str = "sonar-small-online"
    request_timeout_s: float = Field(default=45.0, gt=0)
    max_tokens: int = 2500
    temperature: float = 0.2
    top_p: float = 0.9

    environment: str = "development"
    cors_origins: List[str] = Field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))
    rate_limit: str = "200 per 15 minutes"
    rate_limit_enabled: bool = True
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 5000

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"

    @property
    def api_key_configured(self) -> bool:
        return bool(self.perplexity_api_key)


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def _as_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from environment variables.

    Pass `environ` to read from an explicit mapping instead of os.environ
    (the .env file is then ignored).
    """
    if environ is None:
        load_dotenv()
        environ = os.environ

    values = {}
    mapping = {
        "PERPLEXITY_API_KEY": "perplexity_api_key",
        "PERPLEXITY_API_URL": "perplexity_api_url",
        "PERPLEXITY_MODEL": "perplexity_model",
        "PERPLEXITY_TIMEOUT_S": "request_timeout_s",
        "PERPLEXITY_MAX_TOKENS": "max_tokens",
        "RATE_LIMIT": "rate_limit",
        "LOG_LEVEL": "log_level",
        "HOST": "host",
        "PORT": "port",
    }
    for env_var, field_name in mapping.items():
        raw = environ.get(env_var)
        if raw:
            values[field_name] = raw

    environment = environ.get("APP_ENV") or environ.get("NODE_ENV")
    if environment:
        values["environment"] = environment

    origins = environ.get("CORS_ORIGINS")
    if origins:
        values["cors_origins"] = _split_csv(origins)

    enabled = environ.get("RATE_LIMIT_ENABLED")
    if enabled:
        values["rate_limit_enabled"] = _as_bool(enabled)

    return Settings(**values)
