from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Any, Optional

from .errors import ConfigurationError

DEFAULT_PORT = 3000

class Settings(BaseSettings):
    # Google Custom Search credentials
    GOOGLE_SEARCH_API_KEY: str
    GOOGLE_CSE_ID: str

    # App server config
    HOST: str = "0.0.0.0"
    PORT: int = DEFAULT_PORT
    APP_ENV: str = "production"

    # Outbound request timeout, None keeps the httpx default
    SEARCH_TIMEOUT_SECONDS: Optional[float] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        frozen=True,
        extra="ignore",
    )

    @field_validator("GOOGLE_SEARCH_API_KEY", "GOOGLE_CSE_ID")
    @classmethod
    def require_non_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be empty")
        return v

    @field_validator("PORT", mode="before")
    @classmethod
    def default_port_on_garbage(cls, v: Any) -> int:
        try:
            return int(str(v).strip())
        except (TypeError, ValueError):
            return DEFAULT_PORT

    @property
    def is_development(self) -> bool:
        return self.APP_ENV.lower() == "development"


def load_settings(**overrides: Any) -> Settings:
    """
    Build the settings object from the environment (and `.env`).

    Called once at startup; the result is handed to every component that
    needs it.

    Raises:
        ConfigurationError: If a required variable is missing or blank.
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        fields = sorted({".".join(str(p) for p in err["loc"]) for err in e.errors()})
        raise ConfigurationError(
            f"Required environment variables are missing or invalid: {', '.join(fields)}"
        ) from e
