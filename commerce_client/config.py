"""Client configuration using Pydantic Settings."""

from functools import lru_cache
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_AUTH_HOST = "https://auth.europe-west1.gcp.commercetools.com"
DEFAULT_API_HOST = "https://api.europe-west1.gcp.commercetools.com"


class PlatformConfig(BaseModel):
    """Resolved connection settings for one platform project.

    Accepts both snake_case and the platform's camelCase keys
    (``projectKey``, ``clientId``, ...), so a provider may hand back
    either shape.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    project_key: str = Field(..., min_length=1)
    client_id: str = Field(..., min_length=1)
    client_secret: str = Field(..., min_length=1)
    locale: str = "en"
    concurrency: int = Field(10, ge=1)
    auth_host: str = DEFAULT_AUTH_HOST
    api_host: str = DEFAULT_API_HOST
    scopes: Optional[list[str]] = None
    timeout_seconds: float = Field(30.0, gt=0)


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Platform project
    CTP_PROJECT_KEY: str = ""
    CTP_CLIENT_ID: str = ""
    CTP_CLIENT_SECRET: str = ""
    CTP_LOCALE: str = "en"

    # Hosts
    CTP_AUTH_HOST: str = DEFAULT_AUTH_HOST
    CTP_API_HOST: str = DEFAULT_API_HOST

    # Space separated, defaults to manage_project:<project key>
    CTP_SCOPES: str = ""

    # HTTP
    CTP_CONCURRENCY: int = 10
    HTTP_TIMEOUT_SECONDS: float = 30.0

    def to_platform_config(self) -> PlatformConfig:
        """Build a PlatformConfig from the loaded environment.

        Raises:
            pydantic.ValidationError: If project key or credentials are missing
        """
        return PlatformConfig(
            project_key=self.CTP_PROJECT_KEY,
            client_id=self.CTP_CLIENT_ID,
            client_secret=self.CTP_CLIENT_SECRET,
            locale=self.CTP_LOCALE,
            concurrency=self.CTP_CONCURRENCY,
            auth_host=self.CTP_AUTH_HOST,
            api_host=self.CTP_API_HOST,
            scopes=self.CTP_SCOPES.split() or None,
            timeout_seconds=self.HTTP_TIMEOUT_SECONDS,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
