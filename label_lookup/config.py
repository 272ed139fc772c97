from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent  # label-lookup-api/


class Settings(BaseSettings):
    """Application settings with validation.

    Every field has a working local default so the API starts against a
    local Elasticsearch node. Override through environment variables or .env.
    """

    # API server settings
    api_host: str = Field(default="127.0.0.1", min_length=1, description="API server host (e.g., '0.0.0.0')")
    api_port: int = Field(ge=1, le=65535, default=8000, description="API server port")

    # Elasticsearch backing store
    elasticsearch_url: str = Field(
        default="http://localhost:9200",
        pattern=r"^https?://",
        description="Base URL of the Elasticsearch cluster",
    )
    label_index: str = Field(default="labelinformation", min_length=1, description="Index holding label records")
    elasticsearch_timeout: float = Field(default=10.0, gt=0, description="Read timeout for search requests (seconds)")

    # CORS
    cors_allow_origins: str = Field(default="*", description="Comma-separated list of allowed CORS origins")

    model_config = SettingsConfigDict(
        env_file=Path(BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    @property
    def cors_origins(self) -> list[str]:
        """Allowed CORS origins as a list."""
        return [origin.strip() for origin in self.cors_allow_origins.split(",") if origin.strip()]

    @field_validator("api_host", "label_index", mode="after")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Ensure the value is not empty or whitespace."""
        v = v.strip()
        if not v:
            raise ValueError("value must not be empty")
        return v

    @field_validator("elasticsearch_url", mode="after")
    @classmethod
    def validate_elasticsearch_url(cls, v: str) -> str:
        """Strip trailing slashes so paths can be appended safely."""
        return v.strip().rstrip("/")


# Singleton settings instance (cached for performance)
_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """Get singleton Settings instance for dependency injection.

    Returns:
        Cached Settings instance
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
