"""
Application settings and configuration management.

Uses pydantic-settings for environment variable loading.
"""

from functools import lru_cache

from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


# Values shipped in example .env files that mean "not configured"
PLACEHOLDER_KEYS = {"your_openai_api_key_here", "your_gemini_api_key_here"}

# Signing key used when JWT_SECRET_KEY is unset; not safe outside development
DEFAULT_JWT_SECRET = "fallback-secret"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "SkillSync"
    app_version: str = "0.1.0"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 5001

    # OpenAI (preferred provider)
    openai_api_key: str = ""
    openai_model: str = "gpt-3.5-turbo"
    openai_base_url: str = "https://api.openai.com/v1"

    # Gemini (used when no OpenAI key is configured)
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.5-flash"
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"

    ai_timeout_seconds: float = 60.0

    # Langfuse tracing of provider calls
    langfuse_enabled: bool = False
    langfuse_secret_key: str = ""
    langfuse_public_key: str = ""
    langfuse_base_url: str = "https://cloud.langfuse.com"

    # Storage
    storage_backend: str = "memory"  # Options: memory, sql
    database_url: str = "sqlite:///./skillsync.db"

    # Auth
    jwt_secret_key: str = DEFAULT_JWT_SECRET
    jwt_algorithm: str = "HS256"

    # Interview defaults
    default_job_role: str = "Software Developer"

    # CORS - stored as comma-separated string in env
    # Uses validation_alias to read from CORS_ORIGINS env var
    cors_origins_str: str = Field(
        default="http://localhost:3000",
        validation_alias="cors_origins"
    )

    @computed_field
    @property
    def cors_origins(self) -> list[str]:
        """Parse CORS origins from comma-separated string."""
        return [origin.strip() for origin in self.cors_origins_str.split(",") if origin.strip()]

    @property
    def openai_enabled(self) -> bool:
        return bool(self.openai_api_key) and self.openai_api_key not in PLACEHOLDER_KEYS

    @property
    def gemini_enabled(self) -> bool:
        return bool(self.gemini_api_key) and self.gemini_api_key not in PLACEHOLDER_KEYS

    @property
    def uses_default_jwt_secret(self) -> bool:
        return self.jwt_secret_key == DEFAULT_JWT_SECRET


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
