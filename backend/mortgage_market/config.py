"""Application configuration using pydantic-settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Database
    DATABASE_URL: str = "sqlite+aiosqlite:///./mortgage_market.db"
    AUTO_CREATE_TABLES: bool = True

    # Environment
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    # CORS
    CORS_ORIGINS: str = "http://localhost:5173,http://localhost:3000"

    # Platform ownership (principal allowed to run owner-only operations)
    PLATFORM_OWNER: str = "platform-owner"

    # Platform parameter defaults (seeded into PlatformStats on first use)
    DEFAULT_MIN_CREDIT_SCORE: int = 580
    DEFAULT_MAX_LTV_RATIO: int = 9500  # basis points
    DEFAULT_PLATFORM_FEE_RATE: int = 100  # basis points

    # Valid credit score band
    CREDIT_SCORE_FLOOR: int = 300
    CREDIT_SCORE_CEILING: int = 850

    # Match scoring: points awarded per satisfied criterion (four criteria)
    MATCH_POINTS_PER_CRITERION: int = Field(default=25, ge=0, le=25)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins from comma-separated string."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]


# Global settings instance
settings = Settings()
