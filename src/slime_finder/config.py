"""Runtime configuration for slime-finder."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven runtime settings."""

    model_config = SettingsConfigDict(env_prefix="SLIME_FINDER_", env_file=".env", extra="ignore")

    app_name: str = "slime-finder"
    log_level: str = "WARNING"
    search_range: int = Field(
        default=5000,
        ge=1,
        description="Width in chunks of the square scanned around the origin.",
    )
    top_count: int = Field(default=10, ge=1, description="How many ranked candidates to print.")
    workers: int | None = Field(
        default=None,
        ge=1,
        description="Worker processes for counting; defaults to the CPU count.",
    )
    batch_size: int = Field(default=2048, ge=1, description="Candidate centres per worker task.")


settings = Settings()
