"""Runtime configuration for the GTP adapter."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven runtime settings."""

    model_config = SettingsConfigDict(env_prefix="GTP_ADAPTER_", env_file=".env", extra="ignore")

    app_name: str = "gtp-adapter"
    log_level: str = "WARNING"
    log_file: str | None = Field(
        default=None,
        description="Optional file receiving a copy of the adapter logs.",
    )
    engine: str = Field(
        default="board",
        description="Name of the built-in engine served by default.",
    )


settings = Settings()
