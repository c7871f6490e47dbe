from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from FAULTHINT_* environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="FAULTHINT_",
        extra="ignore",
    )

    app_env: str = "development"
    enabled: bool = True
    log_level: str = "INFO"

    trace_frames: int = Field(default=3, ge=0)

    exit_code: int = 1
    exit_on_background_failure: bool = True

    @property
    def is_production(self) -> bool:
        return self.app_env.lower() == "production"
