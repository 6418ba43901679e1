"""Runtime configuration for the long-term planner."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven runtime settings."""

    model_config = SettingsConfigDict(env_prefix="LONGTERM_PLANNER_", env_file=".env", extra="ignore")

    app_name: str = "longterm-planner"
    log_level: str = "INFO"
    telemetry_enabled: bool = True
    wait_ticks: int = Field(default=10, gt=0, description="Width of one wait action in ticks.")
    max_iterations: int = Field(
        default=5_000_000,
        gt=0,
        description="Maximum frontier pops before a search gives up.",
    )
    bank_gold_cost: int = Field(default=10, gt=0)
    bank_build_ticks: int = Field(default=1, gt=0)
    bank_gold_per_tick_delta: int = Field(default=10, gt=0)


settings = Settings()
