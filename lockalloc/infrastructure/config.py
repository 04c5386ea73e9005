from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from lockalloc.core.use_cases.sweep_expired_tickets import THREE_DAYS_MS


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="LOCKALLOC_")

    lockers_per_size: int = Field(default=10, ge=0)
    retention_ms: int = Field(default=THREE_DAYS_MS, ge=0)
    event_buffer_size: int = Field(default=1000, gt=0)
    log_level: str = "info"


settings = Settings()
