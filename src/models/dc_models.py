import logging
from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from src.domain.tick_rules import DEFAULT_INTERVAL_MS


class TickModel(BaseModel):
    index: int = Field(ge=0)  # 0 for the first firing, then +1 per firing
    fired_at: datetime


class RunnerSettingsModel(BaseModel):
    interval_ms: int = Field(default=DEFAULT_INTERVAL_MS, gt=0)
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {value}")
        return level
