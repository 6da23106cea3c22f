from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, field_validator

from .base import BaseConfig


class LoggingSettings(BaseConfig):
    """Settings for log verbosity and destinations."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        "INFO", description="Root log level."
    )
    log_file: Optional[Path] = Field(
        None, description="Also write log records to this file."
    )
    mask_tokens: bool = Field(
        True, description="Mask credential query parameters in logged URLs."
    )

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, value):
        if isinstance(value, str):
            return value.upper()
        return value
