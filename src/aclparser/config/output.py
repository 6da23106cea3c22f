from __future__ import annotations

from pathlib import Path
from typing import Literal, Optional

from pydantic import Field

from .base import BaseConfig


class OutputSettings(BaseConfig):
    """Settings for rendering parse results."""

    format: Literal["json", "yaml"] = Field(
        "json", description="Serialization format for parse results ('json' or 'yaml')."
    )
    indent: int = Field(
        2, ge=0, description="Indentation width for JSON and YAML output."
    )
    output_file: Optional[Path] = Field(
        None, description="Write results to this file instead of standard output."
    )
