"""Configuration for the web backend."""

import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field


def _config_path_from_env() -> Optional[Path]:
    value = os.getenv("SLOP_CONFIG")
    return Path(value) if value else None


class WebConfig(BaseModel):
    """Web server configuration."""

    host: str = "127.0.0.1"
    port: int = 8000
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]
    config_path: Optional[Path] = Field(default_factory=_config_path_from_env)  # YAML app config
