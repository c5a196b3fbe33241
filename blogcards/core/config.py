"""
Configuration management.
"""
from pathlib import Path
from typing import Any, Dict, Union

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""
    model_config = SettingsConfigDict(
        env_prefix="BLOGCARDS_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Blog API
    api_base_url: str = "http://localhost:5000"
    page_size: int = Field(default=12, ge=1)
    request_timeout: float = Field(default=10.0, gt=0)

    # Cards
    default_author: str = "Anewgo Team"
    preview_length: int = Field(default=400, ge=0)
    check_images: bool = False

    log_level: str = "WARNING"

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "Settings":
        """Load settings from a YAML mapping; keys match field names"""
        config_path = Path(path).expanduser()
        if not config_path.exists():
            raise FileNotFoundError(f"Config not found: {config_path}")

        with config_path.open("r", encoding="utf-8") as f:
            data: Dict[str, Any] = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Config must be a mapping: {config_path}")
        return cls(**data)
