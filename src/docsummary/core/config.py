import os
from pathlib import Path
from typing import Any, Dict, Optional, Set

from dotenv import dotenv_values
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Summarization backend
    DOCSUMMARY_API_URL: str = "http://localhost:5000"
    DOCSUMMARY_TIMEOUT: float = 60.0  # seconds; OCR on large PDFs is slow

    # Rendering
    DEFAULT_LENGTH: str = Field(
        default="medium",
        description="Summary length selector: short|medium|long",
    )

    # Observability
    LOG_FORMAT: str = "auto"  # json|plain|auto

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    @classmethod
    def load_config(cls, config_file: Optional[str] = None) -> "Settings":
        """Load settings; precedence is defaults < config file < .env < environment."""
        config_path = _find_config_file(config_file)
        config_data = _read_config_file(config_path) if config_path else {}

        # Keyword arguments beat every other source in pydantic-settings, so
        # keys already set through .env or the environment are left out.
        overridden = _externally_set_keys(cls.model_config.get("env_file"))
        return cls(
            **{
                key: value
                for key, value in config_data.items()
                if key.upper() not in overridden
            }
        )


def _find_config_file(config_file: Optional[str]) -> Optional[Path]:
    if config_file:
        path = Path(config_file)
        return path if path.exists() else None
    # Auto-discover .docsummary.{yaml,yml,toml}
    for ext in ["yaml", "yml", "toml"]:
        path = Path(f".docsummary.{ext}")
        if path.exists():
            return path
    return None


def _read_config_file(path: Path) -> Dict[str, Any]:
    if path.suffix in [".yaml", ".yml"]:
        import yaml  # type: ignore[import-untyped]

        with open(path) as f:
            return yaml.safe_load(f) or {}
    if path.suffix == ".toml":
        import tomllib

        with open(path, "rb") as f:
            return tomllib.load(f)
    return {}


def _externally_set_keys(env_file: Any) -> Set[str]:
    """Upper-cased names set in the environment or in the .env file."""
    keys = {name.upper() for name in os.environ}
    if env_file and Path(env_file).is_file():
        keys |= {name.upper() for name in dotenv_values(env_file)}
    return keys


# Default settings - replaced by load_config() during CLI startup
SETTINGS = Settings()
