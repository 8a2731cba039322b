"""Configuration management with YAML support."""

import os
from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field("INFO", description="Log level (DEBUG/INFO/WARNING/ERROR)")
    format: Literal["console", "json"] = Field("console", description="Log format")
    file: Optional[Path] = Field(None, description="Optional log file path")


class ReportConfig(BaseModel):
    """Decimal places used when formatting reports for display."""

    total_precision: int = Field(2, ge=0, description="Total score decimals")
    score_precision: int = Field(1, ge=0, description="Per-criterion score decimals")
    weighted_precision: int = Field(2, ge=0, description="Weighted score decimals")
    raw_precision: int = Field(2, ge=0, description="Raw metric decimals")


class Config(BaseSettings):
    """Main application configuration."""

    model_config = SettingsConfigDict(
        env_prefix="SOLARSITE_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    report: ReportConfig = Field(default_factory=ReportConfig)

    @classmethod
    def from_yaml(cls, path: Path) -> "Config":
        """Load configuration from YAML file.

        Args:
            path: Path to YAML config file

        Returns:
            Config instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            yaml.YAMLError: If YAML is invalid
        """
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        return cls(**data)

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file or environment.

        Priority:
        1. SOLARSITE_CONFIG_PATH environment variable
        2. ./solarsite_config.yaml in current directory
        3. ~/.config/solarsite/config.yaml in home directory
        4. Default configuration with environment overrides
        """
        config_path = os.getenv("SOLARSITE_CONFIG_PATH")

        if config_path and Path(config_path).exists():
            return cls.from_yaml(Path(config_path))

        default_paths = [
            Path("solarsite_config.yaml"),
            Path.home() / ".config" / "solarsite" / "config.yaml",
        ]

        for path in default_paths:
            if path.exists():
                return cls.from_yaml(path)

        return cls()


_config: Optional[Config] = None


def get_config() -> Config:
    """Get global configuration instance (lazy-loaded singleton).

    Returns:
        Config instance, creating and caching it on first call
    """
    global _config
    if _config is None:
        _config = Config.load()
    return _config


def reset_config() -> None:
    """Reset global config instance (for testing)."""
    global _config
    _config = None
