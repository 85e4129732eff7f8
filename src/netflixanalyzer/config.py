"""Configuration management for Netflix Analyzer."""

import os
import re
from pathlib import Path
from typing import Any, Literal, Optional

import yaml
from pydantic import BaseModel, Field, field_validator


class CatalogConfig(BaseModel):
    """Catalog source and load policy configuration."""

    source: str = Field(default="netflix_titles.csv", description="Path to the titles CSV")
    encoding: str = Field(default="utf-8", description="Text encoding of the CSV source")
    on_parse_error: Literal["default_to_zero", "skip_row"] = Field(
        default="default_to_zero",
        description="What to do when the release year cannot be parsed",
    )
    strict: bool = Field(
        default=False, description="Abort the whole load on the first malformed row"
    )

    @field_validator("on_parse_error", mode="before")
    @classmethod
    def normalize_policy(cls, v: Any) -> Any:
        """Accept camelCase and dashed spellings of the parse error policy."""
        if isinstance(v, str):
            aliases = {
                "defaulttozero": "default_to_zero",
                "skiprow": "skip_row",
            }
            key = v.strip().replace("-", "").replace("_", "").lower()
            return aliases.get(key, v)
        return v


class LoggingConfig(BaseModel):
    """Logging configuration."""

    format: str = Field(default="text", description="Log format (json or text)")
    level: str = Field(default="warning", description="Log level")
    output: Optional[str] = Field(default=None, description="Optional log file path")

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        """Validate log format."""
        if v not in ("json", "text"):
            raise ValueError("Log format must be 'json' or 'text'")
        return v

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        if v.lower() not in ("debug", "info", "warning", "error", "critical"):
            raise ValueError("Invalid log level")
        return v.lower()


class DisplayConfig(BaseModel):
    """Table rendering configuration."""

    max_rows: int = Field(default=50, ge=0, description="Maximum table rows (0 = no limit)")
    column_width: int = Field(default=30, ge=4, description="Maximum width of a table column")


class Config(BaseModel):
    """Main configuration model."""

    catalog: CatalogConfig = Field(default_factory=CatalogConfig, description="Catalog configuration")
    logging: LoggingConfig = Field(default_factory=LoggingConfig, description="Logging configuration")
    display: DisplayConfig = Field(default_factory=DisplayConfig, description="Display configuration")

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Config":
        """Load configuration from YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            Config instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config is invalid
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        with open(path) as f:
            raw_config = yaml.safe_load(f)

        if raw_config is None:
            raw_config = {}

        raw_config = cls._substitute_env_vars(raw_config)

        return cls(**raw_config)

    @staticmethod
    def _substitute_env_vars(obj: Any) -> Any:
        """Recursively replace ${VAR_NAME} with os.environ['VAR_NAME'].

        Args:
            obj: Configuration object (dict, list, str, etc.)

        Returns:
            Object with environment variables substituted
        """
        if isinstance(obj, dict):
            return {key: Config._substitute_env_vars(value) for key, value in obj.items()}
        elif isinstance(obj, list):
            return [Config._substitute_env_vars(item) for item in obj]
        elif isinstance(obj, str):
            pattern = r"\$\{([^}]+)\}"

            def replace_var(match):
                var_name = match.group(1)
                value = os.environ.get(var_name)
                if value is None:
                    raise ValueError(
                        f"Environment variable '{var_name}' not found "
                        f"(referenced in configuration)"
                    )
                return value

            return re.sub(pattern, replace_var, obj)
        else:
            return obj

    @classmethod
    def from_defaults(cls) -> "Config":
        """Create configuration with default values."""
        return cls()


def load_config(path: Optional[str | Path] = None) -> Config:
    """Load configuration from file or use defaults.

    Args:
        path: Optional path to configuration file. If None, uses defaults.

    Returns:
        Config instance
    """
    if path is None:
        return Config.from_defaults()

    return Config.from_yaml(path)
