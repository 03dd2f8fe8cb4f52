"""
Pydantic Settings Configuration
=================================

Type-safe configuration for the regulated assets client.
Validates all values when loaded and fails fast with clear error messages.
"""

from typing import Optional
from pathlib import Path
from pydantic import BaseModel, Field, field_validator, ConfigDict
from pydantic_settings import BaseSettings, SettingsConfigDict
import yaml


class HorizonConfig(BaseModel):
    """Ledger (Horizon) access used for the issuer flags lookup"""
    url: Optional[str] = Field(None, description="Horizon base URL; inferred from the network when unset")
    network_passphrase: Optional[str] = Field(None, description="Network passphrase; taken from stellar.toml when unset")

    @field_validator('url')
    @classmethod
    def validate_url(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        if not v.startswith(('http://', 'https://')):
            raise ValueError("Horizon URL must start with http:// or https://")
        return v.rstrip('/')

    model_config = ConfigDict(extra='allow')


class HttpConfig(BaseModel):
    """Outbound HTTP configuration shared by all clients"""
    timeout_seconds: float = Field(30.0, ge=1, le=300, description="Per-request timeout in seconds")
    user_agent: str = Field("regulated-assets", description="User-Agent header sent with every request")

    model_config = ConfigDict(extra='allow')


class LoggingConfig(BaseModel):
    """Logging configuration"""
    level: str = Field("INFO", description="Log level (DEBUG, INFO, WARNING, ERROR)")
    format: str = Field("json", description="Log format (json, text)")

    @field_validator('level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level"""
        valid_levels = {'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Log level must be one of: {', '.join(sorted(valid_levels))}")
        return v_upper

    @field_validator('format')
    @classmethod
    def validate_format(cls, v: str) -> str:
        if v not in ('json', 'text'):
            raise ValueError("Log format must be 'json' or 'text'")
        return v

    model_config = ConfigDict(extra='allow')


class Settings(BaseSettings):
    """
    Main client settings with type validation.

    Configuration is loaded from:
    1. YAML config file (if provided)
    2. Environment variables with REGULATED_ASSETS_ prefix (override)
    3. Default values (fallback)

    Environment variable mapping uses double-underscore nesting:
      REGULATED_ASSETS_HORIZON__URL
      REGULATED_ASSETS_HTTP__TIMEOUT_SECONDS
      REGULATED_ASSETS_LOGGING__LEVEL
    """

    horizon: HorizonConfig = Field(default_factory=HorizonConfig)
    http: HttpConfig = Field(default_factory=HttpConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = SettingsConfigDict(
        env_prefix='REGULATED_ASSETS_',
        env_nested_delimiter='__',
        extra='allow',
        validate_assignment=True,
    )

    @classmethod
    def from_yaml(cls, config_path: str | Path) -> "Settings":
        """
        Load settings from a YAML file.

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If configuration is invalid
        """
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path) as f:
            config_data = yaml.safe_load(f) or {}

        return cls(**config_data)

    @classmethod
    def from_env(cls) -> "Settings":
        """Load settings from environment variables only."""
        return cls()


def load_settings(config_path: Optional[str | Path] = None) -> Settings:
    """
    Load and validate client settings.

    Args:
        config_path: Optional path to YAML config file

    Returns:
        Validated Settings instance
    """
    if config_path:
        return Settings.from_yaml(config_path)
    return Settings.from_env()

__all__ = [
    'Settings',
    'HorizonConfig',
    'HttpConfig',
    'LoggingConfig',
    'load_settings',
]
