"""
Configuration management for typedrest.

Loads client defaults from environment variables or a .env file.
"""

import os
from pathlib import Path
from dataclasses import dataclass, field

from dotenv import load_dotenv


DEFAULT_TIMEOUT_MS = 600_000  # 10 minutes

# Check common locations for .env
ENV_LOCATIONS = [
    Path.home() / ".typedrest" / ".env",
    Path.home() / ".config" / "typedrest" / ".env",
    Path.cwd() / ".env",
]


def load_env_file() -> Path | None:
    """Load the first .env file found. Returns its path, if any."""
    for env_path in ENV_LOCATIONS:
        if env_path.exists():
            load_dotenv(env_path)
            return env_path
    return None


def _parse_bool(value: str) -> bool:
    return value.strip().lower() not in ("0", "false", "no", "off", "")


@dataclass
class ClientConfig:
    """Per-client settings threaded into every invocation."""

    # Whole-exchange timeout in milliseconds
    timeout_ms: int = DEFAULT_TIMEOUT_MS

    # Passed through on every request; encoder headers take precedence
    default_headers: dict[str, str] = field(default_factory=dict)

    verify_ssl: bool = True

    def __post_init__(self):
        if self.timeout_ms <= 0:
            raise ValueError(f"timeout_ms must be positive, got {self.timeout_ms}")

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000.0

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Load configuration from environment variables."""
        load_env_file()
        return cls(
            timeout_ms=int(os.getenv("TYPEDREST_TIMEOUT_MS", str(DEFAULT_TIMEOUT_MS))),
            verify_ssl=_parse_bool(os.getenv("TYPEDREST_VERIFY_SSL", "true")),
        )


# Global config instance
_config: ClientConfig | None = None


def get_config() -> ClientConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = ClientConfig.from_env()
    return _config


def set_config(config: ClientConfig | None) -> None:
    """Set the global configuration instance. None resets it."""
    global _config
    _config = config
