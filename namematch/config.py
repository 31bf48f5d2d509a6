"""Application configuration."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional


@dataclass
class AppConfig:
    """Configuration for the record store, auth tokens and the HTTP server."""

    # Storage
    data_dir: Path = field(default_factory=lambda: Path("data"))
    records_filename: str = "records.json"
    users_filename: str = "users.json"

    # Session tokens
    jwt_secret: str = "namematch-dev-secret-change-in-production"
    jwt_algorithm: str = "HS256"
    token_expire_hours: int = 24

    # Search defaults
    default_algorithm: str = "combined"
    default_threshold: float = 0.3

    # Server
    host: str = "127.0.0.1"
    port: int = 5000

    @property
    def records_file(self) -> Path:
        return self.data_dir / self.records_filename

    @property
    def users_file(self) -> Path:
        return self.data_dir / self.users_filename

    @classmethod
    def from_env(cls, data_dir: Optional[Path] = None) -> 'AppConfig':
        """Build a config from NAMEMATCH_* environment variables.

        Args:
            data_dir: Explicit data directory, overriding NAMEMATCH_DATA_DIR

        Returns:
            AppConfig with environment overrides applied
        """
        config = cls()

        env_dir = os.environ.get("NAMEMATCH_DATA_DIR")
        if data_dir is not None:
            config.data_dir = Path(data_dir)
        elif env_dir:
            config.data_dir = Path(env_dir)

        config.jwt_secret = os.environ.get("NAMEMATCH_JWT_SECRET", config.jwt_secret)
        config.token_expire_hours = int(
            os.environ.get("NAMEMATCH_TOKEN_EXPIRE_HOURS", config.token_expire_hours)
        )
        config.host = os.environ.get("NAMEMATCH_HOST", config.host)
        config.port = int(os.environ.get("NAMEMATCH_PORT", config.port))
        return config


# Global configuration instance
default_config = AppConfig.from_env()
