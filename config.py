"""Configuration management for Roster.

Reads configuration from ~/.config/roster.toml and creates default config if needed.
The database connection string has no default; it comes from the file or from
the ROSTER_DATABASE_URL environment variable.
"""

import os
from pathlib import Path
from dataclasses import dataclass
from typing import Optional
import tomllib
import tomli_w

DATABASE_URL_ENV = "ROSTER_DATABASE_URL"


@dataclass
class Config:
    """Application configuration."""

    base_dir: Path
    database_url: Optional[str]
    api_prefix: str
    host: str
    port: int
    log_level: str
    log_dir: Path

    @classmethod
    def default(cls) -> "Config":
        """Create a Config with default values."""
        base_dir = Path.home() / "data" / "roster"
        return cls(
            base_dir=base_dir,
            database_url=None,
            api_prefix="/api/accounts",
            host="127.0.0.1",
            port=8000,
            log_level="INFO",
            log_dir=base_dir / "logs",
        )


def get_config_path() -> Path:
    """Get the path to the config file."""
    return Path.home() / ".config" / "roster.toml"


def get_schema_path() -> Path:
    """Get the path to the accounts table schema.

    This is always relative to the code location, not configurable.
    """
    return Path(__file__).parent / "db" / "schema.sql"


def load_config() -> Config:
    """Load configuration from file, creating default if it doesn't exist.

    Returns:
        Config object with loaded or default values.
    """
    config_path = get_config_path()

    if not config_path.exists():
        config = Config.default()
        _write_config(config)
    else:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
        config = _parse_config(data)

    env_url = os.environ.get(DATABASE_URL_ENV)
    if env_url:
        config.database_url = env_url

    return config


def _parse_config(data: dict) -> Config:
    defaults = Config.default()
    base_dir = Path(data.get("base_dir", defaults.base_dir))

    db_config = data.get("database", {})
    database_url = db_config.get("url") or None

    api_config = data.get("api", {})
    api_prefix = api_config.get("prefix", defaults.api_prefix)
    host = api_config.get("host", defaults.host)
    port = int(api_config.get("port", defaults.port))

    log_config = data.get("logging", {})
    log_level = log_config.get("level", defaults.log_level)
    log_dir = Path(log_config.get("log_dir", base_dir / "logs"))

    return Config(
        base_dir=base_dir,
        database_url=database_url,
        api_prefix=api_prefix,
        host=host,
        port=port,
        log_level=log_level,
        log_dir=log_dir,
    )


def _write_config(config: Config) -> None:
    """Write config to the config file.

    Args:
        config: Config object to write.
    """
    config_path = get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    # TOML has no null; an unset database url is left out of the file
    database = {}
    if config.database_url:
        database["url"] = config.database_url

    data = {
        "base_dir": str(config.base_dir),
        "database": database,
        "api": {
            "prefix": config.api_prefix,
            "host": config.host,
            "port": config.port,
        },
        "logging": {
            "level": config.log_level,
            "log_dir": str(config.log_dir),
        },
    }

    with open(config_path, "wb") as f:
        tomli_w.dump(data, f)
