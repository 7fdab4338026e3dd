"""Configuration management for Standup."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

DATA_FILE_NAME = ".standup.json"
CONFIG_FILE_NAME = ".standup.conf"
LIST_ORDERS = ("oldest", "newest")

PathProvider = Callable[[], Path]


@dataclass
class Config:
    """Standup configuration."""

    data_file: str = ""
    list_order: str = "oldest"

    @property
    def newest_first(self) -> bool:
        return self.list_order == "newest"


def home_dir() -> Path:
    """Resolve the user's home directory."""
    try:
        return Path.home()
    except (RuntimeError, KeyError) as e:
        raise ConfigurationError(f"Cannot determine home directory: {e}") from e


def _expand(value: str) -> Path:
    try:
        return Path(value).expanduser()
    except RuntimeError as e:
        raise ConfigurationError(f"Cannot expand {value!r}: {e}") from e


def config_file() -> Path:
    """Location of the config file (STANDUP_CONFIG overrides)."""
    override = os.environ.get("STANDUP_CONFIG")
    if override:
        return _expand(override)
    return home_dir() / CONFIG_FILE_NAME


def _unquote(value: str) -> str:
    # Handle quoted values with inline comments: "value" # comment
    if value[:1] in ('"', "'"):
        quote = value[0]
        end_quote = value.find(quote, 1)
        return value[1:end_quote] if end_quote != -1 else value[1:]
    # Unquoted: strip inline comments
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def load_config(path: Path | None = None) -> Config:
    """Load configuration from the standup.conf file."""
    config = Config()
    path = path or config_file()

    if not path.exists():
        return config

    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Cannot read config file {path}: {e}") from e

    for line in content.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            logger.warning(f"Ignoring malformed config line: {line}")
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()
        value = _unquote(value.strip())

        match key:
            case "data_file":
                config.data_file = value
            case "list_order":
                if value.lower() in LIST_ORDERS:
                    config.list_order = value.lower()
                else:
                    logger.warning(f"Invalid LIST_ORDER {value!r}, using {config.list_order}")
            case _:
                logger.warning(f"Ignoring unknown config key: {key}")

    return config


def resolve_data_path(config: Config) -> Path:
    """Journal file path: STANDUP_FILE, then config data_file, then ~/.standup.json."""
    override = os.environ.get("STANDUP_FILE")
    if override:
        return _expand(override)
    if config.data_file:
        return _expand(config.data_file)
    return home_dir() / DATA_FILE_NAME


def default_path_provider() -> Path:
    """Path provider that reads the config file on demand."""
    return resolve_data_path(load_config())


def path_provider_for(config: Config) -> PathProvider:
    """Path provider bound to an already loaded config."""
    return lambda: resolve_data_path(config)
