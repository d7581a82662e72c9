"""Configuration module — frozen dataclass loaded from env vars and an optional YAML file."""

import logging
import os
from dataclasses import dataclass

import yaml

from slotlog.appender import DEFAULT_BUFFER_SIZE, DEFAULT_MAX_FILE_SIZE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Config:
    access_log_path: str = "./logs/access.log"
    app_log_path: str = "./logs/app.log"
    max_file_size_bytes: int = DEFAULT_MAX_FILE_SIZE
    buffer_size: int = DEFAULT_BUFFER_SIZE


def load_yaml_config(path: str | None) -> dict:
    """Load settings from a YAML file. Returns empty dict if no path."""
    if not path:
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        logger.info("Loaded YAML config from %s", path)
        return data
    except FileNotFoundError:
        logger.warning("Config file %s not found, using defaults", path)
        return {}


def _max_file_size(yaml_data: dict) -> int:
    # MAX_FILE_SIZE_BYTES takes precedence over MAX_FILE_SIZE_MB
    raw_bytes = os.environ.get("MAX_FILE_SIZE_BYTES")
    raw_mb = os.environ.get("MAX_FILE_SIZE_MB")
    if raw_bytes is not None:
        size = int(raw_bytes)
    elif raw_mb is not None:
        size = int(float(raw_mb) * 1024 * 1024)
    else:
        size = int(yaml_data.get("max_file_size_bytes", Config.max_file_size_bytes))
    if size <= 0:
        raise ValueError(f"max file size must be positive, got {size}")
    return size


def load_config(yaml_data: dict | None = None) -> Config:
    """Build Config from env vars, then YAML keys, then defaults."""
    yaml_data = yaml_data or {}
    return Config(
        access_log_path=os.environ.get(
            "ACCESS_LOG_PATH", yaml_data.get("access_log_path", Config.access_log_path)
        ),
        app_log_path=os.environ.get(
            "APP_LOG_PATH", yaml_data.get("app_log_path", Config.app_log_path)
        ),
        max_file_size_bytes=_max_file_size(yaml_data),
        buffer_size=int(
            os.environ.get("WRITE_BUFFER_SIZE", yaml_data.get("buffer_size", Config.buffer_size))
        ),
    )
