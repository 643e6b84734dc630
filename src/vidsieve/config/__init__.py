"""Configuration module for vidsieve."""

from vidsieve.config.factory import create_from_config, create_searcher, create_store
from vidsieve.config.loader import get_default_config_path, load_config
from vidsieve.config.models import (
    FilterConfig,
    LoggingConfig,
    StorageConfig,
    VidsieveConfig,
    YouTubeSearcherConfig,
)

__all__ = [
    "FilterConfig",
    "LoggingConfig",
    "StorageConfig",
    "VidsieveConfig",
    "YouTubeSearcherConfig",
    "create_from_config",
    "create_searcher",
    "create_store",
    "get_default_config_path",
    "load_config",
]
