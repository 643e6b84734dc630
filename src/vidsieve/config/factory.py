"""Factory functions to create components from configuration."""

from pathlib import Path

from vidsieve.config.models import (
    FilterConfig,
    StorageConfig,
    VidsieveConfig,
    YouTubeSearcherConfig,
)
from vidsieve.run_logger import RunLogger
from vidsieve.search.base import VideoSearcher
from vidsieve.search.youtube import YouTubeSearcher
from vidsieve.session import SearchSession
from vidsieve.store import LocalStore


def create_searcher(
    config: YouTubeSearcherConfig,
    filters: FilterConfig | None = None,
    *,
    api_key: str | None = None,
) -> VideoSearcher:
    """Create a video searcher from config."""
    filters = filters or FilterConfig()
    if isinstance(config, YouTubeSearcherConfig):
        return YouTubeSearcher(
            api_key=api_key,
            max_results=config.max_results,
            order=config.order,
            region_code=config.region_code,
            relevance_language=config.relevance_language,
            case_sensitive=filters.case_sensitive,
            max_age_years=filters.max_age_years,
            strict_include=config.strict_include,
            timeout=config.timeout,
        )
    msg = f"Unknown searcher config type: {type(config)}"
    raise ValueError(msg)


def create_store(config: StorageConfig, *, data_dir_override: str | None = None) -> LocalStore:
    """Create the local store from config."""
    data_dir = Path(data_dir_override if data_dir_override is not None else config.data_dir)
    return LocalStore(
        data_dir,
        default_included_terms=config.default_included_terms,
        default_excluded_terms=config.default_excluded_terms,
    )


def create_from_config(
    config: VidsieveConfig,
    *,
    log_override: bool | None = None,
    log_dir_override: str | None = None,
    data_dir_override: str | None = None,
    api_key: str | None = None,
) -> tuple[SearchSession, RunLogger | None, LocalStore]:
    """Create a search session, with its state loaded from the local store.

    Args:
        config: Root configuration.
        log_override: Override the config's logging.enabled setting.
        log_dir_override: Override the config's logging.log_dir setting.
        data_dir_override: Override the config's storage.data_dir setting.
        api_key: YouTube API key (defaults to YOUTUBE_API_KEY env var).

    Returns:
        Tuple of (session, run_logger, store).
        run_logger is None if logging is disabled.
    """
    log_enabled = log_override if log_override is not None else config.logging.enabled
    log_dir = Path(log_dir_override if log_dir_override is not None else config.logging.log_dir)

    run_logger: RunLogger | None = None
    if log_enabled:
        run_logger = RunLogger(log_dir=log_dir, enabled=True)

    store = create_store(config.storage, data_dir_override=data_dir_override)
    searcher = create_searcher(config.searcher, config.filters, api_key=api_key)
    session = SearchSession(searcher, store.load_state(), run_logger=run_logger)
    return (session, run_logger, store)
