"""Pydantic configuration models for vidsieve components."""

from typing import Literal

from pydantic import BaseModel, Field

from vidsieve.store import DEFAULT_EXCLUDED_TERMS, DEFAULT_INCLUDED_TERMS

# ============================================================
# Searcher Config
# ============================================================


class YouTubeSearcherConfig(BaseModel):
    """Configuration for YouTubeSearcher."""

    type: Literal["youtube"] = "youtube"
    max_results: int = Field(default=50, ge=1, le=50)
    order: Literal["date", "rating", "relevance", "title", "videoCount", "viewCount"] = "date"
    region_code: str | None = None
    relevance_language: str | None = None
    timeout: float = 30.0
    strict_include: bool = False

    model_config = {"frozen": True}


# ============================================================
# Filter Config
# ============================================================


class FilterConfig(BaseModel):
    """Configuration for client-side title filtering."""

    case_sensitive: bool = False
    max_age_years: int | None = Field(default=None, ge=1)

    model_config = {"frozen": True}


# ============================================================
# Storage Config
# ============================================================


class StorageConfig(BaseModel):
    """Configuration for local persistence of terms, favorites and history."""

    data_dir: str = ".vidsieve"
    default_included_terms: list[str] = Field(
        default_factory=lambda: list(DEFAULT_INCLUDED_TERMS)
    )
    default_excluded_terms: list[str] = Field(
        default_factory=lambda: list(DEFAULT_EXCLUDED_TERMS)
    )

    model_config = {"frozen": True}


# ============================================================
# Logging Config
# ============================================================


class LoggingConfig(BaseModel):
    """Configuration for per-session JSON logging."""

    enabled: bool = False
    log_dir: str = "logs"

    model_config = {"frozen": True}


# ============================================================
# Root Config
# ============================================================


class VidsieveConfig(BaseModel):
    """Root configuration for vidsieve."""

    searcher: YouTubeSearcherConfig = Field(default_factory=YouTubeSearcherConfig)
    filters: FilterConfig = Field(default_factory=FilterConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"frozen": True}
