"""Run logger for recording search sessions to JSON files."""

import uuid
from datetime import UTC, datetime
from pathlib import Path

from pydantic import BaseModel

from vidsieve.data import SearchPage


class PageRecord(BaseModel):
    """Record of a single page request."""

    page_token: str | None = None
    request_query: str = ""
    received_count: int = 0
    kept_count: int = 0
    next_page_token: str | None = None
    error: str | None = None
    timestamp: str = ""
    duration_seconds: float = 0.0


class SessionRecord(BaseModel):
    """Record of a search session: one query and every page requested for it."""

    session_id: str
    query: str
    included_terms: list[str] = []
    excluded_terms: list[str] = []
    started_at: str
    completed_at: str | None = None
    pages: list[PageRecord] = []
    final_item_count: int = 0


class RunLogger:
    """Accumulates page records and writes a JSON log file per search session.

    When ``enabled=False``, all methods are no-ops.

    Args:
        log_dir: Directory to write JSON log files.
        enabled: If False, all methods become no-ops.
    """

    def __init__(self, log_dir: Path, *, enabled: bool = True) -> None:
        self._log_dir = log_dir
        self._enabled = enabled
        self._record: SessionRecord | None = None
        self._last_log_path: Path | None = None

    @property
    def enabled(self) -> bool:
        """Whether logging is active."""
        return self._enabled

    @property
    def last_log_path(self) -> Path | None:
        """Path to the last written log file, or None."""
        return self._last_log_path

    @property
    def active(self) -> bool:
        """Whether a session is currently being recorded."""
        return self._record is not None

    def start_session(
        self,
        query: str,
        included_terms: list[str],
        excluded_terms: list[str],
    ) -> None:
        """Initialize a new session record."""
        if not self._enabled:
            return

        self._record = SessionRecord(
            session_id=str(uuid.uuid4()),
            query=query,
            included_terms=included_terms,
            excluded_terms=excluded_terms,
            started_at=datetime.now(tz=UTC).isoformat(),
        )

    def log_page(
        self,
        *,
        page_token: str | None,
        request_query: str,
        page: SearchPage | None,
        duration_seconds: float,
        error: str | None = None,
    ) -> None:
        """Append a page record to the current session.

        Args:
            page_token: Token the page was requested with.
            request_query: Query text as sent to the endpoint.
            page: The page returned, or None if the request failed.
            duration_seconds: Wall-clock time for the request.
            error: Error message if the request failed.
        """
        if not self._enabled or self._record is None:
            return

        kept = len(page.items) if page is not None else 0
        self._record.pages.append(
            PageRecord(
                page_token=page_token,
                request_query=request_query,
                received_count=kept + page.filtered_out if page is not None else 0,
                kept_count=kept,
                next_page_token=page.next_page_token if page is not None else None,
                error=error,
                timestamp=datetime.now(tz=UTC).isoformat(),
                duration_seconds=round(duration_seconds, 4),
            )
        )

    def finish_session(self, item_count: int) -> Path | None:
        """Write the session record to a JSON file.

        Args:
            item_count: Number of accumulated results at the end of the session.

        Returns:
            Path to the written JSON file, or None if logging is disabled or no
            session is active.
        """
        if not self._enabled or self._record is None:
            return None

        self._record.completed_at = datetime.now(tz=UTC).isoformat()
        self._record.final_item_count = item_count

        self._log_dir.mkdir(parents=True, exist_ok=True)

        # session_2026-02-12T14-30-00_<id>.json
        ts = self._record.started_at.replace(":", "-")
        ts = ts.split(".")[0].split("+")[0]
        filename = f"session_{ts}_{self._record.session_id[:8]}.json"
        filepath = self._log_dir / filename

        filepath.write_text(self._record.model_dump_json(indent=2))
        self._last_log_path = filepath
        self._record = None
        return filepath
