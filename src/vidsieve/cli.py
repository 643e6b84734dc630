"""CLI for vidsieve video search."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from vidsieve.config import (
    VidsieveConfig,
    create_from_config,
    create_store,
    get_default_config_path,
    load_config,
)
from vidsieve.data import ResultItem, SearchStatus
from vidsieve.state import AppState

logger = logging.getLogger(__name__)


class CLIArgs(BaseModel):
    """Validated CLI arguments shared by all subcommands."""

    config: Path | None = None
    data_dir: str | None = None

    @field_validator("config")
    @classmethod
    def config_must_exist(cls, v: Path | None) -> Path | None:
        if v is not None and not v.exists():
            raise ValueError(f"Config file not found: {v}")
        return v

    def load(self) -> VidsieveConfig:
        if self.config is None:
            return VidsieveConfig()
        return load_config(self.config)


class SearchArgs(CLIArgs):
    """Validated arguments for the ``search`` subcommand."""

    query: str
    pages: int = Field(default=1, ge=1)
    favorite: list[int] = Field(default_factory=list)
    log: bool = False
    log_dir: str = "logs"

    @field_validator("favorite")
    @classmethod
    def favorites_are_positions(cls, v: list[int]) -> list[int]:
        if any(i < 1 for i in v):
            raise ValueError("--favorite positions start at 1")
        return v


class TermsArgs(CLIArgs):
    """Validated arguments for the ``terms`` subcommand."""

    kind: Literal["include", "exclude"]
    action: Literal["list", "add", "remove"]
    term: str | None = None


def _print_item(position: int, item: ResultItem, *, favorite: bool = False) -> None:
    marker = " *" if favorite else ""
    print(f"{position}. {item.title}{marker}")
    print(f"   Channel: {item.channel_title}")
    if item.published_at:
        print(f"   Published: {item.published_at}")
    print(f"   URL: {item.url}")


async def run_search(args: SearchArgs) -> int:
    """Run a search session and print the accumulated results.

    Args:
        args: Validated search arguments.

    Returns:
        Process exit code.
    """
    config = args.load()
    session, run_logger, store = create_from_config(
        config,
        log_override=args.log if args.log else None,
        log_dir_override=args.log_dir if args.log_dir != "logs" else None,
        data_dir_override=args.data_dir,
    )
    state = session.state
    logger.info(f"Include terms: {', '.join(state.included_terms) or '(none)'}")
    logger.info(f"Exclude terms: {', '.join(state.excluded_terms) or '(none)'}")

    await session.search(args.query)
    for _ in range(args.pages - 1):
        if not session.can_load_more:
            break
        await session.load_more()

    items = session.items
    if session.error:
        logger.error(session.error)

    print(f"\nFound {len(items)} videos:\n")
    for i, item in enumerate(items, 1):
        _print_item(i, item, favorite=item.video_id in state.favorites)

    for position in args.favorite:
        if position > len(items):
            logger.warning(f"No result at position {position}")
            continue
        item = items[position - 1]
        if session.toggle_favorite(item):
            logger.info(f"Added to favorites: {item.title}")
        else:
            logger.info(f"Removed from favorites: {item.title}")

    if session.next_page_token:
        logger.info("\nMore results available (use --pages to fetch more).")

    session.finish()
    if run_logger and run_logger.last_log_path:
        logger.info(f"\nSession log written to: {run_logger.last_log_path}")
    logger.debug(f"State stored in {store.data_dir}")

    return 1 if session.status is SearchStatus.FAILED else 0


def _load_state(args: CLIArgs) -> AppState:
    config = args.load()
    return create_store(config.storage, data_dir_override=args.data_dir).load_state()


def run_terms(args: TermsArgs) -> int:
    """List, add or remove include/exclude terms."""
    state = _load_state(args)
    terms = state.included_terms if args.kind == "include" else state.excluded_terms

    if args.action == "list":
        for term in terms:
            print(term)
        return 0

    if not args.term:
        logger.error(f"A term is required to {args.action}")
        return 1

    if args.action == "add":
        add = state.add_included_term if args.kind == "include" else state.add_excluded_term
        if not add(args.term):
            logger.warning(f"Term not added (blank or already present): {args.term!r}")
        return 0

    remove = state.remove_included_term if args.kind == "include" else state.remove_excluded_term
    if not remove(args.term):
        logger.warning(f"Term not found: {args.term!r}")
    return 0


def run_favorites(args: CLIArgs, action: str, video_id: str | None) -> int:
    """List or remove favorites."""
    state = _load_state(args)

    if action == "list":
        for i, entry in enumerate(state.favorites, 1):
            _print_item(i, entry.item)
            print(f"   Saved from search: {entry.search_term!r}")
        return 0

    if not video_id:
        logger.error("A video id is required to remove a favorite")
        return 1
    if not state.remove_favorite(video_id):
        logger.warning(f"Not a favorite: {video_id}")
    return 0


def run_history(args: CLIArgs, *, clear: bool) -> int:
    """Print or clear the search history."""
    state = _load_state(args)
    if clear:
        state.clear_history()
        return 0
    for entry in state.history:
        print(f"{entry.timestamp}  {entry.query}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Search YouTube with title term filters.")
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: configs/default.yaml if present)",
    )
    parser.add_argument(
        "--data-dir",
        type=str,
        default=None,
        help="Directory for stored terms, favorites and history",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    search = subparsers.add_parser("search", help="Search for videos")
    search.add_argument("query", help="Search query")
    search.add_argument(
        "--pages",
        type=int,
        default=1,
        help="Number of pages to load (default: 1)",
    )
    search.add_argument(
        "--favorite",
        type=int,
        action="append",
        default=[],
        help="Toggle favorite for the result at this 1-based position (repeatable)",
    )
    search.add_argument(
        "--log",
        action="store_true",
        default=False,
        help="Write a JSON log of the search session",
    )
    search.add_argument(
        "--log-dir",
        type=str,
        default="logs",
        help="Directory for log files (default: logs/)",
    )

    terms = subparsers.add_parser("terms", help="Manage include/exclude title terms")
    terms.add_argument("kind", choices=["include", "exclude"])
    terms.add_argument("action", choices=["list", "add", "remove"])
    terms.add_argument("term", nargs="?", default=None)

    favorites = subparsers.add_parser("favorites", help="List or remove favorites")
    favorites.add_argument("action", choices=["list", "remove"])
    favorites.add_argument("video_id", nargs="?", default=None)

    history = subparsers.add_parser("history", help="Show recent searches")
    history.add_argument("--clear", action="store_true", default=False)

    return parser


def main(argv: list[str] | None = None) -> None:
    """Entry point for the CLI."""
    parser = build_parser()
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    ns = parser.parse_args(argv)
    config_path: Path | None = ns.config
    if config_path is None:
        default_path = get_default_config_path()
        config_path = default_path if default_path.exists() else None

    try:
        if ns.command == "search":
            search_args = SearchArgs(
                query=ns.query,
                pages=ns.pages,
                favorite=ns.favorite,
                log=ns.log,
                log_dir=ns.log_dir,
                config=config_path,
                data_dir=ns.data_dir,
            )
        elif ns.command == "terms":
            terms_args = TermsArgs(
                kind=ns.kind,
                action=ns.action,
                term=ns.term,
                config=config_path,
                data_dir=ns.data_dir,
            )
        else:
            common = CLIArgs(config=config_path, data_dir=ns.data_dir)
    except Exception as e:
        logger.error(str(e))
        sys.exit(1)

    try:
        if ns.command == "search":
            code = asyncio.run(run_search(search_args))
        elif ns.command == "terms":
            code = run_terms(terms_args)
        elif ns.command == "favorites":
            code = run_favorites(common, ns.action, ns.video_id)
        else:
            code = run_history(common, clear=ns.clear)
    except KeyboardInterrupt:
        sys.exit(130)
    except ValueError as e:
        # missing API key, invalid config
        logger.error(str(e))
        sys.exit(1)

    sys.exit(code)


if __name__ == "__main__":
    main()
