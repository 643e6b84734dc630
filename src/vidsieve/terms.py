"""Title term lists and the predicates that filter results against them."""

import logging
from collections.abc import Iterable, Iterator, Sequence
from datetime import UTC, datetime

logger = logging.getLogger(__name__)


class TermSet:
    """Ordered list of user-supplied title terms.

    Terms are trimmed on insert; empty and duplicate terms are rejected, so the
    set never holds either. Insertion order is kept for display only.
    """

    def __init__(self, terms: Iterable[str] = ()) -> None:
        self._terms: list[str] = []
        for term in terms:
            self.add(term)

    def add(self, term: str) -> bool:
        """Add a term.

        Returns:
            True if the term was added, False if it was blank or already present.
        """
        cleaned = term.strip()
        if not cleaned or cleaned in self._terms:
            return False
        self._terms.append(cleaned)
        return True

    def remove(self, term: str) -> bool:
        """Remove a term by exact value. Returns True if it was present."""
        if term not in self._terms:
            return False
        self._terms.remove(term)
        return True

    def to_list(self) -> list[str]:
        return list(self._terms)

    def __contains__(self, term: object) -> bool:
        return term in self._terms

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._terms))

    def __len__(self) -> int:
        return len(self._terms)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TermSet):
            return self._terms == other._terms
        return NotImplemented

    def __repr__(self) -> str:
        return f"TermSet({self._terms!r})"


def _matches_any(title: str, terms: Sequence[str], case_sensitive: bool) -> bool:
    if case_sensitive:
        return any(term in title for term in terms)
    folded = title.lower()
    return any(term.lower() in folded for term in terms)


def should_exclude(title: str, terms: Iterable[str], *, case_sensitive: bool = False) -> bool:
    """Return True if any exclude term occurs in the title.

    An empty term list never excludes anything.
    """
    term_list = list(terms)
    if not term_list:
        return False
    return _matches_any(title, term_list, case_sensitive)


def has_included_term(title: str, terms: Iterable[str], *, case_sensitive: bool = False) -> bool:
    """Return True if the title contains any include term.

    An empty term list places no restriction, so every title passes.
    """
    term_list = list(terms)
    if not term_list:
        return True
    return _matches_any(title, term_list, case_sensitive)


def is_recent(
    published_at: str | None,
    *,
    max_age_years: int | None,
    now: datetime | None = None,
) -> bool:
    """Check that a publish timestamp falls within the last ``max_age_years``.

    ``max_age_years=None`` disables the check. When enabled, a missing or
    unparseable timestamp fails it.
    """
    if max_age_years is None:
        return True
    if not published_at:
        return False
    try:
        published = datetime.fromisoformat(published_at)
    except ValueError:
        logger.debug(f"Unparseable publish timestamp: {published_at}")
        return False
    if published.tzinfo is None:
        published = published.replace(tzinfo=UTC)

    current = now or datetime.now(tz=UTC)
    try:
        cutoff = current.replace(year=current.year - max_age_years)
    except ValueError:
        # Feb 29 in a non-leap target year
        cutoff = current.replace(year=current.year - max_age_years, day=28)
    return published >= cutoff


_GROUP_SYNTAX = str.maketrans({'"': " ", "|": " "})


def _quote(term: str) -> str:
    # quotes and pipes are OR-group syntax
    cleaned = " ".join(term.translate(_GROUP_SYNTAX).split())
    if " " in cleaned:
        return f'"{cleaned}"'
    return cleaned


def build_search_query(query: str, included_terms: Iterable[str]) -> str:
    """Append include terms to the query as an OR group.

    ``build_search_query("x", ["a", "b c"])`` gives ``'x (a|"b c")'``.
    """
    base = query.strip()
    terms = [quoted for quoted in (_quote(term) for term in included_terms) if quoted]
    if not terms:
        return base
    group = f"({'|'.join(terms)})"
    return f"{base} {group}" if base else group
