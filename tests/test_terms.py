"""Tests for title term lists and filter predicates."""

from datetime import UTC, datetime

import pytest

from vidsieve.terms import (
    TermSet,
    build_search_query,
    has_included_term,
    is_recent,
    should_exclude,
)


class TestTermSet:
    """Tests for TermSet."""

    def test_add_trims_and_keeps_order(self) -> None:
        terms = TermSet()
        assert terms.add("  method ")
        assert terms.add("شرح")
        assert list(terms) == ["method", "شرح"]

    def test_add_rejects_blank(self) -> None:
        terms = TermSet()
        assert not terms.add("")
        assert not terms.add("   ")
        assert len(terms) == 0

    def test_add_rejects_duplicates_after_trim(self) -> None:
        terms = TermSet(["paypal.me"])
        assert not terms.add(" paypal.me ")
        assert terms.to_list() == ["paypal.me"]

    def test_constructor_normalizes(self) -> None:
        terms = TermSet([" a", "a", "", "b "])
        assert terms.to_list() == ["a", "b"]

    def test_remove(self) -> None:
        terms = TermSet(["a", "b"])
        assert terms.remove("a")
        assert not terms.remove("a")
        assert terms.to_list() == ["b"]

    def test_contains_and_equality(self) -> None:
        terms = TermSet(["a"])
        assert "a" in terms
        assert terms == TermSet(["a"])
        assert terms != TermSet(["b"])


class TestShouldExclude:
    """Tests for should_exclude."""

    @pytest.mark.parametrize(
        ("title", "terms"),
        [
            ("Donate at paypal.me/someone", ["paypal.me"]),
            ("prefix-spam-suffix", ["x", "spam"]),
            ("شرح مشكلة", ["مشكلة"]),
        ],
    )
    def test_excludes_when_term_is_substring(self, title: str, terms: list[str]) -> None:
        assert should_exclude(title, terms)
        assert should_exclude(title, terms, case_sensitive=True)

    def test_empty_terms_never_exclude(self) -> None:
        assert not should_exclude("anything at all", [])

    def test_case_insensitive_mode(self) -> None:
        assert should_exclude("Fix PayPal.me issue", ["paypal.me"], case_sensitive=False)

    def test_case_sensitive_mode(self) -> None:
        assert not should_exclude("Fix PayPal.me issue", ["paypal.me"], case_sensitive=True)

    def test_empty_title_never_matches(self) -> None:
        assert not should_exclude("", ["paypal.me"])

    def test_accepts_term_set(self) -> None:
        assert should_exclude("Buy now", TermSet(["buy"]))


class TestHasIncludedTerm:
    """Tests for has_included_term."""

    @pytest.mark.parametrize("title", ["", "anything", "شرح", "UPPER"])
    def test_empty_terms_include_everything(self, title: str) -> None:
        assert has_included_term(title, [])
        assert has_included_term(title, [], case_sensitive=True)

    def test_includes_when_any_term_matches(self) -> None:
        assert has_included_term("Easy method for X", ["tutorial", "method"])

    def test_rejects_when_no_term_matches(self) -> None:
        assert not has_included_term("Unrelated", ["method"])

    def test_empty_title_rejected_by_non_empty_terms(self) -> None:
        assert not has_included_term("", ["method"])

    def test_case_modes(self) -> None:
        assert has_included_term("METHOD", ["method"])
        assert not has_included_term("METHOD", ["method"], case_sensitive=True)


class TestIsRecent:
    """Tests for is_recent."""

    NOW = datetime(2026, 10, 19, 12, 0, tzinfo=UTC)

    def test_disabled_accepts_anything(self) -> None:
        assert is_recent(None, max_age_years=None)
        assert is_recent("not a date", max_age_years=None)

    def test_within_window(self) -> None:
        assert is_recent("2024-01-01T00:00:00Z", max_age_years=3, now=self.NOW)

    def test_outside_window(self) -> None:
        assert not is_recent("2023-10-18T00:00:00Z", max_age_years=3, now=self.NOW)

    def test_missing_or_invalid_timestamp_fails(self) -> None:
        assert not is_recent(None, max_age_years=3, now=self.NOW)
        assert not is_recent("yesterday", max_age_years=3, now=self.NOW)

    def test_naive_timestamp_treated_as_utc(self) -> None:
        assert is_recent("2026-01-01T00:00:00", max_age_years=1, now=self.NOW)

    def test_leap_day(self) -> None:
        now = datetime(2024, 2, 29, tzinfo=UTC)
        assert is_recent("2023-03-01T00:00:00Z", max_age_years=1, now=now)
        assert not is_recent("2023-02-27T00:00:00Z", max_age_years=1, now=now)


class TestBuildSearchQuery:
    """Tests for build_search_query."""

    def test_no_terms_leaves_query(self) -> None:
        assert build_search_query("  cats ", []) == "cats"

    def test_terms_appended_as_or_group(self) -> None:
        assert build_search_query("x", ["method", "شرح"]) == "x (method|شرح)"

    def test_terms_with_spaces_are_quoted(self) -> None:
        assert build_search_query("x", ["how to"]) == 'x ("how to")'

    def test_empty_query_with_terms(self) -> None:
        assert build_search_query("", ["a", "b"]) == "(a|b)"

    def test_quotes_and_pipes_are_stripped(self) -> None:
        assert build_search_query("x", ['say "hi"', "a|b", "c"]) == 'x ("say hi"|"a b"|c)'

    def test_terms_of_only_group_syntax_are_dropped(self) -> None:
        assert build_search_query("x", ['"', "|", "ok"]) == "x (ok)"
        assert build_search_query("x", ["||"]) == "x"
