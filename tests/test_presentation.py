"""
Unit tests for presentation derivation: genre filtering, year sorting and poster fallback.
Run: python -m pytest tests/test_presentation.py
"""

from movie_search.models import ALL_GENRES, ResultSummary, SortOrder
from movie_search.presentation import (
	derive_display,
	filter_results,
	genre_options,
	poster_src,
	sort_label,
	sort_results,
	year_key,
)


def assert_equal(actual, expected, msg):
	if actual != expected:
		raise AssertionError(f"{msg} | expected={expected}, actual={actual}")


def movie(identifier, year, poster="N/A"):
	return ResultSummary(identifier=identifier, title=identifier.upper(), year=year, poster_url=poster)


def ids(results):
	return [r.identifier for r in results]


def test_all_sentinel_keeps_everything():
	results = [movie("a", "2001"), movie("b", "1999")]
	assert_equal(ids(filter_results(results, {}, ALL_GENRES)), ["a", "b"], "no filtering for 'all'")


def test_filter_is_substring_match():
	results = [movie("a", "2001"), movie("b", "1999")]
	index = {"a": "Action, Drama", "b": "Comedy"}

	assert_equal(ids(filter_results(results, index, "Drama")), ["a"], "contained genre kept")
	assert_equal(ids(filter_results(results, index, "Horror")), [], "absent genre excluded")
	# substring, not tag membership
	assert_equal(ids(filter_results(results, index, "Dram")), ["a"], "partial tag still matches")


def test_filter_excludes_titles_without_enrichment_data():
	results = [movie("a", "2001"), movie("b", "1999")]
	assert_equal(ids(filter_results(results, {"a": "Action"}, "Action")), ["a"], "unknown genre excluded")


def test_sort_is_stable_both_ways():
	results = [movie("first", "2001"), movie("mid", "1999"), movie("second", "2001")]

	asc = sort_results(results, SortOrder.ASC)
	desc = sort_results(results, SortOrder.DESC)

	assert_equal(ids(asc), ["mid", "first", "second"], "ascending with tie order kept")
	assert_equal(ids(desc), ["first", "second", "mid"], "descending with tie order kept")


def test_year_key_uses_leading_digits():
	assert_equal(year_key(movie("s", "2005–2008")), 2005, "series range")
	assert_equal(year_key(movie("s", "2019–")), 2019, "open range")
	assert_equal(year_key(movie("s", "N/A")), 0, "no digits")


def test_derive_display_filters_then_sorts_without_mutating_input():
	results = [movie("a", "1990"), movie("b", "2010"), movie("c", "2000")]
	index = {"a": "Crime", "b": "Crime, Drama", "c": "Comedy"}

	shown = derive_display(results, index, "Crime", SortOrder.DESC)

	assert_equal(ids(shown), ["b", "a"], "filtered and sorted")
	assert_equal(ids(results), ["a", "b", "c"], "input untouched")


def test_sort_order_toggle_has_two_states():
	assert SortOrder.DESC.toggled() is SortOrder.ASC
	assert SortOrder.ASC.toggled() is SortOrder.DESC
	assert SortOrder.DESC.toggled().toggled() is SortOrder.DESC


def test_genre_options_start_with_all():
	assert_equal(genre_options({"Crime", "Action"}), ["all", "Action", "Crime"], "selector entries")


def test_poster_fallback():
	assert_equal(poster_src("N/A", placeholder="ph"), "ph", "sentinel replaced")
	assert_equal(poster_src("https://img/1.jpg", placeholder="ph"), "https://img/1.jpg", "real poster kept")


def test_sort_label():
	assert_equal(sort_label(SortOrder.ASC), "Sort by Year (Ascending)", "ascending label")
	assert_equal(sort_label(SortOrder.DESC), "Sort by Year (Descending)", "descending label")
