"""
Presentation derivation.
Turns the current results, genre filter and sort order into the sequence of cards to show.
Pure functions, recomputed on every render.
"""

import re
from typing import List, Mapping, Optional, Sequence

from .config import config
from .models import ALL_GENRES, NOT_AVAILABLE, ResultSummary, SortOrder

# Leading digits of a Year value such as "2001" or "2001–2005"
RE_LEADING_YEAR = re.compile(r"^\s*(\d+)")


def year_key(summary: ResultSummary) -> int:
	"""
	Integer year used for sorting.
	Only the leading digits count; a year without any sorts as 0.
	"""
	m = RE_LEADING_YEAR.match(summary.year or '')
	return int(m.group(1)) if m else 0


def matches_genre(summary: ResultSummary, genre_index: Mapping[str, str], selected_genre: str) -> bool:
	"""
	Substring match of the selected genre against the title's raw Genre string.
	"Sci" therefore matches "Sci-Fi"; titles without enrichment data never match a real genre.
	"""
	if selected_genre == ALL_GENRES:
		return True
	return selected_genre in genre_index.get(summary.identifier, '')


def filter_results(
	results: Sequence[ResultSummary],
	genre_index: Mapping[str, str],
	selected_genre: str,
) -> List[ResultSummary]:
	return [r for r in results if matches_genre(r, genre_index, selected_genre)]


def sort_results(results: Sequence[ResultSummary], sort_order: SortOrder) -> List[ResultSummary]:
	# sorted() is stable with reverse=True too, so tied years keep input order both ways
	return sorted(results, key=year_key, reverse=sort_order is SortOrder.DESC)


def derive_display(
	results: Sequence[ResultSummary],
	genre_index: Mapping[str, str],
	selected_genre: str,
	sort_order: SortOrder,
) -> List[ResultSummary]:
	"""Filter first, then sort; the input sequence is never modified."""
	return sort_results(filter_results(results, genre_index, selected_genre), sort_order)


def genre_options(genres) -> List[str]:
	"""Selector entries: the "all" sentinel followed by the genres in alphabetical order."""
	return [ALL_GENRES] + sorted(genres)


def poster_src(poster_url: str, placeholder: Optional[str] = None) -> str:
	"""Poster to render, falling back to a placeholder for the "N/A" sentinel."""
	if not poster_url or poster_url == NOT_AVAILABLE:
		return placeholder or config.POSTER_PLACEHOLDER_URL
	return poster_url


def sort_label(sort_order: SortOrder) -> str:
	return f"Sort by Year ({'Ascending' if sort_order is SortOrder.ASC else 'Descending'})"
