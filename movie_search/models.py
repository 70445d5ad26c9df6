"""
Data models for the Movie Search UI.
Defines the records exchanged between the provider client, the pipeline stages and the page.
"""

# Import dataclass to define simple "record-like" classes without boilerplate
from dataclasses import dataclass, field  # auto-generates __init__, __repr__, etc.
# Enum gives the two-valued view and sort states a closed set of members
from enum import Enum
# Import typing helpers for precise and self-documenting types
from typing import Dict, List, Optional, Set

# Sentinel value of the genre selector meaning "no filtering"
ALL_GENRES = 'all'
# Sentinel the provider uses for missing values such as posters
NOT_AVAILABLE = 'N/A'


class ViewState(str, Enum):
	LIST = 'list'
	DETAIL = 'detail'


class SortOrder(str, Enum):
	ASC = 'asc'
	DESC = 'desc'

	def toggled(self) -> 'SortOrder':
		return SortOrder.ASC if self is SortOrder.DESC else SortOrder.DESC


@dataclass(frozen=True)
class ResultSummary:
	"""
	One entry of a title search.
	Replaced wholesale by the next search; never mutated after it is received.
	"""
	identifier: str  # provider id (imdbID), unique per search response
	title: str  # display title
	year: str  # year as text, e.g. "2005" or "2005–2008" for series
	poster_url: str = NOT_AVAILABLE  # poster link or the "N/A" sentinel


@dataclass
class MovieDetail:
	"""
	Full record returned by a lookup by identifier.
	The Enrichment Stage only reads the genres; the Detail Stage shows all of it.
	"""
	identifier: str
	title: str
	year: str
	genre: str = ''  # raw comma-space delimited string as sent by the provider
	genre_list: List[str] = field(default_factory=list)  # genre split into tags
	director: str = NOT_AVAILABLE
	runtime: str = NOT_AVAILABLE
	imdb_rating: str = NOT_AVAILABLE
	plot: str = NOT_AVAILABLE
	poster_url: str = NOT_AVAILABLE


@dataclass
class SessionState:
	"""
	Everything the page shows, owned by a single SearchController.
	A new search overwrites the result-related fields as a unit; it never merges.
	"""
	query: str = ''
	results: List[ResultSummary] = field(default_factory=list)
	genres: Set[str] = field(default_factory=set)  # union of all genre tags of the current search
	genre_index: Dict[str, str] = field(default_factory=dict)  # identifier -> raw genre string
	selected_genre: str = ALL_GENRES
	sort_order: SortOrder = SortOrder.DESC
	loading: bool = False
	error: Optional[str] = None
	view: ViewState = ViewState.LIST
	selected_movie: Optional[MovieDetail] = None  # set only while view is DETAIL
	search_generation: int = 0  # bumped by every accepted search
