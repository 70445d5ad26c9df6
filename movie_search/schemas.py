"""
Wire-format schemas for the movie database provider (OMDb).
Field aliases match the provider's JSON keys; conversion helpers produce the internal dataclasses.
"""

# Typing hints for optional fields and lists
from typing import List, Optional  # type hints

# Pydantic validates provider JSON and maps its capitalized keys onto snake_case fields
from pydantic import BaseModel, ConfigDict, Field  # response schema definitions

from .models import MovieDetail, NOT_AVAILABLE, ResultSummary  # internal records

# Delimiter between genre tags in the provider's Genre string
GENRE_DELIMITER = ', '


class ProviderPayload(BaseModel):
	"""Fields shared by every provider response."""
	model_config = ConfigDict(populate_by_name=True, extra='ignore')  # accept snake_case in tests, drop unknown keys

	response: str = Field(alias='Response')  # "True" or "False", as a string
	error: Optional[str] = Field(default=None, alias='Error')  # message when response is "False"

	@property
	def ok(self) -> bool:
		"""True when the provider reports success."""
		return self.response == 'True'


class SearchItemPayload(BaseModel):
	"""A single entry of the Search array."""
	model_config = ConfigDict(populate_by_name=True, extra='ignore')

	imdb_id: str = Field(alias='imdbID')
	title: str = Field(alias='Title')
	year: str = Field(alias='Year')
	poster: str = Field(default=NOT_AVAILABLE, alias='Poster')

	def to_summary(self) -> ResultSummary:
		return ResultSummary(identifier=self.imdb_id, title=self.title, year=self.year, poster_url=self.poster)


class SearchPayload(ProviderPayload):
	"""Response of the search-by-title operation."""
	search: List[SearchItemPayload] = Field(default_factory=list, alias='Search')
	total_results: Optional[str] = Field(default=None, alias='totalResults')

	def to_summaries(self) -> List[ResultSummary]:
		"""Summaries in provider order."""
		return [item.to_summary() for item in self.search]


class DetailPayload(ProviderPayload):
	"""Response of the lookup-by-identifier operation; every field is absent on failure."""
	imdb_id: Optional[str] = Field(default=None, alias='imdbID')
	title: Optional[str] = Field(default=None, alias='Title')
	year: Optional[str] = Field(default=None, alias='Year')
	genre: Optional[str] = Field(default=None, alias='Genre')
	director: Optional[str] = Field(default=None, alias='Director')
	runtime: Optional[str] = Field(default=None, alias='Runtime')
	imdb_rating: Optional[str] = Field(default=None, alias='imdbRating')
	plot: Optional[str] = Field(default=None, alias='Plot')
	poster: Optional[str] = Field(default=None, alias='Poster')

	def genre_tags(self) -> List[str]:
		"""Split the Genre string on the provider's delimiter; a missing Genre yields no tags."""
		if not self.genre:
			return []
		return [tag for tag in self.genre.split(GENRE_DELIMITER) if tag]

	def to_detail(self, identifier: str) -> MovieDetail:
		"""Build a MovieDetail; identifier is the one requested, in case the payload omits imdbID."""
		return MovieDetail(
			identifier=self.imdb_id or identifier,
			title=self.title or '',
			year=self.year or '',
			genre=self.genre or '',
			genre_list=self.genre_tags(),
			director=self.director or NOT_AVAILABLE,
			runtime=self.runtime or NOT_AVAILABLE,
			imdb_rating=self.imdb_rating or NOT_AVAILABLE,
			plot=self.plot or NOT_AVAILABLE,
			poster_url=self.poster or NOT_AVAILABLE,
		)
