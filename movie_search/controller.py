"""
Search controller.
Owns the single SessionState and runs the pipeline stages against it:
search -> enrichment -> presentation, plus the detail view and its back action.
"""

import threading  # single-writer lock around state mutations
from typing import List, Optional  # type annotations for clarity

# Console logging
from loguru import logger  # simple structured logger

from .enrichment import enrich  # parallel genre lookups
from .errors import (
	DETAILS_FAILED_MESSAGE,
	EnrichmentError,
	NO_RESULTS_MESSAGE,
	ProviderRequestError,
	SEARCH_FAILED_MESSAGE,
)
from .models import ALL_GENRES, ResultSummary, SessionState, ViewState  # core data classes
from .omdb_client import OMDbClient  # provider client
from .presentation import derive_display  # filter + sort


class SearchController:
	"""
	High-level API the page calls for every user action.
	Errors never propagate out of it: they land in state.error.

	Searches may overlap; the latest one wins. Each accepted search bumps
	state.search_generation and any completion carrying an older generation
	is dropped, so a late response cannot overwrite a newer search.
	"""
	def __init__(self, client: Optional[OMDbClient] = None, state: Optional[SessionState] = None):
		self.client = client or OMDbClient()  # provider client
		self.state = state or SessionState()  # the one state record
		self._lock = threading.RLock()  # serializes every mutation of self.state

	def _is_current(self, generation: int) -> bool:
		return generation == self.state.search_generation

	# ------------------------------------------------------------------ search
	def search(self, query: str) -> None:
		"""Run the search stage followed by the enrichment stage."""
		term = (query or '').strip()
		if not term:  # blank input is a no-op: no request, no state change
			logger.debug("[Controller] Ignoring blank query")
			return

		with self._lock:
			self.state.search_generation += 1  # supersede any search in flight
			generation = self.state.search_generation
			self.state.query = term
			self.state.loading = True
			self.state.error = None
		logger.info(f"[Controller] Search #{generation} for '{term}'")

		try:
			try:
				payload = self.client.search_by_title(term)
			except ProviderRequestError as e:
				with self._lock:
					if self._is_current(generation):
						# Results from the previous search intentionally stay on screen
						self.state.error = SEARCH_FAILED_MESSAGE
				logger.warning(f"[Controller] Search #{generation} failed: {e}")
				return

			if not payload.ok:
				with self._lock:
					if self._is_current(generation):
						self._replace_results([])
						self.state.error = payload.error or NO_RESULTS_MESSAGE
				logger.info(f"[Controller] Search #{generation} returned no results: {payload.error}")
				return

			summaries = payload.to_summaries()
			with self._lock:
				if not self._is_current(generation):
					logger.debug(f"[Controller] Dropping stale search #{generation}")
					return
				self._replace_results(summaries)
				self.state.error = None
			logger.info(f"[Controller] Search #{generation} returned {len(summaries)} results")

			self._run_enrichment(generation, summaries)
		finally:
			with self._lock:
				if self._is_current(generation):
					self.state.loading = False

	def _replace_results(self, summaries: List[ResultSummary]) -> None:
		"""Swap in a new result list; genres derived from the old one go with it."""
		self.state.results = list(summaries)
		self.state.genres = set()
		self.state.genre_index = {}
		self.state.selected_genre = ALL_GENRES

	def _run_enrichment(self, generation: int, summaries: List[ResultSummary]) -> None:
		try:
			enriched = enrich(self.client, summaries)
		except EnrichmentError as e:
			with self._lock:
				if self._is_current(generation):
					# Results stay; the genre selector stays empty for this search
					self.state.error = SEARCH_FAILED_MESSAGE
			logger.warning(f"[Controller] Enrichment for search #{generation} failed: {e}")
			return

		with self._lock:
			if not self._is_current(generation):
				logger.debug(f"[Controller] Dropping stale enrichment #{generation}")
				return
			self.state.genres = enriched.genres
			self.state.genre_index = enriched.genre_index

	# ------------------------------------------------------------------ detail
	def select(self, identifier: str) -> None:
		"""Fetch one title and switch to the detail view; nothing is cached."""
		with self._lock:
			self.state.loading = True
		logger.info(f"[Controller] Loading details for {identifier}")
		try:
			payload = self.client.lookup_by_id(identifier)
			if not payload.ok:
				# No view change and no message for a provider-level failure
				logger.warning(f"[Controller] Provider refused details for {identifier}: {payload.error}")
				return
			detail = payload.to_detail(identifier)
			with self._lock:
				self.state.selected_movie = detail
				self.state.view = ViewState.DETAIL
		except ProviderRequestError as e:
			with self._lock:
				self.state.error = DETAILS_FAILED_MESSAGE
			logger.warning(f"[Controller] Detail lookup for {identifier} failed: {e}")
		finally:
			with self._lock:
				self.state.loading = False

	def back(self) -> None:
		"""Return to the result list; results, genres, filter and sort are untouched."""
		with self._lock:
			self.state.selected_movie = None
			self.state.view = ViewState.LIST

	# ------------------------------------------------------------------ view controls
	def set_genre(self, genre: str) -> None:
		with self._lock:
			self.state.selected_genre = genre or ALL_GENRES

	def toggle_sort(self) -> None:
		with self._lock:
			self.state.sort_order = self.state.sort_order.toggled()
			logger.debug(f"[Controller] Sort order now {self.state.sort_order.value}")

	def displayed(self) -> List[ResultSummary]:
		"""Cards to render for the current state, recomputed on every call."""
		with self._lock:
			return derive_display(
				self.state.results,
				self.state.genre_index,
				self.state.selected_genre,
				self.state.sort_order,
			)
