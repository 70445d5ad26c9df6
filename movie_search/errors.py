"""
Error taxonomy of the search pipeline and the messages shown to the user.
Nothing here is fatal: the controller turns every exception into SessionState.error.
"""

NO_RESULTS_MESSAGE = 'No results found'  # fallback when the provider omits its own Error text
SEARCH_FAILED_MESSAGE = 'Failed to fetch movies'
DETAILS_FAILED_MESSAGE = 'Failed to fetch movie details'


class MovieSearchError(Exception):
	"""Base class for all pipeline errors."""


class ProviderRequestError(MovieSearchError):
	"""A single provider request failed in transport, HTTP status, JSON decoding or schema validation."""

	def __init__(self, message: str, params=None):
		super().__init__(message)
		self.params = dict(params or {})


class EnrichmentError(MovieSearchError):
	"""At least one lookup of the enrichment batch failed, so the whole batch is void."""

	def __init__(self, failed_identifier: str, cause: Exception):
		super().__init__(f"Enrichment lookup for {failed_identifier} failed: {cause}")
		self.failed_identifier = failed_identifier
		self.cause = cause
