"""
HTTP client for the movie database provider (OMDb).
Exposes the two operations the pipeline needs: search by title and lookup by identifier.
No caching, no retry and, unless configured, no timeout: every call is one GET.
"""

# Typing hints for clarity of public API
from typing import Any, Dict, Optional  # type hints

# HTTP client library used for all provider calls
import requests  # make web requests to the provider
# Pydantic raises ValidationError when a payload does not match the schema
from pydantic import ValidationError

# Console logging
from loguru import logger  # console logger

from .config import config  # provider settings
from .errors import ProviderRequestError  # transport/parse failure
from .schemas import DetailPayload, SearchPayload  # wire-format schemas


class OMDbClient:
	"""
	Thin wrapper around the provider's single GET endpoint.
	Provider-level failures (Response "False") are returned as payloads; only
	transport, HTTP and parse failures raise ProviderRequestError.
	"""

	def __init__(
		self,
		api_key: Optional[str] = None,  # defaults to config.OMDB_API_KEY
		base_url: Optional[str] = None,  # defaults to config.OMDB_BASE_URL
		timeout: Optional[float] = None,  # seconds; None waits indefinitely
		session: Optional[requests.Session] = None,  # injectable for tests
	):
		self.api_key = api_key or config.OMDB_API_KEY
		self.base_url = base_url or config.OMDB_BASE_URL
		self.timeout = timeout if timeout is not None else config.OMDB_REQUEST_TIMEOUT
		self.session = session or requests.Session()  # pooled connections for the fan-out

	def _get(self, params: Dict[str, str]) -> Dict[str, Any]:
		"""
		Issue one GET and return the decoded JSON object.
		A body carrying "Response" is the provider's answer whatever the HTTP status
		(an invalid key or an exhausted quota comes back as 401 with Response "False").
		"""
		query = {"apikey": self.api_key, **params}  # requests URL-encodes every value
		logger.debug(f"[Client] GET {self.base_url} params={params}")  # key stays out of logs
		try:
			resp = self.session.get(self.base_url, params=query, timeout=self.timeout)
		except requests.RequestException as e:
			logger.warning(f"[Client] Request failed params={params}: {e}")
			raise ProviderRequestError(str(e), params) from e

		try:
			data = resp.json()  # ValueError on malformed body
		except ValueError:
			data = None
		if isinstance(data, dict) and "Response" in data:
			if resp.status_code >= 400:
				logger.debug(f"[Client] HTTP {resp.status_code} with provider answer: {data.get('Error')}")
			return data

		try:
			resp.raise_for_status()  # non-2xx without a provider answer is a transport failure
		except requests.RequestException as e:
			logger.warning(f"[Client] Request failed params={params}: {e}")
			raise ProviderRequestError(str(e), params) from e
		if data is None:
			logger.warning(f"[Client] Undecodable body params={params}")
			raise ProviderRequestError("Response body is not valid JSON", params)
		if not isinstance(data, dict):
			raise ProviderRequestError(f"Unexpected payload type {type(data).__name__}", params)
		return data  # missing Response is caught by schema validation

	def search_by_title(self, query: str) -> SearchPayload:
		"""Search titles matching a free-text query (one page, provider order)."""
		data = self._get({"s": query})
		try:
			payload = SearchPayload.model_validate(data)
		except ValidationError as e:
			raise ProviderRequestError(f"Malformed search payload: {e}", {"s": query}) from e
		logger.debug(
			f"[Client] search '{query}' -> response={payload.response} items={len(payload.search)} total={payload.total_results} error={payload.error}"
		)
		return payload

	def lookup_by_id(self, identifier: str) -> DetailPayload:
		"""Fetch the full record of one title by its provider identifier."""
		data = self._get({"i": identifier})
		try:
			payload = DetailPayload.model_validate(data)
		except ValidationError as e:
			raise ProviderRequestError(f"Malformed detail payload: {e}", {"i": identifier}) from e
		logger.debug(f"[Client] lookup {identifier} -> response={payload.response} genre={payload.genre}")
		return payload
