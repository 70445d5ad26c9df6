"""
Enrichment stage.
Looks up every search result by identifier in parallel and derives the genre filter options.
"""

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Set

from loguru import logger

from .config import config
from .errors import EnrichmentError
from .models import ResultSummary
from .omdb_client import OMDbClient
from .schemas import DetailPayload


@dataclass
class EnrichmentResult:
	genres: Set[str] = field(default_factory=set)  # deduplicated union of all tags
	genre_index: Dict[str, str] = field(default_factory=dict)  # identifier -> raw Genre string


def collect_genres(lookups: Dict[str, DetailPayload]) -> EnrichmentResult:
	"""
	Union the genre tags of resolved lookups.
	Provider failures and payloads without a Genre field contribute nothing.
	"""
	result = EnrichmentResult()
	for identifier, payload in lookups.items():
		if not payload.genre:
			continue
		result.genre_index[identifier] = payload.genre
		result.genres.update(payload.genre_tags())
	return result


def enrich(
	client: OMDbClient,
	summaries: Sequence[ResultSummary],
	max_workers: Optional[int] = None,
) -> EnrichmentResult:
	"""
	Fan out one lookup per summary, wait for all of them, then aggregate.

	The batch is all-or-nothing: if any single lookup raises, EnrichmentError
	is raised once every request has settled and no genres are returned.
	"""
	identifiers: List[str] = [s.identifier for s in summaries]
	if not identifiers:
		return EnrichmentResult()

	workers = max(1, min(max_workers or config.ENRICHMENT_MAX_WORKERS, len(identifiers)))
	logger.info(f"[Enrichment] Looking up {len(identifiers)} titles with {workers} workers")

	# Leaving the with-block joins every worker, so nothing is left in flight
	with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="enrich") as executor:
		futures = [(i, executor.submit(client.lookup_by_id, i)) for i in identifiers]

	lookups: Dict[str, DetailPayload] = {}
	for identifier, future in futures:  # fan-out order
		exc = future.exception()
		if exc is not None:
			logger.warning(f"[Enrichment] Batch void, lookup {identifier} failed: {exc}")
			raise EnrichmentError(identifier, exc) from exc
		lookups[identifier] = future.result()

	result = collect_genres(lookups)
	logger.info(f"[Enrichment] Collected {len(result.genres)} genres from {len(lookups)} lookups")
	return result
