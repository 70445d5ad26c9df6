"""
Smoke-check the live provider.

This script:
1) Runs one title search through SearchController
2) Lets the enrichment stage collect genres
3) Opens the first result in the detail view
4) Logs what the page would show

Usage:
    python -m scripts.smoke_search "batman"

Needs network access; OMDB_API_KEY may be set in the environment or a .env file.
"""

import sys  # command-line arguments
import time  # measure step timings

from loguru import logger  # console logging

from movie_search.config import configure_logging  # loguru sink setup
from movie_search.controller import SearchController  # full pipeline
from movie_search.models import ViewState  # detail/list check


def main(argv=None):
	argv = sys.argv[1:] if argv is None else argv
	query = " ".join(argv) or "batman"  # default term

	configure_logging()
	logger.info("=" * 60)
	logger.info(f"Movie Search smoke check: '{query}'")
	logger.info("=" * 60)

	controller = SearchController()  # default client from config
	state = controller.state

	# 1) + 2) Search and enrichment
	logger.info("[1/3] Searching...")
	t0 = time.time()
	controller.search(query)
	logger.info(f"[OK] Search + enrichment finished in {time.time() - t0:.2f}s")
	if state.error:
		logger.warning(f"Error shown to the user: {state.error}")
	if not state.results:
		logger.info("No results; nothing more to check.")
		return 1

	# 3) Derived list
	logger.info(f"[2/3] {len(state.results)} results, genres: {', '.join(sorted(state.genres)) or '-'}")
	for i, movie in enumerate(controller.displayed(), 1):
		logger.info(f"  {i}. {movie.title} ({movie.year}) [{movie.identifier}]")

	# 4) Detail view of the first card
	first = controller.displayed()[0]
	logger.info(f"[3/3] Opening {first.identifier}...")
	controller.select(first.identifier)
	if state.view is ViewState.DETAIL:
		m = state.selected_movie
		logger.info(f"[OK] {m.title} | {m.year} | {m.genre} | {m.director} | {m.runtime} | {m.imdb_rating}")
	else:
		logger.warning(f"Detail view not opened (error: {state.error})")

	logger.info("=" * 60)
	return 0


if __name__ == '__main__':
	sys.exit(main())
