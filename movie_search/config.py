"""Configuration management for the movie search UI."""
import os
import sys
from typing import Optional

from dotenv import load_dotenv
from loguru import logger

# Load environment variables
load_dotenv()


def _optional_float(value: Optional[str]) -> Optional[float]:
	"""Empty or missing means no timeout at all."""
	if value is None or not value.strip():
		return None
	return float(value)


class Config:
	"""Central configuration class."""

	# Provider
	OMDB_API_KEY: str = os.getenv("OMDB_API_KEY", "59b84e54")
	OMDB_BASE_URL: str = os.getenv("OMDB_BASE_URL", "https://www.omdbapi.com/")
	# Unset keeps requests waiting forever, like the browser client did
	OMDB_REQUEST_TIMEOUT: Optional[float] = _optional_float(os.getenv("OMDB_REQUEST_TIMEOUT"))

	# Enrichment fan-out; the provider returns at most 10 results per search page
	ENRICHMENT_MAX_WORKERS = int(os.getenv("ENRICHMENT_MAX_WORKERS", "10"))

	# Presentation
	POSTER_PLACEHOLDER_URL: str = os.getenv(
		"POSTER_PLACEHOLDER_URL", "https://via.placeholder.com/300x450?text=No+Poster"
	)

	# Logging
	LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


config = Config()


def configure_logging(level: Optional[str] = None) -> None:
	"""Replace loguru's default stderr sink with one at the configured level."""
	logger.remove()
	logger.add(sys.stderr, level=level or config.LOG_LEVEL)
