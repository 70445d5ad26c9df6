"""
Shared fixtures: a fake requests session that answers like the movie database provider.
No test touches the network.
"""

import sys
import threading
from pathlib import Path

import pytest
import requests

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
	sys.path.insert(0, str(ROOT))

from movie_search.controller import SearchController
from movie_search.omdb_client import OMDbClient


NOT_FOUND = {"Response": "False", "Error": "Incorrect IMDb ID."}


def search_hit(*items):
	"""Build a successful search payload from (imdbID, Title, Year, Poster) tuples."""
	return {
		"Response": "True",
		"totalResults": str(len(items)),
		"Search": [
			{"imdbID": i, "Title": t, "Year": y, "Poster": p, "Type": "movie"}
			for i, t, y, p in items
		],
	}


def detail(imdb_id, title, year, genre=None, **extra):
	"""Build a successful lookup payload."""
	data = {
		"Response": "True",
		"imdbID": imdb_id,
		"Title": title,
		"Year": year,
		"Director": extra.get("Director", "N/A"),
		"Runtime": extra.get("Runtime", "N/A"),
		"imdbRating": extra.get("imdbRating", "N/A"),
		"Plot": extra.get("Plot", "N/A"),
		"Poster": extra.get("Poster", "N/A"),
	}
	if genre is not None:
		data["Genre"] = genre
	return data


class FakeResponse:
	def __init__(self, data, status_code=200):
		self.data = data
		self.status_code = status_code

	def raise_for_status(self):
		if self.status_code >= 400:
			raise requests.HTTPError(f"{self.status_code} Error")

	def json(self):
		if isinstance(self.data, str):
			raise ValueError("Expecting value: line 1 column 1 (char 0)")
		return self.data


class FakeSession:
	"""
	Routes GETs by the 's' (search) or 'i' (lookup) parameter.
	A route value may be a payload dict, a FakeResponse, an exception to raise,
	or a callable returning one of those.
	"""
	def __init__(self):
		self.searches = {}
		self.details = {}
		self.calls = []  # (params, timeout) per request
		self._lock = threading.Lock()

	def get(self, url, params=None, timeout=None):
		with self._lock:
			self.calls.append((dict(params), timeout))
		if "s" in params:
			route = self.searches.get(params["s"], {"Response": "False", "Error": "Movie not found!"})
		else:
			route = self.details.get(params["i"], NOT_FOUND)
		if callable(route) and not isinstance(route, type):
			route = route()
		if isinstance(route, BaseException):
			raise route
		if isinstance(route, FakeResponse):
			return route
		return FakeResponse(route)

	def lookups(self):
		return [p["i"] for p, _ in self.calls if "i" in p]

	def searched(self):
		return [p["s"] for p, _ in self.calls if "s" in p]


@pytest.fixture
def fake_session():
	return FakeSession()


@pytest.fixture
def client(fake_session):
	return OMDbClient(api_key="test-key", base_url="https://omdb.test/", session=fake_session)


@pytest.fixture
def controller(client):
	return SearchController(client=client)
