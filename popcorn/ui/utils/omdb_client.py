"""
OMDb catalog client for the Streamlit UI.
"""

import asyncio
import logging

import requests
from pydantic import ValidationError

from popcorn.config import (
    get_omdb_api_key,
    get_omdb_base_url,
    get_omdb_timeout,
    get_search_min_chars,
)
from popcorn.errors import FetchError
from popcorn.models.movie import Candidate, MovieDetail, SearchResult

logger = logging.getLogger(__name__)


def _get(params: dict) -> dict:
    """GET the OMDb endpoint with the configured key; returns the JSON body."""
    r = requests.get(
        get_omdb_base_url(),
        params={"apikey": get_omdb_api_key(), **params},
        timeout=get_omdb_timeout(),
    )
    r.raise_for_status()
    return r.json()


def search_movies(query: str) -> SearchResult:
    """Search the catalog by title. Short queries return no results."""
    query = query.strip()
    if len(query) < get_search_min_chars():
        return SearchResult()

    try:
        data = _get({"s": query})
    except (requests.RequestException, ValueError) as e:
        logger.warning("Search for %r failed: %s", query, e)
        return SearchResult(error="Something went wrong with fetching movies")

    if data.get("Response") == "False":
        return SearchResult(error=data.get("Error", "Movie not found"))

    results = []
    for item in data.get("Search", []):
        try:
            results.append(Candidate.model_validate(item))
        except ValidationError as e:
            logger.debug("Skipping malformed search hit %r: %s", item, e)
    return SearchResult(results=results)


def get_movie_detail(movie_id: str) -> MovieDetail:
    """
    Get full catalog detail for one movie.

    Raises:
        FetchError: On network failure, bad payload, or unknown id
    """
    try:
        data = _get({"i": movie_id})
    except (requests.RequestException, ValueError) as e:
        raise FetchError(f"Failed to load movie {movie_id}: {e}", movie_id=movie_id) from e

    if data.get("Response") == "False":
        raise FetchError(data.get("Error", f"Movie {movie_id} not found"), movie_id=movie_id)

    try:
        return MovieDetail.model_validate(data)
    except ValidationError as e:
        raise FetchError(f"Unexpected detail for {movie_id}: {e}", movie_id=movie_id) from e


async def fetch_movie_detail(movie_id: str) -> MovieDetail:
    """Async get_movie_detail; the request runs in a worker thread."""
    return await asyncio.to_thread(get_movie_detail, movie_id)
