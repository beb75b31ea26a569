from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple
from urllib.parse import quote, urlencode

import requests

from movieFinder import settings
from movieFinder.utils import log_debug


class TMDBError(RuntimeError):
    """Base class for everything the TMDb wrapper raises."""


class TransportError(TMDBError):
    """Non-2xx status, network failure or an unreadable body."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class MissingAPIKeyError(EnvironmentError):
    pass


@dataclass(frozen=True, slots=True)
class MovieRequest:
    """One outbound GET: either a title search or the popular-movies listing."""
    path: str
    params: Tuple[Tuple[str, Any], ...]
    base_url: str = settings.API_BASE_URL

    @property
    def url(self) -> str:
        # same escaping as encodeURIComponent: %20 for spaces, !'()* kept
        query = urlencode(self.params, safe="!'()*", quote_via=quote)
        return f"{self.base_url}{self.path}?{query}"


def build_request(query: str, page: int, base_url: str | None = None) -> MovieRequest:
    """
    Translate a debounced *query* and *page* into the request to send.

    Non-empty query  → ``/search/movie?query=…&page=n``
    Empty query      → ``/discover/movie?sort_by=popularity.desc&page=n``
    """
    if page < 1:
        raise ValueError(f"page must be >= 1, got {page}")
    base = (base_url or settings.API_BASE_URL).rstrip("/")
    if query:
        return MovieRequest("/search/movie", (("query", query), ("page", page)), base)
    return MovieRequest(
        "/discover/movie", (("sort_by", settings.POPULAR_SORT), ("page", page)), base
    )


class TMDBClient:
    """Thin wrapper around The Movie Database (TMDb) v3 read API."""

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    def __init__(
        self,
        api_key: str | None = None,
        session: Optional[requests.Session] = None,
        timeout: float = settings.REQUEST_TIMEOUT,
    ):
        self.api_key = api_key or settings.TMDB_API_KEY
        if not self.api_key:
            log_debug("TMDb client created without an API key")
            raise MissingAPIKeyError("Missing TMDB_API_KEY in secret.env / environment")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            "accept": "application/json",
            "Authorization": f"Bearer {self.api_key}",
        })

    # ------------------------------------------------------------------
    # Public
    # ------------------------------------------------------------------
    def fetch(self, request: MovieRequest) -> Dict[str, Any]:
        """
        Perform *request* and return the decoded JSON object.

        Raises
        ------
        TransportError
            On connection problems, timeouts, a non-2xx status or a body
            that is not a JSON object. No retries.
        """
        try:
            resp = self.session.get(request.url, timeout=self.timeout)
        except requests.RequestException as e:
            raise TransportError(f"network error: {e}") from e

        if not resp.ok:
            raise TransportError(
                f"HTTP {resp.status_code} for {request.path}", status_code=resp.status_code
            )

        try:
            payload = resp.json()
        except ValueError as e:
            raise TransportError(f"invalid JSON body: {e}", status_code=resp.status_code) from e

        if not isinstance(payload, dict):
            raise TransportError(
                f"expected a JSON object, got {type(payload).__name__}",
                status_code=resp.status_code,
            )
        return payload
