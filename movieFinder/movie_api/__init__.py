"""
movie_api
~~~~~~~~~
Thin wrapper around the TMDb REST API – request building and transport only.
"""

from movieFinder.movie_api.tmdb import (
    MovieRequest,
    TMDBClient,
    TMDBError,
    TransportError,
    MissingAPIKeyError,
    build_request,
)

__all__ = [
    "MovieRequest", "TMDBClient", "TMDBError", "TransportError",
    "MissingAPIKeyError", "build_request",
]
