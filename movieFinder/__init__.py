"""
movieFinder
~~~~~~~~~~~

Top-level package for the Movie Finder application.

Exports:
  - TMDB_API_KEY, API_BASE_URL, DEBOUNCE_MS
  - TMDb access: TMDBClient, build_request
  - View-state: SearchState, Phase
  - Utility functions: log_debug, apply_dark_palette
"""

# settings
from movieFinder.settings import TMDB_API_KEY, API_BASE_URL, DEBOUNCE_MS

# utils
from movieFinder.utils import log_debug, apply_dark_palette

# TMDb access
from movieFinder.movie_api import TMDBClient, build_request

# view-state
from movieFinder.core import SearchState, Phase

__all__ = [
    # settings
    "TMDB_API_KEY",
    "API_BASE_URL",
    "DEBOUNCE_MS",
    # utils
    "log_debug",
    "apply_dark_palette",
    # TMDb
    "TMDBClient",
    "build_request",
    # state
    "SearchState",
    "Phase",
]
