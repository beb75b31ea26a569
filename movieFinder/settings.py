from pathlib import Path
import os
from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent

# Load environment variables
load_dotenv(BASE_DIR / "secret.env")

TMDB_API_KEY = os.getenv("TMDB_API_KEY") or os.getenv("VITE_TMDB_API_KEY")

# TMDb endpoints
API_BASE_URL    = os.getenv("TMDB_API_BASE_URL", "https://api.themoviedb.org/3").rstrip("/")
POSTER_BASE_URL = "https://image.tmdb.org/t/p/w500"
MOVIE_PAGE_URL  = "https://www.themoviedb.org/movie"
REQUEST_TIMEOUT = 10        # seconds, connect + read

# File / folder paths
LOG_PATH = Path(os.getenv("MOVIE_FINDER_LOG", BASE_DIR / "movie_finder_debug.log"))

# Search behaviour
DEBOUNCE_MS     = 500
POPULAR_SORT    = "popularity.desc"
GENERIC_ERROR   = "Error fetching movies. Please try again later."
NO_MOVIES_FOUND = "No movies found."

# UI constants
ACCENT_COLOR = "#8b5cf6"
ERROR_COLOR  = "#ef4444"
