from movieFinder.core.models import Movie
from movieFinder.core.state  import Phase, SearchState, begin, reconcile, fail

__all__ = ["Movie", "Phase", "SearchState", "begin", "reconcile", "fail"]
