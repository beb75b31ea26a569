"""
gui
~~~
All Qt widgets, pages and controllers.

•  No HTTP here – requests go through `movie_api.tmdb`, state through `core.state`.
•  Re-export the high-level symbols so the app can simply:

    from movieFinder.gui import MainWindow, SearchController
"""

from movieFinder.gui.controller  import SearchController
from movieFinder.gui.debounce    import DebounceGate
from movieFinder.gui.main_window import MainWindow
from movieFinder.gui.search_page import SearchPage
from movieFinder.gui.movie_card  import MovieCard

__all__ = [
    "SearchController", "DebounceGate",
    "MainWindow", "SearchPage", "MovieCard",
]
