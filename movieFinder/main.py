import sys
from PySide6.QtWidgets import QApplication, QMessageBox # type: ignore

from movieFinder.utils           import apply_dark_palette, log_debug
from movieFinder.movie_api.tmdb  import MissingAPIKeyError, TMDBClient
from movieFinder.gui.controller  import SearchController
from movieFinder.gui.main_window import MainWindow


# ────────────────────────────────────────────────────────────────────────────
# Application entry
# ────────────────────────────────────────────────────────────────────────────
def main() -> None:
    app = QApplication(sys.argv)
    apply_dark_palette(app)

    try:
        client = TMDBClient()
    except MissingAPIKeyError as e:
        log_debug(f"startup aborted: {e}")
        QMessageBox.critical(None, "Movie Finder", str(e))
        sys.exit(1)

    controller = SearchController(client)
    window = MainWindow(controller)
    window.show()

    # popular movies straight away, no debounce
    controller.start()

    # -------- run the event-loop -------------------------------------
    sys.exit(app.exec())

# Python entry-point guard
if __name__ == "__main__":
    main()
