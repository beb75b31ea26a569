# gui/main_window.py
from __future__ import annotations

from PySide6.QtCore    import Slot # type: ignore
from PySide6.QtGui     import QAction # type: ignore
from PySide6.QtWidgets import QMainWindow # type: ignore

from movieFinder.gui.controller  import SearchController
from movieFinder.gui.search_page import SearchPage


class MainWindow(QMainWindow):
    def __init__(self, controller: SearchController):
        super().__init__()
        self.setWindowTitle("Movie Finder")
        self.resize(1100, 760)

        self.controller  = controller
        self.search_page = SearchPage(controller, self)
        self.setCentralWidget(self.search_page)

        # ── shortcuts ───────────────────────────────────────────────────
        act = QAction("Search", self)
        act.setShortcut("Ctrl+F")
        act.triggered.connect(self._focus_search)
        self.addAction(act)

    @Slot()
    def _focus_search(self):
        self.search_page.search_input.setFocus()
        self.search_page.search_input.selectAll()

    def closeEvent(self, event):
        self.controller.shutdown()
        super().closeEvent(event)
