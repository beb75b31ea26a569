from __future__ import annotations

from PySide6.QtCore import Qt, QEasingCurve, QEvent, QPropertyAnimation, Slot # type: ignore
from PySide6.QtWidgets import ( # type: ignore
    QWidget, QHBoxLayout, QVBoxLayout, QLineEdit, QPushButton,
    QScrollArea, QGridLayout, QProgressBar, QLabel, QStackedWidget
)

from ..core.models import Movie
from ..core.state  import SearchState
from ..settings    import ACCENT_COLOR, ERROR_COLOR
from .controller   import SearchController
from .movie_card   import MovieCard


class SearchPage(QWidget):
    """Search box, spinner / error / results panes and the Prev–Next bar."""

    SPINNER, ERROR, RESULTS = range(3)
    CARD_W = 220

    def __init__(self, controller: SearchController, parent: QWidget | None = None):
        super().__init__(parent)
        self.controller = controller
        self._scroll_anim: QPropertyAnimation | None = None
        self._cards: list[MovieCard] = []
        self._build_ui()
        self._connect_signals()
        self.render(controller.state)

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(24, 24, 24, 24)
        root.setSpacing(16)

        # ── header ──────────────────────────────────────────────────────
        hero = QLabel(
            f'Find <span style="color:{ACCENT_COLOR}">Movies</span> '
            "You'll Enjoy Without the Hassle",
            alignment=Qt.AlignCenter,
        )
        hero.setTextFormat(Qt.RichText)
        hero.setWordWrap(True)
        hero.setStyleSheet("font-size:28px; font-weight:bold;")
        root.addWidget(hero)

        self.search_input = QLineEdit(placeholderText="Search through thousands of movies")
        self.search_input.setClearButtonEnabled(True)
        root.addWidget(self.search_input)

        heading = QLabel("All Movies")
        heading.setStyleSheet("font-size:20px; font-weight:bold;")
        root.addWidget(heading)

        # ── spinner | error | results ───────────────────────────────────
        self.stack = QStackedWidget()

        self.spinner = QProgressBar()
        self.spinner.setRange(0, 0)           # busy
        self.spinner.setTextVisible(False)
        spin_box = QWidget()
        spin_lay = QVBoxLayout(spin_box)
        spin_lay.addStretch()
        spin_lay.addWidget(self.spinner)
        spin_lay.addStretch()
        self.stack.addWidget(spin_box)

        self.error_label = QLabel(alignment=Qt.AlignCenter)
        self.error_label.setWordWrap(True)
        self.error_label.setStyleSheet(f"color:{ERROR_COLOR};")
        self.stack.addWidget(self.error_label)

        self.scroll_area = QScrollArea()
        self.scroll_area.setWidgetResizable(True)
        container = QWidget()
        self.grid_layout = QGridLayout(container)
        self.grid_layout.setAlignment(Qt.AlignTop | Qt.AlignLeft)
        self.scroll_area.setWidget(container)
        self.scroll_area.viewport().installEventFilter(self)
        self.stack.addWidget(self.scroll_area)
        root.addWidget(self.stack, 1)

        # ── pagination ──────────────────────────────────────────────────
        bar = QHBoxLayout()
        bar.addStretch()
        self.prev_btn   = QPushButton("Prev")
        self.page_label = QLabel(alignment=Qt.AlignCenter)
        self.next_btn   = QPushButton("Next")
        for btn in (self.prev_btn, self.next_btn):
            btn.setMinimumWidth(90)
            btn.setAutoDefault(False)
        bar.addWidget(self.prev_btn)
        bar.addWidget(self.page_label)
        bar.addWidget(self.next_btn)
        bar.addStretch()
        root.addLayout(bar)

    def _connect_signals(self) -> None:
        c = self.controller
        self.search_input.textChanged.connect(c.set_search_term)
        self.search_input.returnPressed.connect(c.submit_search)
        self.prev_btn.clicked.connect(c.previous_page)
        self.next_btn.clicked.connect(c.next_page)
        c.state_changed.connect(self.render)
        c.page_changed.connect(self.scroll_to_top)

    # ------------------------------------------------------------------
    @Slot(object)
    def render(self, state: SearchState) -> None:
        """Show exactly one of spinner / error text / card grid."""
        if state.is_loading:
            self.stack.setCurrentIndex(self.SPINNER)
        elif state.error_message:
            self.error_label.setText(state.error_message)
            self.stack.setCurrentIndex(self.ERROR)
        else:
            self.stack.setCurrentIndex(self.RESULTS)
            self.display_movies([Movie.from_api(r) for r in state.results])

        self.page_label.setText(f"Page {state.page} of {state.total_pages}")
        self.prev_btn.setEnabled(state.can_go_previous)
        self.next_btn.setEnabled(state.can_go_next)

    def display_movies(self, movies: list[Movie]) -> None:
        for card in self._cards:
            card.deleteLater()
        self._cards = [MovieCard(movie, self) for movie in movies]
        self._reflow()

    def _columns(self) -> int:
        margins = self.grid_layout.contentsMargins()
        spacing = max(self.grid_layout.horizontalSpacing(), 0)
        avail   = self.scroll_area.viewport().width() - margins.left() - margins.right()
        return max(1, (avail + spacing) // (self.CARD_W + spacing))

    def _reflow(self) -> None:
        while self.grid_layout.count():
            self.grid_layout.takeAt(0)
        cols = self._columns()
        for idx, card in enumerate(self._cards):
            r, c = divmod(idx, cols)
            self.grid_layout.addWidget(card, r, c)

    def eventFilter(self, obj, ev):
        # viewport only gets its real width once the results page is current
        if obj is self.scroll_area.viewport() and ev.type() == QEvent.Type.Resize:
            self._reflow()
        return super().eventFilter(obj, ev)

    @Slot(int)
    def scroll_to_top(self, _page: int = 0) -> None:
        bar = self.scroll_area.verticalScrollBar()
        if self._scroll_anim is not None:
            self._scroll_anim.stop()
        self._scroll_anim = QPropertyAnimation(bar, b"value", self)
        self._scroll_anim.setDuration(300)
        self._scroll_anim.setEasingCurve(QEasingCurve.OutCubic)
        self._scroll_anim.setEndValue(0)
        self._scroll_anim.start()
