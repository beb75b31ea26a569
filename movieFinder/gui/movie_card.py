from __future__ import annotations
import html

from PySide6.QtCore    import Qt, QPropertyAnimation # type: ignore
from PySide6.QtWidgets import ( # type: ignore
    QFrame, QLabel, QVBoxLayout, QHBoxLayout, QGraphicsDropShadowEffect
)

from ..core.models import Movie
from ..settings    import ACCENT_COLOR
from ..utils       import open_url_host_browser


class MovieCard(QFrame):
    """Mini-card with title link, rating, language and year."""

    OVERVIEW_CHARS = 140

    def __init__(self, movie: Movie, parent=None):
        super().__init__(parent)
        self.movie = movie
        self.setObjectName("MovieCardItem")
        self.setFrameShape(QFrame.StyledPanel)
        self.setFixedWidth(220)

        root = QVBoxLayout(self)
        root.setContentsMargins(8, 8, 8, 8)

        # ── title link (or plain text) ───────────────────────────────────
        url    = movie.tmdb_url
        title  = html.escape(movie.title)
        anchor = f'<a href="{url}">{title}</a>' if url else title
        self.title_label = QLabel(anchor)
        self.title_label.setTextFormat(Qt.RichText)
        self.title_label.setTextInteractionFlags(Qt.TextBrowserInteraction)
        self.title_label.setWordWrap(True)
        self.title_label.setStyleSheet("font-weight:bold;")
        if url:
            self.title_label.setCursor(Qt.PointingHandCursor)
            self.title_label.setOpenExternalLinks(False)
            self.title_label.linkActivated.connect(open_url_host_browser)
        root.addWidget(self.title_label)

        # ── footer row: ★ rating • language • year ───────────────────────
        footer = QHBoxLayout()
        self.rating_label = QLabel(f"★ {movie.rating_text}")
        self.rating_label.setStyleSheet(f"color:{ACCENT_COLOR}; font-weight:bold;")
        self.meta_label = QLabel(f"{movie.language} • {movie.year}", alignment=Qt.AlignRight)
        self.meta_label.setStyleSheet("color:#a8b5db;")
        footer.addWidget(self.rating_label, 0, Qt.AlignLeft)
        footer.addWidget(self.meta_label,   0, Qt.AlignRight)
        root.addLayout(footer)

        if movie.overview:
            text = movie.overview
            if len(text) > self.OVERVIEW_CHARS:
                text = text[: self.OVERVIEW_CHARS].rstrip() + "…"
            blurb = QLabel(text)
            blurb.setWordWrap(True)
            blurb.setStyleSheet("color:#cecefb; font-size:11px;")
            root.addWidget(blurb)
        root.addStretch()

        # ── hover shadow effect ──────────────────────────────────────────
        self._shadow = QGraphicsDropShadowEffect(self)
        self._shadow.setBlurRadius(4)
        self._shadow.setOffset(0, 0)
        self.setGraphicsEffect(self._shadow)

    # ------------------------------------------------------------------
    # hover animation
    def enterEvent(self, event):
        super().enterEvent(event)
        anim = QPropertyAnimation(self._shadow, b"blurRadius", self)
        anim.setDuration(200)
        anim.setEndValue(16)
        anim.start(QPropertyAnimation.DeleteWhenStopped)

    def leaveEvent(self, event):
        super().leaveEvent(event)
        anim = QPropertyAnimation(self._shadow, b"blurRadius", self)
        anim.setDuration(200)
        anim.setEndValue(4)
        anim.start(QPropertyAnimation.DeleteWhenStopped)
