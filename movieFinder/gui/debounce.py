"""
debounce
~~~~~~~~
Collapse bursts of keystrokes into one ``settled(text)`` emission after the
user stops typing for ``DEBOUNCE_MS``.
"""
from __future__ import annotations

from PySide6.QtCore import QObject, QTimer, Signal, Slot # type: ignore

from movieFinder.settings import DEBOUNCE_MS


class DebounceGate(QObject):
    settled = Signal(str)

    def __init__(self, interval_ms: int = DEBOUNCE_MS, timer: QTimer | None = None,
                 parent: QObject | None = None):
        super().__init__(parent)
        self.interval_ms = interval_ms
        self._pending: str | None = None

        self._timer = timer or QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self._emit_pending)

    @Slot(str)
    def push(self, text: str) -> None:
        """Record *text* and restart the quiet period from zero."""
        self._pending = text
        self._timer.start(self.interval_ms)

    @Slot()
    def flush(self) -> None:
        """Emit right away instead of waiting for the timer (Return key)."""
        self._timer.stop()
        self._emit_pending()

    @Slot()
    def _emit_pending(self) -> None:
        if self._pending is None:
            return
        text, self._pending = self._pending, None
        self.settled.emit(text)
