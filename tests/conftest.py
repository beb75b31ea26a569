import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtCore import QObject, Signal

from movieFinder import settings


@pytest.fixture(autouse=True)
def _debug_log(tmp_path, monkeypatch):
    """Keep log_debug output out of the package directory."""
    log_path = tmp_path / "debug.log"
    monkeypatch.setattr(settings, "LOG_PATH", log_path)
    return log_path


@pytest.fixture
def make_movie():
    def _make(mid: int, title: str = "Batman", **extra) -> dict:
        raw = {"id": mid, "title": title, "vote_average": 7.4,
               "release_date": "1989-06-23", "original_language": "en"}
        raw.update(extra)
        return raw
    return _make


class FakeTimer(QObject):
    """Stands in for QTimer; the test calls ``fire()`` instead of waiting."""
    timeout = Signal()

    def __init__(self):
        super().__init__()
        self.started_with: list[int | None] = []
        self.stopped = 0

    def setSingleShot(self, _flag: bool) -> None:
        pass

    def setInterval(self, _ms: int) -> None:
        pass

    def start(self, interval: int | None = None) -> None:
        self.started_with.append(interval)

    def stop(self) -> None:
        self.stopped += 1

    def fire(self) -> None:
        self.timeout.emit()


@pytest.fixture
def fake_timer():
    return FakeTimer()
