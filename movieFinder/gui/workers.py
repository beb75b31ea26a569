from PySide6.QtCore import QObject, Signal, Slot # type: ignore

from movieFinder.movie_api.tmdb import MovieRequest, TMDBClient, TMDBError
from movieFinder.utils import log_debug

# ───────────────────────── Worker skeletons ───────────────────────────────
class _FetchWorker(QObject):
    """Runs one TMDb request off the GUI thread; emits exactly one outcome."""
    loaded   = Signal(int, object)     # request_id, payload dict
    failed   = Signal(int, str)        # request_id, cause (for the log only)
    finished = Signal()

    def __init__(self, client: TMDBClient, request_id: int, request: MovieRequest):
        super().__init__()
        self.client     = client
        self.request_id = request_id
        self.request    = request

    @Slot()
    def run(self):
        try:
            payload = self.client.fetch(self.request)
        except TMDBError as e:
            self.failed.emit(self.request_id, str(e))
        except Exception as e:
            log_debug(f"fetch-worker error: {e!r}")
            self.failed.emit(self.request_id, repr(e))
        else:
            self.loaded.emit(self.request_id, payload)
        finally:
            self.finished.emit()
