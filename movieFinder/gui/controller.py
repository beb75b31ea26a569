from __future__ import annotations
from typing import Callable, Dict, Optional, Tuple

from PySide6.QtCore import QObject, QThread, Signal, Slot # type: ignore

from movieFinder.core.state       import SearchState, begin, fail, reconcile
from movieFinder.gui.debounce     import DebounceGate
from movieFinder.gui.workers      import _FetchWorker
from movieFinder.movie_api.tmdb   import MovieRequest, TMDBClient, build_request
from movieFinder.utils            import log_debug

# runner(request_id, request, on_loaded, on_failed) – performs the call somewhere
# and reports back through exactly one of the two callbacks.
Runner = Callable[[int, MovieRequest, Callable[[int, object], None], Callable[[int, str], None]], None]


class SearchController(QObject):
    """
    Owns the search view-state and decides when to talk to TMDb.

    Inputs  : raw search text (debounced), Prev / Next clicks.
    Outputs : ``state_changed(SearchState)`` after every transition and
              ``page_changed(int)`` whenever the page number moves.

    Only the newest request may update the state: each dispatch gets a
    higher ``request_id`` and late answers from older ones are dropped.
    """
    state_changed = Signal(object)
    page_changed  = Signal(int)

    def __init__(
        self,
        client: TMDBClient | None = None,
        runner: Optional[Runner] = None,
        gate: DebounceGate | None = None,
        parent: QObject | None = None,
    ):
        super().__init__(parent)
        self._client = client
        self._runner = runner or self._start_worker
        self._state  = SearchState()
        self._threads: Dict[int, Tuple[QThread, _FetchWorker]] = {}

        self.gate = gate or DebounceGate(parent=self)
        self.gate.settled.connect(self._on_query_settled)

    # ------------------------------------------------------------------ state
    @property
    def state(self) -> SearchState:
        return self._state

    def _set_state(self, new: SearchState) -> None:
        old, self._state = self._state, new
        self.state_changed.emit(new)
        if old.page != new.page:
            self.page_changed.emit(new.page)

    # ----------------------------------------------------------------- inputs
    def start(self) -> None:
        """Initial popular-movies fetch, no debounce delay."""
        self._dispatch(self._state.query, self._state.page)

    @Slot(str)
    def set_search_term(self, text: str) -> None:
        self.gate.push(text)

    @Slot()
    def submit_search(self) -> None:
        self.gate.flush()

    @Slot()
    def next_page(self) -> None:
        st = self._state
        target = min(st.page + 1, st.total_pages)
        if target != st.page:
            self._dispatch(st.query, target)

    @Slot()
    def previous_page(self) -> None:
        st = self._state
        target = max(st.page - 1, 1)
        if target != st.page:
            self._dispatch(st.query, target)

    @Slot(str)
    def _on_query_settled(self, query: str) -> None:
        # new debounced term always starts again from page 1
        if (query, 1) == (self._state.query, self._state.page):
            return
        self._dispatch(query, 1)

    # ----------------------------------------------------------------- effect
    def _dispatch(self, query: str, page: int) -> None:
        request = build_request(query, page)
        self._set_state(begin(self._state, query, page))
        request_id = self._state.request_id
        log_debug(f"request #{request_id} → {request.url}")
        self._runner(request_id, request, self._on_loaded, self._on_failed)

    def _is_current(self, request_id: int) -> bool:
        if request_id != self._state.request_id:
            log_debug(f"request #{request_id} superseded by #{self._state.request_id} – dropped")
            return False
        return True

    @Slot(int, object)
    def _on_loaded(self, request_id: int, payload: object) -> None:
        if not self._is_current(request_id):
            return
        new = reconcile(self._state, payload)
        if new.error_message:
            log_debug(f"request #{request_id}: no results ({new.error_message})")
        self._set_state(new)

    @Slot(int, str)
    def _on_failed(self, request_id: int, cause: str) -> None:
        log_debug(f"Error fetching movies (request #{request_id}): {cause}")
        if not self._is_current(request_id):
            return
        self._set_state(fail(self._state))

    # ───────────────────────── worker plumbing ────────────────────────────
    def _start_worker(self, request_id, request, on_loaded, on_failed) -> None:
        if self._client is None:
            self._client = TMDBClient()
        worker = _FetchWorker(self._client, request_id, request)
        thr = QThread(self)
        worker.moveToThread(thr)

        worker.loaded.connect(on_loaded)
        worker.failed.connect(on_failed)
        worker.finished.connect(thr.quit)
        worker.finished.connect(worker.deleteLater)
        thr.finished.connect(self._reap_threads)

        thr.started.connect(worker.run)
        self._threads[request_id] = (thr, worker)     # keep alive until done
        thr.start()

    @Slot()
    def _reap_threads(self) -> None:
        for rid, (thr, _) in list(self._threads.items()):
            if thr.isFinished():
                del self._threads[rid]
                thr.deleteLater()

    def shutdown(self) -> None:
        """
        Block until every in-flight request has returned; the transport timeout
        bounds the wait. A QThread parented to this controller must not outlive it.
        """
        for rid, (thr, _) in list(self._threads.items()):
            thr.quit()
            thr.wait()
            del self._threads[rid]
