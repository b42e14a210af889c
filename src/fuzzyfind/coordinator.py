# src/fuzzyfind/coordinator.py
from __future__ import annotations

import logging
import threading
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from enum import Enum
from typing import Callable, Iterable, Optional

from .config import TOP_K, WORKERS
from .models import DEFAULT_MATCH_CONFIG, MatchConfig, RankedResultSet, SearchRequest, SearchResults
from .ranker import rank

log = logging.getLogger(__name__)

Ranker = Callable[..., RankedResultSet]
Dispatch = Callable[[Callable[[], None]], None]


class CoordinatorState(str, Enum):
    IDLE = "idle"
    CANCELLING = "cancelling"    # superseding the previous request
    DEBOUNCING = "debouncing"    # waiting for the keystroke burst to settle
    RUNNING = "running"
    DELIVERED = "delivered"


def _call_inline(fn: Callable[[], None]) -> None:
    fn()


class SearchCoordinator:
    """
    Turns a stream of pattern updates into ranked result sets, newest only.

    Every update_pattern() call issues a SearchRequest with the next
    generation number, cancels whatever was still pending and (after an
    optional debounce) hands the ranking to a worker executor. Completed work
    goes back through ``dispatch`` and is published only if its generation is
    still the highest one issued. Cancellation is best-effort: a ranking that
    already started may run to the end, its output is dropped on delivery.

    ``dispatch`` decides where delivery runs. The default calls straight
    through on the worker thread; a GUI passes something like
    ``lambda fn: widget.after(0, fn)`` to land on its event loop.
    ``on_publish`` receives each published SearchResults, in generation order.
    """

    # ------------- lifecycle -------------

    def __init__(
        self,
        candidates: Iterable[str],
        *,
        config: MatchConfig = DEFAULT_MATCH_CONFIG,
        top_k: int = TOP_K,
        debounce: float = 0.0,                 # seconds
        workers: int = WORKERS,
        executor: Optional[Executor] = None,   # caller-owned; not shut down here
        ranker: Ranker = rank,
        dispatch: Optional[Dispatch] = None,
        on_publish: Optional[Callable[[SearchResults], None]] = None,
    ) -> None:
        if top_k < 1:
            raise ValueError(f"top_k must be >= 1, got {top_k}")
        if debounce < 0:
            raise ValueError(f"debounce must be >= 0, got {debounce}")

        self._candidates = tuple(candidates)
        self._config = config
        self._top_k = top_k
        self._debounce = float(debounce)
        self._ranker = ranker
        self._dispatch = dispatch or _call_inline
        self._on_publish = on_publish

        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(max_workers=workers,
                                                        thread_name_prefix="fuzzyfind")

        # guards everything below; delivery checks happen under it
        self._lock = threading.RLock()
        self._settled_cv = threading.Condition(self._lock)
        self._generation = 0
        self._settled = 0                 # newest generation delivered or failed
        self._pattern = ""
        self._latest: Optional[SearchResults] = None
        self._future: Optional[Future] = None
        self._timer: Optional[threading.Timer] = None
        self._state = CoordinatorState.IDLE
        self._closed = False

    def __enter__(self) -> "SearchCoordinator":
        return self

    def __exit__(self, *exc) -> None:
        self.shutdown()

    # /* ~~~ Close timers and pending work; the executor only if we own it ~~~ */
    def shutdown(self, wait: bool = False) -> None:
        with self._lock:
            if self._closed:
                return
            self._closed = True
            self._cancel_pending()
            self._state = CoordinatorState.IDLE
            self._settled_cv.notify_all()
        if self._owns_executor:
            self._executor.shutdown(wait=wait, cancel_futures=True)
        log.debug("coordinator shut down at generation #%d", self._generation)

    # ------------- queries -------------

    @property
    def pattern(self) -> str:
        return self._pattern

    @property
    def generation(self) -> int:
        """Highest generation issued so far (0 before the first update)."""
        return self._generation

    @property
    def state(self) -> CoordinatorState:
        return self._state

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def latest(self) -> Optional[SearchResults]:
        with self._lock:
            return self._latest

    def wait(self, timeout: Optional[float] = None) -> bool:
        """
        Block until the newest request has been delivered (or has failed).
        Returns False on timeout. Meant for tests and non-interactive callers;
        calling it from the thread ``dispatch`` delivers on would deadlock.
        """
        with self._settled_cv:
            return self._settled_cv.wait_for(
                lambda: self._closed or self._settled >= self._generation, timeout
            )

    # ------------- updates -------------

    def update_pattern(self, pattern: str) -> SearchRequest:
        """Issue a new request for ``pattern``, superseding any earlier one."""
        with self._lock:
            if self._closed:
                raise RuntimeError("SearchCoordinator is shut down")

            self._state = CoordinatorState.CANCELLING
            self._cancel_pending()

            self._generation += 1
            self._pattern = pattern
            request = SearchRequest(pattern=pattern, generation=self._generation)
            log.debug("issued search #%d for %r", request.generation, pattern)

            if self._debounce > 0:
                self._state = CoordinatorState.DEBOUNCING
                timer = threading.Timer(self._debounce, self._submit, args=(request,))
                timer.daemon = True
                self._timer = timer
                timer.start()
                return request

        self._submit(request)
        return request

    # ------------- internals -------------

    def _cancel_pending(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        if self._future is not None and not self._future.done():
            if self._future.cancel():
                log.debug("cancelled queued search before it ran")
            else:
                log.debug("search already running; its result will be dropped")
        self._future = None

    def _is_stale(self, request: SearchRequest) -> bool:
        return self._closed or request.generation != self._generation

    def _submit(self, request: SearchRequest) -> None:
        with self._lock:
            if self._is_stale(request):
                return
            self._timer = None
            self._state = CoordinatorState.RUNNING
            future = self._executor.submit(self._run, request)
            self._future = future
        future.add_done_callback(lambda f: self._on_done(request, f))

    def _run(self, request: SearchRequest) -> RankedResultSet:
        return self._ranker(
            request.pattern,
            self._candidates,
            config=self._config,
            limit=self._top_k,
            cancelled=lambda: self._is_stale(request),
        )

    def _on_done(self, request: SearchRequest, future: Future) -> None:
        if future.cancelled():
            return
        exc = future.exception()
        if exc is not None:
            log.error("search #%d for %r failed", request.generation, request.pattern,
                      exc_info=exc)
            with self._lock:
                if request.generation == self._generation:
                    self._settle(request.generation)
            return
        if self._closed:
            return
        results = future.result()
        self._dispatch(lambda: self._deliver(request, results))

    def _deliver(self, request: SearchRequest, results: RankedResultSet) -> None:
        with self._lock:
            if self._is_stale(request):
                log.debug("dropped stale search #%d (latest is #%d)",
                          request.generation, self._generation)
                return
            self._latest = SearchResults(request=request, results=results)
            self._state = CoordinatorState.DELIVERED
            log.debug("published search #%d: %d results", request.generation, len(results))
            try:
                if self._on_publish is not None:
                    self._on_publish(self._latest)
            finally:
                self._settle(request.generation)

    def _settle(self, generation: int) -> None:
        self._settled = generation
        self._state = CoordinatorState.IDLE
        self._settled_cv.notify_all()
