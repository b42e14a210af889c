# fuzzyfind/engine.py
from __future__ import annotations

import os
import logging
from typing import Callable, Iterable, Optional

from . import config as CFG
from .coordinator import SearchCoordinator
from .loader import load_words
from .models import DEFAULT_MATCH_CONFIG, MatchConfig, RankedResultSet, SearchResults
from .ranker import rank

log = logging.getLogger(__name__)


class Engine:
    """
    Thin orchestration layer that glues together:
      - the candidate word list (loader.load_words),
      - synchronous ranking (ranker.rank) for one-shot callers,
      - SearchCoordinator instances for interactive, per-keystroke callers.

    Public API (used by CLI/Flask/desktop app):
      * load(paths, ...):          read the word list once
      * complete(pattern, top_k):  ranked results for one pattern
      * coordinator(...):          a SearchCoordinator over the loaded words
      * shutdown():                close coordinators handed out by this engine
    """

    # ------------- lifecycle -------------

    def __init__(self, config: MatchConfig = DEFAULT_MATCH_CONFIG) -> None:
        self.config = config
        self.words: Optional[tuple[str, ...]] = None
        self._coordinators: list[SearchCoordinator] = []

    # /* ~~~ Read the candidate list from word files or folders ~~~ */
    def load(
        self,
        paths: Iterable[str],
        *,
        limit: Optional[int] = CFG.WORD_LIMIT,
        verbose: bool = False,
    ) -> int:
        if verbose:
            logging.basicConfig(level=logging.INFO)
            os.environ["FUZZYFIND_VERBOSE"] = "1"

        self.words = load_words(paths, limit=limit)
        log.info("Engine load() complete: words=%d", len(self.words))
        return len(self.words)

    def use_words(self, words: Iterable[str]) -> int:
        """Use an in-memory list instead of reading files."""
        self.words = tuple(words)
        return len(self.words)

    @property
    def loaded(self) -> bool:
        return self.words is not None

    # ------------- query -------------

    # /* ~~~ Rank the word list for one pattern, on the calling thread ~~~ */
    def complete(self, pattern: str, *, top_k: int = CFG.TOP_K) -> RankedResultSet:
        if self.words is None:
            raise RuntimeError("Engine not initialized. Call load() first.")
        if top_k < 1:
            raise ValueError(f"top_k must be >= 1, got {top_k}")
        return rank(pattern, self.words, config=self.config, limit=top_k)

    # /* ~~~ Background, newest-wins search for interactive callers ~~~ */
    def coordinator(
        self,
        *,
        on_publish: Optional[Callable[[SearchResults], None]] = None,
        dispatch: Optional[Callable[[Callable[[], None]], None]] = None,
        debounce: float = CFG.DEBOUNCE_MS / 1000,
        top_k: int = CFG.TOP_K,
        workers: int = CFG.WORKERS,
    ) -> SearchCoordinator:
        if self.words is None:
            raise RuntimeError("Engine not initialized. Call load() first.")
        coord = SearchCoordinator(
            self.words,
            config=self.config,
            top_k=top_k,
            debounce=debounce,
            workers=workers,
            dispatch=dispatch,
            on_publish=on_publish,
        )
        # drop coordinators already shut down (e.g. by a reload)
        self._coordinators = [c for c in self._coordinators if not c.closed]
        self._coordinators.append(coord)
        return coord

    # ------------- teardown -------------

    def shutdown(self) -> None:
        try:
            for coord in self._coordinators:
                coord.shutdown()
        finally:
            self._coordinators.clear()
            self.words = None
            log.info("Engine shutdown complete")
