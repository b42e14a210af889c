from __future__ import annotations
import logging
import os
from typing import Iterable, Iterator, List, Optional, Union

from .config import ENCODING, WORD_EXTS, WORD_LIMIT, PROGRESS_EVERY_WORDS

log = logging.getLogger(__name__)

def _verbose() -> bool:
    # progress output (set FUZZYFIND_VERBOSE=1 to enable)
    return os.environ.get("FUZZYFIND_VERBOSE") == "1"

PathLike = Union[str, "os.PathLike[str]"]


def _iter_word_files(paths: Iterable[PathLike]) -> Iterator[str]:
    """Yield word files: plain files as given, folders walked for *.txt in sorted order."""
    for p in paths:
        p = os.fspath(p)
        if os.path.isfile(p):
            yield p
            continue
        if not os.path.isdir(p):
            raise FileNotFoundError(p)
        for dirpath, dirnames, filenames in os.walk(p):
            dirnames.sort()
            for fn in sorted(filenames):
                if fn.lower().endswith(WORD_EXTS):
                    yield os.path.join(dirpath, fn)


def iter_words(paths: Iterable[PathLike]) -> Iterator[str]:
    """One word per non-blank line, trailing whitespace stripped, source order kept."""
    for path in _iter_word_files(paths):
        with open(path, "r", encoding=ENCODING, errors="ignore") as f:
            for ln in f:
                word = ln.rstrip()
                if word:
                    yield word


def load_words(paths: Iterable[PathLike], *, limit: Optional[int] = WORD_LIMIT) -> tuple[str, ...]:
    """
    Read the candidate list once, in a stable order.

    limit caps how many words are kept (None = all). A shorter list than
    the limit is fine, including an empty one.
    """
    paths = list(paths)
    if not paths:
        raise ValueError("load_words(): at least one word file or folder is required")
    if limit is not None and limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")
    for p in paths:
        if not os.path.exists(p):
            raise FileNotFoundError(p)

    verbose = _verbose()
    words: List[str] = []
    if limit != 0:
        for word in iter_words(paths):
            words.append(word)
            if verbose and len(words) % PROGRESS_EVERY_WORDS == 0:
                print(f"[loaded] words={len(words):,}")
            if limit is not None and len(words) >= limit:
                break

    if verbose:
        print(f"[done] words={len(words):,}")
    log.info("Loaded %d candidate words from %s", len(words), paths)
    return tuple(words)
