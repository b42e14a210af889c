TOP_K: int = 30

# /* ~~~ keystroke debounce before a search is dispatched (ms) ~~~ */
DEBOUNCE_MS: int = 160

# Worker threads for ranking. One is enough since requests are independent.
WORKERS: int = 1

# Word list loading
ENCODING: str = "utf-8"
WORD_EXTS = (".txt",)
WORD_LIMIT: int | None = 10_001     # first 10,001 lines of the bundled list

# Progress logging (set FUZZYFIND_VERBOSE=1 to enable)
PROGRESS_EVERY_WORDS: int = 10_000
