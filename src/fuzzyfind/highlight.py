from __future__ import annotations
from typing import Iterable, List, Tuple

Segment = Tuple[str, bool]     # (text, is_match)


def highlight_segments(text: str, matches: Iterable[int]) -> List[Segment]:
    """
    Split ``text`` into runs for rendering: every matched character is its
    own ``(ch, True)`` run, unmatched stretches are merged into ``(chunk, False)``.
    Indices outside the text are ignored.
    """
    marked = {i for i in matches if 0 <= i < len(text)}
    out: List[Segment] = []
    plain = ""
    for i, ch in enumerate(text):
        if i in marked:
            if plain:
                out.append((plain, False))
                plain = ""
            out.append((ch, True))
        else:
            plain += ch
    if plain:
        out.append((plain, False))
    return out
