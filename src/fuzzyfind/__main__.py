from __future__ import annotations
import argparse, json, os, sys
from .config import TOP_K, WORD_LIMIT
from .engine import Engine
from .highlight import highlight_segments
from .models import RankedResult

def _supports_color() -> bool:
    return sys.stdout.isatty() and os.environ.get("NO_COLOR", "") == ""

CSI = "\033["
def _c(text: str, code: str) -> str:
    if not _supports_color(): return text
    return f"{CSI}{code}m{text}{CSI}0m"

def _clear_screen():
    # ANSI clear; fallback to newlines if not a TTY
    if sys.stdout.isatty():
        print("\033[2J\033[H", end="", flush=True)
    else:
        print("\n" * 100)

def _render(r: RankedResult) -> str:
    """Word with matched letters in bold red (or [x] brackets without a TTY)."""
    color = _supports_color()
    parts = []
    for chunk, hit in highlight_segments(r.text, r.matches):
        if not hit:
            parts.append(chunk)
        elif color:
            parts.append(_c(chunk, "1;31"))
        else:
            parts.append(f"[{chunk}]")
    return "".join(parts)

def _print_table(rows: list[RankedResult]):
    if not rows:
        print(_c("(no matches)", "2;37")); return
    print(_c("#   Score  Word", "1;37"))
    for i, r in enumerate(rows, start=1):
        print(f"{i:<3} {r.score:<6} {_render(r)}")

def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Fuzzy word finder (one-shot or REPL)")
    parser.add_argument("--words", nargs="+", required=True, help="Word files or folders of .txt files")
    parser.add_argument("--limit", type=int, default=WORD_LIMIT, help="Max words to load (0 = all)")
    parser.add_argument("-k", type=int, default=TOP_K, help="Top-K results")
    parser.add_argument("--q", default=None, help="Single pattern to run once")
    parser.add_argument("--repl", action="store_true", help="Interactive loop after loading")
    parser.add_argument("--json", action="store_true", help="Emit JSON rows")
    parser.add_argument("--echo", action="store_true", help="Echo the pattern as [pattern] '...'")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args(argv)

    if args.k < 1:
        parser.error("-k must be >= 1")

    eng = Engine()
    try:
        try:
            eng.load(args.words, limit=args.limit or None, verbose=args.verbose)
        except (FileNotFoundError, ValueError) as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 2

        def run_query(q: str):
            rows = eng.complete(q, top_k=args.k)
            if args.json:
                print(json.dumps([r.to_dict() for r in rows], ensure_ascii=False, indent=2))
            else:
                _print_table(rows)

        if args.q is not None:
            run_query(args.q)

        if args.repl:
            echo = args.echo
            print("Type to extend the pattern and press Enter (empty to quit).  Type '#' to reset.")
            print(_c("Commands: :echo on|off, :clear, :reset", "2;37"))
            buffer = ""
            while True:
                try:
                    raw = input("> ")
                except (EOFError, KeyboardInterrupt):
                    print(); break
                cmd = raw.strip().lower()
                if raw == "":
                    print("Goodbye!"); break
                if cmd in ("#", ":reset"):
                    buffer = ""; print(_c("(reset)", "2;36")); continue
                if cmd in (":clear", ":cls"):
                    _clear_screen(); continue
                if cmd == ":echo on":
                    echo = True; print(_c("(echo on)", "2;36")); continue
                if cmd == ":echo off":
                    echo = False; print(_c("(echo off)", "2;36")); continue

                buffer += raw
                if echo:
                    print(f"[pattern] {buffer!r}")
                run_query(buffer)
        return 0
    finally:
        eng.shutdown()

if __name__ == "__main__":
    sys.exit(main())
