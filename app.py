# app.py
# CustomTkinter GUI for the fuzzy finder (dark theme).
# - Load a word file or a folder of .txt word lists.
# - Background loading thread (keeps UI responsive).
# - Live search through SearchCoordinator: debounced, newest result wins,
#   matched letters highlighted.

from __future__ import annotations
import logging
import threading
from typing import Optional

import tkinter.filedialog as fd
import tkinter.messagebox as mb
import customtkinter as ctk

# Project imports (pip install -e . or PYTHONPATH=src)
from fuzzyfind.config import DEBOUNCE_MS
from fuzzyfind.engine import Engine
from fuzzyfind.highlight import highlight_segments
from fuzzyfind.models import SearchResults

log = logging.getLogger(__name__)


# -------------------- small helpers --------------------

def shorten_path(p: str, max_chars: int = 60) -> str:
    """Shorten long paths neatly for labels."""
    if len(p) <= max_chars:
        return p
    keep = max_chars // 2 - 3
    return p[:keep] + "..." + p[-keep:]


# -------------------- main app --------------------

class FuzzyFinderApp(ctk.CTk):
    """Dark-themed GUI that loads a word list and searches it as you type."""

    def __init__(self) -> None:
        super().__init__()

        # Theme
        ctk.set_appearance_mode("dark")
        ctk.set_default_color_theme("blue")

        # Window
        self.title("Fuzzy Finder")
        self.geometry("640x600")
        self.minsize(480, 420)

        # State
        self._engine = Engine()
        self._coordinator = None
        self._loading_thread: Optional[threading.Thread] = None
        self._current_source_label: str = "No word list selected"

        # Fonts
        self.font_title = ctk.CTkFont(size=18, weight="bold")
        self.font_label = ctk.CTkFont(size=13)
        self.font_mono = ctk.CTkFont(family="Cascadia Mono, Menlo, Consolas, Courier New", size=13)

        # Layout grid
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(3, weight=1)  # results
        self.grid_rowconfigure(4, weight=0)  # log

        # Build UI
        self._build_header()
        self._build_source_bar()
        self._build_search()
        self._build_results()
        self._build_log()

        self._set_status("Ready")
        self.protocol("WM_DELETE_WINDOW", self._on_close)

    # --------- UI sections ---------

    def _build_header(self) -> None:
        header = ctk.CTkFrame(self, corner_radius=10)
        header.grid(row=0, column=0, sticky="ew", padx=12, pady=(12, 6))
        header.grid_columnconfigure(0, weight=1)

        title = ctk.CTkLabel(header, text="Fuzzy Finder", font=self.font_title)
        title.grid(row=0, column=0, sticky="w", padx=12, pady=10)

    def _build_source_bar(self) -> None:
        bar = ctk.CTkFrame(self, corner_radius=10)
        bar.grid(row=1, column=0, sticky="ew", padx=12, pady=6)
        bar.grid_columnconfigure(2, weight=1)

        btn_file = ctk.CTkButton(bar, text="Choose File", command=self._choose_file)
        btn_file.grid(row=0, column=0, padx=(12, 6), pady=10)

        btn_folder = ctk.CTkButton(bar, text="Choose Folder", command=self._choose_folder)
        btn_folder.grid(row=0, column=1, padx=(0, 6), pady=10, sticky="w")

        self.lbl_source = ctk.CTkLabel(bar, text=self._current_source_label, anchor="w", font=self.font_label)
        self.lbl_source.grid(row=0, column=2, sticky="ew", padx=(6, 6), pady=10)

        self.progress = ctk.CTkProgressBar(bar, mode="indeterminate", determinate_speed=1.2, width=80)
        self.progress.grid(row=0, column=3, sticky="e", padx=(0, 6), pady=10)

        self.lbl_status = ctk.CTkLabel(bar, text="Status: —", anchor="e")
        self.lbl_status.grid(row=0, column=4, sticky="e", padx=12, pady=10)

    def _build_search(self) -> None:
        box = ctk.CTkFrame(self, corner_radius=10)
        box.grid(row=2, column=0, sticky="ew", padx=12, pady=(6, 6))
        box.grid_columnconfigure(0, weight=1)

        self.entry_query = ctk.CTkEntry(box, placeholder_text="Start typing…")
        self.entry_query.grid(row=0, column=0, sticky="ew", padx=12, pady=10)
        self.entry_query.bind("<KeyRelease>", self._on_query_changed)

    def _build_results(self) -> None:
        frame = ctk.CTkFrame(self, corner_radius=10)
        frame.grid(row=3, column=0, sticky="nsew", padx=12, pady=(6, 6))
        frame.grid_columnconfigure(0, weight=1)
        frame.grid_rowconfigure(0, weight=1)

        self.txt_results = ctk.CTkTextbox(frame, wrap="none", font=self.font_mono)
        self.txt_results.grid(row=0, column=0, sticky="nsew", padx=12, pady=12)
        self.txt_results.tag_config("match", foreground="#ff5d5d")
        self.txt_results.tag_config("score", foreground="#8a94a6")
        self.txt_results.configure(state="disabled")
        self._set_message("(load a word list and start typing)")

    def _build_log(self) -> None:
        self.txt_log = ctk.CTkTextbox(self, height=90, wrap="word", font=ctk.CTkFont(size=12))
        self.txt_log.grid(row=4, column=0, sticky="nsew", padx=12, pady=(6, 12))
        self._log("GUI ready. Choose a word file or folder to begin.")

    # --------- source selection ---------

    def _choose_file(self) -> None:
        path = fd.askopenfilename(
            title="Choose word list",
            filetypes=[("Text files", "*.txt"), ("All files", "*.*")]
        )
        if not path:
            return
        self._start_loading(tag="File", source=path)

    def _choose_folder(self) -> None:
        path = fd.askdirectory(title="Choose word list folder")
        if not path:
            return
        self._start_loading(tag="Folder", source=path)

    # --------- loading pipeline (threaded) ---------

    def _start_loading(self, tag: str, source: str) -> None:
        # prevent re-entrancy
        if self._loading_thread and self._loading_thread.is_alive():
            mb.showinfo("Loading", "A word list is already loading. Please wait.")
            return

        self._current_source_label = f"{tag}: {shorten_path(source)}"
        self.lbl_source.configure(text=self._current_source_label)
        self._set_status(f"Loading {tag.lower()}…")
        self.progress.start()

        if self._coordinator is not None:
            self._coordinator.shutdown()
            self._coordinator = None

        self._loading_thread = threading.Thread(
            target=self._load_worker, args=(source,), daemon=True
        )
        self._loading_thread.start()

    def _load_worker(self, source: str) -> None:
        try:
            n = self._engine.load([source])
        except Exception as exc:
            self.after(0, lambda e=exc: self._on_load_error(e))
            return

        self.after(0, lambda: self._on_load_ok(n))

    def _on_load_ok(self, n_words: int) -> None:
        self.progress.stop()
        self._coordinator = self._engine.coordinator(
            on_publish=self._show_results,
            dispatch=lambda fn: self.after(0, fn),
            debounce=DEBOUNCE_MS / 1000,
        )
        self._set_status(f"Loaded {n_words:,} words.")
        self._log(f"Word list ready ({n_words} words).")
        self.entry_query.focus_set()
        if self.entry_query.get():
            self._coordinator.update_pattern(self.entry_query.get())

    def _on_load_error(self, exc: Exception) -> None:
        self.progress.stop()
        self._set_status("Error while loading words.")
        self._log(f"ERROR: {exc!r}")
        mb.showerror("Load error", "Failed to load word list.\nSee event log for details.")

    # --------- search ---------

    def _on_query_changed(self, _ev=None) -> None:
        if self._coordinator is None:
            self._set_message("error: please load a word list before searching.")
            return
        pattern = self.entry_query.get()
        if pattern == self._coordinator.pattern:
            return  # cursor keys, modifiers
        self._coordinator.update_pattern(pattern)

    def _show_results(self, res: SearchResults) -> None:
        box = self.txt_results
        box.configure(state="normal")
        box.delete("0.0", "end")
        if not res.results:
            box.insert("end", "(no matches)" if res.pattern else "")
        for r in res.results:
            box.insert("end", f"{r.score:>5}  ", "score")
            for chunk, hit in highlight_segments(r.text, r.matches):
                box.insert("end", chunk, "match" if hit else None)
            box.insert("end", "\n")
        box.configure(state="disabled")
        self._set_status(f"#{res.generation}: {len(res.results)} matches for {res.pattern!r}")

    # --------- misc UI helpers ---------

    def _set_status(self, text: str) -> None:
        self.lbl_status.configure(text=f"Status: {text}")

    def _set_message(self, text: str) -> None:
        self.txt_results.configure(state="normal")
        self.txt_results.delete("0.0", "end")
        if text:
            self.txt_results.insert("end", text)
        self.txt_results.configure(state="disabled")

    def _log(self, msg: str) -> None:
        log.info(msg)
        self.txt_log.insert("end", msg + "\n")
        self.txt_log.see("end")

    # --------- lifecycle ---------

    def _on_close(self) -> None:
        self._engine.shutdown()
        self.destroy()


if __name__ == "__main__":
    app = FuzzyFinderApp()
    app.mainloop()
