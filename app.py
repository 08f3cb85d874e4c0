# app.py
# CustomTkinter GUI for the anagram solver (dark theme).
# - Pick a word-list file; it is loaded on a background thread.
# - Enter letters, then run one of: all words, longest word, exact length.
# - Results, timing and an event log pane.

from __future__ import annotations
import threading
from typing import Optional

import tkinter.filedialog as fd
import tkinter.messagebox as mb
import customtkinter as ctk

from anagram import config as CFG
from anagram.engine import Engine, DictionaryNotLoaded
from anagram.models import MatchResult


# -------------------- small helpers --------------------

def shorten_path(p: str, max_chars: int = 60) -> str:
    """Shorten long paths neatly for labels."""
    if len(p) <= max_chars:
        return p
    keep = max_chars // 2 - 3
    return p[:keep] + "..." + p[-keep:]


def format_result(r: MatchResult) -> str:
    if not r.found:
        return "(no words found)"
    if r.mode == "longest":
        return f"Longest word: {r.words[0]}"
    return "\n".join(r.words)


# -------------------- main app --------------------

class AnagramApp(ctk.CTk):
    """Dark-themed GUI that loads a dictionary file and queries the engine."""

    def __init__(self) -> None:
        super().__init__()

        # Theme
        ctk.set_appearance_mode("dark")
        ctk.set_default_color_theme("blue")

        # Window
        self.title("Anagram Solver")
        self.geometry("820x640")
        self.minsize(720, 540)

        # State
        self.engine = Engine()
        self._loading_thread: Optional[threading.Thread] = None

        # Fonts
        self.font_title = ctk.CTkFont(size=18, weight="bold")
        self.font_label = ctk.CTkFont(size=13)
        self.font_mono = ctk.CTkFont(family="Cascadia Mono, Menlo, Consolas, Courier New", size=13)

        # Layout grid
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(3, weight=1)  # results
        self.grid_rowconfigure(4, weight=1)  # log

        # Build UI
        self._build_header()
        self._build_source_bar()
        self._build_search()
        self._build_results()
        self._build_log()

        self._set_status("Ready")
        self.protocol("WM_DELETE_WINDOW", self.destroy)

    # --------- UI sections ---------

    def _build_header(self) -> None:
        header = ctk.CTkFrame(self, corner_radius=10)
        header.grid(row=0, column=0, sticky="ew", padx=12, pady=(12, 6))
        header.grid_columnconfigure(0, weight=1)

        title = ctk.CTkLabel(header, text="Anagram Solver", font=self.font_title)
        title.grid(row=0, column=0, sticky="w", padx=12, pady=10)

    def _build_source_bar(self) -> None:
        bar = ctk.CTkFrame(self, corner_radius=10)
        bar.grid(row=1, column=0, sticky="ew", padx=12, pady=6)
        bar.grid_columnconfigure(1, weight=1)

        btn_file = ctk.CTkButton(bar, text="Choose Dictionary", command=self._choose_file)
        btn_file.grid(row=0, column=0, padx=(12, 6), pady=10)

        self.lbl_source = ctk.CTkLabel(bar, text="No dictionary loaded", anchor="w", font=self.font_label)
        self.lbl_source.grid(row=0, column=1, sticky="ew", padx=(6, 6), pady=10)

        self.progress = ctk.CTkProgressBar(bar, mode="indeterminate", determinate_speed=1.2)
        self.progress.grid(row=0, column=2, sticky="e", padx=(0, 6), pady=10)

        self.lbl_status = ctk.CTkLabel(bar, text="Status: —", anchor="e")
        self.lbl_status.grid(row=0, column=3, sticky="e", padx=12, pady=10)

    def _build_search(self) -> None:
        box = ctk.CTkFrame(self, corner_radius=10)
        box.grid(row=2, column=0, sticky="ew", padx=12, pady=(6, 6))
        box.grid_columnconfigure(1, weight=1)

        ctk.CTkLabel(box, text="Letters:", font=self.font_label).grid(
            row=0, column=0, sticky="w", padx=12, pady=10
        )
        self.entry_query = ctk.CTkEntry(box, placeholder_text="Enter a word or phrase…")
        self.entry_query.grid(row=0, column=1, columnspan=4, sticky="ew", padx=(6, 12), pady=10)
        self.entry_query.bind("<Return>", lambda _ev: self._run("all"))

        n3, n5 = CFG.SHORTCUT_LENGTHS
        buttons = [
            ("All words", lambda: self._run("all")),
            ("Longest word", lambda: self._run("longest")),
            (f"{n3}-letter words", lambda: self._run("length", n3)),
            (f"{n5}-letter words", lambda: self._run("length", n5)),
        ]
        for col, (text, cmd) in enumerate(buttons, start=1):
            ctk.CTkButton(box, text=text, command=cmd).grid(row=1, column=col, padx=6, pady=(0, 10))

    def _build_results(self) -> None:
        frame = ctk.CTkFrame(self, corner_radius=10)
        frame.grid(row=3, column=0, sticky="nsew", padx=12, pady=(6, 6))
        frame.grid_columnconfigure(0, weight=1)
        frame.grid_rowconfigure(1, weight=1)

        ctk.CTkLabel(frame, text="Results", font=self.font_label).grid(
            row=0, column=0, sticky="w", padx=12, pady=(10, 2)
        )
        self.txt_results = ctk.CTkTextbox(frame, wrap="word", font=self.font_mono)
        self.txt_results.grid(row=1, column=0, sticky="nsew", padx=12, pady=(0, 12))
        self.txt_results.configure(state="disabled")
        self._set_results("(no results yet — load a dictionary and enter some letters)")

    def _build_log(self) -> None:
        frame = ctk.CTkFrame(self, corner_radius=10)
        frame.grid(row=4, column=0, sticky="nsew", padx=12, pady=(6, 12))
        frame.grid_columnconfigure(0, weight=1)
        frame.grid_rowconfigure(1, weight=1)

        ctk.CTkLabel(frame, text="Event log", font=self.font_label).grid(
            row=0, column=0, sticky="w", padx=12, pady=(10, 2)
        )
        self.txt_log = ctk.CTkTextbox(frame, height=110, wrap="word", font=ctk.CTkFont(size=12))
        self.txt_log.grid(row=1, column=0, sticky="nsew", padx=12, pady=(0, 12))
        self._log("GUI ready. Choose a dictionary file to begin.")

    # --------- loading pipeline (threaded) ---------

    def _choose_file(self) -> None:
        path = fd.askopenfilename(
            title="Choose dictionary file",
            initialdir=str(CFG.DATA_ROOT),
            filetypes=[("Word lists", "*.csv *.txt"), ("All files", "*.*")],
        )
        if not path:
            return
        if self._loading_thread and self._loading_thread.is_alive():
            mb.showinfo("Loading", "A dictionary is already loading. Please wait.")
            return

        self.lbl_source.configure(text=shorten_path(path))
        self._set_status("Loading…")
        self.progress.start()
        self._loading_thread = threading.Thread(target=self._load_worker, args=(path,), daemon=True)
        self._loading_thread.start()

    def _load_worker(self, path: str) -> None:
        try:
            d = self.engine.load(path)
        except OSError as exc:
            self.after(0, lambda e=exc: self._on_load_error(e))
            return
        self.after(0, lambda: self._on_load_ok(len(d)))

    def _on_load_ok(self, n_words: int) -> None:
        self.progress.stop()
        self._set_status(f"Loaded {n_words:,} words.")
        self._log(f"Dictionary ready ({n_words} words, {self.engine.last_elapsed_ms:.2f}ms).")
        self.entry_query.focus_set()

    def _on_load_error(self, exc: Exception) -> None:
        self.progress.stop()
        self._set_status("Error while loading dictionary.")
        self._log(f"ERROR: {exc!r}")
        mb.showerror("Load error", "Failed to load dictionary.\nSee event log for details.")

    # --------- search ---------

    def _run(self, mode: str, n: Optional[int] = None) -> None:
        q = self.engine.set_query(self.entry_query.get())
        if not q:
            self._set_results("")
            return
        try:
            if mode == "longest":
                result = self.engine.find_longest()
            elif mode == "length":
                result = self.engine.find_by_exact_length(n)  # type: ignore[arg-type]
            else:
                result = self.engine.find_all()
        except DictionaryNotLoaded:
            self._set_results("error: please load a dictionary before searching.")
            self._log("Search attempted before dictionary load.")
            return

        self._set_results(format_result(result))
        self._log(f"{mode}({q!r}): {len(result.words)} word(s) in {result.elapsed_ms:.2f}ms")

    # --------- misc UI helpers ---------

    def _set_status(self, text: str) -> None:
        self.lbl_status.configure(text=f"Status: {text}")

    def _set_results(self, text: str) -> None:
        self.txt_results.configure(state="normal")
        self.txt_results.delete("0.0", "end")
        if text:
            self.txt_results.insert("end", text)
        self.txt_results.configure(state="disabled")

    def _log(self, msg: str) -> None:
        self.txt_log.insert("end", msg + "\n")
        self.txt_log.see("end")


if __name__ == "__main__":
    app = AnagramApp()
    app.mainloop()
