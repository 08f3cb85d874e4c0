from __future__ import annotations
import argparse, json, time
from typing import Callable, Optional

from . import config as CFG
from .engine import Engine, DictionaryNotLoaded
from .models import MatchResult

InputFn = Callable[[str], str]

NOT_LOADED = "Error: Dictionary not loaded. Please select option 6 first."


def _no_match_message(result: MatchResult) -> str:
    if result.mode == "longest":
        return f"No words found that can be formed from the letters of '{result.query}'."
    if result.mode == "length":
        return f"No {result.length}-letter words found."
    return "No words found."


def _heading(result: MatchResult) -> str:
    if result.mode == "longest":
        return "\nThe largest word found is: "
    if result.mode == "length":
        return f"\nAll {result.length}-letter words found from the letters of '{result.query}':"
    return f"\nWords found from the letters of '{result.query}':"


def print_result(result: MatchResult, *, as_json: bool = False) -> None:
    if as_json:
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
        return
    if result.mode == "longest":
        if result.found:
            print(_heading(result) + result.words[0])
        else:
            print(_no_match_message(result))
        return
    print(_heading(result))
    for w in result.words:
        print(w)
    if not result.found:
        print(_no_match_message(result))


def _report(msg: str, *, as_json: bool = False) -> None:
    # --json keeps stdout parseable, errors included
    print(json.dumps({"error": msg}, ensure_ascii=False) if as_json else msg)


def _load(engine: Engine, *, path: Optional[str] = None, choice: Optional[str] = None, as_json: bool = False) -> bool:
    """Load a dictionary for the CLI; errors are printed, not raised."""
    try:
        d = engine.load(path) if path else engine.select(choice or CFG.DEFAULT_CHOICE)
    except ValueError:
        _report("Invalid choice. The dictionary remains unchanged.", as_json=as_json)
        return False
    except OSError as exc:
        _report(f"Error: Could not open the file {exc.filename or path}", as_json=as_json)
        return False
    if not as_json:
        print(f"\nLoaded {len(d)} words from {d.source}.")
    return True


def run_query(engine: Engine, mode: str, n: Optional[int] = None, *, as_json: bool = False) -> None:
    if mode == "longest":
        result = engine.find_longest()
    elif mode == "length":
        result = engine.find_by_exact_length(n)  # type: ignore[arg-type]
    else:
        result = engine.find_all()
    print_result(result, as_json=as_json)


# ---------- interactive menu ----------

def _print_menu(engine: Engine) -> None:
    n3, n5 = CFG.SHORTCUT_LENGTHS
    print("\n--- Anagram Solver ---")
    print(f"\t1. Enter a word or phrase (current word/phrase is: {engine.query})")
    print("\t2. Find all possible words from these letters.")
    print("\t3. Find the largest word containing (most of) these letters.")
    print(f"\t4. Find all possible {n3} letter words.")
    print(f"\t5. Find all possible {n5} letter words.")
    print(f"\t6. Select a dictionary file (current: {engine.source})\n")
    print("\t0. Quit the program.\n")
    print(f"\tTime taken to complete the last function was: {engine.last_elapsed_ms:.2f}ms\n")


def _select_dictionary(engine: Engine, input_fn: InputFn) -> None:
    print("\n--- Select a Dictionary ---")
    for key, name in CFG.DICTIONARY_FILES.items():
        print(f"\t{key}. {name} ({CFG.DICTIONARY_LABELS[key]})")
    choice = input_fn("Enter a number (1-3) to select a file: ").strip()
    _load(engine, choice=choice)


def _confirm_quit(input_fn: InputFn) -> bool:
    print("\nAre you sure (Y/N)?")
    answer = input_fn("").strip()
    return answer in ("Y", "y", "Yes")


def run_menu(engine: Engine, input_fn: InputFn = input) -> int:
    """Menu loop; returns when the user confirms quit or input hits EOF."""
    n3, n5 = CFG.SHORTCUT_LENGTHS
    while True:
        _print_menu(engine)
        try:
            option = input_fn("Please enter a valid option (0-6): ").strip()
            t0 = time.perf_counter()
            if option == "1":
                q = engine.set_query(input_fn("\nPlease enter a word/phrase: "))
                print(f"You have entered: {q} as your current word.\n")
            elif option in ("2", "3", "4", "5"):
                try:
                    if option == "2":
                        run_query(engine, "all")
                    elif option == "3":
                        run_query(engine, "longest")
                    else:
                        run_query(engine, "length", n3 if option == "4" else n5)
                except DictionaryNotLoaded:
                    print(NOT_LOADED)
            elif option == "6":
                _select_dictionary(engine, input_fn)
            elif option == "0":
                if _confirm_quit(input_fn):
                    return 0
            else:
                print(f"\n\nUnfortunately, {option} is not a valid option, please try again.\n")
        except EOFError:
            print()
            return 0
        engine.last_elapsed_ms = (time.perf_counter() - t0) * 1000.0


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Anagram solver: words you can spell from a subset of some letters")
    src = p.add_mutually_exclusive_group()
    src.add_argument("--dict", default=None, help="Word list file (one word per line)")
    src.add_argument("--choice", choices=sorted(CFG.DICTIONARY_FILES), default=None,
                     help="Bundled dictionary: 1=100, 2=1K, 3=75K words")
    p.add_argument("--q", default=None, help="Run a single query and exit")
    p.add_argument("--mode", choices=["all", "longest", "length"], default="all")
    p.add_argument("-n", type=int, default=None, help="Word length for --mode length")
    p.add_argument("--json", action="store_true", help="Emit the result as JSON")
    p.add_argument("--menu", action="store_true", help="Interactive menu (default when --q is absent)")
    p.add_argument("--verbose", action="store_true")

    args = p.parse_args(argv)
    if args.mode == "length" and args.n is None:
        p.error("--mode length requires -n")

    eng = Engine(verbose=args.verbose)
    loaded = _load(eng, path=args.dict, choice=args.choice, as_json=args.json)

    if args.q is not None:
        eng.set_query(args.q)
        if not loaded:
            return 1
        try:
            run_query(eng, args.mode, args.n, as_json=args.json)
        except DictionaryNotLoaded:
            _report(NOT_LOADED, as_json=args.json)
            return 1
        if not args.menu:
            return 0

    return run_menu(eng)


if __name__ == "__main__":
    raise SystemExit(main())
