from __future__ import annotations
import argparse, json, os, sys
from typing import List

from . import config as CFG
from .engine import Engine
from .models import MatchOutcome
from .tables.double_pinyin import SCHEMES


def _supports_color() -> bool:
    return sys.stdout.isatty() and os.environ.get("NO_COLOR", "") == ""

CSI = "\033["
def _c(text: str, code: str) -> str:
    if not _supports_color(): return text
    return f"{CSI}{code}m{text}{CSI}0m"


def highlight(text: str, ranges, color: bool = False) -> str:
    """Wrap each matched range in brackets, or bold cyan when `color`."""
    out, pos = [], 0
    for start, end in ranges:
        out.append(text[pos:start])
        seg = text[start:end + 1]
        out.append(f"{CSI}1;36m{seg}{CSI}0m" if color else f"[{seg}]")
        pos = end + 1
    out.append(text[pos:])
    return "".join(out)


def _fmt_score(s: float) -> str:
    return "max" if s == float("inf") else f"{s:.2f}"


def _print_table(rows: List[MatchOutcome]) -> None:
    if not rows:
        print(_c("(no matches)", "2;37")); return
    print(_c("#   Score   Match", "1;37"))
    for i, r in enumerate(rows, 1):
        print(f"{i:<3} {_fmt_score(r.score):<7} {highlight(r.display, r.ranges, _supports_color())}")


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Fuzzy pinyin search (Engine-backed)")
    src = p.add_mutually_exclusive_group(required=True)
    src.add_argument("--roots", nargs="+", help="Folders to scan for notes/files")
    src.add_argument("--names", nargs="+", help="Plain names to search (tags, commands)")
    p.add_argument("--folders", action="store_true", help="Index folders instead of files")
    p.add_argument("--scheme", choices=sorted(SCHEMES), default=None, help="Double pinyin scheme")
    p.add_argument("--table", default=None, help="pypinyin:// (default) or json:///path/to/dict.json")
    p.add_argument("--path-search", action="store_true", help="Fall back to matching full paths")
    p.add_argument("--all-files", action="store_true", help="Index every file type")
    p.add_argument("-k", type=int, default=CFG.TOP_K, help="Top-K results")
    p.add_argument("--q", default=None, help="Single query to run once")
    p.add_argument("--repl", action="store_true", help="Interactive incremental loop")
    p.add_argument("--json", action="store_true", help="Emit JSON rows")
    p.add_argument("--verbose", action="store_true")
    args = p.parse_args(argv)
    if args.k < 1:
        p.error("-k must be at least 1")

    if args.table:
        CFG.TABLE_SOURCE = args.table

    eng = Engine()
    try:
        try:
            if args.roots:
                eng.build_files(args.roots, folders=args.folders, scheme=args.scheme,
                                path_search=args.path_search,
                                show_all_file_types=True if args.all_files else None,
                                verbose=args.verbose)
            else:
                eng.build_names(args.names, id="name", scheme=args.scheme, verbose=args.verbose)
        except (ValueError, FileNotFoundError) as e:
            p.error(str(e))

        def run_query(q: str) -> None:
            rows = eng.complete(q, top_k=args.k)
            if args.json:
                print(json.dumps([r.to_dict() for r in rows], ensure_ascii=False, indent=2))
            else:
                _print_table(rows)

        if args.q is not None:
            run_query(args.q)

        if args.repl:
            # Each line is appended to the query, like typing into a search box.
            print("Type to extend the query (empty line to exit).  ':bs' deletes a character, '#' clears.")
            buffer = ""
            while True:
                try:
                    raw = input(f"{buffer}> ")
                except (EOFError, KeyboardInterrupt):
                    print(); break
                if raw == "":
                    break
                if raw.strip() == "#":
                    buffer = ""
                elif raw.strip() == ":bs":
                    buffer = buffer[:-1]
                else:
                    buffer += raw
                run_query(buffer)
        return 0
    finally:
        eng.shutdown()


if __name__ == "__main__":
    sys.exit(main())
