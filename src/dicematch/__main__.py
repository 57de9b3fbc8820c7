from __future__ import annotations
import argparse, json, os, sys
from . import config as CFG
from .engine import Engine
from .normalize import normalize


def _supports_color() -> bool:
    return sys.stdout.isatty() and os.environ.get("NO_COLOR", "") == ""

CSI = "\033["
def _c(text: str, code: str) -> str:
    if not _supports_color(): return text
    return f"{CSI}{code}m{text}{CSI}0m"

def _print_table(rows) -> None:
    if not rows:
        print(_c("(no matches)", "2;37")); return
    print(_c("#   Score   Candidate", "1;37"))
    for i, r in enumerate(rows, 1):
        print(f"{i:<3} {r.score:<7.4f} {r.item}")

def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Dice coefficient matcher (adaptive n-grams)")
    p.add_argument("--q", default=None, help="Query string")
    p.add_argument("--against", default=None, help="Print the pairwise score of --q vs this string")
    src = p.add_mutually_exclusive_group()
    src.add_argument("--roots", nargs="+", default=[], help="Files/folders with one candidate per line")
    src.add_argument("--items", nargs="+", default=[], help="Candidates given inline")
    p.add_argument("-k", type=int, default=CFG.TOP_N, help="Top-N results (0 = all)")
    p.add_argument("--cutoff", type=float, default=CFG.CUTOFF, help="Minimum score, inclusive")
    p.add_argument("--all", action="store_true", help="Unranked: score every candidate in input order")
    p.add_argument("--repl", action="store_true", help="Interactive loop after loading")
    p.add_argument("--json", action="store_true", help="Emit JSON rows")
    p.add_argument("--echo", action="store_true", help="Echo normalized query as [query] '...'")
    p.add_argument("--verbose", action="store_true")
    args = p.parse_args(argv)

    if args.k < 0:
        p.error("-k must be >= 0")
    if not 0.0 <= args.cutoff <= 1.0:
        p.error("--cutoff must be in [0, 1]")

    eng = Engine()
    if args.against is not None:
        if args.q is None:
            p.error("--against requires --q")
        score = eng.similarity(args.q, args.against)
        if args.json:
            print(json.dumps({"a": args.q, "b": args.against, "score": score}, ensure_ascii=False))
        else:
            print(f"{score:.6f}")
        return 0

    if not args.roots and not args.items:
        p.error("one of --roots or --items is required (or use --against)")

    try:
        if args.roots:
            eng.load(args.roots, verbose=args.verbose or CFG.VERBOSE)
        else:
            eng.add(args.items)

        def run_query(q: str) -> None:
            if args.echo:
                print(f"[query] {normalize(q)!r}")
            if args.all:
                rows = eng.score(q)
            else:
                rows = eng.match(q, top_n=args.k, cutoff=args.cutoff)
            if args.json:
                print(json.dumps([r.to_dict() for r in rows], ensure_ascii=False, indent=2))
            else:
                _print_table(rows)

        if args.q is not None:
            run_query(args.q)

        if args.repl:
            print(f"Type a query (empty line to exit).  [{eng.count()} candidates]")
            while True:
                try:
                    q = input("> ")
                except (EOFError, KeyboardInterrupt):
                    print(); break
                if not q.strip():
                    break
                run_query(q)

        return 0
    finally:
        eng.shutdown()

if __name__ == "__main__":
    raise SystemExit(main())
