from __future__ import annotations
import argparse, json
from spellrank import Engine, UpdateResult
from spellrank.config import TOP_K
from spellrank.DB.storage import build_resources, read_word_counts

def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Suggestion ranking CLI (Engine-backed)")
    g = p.add_mutually_exclusive_group(required=True)
    g.add_argument("--build", metavar="WORDCOUNTS", help="Write resources from a word<TAB>count file")
    g.add_argument("--load", action="store_true", help="Load existing resources")

    p.add_argument("--locale", default="en", help="Locale tag (en, pt_PT)")
    p.add_argument("--resources", default=None, help="Directory holding <locale>.words/.freq")
    p.add_argument("-k", type=int, default=TOP_K, help="Suggestion limit")
    p.add_argument("--weights", nargs="*", type=float, default=None,
                   metavar="W", help="alpha beta insertion substitution omission")
    p.add_argument("--repl", action="store_true", help="Interactive loop after init")
    p.add_argument("--q", default=None, help="Single token to rank once")
    p.add_argument("--json", action="store_true", help="Emit scored candidates as JSON")
    p.add_argument("--verbose", action="store_true")

    args = p.parse_args(argv)

    eng = Engine(resource_root=args.resources, verbose=args.verbose)
    try:
        if args.build:
            words_path, freq_path = eng.registry.paths(args.locale)
            n, top = build_resources(read_word_counts(args.build), str(words_path), str(freq_path))
            print(f"[build] {n} words (max count {top:g}) -> {words_path}, {freq_path}")
            if not (args.q or args.repl):
                return 0

        if args.weights is not None:
            ack = eng.apply_parameters(args.weights)
            print(f"[weights] {ack.value}")
            if ack is not UpdateResult.VALID:
                return 2

        session = eng.create_session(args.locale)

        def run_query(q: str):
            if args.json:
                rows = session.explain(q)[:args.k]
                print(json.dumps([
                    {"text": c.text, "score": c.composite_score, "raw_cost": c.raw_cost,
                     "frequency": c.frequency, "exact": c.is_exact_match, "split": c.is_split}
                    for c in rows
                ], ensure_ascii=False, indent=2))
                return
            rows = session.get_suggestions(q, args.k)
            if not rows:
                print("(no suggestions)"); return
            for i, s in enumerate(rows, 1):
                print(f"{i:<2} {s}")

        if args.q:
            run_query(args.q)

        if args.repl:
            print("Type a word (empty line to exit).")
            while True:
                try:
                    q = input("> ").strip()
                except (EOFError, KeyboardInterrupt):
                    break
                if not q:
                    break
                run_query(q)

        return 0
    finally:
        eng.shutdown()

if __name__ == "__main__":
    raise SystemExit(main())
