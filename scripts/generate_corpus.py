from __future__ import annotations

import argparse
import sys
from pathlib import Path

from spanjson import JsonError, parse_file
from spanjson.testing import generate_corpus_files


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="generate_corpus", description="Write a seeded JSON corpus to disk")
    ap.add_argument("--seed", type=int, default=1)
    ap.add_argument("--count", type=int, default=1000)
    ap.add_argument("--out", default="tests/fixtures/generated_corpus")
    ap.add_argument("--check", action="store_true", help="Parse every written file back")
    args = ap.parse_args(argv)

    out_dir = Path(args.out).resolve() / f"seed_{args.seed}_count_{args.count}"
    out_dir.mkdir(parents=True, exist_ok=True)

    failed = 0
    for rel, src in generate_corpus_files(seed=args.seed, count=args.count):
        p = out_dir / rel
        p.write_text(src, encoding="utf-8", newline="")
        if args.check:
            try:
                parse_file(p)
            except JsonError as e:
                print(str(e), file=sys.stderr)
                failed += 1

    print(str(out_dir))
    return 1 if failed else 0


if __name__ == "__main__":
    raise SystemExit(main())
