from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import fields, is_dataclass

from .api import parse_file
from .config import DEFAULT_MAX_DEPTH, ParseOptions
from .errors import JsonError
from .format import format_json


def _to_jsonable(obj):
    if is_dataclass(obj):
        out = {"type": type(obj).__name__}
        out.update({f.name: _to_jsonable(getattr(obj, f.name)) for f in fields(obj)})
        return out
    if isinstance(obj, (list, tuple)):
        return [_to_jsonable(x) for x in obj]
    return obj


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="spanjson", description="Parse and check JSON files")
    ap.add_argument("files", nargs="+", help="JSON files to parse")
    out = ap.add_mutually_exclusive_group()
    out.add_argument("--format", action="store_true", help="Print the compact serialization")
    out.add_argument("--indent", type=int, default=None, help="Pretty print with N spaces")
    out.add_argument("--ast", action="store_true", help="Print the located AST as JSON")
    ap.add_argument(
        "--max-depth",
        type=int,
        default=DEFAULT_MAX_DEPTH,
        help=f"Maximum object/array nesting (default: {DEFAULT_MAX_DEPTH})",
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        options = ParseOptions(max_depth=args.max_depth)
    except ValueError as e:
        ap.error(str(e))

    status = 0
    for path in args.files:
        try:
            tree = parse_file(path, options=options)
        except JsonError as e:
            print(str(e), file=sys.stderr)
            status = 1
            continue
        except UnicodeDecodeError as e:
            print(f"{path}: not valid UTF-8 ({e.reason})", file=sys.stderr)
            status = 1
            continue
        except OSError as e:
            print(f"{path}: {e.strerror or e}", file=sys.stderr)
            status = 1
            continue

        if args.ast:
            print(json.dumps(_to_jsonable(tree), indent=2))
        elif args.format or args.indent is not None:
            try:
                print(format_json(tree, indent=args.indent))
            except ValueError as e:
                print(f"{path}: {e}", file=sys.stderr)
                status = 1
        else:
            print(f"{path}: ok")
    return status
