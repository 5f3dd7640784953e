from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .api import RunOptions, compile_string, run_string
from .errors import BFTreeError
from .evaluator import BoundsPolicy
from .optimizer import emit


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="bftree",
        description="Brainfuck interpreter with a 64-cell tape.",
    )
    parser.add_argument("path", help="Brainfuck source file")
    parser.add_argument("--no-optimize", action="store_true", help="Run the program exactly as parsed")
    parser.add_argument(
        "--bounds",
        choices=[p.value for p in BoundsPolicy],
        default=BoundsPolicy.ERROR.value,
        help="Pointer policy at the tape edges (default: error)",
    )
    parser.add_argument("--emit", action="store_true", help="Print the optimized program instead of running it")
    parser.add_argument("--dump", action="store_true", help="Print the final tape to stderr")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log pipeline details to stderr")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    options = RunOptions(optimize=not args.no_optimize, bounds=BoundsPolicy(args.bounds))

    try:
        with open(args.path, encoding="utf-8") as f:
            code = f.read()
    except OSError as e:
        print(f"Couldn't read {args.path}: {e}", file=sys.stderr)
        return 1

    stdout = sys.stdout.buffer
    try:
        if args.emit:
            stdout.write((emit(compile_string(code, options=options)) + "\n").encode())
            return 0
        result = run_string(code, sys.stdin.buffer, stdout, options=options)
    except BFTreeError as e:
        print(e, file=sys.stderr)
        return 1
    finally:
        stdout.flush()

    if args.dump:
        cells = list(result.tape)
        rows = [" ".join(f"{b:3d}" for b in cells[i:i + 8]) for i in range(0, len(cells), 8)]
        print(f"ptr={result.ptr}", file=sys.stderr)
        print("\n".join(rows), file=sys.stderr)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
