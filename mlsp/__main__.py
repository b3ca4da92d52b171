"""Command-line entry point: ``python -m mlsp FILE`` or ``mlsp FILE``."""

import argparse
import logging
import sys

from mlsp import config
from mlsp.errors import MlspError
from mlsp.interpreter import run
from mlsp.types.value import debug_repr

logger = logging.getLogger("mlsp")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="mlsp", description="Run an mlsp source file.")
    parser.add_argument("file", help="UTF-8 source file to interpret and run")
    parser.add_argument("--results", action="store_true",
                        help="print the value of every top-level form after the run")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(format="%(name)s: %(levelname)s: %(message)s")
    logger.setLevel(logging.DEBUG if args.verbose else config.get_log_level())

    limit = config.get_recursion_limit()
    if limit is not None:
        sys.setrecursionlimit(limit)

    try:
        with open(args.file, encoding="utf-8") as f:
            source = f.read()
    except (OSError, UnicodeDecodeError) as e:
        print(f"mlsp: cannot read {args.file}: {e}", file=sys.stderr)
        return 1

    try:
        results = run(source)
    except MlspError as e:
        print(f"mlsp: {type(e).__name__}: {e}", file=sys.stderr)
        return 1
    except RecursionError:
        print("mlsp: program nested too deeply, raise MLSP_RECURSION_LIMIT", file=sys.stderr)
        return 1

    if args.results:
        for value in results:
            print(debug_repr(value))
    return 0


if __name__ == "__main__":
    sys.exit(main())
