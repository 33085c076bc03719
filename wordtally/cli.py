"""Command line entry point: count words in files and directories."""

from __future__ import annotations

import os
import stat
import sys

from .counter import WordCounter, format_counts
from .processor import process_directory, process_file


def main(argv: list[str] | None = None) -> int:
    """Count words in the given paths and print them most frequent first."""
    args = sys.argv[1:] if argv is None else list(argv)

    if not args:
        sys.stdout.write("No Arguments Passed\n")
        return 0

    counter = WordCounter()
    for arg in args:
        try:
            mode = os.stat(arg).st_mode
        except OSError as exc:
            print(f"{arg}: {exc.strerror or exc}", file=sys.stderr)
            sys.stdout.write("-1")
            continue
        try:
            if stat.S_ISREG(mode):
                process_file(arg, counter)
            elif stat.S_ISDIR(mode):
                process_directory(arg, counter)
        except OSError as exc:
            print(f"{exc.filename or arg}: {exc.strerror or exc}", file=sys.stderr)
            return 1

    sys.stdout.write(format_counts(counter.drain()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())