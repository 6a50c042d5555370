"""Command line: print the operations that sort the given integers."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from pushswap.parsing import (
    InputError,
    check_duplicate,
    check_input,
    coordinate_compression,
)
from pushswap.solver import push_swap


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Sort the integers in argv and print each operation on its own line.

    Invalid input prints "Error" to standard error and returns 1.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        tokens = check_input(args)
        ranks = coordinate_compression(tokens)
        if check_duplicate(ranks):
            raise InputError()
    except InputError:
        sys.stderr.write("Error\n")
        return 1
    push_swap(ranks, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())