"""Command line entry point: check one map file."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from solong.board import check_map
from solong.chars import put_endl
from solong.fmt import printf
from solong.model import MapError


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Check the map named by the single argument and return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        put_endl("Invalid number of arguments", sys.stderr)
        return 1
    try:
        check_map(args[0])
    except ValueError as exc:
        printf("%s\n", str(exc))
        return 1
    except MapError as exc:
        put_endl(str(exc), sys.stderr)
    except OSError as exc:
        put_endl(exc.strerror or str(exc), sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())