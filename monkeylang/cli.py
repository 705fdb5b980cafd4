"""Command-line entry point: greets the user and starts the REPL."""

from __future__ import annotations

import getpass
import sys
from typing import Optional, Sequence

from monkeylang.repl import start


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Greet the current user and run the REPL on standard input and output."""
    username = getpass.getuser()
    sys.stdout.write(f"Hello {username}! This is the Monkey programming language!\n")
    sys.stdout.write("Feel free to type in commands\n")
    start(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())