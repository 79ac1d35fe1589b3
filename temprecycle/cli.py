"""Interactive entry point: scan the TEMP folder and offer to clean it."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from typing import TextIO

from temprecycle.logo import show_logo
from temprecycle.messages import show_error, show_info
from temprecycle.scanner import get_file_and_size

_CLEAR_SCREEN = "\x1b[2J\x1b[H"


def run(
    environ: Mapping[str, str] | None = None,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Run one interactive session; return the process exit status."""
    env = os.environ if environ is None else environ
    inp = sys.stdin if stdin is None else stdin
    out = sys.stdout if stdout is None else stdout

    temp_path = env.get("TEMP")
    if temp_path is None:
        show_error("TEMP is null", out)
        return 1

    show_logo(out)
    out.write("Push (E) to scan. (N) to cancel\n> ")
    out.flush()
    answer = inp.readline().rstrip("\r\n")

    if not answer:
        show_error("No data was entered", out)
        out.write("Push any key to close...\n")
        inp.readline()
        return 1
    if answer in ("E", "e"):
        out.write(_CLEAR_SCREEN)
        get_file_and_size(temp_path, inp, out)
    elif answer in ("N", "n"):
        show_info("Cancel Operation", out)
        out.write("Push any key to close...\n")
        inp.readline()
        return 1
    else:
        show_error("Failed Operation", out)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Clear the screen and start a session on the real console."""
    sys.stdout.write(_CLEAR_SCREEN)
    return run(os.environ, sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())