"""A fixed-width progress bar drawn at a given console line."""

from __future__ import annotations

import sys
from typing import TextIO

from temprecycle.messages import Color

BAR_WIDTH = 50


def _parts(progress: int, total: int, label: str) -> tuple[str, int, str]:
    if total == 0:
        raise ValueError("total must be non-zero")
    percent = int(100.0 * progress / total)
    filled = min(max(int(progress / total * BAR_WIDTH), 0), BAR_WIDTH)
    head = label + " [".rjust(8 - len(label))
    tail = f"] {progress}/{total} ({percent}%)     "
    return head, filled, tail


def render_bar(progress: int, total: int, label: str) -> str:
    """Return the uncoloured text of one progress line."""
    head, filled, tail = _parts(progress, total, label)
    return head + "=" * filled + " " * (BAR_WIDTH - filled) + tail


def progress_bar(
    progress: int,
    total: int,
    label: str,
    line_offset: int,
    stream: TextIO | None = None,
) -> None:
    """Draw the bar at row *line_offset* (0-based); a zero total draws nothing."""
    if total == 0:
        return
    out = sys.stdout if stream is None else stream
    head, filled, tail = _parts(progress, total, label)
    out.write(f"\x1b[{line_offset + 1};1H")
    out.write(head)
    out.write(Color.GREEN.ansi + "=" * filled)
    out.write(Color.GREY.ansi + " " * (BAR_WIDTH - filled))
    out.write(tail)
    out.flush()