"""The start-up logo."""

from __future__ import annotations

import sys
from typing import TextIO

from temprecycle.messages import Color, set_color

_LOGO = r"""
                        ______________________
                   ____|______________________|____
                  |________________________________|
                    |   |     |      |     |   |
                    |   |     |      |     |   |
                    |   |     |      |     |   |
                    |   |     |      |     |   |
                    |   |     |      |     |   |
                    |___|_____|______|_____|___|
"""

_BANNER = """
                         T E M P R E C Y C L E
"""


def show_logo(stream: TextIO | None = None) -> None:
    """Print the logo and banner in cyan, then restore grey text."""
    out = sys.stdout if stream is None else stream
    set_color(Color.CYAN, out)
    out.write(_LOGO)
    out.write(_BANNER)
    set_color(Color.GREY, out)