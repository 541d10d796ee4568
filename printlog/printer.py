"""Writing text to an output stream."""

from __future__ import annotations

import sys
from typing import TextIO


def print_text(text: str, out: TextIO | None = None) -> None:
    """Write ``text`` to ``out`` (standard output by default), without a newline."""
    stream = sys.stdout if out is None else out
    stream.write(text)