"""Small usage examples of the printer."""

from __future__ import annotations

import os

from printlog.printer import print_text


def example1() -> None:
    """Print a greeting to standard output."""
    print_text("hello")


def example2(path: str | os.PathLike[str] = "log.txt") -> None:
    """Write a greeting to ``path``, replacing its contents."""
    with open(path, "w") as file:
        print_text("hello", file)