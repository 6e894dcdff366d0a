"""Console presentation helpers: banners, page titles and the numbered menu."""

from __future__ import annotations

import re
import sys
from collections.abc import Callable, Sequence

BORDER_THICK = "======================== \n"
BORDER_THIN = "------------------------ \n"

_BACK_PAGES = frozenset({"Kembali", "Keluar"})
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class InvalidChoiceError(ValueError):
    """Raised when a menu answer is not one of the offered pages."""


def banner(text: str) -> str:
    """Return the application name framed by thick borders."""
    return f"{BORDER_THICK}{text}\n\n{BORDER_THICK}"


def title(text: str) -> str:
    """Return a page title framed by thin borders."""
    return f"{BORDER_THIN}{text}\n\n{BORDER_THIN}"


def menu_lines(pages: Sequence[str]) -> list[str]:
    """Return one numbered line per page; back/exit pages are numbered 0."""
    return [
        f"[0] {page}" if page in _BACK_PAGES else f"[{number}] {page}"
        for number, page in enumerate(pages, start=1)
    ]


def parse_choice(pages: Sequence[str], answer: str) -> int:
    """Turn a typed answer into a page number between 0 and len(pages)."""
    match = _LEADING_INT.match(answer)
    if match is None:
        raise InvalidChoiceError(f"not a number: {answer!r}")
    choice = int(match.group(1))
    if not 0 <= choice <= len(pages):
        raise InvalidChoiceError(f"choice out of range: {choice}")
    return choice


def nav(
    pages: Sequence[str],
    read: Callable[[], str] = input,
    write: Callable[[str], object] = sys.stdout.write,
) -> int:
    """Show the menu, read an answer and return the chosen page number."""
    for line in menu_lines(pages):
        write(line + "\n")
    write(BORDER_THIN)
    write("Navigasi ke halaman: ")
    try:
        choice = parse_choice(pages, read())
    except InvalidChoiceError:
        write("Pilihan tidak valid\n")
        raise
    write("\n")
    return choice