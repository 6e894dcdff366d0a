"""Plain display of comma-separated files, one field per cell."""

from __future__ import annotations

from os import PathLike


def _fields(line: str) -> list[str]:
    parts = line.split(",")
    if parts[-1] == "":
        parts.pop()
    return parts


def format_csv_line(line: str) -> str:
    """Render a line as its comma-separated values, each followed by ' | '."""
    return "".join(f"{value} | " for value in _fields(line))


def read_csv(filename: str | PathLike[str]) -> list[str]:
    """Return every line of the file rendered by format_csv_line."""
    with open(filename, encoding="utf-8") as handle:
        return [format_csv_line(line.rstrip("\n")) for line in handle]